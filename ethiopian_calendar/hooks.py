from . import __version__

app_name = "ethiopian_calendar"
app_title = "Ethiopian Calendar"
app_publisher = "Ethiopian Calendar Contributors"
app_description = "Gregorian and Ethiopian calendar conversion for Frappe sites and plain Python."
app_email = "support@example.com"
app_license = "MIT"
app_version = __version__

# Boot
boot_session = "ethiopian_calendar.boot.boot_session"

# Jinja (print formats, web templates)
jinja = {
    "methods": [
        "ethiopian_calendar.api.functions.to_ethiopian_date",
        "ethiopian_calendar.api.functions.from_ethiopian_date",
        "ethiopian_calendar.api.preferences.display_date",
    ],
}

# Fixtures / Data
fixtures = []
