import importlib
from datetime import datetime
from types import SimpleNamespace

from ethiopian_calendar import boot, hooks
from ethiopian_calendar.api import clock


def reload_preferences():
    module = importlib.import_module("ethiopian_calendar.api.preferences")
    return importlib.reload(module)


def test_boot_session_populates_dict_payload():
    reload_preferences()
    bootinfo = {}
    with clock.pinned_clock(datetime(2024, 1, 1, 8)):
        boot.boot_session(bootinfo)
    context = bootinfo["ethiopian_calendar"]
    assert context["calendar"] == "ethiopian"
    assert context["scope"] == "default"
    assert context["today"] == "2016-04-23"
    assert context["version"] == "1.1.0"


def test_boot_session_sets_attribute_on_objects():
    preferences = reload_preferences()
    preferences.choose_calendar("gregorian", site=True)
    bootinfo = SimpleNamespace()
    with clock.pinned_clock(datetime(2023, 9, 11)):
        boot.boot_session(bootinfo)
    assert bootinfo.ethiopian_calendar["today"] == "2023-09-11"
    assert bootinfo.ethiopian_calendar["ethiopian_today"] == "2016-01-01"


def test_hook_paths_resolve():
    paths = [hooks.boot_session, *hooks.jinja["methods"]]
    for path in paths:
        module_name, _, attribute = path.rpartition(".")
        module = importlib.import_module(module_name)
        assert callable(getattr(module, attribute))
