from __future__ import annotations

from pathlib import Path

from setuptools import find_packages, setup

PROJECT_ROOT = Path(__file__).resolve().parent
README = (PROJECT_ROOT / "README.md").read_text(encoding="utf-8")

setup(
    name="ethiopian-calendar-frappe",
    version="1.1.0",
    description="Gregorian and Ethiopian calendar conversion for Frappe and plain Python",
    long_description=README,
    long_description_content_type="text/markdown",
    author="Ethiopian Calendar Contributors",
    author_email="support@example.com",
    url="https://github.com/example/ethiopian-calendar-frappe",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[],
    extras_require={
        "frappe": ["frappe>=14.0.0"],
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.10",
    classifiers=[
        "Framework :: Frappe",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: Amharic",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Office/Business",
    ],
)
