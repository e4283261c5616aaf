[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hidusages"
version = "0.1.0"
description = "USB HID usage tables as Python enumerations, with lookup from raw usage IDs"
requires-python = ">=3.10"
dependencies = []
keywords = ["usb", "hid", "usage", "usage-page", "keyboard", "descriptor"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Hardware :: Universal Serial Bus (USB) :: Human Interface Device (HID)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hidusages"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
