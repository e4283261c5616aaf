"""USB HID usage pages as IntEnums, decoded from raw 16-bit usage IDs."""

__version__ = "0.1.0"