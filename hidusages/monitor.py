"""Monitor page (0x80): management and control of system-attached monitors."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from hidusages.usage import Reserved, resolve


class MonitorUsage(IntEnum):
    """Named usages of the Monitor page."""

    UNDEFINED = 0x00
    MONITOR_CONTROL = 0x01
    EDID_INFORMATION = 0x02
    VDIF_INFORMATION = 0x03
    VESA_VERSION = 0x04

    @classmethod
    def from_value(cls, value: object) -> Union["MonitorUsage", Reserved]:
        """Decode a usage ID; out-of-range integers decode as ID 0."""
        return resolve(cls, _RESERVED_RANGES, value)


_RESERVED_RANGES = {
    "RESERVED_05_FFFF": range(0x05, 0x10000),
}