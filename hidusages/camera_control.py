"""Camera Control page (0x90)."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from hidusages.usage import Reserved, resolve


class CameraControlUsage(IntEnum):
    """Named usages of the Camera Control page."""

    UNDEFINED = 0x00
    CAMERA_AUTO_FOCUS = 0x20
    CAMERA_SHUTTER = 0x21

    @classmethod
    def from_value(cls, value: object) -> Union["CameraControlUsage", Reserved]:
        """Decode a usage ID; out-of-range integers decode as ID 0."""
        return resolve(cls, _RESERVED_RANGES, value)


_RESERVED_RANGES = {
    "RESERVED_01_1F": range(0x01, 0x20),
    "RESERVED_22_FFFF": range(0x22, 0x10000),
}