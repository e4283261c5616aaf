"""Lighting and Illumination page (0x59): lamp arrays and their reports."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from hidusages.usage import Reserved, resolve


class LightingAndIlluminationUsage(IntEnum):
    """Named usages of the Lighting and Illumination page."""

    UNDEFINED = 0x00
    LAMP_ARRAY = 0x01
    LAMP_ARRAY_ATTRIBUTES_REPORT = 0x02
    LAMP_COUNT = 0x03
    BOUNDING_BOX_WIDTH_IN_MICROMETERS = 0x04
    BOUNDING_BOX_HEIGHT_IN_MICROMETERS = 0x05
    BOUNDING_BOX_DEPTH_IN_MICROMETERS = 0x06
    LAMP_ARRAY_KIND = 0x07
    MIN_UPDATE_INTERVAL_IN_MICROSECONDS = 0x08
    LAMP_ATTRIBUTES_REQUEST_REPORT = 0x20
    LAMP_ID = 0x21
    LAMP_ATTRIBUTES_RESPONSE_REPORT = 0x22
    POSITION_X_IN_MICROMETERS = 0x23
    POSITION_Y_IN_MICROMETERS = 0x24
    POSITION_Z_IN_MICROMETERS = 0x25
    LAMP_PURPOSES = 0x26
    UPDATE_LATENCY_IN_MICROSECONDS = 0x27
    RED_LEVEL_COUNT = 0x28
    GREEN_LEVEL_COUNT = 0x29
    BLUE_LEVEL_COUNT = 0x2A
    INTENSITY_LEVEL_COUNT = 0x2B
    IS_PROGRAMMABLE = 0x2C
    INPUT_BINDING = 0x2D
    LAMP_MULTI_UPDATE_REPORT = 0x50
    RED_UPDATE_CHANNEL = 0x51
    GREEN_UPDATE_CHANNEL = 0x52
    BLUE_UPDATE_CHANNEL = 0x53
    INTENSITY_UPDATE_CHANNEL = 0x54
    LAMP_UPDATE_FLAGS = 0x55
    LAMP_RANGE_UPDATE_REPORT = 0x60
    LAMP_ID_START = 0x61
    LAMP_ID_END = 0x62
    LAMP_ARRAY_CONTROL_REPORT = 0x70
    AUTONOMOUS_MODE = 0x71

    @classmethod
    def from_value(
        cls, value: object
    ) -> Union["LightingAndIlluminationUsage", Reserved]:
        """Decode a usage ID; out-of-range integers decode as ID 0."""
        return resolve(cls, _RESERVED_RANGES, value)


_RESERVED_RANGES = {
    "RESERVED_09_1F": range(0x09, 0x20),
    "RESERVED_2E_4F": range(0x2E, 0x50),
    "RESERVED_56_5F": range(0x56, 0x60),
    "RESERVED_63_6F": range(0x63, 0x70),
    "RESERVED_72_FFFF": range(0x72, 0x10000),
}