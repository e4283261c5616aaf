"""Eye and Head Trackers page (0x12): gaze and head-orientation trackers."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from hidusages.usage import Reserved, resolve


class EyeAndHeadTrackersUsage(IntEnum):
    """Named usages of the Eye and Head Trackers page."""

    UNDEFINED = 0x00
    EYE_TRACKER = 0x01
    HEAD_TRACKER = 0x02
    TRACKING_DATA = 0x10
    CAPABILITIES = 0x11
    CONFIGURATION = 0x12
    STATUS = 0x13
    CONTROL = 0x14
    SENSOR_TIMESTAMP = 0x20
    POSITION_X = 0x21
    POSITION_Y = 0x22
    POSITION_Z = 0x23
    GAZE_POINT = 0x24
    LEFT_EYE_POSITION = 0x25
    RIGHT_EYE_POSITION = 0x26
    HEAD_POSITION = 0x27
    HEAD_DIRECTION_POINT = 0x28
    ROTATION_ABOUT_X_AXIS = 0x29
    ROTATION_ABOUT_Y_AXIS = 0x2A
    ROTATION_ABOUT_Z_AXIS = 0x2B
    TRACKER_QUALITY = 0x100
    MINIMUM_TRACKING_DISTANCE = 0x101
    OPTIMUM_TRACKING_DISTANCE = 0x102
    MAXIMUM_TRACKING_DISTANCE = 0x103
    MAXIMUM_SCREEN_PLANE_WIDTH = 0x104
    MAXIMUM_SCREEN_PLANE_HEIGHT = 0x105
    DISPLAY_MANUFACTURER_ID = 0x200
    DISPLAY_PRODUCT_ID = 0x201
    DISPLAY_SERIAL_NUMBER = 0x202
    DISPLAY_MANUFACTURER_DATE = 0x203
    CALIBRATED_SCREEN_WIDTH = 0x204
    CALIBRATED_SCREEN_HEIGHT = 0x205
    SAMPLING_FREQUENCY = 0x300
    CONFIGURATION_STATUS = 0x301
    DEVICE_MODE_REQUEST = 0x400

    @classmethod
    def from_value(
        cls, value: object
    ) -> Union["EyeAndHeadTrackersUsage", Reserved]:
        """Decode a usage ID; out-of-range integers decode as ID 0."""
        return resolve(cls, _RESERVED_RANGES, value)


_RESERVED_RANGES = {
    "RESERVED_03_0F": range(0x03, 0x10),
    "RESERVED_15_1F": range(0x15, 0x20),
    "RESERVED_2C_FF": range(0x2C, 0x100),
    "RESERVED_106_1FF": range(0x106, 0x200),
    "RESERVED_206_2FF": range(0x206, 0x300),
    "RESERVED_302_3FF": range(0x302, 0x400),
    "RESERVED_401_FFFF": range(0x401, 0x10000),
}