"""Digitizers page (0x0D): pens, touch screens, touch pads and their data."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from hidusages.usage import Reserved, resolve


class DigitizersUsage(IntEnum):
    """Named usages of the Digitizers page."""

    UNDEFINED = 0x00
    DIGITIZER = 0x01
    PEN = 0x02
    LIGHT_PEN = 0x03
    TOUCH_SCREEN = 0x04
    TOUCH_PAD = 0x05
    WHITEBOARD = 0x06
    COORDINATE_MEASURING_MACHINE = 0x07
    THREE_D_DIGITIZER = 0x08
    STEREO_PLOTTER = 0x09
    ARTICULATED_ARM = 0x0A
    ARMATURE = 0x0B
    MULTIPLE_POINT_DIGITIZER = 0x0C
    FREE_SPACE_WAND = 0x0D
    DEVICE_CONFIGURATION = 0x0E
    CAPACITIVE_HEAT_MAP_DIGITIZER = 0x0F
    STYLUS = 0x20
    PUCK = 0x21
    FINGER = 0x22
    DEVICE_SETTINGS = 0x23
    CHARACTER_GESTURE = 0x24
    TIP_PRESSURE = 0x30
    BARREL_PRESSURE = 0x31
    IN_RANGE = 0x32
    TOUCH = 0x33
    UNTOUCH = 0x34
    TAP = 0x35
    QUALITY = 0x36
    DATA_VALID = 0x37
    TRANSDUCER_INDEX = 0x38
    TABLET_FUNCTION_KEYS = 0x39
    PROGRAM_CHANGE_KEYS = 0x3A
    BATTERY_STRENGTH = 0x3B
    INVERT = 0x3C
    X_TILT = 0x3D
    Y_TILT = 0x3E
    AZIMUTH = 0x3F
    ALTITUDE = 0x40
    TWIST = 0x41
    TIP_SWITCH = 0x42
    SECONDARY_TIP_SWITCH = 0x43
    BARREL_SWITCH = 0x44
    ERASER = 0x45
    TABLET_PICK = 0x46
    TOUCH_VALID = 0x47
    WIDTH = 0x48
    HEIGHT = 0x49
    CONTACT_IDENTIFIER = 0x51
    DEVICE_MODE = 0x52
    DEVICE_IDENTIFIER = 0x53
    CONTACT_COUNT = 0x54
    CONTACT_COUNT_MAXIMUM = 0x55
    SCAN_TIME = 0x56
    SURFACE_SWITCH = 0x57
    BUTTON_SWITCH = 0x58
    PAD_TYPE = 0x59
    SECONDARY_BARREL_SWITCH = 0x5A
    TRANSDUCER_SERIAL_NUMBER = 0x5B
    PREFERRED_COLOR = 0x5C
    PREFERRED_COLOR_IS_LOCKED = 0x5D
    PREFERRED_LINE_WIDTH = 0x5E
    PREFERRED_LINE_WIDTH_IS_LOCKED = 0x5F
    LATENCY_MODE = 0x60
    GESTURE_CHARACTER_QUALITY = 0x61
    CHARACTER_GESTURE_DATA_LENGTH = 0x62
    CHARACTER_GESTURE_DATA = 0x63
    GESTURE_CHARACTER_ENCODING = 0x64
    UTF8_CHARACTER_GESTURE_ENCODING = 0x65
    UTF16_LITTLE_ENDIAN_CHARACTER_GESTURE_ENCODING = 0x66
    UTF16_BIG_ENDIAN_CHARACTER_GESTURE_ENCODING = 0x67
    UTF32_LITTLE_ENDIAN_CHARACTER_GESTURE_ENCODING = 0x68
    UTF32_BIG_ENDIAN_CHARACTER_GESTURE_ENCODING = 0x69
    CAPACITIVE_HEAT_MAP_PROTOCOL_VENDOR_ID = 0x6A
    CAPACITIVE_HEAT_MAP_PROTOCOL_VERSION = 0x6B
    CAPACITIVE_HEAT_MAP_FRAME_DATA = 0x6C
    GESTURE_CHARACTER_ENABLE = 0x6D
    TRANSDUCER_SERIAL_NUMBER_PART_2 = 0x6E
    NO_PREFERRED_COLOR = 0x6F
    PREFERRED_LINE_STYLE = 0x70
    PREFERRED_LINE_STYLE_IS_LOCKED = 0x71
    INK = 0x72
    PENCIL = 0x73
    HIGHLIGHTER = 0x74
    CHISEL_MARKER = 0x75
    BRUSH = 0x76
    NO_PREFERENCE = 0x77
    DIGITIZER_DIAGNOSTIC = 0x80
    DIGITIZER_ERROR = 0x81
    ERR_NORMAL_STATUS = 0x82
    ERR_TRANSDUCERS_EXCEEDED = 0x83
    ERR_FULL_TRANS_FEATURES_UNAVAILABLE = 0x84
    ERR_CHARGE_LOW = 0x85
    TRANSDUCER_SOFTWARE_INFO = 0x90
    TRANSDUCER_VENDOR_ID = 0x91
    TRANSDUCER_PRODUCT_ID = 0x92
    DEVICE_SUPPORTED_PROTOCOLS = 0x93
    TRANSDUCER_SUPPORTED_PROTOCOLS = 0x94
    NO_PROTOCOL = 0x95
    WACOM_AES_PROTOCOL = 0x96
    USI_PROTOCOL = 0x97
    MICROSOFT_PEN_PROTOCOL = 0x98
    SUPPORTED_REPORT_RATES = 0xA0
    REPORT_RATE = 0xA1
    TRANSDUCER_CONNECTED = 0xA2
    SWITCH_DISABLED = 0xA3
    SWITCH_UNIMPLEMENTED = 0xA4
    TRANSDUCER_SWITCHES = 0xA5
    TRANSDUCER_INDEX_SELECTOR = 0xA6
    BUTTON_PRESS_THRESHOLD = 0xB0

    @classmethod
    def from_value(cls, value: object) -> Union["DigitizersUsage", Reserved]:
        """Decode a usage ID; out-of-range integers decode as ID 0."""
        return resolve(cls, _RESERVED_RANGES, value)


_RESERVED_RANGES = {
    "RESERVED_10_1F": range(0x10, 0x20),
    "RESERVED_25_2F": range(0x25, 0x30),
    "RESERVED_4A_50": range(0x4A, 0x51),
    "RESERVED_78_7F": range(0x78, 0x80),
    "RESERVED_86_8F": range(0x86, 0x90),
    "RESERVED_99_9F": range(0x99, 0xA0),
    "RESERVED_A7_AF": range(0xA7, 0xB0),
    "RESERVED_B1_FFFF": range(0xB1, 0x10000),
}