"""Auxiliary Display page (0x14): simple alphanumeric and bitmap displays."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from hidusages.usage import Reserved, resolve


class AuxiliaryDisplayUsage(IntEnum):
    """Named usages of the Auxiliary Display page."""

    UNDEFINED = 0x00
    ALPHANUMERIC_DISPLAY = 0x01
    AUXILIARY_DISPLAY = 0x02
    DISPLAY_ATTRIBUTES_REPORT = 0x20
    ASCII_CHARACTER_SET = 0x21
    DATA_READ_BACK = 0x22
    FONT_READ_BACK = 0x23
    DISPLAY_CONTROL_REPORT = 0x24
    CLEAR_DISPLAY = 0x25
    DISPLAY_ENABLE = 0x26
    SCREEN_SAVER_DELAY = 0x27
    SCREEN_SAVER_ENABLE = 0x28
    VERTICAL_SCROLL = 0x29
    HORIZONTAL_SCROLL = 0x2A
    CHARACTER_REPORT = 0x2B
    DISPLAY_DATA = 0x2C
    DISPLAY_STATUS = 0x2D
    STAT_NOT_READY = 0x2E
    STAT_READY = 0x2F
    ERR_NOT_A_LOADABLE_CHARACTER = 0x30
    ERR_FONT_DATA_CANNOT_BE_READ = 0x31
    CURSOR_POSITION_REPORT = 0x32
    ROW = 0x33
    COLUMN = 0x34
    ROWS = 0x35
    COLUMNS = 0x36
    CURSOR_PIXEL_POSITIONING = 0x37
    CURSOR_MODE = 0x38
    CURSOR_ENABLE = 0x39
    CURSOR_BLINK = 0x3A
    FONT_REPORT = 0x3B
    FONT_DATA = 0x3C
    CHARACTER_WIDTH = 0x3D
    CHARACTER_HEIGHT = 0x3E
    CHARACTER_SPACING_HORIZONTAL = 0x3F
    CHARACTER_SPACING_VERTICAL = 0x40
    UNICODE_CHARACTER_SET = 0x41
    FONT_7_SEGMENT = 0x42
    SEVEN_SEGMENT_DIRECT_MAP = 0x43
    FONT_14_SEGMENT = 0x44
    FOURTEEN_SEGMENT_DIRECT_MAP = 0x45
    DISPLAY_BRIGHTNESS = 0x46
    DISPLAY_CONTRAST = 0x47
    CHARACTER_ATTRIBUTE = 0x48
    ATTRIBUTE_READBACK = 0x49
    ATTRIBUTE_DATA = 0x4A
    CHAR_ATTR_ENHANCE = 0x4B
    CHAR_ATTR_UNDERLINE = 0x4C
    CHAR_ATTR_BLINK = 0x4D
    BITMAP_SIZE_X = 0x80
    BITMAP_SIZE_Y = 0x81
    MAX_BLIT_SIZE = 0x82
    BIT_DEPTH_FORMAT = 0x83
    DISPLAY_ORIENTATION = 0x84
    PALETTE_REPORT = 0x85
    PALETTE_DATA_SIZE = 0x86
    PALETTE_DATA_OFFSET = 0x87
    PALETTE_DATA = 0x88
    BLIT_REPORT = 0x8A
    BLIT_RECTANGLE_X1 = 0x8B
    BLIT_RECTANGLE_Y1 = 0x8C
    BLIT_RECTANGLE_X2 = 0x8D
    BLIT_RECTANGLE_Y2 = 0x8E
    BLIT_DATA = 0x8F
    SOFT_BUTTON = 0x90
    SOFT_BUTTON_ID = 0x91
    SOFT_BUTTON_SIDE = 0x92
    SOFT_BUTTON_OFFSET_1 = 0x93
    SOFT_BUTTON_OFFSET_2 = 0x94
    SOFT_BUTTON_REPORT = 0x95
    SOFT_KEYS = 0xC2
    DISPLAY_DATA_EXTENSIONS = 0xCC
    CHARACTER_MAPPING = 0xCF
    UNICODE_EQUIVALENT = 0xDD
    CHARACTER_PAGE_MAPPING = 0xDF
    REQUEST_REPORT = 0xFF

    @classmethod
    def from_value(cls, value: object) -> Union["AuxiliaryDisplayUsage", Reserved]:
        """Decode a usage ID; out-of-range integers decode as ID 0."""
        return resolve(cls, _RESERVED_RANGES, value)


_RESERVED_RANGES = {
    "RESERVED_03_1F": range(0x03, 0x20),
    "RESERVED_4E_7F": range(0x4E, 0x80),
    "RESERVED_89": range(0x89, 0x8A),
    "RESERVED_96_C1": range(0x96, 0xC2),
    "RESERVED_C3_CB": range(0xC3, 0xCC),
    "RESERVED_CD_CE": range(0xCD, 0xCF),
    "RESERVED_D0_DC": range(0xD0, 0xDD),
    "RESERVED_DE": range(0xDE, 0xDF),
    "RESERVED_E0_FE": range(0xE0, 0xFF),
    "RESERVED_100_FFFF": range(0x100, 0x10000),
}