"""Keyboard/Keypad page (0x07): key codes used by USB keyboards."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from hidusages.usage import Reserved, resolve, to_u16


class KeyboardUsage(IntEnum):
    """Named usages of the Keyboard/Keypad page."""

    RESERVED_00 = 0x00
    KEYBOARD_ERROR_ROLL_OVER = 0x01
    KEYBOARD_POST_FAIL = 0x02
    KEYBOARD_ERROR_UNDEFINED = 0x03
    KEYBOARD_A = 0x04
    KEYBOARD_B = 0x05
    KEYBOARD_C = 0x06
    KEYBOARD_D = 0x07
    KEYBOARD_E = 0x08
    KEYBOARD_F = 0x09
    KEYBOARD_G = 0x0A
    KEYBOARD_H = 0x0B
    KEYBOARD_I = 0x0C
    KEYBOARD_J = 0x0D
    KEYBOARD_K = 0x0E
    KEYBOARD_L = 0x0F
    KEYBOARD_M = 0x10
    KEYBOARD_N = 0x11
    KEYBOARD_O = 0x12
    KEYBOARD_P = 0x13
    KEYBOARD_Q = 0x14
    KEYBOARD_R = 0x15
    KEYBOARD_S = 0x16
    KEYBOARD_T = 0x17
    KEYBOARD_U = 0x18
    KEYBOARD_V = 0x19
    KEYBOARD_W = 0x1A
    KEYBOARD_X = 0x1B
    KEYBOARD_Y = 0x1C
    KEYBOARD_Z = 0x1D
    KEYBOARD_1_EXCLAMATION_POINT = 0x1E
    KEYBOARD_2_AT = 0x1F
    KEYBOARD_3_POUND = 0x20
    KEYBOARD_4_DOLLAR_SIGN = 0x21
    KEYBOARD_5_PERCENT_SIGN = 0x22
    KEYBOARD_6_CARET = 0x23
    KEYBOARD_7_AMPERSAND = 0x24
    KEYBOARD_8_ASTERISK = 0x25
    KEYBOARD_9_LEFT_PARENTHESIS = 0x26
    KEYBOARD_0_RIGHT_PARENTHESIS = 0x27
    KEYBOARD_RETURN_ENTER = 0x28
    KEYBOARD_ESCAPE = 0x29
    KEYBOARD_DELETE_BACKSPACE = 0x2A
    KEYBOARD_TAB = 0x2B
    KEYBOARD_SPACEBAR = 0x2C
    KEYBOARD_HYPHEN_UNDERSCORE = 0x2D
    KEYBOARD_EQUAL_PLUS = 0x2E
    KEYBOARD_LEFT_BRACKET = 0x2F
    KEYBOARD_RIGHT_BRACKET = 0x30
    KEYBOARD_BACKSLASH_PIPE = 0x31
    KEYBOARD_NON_US_POUND_TILDE = 0x32
    KEYBOARD_SEMICOLON_COLON = 0x33
    KEYBOARD_SINGLE_DOUBLE_QUOTES = 0x34
    KEYBOARD_GRAVE_ACCENT_TILDE = 0x35
    KEYBOARD_COMMA_LESS_THAN = 0x36
    KEYBOARD_PERIOD_GREATER_THAN = 0x37
    KEYBOARD_FORWARD_SLASH_QUESTION_MARK = 0x38
    KEYBOARD_CAPS_LOCK = 0x39
    KEYBOARD_F1 = 0x3A
    KEYBOARD_F2 = 0x3B
    KEYBOARD_F3 = 0x3C
    KEYBOARD_F4 = 0x3D
    KEYBOARD_F5 = 0x3E
    KEYBOARD_F6 = 0x3F
    KEYBOARD_F7 = 0x40
    KEYBOARD_F8 = 0x41
    KEYBOARD_F9 = 0x42
    KEYBOARD_F10 = 0x43
    KEYBOARD_F11 = 0x44
    KEYBOARD_F12 = 0x45
    KEYBOARD_PRINT_SCREEN = 0x46
    KEYBOARD_SCROLL_LOCK = 0x47
    KEYBOARD_PAUSE = 0x48
    KEYBOARD_INSERT = 0x49
    KEYBOARD_HOME = 0x4A
    KEYBOARD_PAGE_UP = 0x4B
    KEYBOARD_DELETE_FORWARD = 0x4C
    KEYBOARD_END = 0x4D
    KEYBOARD_PAGE_DOWN = 0x4E
    KEYBOARD_RIGHT_ARROW = 0x4F
    KEYBOARD_LEFT_ARROW = 0x50
    KEYBOARD_DOWN_ARROW = 0x51
    KEYBOARD_UP_ARROW = 0x52
    KEYPAD_NUM_LOCK_CLEAR = 0x53
    KEYPAD_FORWARD_SLASH = 0x54
    KEYPAD_ASTERISK = 0x55
    KEYPAD_MINUS = 0x56
    KEYPAD_PLUS = 0x57
    KEYPAD_ENTER = 0x58
    KEYPAD_1_END = 0x59
    KEYPAD_2_DOWN_ARROW = 0x5A
    KEYPAD_3_PAGE_DOWN = 0x5B
    KEYPAD_4_LEFT_ARROW = 0x5C
    KEYPAD_5 = 0x5D
    KEYPAD_6_RIGHT_ARROW = 0x5E
    KEYPAD_7_HOME = 0x5F
    KEYPAD_8_UP_ARROW = 0x60
    KEYPAD_9_PAGE_UP = 0x61
    KEYPAD_0_INSERT = 0x62
    KEYPAD_PERIOD_DELETE = 0x63
    KEYBOARD_NON_US_BACKSLASH_PIPE = 0x64
    KEYBOARD_APPLICATION = 0x65
    KEYBOARD_POWER = 0x66
    KEYPAD_EQUAL = 0x67
    KEYBOARD_F13 = 0x68
    KEYBOARD_F14 = 0x69
    KEYBOARD_F15 = 0x6A
    KEYBOARD_F16 = 0x6B
    KEYBOARD_F17 = 0x6C
    KEYBOARD_F18 = 0x6D
    KEYBOARD_F19 = 0x6E
    KEYBOARD_F20 = 0x6F
    KEYBOARD_F21 = 0x70
    KEYBOARD_F22 = 0x71
    KEYBOARD_F23 = 0x72
    KEYBOARD_F24 = 0x73
    KEYBOARD_EXECUTE = 0x74
    KEYBOARD_HELP = 0x75
    KEYBOARD_MENU = 0x76
    KEYBOARD_SELECT = 0x77
    KEYBOARD_STOP = 0x78
    KEYBOARD_AGAIN = 0x79
    KEYBOARD_UNDO = 0x7A
    KEYBOARD_CUT = 0x7B
    KEYBOARD_COPY = 0x7C
    KEYBOARD_PASTE = 0x7D
    KEYBOARD_FIND = 0x7E
    KEYBOARD_MUTE = 0x7F
    KEYBOARD_VOLUME_UP = 0x80
    KEYBOARD_VOLUME_DOWN = 0x81
    KEYBOARD_LOCKING_CAPS_LOCK = 0x82
    KEYBOARD_LOCKING_NUM_LOCK = 0x83
    KEYBOARD_LOCKING_SCROLL_LOCK = 0x84
    KEYPAD_COMMA = 0x85
    KEYPAD_EQUAL_SIGN = 0x86
    KEYBOARD_INTERNATIONAL1 = 0x87
    KEYBOARD_INTERNATIONAL2 = 0x88
    KEYBOARD_INTERNATIONAL3 = 0x89
    KEYBOARD_INTERNATIONAL4 = 0x8A
    KEYBOARD_INTERNATIONAL5 = 0x8B
    KEYBOARD_INTERNATIONAL6 = 0x8C
    KEYBOARD_INTERNATIONAL7 = 0x8D
    KEYBOARD_INTERNATIONAL8 = 0x8E
    KEYBOARD_INTERNATIONAL9 = 0x8F
    KEYBOARD_LANG1 = 0x90
    KEYBOARD_LANG2 = 0x91
    KEYBOARD_LANG3 = 0x92
    KEYBOARD_LANG4 = 0x93
    KEYBOARD_LANG5 = 0x94
    KEYBOARD_LANG6 = 0x95
    KEYBOARD_LANG7 = 0x96
    KEYBOARD_LANG8 = 0x97
    KEYBOARD_LANG9 = 0x98
    KEYBOARD_ALTERNATE_ERASE = 0x99
    KEYBOARD_SYSREQ_ATTENTION = 0x9A
    KEYBOARD_CANCEL = 0x9B
    KEYBOARD_CLEAR = 0x9C
    KEYBOARD_PRIOR = 0x9D
    KEYBOARD_RETURN = 0x9E
    KEYBOARD_SEPARATOR = 0x9F
    KEYBOARD_OUT = 0xA0
    KEYBOARD_OPER = 0xA1
    KEYBOARD_CLEAR_AGAIN = 0xA2
    KEYBOARD_CRSEL_PROPS = 0xA3
    KEYBOARD_EXSEL = 0xA4
    KEYPAD_00 = 0xB0
    KEYPAD_000 = 0xB1
    THOUSANDS_SEPARATOR = 0xB2
    DECIMAL_SEPARATOR = 0xB3
    CURRENCY_UNIT = 0xB4
    CURRENCY_SUBUNIT = 0xB5
    KEYPAD_LEFT_PARENTHESIS = 0xB6
    KEYPAD_RIGHT_PARENTHESIS = 0xB7
    KEYPAD_LEFT_CURLY_BRACKET = 0xB8
    KEYPAD_RIGHT_CURLY_BRACKET = 0xB9
    KEYPAD_TAB = 0xBA
    KEYPAD_BACKSPACE = 0xBB
    KEYPAD_A = 0xBC
    KEYPAD_B = 0xBD
    KEYPAD_C = 0xBE
    KEYPAD_D = 0xBF
    KEYPAD_E = 0xC0
    KEYPAD_F = 0xC1
    KEYPAD_XOR = 0xC2
    KEYPAD_CARET = 0xC3
    KEYPAD_PERCENT_SIGN = 0xC4
    KEYPAD_LESS_THAN = 0xC5
    KEYPAD_GREATER_THAN = 0xC6
    KEYPAD_AMPERSAND = 0xC7
    KEYPAD_DOUBLE_AMPERSAND = 0xC8
    KEYPAD_PIPE = 0xC9
    KEYPAD_DOUBLE_PIPE = 0xCA
    KEYPAD_COLON = 0xCB
    KEYPAD_POUND = 0xCC
    KEYPAD_SPACE = 0xCD
    KEYPAD_AT = 0xCE
    KEYPAD_EXCLAMATION_POINT = 0xCF
    KEYPAD_MEMORY_STORE = 0xD0
    KEYPAD_MEMORY_RECALL = 0xD1
    KEYPAD_MEMORY_CLEAR = 0xD2
    KEYPAD_MEMORY_ADD = 0xD3
    KEYPAD_MEMORY_SUBTRACT = 0xD4
    KEYPAD_MEMORY_MULTIPLY = 0xD5
    KEYPAD_MEMORY_DIVIDE = 0xD6
    KEYPAD_PLUS_MINUS = 0xD7
    KEYPAD_CLEAR = 0xD8
    KEYPAD_CLEAR_ENTRY = 0xD9
    KEYPAD_BINARY = 0xDA
    KEYPAD_OCTAL = 0xDB
    KEYPAD_DECIMAL = 0xDC
    KEYPAD_HEXADECIMAL = 0xDD
    KEYBOARD_LEFT_CONTROL = 0xE0
    KEYBOARD_LEFT_SHIFT = 0xE1
    KEYBOARD_LEFT_ALT = 0xE2
    KEYBOARD_LEFT_GUI = 0xE3
    KEYBOARD_RIGHT_CONTROL = 0xE4
    KEYBOARD_RIGHT_SHIFT = 0xE5
    KEYBOARD_RIGHT_ALT = 0xE6
    KEYBOARD_RIGHT_GUI = 0xE7

    @classmethod
    def from_value(cls, value: object) -> Union["KeyboardUsage", Reserved]:
        """Decode a usage ID; out-of-range integers decode as ID 0."""
        usage_id = to_u16(value)
        override = _DECODE_OVERRIDES.get(usage_id)
        if override is not None:
            return override
        return resolve(cls, _RESERVED_RANGES, usage_id)


_RESERVED_RANGES = {
    "RESERVED_A5_AF": range(0xA5, 0xB0),
    "RESERVED_DE_DF": range(0xDE, 0xE0),
    "RESERVED_E8_FFFF": range(0xE8, 0x10000),
}

# IDs whose decoding differs from the member carrying that value:
# 0x82 decodes as Locking Num Lock and 0xD2 as Keypad Clear.
_DECODE_OVERRIDES = {
    0x82: KeyboardUsage.KEYBOARD_LOCKING_NUM_LOCK,
    0xD2: KeyboardUsage.KEYPAD_CLEAR,
}