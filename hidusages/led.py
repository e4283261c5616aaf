"""LED page (0x08): indicators implemented as on/off controls."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from hidusages.usage import Reserved, resolve


class LedUsage(IntEnum):
    """Named usages of the LED page."""

    UNDEFINED = 0x00
    NUM_LOCK = 0x01
    CAPS_LOCK = 0x02
    SCROLL_LOCK = 0x03
    COMPOSE = 0x04
    KANA = 0x05
    POWER = 0x06
    SHIFT = 0x07
    DO_NOT_DISTURB = 0x08
    MUTE = 0x09
    TONE_ENABLE = 0x0A
    HIGH_CUT_FILTER = 0x0B
    LOW_CUT_FILTER = 0x0C
    EQUALIZER_ENABLE = 0x0D
    SOUND_FIELD_ON = 0x0E
    SURROUND_ON = 0x0F
    REPEAT = 0x10
    STEREO = 0x11
    SAMPLING_RATE_DETECT = 0x12
    SPINNING = 0x13
    CAV = 0x14
    CLV = 0x15
    RECORDING_FORMAT_DETECT = 0x16
    OFF_HOOK = 0x17
    RING = 0x18
    MESSAGE_WAITING = 0x19
    DATA_MODE = 0x1A
    BATTERY_OPERATION = 0x1B
    BATTERY_OK = 0x1C
    BATTERY_LOW = 0x1D
    SPEAKER = 0x1E
    HEADSET = 0x1F
    HOLD = 0x20
    MICROPHONE = 0x21
    COVERAGE = 0x22
    NIGHT_MODE = 0x23
    SEND_CALLS = 0x24
    CALL_PICKUP = 0x25
    CONFERENCE = 0x26
    STAND_BY = 0x27
    CAMERA_ON = 0x28
    CAMERA_OFF = 0x29
    ON_LINE = 0x2A
    OFF_LINE = 0x2B
    BUSY = 0x2C
    READY = 0x2D
    PAPER_OUT = 0x2E
    PAPER_JAM = 0x2F
    REMOTE = 0x30
    FORWARD = 0x31
    REVERSE = 0x32
    STOP = 0x33
    REWIND = 0x34
    FAST_FORWARD = 0x35
    PLAY = 0x36
    PAUSE = 0x37
    RECORD = 0x38
    ERROR = 0x39
    USAGE_SELECTED_INDICATOR = 0x3A
    USAGE_IN_USE_INDICATOR = 0x3B
    USAGE_MULTI_MODE_INDICATOR = 0x3C
    INDICATOR_ON = 0x3D
    INDICATOR_FLASH = 0x3E
    INDICATOR_SLOW_BLINK = 0x3F
    INDICATOR_FAST_BLINK = 0x40
    INDICATOR_OFF = 0x41
    FLASH_ON_TIME = 0x42
    SLOW_BLINK_ON_TIME = 0x43
    SLOW_BLINK_OFF_TIME = 0x44
    FAST_BLINK_ON_TIME = 0x45
    FAST_BLINK_OFF_TIME = 0x46
    USAGE_INDICATOR_COLOR = 0x47
    INDICATOR_RED = 0x48
    INDICATOR_GREEN = 0x49
    INDICATOR_AMBER = 0x4A
    GENERIC_INDICATOR = 0x4B
    SYSTEM_SUSPEND = 0x4C
    EXTERNAL_POWER_CONNECTED = 0x4D
    INDICATOR_BLUE = 0x4E
    INDICATOR_ORANGE = 0x4F
    GOOD_STATUS = 0x50
    WARNING_STATUS = 0x51
    RGB_LED = 0x52
    RED_LED_CHANNEL = 0x53
    BLUE_LED_CHANNEL = 0x54
    GREEN_LED_CHANNEL = 0x55
    LED_INTENSITY = 0x56
    SYSTEM_MICROPHONE_MUTE = 0x57
    PLAYER_INDICATOR = 0x60
    PLAYER_1 = 0x61
    PLAYER_2 = 0x62
    PLAYER_3 = 0x63
    PLAYER_4 = 0x64
    PLAYER_5 = 0x65
    PLAYER_6 = 0x66
    PLAYER_7 = 0x67
    PLAYER_8 = 0x68

    @classmethod
    def from_value(cls, value: object) -> Union["LedUsage", Reserved]:
        """Decode a usage ID; out-of-range integers decode as ID 0."""
        return resolve(cls, _RESERVED_RANGES, value)


_RESERVED_RANGES = {
    "RESERVED_58_5F": range(0x58, 0x60),
    "RESERVED_69_FFFF": range(0x69, 0x10000),
}