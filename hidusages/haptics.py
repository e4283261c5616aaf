"""Haptics page (0x0E): simple haptic feedback controllers and waveforms."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from hidusages.usage import Reserved, resolve


class HapticsUsage(IntEnum):
    """Named usages of the Haptics page."""

    UNDEFINED = 0x00
    SIMPLE_HAPTIC_CONTROLLER = 0x01
    WAVEFORM_LIST = 0x10
    DURATION_LIST = 0x11
    AUTO_TRIGGER = 0x20
    MANUAL_TRIGGER = 0x21
    AUTO_TRIGGER_ASSOCIATED_CONTROL = 0x22
    INTENSITY = 0x23
    REPEAT_COUNT = 0x24
    RETRIGGER_PERIOD = 0x25
    WAVEFORM_VENDOR_PAGE = 0x26
    WAVEFORM_VENDOR_ID = 0x27
    WAVEFORM_CUTOFF_TIME = 0x28
    WAVEFORM_NONE = 0x1001
    WAVEFORM_STOP = 0x1002
    WAVEFORM_CLICK = 0x1003
    WAVEFORM_BUZZ_CONTINUOUS = 0x1004
    WAVEFORM_RUMBLE_CONTINUOUS = 0x1005
    WAVEFORM_PRESS = 0x1006
    WAVEFORM_RELEASE = 0x1007
    WAVEFORM_HOVER = 0x1008
    WAVEFORM_SUCCESS = 0x1009
    WAVEFORM_ERROR = 0x100A
    WAVEFORM_INK_CONTINUOUS = 0x100B
    WAVEFORM_PENCIL_CONTINUOUS = 0x100C
    WAVEFORM_MARKER_CONTINUOUS = 0x100D
    WAVEFORM_CHISEL_MARKER_CONTINUOUS = 0x100E
    WAVEFORM_BRUSH_CONTINUOUS = 0x100F
    WAVEFORM_ERASER_CONTINUOUS = 0x1010
    WAVEFORM_SPARKLE_CONTINUOUS = 0x1011

    @classmethod
    def from_value(cls, value: object) -> Union["HapticsUsage", Reserved]:
        """Decode a usage ID; out-of-range integers decode as ID 0."""
        return resolve(cls, _RESERVED_RANGES, value)


_RESERVED_RANGES = {
    "RESERVED_02_0F": range(0x02, 0x10),
    "RESERVED_12_1F": range(0x12, 0x20),
    "RESERVED_29_1000": range(0x29, 0x1001),
    "RESERVED_1012_2000": range(0x1012, 0x2001),
    "RESERVED_FOR_VENDOR_WAVEFORMS_2001_2FFF": range(0x2001, 0x3000),
    "RESERVED_3000_FFFF": range(0x3000, 0x10000),
}