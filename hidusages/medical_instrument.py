"""Medical Instrument page (0x40): ultrasound and related instrument controls."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from hidusages.usage import Reserved, resolve


class MedicalInstrumentUsage(IntEnum):
    """Named usages of the Medical Instrument page."""

    UNDEFINED = 0x00
    MEDICAL_ULTRASOUND = 0x01
    VCR_ACQUISITION = 0x20
    FREEZE_THAW = 0x21
    CLIP_STORE = 0x22
    UPDATE = 0x23
    NEXT = 0x24
    SAVE = 0x25
    PRINT = 0x26
    MICROPHONE_ENABLE = 0x27
    CINE = 0x40
    TRANSMIT_POWER = 0x41
    VOLUME = 0x42
    FOCUS = 0x43
    DEPTH = 0x44
    SOFT_STEP_PRIMARY = 0x60
    SOFT_STEP_SECONDARY = 0x61
    DEPTH_GAIN_COMPENSATION = 0x70
    ZOOM_SELECT = 0x80
    ZOOM_ADJUST = 0x81
    SPECTRAL_DOPPLER_MODE_SELECT = 0x82
    SPECTRAL_DOPPLER_ADJUST = 0x83
    COLOR_DOPPLER_MODE_SELECT = 0x84
    COLOR_DOPPLER_ADJUST = 0x85
    MOTION_MODE_SELECT = 0x86
    MOTION_MODE_ADJUST = 0x87
    TWO_D_MODE_SELECT = 0x88
    TWO_D_MODE_ADJUST = 0x89
    SOFT_CONTROL_SELECT = 0xA0
    SOFT_CONTROL_ADJUST = 0xA1

    @classmethod
    def from_value(
        cls, value: object
    ) -> Union["MedicalInstrumentUsage", Reserved]:
        """Decode a usage ID; out-of-range integers decode as ID 0."""
        return resolve(cls, _RESERVED_RANGES, value)


_RESERVED_RANGES = {
    "RESERVED_02_1F": range(0x02, 0x20),
    "RESERVED_28_3F": range(0x28, 0x40),
    "RESERVED_45_5F": range(0x45, 0x60),
    "RESERVED_62_6F": range(0x62, 0x70),
    "RESERVED_71_7F": range(0x71, 0x80),
    "RESERVED_8A_9F": range(0x8A, 0xA0),
    "RESERVED_A2_FFFF": range(0xA2, 0x10000),
}