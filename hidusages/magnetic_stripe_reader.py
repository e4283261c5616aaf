"""Magnetic Stripe Reader page (0x8E)."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from hidusages.usage import Reserved, resolve


class MagneticStripeReaderUsage(IntEnum):
    """Named usages of the Magnetic Stripe Reader page."""

    UNDEFINED = 0x00
    MSR_DEVICE_READ_ONLY = 0x01
    TRACK_1_LENGTH = 0x11
    TRACK_2_LENGTH = 0x12
    TRACK_3_LENGTH = 0x13
    TRACK_JIS_LENGTH = 0x14
    TRACK_DATA = 0x20
    TRACK_1_DATA = 0x21
    TRACK_2_DATA = 0x22
    TRACK_3_DATA = 0x23
    TRACK_JIS_DATA = 0x24

    @classmethod
    def from_value(
        cls, value: object
    ) -> Union["MagneticStripeReaderUsage", Reserved]:
        """Decode a usage ID; out-of-range integers decode as ID 0."""
        return resolve(cls, _RESERVED_RANGES, value)


_RESERVED_RANGES = {
    "RESERVED_02_10": range(0x02, 0x11),
    "RESERVED_15_1F": range(0x15, 0x20),
    "RESERVED_25_FFFF": range(0x25, 0x10000),
}