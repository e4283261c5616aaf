"""FIDO Alliance page (0xF1D0): authenticators compliant with FIDO standards."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from hidusages.usage import Reserved, resolve


class FIDOUsage(IntEnum):
    """Named usages of the FIDO Alliance page."""

    UNDEFINED = 0x00
    U2F_AUTHENTICATOR_DEVICE = 0x01
    INPUT_REPORT_DATA = 0x20
    OUTPUT_REPORT_DATA = 0x21

    @classmethod
    def from_value(cls, value: object) -> Union["FIDOUsage", Reserved]:
        """Decode a usage ID; out-of-range integers decode as ID 0."""
        return resolve(cls, _RESERVED_RANGES, value)


_RESERVED_RANGES = {
    "RESERVED_02_1F": range(0x02, 0x20),
    "RESERVED_22_FFFF": range(0x22, 0x10000),
}