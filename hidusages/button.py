"""Button page (0x09): primary, secondary and further numbered buttons."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from hidusages.usage import Reserved, resolve


class ButtonUsage(IntEnum):
    """Named usages of the Button page; buttons 5 and up are numbered only."""

    NO_BUTTON_PRESSED = 0
    BUTTON_1_PRIMARY_TRIGGER = 1
    BUTTON_2_SECONDARY = 2
    BUTTON_3_TERTIARY = 3
    BUTTON_4 = 4

    @classmethod
    def from_value(cls, value: object) -> Union["ButtonUsage", Reserved]:
        """Decode a usage ID; out-of-range integers decode as ID 0."""
        return resolve(cls, _NUMBERED_RANGES, value)


_NUMBERED_RANGES = {
    "BUTTON_5_65535": range(5, 0x10000),
}