"""Shared machinery for decoding 16-bit HID usage IDs into usage values."""

from __future__ import annotations

import operator
from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum
from typing import TypeVar, Union

U16_MAX = 0xFFFF

E = TypeVar("E", bound=IntEnum)


@dataclass(frozen=True)
class Reserved:
    """A usage ID inside a range that has no individually named usage.

    ``name`` identifies the range, ``value`` is the raw usage ID.
    """

    name: str
    value: int

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"{self.name}(0x{self.value:04X})"


def to_u16(value: object) -> int:
    """Convert an integer to a usage ID; values outside 0..0xFFFF become 0.

    Raises TypeError if ``value`` is not an integer.
    """
    number = operator.index(value)
    if 0 <= number <= U16_MAX:
        return number
    return 0


def resolve(
    enum_cls: type[E], ranges: Mapping[str, range], value: object
) -> Union[E, Reserved]:
    """Decode ``value`` into a member of ``enum_cls`` or a ``Reserved`` range.

    Named usages take precedence; otherwise the first range in ``ranges``
    that contains the value is used. Raises ValueError if nothing matches.
    """
    usage_id = to_u16(value)
    try:
        return enum_cls(usage_id)
    except ValueError:
        pass
    for name, span in ranges.items():
        if usage_id in span:
            return Reserved(name, usage_id)
    raise ValueError(f"usage ID 0x{usage_id:04X} is not defined for {enum_cls.__name__}")