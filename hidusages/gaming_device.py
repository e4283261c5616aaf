"""Gaming Device page: note acceptors and related gaming-machine commands."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from hidusages.usage import Reserved, resolve


class GamingDeviceUsage(IntEnum):
    """Named usages of the Gaming Device page; every other ID is unknown."""

    ACK = 0x40
    ENABLE = 0x41
    DISABLE = 0x42
    SELF_TEST = 0x43
    REQUEST_GAT_REPORT = 0x44
    CALCULATE_CRC = 0x47
    NUMBER_OF_NOTE_DATA_ENTRIES = 0x210
    READ_NOTE_TABLE = 0x211
    EXTEND_TIMEOUT = 0x212
    ACCEPT_NOTE_TICKET = 0x213
    RETURN_NOTE_TICKET = 0x214
    READ_NOTE_ACCEPTOR_METRICS = 0x21A

    @classmethod
    def from_value(cls, value: object) -> Union["GamingDeviceUsage", Reserved]:
        """Decode a usage ID; out-of-range integers decode as ID 0."""
        return resolve(cls, _UNKNOWN_RANGES, value)


_UNKNOWN_RANGES = {
    "UNKNOWN": range(0, 0x10000),
}