"""Arcade page (0x91): arcade machines with GPIO, coin doors and pin pads."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from hidusages.usage import Reserved, resolve


class ArcadeUsage(IntEnum):
    """Named usages of the Arcade page."""

    UNDEFINED = 0x00
    GENERAL_PURPOSE_IO_CARD = 0x01
    COIN_DOOR = 0x02
    WATCHDOG_TIMER = 0x03
    GENERAL_PURPOSE_ANALOG_INPUT_STATE = 0x30
    GENERAL_PURPOSE_DIGITAL_INPUT_STATE = 0x31
    GENERAL_PURPOSE_OPTICAL_INPUT_STATE = 0x32
    GENERAL_PURPOSE_DIGITAL_OUTPUT_STATE = 0x33
    NUMBER_OF_COIN_DOORS = 0x34
    COIN_DRAWER_DROP_COUNT = 0x35
    COIN_DRAWER_START = 0x36
    COIN_DRAWER_SERVICE = 0x37
    COIN_DRAWER_TILT = 0x38
    COIN_DOOR_TEST = 0x39
    COIN_DOOR_LOCKOUT = 0x40
    WATCHDOG_TIMEOUT = 0x41
    WATCHDOG_ACTION = 0x42
    WATCHDOG_REBOOT = 0x43
    WATCHDOG_RESTART = 0x44
    ALARM_INPUT = 0x45
    COIN_DOOR_COUNTER = 0x46
    IO_DIRECTION_MAPPING = 0x47
    SET_IO_DIRECTION_MAPPING = 0x48
    EXTENDED_OPTICAL_INPUT_STATE = 0x49
    PIN_PAD_INPUT_STATE = 0x4A
    PIN_PAD_STATUS = 0x4B
    PIN_PAD_OUTPUT = 0x4C
    PIN_PAD_COMMAND = 0x4D

    @classmethod
    def from_value(cls, value: object) -> Union["ArcadeUsage", Reserved]:
        """Decode a usage ID; out-of-range integers decode as ID 0."""
        return resolve(cls, _RESERVED_RANGES, value)


_RESERVED_RANGES = {
    "RESERVED_04_2F": range(0x04, 0x30),
    "RESERVED_3A_3F": range(0x3A, 0x40),
    "RESERVED_4E_FFFF": range(0x4E, 0x10000),
}