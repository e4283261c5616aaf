"""Generic Device Controls page (0x06): battery, wireless and version controls."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from hidusages.usage import Reserved, resolve


class GenericDeviceControlsUsage(IntEnum):
    """Named usages of the Generic Device Controls page."""

    UNDEFINED = 0x00
    BACKGROUND_NONUSER_CONTROLS = 0x01
    BATTERY_STRENGTH = 0x20
    WIRELESS_CHANNEL = 0x21
    WIRELESS_ID = 0x22
    DISCOVER_WIRELESS_CONTROL = 0x23
    SECURITY_CODE_CHARACTER_ENTERED = 0x24
    SECURITY_CODE_CHARACTER_ERASED = 0x25
    SECURITY_CODE_CLEARED = 0x26
    SEQUENCE_ID = 0x27
    SEQUENCE_ID_RESET = 0x28
    RF_SIGNAL_STRENGTH = 0x29
    SOFTWARE_VERSION = 0x2A
    PROTOCOL_VERSION = 0x2B
    HARDWARE_VERSION = 0x2C
    MAJOR = 0x2D
    MINOR = 0x2E
    REVISION = 0x2F
    HANDEDNESS = 0x30
    EITHER_HAND = 0x31
    LEFT_HAND = 0x32
    RIGHT_HAND = 0x33
    BOTH_HANDS = 0x34
    GRIP_POSE_OFFSET = 0x40
    POINTER_POSE_OFFSET = 0x41

    @classmethod
    def from_value(
        cls, value: object
    ) -> Union["GenericDeviceControlsUsage", Reserved]:
        """Decode a usage ID; out-of-range integers decode as ID 0."""
        return resolve(cls, _RESERVED_RANGES, value)


_RESERVED_RANGES = {
    "RESERVED_02_1F": range(0x02, 0x20),
    "RESERVED_35_3F": range(0x35, 0x40),
    "RESERVED_42_FFFF": range(0x42, 0x10000),
}