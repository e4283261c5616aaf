"""Game Controls page (0x05): game controllers, pinball and gun devices."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from hidusages.usage import Reserved, resolve


class GameControlsUsage(IntEnum):
    """Named usages of the Game Controls page."""

    UNDEFINED = 0x00
    THREE_D_GAME_CONTROLLER = 0x01
    PINBALL_DEVICE = 0x02
    GUN_DEVICE = 0x03
    POINT_OF_VIEW = 0x20
    TURN_RIGHT_LEFT = 0x21
    PITCH_FORWARD_BACKWARD = 0x22
    ROLL_RIGHT_LEFT = 0x23
    MOVE_RIGHT_LEFT = 0x24
    MOVE_FORWARD_BACKWARD = 0x25
    MOVE_UP_DOWN = 0x26
    LEAN_RIGHT_LEFT = 0x27
    LEAN_FORWARD_BACKWARD = 0x28
    HEIGHT_OF_POV = 0x29
    FLIPPER = 0x2A
    SECONDARY_FLIPPER = 0x2B
    BUMP = 0x2C
    NEW_GAME = 0x2D
    SHOOT_BALL = 0x2E
    PLAYER = 0x2F
    GUN_BOLT = 0x30
    GUN_CLIP = 0x31
    GUN_SELECTOR = 0x32
    GUN_SINGLE_SHOT = 0x33
    GUN_BURST = 0x34
    GUN_AUTOMATIC = 0x35
    GUN_SAFETY = 0x36
    GAMEPAD_FIRE_JUMP = 0x37
    GAMEPAD_TRIGGER = 0x39
    FORM_FITTING_GAMEPAD = 0x3A

    @classmethod
    def from_value(cls, value: object) -> Union["GameControlsUsage", Reserved]:
        """Decode a usage ID; out-of-range integers decode as ID 0."""
        return resolve(cls, _RESERVED_RANGES, value)


_RESERVED_RANGES = {
    "RESERVED_04_1F": range(0x04, 0x20),
    "RESERVED_38": range(0x38, 0x39),
    "RESERVED_3B_FFFF": range(0x3B, 0x10000),
}