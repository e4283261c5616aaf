import pytest

from hidusages.keyboard import KeyboardUsage
from hidusages.usage import Reserved


def test_letters_decode():
    assert KeyboardUsage.from_value(4) is KeyboardUsage.KEYBOARD_A
    assert KeyboardUsage.from_value(29) is KeyboardUsage.KEYBOARD_Z


def test_modifiers_decode():
    assert KeyboardUsage.from_value(224) is KeyboardUsage.KEYBOARD_LEFT_CONTROL
    assert KeyboardUsage.from_value(231) is KeyboardUsage.KEYBOARD_RIGHT_GUI


def test_zero_is_reserved_no_event():
    assert KeyboardUsage.from_value(0) is KeyboardUsage.RESERVED_00


@pytest.mark.parametrize("value", [-1, 0x10000, 123456])
def test_out_of_range_decodes_as_zero(value):
    assert KeyboardUsage.from_value(value) is KeyboardUsage.RESERVED_00


@pytest.mark.parametrize(
    "value, name",
    [
        (165, "RESERVED_A5_AF"),
        (175, "RESERVED_A5_AF"),
        (222, "RESERVED_DE_DF"),
        (223, "RESERVED_DE_DF"),
        (232, "RESERVED_E8_FFFF"),
        (65535, "RESERVED_E8_FFFF"),
    ],
)
def test_reserved_ranges(value, name):
    assert KeyboardUsage.from_value(value) == Reserved(name, value)


def test_locking_caps_lock_id_decodes_as_num_lock():
    assert KeyboardUsage.from_value(130) is KeyboardUsage.KEYBOARD_LOCKING_NUM_LOCK
    assert KeyboardUsage.from_value(131) is KeyboardUsage.KEYBOARD_LOCKING_NUM_LOCK


def test_memory_clear_id_decodes_as_keypad_clear():
    assert KeyboardUsage.from_value(210) is KeyboardUsage.KEYPAD_CLEAR
    assert KeyboardUsage.from_value(216) is KeyboardUsage.KEYPAD_CLEAR


def test_members_round_trip_except_overridden_ids():
    overridden = {
        KeyboardUsage.KEYBOARD_LOCKING_CAPS_LOCK,
        KeyboardUsage.KEYPAD_MEMORY_CLEAR,
    }
    for member in KeyboardUsage:
        if member in overridden:
            continue
        assert KeyboardUsage.from_value(int(member)) is member


def test_every_id_keeps_its_value_except_overrides():
    for usage_id in range(0x10000):
        if usage_id in (130, 210):
            continue
        assert int(KeyboardUsage.from_value(usage_id)) == usage_id


def test_non_integer_is_rejected():
    with pytest.raises(TypeError):
        KeyboardUsage.from_value("a")