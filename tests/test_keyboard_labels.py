import pytest

from hidusages.keyboard import KeyboardUsage
from hidusages.keyboard_labels import describe, to_label, to_symbol
from hidusages.usage import Reserved


@pytest.mark.parametrize(
    "usage, expected",
    [
        (KeyboardUsage.KEYBOARD_A, ("a", "A")),
        (KeyboardUsage.KEYBOARD_2_AT, ("2", "@")),
        (KeyboardUsage.KEYBOARD_RETURN_ENTER, ("\n", "")),
        (KeyboardUsage.KEYBOARD_SINGLE_DOUBLE_QUOTES, ("'", '"')),
        (KeyboardUsage.KEYPAD_DOUBLE_PIPE, ("|", "|")),
        (KeyboardUsage.KEYPAD_PLUS_MINUS, ("+", "-")),
    ],
)
def test_symbols(usage, expected):
    assert to_symbol(usage) == expected


def test_non_printing_key_has_no_symbol():
    assert to_symbol(KeyboardUsage.KEYBOARD_ESCAPE) is None
    assert to_symbol(KeyboardUsage.KEYBOARD_LEFT_SHIFT) is None


def test_reserved_has_no_symbol_or_label():
    reserved = KeyboardUsage.from_value(0xE8)
    assert isinstance(reserved, Reserved)
    assert to_symbol(reserved) is None
    assert to_label(reserved) == ""


@pytest.mark.parametrize(
    "usage, expected",
    [
        (KeyboardUsage.RESERVED_00, "Reserved | No Event"),
        (KeyboardUsage.KEYBOARD_Z, "z or Z"),
        (KeyboardUsage.KEYBOARD_9_LEFT_PARENTHESIS, "9 or ("),
        (KeyboardUsage.KEYBOARD_TAB, "Tab Space"),
        (KeyboardUsage.KEYBOARD_F1, "Function 1"),
        (KeyboardUsage.KEYBOARD_F24, "Function 24"),
        (KeyboardUsage.KEYPAD_NUM_LOCK_CLEAR, "NumLock or Clear"),
        (KeyboardUsage.KEYBOARD_INTERNATIONAL9, "9"),
        (KeyboardUsage.KEYBOARD_LOCKING_SCROLL_LOCK, "LockingScrollLock"),
        (KeyboardUsage.KEYBOARD_ESCAPE, ""),
        (KeyboardUsage.KEYBOARD_RIGHT_GUI, ""),
    ],
)
def test_labels(usage, expected):
    assert to_label(usage) == expected


def test_describe_prefixes_label():
    assert describe(KeyboardUsage.KEYBOARD_HOME) == "Key Code: Home"
    for usage in KeyboardUsage:
        assert describe(usage) == "Key Code: " + to_label(usage)


def test_letter_labels_match_symbols():
    letters = [u for u in KeyboardUsage if KeyboardUsage.KEYBOARD_A <= u <= KeyboardUsage.KEYBOARD_Z]
    assert len(letters) == 26
    for usage in letters:
        lower, upper = to_symbol(usage)
        assert to_label(usage) == f"{lower} or {upper}"
        assert upper == lower.upper()


def test_decoded_values_work():
    assert to_symbol(KeyboardUsage.from_value(4)) == ("a", "A")
    assert to_label(KeyboardUsage.from_value(0x82)) == "LockingNumLock"