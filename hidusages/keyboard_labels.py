"""Human-readable labels and typed characters for Keyboard/Keypad usages."""

from __future__ import annotations

from typing import Optional, Union

from hidusages.keyboard import KeyboardUsage
from hidusages.usage import Reserved

K = KeyboardUsage

_SYMBOLS: dict[KeyboardUsage, tuple[str, str]] = {
    K.KEYBOARD_A: ("a", "A"),
    K.KEYBOARD_B: ("b", "B"),
    K.KEYBOARD_C: ("c", "C"),
    K.KEYBOARD_D: ("d", "D"),
    K.KEYBOARD_E: ("e", "E"),
    K.KEYBOARD_F: ("f", "F"),
    K.KEYBOARD_G: ("g", "G"),
    K.KEYBOARD_H: ("h", "H"),
    K.KEYBOARD_I: ("i", "I"),
    K.KEYBOARD_J: ("j", "J"),
    K.KEYBOARD_K: ("k", "K"),
    K.KEYBOARD_L: ("l", "L"),
    K.KEYBOARD_M: ("m", "M"),
    K.KEYBOARD_N: ("n", "N"),
    K.KEYBOARD_O: ("o", "O"),
    K.KEYBOARD_P: ("p", "P"),
    K.KEYBOARD_Q: ("q", "Q"),
    K.KEYBOARD_R: ("r", "R"),
    K.KEYBOARD_S: ("s", "S"),
    K.KEYBOARD_T: ("t", "T"),
    K.KEYBOARD_U: ("u", "U"),
    K.KEYBOARD_V: ("v", "V"),
    K.KEYBOARD_W: ("w", "W"),
    K.KEYBOARD_X: ("x", "X"),
    K.KEYBOARD_Y: ("y", "Y"),
    K.KEYBOARD_Z: ("z", "Z"),
    K.KEYBOARD_1_EXCLAMATION_POINT: ("1", "!"),
    K.KEYBOARD_2_AT: ("2", "@"),
    K.KEYBOARD_3_POUND: ("3", "#"),
    K.KEYBOARD_4_DOLLAR_SIGN: ("4", "$"),
    K.KEYBOARD_5_PERCENT_SIGN: ("5", "%"),
    K.KEYBOARD_6_CARET: ("6", "^"),
    K.KEYBOARD_7_AMPERSAND: ("7", "&"),
    K.KEYBOARD_8_ASTERISK: ("8", "*"),
    K.KEYBOARD_9_LEFT_PARENTHESIS: ("9", "("),
    K.KEYBOARD_0_RIGHT_PARENTHESIS: ("0", ")"),
    K.KEYBOARD_RETURN_ENTER: ("\n", ""),
    K.KEYBOARD_TAB: ("\t", ""),
    K.KEYBOARD_SPACEBAR: (" ", ""),
    K.KEYBOARD_HYPHEN_UNDERSCORE: ("-", "_"),
    K.KEYBOARD_EQUAL_PLUS: ("=", "+"),
    K.KEYBOARD_LEFT_BRACKET: ("[", "{"),
    K.KEYBOARD_RIGHT_BRACKET: ("]", "}"),
    K.KEYBOARD_BACKSLASH_PIPE: ("\\", "|"),
    K.KEYBOARD_NON_US_POUND_TILDE: ("#", "~"),
    K.KEYBOARD_SEMICOLON_COLON: (";", ":"),
    K.KEYBOARD_SINGLE_DOUBLE_QUOTES: ("'", '"'),
    K.KEYBOARD_GRAVE_ACCENT_TILDE: ("`", "~"),
    K.KEYBOARD_COMMA_LESS_THAN: (",", "<"),
    K.KEYBOARD_PERIOD_GREATER_THAN: (".", ">"),
    K.KEYBOARD_FORWARD_SLASH_QUESTION_MARK: ("/", "?"),
    K.KEYPAD_FORWARD_SLASH: ("/", ""),
    K.KEYPAD_ASTERISK: ("*", ""),
    K.KEYPAD_MINUS: ("-", ""),
    K.KEYPAD_PLUS: ("+", ""),
    K.KEYPAD_ENTER: ("\n", ""),
    K.KEYPAD_1_END: ("1", ""),
    K.KEYPAD_2_DOWN_ARROW: ("2", ""),
    K.KEYPAD_3_PAGE_DOWN: ("3", ""),
    K.KEYPAD_4_LEFT_ARROW: ("4", ""),
    K.KEYPAD_5: ("5", ""),
    K.KEYPAD_6_RIGHT_ARROW: ("6", ""),
    K.KEYPAD_7_HOME: ("7", ""),
    K.KEYPAD_8_UP_ARROW: ("8", ""),
    K.KEYPAD_9_PAGE_UP: ("9", ""),
    K.KEYPAD_0_INSERT: ("0", ""),
    K.KEYPAD_PERIOD_DELETE: (".", ""),
    K.KEYBOARD_NON_US_BACKSLASH_PIPE: ("\\", "|"),
    K.KEYPAD_EQUAL: ("=", ""),
    K.KEYPAD_COMMA: (",", ""),
    K.KEYPAD_EQUAL_SIGN: ("=", ""),
    K.KEYPAD_LEFT_PARENTHESIS: ("(", ""),
    K.KEYPAD_RIGHT_PARENTHESIS: (")", ""),
    K.KEYPAD_LEFT_CURLY_BRACKET: ("{", ""),
    K.KEYPAD_RIGHT_CURLY_BRACKET: ("}", ""),
    K.KEYPAD_TAB: ("\t", ""),
    K.KEYPAD_CARET: ("^", ""),
    K.KEYPAD_PERCENT_SIGN: ("%", ""),
    K.KEYPAD_LESS_THAN: ("<", ""),
    K.KEYPAD_GREATER_THAN: (">", ""),
    K.KEYPAD_AMPERSAND: ("&", ""),
    K.KEYPAD_DOUBLE_AMPERSAND: ("&", "&"),
    K.KEYPAD_PIPE: ("|", ""),
    K.KEYPAD_DOUBLE_PIPE: ("|", "|"),
    K.KEYPAD_COLON: (":", ""),
    K.KEYPAD_POUND: ("#", ""),
    K.KEYPAD_SPACE: (" ", ""),
    K.KEYPAD_AT: ("@", ""),
    K.KEYPAD_EXCLAMATION_POINT: ("!", ""),
    K.KEYPAD_PLUS_MINUS: ("+", "-"),
}

# Usages not listed here have an empty label.
_LABELS: dict[KeyboardUsage, str] = {
    K.RESERVED_00: "Reserved | No Event",
    **{
        usage: f"{lower} or {upper}"
        for usage, (lower, upper) in _SYMBOLS.items()
        if K.KEYBOARD_A <= usage <= K.KEYBOARD_0_RIGHT_PARENTHESIS
    },
    K.KEYBOARD_TAB: "Tab Space",
    K.KEYBOARD_SPACEBAR: "Space",
    K.KEYBOARD_HYPHEN_UNDERSCORE: "- or _",
    K.KEYBOARD_EQUAL_PLUS: "= or +",
    K.KEYBOARD_LEFT_BRACKET: "[ or {",
    K.KEYBOARD_RIGHT_BRACKET: "] or }",
    K.KEYBOARD_BACKSLASH_PIPE: "\\ or |",
    K.KEYBOARD_NON_US_POUND_TILDE: "# or ~",
    K.KEYBOARD_SEMICOLON_COLON: "; or :",
    K.KEYBOARD_SINGLE_DOUBLE_QUOTES: "' or \"",
    K.KEYBOARD_GRAVE_ACCENT_TILDE: "` or ~",
    K.KEYBOARD_COMMA_LESS_THAN: ", or <",
    K.KEYBOARD_PERIOD_GREATER_THAN: ". or >",
    K.KEYBOARD_FORWARD_SLASH_QUESTION_MARK: "/ or ?",
    K.KEYBOARD_CAPS_LOCK: "CapsLock",
    **{K(K.KEYBOARD_F1 + n): f"Function {n + 1}" for n in range(12)},
    K.KEYBOARD_PRINT_SCREEN: "PrintScreen",
    K.KEYBOARD_SCROLL_LOCK: "ScrollLock",
    K.KEYBOARD_PAUSE: "Pause",
    K.KEYBOARD_INSERT: "Insert",
    K.KEYBOARD_HOME: "Home",
    K.KEYBOARD_PAGE_UP: "PageUp",
    K.KEYBOARD_DELETE_FORWARD: "Delete",
    K.KEYBOARD_END: "End",
    K.KEYBOARD_PAGE_DOWN: "PageDown",
    K.KEYBOARD_RIGHT_ARROW: "Right Arrow",
    K.KEYBOARD_LEFT_ARROW: "Left Arrow",
    K.KEYBOARD_DOWN_ARROW: "Down Arrow",
    K.KEYBOARD_UP_ARROW: "Up Arrow",
    K.KEYPAD_NUM_LOCK_CLEAR: "NumLock or Clear",
    K.KEYPAD_FORWARD_SLASH: "/",
    K.KEYPAD_ASTERISK: "*",
    K.KEYPAD_MINUS: "-",
    K.KEYPAD_PLUS: "+",
    K.KEYPAD_ENTER: "Enter",
    K.KEYPAD_1_END: "1 or End",
    K.KEYPAD_2_DOWN_ARROW: "2 or Down Arrow",
    K.KEYPAD_3_PAGE_DOWN: "3 or PageDown",
    K.KEYPAD_4_LEFT_ARROW: "4 or Left Arrow",
    K.KEYPAD_5: "5",
    K.KEYPAD_6_RIGHT_ARROW: "6 or Right Arrow",
    K.KEYPAD_7_HOME: "7 or Home",
    K.KEYPAD_8_UP_ARROW: "8 or Up Arrow",
    K.KEYPAD_9_PAGE_UP: "9 or PageUp",
    K.KEYPAD_0_INSERT: "0 or Insert",
    K.KEYPAD_PERIOD_DELETE: ". or Delete",
    K.KEYBOARD_NON_US_BACKSLASH_PIPE: "\\ or |",
    K.KEYBOARD_APPLICATION: "Application",
    K.KEYBOARD_POWER: "Power",
    K.KEYPAD_EQUAL: "=",
    **{K(K.KEYBOARD_F13 + n): f"Function {n + 13}" for n in range(12)},
    K.KEYBOARD_EXECUTE: "Execute",
    K.KEYBOARD_HELP: "Help",
    K.KEYBOARD_MENU: "Menu",
    K.KEYBOARD_SELECT: "Select",
    K.KEYBOARD_STOP: "Stop",
    K.KEYBOARD_AGAIN: "Again",
    K.KEYBOARD_UNDO: "Undo",
    K.KEYBOARD_CUT: "Cut",
    K.KEYBOARD_COPY: "Copy",
    K.KEYBOARD_PASTE: "Paste",
    K.KEYBOARD_FIND: "Find",
    K.KEYBOARD_MUTE: "Mute",
    K.KEYBOARD_VOLUME_UP: "VolumeUp",
    K.KEYBOARD_VOLUME_DOWN: "VolumeDown",
    K.KEYBOARD_LOCKING_CAPS_LOCK: "LockingCapsLock",
    K.KEYBOARD_LOCKING_NUM_LOCK: "LockingNumLock",
    K.KEYBOARD_LOCKING_SCROLL_LOCK: "LockingScrollLock",
    K.KEYPAD_COMMA: ",",
    K.KEYPAD_EQUAL_SIGN: "=",
    **{K(K.KEYBOARD_INTERNATIONAL1 + n): str(n + 1) for n in range(9)},
}

Usage = Union[KeyboardUsage, Reserved]


def to_symbol(usage: Usage) -> Optional[tuple[str, str]]:
    """Return the (unshifted, shifted) characters a key types, or None."""
    if isinstance(usage, Reserved):
        return None
    return _SYMBOLS.get(KeyboardUsage(usage))


def to_label(usage: Usage) -> str:
    """Return a short human-readable label; empty when none is defined."""
    if isinstance(usage, Reserved):
        return ""
    return _LABELS.get(KeyboardUsage(usage), "")


def describe(usage: Usage) -> str:
    """Return the display form of a usage: ``Key Code: <label>``."""
    return f"Key Code: {to_label(usage)}"