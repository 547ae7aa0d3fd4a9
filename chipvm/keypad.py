"""The sixteen-key hexadecimal keypad."""

from __future__ import annotations

KEY_COUNT = 16
"""Number of keys on the keypad."""

KEY_MAP: tuple[tuple[int, str], ...] = (
    (0x1, "1"),
    (0x2, "2"),
    (0x3, "3"),
    (0xC, "4"),
    (0x4, "q"),
    (0x5, "w"),
    (0x6, "e"),
    (0xD, "r"),
    (0x7, "a"),
    (0x8, "s"),
    (0x9, "d"),
    (0xE, "f"),
    (0xA, "z"),
    (0x0, "x"),
    (0xB, "c"),
    (0xF, "v"),
)
"""Keypad keys paired with the keyboard characters they are mapped to."""

_KEYCODES = {char: key for key, char in KEY_MAP}


def keycode_to_chip_key(keycode: str) -> int | None:
    """Return the keypad key for a keyboard character, or None if unmapped."""
    return _KEYCODES.get(keycode)


class Keypad:
    """Pressed state of the sixteen keys; invalid keys raise ValueError."""

    def __init__(self) -> None:
        self._keys = [False] * KEY_COUNT

    @staticmethod
    def _check(key: int) -> None:
        if not 0 <= key < KEY_COUNT:
            raise ValueError(f"Invalid key: {key}")

    def press(self, key: int) -> None:
        """Mark a key as pressed."""
        self._check(key)
        self._keys[key] = True

    def release(self, key: int) -> None:
        """Mark a key as released."""
        self._check(key)
        self._keys[key] = False

    def is_pressed(self, key: int) -> bool:
        """Whether a key is currently pressed."""
        self._check(key)
        return self._keys[key]

    @property
    def keys(self) -> tuple[bool, ...]:
        """The state of all sixteen keys."""
        return tuple(self._keys)

    def reset(self) -> None:
        """Release every key."""
        self._keys = [False] * KEY_COUNT

    def wait_for_key(self) -> int | None:
        """Return the lowest pressed key, or None if no key is down."""
        return next((key for key, pressed in enumerate(self._keys) if pressed), None)

    def set_from_keycode(self, keycode: str, pressed: bool) -> None:
        """Set the state of the key mapped to a keyboard character; unmapped ones are ignored."""
        key = keycode_to_chip_key(keycode)
        if key is not None:
            self._keys[key] = pressed