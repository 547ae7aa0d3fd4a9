"""Built-in hexadecimal font sprites (0-9, A-F)."""

from __future__ import annotations

from collections.abc import Sequence

SPRITE_WIDTH = 8
"""Width of a font sprite in pixels."""

SPRITE_HEIGHT = 5
"""Height of a font sprite in pixels (one byte per row)."""

FONT_CHAR_COUNT = 16
"""Number of characters in the font."""

FONT_SIZE = FONT_CHAR_COUNT * SPRITE_HEIGHT
"""Total number of bytes taken by the font."""

FONT_START = 0x000
"""Address in memory where the font is loaded."""

FONT_SPRITES = bytes(
    [
        0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
        0x20, 0x60, 0x20, 0x20, 0x70,  # 1
        0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
        0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
        0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
        0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
        0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
        0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
        0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
        0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
        0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
        0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
        0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
        0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
        0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
        0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
    ]
)
"""Standard font data, five bytes per character."""


def font_address(digit: int) -> int | None:
    """Return the memory address of the sprite for a hex digit, or None if invalid."""
    if not 0 <= digit <= 0xF:
        return None
    return FONT_START + digit * SPRITE_HEIGHT


def sprite_to_ascii(sprite: Sequence[int]) -> str:
    """Render a font sprite as ASCII art, bit 0 leftmost, '#' on and '.' off."""
    if len(sprite) != SPRITE_HEIGHT:
        raise ValueError(
            f"sprite must have {SPRITE_HEIGHT} rows, got {len(sprite)}"
        )
    return "\n".join(
        "".join("#" if (row >> bit) & 1 else "." for bit in range(SPRITE_WIDTH))
        for row in sprite
    )