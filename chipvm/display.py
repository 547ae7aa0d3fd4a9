"""The 64x32 monochrome framebuffer."""

from __future__ import annotations

import os
from collections.abc import Iterable

DISPLAY_WIDTH = 64
"""Display width in pixels."""

DISPLAY_HEIGHT = 32
"""Display height in pixels."""

DISPLAY_SIZE = DISPLAY_WIDTH * DISPLAY_HEIGHT
"""Total number of pixels."""

SPRITE_ROW_HEIGHT = 5
"""Height of a standard font sprite."""

_ON_CHAR = "\u2588"
_OFF_CHAR = "\u00b7"


class Display:
    """Framebuffer of pixels that are 0 (off) or 1 (on), stored row by row."""

    def __init__(self) -> None:
        self._pixels = bytearray(DISPLAY_SIZE)

    @staticmethod
    def _index(x: int, y: int) -> int | None:
        if 0 <= x < DISPLAY_WIDTH and 0 <= y < DISPLAY_HEIGHT:
            return y * DISPLAY_WIDTH + x
        return None

    def clear(self) -> None:
        """Turn every pixel off."""
        self._pixels = bytearray(DISPLAY_SIZE)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel at (x, y); coordinates off the screen read as 0."""
        idx = self._index(x, y)
        return 0 if idx is None else self._pixels[idx]

    def set_pixel(self, x: int, y: int) -> None:
        """Turn the pixel at (x, y) on; off-screen coordinates are ignored."""
        idx = self._index(x, y)
        if idx is not None:
            self._pixels[idx] = 1

    def clear_pixel(self, x: int, y: int) -> None:
        """Turn the pixel at (x, y) off; off-screen coordinates are ignored."""
        idx = self._index(x, y)
        if idx is not None:
            self._pixels[idx] = 0

    def toggle_pixel(self, x: int, y: int) -> None:
        """Flip the pixel at (x, y); off-screen coordinates are ignored."""
        idx = self._index(x, y)
        if idx is not None:
            self._pixels[idx] ^= 1

    def draw_sprite(self, x: int, y: int, sprite: Iterable[int]) -> bool:
        """XOR a sprite onto the screen at (x, y), wrapping at the edges.

        Each byte is one row of eight pixels, bit 7 leftmost. Returns True if
        any pixel that was on got turned off.
        """
        collision = False
        for row_idx, sprite_row in enumerate(sprite):
            y_pos = (y + row_idx) % DISPLAY_HEIGHT
            for bit in range(8):
                if (sprite_row >> (7 - bit)) & 1:
                    x_pos = (x + bit) % DISPLAY_WIDTH
                    if self.get_pixel(x_pos, y_pos):
                        collision = True
                    self.toggle_pixel(x_pos, y_pos)
        return collision

    @property
    def pixels(self) -> bytes:
        """A snapshot of the framebuffer, pixel (x, y) at index y * width + x."""
        return bytes(self._pixels)

    def _rows(self) -> Iterable[bytes]:
        for start in range(0, DISPLAY_SIZE, DISPLAY_WIDTH):
            yield bytes(self._pixels[start:start + DISPLAY_WIDTH])

    def save_pbm(self, filename: str | os.PathLike[str]) -> None:
        """Write the screen to a plain-text (P1) portable bitmap file."""
        with open(filename, "w", encoding="ascii") as fh:
            fh.write("P1\n")
            fh.write(f"{DISPLAY_WIDTH} {DISPLAY_HEIGHT}\n")
            for row in self._rows():
                fh.write("".join(f"{pixel} " for pixel in row))
                fh.write("\n")

    def __str__(self) -> str:
        return "".join(
            "".join(_ON_CHAR if pixel else _OFF_CHAR for pixel in row) + "\n"
            for row in self._rows()
        )