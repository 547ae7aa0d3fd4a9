"""Four kilobytes of addressable RAM."""

from __future__ import annotations

from collections.abc import Iterable

from chipvm.fonts import FONT_SPRITES, FONT_START
from chipvm.fonts import font_address as _font_address

RAM_SIZE = 4096
"""Size of memory in bytes."""

ROM_LOAD_ADDRESS = 0x200
"""Address where programs are loaded and execution starts."""

INTERPRETER_SIZE = 0x200
"""Size of the area reserved for the interpreter."""

__all__ = [
    "FONT_START",
    "INTERPRETER_SIZE",
    "RAM_SIZE",
    "ROM_LOAD_ADDRESS",
    "Memory",
]


class Memory:
    """Byte-addressable RAM; addresses outside it raise IndexError."""

    def __init__(self) -> None:
        self._data = bytearray(RAM_SIZE)

    @staticmethod
    def _check(addr: int, action: str) -> None:
        if not 0 <= addr < RAM_SIZE:
            raise IndexError(f"Memory {action} out of bounds: {addr:#06x}")

    def read(self, addr: int) -> int:
        """Read the byte at addr."""
        self._check(addr, "read")
        return self._data[addr]

    def read_word(self, addr: int) -> int:
        """Read a big-endian 16-bit word starting at addr."""
        return (self.read(addr) << 8) | self.read(addr + 1)

    def write(self, addr: int, value: int) -> None:
        """Write a byte to addr."""
        self._check(addr, "write")
        self._data[addr] = value

    def write_word(self, addr: int, value: int) -> None:
        """Write a big-endian 16-bit word starting at addr."""
        self.write(addr, (value >> 8) & 0xFF)
        self.write(addr + 1, value & 0xFF)

    def write_slice(self, addr: int, data: Iterable[int]) -> None:
        """Write a run of bytes starting at addr."""
        chunk = bytes(data)
        if not chunk:
            return
        self._check(addr, "write")
        self._check(addr + len(chunk) - 1, "write")
        self._data[addr:addr + len(chunk)] = chunk

    def load_rom(self, rom: Iterable[int]) -> int:
        """Copy a program to ROM_LOAD_ADDRESS and return its size."""
        chunk = bytes(rom)
        size = len(chunk)
        if ROM_LOAD_ADDRESS + size > RAM_SIZE:
            raise ValueError(
                f"ROM too large: {size} bytes (max {RAM_SIZE - ROM_LOAD_ADDRESS})"
            )
        self._data[ROM_LOAD_ADDRESS:ROM_LOAD_ADDRESS + size] = chunk
        return size

    def load_fonts(self) -> None:
        """Load the built-in font at FONT_START."""
        self.write_slice(FONT_START, FONT_SPRITES)

    def font_address(self, digit: int) -> int | None:
        """Return the address of the sprite for a hex digit, or None if invalid."""
        return _font_address(digit)

    def reset(self) -> None:
        """Clear all memory to zero."""
        self._data = bytearray(RAM_SIZE)

    @property
    def data(self) -> bytes:
        """A snapshot of the whole memory."""
        return bytes(self._data)