"""A self-contained machine that runs a minimal instruction subset."""

from __future__ import annotations

from collections.abc import Iterable

from chipvm.display import DISPLAY_HEIGHT, DISPLAY_SIZE, DISPLAY_WIDTH
from chipvm.fonts import FONT_SPRITES
from chipvm.machine import RomTooLargeError
from chipvm.memory import RAM_SIZE, ROM_LOAD_ADDRESS

REGISTER_COUNT = 16
"""Number of general purpose registers."""

STACK_DEPTH = 16
"""Maximum number of nested subroutine calls."""

INSTRUCTIONS_PER_FRAME = 12
"""Instructions executed by one call to update()."""

MAX_ROM_SIZE = 0xEFF
"""Largest program accepted by load_rom()."""

_FLAG = 0xF

_DEMO_PROGRAM = bytes(
    [
        0x00, 0xE0,  # CLS
        0x60, 0x00,  # LD V0, 0
        0x61, 0x00,  # LD V1, 0
        0xA0, 0x00,  # LD I, 0
        0xD0, 0x15,  # DRW V0, V1, 5
        0x12, 0x0A,  # JP 0x20A
    ]
)


class CompactChip8:
    """All machine state in one object, supporting CLS, RET, JP, CALL, LD, ADD, LD I and DRW.

    Other opcodes are skipped. A call beyond the stack depth still jumps but
    does not record a return address; a return on an empty stack does nothing.
    """

    def __init__(self) -> None:
        self.v = [0] * REGISTER_COUNT
        self.i = 0
        self.pc = ROM_LOAD_ADDRESS
        self.memory = bytearray(RAM_SIZE)
        self._display = bytearray(DISPLAY_SIZE)
        self.stack: list[int] = []
        self.delay_timer = 0
        self.sound_timer = 0
        self._load_fonts()

    def _load_fonts(self) -> None:
        self.memory[: len(FONT_SPRITES)] = FONT_SPRITES

    def reset(self) -> None:
        """Clear registers, stack, screen and timers and reload the font; the program stays."""
        self.v = [0] * REGISTER_COUNT
        self.i = 0
        self.pc = ROM_LOAD_ADDRESS
        self.stack = []
        self._display = bytearray(DISPLAY_SIZE)
        self.delay_timer = 0
        self.sound_timer = 0
        self._load_fonts()

    def load_demo(self) -> None:
        """Load a program that draws the digit 0 at the top left and then loops forever."""
        start = ROM_LOAD_ADDRESS
        self.memory[start:start + len(_DEMO_PROGRAM)] = _DEMO_PROGRAM
        self.pc = ROM_LOAD_ADDRESS

    def step(self) -> None:
        """Execute one instruction; does nothing once the program counter leaves memory."""
        if self.pc >= RAM_SIZE:
            return

        opcode = (self.memory[self.pc] << 8) | self.memory[self.pc + 1]
        self.pc += 2

        op = opcode >> 12
        vx = (opcode >> 8) & 0xF
        vy = (opcode >> 4) & 0xF
        nnn = opcode & 0xFFF
        nn = opcode & 0xFF
        n = opcode & 0xF

        if op == 0x0:
            if nnn == 0x0E0:
                self._display = bytearray(DISPLAY_SIZE)
            elif nnn == 0x0EE and self.stack:
                self.pc = self.stack.pop()
        elif op == 0x1:
            self.pc = nnn
        elif op == 0x2:
            if len(self.stack) < STACK_DEPTH:
                self.stack.append(self.pc)
            self.pc = nnn
        elif op == 0x6:
            self.v[vx] = nn
        elif op == 0x7:
            self.v[vx] = (self.v[vx] + nn) & 0xFF
        elif op == 0xA:
            self.i = nnn
        elif op == 0xD:
            self._draw_sprite(vx, vy, n)

    def _draw_sprite(self, vx: int, vy: int, height: int) -> None:
        x = self.v[vx]
        y = self.v[vy]
        self.v[_FLAG] = 0
        for row in range(height):
            sprite_byte = self.memory[self.i + row]
            y_pos = (y + row) % DISPLAY_HEIGHT
            for col in range(8):
                if (sprite_byte >> (7 - col)) & 1:
                    idx = y_pos * DISPLAY_WIDTH + (x + col) % DISPLAY_WIDTH
                    if self._display[idx]:
                        self.v[_FLAG] = 1
                        self._display[idx] = 0
                    else:
                        self._display[idx] = 1

    def load_rom(self, data: Iterable[int]) -> int:
        """Copy a program to the start address, point the program counter at it and return its size."""
        rom = bytes(data)
        if len(rom) > MAX_ROM_SIZE:
            raise RomTooLargeError("ROM too large")
        end = ROM_LOAD_ADDRESS + len(rom)
        if end > RAM_SIZE:
            raise IndexError(
                f"ROM of {len(rom)} bytes runs past the end of memory"
            )
        self.memory[ROM_LOAD_ADDRESS:end] = rom
        self.pc = ROM_LOAD_ADDRESS
        return len(rom)

    @property
    def display(self) -> bytes:
        """A snapshot of the framebuffer, pixel (x, y) at index y * width + x."""
        return bytes(self._display)

    @property
    def index(self) -> int:
        """The index register."""
        return self.i

    def update(self) -> None:
        """Run one frame of instructions, then count the timers down by one."""
        for _ in range(INSTRUCTIONS_PER_FRAME):
            self.step()
        if self.delay_timer > 0:
            self.delay_timer -= 1
        if self.sound_timer > 0:
            self.sound_timer -= 1