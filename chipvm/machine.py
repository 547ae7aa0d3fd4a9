"""A complete machine: CPU, memory, display, keypad and timers together."""

from __future__ import annotations

from collections.abc import Iterable

from chipvm.cpu import INSTRUCTIONS_PER_FRAME, Cpu, execute_instruction
from chipvm.display import Display
from chipvm.keypad import Keypad
from chipvm.memory import ROM_LOAD_ADDRESS, Memory
from chipvm.timers import Timers

_MAX_ROM_SIZE = 0xDFFF - 0x200

_DEMO_PROGRAM = bytes(
    [
        0x00, 0xE0,  # CLS
        0x60, 0x10,  # LD V0, 0x10
        0x61, 0x10,  # LD V1, 0x10
        0xA0, 0x00,  # LD I, 0x000 (font '0')
        0xD0, 0x15,  # DRW V0, V1, 5
        0x12, 0x0A,  # JP 0x20A
    ]
)


class RomTooLargeError(ValueError):
    """Raised when a program does not fit in memory."""


class Chip8:
    """The whole emulator."""

    def __init__(self) -> None:
        self.cpu = Cpu()
        self.memory = Memory()
        self.display = Display()
        self.timers = Timers()
        self._keypad = Keypad()
        self._running = True
        self.memory.load_fonts()

    def reset(self) -> None:
        """Reset every component and reload the font."""
        self.cpu.reset()
        self.memory.reset()
        self.memory.load_fonts()
        self.display.clear()
        self._keypad.reset()
        self.timers.reset()
        self._running = True
        self.cpu.pc = ROM_LOAD_ADDRESS

    def load_rom(self, rom: Iterable[int]) -> int:
        """Load a program at the start address and return its size."""
        data = bytes(rom)
        if len(data) > _MAX_ROM_SIZE:
            raise RomTooLargeError(f"ROM too large: {len(data)} bytes")
        return self.memory.load_rom(data)

    def load_demo(self) -> None:
        """Load a small program that draws the digit 0 and then loops forever."""
        self.memory.write_slice(ROM_LOAD_ADDRESS, _DEMO_PROGRAM)
        self.cpu.pc = ROM_LOAD_ADDRESS

    def step(self) -> None:
        """Execute one instruction."""
        execute_instruction(self.cpu, self.memory, self.display, self._keypad)

    def update(self) -> None:
        """Run one frame of instructions, then tick the timers."""
        for _ in range(INSTRUCTIONS_PER_FRAME):
            self.step()
        self.timers.tick()

    @property
    def display_pixels(self) -> bytes:
        """A snapshot of the framebuffer."""
        return self.display.pixels

    def key_press(self, key: int) -> None:
        self._keypad.press(key)

    def key_release(self, key: int) -> None:
        self._keypad.release(key)

    def set_key_from_keycode(self, keycode: str, pressed: bool) -> None:
        """Set the key mapped to a keyboard character."""
        self._keypad.set_from_keycode(keycode, pressed)

    def is_key_pressed(self, key: int) -> bool:
        return self._keypad.is_pressed(key)

    def needs_draw(self) -> bool:
        """Whether the screen changed since the draw flag was last cleared."""
        return self.cpu.draw_flag

    def clear_draw_flag(self) -> None:
        self.cpu.draw_flag = False

    @property
    def pc(self) -> int:
        """The program counter."""
        return self.cpu.pc

    @property
    def index(self) -> int:
        """The index register."""
        return self.cpu.i

    def register(self, index: int) -> int:
        """The value of register V<index>."""
        return self.cpu.v[index]

    @property
    def delay_timer(self) -> int:
        return self.timers.delay

    @delay_timer.setter
    def delay_timer(self, value: int) -> None:
        self.timers.delay = value

    @property
    def sound_timer(self) -> int:
        return self.timers.sound

    @sound_timer.setter
    def sound_timer(self, value: int) -> None:
        self.timers.sound = value