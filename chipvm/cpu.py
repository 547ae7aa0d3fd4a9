"""CPU state and instruction execution."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from chipvm.display import Display
from chipvm.fonts import SPRITE_HEIGHT
from chipvm.keypad import Keypad
from chipvm.memory import Memory
from chipvm.stack import Stack

REGISTER_COUNT = 16
"""Number of general purpose registers (V0-VF)."""

PROGRAM_START = 0x200
"""Address where execution starts."""

INSTRUCTIONS_PER_FRAME = 12
"""Instructions executed per 60 Hz frame."""

_FLAG = 0xF


def _registers() -> list[int]:
    return [0] * REGISTER_COUNT


@dataclass
class Cpu:
    """Registers, program counter, call stack and the CPU's own timers."""

    v: list[int] = field(default_factory=_registers)
    i: int = 0
    pc: int = PROGRAM_START
    stack: Stack = field(default_factory=Stack)
    delay: int = 0
    sound: int = 0
    draw_flag: bool = False

    def reset(self) -> None:
        """Return the CPU to its power-on state."""
        self.v = _registers()
        self.i = 0
        self.pc = PROGRAM_START
        self.stack.reset()
        self.delay = 0
        self.sound = 0
        self.draw_flag = False

    def increment_i(self) -> None:
        """Add one to the index register."""
        self.i = (self.i + 1) & 0xFFFF

    def is_sound_active(self) -> bool:
        """Whether the CPU's sound timer is running."""
        return self.sound > 0


def _execute_alu(cpu: Cpu, vx: int, vy: int, n: int) -> None:
    v = cpu.v
    if n == 0x0:
        v[vx] = v[vy]
    elif n == 0x1:
        v[vx] |= v[vy]
    elif n == 0x2:
        v[vx] &= v[vy]
    elif n == 0x3:
        v[vx] ^= v[vy]
    elif n == 0x4:
        total = v[vx] + v[vy]
        v[_FLAG] = 1 if total > 0xFF else 0
        v[vx] = total & 0xFF
    elif n == 0x5:
        borrow = v[vx] < v[vy]
        result = (v[vx] - v[vy]) & 0xFF
        v[_FLAG] = 0 if borrow else 1
        v[vx] = result
    elif n == 0x6:
        v[_FLAG] = v[vx] & 1
        v[vx] >>= 1
    elif n == 0x7:
        borrow = v[vy] < v[vx]
        result = (v[vy] - v[vx]) & 0xFF
        v[_FLAG] = 0 if borrow else 1
        v[vx] = result
    elif n == 0xE:
        v[_FLAG] = (v[vx] >> 7) & 1
        v[vx] = (v[vx] << 1) & 0xFF


def _execute_misc(cpu: Cpu, memory: Memory, vx: int, nn: int) -> None:
    v = cpu.v
    if nn == 0x07:
        v[vx] = cpu.delay
    elif nn == 0x0A:
        # Waiting for a key: run this instruction again next step.
        cpu.pc -= 2
    elif nn == 0x15:
        cpu.delay = v[vx]
    elif nn == 0x18:
        cpu.sound = v[vx]
    elif nn == 0x1E:
        cpu.i = (cpu.i + v[vx]) & 0xFFFF
    elif nn == 0x29:
        cpu.i = v[vx] * SPRITE_HEIGHT
    elif nn == 0x33:
        value = v[vx]
        memory.write(cpu.i, value // 100)
        memory.write(cpu.i + 1, (value // 10) % 10)
        memory.write(cpu.i + 2, value % 10)
    elif nn == 0x55:
        for offset in range(vx + 1):
            memory.write(cpu.i + offset, v[offset])
    elif nn == 0x65:
        for offset in range(vx + 1):
            v[offset] = memory.read(cpu.i + offset)


def execute_instruction(
    cpu: Cpu, memory: Memory, display: Display, keypad: Keypad
) -> bool:
    """Fetch, decode and run one instruction; return the CPU's draw flag."""
    opcode = memory.read_word(cpu.pc)
    cpu.pc += 2

    op = opcode >> 12
    vx = (opcode >> 8) & 0xF
    vy = (opcode >> 4) & 0xF
    nnn = opcode & 0xFFF
    nn = opcode & 0xFF
    n = opcode & 0xF
    v = cpu.v

    if op == 0x0:
        if nnn == 0x0E0:
            display.clear()
            cpu.draw_flag = True
        elif nnn == 0x0EE:
            cpu.pc = cpu.stack.pop()
    elif op == 0x1:
        cpu.pc = nnn
    elif op == 0x2:
        cpu.stack.push(cpu.pc)
        cpu.pc = nnn
    elif op == 0x3:
        if v[vx] == nn:
            cpu.pc += 2
    elif op == 0x4:
        if v[vx] != nn:
            cpu.pc += 2
    elif op == 0x5:
        if v[vx] == v[vy]:
            cpu.pc += 2
    elif op == 0x6:
        v[vx] = nn
    elif op == 0x7:
        v[vx] = (v[vx] + nn) & 0xFF
    elif op == 0x8:
        _execute_alu(cpu, vx, vy, n)
    elif op == 0x9:
        if v[vx] != v[vy]:
            cpu.pc += 2
    elif op == 0xA:
        cpu.i = nnn
    elif op == 0xB:
        cpu.pc = nnn + v[0]
    elif op == 0xC:
        v[vx] = random.getrandbits(8) & nn
    elif op == 0xD:
        sprite = [memory.read(addr) for addr in range(cpu.i, cpu.i + n)]
        collision = display.draw_sprite(v[vx], v[vy], sprite)
        v[_FLAG] = 1 if collision else 0
        cpu.draw_flag = True
    elif op == 0xE:
        if nn == 0x9E:
            if keypad.is_pressed(v[vx]):
                cpu.pc += 2
        elif nn == 0xA1:
            if not keypad.is_pressed(v[vx]):
                cpu.pc += 2
    elif op == 0xF:
        _execute_misc(cpu, memory, vx, nn)

    return cpu.draw_flag