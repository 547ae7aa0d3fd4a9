"""A CHIP-8 virtual machine: memory, CPU, display, keypad, timers and a compact variant."""

__version__ = "0.1.0"