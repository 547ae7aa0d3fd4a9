# chipvm

A CHIP-8 virtual machine written in pure Python. It has no runtime dependencies.

It models the classic machine:

- 4 KB of memory. The built-in hex font sits at `0x000`, and programs load at `0x200`.
- Sixteen 8-bit registers, an index register and a 16-level call stack.
- A 64×32 monochrome display. Sprites are drawn with XOR, and collisions are detected.
- A 16-key hexadecimal keypad, mapped to the usual `1234 / qwer / asdf / zxcv` layout.
- Delay and sound timers that count down once per frame.

## Installation

```
pip install .
```

## Quick start

```python
from chipvm.machine import Chip8

vm = Chip8()
vm.load_demo()      # draws the font glyph "0" at (16, 16), then loops forever
vm.update()         # one frame: 12 instructions, then one timer tick

if vm.needs_draw():
    pixels = vm.display_pixels     # bytes of 2048 values, 0 or 1, row-major 64×32
    vm.clear_draw_flag()
```

To run your own program, pass its bytes to `load_rom`. The call returns the number of bytes loaded:

```python
with open("game.ch8", "rb") as f:
    vm.load_rom(f.read())
```

A ROM that does not fit between `0x200` and the end of memory raises `ValueError`. `RomTooLargeError` is a subclass of `ValueError`.

### Input

You can feed input by keypad number or by keyboard character:

```python
vm.key_press(0x5)
vm.key_release(0x5)
vm.set_key_from_keycode("w", True)
vm.is_key_pressed(0x5)              # True
```

A key number outside `0`–`15` raises `ValueError`. Characters with no mapping are ignored.

### Inspecting state

These properties show the machine state:

- `vm.pc`
- `vm.index`
- `vm.delay_timer` (settable)
- `vm.sound_timer` (settable)

`vm.register(n)` returns the value of `Vn`. The components are also exposed as attributes:

- `vm.cpu`
- `vm.memory`
- `vm.display`
- `vm.timers`

`vm.reset()` resets every component, reloads the font and points the program counter at `0x200`.

## Components

Each part can be used on its own.

### `chipvm.memory.Memory`

Byte-addressable RAM of `RAM_SIZE` (4096) bytes.

- Reading and writing: `read`, `write`, `read_word` and `write_word` (big-endian), and `write_slice`.
- Loading: `load_rom`, `load_fonts` and `font_address(digit)`.
- `reset` clears the memory, and the `data` property returns a snapshot.
- An out-of-range address raises `IndexError`.

### `chipvm.stack.Stack`

A 16-entry stack of return addresses.

- `push` raises `StackError` when the stack is full.
- `pop` raises `StackError` when the stack is empty.
- `sp` gives the stack pointer, and `len(stack)` gives the depth.

### `chipvm.timers.Timers`

A dataclass with `delay` and `sound` fields.

- `tick()` decrements both fields, stopping at zero. It returns whether sound is active.

### `chipvm.display.Display`

The 64×32 framebuffer.

- Pixels: `get_pixel`, `set_pixel`, `clear_pixel` and `toggle_pixel`. Off-screen coordinates read as 0 and are otherwise ignored.
- `draw_sprite(x, y, rows)` wraps at the edges. It returns `True` on a collision.
- `str(display)` gives block-character art.
- `save_pbm(path)` writes a plain-text P1 bitmap.

### `chipvm.keypad`

`Keypad` holds the key state and has `wait_for_key()`, which returns the lowest pressed key or `None`. The module also provides `KEY_MAP` and `keycode_to_chip_key(char)`.

### `chipvm.fonts`

The font data is in `FONT_SPRITES`. The module also provides `font_address(digit)` and `sprite_to_ascii(sprite)`.

### `chipvm.cpu`

`Cpu` holds the registers `v`, `i` and `pc`, a `stack`, `delay`, `sound` and `draw_flag`.

`execute_instruction(cpu, memory, display, keypad)` fetches and runs one instruction. It returns the draw flag.

### `chipvm.compact.CompactChip8`

A smaller, self-contained machine. It supports only these instructions:

- CLS, RET, JP, CALL
- `LD Vx, nn` and `ADD Vx, nn`
- `LD I` and DRW

Other opcodes are skipped.

- Its framebuffer is available through the `display` property.
- `load_rom` raises `RomTooLargeError` above `MAX_ROM_SIZE` bytes. It raises `IndexError` if the ROM runs past the end of memory.

## Limitations

- There is no command-line runner, window, audio output or real-time clock. You drive the machine by calling `step()` or `update()` and reading the framebuffer yourself.
- `FX0A` (wait for key) never completes. It re-executes itself on every step.
- The timer instructions (`FX07`, `FX15` and `FX18`) use `Cpu.delay` and `Cpu.sound`. These fields are not counted down. `Chip8.update()` ticks `Chip8.timers` instead.
- `CXNN` uses Python's `random` module.

## Running the tests

```
pip install ".[test]"
pytest
```