import pytest

from chipvm.memory import RAM_SIZE, ROM_LOAD_ADDRESS, Memory


def test_new_memory_is_zeroed():
    memory = Memory()
    assert memory.data == bytes(RAM_SIZE)


def test_read_write():
    memory = Memory()
    memory.write(0x123, 0xAB)
    assert memory.read(0x123) == 0xAB


def test_read_write_word():
    memory = Memory()
    memory.write_word(0x100, 0x1234)
    assert memory.read_word(0x100) == 0x1234
    assert memory.read(0x100) == 0x12
    assert memory.read(0x101) == 0x34


def test_load_rom():
    memory = Memory()
    size = memory.load_rom([0x00, 0xE0, 0x12, 0x34])
    assert size == 4
    assert memory.read(ROM_LOAD_ADDRESS) == 0x00
    assert memory.read(ROM_LOAD_ADDRESS + 1) == 0xE0
    assert memory.read(ROM_LOAD_ADDRESS + 2) == 0x12
    assert memory.read(ROM_LOAD_ADDRESS + 3) == 0x34


def test_load_rom_max_size_fits():
    memory = Memory()
    assert memory.load_rom(bytes([0x11]) * (RAM_SIZE - ROM_LOAD_ADDRESS)) == 3584
    assert memory.read(RAM_SIZE - 1) == 0x11


def test_read_out_of_bounds():
    memory = Memory()
    with pytest.raises(IndexError):
        memory.read(RAM_SIZE)


def test_write_out_of_bounds():
    memory = Memory()
    with pytest.raises(IndexError):
        memory.write(RAM_SIZE, 0xFF)


def test_read_word_at_last_byte_out_of_bounds():
    memory = Memory()
    with pytest.raises(IndexError):
        memory.read_word(RAM_SIZE - 1)


def test_rom_too_large():
    memory = Memory()
    with pytest.raises(ValueError):
        memory.load_rom(bytes(RAM_SIZE))


def test_write_slice():
    memory = Memory()
    memory.write_slice(0x300, [1, 2, 3])
    assert [memory.read(a) for a in (0x300, 0x301, 0x302)] == [1, 2, 3]


def test_write_slice_out_of_bounds():
    memory = Memory()
    with pytest.raises(IndexError):
        memory.write_slice(RAM_SIZE - 1, [1, 2])


def test_reset():
    memory = Memory()
    memory.write(0x400, 0x55)
    memory.reset()
    assert memory.read(0x400) == 0


def test_load_fonts():
    memory = Memory()
    memory.load_fonts()
    assert [memory.read(a) for a in range(0x000, 0x005)] == [
        0xF0, 0x90, 0x90, 0x90, 0xF0,
    ]
    assert [memory.read(a) for a in range(0x005, 0x00A)] == [
        0x20, 0x60, 0x20, 0x20, 0x70,
    ]


def test_font_address():
    memory = Memory()
    assert memory.font_address(0x0) == 0x000
    assert memory.font_address(0x1) == 0x005
    assert memory.font_address(0xA) == 0x032
    assert memory.font_address(0xF) == 0x04B


def test_invalid_font_address():
    memory = Memory()
    assert memory.font_address(0x10) is None