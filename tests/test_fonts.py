import pytest

from chipvm.fonts import (
    FONT_SPRITES,
    SPRITE_HEIGHT,
    font_address,
    sprite_to_ascii,
)


def test_font_address():
    assert font_address(0x0) == 0x000
    assert font_address(0x1) == 0x005
    assert font_address(0xA) == 0x032
    assert font_address(0xF) == 0x04B


def test_invalid_font_address():
    assert font_address(0x10) is None
    assert font_address(-1) is None


def test_font_address_points_at_sprite():
    start = font_address(0xF)
    assert FONT_SPRITES[start:start + SPRITE_HEIGHT] == bytes(
        [0xF0, 0x80, 0xF0, 0x80, 0x80]
    )
    start = font_address(0x1)
    assert FONT_SPRITES[start:start + SPRITE_HEIGHT] == bytes(
        [0x20, 0x60, 0x20, 0x20, 0x70]
    )


def test_every_digit_fits_in_font():
    ends = [font_address(d) + SPRITE_HEIGHT for d in range(16)]
    assert max(ends) == len(FONT_SPRITES)


def test_sprite_to_ascii():
    zero = [0xF0, 0x90, 0x90, 0x90, 0xF0]
    expected = "....####\n....#..#\n....#..#\n....#..#\n....####"
    assert sprite_to_ascii(zero) == expected


def test_sprite_to_ascii_1():
    one = [0x20, 0x60, 0x20, 0x20, 0x70]
    expected = ".....#..\n.....##.\n.....#..\n.....#..\n....###."
    assert sprite_to_ascii(one) == expected


def test_sprite_to_ascii_wrong_height():
    with pytest.raises(ValueError):
        sprite_to_ascii([0xF0, 0x90])