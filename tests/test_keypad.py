import pytest

from chipvm.keypad import KEY_COUNT, KEY_MAP, Keypad, keycode_to_chip_key


@pytest.fixture
def keypad():
    return Keypad()


def test_new_keypad_all_released(keypad):
    assert not any(keypad.is_pressed(i) for i in range(KEY_COUNT))
    assert keypad.keys == (False,) * KEY_COUNT


def test_press_release(keypad):
    keypad.press(0x5)
    assert keypad.is_pressed(0x5)
    assert not keypad.is_pressed(0x4)
    keypad.release(0x5)
    assert not keypad.is_pressed(0x5)


def test_reset(keypad):
    keypad.press(0x1)
    keypad.press(0x2)
    keypad.press(0x3)
    keypad.reset()
    assert not keypad.is_pressed(0x1)
    assert not keypad.is_pressed(0x2)
    assert not keypad.is_pressed(0x3)


def test_wait_for_key(keypad):
    assert keypad.wait_for_key() is None
    keypad.press(0xA)
    assert keypad.wait_for_key() == 0xA


def test_wait_for_key_returns_lowest(keypad):
    keypad.press(0xC)
    keypad.press(0x3)
    assert keypad.wait_for_key() == 0x3


def test_set_from_keycode(keypad):
    keypad.set_from_keycode("1", True)
    assert keypad.is_pressed(0x1)
    keypad.set_from_keycode("1", False)
    assert not keypad.is_pressed(0x1)


def test_set_from_keycode_mapped_layout(keypad):
    keypad.set_from_keycode("v", True)
    keypad.set_from_keycode("x", True)
    assert keypad.is_pressed(0xF)
    assert keypad.is_pressed(0x0)
    assert sum(keypad.keys) == 2


def test_set_from_unmapped_keycode_is_ignored(keypad):
    keypad.set_from_keycode("?", True)
    assert keypad.keys == (False,) * KEY_COUNT


def test_keycode_to_chip_key():
    assert keycode_to_chip_key("1") == 0x1
    assert keycode_to_chip_key("x") == 0x0
    assert keycode_to_chip_key("4") == 0xC
    assert keycode_to_chip_key("?") is None


def test_key_map_covers_every_key():
    mapped = sorted(keycode_to_chip_key(char) for _, char in KEY_MAP)
    assert mapped == list(range(KEY_COUNT))


def test_every_mapped_keycode_presses_its_key(keypad):
    for chip_key, char in KEY_MAP:
        keypad.set_from_keycode(char, True)
        assert keypad.is_pressed(chip_key)
    assert all(keypad.keys)


def test_keys_is_a_snapshot(keypad):
    snapshot = keypad.keys
    keypad.press(0x2)
    assert snapshot[0x2] is False
    assert keypad.keys[0x2] is True


def test_invalid_key_press(keypad):
    with pytest.raises(ValueError):
        keypad.press(0xFF)


def test_invalid_key_release(keypad):
    with pytest.raises(ValueError):
        keypad.release(0x10)


def test_invalid_key_is_pressed(keypad):
    with pytest.raises(ValueError):
        keypad.is_pressed(0x10)