from chipvm.timers import Timers


def test_new_timers_are_zero():
    timers = Timers()
    assert timers.delay == 0
    assert timers.sound == 0


def test_set_delay():
    timers = Timers()
    timers.delay = 100
    assert timers.tick() is False
    assert timers.delay == 99


def test_set_sound():
    timers = Timers(sound=50)
    assert timers.sound == 50
    assert timers.is_sound_active()


def test_reset():
    timers = Timers(delay=100, sound=50)
    timers.reset()
    assert timers.delay == 0
    assert timers.sound == 0


def test_tick_decrements_both():
    timers = Timers(delay=10, sound=5)
    assert timers.tick() is True
    assert timers.delay == 9
    assert timers.sound == 4


def test_tick_stops_at_zero():
    timers = Timers(delay=1, sound=1)
    timers.tick()
    assert timers.delay == 0
    assert timers.sound == 0
    timers.tick()
    assert timers.delay == 0
    assert timers.sound == 0


def test_is_sound_active():
    timers = Timers()
    assert not timers.is_sound_active()
    timers.sound = 1
    assert timers.is_sound_active()
    assert timers.tick() is False
    assert not timers.is_sound_active()