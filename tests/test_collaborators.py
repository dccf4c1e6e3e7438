import pytest

from chip8vm import FrameBuffer, KeyState, RandomSource


def test_framebuffer_draw_and_collision():
    fb = FrameBuffer()
    assert not fb.draw(0, 0, b"\xc0")
    assert fb.pixels[0, 0] == 1 and fb.pixels[0, 1] == 1
    # drawing the same sprite again erases it and reports the hit
    assert fb.draw(0, 0, b"\xc0")
    assert fb.pixels.sum() == 0


def test_framebuffer_wraps_at_edges():
    fb = FrameBuffer()
    fb.draw(63, 31, b"\xc0\xc0")
    assert fb.pixels[31, 63] == 1
    assert fb.pixels[31, 0] == 1
    assert fb.pixels[0, 63] == 1
    assert fb.pixels[0, 0] == 1


def test_framebuffer_start_position_wraps():
    fb = FrameBuffer()
    fb.draw(64 + 2, 32 + 1, b"\x80")
    assert fb.pixels[1, 2] == 1


def test_framebuffer_clear():
    fb = FrameBuffer()
    fb.draw(5, 5, b"\xff")
    fb.dirty = False
    fb.clear()
    assert fb.pixels.sum() == 0
    assert fb.dirty


def test_key_state():
    keys = KeyState()
    assert keys.await_key() is None
    keys.press(0xC)
    keys.press(0x3)
    assert keys.is_key_down(0xC)
    assert keys.await_key() == 0x3
    keys.release(0x3)
    assert keys.await_key() == 0xC
    keys.release_all()
    assert not keys.is_key_down(0xC)


def test_key_state_rejects_unknown_keys():
    keys = KeyState()
    with pytest.raises(ValueError):
        keys.press(16)


def test_random_source_is_seedable():
    a = RandomSource(seed=1234)
    b = RandomSource(seed=1234)
    values = [a.random_byte() for _ in range(8)]
    assert values == [b.random_byte() for _ in range(8)]
    assert all(0 <= x <= 0xFF for x in values)
