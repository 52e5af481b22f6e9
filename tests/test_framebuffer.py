import pytest

from castcaper.framebuffer import FrameBuffer


def test_new_buffer_is_black():
    fb = FrameBuffer(4, 3)
    assert fb.pixels == [0] * 12
    assert (fb.width, fb.height) == (4, 3)


def test_set_get_round_trip():
    fb = FrameBuffer(5, 5)
    fb.set(2, 3, 0xFF0000)
    assert fb.get(2, 3) == 0xFF0000
    assert fb.pixels[3 * 5 + 2] == 0xFF0000
    assert fb.get(3, 2) == 0


def test_clear_fills_every_pixel():
    fb = FrameBuffer(6, 2)
    fb.set(1, 1, 0x123456)
    fb.clear(0xABCDEF)
    assert set(fb.pixels) == {0xABCDEF}
    assert len(fb.pixels) == 12


def test_colour_is_kept_to_32_bits():
    fb = FrameBuffer(2, 2)
    fb.set(0, 0, 0x1FFFFFFFF)
    assert fb.get(0, 0) == 0xFFFFFFFF


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_out_of_bounds_access_raises(x, y):
    fb = FrameBuffer(4, 3)
    with pytest.raises(IndexError):
        fb.get(x, y)
    with pytest.raises(IndexError):
        fb.set(x, y, 1)


@pytest.mark.parametrize("width, height", [(0, 4), (4, 0), (-2, 3)])
def test_invalid_size_raises(width, height):
    with pytest.raises(ValueError):
        FrameBuffer(width, height)