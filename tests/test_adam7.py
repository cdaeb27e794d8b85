from __future__ import annotations
import pytest

from pxcodec import ADAM7, ImageDescriptor, encode_scanlines, extract_pixels
from pxcodec.adam7 import PASSES, pass_sizes


def test_pass_sizes_full_block():
    assert pass_sizes(8, 8) == [(1, 1), (1, 1), (2, 1), (2, 2), (4, 2), (4, 4), (8, 4)]
    assert sum(w * h for w, h in pass_sizes(8, 8)) == 64


def test_pass_sizes_single_pixel():
    sizes = pass_sizes(1, 1)
    assert sizes[0] == (1, 1)
    assert all(w == 0 or h == 0 for w, h in sizes[1:])


@pytest.mark.parametrize("width,height", [(1, 1), (3, 2), (5, 9), (8, 8), (17, 11)])
def test_pass_sizes_cover_every_pixel_once(width, height):
    seen = set()
    for xs, ys, dx, dy in PASSES:
        for y in range(ys, height, dy):
            for x in range(xs, width, dx):
                assert (x, y) not in seen
                seen.add((x, y))
    assert len(seen) == width * height
    assert sum(w * h for w, h in pass_sizes(width, height)) == width * height


def test_adam7_encode_small_gray8():
    # 3x2, valeur = index du pixel
    desc = ImageDescriptor(width=3, height=2, bit_depth=8, channels_per_pixel=1, interlace_method=ADAM7)
    pixels = [[(0,), (1,), (2,)], [(3,), (4,), (5,)]]
    scanlines = encode_scanlines(desc, pixels)
    # passes non vides : 1 -> (0,0), 4 -> (2,0), 6 -> (1,0), 7 -> ligne 1
    assert scanlines == [b"\x00", b"\x02", b"\x01", b"\x03\x04\x05"]
    assert extract_pixels(desc, scanlines) == pixels


def test_adam7_roundtrip_sub_byte_rgba():
    desc = ImageDescriptor(width=11, height=9, bit_depth=2, channels_per_pixel=4, interlace_method=ADAM7)
    pixels = [[((x + y) % 4, x % 4, y % 4, 3) for x in range(11)] for y in range(9)]
    scanlines = encode_scanlines(desc, pixels)
    assert len(scanlines) == sum(h for w, h in pass_sizes(11, 9) if w and h)
    assert extract_pixels(desc, scanlines) == pixels


def test_adam7_wrong_scanline_count():
    desc = ImageDescriptor(width=3, height=2, bit_depth=8, channels_per_pixel=1, interlace_method=ADAM7)
    with pytest.raises(ValueError):
        extract_pixels(desc, [b"\x00", b"\x02", b"\x01"])
