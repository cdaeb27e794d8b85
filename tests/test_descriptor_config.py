from __future__ import annotations
import dataclasses

import pytest

from pxcodec import CodecConfig, ImageDescriptor, channels_per_pixel, config_from_env


def test_descriptor_derived_sizes():
    d = ImageDescriptor(width=5, height=2, bit_depth=1, channels_per_pixel=1)
    assert d.pixel_size == 1
    assert d.scanline_length == 1
    d = ImageDescriptor(width=3, height=1, bit_depth=16, channels_per_pixel=4)
    assert d.pixel_size == 64 and d.scanline_length == 24
    assert d.max_value == 65535


def test_descriptor_is_immutable():
    d = ImageDescriptor(width=1, height=1, bit_depth=8, channels_per_pixel=3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        d.width = 2  # type: ignore[misc]


@pytest.mark.parametrize("kw", [
    dict(width=0), dict(height=0), dict(bit_depth=3), dict(bit_depth=32),
    dict(channels_per_pixel=0), dict(channels_per_pixel=5),
])
def test_descriptor_bounds(kw):
    base = dict(width=4, height=4, bit_depth=8, channels_per_pixel=3)
    base.update(kw)
    with pytest.raises(ValueError):
        ImageDescriptor(**base)


def test_interlace_method_not_checked_by_descriptor():
    d = ImageDescriptor(width=1, height=1, bit_depth=8, channels_per_pixel=1, interlace_method=9)
    assert d.interlace_method == 9


def test_color_type_table():
    assert [channels_per_pixel(t) for t in (0, 2, 3, 4, 6)] == [1, 3, 1, 2, 4]
    with pytest.raises(ValueError):
        channels_per_pixel(5)
    d = ImageDescriptor.from_color_type(10, 4, 16, color_type=4, interlace_method=1)
    assert (d.channels_per_pixel, d.interlace_method) == (2, 1)


def test_config_defaults_and_validation():
    cfg = CodecConfig()
    assert cfg.strict_padding is False and cfg.check_range is True
    with pytest.raises(ValueError):
        CodecConfig(strict_padding="yes")  # type: ignore[arg-type]


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("PX_STRICT_PADDING", " True ")
    monkeypatch.setenv("PX_CHECK_RANGE", "0")
    cfg = config_from_env()
    assert cfg.strict_padding is True and cfg.check_range is False

    monkeypatch.delenv("PX_STRICT_PADDING")
    monkeypatch.delenv("PX_CHECK_RANGE")
    assert config_from_env(CodecConfig(strict_padding=True)) == CodecConfig(strict_padding=True)

    monkeypatch.setenv("PX_STRICT_PADDING", "maybe")
    with pytest.raises(ValueError):
        config_from_env()
