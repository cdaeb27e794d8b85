from __future__ import annotations
import json

import numpy as np
import pytest
from PIL import Image

from pxwf.cli import decode as decode_cli
from pxwf.cli import encode as encode_cli


def test_cli_png_roundtrip_adam7(tmp_path):
    arr = (np.arange(4 * 5 * 3) % 256).astype(np.uint8).reshape(4, 5, 3)
    src = tmp_path / "rgb.png"
    Image.fromarray(arr).save(src)

    enc_dir = tmp_path / "enc"
    assert encode_cli.main([str(src), "--out", str(enc_dir), "--interlace", "1"]) == 0
    meta = json.loads((enc_dir / "rgb.json").read_text(encoding="utf-8"))
    assert meta == {"width": 5, "height": 4, "bit_depth": 8, "channels_per_pixel": 3, "interlace_method": 1}

    dec_dir = tmp_path / "dec"
    rc = decode_cli.main([str(enc_dir / "rgb.scan"), "--out", str(dec_dir),
                          "--width", "5", "--height", "4", "--color-type", "2", "--interlace", "1"])
    assert rc == 0
    with Image.open(dec_dir / "rgb.png") as im:
        np.testing.assert_array_equal(np.asarray(im), arr)


def test_cli_npy_one_bit(tmp_path):
    arr = np.array([[1, 0, 1, 1, 0]], dtype=np.uint8)
    src = tmp_path / "mask.npy"
    np.save(src, arr)

    enc_dir = tmp_path / "enc"
    assert encode_cli.main([str(src), "--out", str(enc_dir), "--bit-depth", "1"]) == 0
    assert (enc_dir / "mask.scan").read_bytes() == bytes([0b10110000])

    dec_dir = tmp_path / "dec"
    rc = decode_cli.main([str(enc_dir / "mask.scan"), "--out", str(dec_dir), "--format", "npy",
                          "--width", "5", "--height", "1", "--bit-depth", "1", "--channels", "1"])
    assert rc == 0
    np.testing.assert_array_equal(np.load(dec_dir / "mask.npy")[:, :, 0], arr)


def test_cli_decode_reports_truncated_input(tmp_path):
    src = tmp_path / "short.scan"
    src.write_bytes(bytes(5))
    rc = decode_cli.main([str(src), "--out", str(tmp_path / "dec"),
                          "--width", "2", "--height", "1", "--channels", "3"])
    assert rc == 1


def test_cli_decode_requires_one_channel_source(tmp_path):
    rc = decode_cli.main([str(tmp_path / "x.scan"), "--out", str(tmp_path),
                          "--width", "2", "--height", "1"])
    assert rc == 2


def test_cli_strict_padding_is_decode_only(tmp_path):
    src = tmp_path / "mask.scan"
    src.write_bytes(bytes([0b10110111]))  # bourrage 0b111 non nul
    args = [str(src), "--out", str(tmp_path / "dec"), "--format", "npy",
            "--width", "5", "--height", "1", "--bit-depth", "1", "--channels", "1"]
    assert decode_cli.main(args) == 0
    assert decode_cli.main(args + ["--strict-padding"]) == 1

    with pytest.raises(SystemExit):
        encode_cli.parse_args([str(src), "--out", str(tmp_path), "--strict-padding"])
