from __future__ import annotations
import argparse, json, logging, sys
from dataclasses import asdict
from pathlib import Path
from PIL import Image
import numpy as np

from .common import setup_logging, ensure_dir, add_common_args, CHANNELS_BY_MODE
from pxcodec import ImageDescriptor, config_from_env, encode_scanlines, write_scanlines
from pxcodec.arrays import array_to_pixels

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="pxcodec — Encode PNG / NPY -> scanlines brutes")
    p.add_argument("images", nargs="+", help="Images .png (8 bits) ou tableaux .npy [H,W(,C)]")
    add_common_args(p)
    p.add_argument("--bit-depth", type=int, default=8, help="Bits par canal (NPY uniquement)")
    return p.parse_args(argv)

def load_array(p: Path, bit_depth: int) -> tuple[np.ndarray, int]:
    """Charge une image -> (tableau [H,W,C], bit_depth)."""
    if p.suffix.lower() == ".npy":
        arr = np.load(p)
        if arr.ndim == 2:
            arr = arr[:, :, None]
        return arr, bit_depth
    with Image.open(p) as im:
        if im.mode not in CHANNELS_BY_MODE:
            raise ValueError(f"unsupported PIL mode {im.mode!r} (expected L, LA, RGB or RGBA)")
        arr = np.asarray(im, dtype=np.uint8)
    if arr.ndim == 2:
        arr = arr[:, :, None]
    return arr, 8

def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(Path(args.log_file) if args.log_file else None, verbose=args.verbose)
    cfg = config_from_env()

    out_dir = Path(args.out); ensure_dir(out_dir)
    ok = 0
    for i, p in enumerate(args.images, 1):
        p = Path(p)
        try:
            logging.info("[%d/%d] encode: %s", i, len(args.images), p)
            arr, depth = load_array(p, args.bit_depth)
            h, w, c = arr.shape
            desc = ImageDescriptor(width=w, height=h, bit_depth=depth,
                                   channels_per_pixel=c, interlace_method=args.interlace)
            scanlines = encode_scanlines(desc, array_to_pixels(arr), cfg)
            target = out_dir / f"{p.stem}.scan"
            write_scanlines(scanlines, target)
            (out_dir / f"{p.stem}.json").write_text(json.dumps(asdict(desc), indent=2), encoding="utf-8")
            logging.info("→ OK %s (%d scanlines)", target, len(scanlines))
            ok += 1
        except Exception as e:
            logging.exception("Échec encode %s: %s", p, e)
    return 0 if ok == len(args.images) else 1

if __name__ == "__main__":
    sys.exit(main())
