from __future__ import annotations
import argparse, logging, sys
from pathlib import Path
from PIL import Image
import numpy as np

from .common import setup_logging, ensure_dir, add_common_args, add_descriptor_args, descriptor_from_args
from pxcodec import CodecConfig, ImageDescriptor, config_from_env, extract_pixels, read_scanlines
from pxcodec.arrays import pixels_to_array

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="pxcodec — Décode des scanlines brutes -> PNG / NPY")
    p.add_argument("scanlines", nargs="+", help="Fichiers de scanlines défiltrées concaténées")
    add_common_args(p)
    add_descriptor_args(p)
    p.add_argument("--format", choices=("png", "npy"), default="png")
    p.add_argument("--strict-padding", action="store_true",
                   help="Refuse une scanline mal dimensionnée ou un bourrage non nul")
    return p.parse_args(argv)

def save_png(arr: np.ndarray, desc: ImageDescriptor, path: Path) -> None:
    if desc.bit_depth != 8:
        raise ValueError(f"PNG output needs bit depth 8, got {desc.bit_depth} (use --format npy)")
    if desc.channels_per_pixel == 1:
        arr = arr[:, :, 0]
    Image.fromarray(arr).save(path)

def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(Path(args.log_file) if args.log_file else None, verbose=args.verbose)

    try:
        desc = descriptor_from_args(args)
    except ValueError as e:
        logging.error("Descripteur invalide: %s", e)
        return 2
    cfg = config_from_env(CodecConfig(strict_padding=args.strict_padding))

    out_dir = Path(args.out); ensure_dir(out_dir)
    ok = 0
    for i, p in enumerate(args.scanlines, 1):
        p = Path(p)
        try:
            logging.info("[%d/%d] decode: %s", i, len(args.scanlines), p)
            pixels = extract_pixels(desc, read_scanlines(p, desc), cfg)
            arr = pixels_to_array(pixels, desc.bit_depth)
            target = out_dir / f"{p.stem}.{args.format}"
            if args.format == "png":
                save_png(arr, desc, target)
            else:
                np.save(target, arr)
            logging.info("→ OK %s", target)
            ok += 1
        except Exception as e:
            logging.exception("Échec decode %s: %s", p, e)
    return 0 if ok == len(args.scanlines) else 1

if __name__ == "__main__":
    sys.exit(main())
