from __future__ import annotations
import argparse, logging, sys
from pathlib import Path
from typing import Optional

from pxcodec import ImageDescriptor

#: Nombre de canaux -> mode PIL (8 bits par canal)
PIL_MODES = {1: "L", 2: "LA", 3: "RGB", 4: "RGBA"}
CHANNELS_BY_MODE = {v: k for k, v in PIL_MODES.items()}

def setup_logging(log_file: Optional[Path], verbose: bool = True) -> None:
    log_fmt = "[%(asctime)s] %(levelname)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    level = logging.DEBUG if verbose else logging.INFO
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(level=level, format=log_fmt, datefmt=datefmt, handlers=handlers)

def ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)

def add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--out", required=True, help="Dossier de sortie")
    p.add_argument("--log-file", default=None)
    p.add_argument("--verbose", action="store_true")
    p.add_argument("--interlace", type=int, default=0, help="0 = séquentiel, 1 = Adam7")

def add_descriptor_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--width", type=int, required=True)
    p.add_argument("--height", type=int, required=True)
    p.add_argument("--bit-depth", type=int, default=8)
    p.add_argument("--channels", type=int, default=None,
                   help="Canaux par pixel (1..4) ; exclusif avec --color-type")
    p.add_argument("--color-type", type=int, default=None,
                   help="Type couleur PNG (0, 2, 3, 4, 6)")

def descriptor_from_args(args: argparse.Namespace) -> ImageDescriptor:
    if (args.channels is None) == (args.color_type is None):
        raise ValueError("exactly one of --channels / --color-type is required")
    if args.color_type is not None:
        return ImageDescriptor.from_color_type(args.width, args.height, args.bit_depth,
                                               args.color_type, args.interlace)
    return ImageDescriptor(args.width, args.height, args.bit_depth, args.channels, args.interlace)
