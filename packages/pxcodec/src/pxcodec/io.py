# packages/pxcodec/src/pxcodec/io.py
# [STORE:OVERWRITE] — scanlines brutes (défiltrées) concaténées, sans framing
from __future__ import annotations
from pathlib import Path
from typing import List, Sequence

from .adam7 import pass_sizes
from .descriptor import ADAM7, NO_INTERLACE, ImageDescriptor
from .errors import UnsupportedInterlaceMethod
from .rows import scanline_length

__all__ = ["row_lengths", "split_scanlines", "join_scanlines", "read_scanlines", "write_scanlines"]


def row_lengths(descriptor: ImageDescriptor) -> List[int]:
    """Taille (octets) de chaque scanline attendue, dans l'ordre du flux."""
    cpp, depth = descriptor.channels_per_pixel, descriptor.bit_depth
    if descriptor.interlace_method == NO_INTERLACE:
        return [descriptor.scanline_length] * descriptor.height
    if descriptor.interlace_method == ADAM7:
        out: List[int] = []
        for w, h in pass_sizes(descriptor.width, descriptor.height):
            if w and h:
                out.extend([scanline_length(w, cpp, depth)] * h)
        return out
    raise UnsupportedInterlaceMethod(descriptor.interlace_method)


def split_scanlines(descriptor: ImageDescriptor, data: bytes) -> List[bytes]:
    """Découpe un buffer brut en scanlines selon la géométrie du descripteur."""
    s = memoryview(data)
    off = 0
    out: List[bytes] = []
    for n in row_lengths(descriptor):
        if off + n > len(s):
            raise ValueError("scanlines: truncated buffer")
        out.append(bytes(s[off:off + n]))
        off += n
    if off != len(s):
        raise ValueError("scanlines: trailing bytes")
    return out


def join_scanlines(scanlines: Sequence[bytes]) -> bytes:
    return b"".join(bytes(s) for s in scanlines)


def read_scanlines(path: str | Path, descriptor: ImageDescriptor) -> List[bytes]:
    """Lit un fichier de scanlines brutes et le découpe ligne par ligne."""
    return split_scanlines(descriptor, Path(path).read_bytes())


def write_scanlines(scanlines: Sequence[bytes], path: str | Path) -> None:
    """Écriture atomique vers `path`.  # [STORE:OVERWRITE]"""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    tmp = p.with_suffix(p.suffix + ".tmp")
    tmp.write_bytes(join_scanlines(scanlines))
    tmp.replace(p)
