# packages/pxcodec/src/pxcodec/no_interlace.py
from __future__ import annotations
from concurrent.futures import Executor
from functools import partial
from typing import List, Optional, Sequence

from .config import CodecConfig
from .descriptor import ImageDescriptor
from .rows import PixelRow, decode_row, encode_row

__all__ = ["extract", "encode"]


def extract(
    descriptor: ImageDescriptor,
    scanlines: Sequence[bytes],
    config: Optional[CodecConfig] = None,
    executor: Optional[Executor] = None,
) -> List[PixelRow]:
    """
    Décode toutes les scanlines (méthode 0) en un buffer `height x width`.

    Les lignes sont indépendantes : avec un `executor`, elles sont décodées
    en parallèle et `executor.map` conserve l'ordre d'origine.
    """
    if len(scanlines) != descriptor.height:
        raise ValueError(
            f"no_interlace.extract: expected {descriptor.height} scanlines, got {len(scanlines)}"
        )
    fn = partial(
        decode_row,
        width=descriptor.width,
        channels_per_pixel=descriptor.channels_per_pixel,
        bit_depth=descriptor.bit_depth,
        config=config,
    )
    mapper = executor.map if executor is not None else map
    return list(mapper(fn, scanlines))


def encode(
    descriptor: ImageDescriptor,
    pixels: Sequence[Sequence[Sequence[int]]],
    config: Optional[CodecConfig] = None,
    executor: Optional[Executor] = None,
) -> List[bytes]:
    """Encode chaque ligne de pixels en scanline non filtrée (méthode 0)."""
    if len(pixels) != descriptor.height:
        raise ValueError(
            f"no_interlace.encode: expected {descriptor.height} rows, got {len(pixels)}"
        )
    for y, row in enumerate(pixels):
        if len(row) != descriptor.width:
            raise ValueError(
                f"no_interlace.encode: row {y} has {len(row)} pixels, expected {descriptor.width}"
            )
    fn = partial(
        encode_row,
        bit_depth=descriptor.bit_depth,
        channels_per_pixel=descriptor.channels_per_pixel,
        config=config,
    )
    mapper = executor.map if executor is not None else map
    return list(mapper(fn, pixels))
