# packages/pxcodec/src/pxcodec/adam7.py
# -----------------------------------------------------------------------------
# Entrelacement Adam7 (méthode 1) : 7 passes sur des sous-images à pas fixe.
# Chaque ligne de passe est (dé)codée par le même codec de ligne que la
# méthode 0 ; seule la géométrie change.

from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

from .config import CodecConfig
from .descriptor import ImageDescriptor
from .rows import Pixel, PixelRow, decode_row, encode_row

__all__ = ["PASSES", "pass_sizes", "extract", "encode"]

#: (x_start, y_start, x_step, y_step) pour chaque passe
PASSES: Tuple[Tuple[int, int, int, int], ...] = (
    (0, 0, 8, 8),
    (4, 0, 8, 8),
    (0, 4, 4, 8),
    (2, 0, 4, 4),
    (0, 2, 2, 4),
    (1, 0, 2, 2),
    (0, 1, 1, 2),
)


def _span(length: int, start: int, step: int) -> int:
    if start >= length:
        return 0
    return (length - start + step - 1) // step


def pass_sizes(width: int, height: int) -> List[Tuple[int, int]]:
    """
    Dimensions (largeur, hauteur) de la sous-image de chaque passe.

    Une passe de largeur ou hauteur nulle ne produit aucune scanline.
    """
    return [(_span(width, xs, dx), _span(height, ys, dy)) for xs, ys, dx, dy in PASSES]


def _expected_count(descriptor: ImageDescriptor) -> int:
    return sum(h for w, h in pass_sizes(descriptor.width, descriptor.height) if w and h)


def extract(
    descriptor: ImageDescriptor,
    scanlines: Sequence[bytes],
    config: Optional[CodecConfig] = None,
) -> List[PixelRow]:
    """
    Reconstruit le buffer complet `height x width` depuis les scanlines
    des passes, concaténées dans l'ordre des passes.
    """
    expected = _expected_count(descriptor)
    if len(scanlines) != expected:
        raise ValueError(f"adam7.extract: expected {expected} scanlines, got {len(scanlines)}")

    grid: List[List[Optional[Pixel]]] = [[None] * descriptor.width for _ in range(descriptor.height)]
    cursor = 0
    for (xs, ys, dx, dy), (pw, ph) in zip(PASSES, pass_sizes(descriptor.width, descriptor.height)):
        if not (pw and ph):
            continue
        for j in range(ph):
            row = decode_row(
                scanlines[cursor], pw, descriptor.channels_per_pixel, descriptor.bit_depth, config
            )
            cursor += 1
            target = grid[ys + j * dy]
            for i, pixel in enumerate(row):
                target[xs + i * dx] = pixel
    return grid  # type: ignore[return-value]


def encode(
    descriptor: ImageDescriptor,
    pixels: Sequence[Sequence[Sequence[int]]],
    config: Optional[CodecConfig] = None,
) -> List[bytes]:
    """Découpe le buffer en 7 passes et encode chaque ligne de passe."""
    if len(pixels) != descriptor.height:
        raise ValueError(f"adam7.encode: expected {descriptor.height} rows, got {len(pixels)}")
    for y, row in enumerate(pixels):
        if len(row) != descriptor.width:
            raise ValueError(
                f"adam7.encode: row {y} has {len(row)} pixels, expected {descriptor.width}"
            )

    out: List[bytes] = []
    for xs, ys, dx, dy in PASSES:
        if xs >= descriptor.width:
            continue
        for y in range(ys, descriptor.height, dy):
            sub = list(pixels[y][xs::dx])
            out.append(encode_row(sub, descriptor.bit_depth, descriptor.channels_per_pixel, config))
    return out
