# packages/pxcodec/src/pxcodec/rows.py
# -----------------------------------------------------------------------------
# Codec de ligne : scanline (bits packés MSB-first) <-> liste de tuples pixel
# Aucune dépendance à la géométrie d'entrelacement : une ligne = un appel.

from __future__ import annotations
import operator
from typing import List, Optional, Sequence, Tuple

from .config import CodecConfig, DEFAULT_CONFIG
from .errors import (
    ArityMismatch,
    ChannelValueOutOfRange,
    NonZeroPadding,
    RowLengthMismatch,
    TruncatedRow,
)

__all__ = ["Pixel", "PixelRow", "decode_row", "encode_row", "scanline_length"]

Pixel = Tuple[int, ...]
PixelRow = List[Pixel]


def scanline_length(width: int, channels_per_pixel: int, bit_depth: int) -> int:
    """Octets nécessaires pour `width` pixels : ceil(width * cpp * depth / 8)."""
    return (int(width) * int(channels_per_pixel) * int(bit_depth) + 7) // 8


# -----------------------------------------------------------------------------
# DECODE (bits -> pixels)
# -----------------------------------------------------------------------------
def decode_row(
    row_bits: bytes,
    width: int,
    channels_per_pixel: int,
    bit_depth: int,
    config: Optional[CodecConfig] = None,
) -> PixelRow:
    """
    Décode une scanline défiltrée en `width` pixels.

    Paramètres
    ----------
    row_bits : bytes
        Scanline (sans l'octet de type de filtre).
    width : int
        Nombre de pixels à produire.
    channels_per_pixel : int
        Arité de chaque tuple (1..4).
    bit_depth : int
        Bits par canal (1, 2, 4, 8, 16).
    config : CodecConfig | None
        `strict_padding=True` exige ceil(width * cpp * depth / 8) octets et un
        bourrage final nul.

    Retour
    ------
    list[tuple[int, ...]]
        Exactement `width` tuples de `channels_per_pixel` entiers non signés.

    Détails
    -------
    Lecture MSB-first avec un curseur en bits. Une fois `width` pixels lus,
    le reste de la ligne (0 à 7 bits) est du bourrage : jamais interprété.

    Exceptions
    ----------
    TruncatedRow si la ligne contient moins de `width * cpp * depth` bits.
    NonZeroPadding en mode strict si le bourrage n'est pas nul.
    RowLengthMismatch en mode strict si la ligne ne fait pas
    ceil(width * cpp * depth / 8) octets.
    """
    if not isinstance(row_bits, (bytes, bytearray, memoryview)):
        raise TypeError("decode_row: `row_bits` must be bytes")
    cfg = config or DEFAULT_CONFIG
    row = bytes(row_bits)

    n_values = width * channels_per_pixel
    needed = n_values * bit_depth
    available = len(row) * 8
    if available < needed:
        raise TruncatedRow(width, needed, available)

    if cfg.strict_padding:
        expected = (needed + 7) // 8
        if len(row) != expected:
            raise RowLengthMismatch(expected, len(row))
        pad_bits = available - needed  # 0..7 une fois la longueur vérifiée
        if pad_bits and row[-1] & ((1 << pad_bits) - 1):
            raise NonZeroPadding(row[-1] & ((1 << pad_bits) - 1), pad_bits)

    mask = (1 << bit_depth) - 1
    if bit_depth == 8:
        values = list(row[:n_values])
    elif bit_depth == 16:
        values = [(row[i] << 8) | row[i + 1] for i in range(0, 2 * n_values, 2)]
    else:
        # Sous-octet : 8 / depth champs par octet, poids fort en premier
        values = []
        for i in range(n_values):
            bit = i * bit_depth
            shift = 8 - bit_depth - (bit & 7)
            values.append((row[bit >> 3] >> shift) & mask)

    cpp = channels_per_pixel
    return [tuple(values[i:i + cpp]) for i in range(0, n_values, cpp)]


# -----------------------------------------------------------------------------
# ENCODE (pixels -> bits)
# -----------------------------------------------------------------------------
def encode_row(
    pixel_row: Sequence[Sequence[int]],
    bit_depth: int,
    channels_per_pixel: Optional[int] = None,
    config: Optional[CodecConfig] = None,
) -> bytes:
    """
    Encode une ligne de pixels en scanline packée MSB-first.

    Chaque canal occupe exactement `bit_depth` bits. La ligne est complétée
    par (8 - total_bits % 8) % 8 bits à zéro pour tomber sur un octet entier.
    Si `channels_per_pixel` est omis, l'arité du premier pixel fait foi et
    tous les autres doivent la respecter.
    """
    cfg = config or DEFAULT_CONFIG
    if not pixel_row:
        return b""
    arity = int(channels_per_pixel) if channels_per_pixel is not None else len(pixel_row[0])
    mask = (1 << bit_depth) - 1

    out = bytearray()
    acc = 0     # bits en attente (toujours < 8 entre deux pixels)
    n_acc = 0
    total_bits = 0
    for pixel in pixel_row:
        if len(pixel) != arity:
            raise ArityMismatch(arity, len(pixel))
        for channel in pixel:
            if isinstance(channel, bool):
                raise TypeError(f"encode_row: channel values must be integers, got {channel!r}")
            try:
                v = operator.index(channel)
            except TypeError:
                raise TypeError(f"encode_row: channel values must be integers, got {channel!r}") from None
            if v < 0 or v > mask:
                if cfg.check_range:
                    raise ChannelValueOutOfRange(v, bit_depth)
                v &= mask
            acc = (acc << bit_depth) | v
            n_acc += bit_depth
            total_bits += bit_depth
            while n_acc >= 8:
                n_acc -= 8
                out.append((acc >> n_acc) & 0xFF)
            acc &= (1 << n_acc) - 1

    pad_bits = (8 - total_bits % 8) % 8
    if pad_bits:
        out.append((acc << pad_bits) & 0xFF)
    return bytes(out)
