# packages/pxcodec/src/pxcodec/errors.py
from __future__ import annotations

"""Erreurs du codec pixel.

Toutes dérivent de `ValueError` : un appelant qui attrape `ValueError`
(comme pour le header ou les records) continue de fonctionner.
"""

__all__ = [
    "PixelCodecError",
    "UnsupportedInterlaceMethod",
    "TruncatedRow",
    "ChannelValueOutOfRange",
    "ArityMismatch",
    "NonZeroPadding",
    "RowLengthMismatch",
]


class PixelCodecError(ValueError):
    """Base commune des erreurs levées par pxcodec."""


class UnsupportedInterlaceMethod(PixelCodecError):
    def __init__(self, method: int) -> None:
        self.method = method
        super().__init__(f"unsupported interlace method {method}")


class TruncatedRow(PixelCodecError):
    """Scanline trop courte pour fournir `width` pixels complets."""

    def __init__(self, width: int, needed_bits: int, available_bits: int) -> None:
        self.width = width
        self.needed_bits = needed_bits
        self.available_bits = available_bits
        super().__init__(
            f"truncated row: {width} pixels need {needed_bits} bits, got {available_bits}"
        )


class ChannelValueOutOfRange(PixelCodecError):
    def __init__(self, value: int, bit_depth: int) -> None:
        self.value = value
        self.bit_depth = bit_depth
        super().__init__(
            f"channel value {value} out of range [0, {(1 << bit_depth) - 1}] for bit depth {bit_depth}"
        )


class ArityMismatch(PixelCodecError):
    """Nombre de canaux d'un pixel != channels_per_pixel."""

    def __init__(self, expected: int, got: int) -> None:
        self.expected = expected
        self.got = got
        super().__init__(f"pixel arity mismatch: expected {expected} channels, got {got}")


class RowLengthMismatch(PixelCodecError):
    # Uniquement en mode strict : la scanline doit faire ceil(width * pixel_size / 8) octets
    def __init__(self, expected: int, got: int) -> None:
        self.expected = expected
        self.got = got
        super().__init__(f"scanline length mismatch: expected {expected} bytes, got {got}")


class NonZeroPadding(PixelCodecError):
    # Uniquement en mode strict (CodecConfig.strict_padding)
    def __init__(self, padding: int, pad_bits: int) -> None:
        self.padding = padding
        self.pad_bits = pad_bits
        super().__init__(f"non-zero padding 0b{padding:0{pad_bits}b} in the last {pad_bits} bits")
