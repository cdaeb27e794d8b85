# packages/pxcodec/src/pxcodec/__init__.py
from __future__ import annotations

"""pxcodec - codec pixel (public surface).

Scanlines défiltrées <-> buffers de tuples pixel, bit depth 1/2/4/8/16,
1 à 4 canaux, sans entrelacement ou Adam7. Le pont numpy (`pxcodec.arrays`)
n'est pas importé par défaut.
"""

__version__ = "1.0.0"

# API publique (stable)
from .config import CodecConfig, config_from_env
from .descriptor import ADAM7, NO_INTERLACE, ImageDescriptor, channels_per_pixel
from .errors import (
    ArityMismatch,
    ChannelValueOutOfRange,
    NonZeroPadding,
    PixelCodecError,
    RowLengthMismatch,
    TruncatedRow,
    UnsupportedInterlaceMethod,
)
from .rows import decode_row, encode_row, scanline_length
from .pixels import encode_scanlines, extract_pixels
from .io import read_scanlines, write_scanlines

__all__ = [
    "__version__",
    "CodecConfig", "config_from_env",
    "ImageDescriptor", "channels_per_pixel", "NO_INTERLACE", "ADAM7",
    "PixelCodecError", "UnsupportedInterlaceMethod", "TruncatedRow",
    "ChannelValueOutOfRange", "ArityMismatch", "NonZeroPadding", "RowLengthMismatch",
    "decode_row", "encode_row", "scanline_length",
    "extract_pixels", "encode_scanlines",
    "read_scanlines", "write_scanlines",
]
