# packages/pxcodec/src/pxcodec/pixels.py
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from . import adam7, no_interlace
from .config import CodecConfig
from .descriptor import ADAM7, NO_INTERLACE, ImageDescriptor
from .errors import UnsupportedInterlaceMethod
from .rows import PixelRow

__all__ = ["extract_pixels", "encode_scanlines"]

log = logging.getLogger("pxcodec.pixels")


def extract_pixels(
    descriptor: ImageDescriptor,
    scanlines: Sequence[bytes],
    config: Optional[CodecConfig] = None,
) -> List[PixelRow]:
    """
    Scanlines défiltrées -> buffer de pixels `height x width`.

    - méthode 0 → `no_interlace.extract`
    - méthode 1 → `adam7.extract`
    - sinon     → `UnsupportedInterlaceMethod` (avant tout décodage)
    """
    method = descriptor.interlace_method
    if method == NO_INTERLACE:
        log.debug("extract: no interlace, %dx%d, %d scanlines",
                  descriptor.width, descriptor.height, len(scanlines))
        return no_interlace.extract(descriptor, scanlines, config)
    if method == ADAM7:
        log.debug("extract: adam7, %dx%d, %d scanlines",
                  descriptor.width, descriptor.height, len(scanlines))
        return adam7.extract(descriptor, scanlines, config)
    raise UnsupportedInterlaceMethod(method)


def encode_scanlines(
    descriptor: ImageDescriptor,
    pixels: Sequence[Sequence[Sequence[int]]],
    config: Optional[CodecConfig] = None,
) -> List[bytes]:
    """Buffer de pixels -> scanlines non filtrées, selon la méthode d'entrelacement."""
    method = descriptor.interlace_method
    if method == NO_INTERLACE:
        log.debug("encode: no interlace, %dx%d", descriptor.width, descriptor.height)
        return no_interlace.encode(descriptor, pixels, config)
    if method == ADAM7:
        log.debug("encode: adam7, %dx%d", descriptor.width, descriptor.height)
        return adam7.encode(descriptor, pixels, config)
    raise UnsupportedInterlaceMethod(method)
