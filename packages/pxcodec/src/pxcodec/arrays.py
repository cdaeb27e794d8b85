# packages/pxcodec/src/pxcodec/arrays.py
from __future__ import annotations
from typing import List, Sequence

import numpy as np

from .rows import PixelRow

__all__ = ["dtype_for_depth", "pixels_to_array", "array_to_pixels"]


def dtype_for_depth(bit_depth: int) -> np.dtype:
    """uint8 jusqu'à 8 bits par canal, uint16 au-delà."""
    return np.dtype(np.uint8) if bit_depth <= 8 else np.dtype(np.uint16)


def pixels_to_array(pixels: Sequence[Sequence[Sequence[int]]], bit_depth: int) -> np.ndarray:
    """Buffer de pixels -> tableau [H, W, C] (uint8 ou uint16)."""
    arr = np.asarray(pixels, dtype=dtype_for_depth(bit_depth))
    if arr.ndim != 3:
        raise ValueError(f"pixels_to_array: expected [H,W,C] pixels, got shape {arr.shape}")
    return arr


def array_to_pixels(arr: np.ndarray) -> List[PixelRow]:
    """
    Tableau [H, W] ou [H, W, C] -> buffer de tuples d'entiers Python.

    Un tableau 2D est lu comme une image à un seul canal.
    """
    a = np.asarray(arr)
    if a.ndim == 2:
        a = a[:, :, None]
    if a.ndim != 3:
        raise ValueError(f"array_to_pixels: expected [H,W] or [H,W,C], got shape {a.shape}")
    if not np.issubdtype(a.dtype, np.integer):
        raise TypeError("array_to_pixels: integer array expected")
    return [[tuple(px) for px in row] for row in a.tolist()]
