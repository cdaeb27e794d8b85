# packages/pxcodec/src/pxcodec/descriptor.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict

__all__ = [
    "BIT_DEPTHS",
    "COLOR_TYPE_CHANNELS",
    "NO_INTERLACE",
    "ADAM7",
    "ImageDescriptor",
    "channels_per_pixel",
]

#: Profondeurs de bits acceptées (bits par canal)
BIT_DEPTHS = (1, 2, 4, 8, 16)

#: Méthodes d'entrelacement connues (le dispatcher valide la valeur)
NO_INTERLACE: int = 0
ADAM7: int = 1

#: Type couleur PNG -> nombre de canaux par pixel
COLOR_TYPE_CHANNELS: Dict[int, int] = {
    0: 1,  # grayscale
    2: 3,  # RGB
    3: 1,  # palette (index)
    4: 2,  # grayscale + alpha
    6: 4,  # RGBA
}


def channels_per_pixel(color_type: int) -> int:
    try:
        return COLOR_TYPE_CHANNELS[int(color_type)]
    except KeyError:
        raise ValueError(f"unknown color type {color_type}") from None


@dataclass(frozen=True, slots=True)
class ImageDescriptor:
    """
    Descripteur d'image immuable (géométrie + format des canaux).

    Champs
    ------
    width, height : int
        Dimensions en pixels, >= 1.
    bit_depth : int
        Bits par canal, dans {1, 2, 4, 8, 16}.
    channels_per_pixel : int
        Arité des tuples pixel, dans [1..4].
    interlace_method : int, default=0
        0 = séquentiel, 1 = Adam7. Non validé ici : c'est le dispatcher
        (`pxcodec.pixels`) qui refuse les valeurs inconnues.
    """

    width: int
    height: int
    bit_depth: int
    channels_per_pixel: int
    interlace_method: int = NO_INTERLACE

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError("ImageDescriptor.width must be >= 1")
        if self.height < 1:
            raise ValueError("ImageDescriptor.height must be >= 1")
        if self.bit_depth not in BIT_DEPTHS:
            raise ValueError(f"ImageDescriptor.bit_depth must be one of {BIT_DEPTHS}")
        if not (1 <= self.channels_per_pixel <= 4):
            raise ValueError("ImageDescriptor.channels_per_pixel must be in [1..4]")

    @property
    def pixel_size(self) -> int:
        """Largeur exacte d'un pixel en bits (avant bourrage)."""
        return self.channels_per_pixel * self.bit_depth

    @property
    def scanline_length(self) -> int:
        """Taille en octets d'une scanline : ceil(width * pixel_size / 8)."""
        return (self.width * self.pixel_size + 7) // 8

    @property
    def max_value(self) -> int:
        return (1 << self.bit_depth) - 1

    @staticmethod
    def from_color_type(width: int, height: int, bit_depth: int, color_type: int,
                        interlace_method: int = NO_INTERLACE) -> "ImageDescriptor":
        return ImageDescriptor(
            width=int(width),
            height=int(height),
            bit_depth=int(bit_depth),
            channels_per_pixel=channels_per_pixel(color_type),
            interlace_method=int(interlace_method),
        )
