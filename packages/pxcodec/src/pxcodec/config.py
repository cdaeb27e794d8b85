# packages/pxcodec/src/pxcodec/config.py
from __future__ import annotations
import os
from dataclasses import dataclass

__all__ = ["CodecConfig", "DEFAULT_CONFIG", "config_from_env"]


@dataclass(frozen=True, slots=True)
class CodecConfig:
    """
    Configuration **publique et stable** du codec pixel.

    Consommée par `pxcodec.rows`, `pxcodec.no_interlace`, `pxcodec.adam7`
    et le dispatcher `pxcodec.pixels`.

    Champs
    ------
    strict_padding : bool, default=False
        Au décodage, les bits de bourrage en fin de scanline sont ignorés.
        Si True, un bourrage non nul lève `NonZeroPadding`.
    check_range : bool, default=True
        À l'encodage, vérifie que chaque canal est dans [0, 2^bit_depth - 1]
        et lève `ChannelValueOutOfRange` sinon. Si False, la valeur est
        masquée sur `bit_depth` bits (réservé aux appelants qui ont déjà validé).

    Notes
    -----
    - La dataclass est **immuable** (`frozen=True`), partageable entre threads.
    - Surchargeable via l'ENV : `PX_STRICT_PADDING`, `PX_CHECK_RANGE`
      (voir `config_from_env`).
    """

    strict_padding: bool = False
    check_range: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.strict_padding, bool):
            raise ValueError("CodecConfig.strict_padding must be a bool")
        if not isinstance(self.check_range, bool):
            raise ValueError("CodecConfig.check_range must be a bool")


DEFAULT_CONFIG = CodecConfig()


def _flag_from_env(name: str, default: bool) -> bool:
    """
    Lit un booléen depuis l'ENV.

    - "1", "true", "yes", "on" → True
    - "0", "false", "no", "off" → False
    - absent / vide → `default`
    """
    v = os.getenv(name, "").strip().lower()
    if not v:
        return default
    if v in ("1", "true", "yes", "on"):
        return True
    if v in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"{name}: expected a boolean, got {v!r}")


def config_from_env(base: CodecConfig = DEFAULT_CONFIG) -> CodecConfig:
    """Applique `PX_STRICT_PADDING` / `PX_CHECK_RANGE` par-dessus `base`."""
    return CodecConfig(
        strict_padding=_flag_from_env("PX_STRICT_PADDING", base.strict_padding),
        check_range=_flag_from_env("PX_CHECK_RANGE", base.check_range),
    )
