# packages/pxwf/src/pxwf/__init__.py
from __future__ import annotations

# on n’importe PAS le sous-module cli ici pour éviter les imports lourds (PIL) au top-level
__all__: list[str] = []

__version__ = "1.0.0"
