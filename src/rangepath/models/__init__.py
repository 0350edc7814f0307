"""Range models for rangepath."""

from __future__ import annotations

from .range import PathRange

__all__ = ["PathRange"]
