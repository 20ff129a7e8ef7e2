"""Small helpers shared across nconfig modules."""

from __future__ import annotations

from nconfig.utils.text import trim

__all__ = ["trim"]
