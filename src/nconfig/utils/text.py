"""ASCII whitespace handling."""

from __future__ import annotations

__all__ = ["WHITESPACE", "trim"]

WHITESPACE = " \t\r\n"


def trim(text: str) -> str:
    """Strip leading and trailing ASCII whitespace (space, tab, CR, LF).

    Unlike ``str.strip()`` with no arguments, other Unicode whitespace such
    as non-breaking spaces is preserved.
    """
    return text.strip(WHITESPACE)
