"""Text helpers shared by article extraction and SEO derivation.

Lengths are counted in characters of the Python string, never in words, so
stored summaries and descriptions cut at exactly the same place every time.
"""
from __future__ import annotations

ELLIPSIS = "..."


def truncate(text: str, max_length: int) -> str:
    """Return *text* unchanged if it fits in *max_length*, else its first *max_length* chars.

    No ellipsis is added here; callers wanting one use :func:`ellipsize`.
    """
    if len(text) <= max_length:
        return text
    return text[:max_length]


def ellipsize(text: str, max_length: int) -> str:
    """Cut *text* to *max_length* chars including a trailing ``...`` when too long."""
    if len(text) <= max_length:
        return text
    return truncate(text, max_length - len(ELLIPSIS)) + ELLIPSIS


def collapse_newlines(text: str) -> str:
    """Replace every newline with a space and trim the result."""
    return text.replace("\n", " ").strip()
