"""HTML attribute sanitizers for the script ``onload`` handler."""

from __future__ import annotations

from django.utils.html import escape


def encode_for_html_attr(value: str) -> str:
    """Encode a string for use inside a double-quoted HTML attribute.

    Ampersands, quotes and angle brackets are replaced with entities.
    """
    return str(escape(value))
