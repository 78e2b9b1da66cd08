"""Template tags for including client libraries.

Usage::

    {% load clientlibs %}
    {% clientlib "base,site" %}
    {% clientlib categories mode="js" loading="defer" onload="initSite()" %}
"""

from __future__ import annotations

from typing import Any

from django import template
from django.utils.safestring import SafeString, mark_safe

from ..utils import get_tag_builder

register = template.Library()


@register.simple_tag
def clientlib(
    categories: Any,
    mode: str | None = None,
    loading: str | None = None,
    onload: str | None = None,
) -> SafeString:
    """Render <link>/<script> tags for the given client library categories."""
    markup = get_tag_builder().include(
        categories, mode=mode, loading=loading, onload=onload
    )
    return mark_safe(markup)  # noqa: S308
