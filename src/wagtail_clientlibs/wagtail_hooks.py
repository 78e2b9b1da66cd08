"""Wagtail hooks injecting configured client libraries into the admin."""

from __future__ import annotations

from django.utils.safestring import SafeString, mark_safe
from wagtail import hooks

from .conf import get_setting
from .libraries import IncludeMode
from .utils import get_tag_builder


@hooks.register("insert_global_admin_css")
def global_admin_css() -> SafeString:
    """Add stylesheets of ADMIN_CATEGORIES to every Wagtail admin page."""
    return _render_admin_libraries(IncludeMode.CSS)


@hooks.register("insert_global_admin_js")
def global_admin_js() -> SafeString:
    """Add scripts of ADMIN_CATEGORIES to every Wagtail admin page.

    Scripts carry the ADMIN_LOADING attribute when one is configured.
    """
    return _render_admin_libraries(IncludeMode.JS)


def _render_admin_libraries(mode: IncludeMode) -> SafeString:
    categories = get_setting("ADMIN_CATEGORIES")
    if not categories:
        return mark_safe("")
    markup = get_tag_builder().include(
        categories, mode=mode, loading=get_setting("ADMIN_LOADING")
    )
    return mark_safe(markup)  # noqa: S308
