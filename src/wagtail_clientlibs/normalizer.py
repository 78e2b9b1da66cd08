"""Normalize raw template arguments into IncludeOptions."""

from __future__ import annotations

from typing import Any

from .exceptions import NoCategoriesError
from .libraries import IncludeMode, IncludeOptions

VALID_LOADING_ATTRIBUTES = ("async", "defer")


def normalize(
    raw_categories: Any,
    raw_mode: Any = None,
    raw_loading: Any = None,
) -> IncludeOptions:
    """Parse template arguments into an immutable IncludeOptions.

    Args:
        raw_categories: A comma-separated string or a list/tuple of names.
        raw_mode: "css", "js" (case-insensitive) or anything else for both.
        raw_loading: "async" or "defer" (case-insensitive); other values
            are ignored.

    Raises:
        NoCategoriesError: If no category names could be parsed.
    """
    categories = parse_categories(raw_categories)
    if not categories:
        raise NoCategoriesError(
            "Provide a comma-separated string or a list of categories to include."
        )
    return IncludeOptions(
        categories=categories,
        mode=resolve_mode(raw_mode),
        loading=resolve_loading(raw_loading),
    )


def parse_categories(raw_categories: Any) -> tuple[str, ...]:
    """Return trimmed category names in input order.

    Non-string list items are dropped. Empty names produced by splitting a
    string (``"a,,b"``) are kept; library managers skip unknown names.
    """
    if isinstance(raw_categories, str):
        return tuple(part.strip() for part in raw_categories.split(","))
    if isinstance(raw_categories, (list, tuple)):
        return tuple(item.strip() for item in raw_categories if isinstance(item, str))
    return ()


def resolve_mode(raw_mode: Any) -> IncludeMode:
    if isinstance(raw_mode, str):
        lowered = raw_mode.lower()
        if lowered == IncludeMode.JS:
            return IncludeMode.JS
        if lowered == IncludeMode.CSS:
            return IncludeMode.CSS
    return IncludeMode.ALL


def resolve_loading(raw_loading: Any) -> str | None:
    """Return the lower-cased loading attribute, or None if not allowed."""
    if not isinstance(raw_loading, str):
        return None
    lowered = raw_loading.lower()
    if lowered in VALID_LOADING_ATTRIBUTES:
        return lowered
    return None
