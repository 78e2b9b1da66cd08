"""Format resolved assets as <link> and <script> markup."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .libraries import LibraryType, ResolvedAsset

TAG_STYLESHEET = '<link rel="stylesheet" href="{}">'
# Add type="text/javascript" here if pages are not served as HTML5.
TAG_JAVASCRIPT = '<script src="{}"{}></script>'
ONLOAD_ATTRIBUTE = ' onload="{}"'


def emit(
    assets: Iterable[ResolvedAsset],
    library_type: LibraryType,
    loading: str | None,
    onload: str | None,
    sanitizer: Callable[[str], str],
) -> str:
    """Return the concatenated tags for assets of a single library type.

    Loading and onload attributes only decorate script tags.
    """
    if library_type == LibraryType.CSS:
        return "".join(TAG_STYLESHEET.format(asset.include_path) for asset in assets)

    attributes = build_script_attributes(loading, onload, sanitizer)
    return "".join(
        TAG_JAVASCRIPT.format(asset.include_path, attributes) for asset in assets
    )


def build_script_attributes(
    loading: str | None,
    onload: str | None,
    sanitizer: Callable[[str], str],
) -> str:
    """Build the attribute suffix shared by every script tag of one include."""
    attributes = ""
    if loading:
        attributes += f" {loading.lower()}"

    if onload and onload.strip():
        safe_onload = sanitizer(onload)
        if safe_onload and safe_onload.strip():
            attributes += ONLOAD_ATTRIBUTE.format(safe_onload)

    return attributes
