"""Adapter between the tag builder and the configured library manager."""

from __future__ import annotations

from collections.abc import Sequence

from .libraries import LibraryType, ResolvedAsset
from .managers.base import BaseLibraryManager


def resolve(
    library_manager: BaseLibraryManager | None,
    categories: Sequence[str],
    library_type: LibraryType,
) -> list[ResolvedAsset]:
    """Resolve categories to asset URLs of one library type, in manager order.

    Returns an empty list when no library manager is available.
    """
    if library_manager is None:
        return []

    libraries = library_manager.get_libraries(
        categories, library_type, preview=False, debug=False
    )
    minified = library_manager.is_minify_enabled()
    return [
        ResolvedAsset(
            include_path=library_manager.get_include_path(lib, library_type, minified),
            library_type=library_type,
        )
        for lib in libraries
    ]
