"""Library manager backed by the WAGTAIL_CLIENTLIBS["LIBRARIES"] setting."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from django.core.exceptions import ImproperlyConfigured
from django.templatetags.static import static

from ..conf import get_setting
from ..libraries import ClientLibrary, LibraryType
from .base import BaseLibraryManager

logger = logging.getLogger(__name__)


class SettingsLibraryManager(BaseLibraryManager):
    """Resolve categories from library definitions in Django settings.

    Each category maps to a definition such as::

        "site": {
            "path": "clientlibs/site",
            "types": ["css", "js"],
            "dependencies": ["base"],
            "preview_only": False,
        }

    Dependencies are resolved depth-first before the library that needs
    them, and every library is returned at most once per call. Relative
    paths are served through Django's staticfiles; paths starting with
    ``/`` or carrying a scheme are linked as-is.
    """

    def __init__(
        self, libraries: Mapping[str, Mapping[str, Any]] | None = None
    ) -> None:
        if libraries is None:
            libraries = get_setting("LIBRARIES")
        self._definitions: Mapping[str, Mapping[str, Any]] = libraries or {}
        self.minified_suffix = get_setting("MINIFIED_SUFFIX")

    def get_libraries(
        self,
        categories: Sequence[str],
        library_type: LibraryType,
        preview: bool = False,
        debug: bool = False,
    ) -> list[ClientLibrary]:
        ordered: list[ClientLibrary] = []
        visited: set[str] = set()
        for category in categories:
            self._collect(category, preview, debug, visited, ordered)
        return [lib for lib in ordered if lib.has_type(library_type)]

    def is_minify_enabled(self) -> bool:
        return bool(get_setting("MINIFY"))

    def get_include_path(
        self, library: ClientLibrary, library_type: LibraryType, minified: bool
    ) -> str:
        path = super().get_include_path(library, library_type, minified)
        if path.startswith("/") or "://" in path:
            return path
        return static(path)

    def _collect(
        self,
        category: str,
        preview: bool,
        debug: bool,
        visited: set[str],
        ordered: list[ClientLibrary],
    ) -> None:
        if category in visited:
            return
        visited.add(category)

        definition = self._definitions.get(category)
        if definition is None:
            self._report(f"Unknown client library category: {category!r}", debug)
            return
        if not definition.get("path"):
            self._report(f"Client library {category!r} must define a 'path'", debug)
            return
        if definition.get("preview_only", False) and not preview:
            return

        types = self._parse_types(definition.get("types"))
        if types is None:
            self._report(
                f"Client library {category!r} has invalid 'types': "
                f"{definition.get('types')!r}",
                debug,
            )
            return

        library = ClientLibrary(
            category=category,
            path=definition["path"],
            types=types,
            dependencies=tuple(definition.get("dependencies", ())),
        )
        for dependency in library.dependencies:
            self._collect(dependency, preview, debug, visited, ordered)
        ordered.append(library)

    def _parse_types(self, raw_types: Any) -> frozenset[LibraryType] | None:
        """Return the declared library types, or None if they are invalid.

        A missing value means both types; a single string names one type.
        """
        if raw_types is None:
            return frozenset({LibraryType.CSS, LibraryType.JS})
        if isinstance(raw_types, str):
            raw_types = [raw_types]
        try:
            return frozenset(LibraryType(t) for t in raw_types)
        except (TypeError, ValueError):
            return None

    def _report(self, message: str, debug: bool) -> None:
        if debug:
            raise ImproperlyConfigured(message)
        logger.warning("%s. Skipped.", message)
