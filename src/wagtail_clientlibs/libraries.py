"""Value types shared by the normalizer, resolver and emitter."""

from __future__ import annotations

from typing import NamedTuple

from django.db import models


class LibraryType(models.TextChoices):
    CSS = "css", "CSS"
    JS = "js", "JavaScript"


class IncludeMode(models.TextChoices):
    """Which library types a single include emits."""

    CSS = "css", "CSS only"
    JS = "js", "JavaScript only"
    ALL = "all", "CSS then JavaScript"


class IncludeOptions(NamedTuple):
    """Normalized include arguments for one render call."""

    categories: tuple[str, ...]
    mode: IncludeMode = IncludeMode.ALL
    loading: str | None = None  # None, "async" or "defer"


class ResolvedAsset(NamedTuple):
    """A single asset URL to emit as a tag."""

    include_path: str
    library_type: LibraryType


class ClientLibrary(NamedTuple):
    """A client library as returned by a library manager."""

    category: str
    path: str
    types: frozenset[str] = frozenset({LibraryType.CSS, LibraryType.JS})
    dependencies: tuple[str, ...] = ()

    def has_type(self, library_type: LibraryType) -> bool:
        return library_type in self.types

    def get_include_path(
        self, library_type: LibraryType, minified: bool = False, suffix: str = ".min"
    ) -> str:
        """Return the path of this library's asset for the given type.

        ``"clientlibs/site"`` becomes ``"clientlibs/site.min.css"`` when
        minified, ``"clientlibs/site.css"`` otherwise.
        """
        min_suffix = suffix if minified else ""
        return f"{self.path}{min_suffix}.{library_type.value}"
