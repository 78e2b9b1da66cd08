"""Client library tag builder.

Pipeline: Normalize -> Resolve -> Emit
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .emitter import emit
from .exceptions import NoCategoriesError
from .libraries import IncludeMode, IncludeOptions, LibraryType
from .managers.base import BaseLibraryManager
from .normalizer import normalize
from .resolver import resolve

logger = logging.getLogger(__name__)

_MODE_TYPES: dict[IncludeMode, tuple[LibraryType, ...]] = {
    IncludeMode.CSS: (LibraryType.CSS,),
    IncludeMode.JS: (LibraryType.JS,),
    IncludeMode.ALL: (LibraryType.CSS, LibraryType.JS),
}


class TagBuilder:
    """Render client library categories as <link>/<script> markup.

    The library manager and the attribute sanitizer are injected; either
    may be None, in which case no markup is produced. A builder keeps no
    per-call state and can be shared between requests.
    """

    def __init__(
        self,
        library_manager: BaseLibraryManager | None,
        sanitizer: Callable[[str], str] | None,
    ) -> None:
        self.library_manager = library_manager
        self.sanitizer = sanitizer

    def include(
        self,
        categories: Any,
        mode: Any = None,
        loading: Any = None,
        onload: Any = None,
    ) -> str:
        """Return the markup for the given categories, or "" on bad input."""
        try:
            options = normalize(categories, mode, loading)
        except NoCategoriesError as e:
            logger.error(
                "'categories' option might be missing from the clientlib include. %s",
                e,
            )
            return ""

        if not isinstance(onload, str):
            onload = None

        return "".join(
            self._include_type(options, library_type, onload)
            for library_type in _MODE_TYPES[options.mode]
        )

    def _include_type(
        self,
        options: IncludeOptions,
        library_type: LibraryType,
        onload: str | None,
    ) -> str:
        if self.library_manager is None or self.sanitizer is None:
            logger.warning(
                "Client library manager or sanitizer unavailable. "
                "No %s markup rendered for %s.",
                library_type.label,
                ", ".join(options.categories),
            )
            return ""

        assets = resolve(self.library_manager, options.categories, library_type)
        return emit(assets, library_type, options.loading, onload, self.sanitizer)
