"""Abstract base class for client library managers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..libraries import ClientLibrary, LibraryType


class BaseLibraryManager(ABC):
    """Abstract base class for client library managers.

    Library managers own the mapping from category names to client
    libraries and decide whether minified variants are linked.
    """

    minified_suffix: str = ".min"

    @abstractmethod
    def get_libraries(
        self,
        categories: Sequence[str],
        library_type: LibraryType,
        preview: bool = False,
        debug: bool = False,
    ) -> list[ClientLibrary]:
        """Resolve categories to an ordered list of client libraries.

        Args:
            categories: Category names in include order.
            library_type: Only libraries providing this type are returned.
            preview: Include libraries that are only served in page previews.
            debug: Fail loudly on configuration errors instead of skipping.

        Returns:
            Libraries in the order their tags must be emitted
        """
        ...

    @abstractmethod
    def is_minify_enabled(self) -> bool:
        """Whether include paths should point at minified variants."""
        ...

    def get_include_path(
        self, library: ClientLibrary, library_type: LibraryType, minified: bool
    ) -> str:
        """Return the URL written into the tag for one library."""
        return library.get_include_path(library_type, minified, self.minified_suffix)
