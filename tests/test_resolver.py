"""Tests for wagtail_clientlibs.resolver module."""

from wagtail_clientlibs.libraries import ClientLibrary, LibraryType, ResolvedAsset
from wagtail_clientlibs.resolver import resolve

from .conftest import FakeLibraryManager


class TestResolve:
    def test_returns_assets_in_manager_order(self):
        """Include paths follow the order returned by the library manager.

        Purpose: Verify the adapter does not re-sort libraries.
        Category: Normal case
        Target: resolve(library_manager, categories, library_type)
        Technique: Statement coverage (C0)
        Test data: Two JS libraries, minify enabled
        """
        manager = FakeLibraryManager(
            {
                LibraryType.JS: [
                    ClientLibrary(category="z", path="/libs/z"),
                    ClientLibrary(category="a", path="/libs/a"),
                ]
            }
        )

        result = resolve(manager, ("z", "a"), LibraryType.JS)

        assert result == [
            ResolvedAsset("/libs/z.min.js", LibraryType.JS),
            ResolvedAsset("/libs/a.min.js", LibraryType.JS),
        ]

    def test_unminified_paths(self, site_library):
        manager = FakeLibraryManager({LibraryType.CSS: [site_library]}, minify=False)

        result = resolve(manager, ("site",), LibraryType.CSS)

        assert result == [ResolvedAsset("/etc.clientlibs/site.css", LibraryType.CSS)]

    def test_requests_non_preview_non_debug(self, fake_manager):
        resolve(fake_manager, ("a", "a"), LibraryType.CSS)

        assert fake_manager.calls == [(("a", "a"), LibraryType.CSS, False, False)]

    def test_missing_manager_returns_empty(self):
        """A missing library manager degrades to no assets.

        Purpose: Verify that an unavailable collaborator does not raise.
        Category: Error case
        Target: resolve(None, categories, library_type)
        Technique: Error guessing
        Test data: library_manager=None
        """
        assert resolve(None, ("site",), LibraryType.JS) == []
