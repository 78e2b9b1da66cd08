"""Pytest fixtures for wagtail-clientlibs tests."""

from unittest import mock

import pytest

from wagtail_clientlibs.libraries import ClientLibrary, LibraryType
from wagtail_clientlibs.managers.base import BaseLibraryManager
from wagtail_clientlibs.sanitizers import encode_for_html_attr


class FakeLibraryManager(BaseLibraryManager):
    """In-memory library manager returning fixed libraries per type."""

    def __init__(self, libraries=None, minify=True):
        self.libraries = libraries or {}
        self.minify = minify
        self.calls = []

    def get_libraries(self, categories, library_type, preview=False, debug=False):
        self.calls.append((tuple(categories), library_type, preview, debug))
        return list(self.libraries.get(library_type, []))

    def is_minify_enabled(self):
        return self.minify


@pytest.fixture
def site_library():
    """A library at an absolute path providing both CSS and JS."""
    return ClientLibrary(category="site", path="/etc.clientlibs/site")


@pytest.fixture
def fake_manager(site_library):
    """Library manager resolving one CSS and one JS library."""
    return FakeLibraryManager(
        {
            LibraryType.CSS: [site_library],
            LibraryType.JS: [site_library],
        }
    )


@pytest.fixture
def sanitizer():
    """The default HTML attribute sanitizer wrapped in a spy."""
    return mock.Mock(side_effect=encode_for_html_attr)
