"""Construction of the configured tag builder and its collaborators."""

from __future__ import annotations

import logging
from collections.abc import Callable
from importlib import import_module
from typing import Any

from .builder import TagBuilder
from .conf import get_setting
from .managers.base import BaseLibraryManager

logger = logging.getLogger(__name__)


def get_tag_builder() -> TagBuilder:
    """Build a TagBuilder from the LIBRARY_MANAGER and SANITIZER settings."""
    return TagBuilder(get_library_manager(), get_sanitizer())


def get_library_manager() -> BaseLibraryManager | None:
    """Import and instantiate the configured library manager.

    Returns None if the setting is empty or the class cannot be imported.
    """
    cls = _import_optional(get_setting("LIBRARY_MANAGER"), "LIBRARY_MANAGER")
    if cls is None:
        return None
    return cls()  # type: ignore[no-any-return]


def get_sanitizer() -> Callable[[str], str] | None:
    """Import the configured HTML attribute sanitizer callable."""
    return _import_optional(get_setting("SANITIZER"), "SANITIZER")


def _import_optional(dotted_path: str | None, setting_name: str) -> Any:
    if not dotted_path:
        return None
    try:
        return import_object(dotted_path)
    except (ImportError, AttributeError, ValueError) as e:
        logger.warning("Could not import %s %r: %s", setting_name, dotted_path, e)
        return None


def import_object(dotted_path: str) -> Any:
    """Import a class or function from a dotted path string."""
    module_path, attr_name = dotted_path.rsplit(".", 1)
    module = import_module(module_path)
    return getattr(module, attr_name)
