"""Exceptions raised by wagtail-clientlibs."""


class ClientLibError(Exception):
    """Base class for client library errors."""


class NoCategoriesError(ClientLibError):
    """Raised when an include resolves to no category names at all."""
