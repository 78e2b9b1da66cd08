"""Configuration and settings for wagtail-clientlibs."""

from typing import Any

from django.conf import settings

DEFAULTS: dict[str, Any] = {
    # Collaborators
    "LIBRARY_MANAGER": "wagtail_clientlibs.managers.settings.SettingsLibraryManager",
    "SANITIZER": "wagtail_clientlibs.sanitizers.encode_for_html_attr",
    # Library definitions: category -> {"path", "types", "dependencies"}
    "LIBRARIES": {},
    # Minified variants
    "MINIFY": True,
    "MINIFIED_SUFFIX": ".min",
    # Wagtail admin injection
    "ADMIN_CATEGORIES": [],
    "ADMIN_LOADING": None,
}


_UNSET = object()


def get_setting(key: str, default: Any = _UNSET) -> Any:
    """Get a setting from WAGTAIL_CLIENTLIBS dict or return default."""
    user_settings: dict[str, Any] = getattr(settings, "WAGTAIL_CLIENTLIBS", {})
    fallback = DEFAULTS.get(key) if default is _UNSET else default
    return user_settings.get(key, fallback)
