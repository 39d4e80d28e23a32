"""
Configuration for the Markdown service.

Projects configure the service through a single ``MARKDOWN`` dict in their
Django settings. Whatever is set there is deep-merged over ``DEFAULTS``, so a
project only needs to list the keys it changes:

    MARKDOWN = {
        "cache": "markdown",
        "parser": {
            "id": "python_markdown",
            "lifetime": 3600,
            "extensions": [{"id": "toc", "settings": {"title": "Contents"}}],
        },
    }
"""

from __future__ import annotations

from typing import Any

from django.conf import settings

from .utils import merge_deep

DEFAULTS: dict[str, Any] = {
    # Django cache alias used to store parsed Markdown
    "cache": "default",
    # Absolute base used by Markdown.load_url() for relative URLs
    "base_url": None,
    # Extra plugin classes as dotted paths, registered after the built-in ones
    "parsers": [],
    "extensions": [],
    # Default parser and the configuration handed to it
    "parser": {
        "id": None,
        "lifetime": None,
        "render_strategy": "filter_output",
        "settings": {},
        "extensions": [],
    },
}


class MarkdownSettings:
    """
    Read-only view over the merged ``MARKDOWN`` settings.

    Keys may be dotted to reach into nested dicts, e.g. ``get("parser.id")``.
    """

    def __init__(self, values: dict[str, Any] | None = None):
        self._values = merge_deep(DEFAULTS, values)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value, returning a copy of nested dicts."""
        value: Any = self._values
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        if isinstance(value, dict):
            return merge_deep(value)
        return value

    def as_dict(self) -> dict[str, Any]:
        return merge_deep(self._values)


def get_markdown_settings() -> MarkdownSettings:
    """Build the settings view from ``django.conf.settings.MARKDOWN``."""
    return MarkdownSettings(getattr(settings, "MARKDOWN", None))
