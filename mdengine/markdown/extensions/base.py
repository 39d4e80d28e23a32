"""
Base classes for Markdown extension plugins.

An extension plugin belongs to at most one parser (``parser``) and may offer
two optional capabilities, declared by overriding the attributes below:

- ``get_guidelines()``: return a guide fragment describing the syntax the
  extension adds; stored under ``guides["extensions"][<extension id>]``.
- ``alter_guidelines(guides)``: modify the parser's guides in place.

Extensions that leave an attribute as None simply do not take part.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional

from ..utils import merge_deep

if TYPE_CHECKING:
    from ..plugins import ExtensionDefinition


class MarkdownExtension:
    """Base class for extension plugins."""

    id: str = ""
    label: str = ""
    description: str = ""
    url: str = ""
    parser: Optional[str] = None
    enabled_by_default: bool = False
    default_settings: dict[str, Any] = {}

    # Optional capabilities
    get_guidelines: Optional[Callable[[], dict[str, Any]]] = None
    alter_guidelines: Optional[Callable[[dict[str, Any]], None]] = None

    def __init__(self, configuration: dict[str, Any], plugin_id: str, definition: "ExtensionDefinition"):
        self.configuration = configuration
        self.plugin_id = plugin_id
        self.definition = definition
        self.enabled = bool(configuration.get("enabled", definition.enabled))
        self.settings = merge_deep(definition.settings, configuration.get("settings"))

    def set_settings(self, values: dict[str, Any]) -> None:
        """
        Apply settings given by a parser.

        ``values`` may switch the extension on or off (``enabled``) and
        override its defaults (``settings``). Applying the same values twice
        gives the same result.
        """
        if "enabled" in values:
            self.enabled = bool(values["enabled"])
        self.settings = merge_deep(self.definition.settings, values.get("settings"))

    def __repr__(self) -> str:
        state = "enabled" if self.enabled else "disabled"
        return f"<{type(self).__name__} {self.plugin_id!r} ({state})>"


class PythonMarkdownExtension(MarkdownExtension):
    """Extension contributing a Python-Markdown extension module."""

    parser = "python_markdown"
    # Dotted path of a module exposing makeExtension()
    markdown_extension: str = ""

    def build(self) -> tuple[str, dict[str, Any]]:
        """Return the Python-Markdown extension name and its configuration."""
        return self.markdown_extension, dict(self.settings)


class PandocExtension(MarkdownExtension):
    """Extension switching on a Pandoc syntax extension."""

    parser = "pandoc"
    pandoc_extension: str = ""

    def build(self) -> str:
        """Return the ``+name`` flag appended to Pandoc's input format."""
        return f"+{self.pandoc_extension}"
