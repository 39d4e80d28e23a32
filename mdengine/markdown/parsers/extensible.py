"""
ExtensibleParser - parsers whose syntax can be extended by extension plugins.

Per-extension configuration is given as a list on the parser configuration:

    {
        "settings": {...},
        "extensions": [
            {"id": "toc", "settings": {"title": "Contents"}},
            {"id": "attr_list"},
        ],
    }

Each listed extension is switched on and its entry is merged into the parser
settings under the extension id, from where it is applied to the extension
instance every time the extensions are looked up.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from ..utils import merge_deep
from .base import BaseParser

if TYPE_CHECKING:
    from ..extensions.base import MarkdownExtension
    from ..plugins import ExtensionPluginManager, ParserDefinition


class ExtensibleParser(BaseParser):
    """Base class for parsers that support extension plugins."""

    def __init__(
        self,
        configuration: dict[str, Any],
        plugin_id: str,
        definition: "ParserDefinition",
        extension_manager: "ExtensionPluginManager",
    ):
        super().__init__(configuration, plugin_id, definition)
        if extension_manager is None:
            raise ValueError(f"Parser '{plugin_id}' requires an extension manager")
        self.extension_manager = extension_manager
        # Extension instances keyed by (enabled filter, parser id)
        self._extensions: dict[tuple[Optional[bool], str], dict[str, "MarkdownExtension"]] = {}

        extensions = configuration.get("extensions")
        if extensions and isinstance(extensions, (list, tuple)):
            overrides = {}
            for extension in extensions:
                if "id" not in extension:
                    raise ValueError(f"Extension configuration for parser '{plugin_id}' is missing an 'id'")
                overrides[extension["id"]] = {**extension, "enabled": True}
            self.settings = merge_deep(self.settings, overrides)

    @classmethod
    def create(
        cls,
        configuration: dict[str, Any],
        plugin_id: str,
        definition: "ParserDefinition",
        extension_manager: Optional["ExtensionPluginManager"] = None,
    ) -> "ExtensibleParser":
        return cls(configuration, plugin_id, definition, extension_manager)

    def get_extensions(self, enabled: Optional[bool] = None) -> dict[str, "MarkdownExtension"]:
        """
        Return this parser's extensions, in registration order.

        Args:
            enabled: True for enabled extensions only, False for disabled ones
                only, None for all of them.
        """
        key = (enabled, self.plugin_id)
        if key not in self._extensions:
            extensions = self.extension_manager.get_extensions(self.plugin_id)
            self._apply_settings(extensions)
            if enabled is not None:
                extensions = {
                    plugin_id: extension
                    for plugin_id, extension in extensions.items()
                    if extension.enabled is enabled
                }
            self._extensions[key] = extensions

        extensions = self._extensions[key]
        self._apply_settings(extensions)
        return dict(extensions)

    def _apply_settings(self, extensions: dict[str, "MarkdownExtension"]) -> None:
        for plugin_id, extension in extensions.items():
            if plugin_id in self.settings:
                extension.set_settings(self.settings[plugin_id])

    def get_guidelines(self) -> dict[str, Any]:
        guides = super().get_guidelines()

        # Let enabled extensions add their own guides.
        for plugin_id, extension in self.get_extensions(enabled=True).items():
            if extension.get_guidelines is None:
                continue
            element = extension.get_guidelines()
            if element:
                guides.setdefault("extensions", {})[plugin_id] = element

        return guides

    def alter_guidelines(self, guides: dict[str, Any]) -> None:
        # Let enabled extensions alter existing guides.
        for extension in self.get_extensions(enabled=True).values():
            if extension.alter_guidelines is not None:
                extension.alter_guidelines(guides)
