"""
Plugin registries for Markdown parsers and extensions.

Plugins are plain classes that describe themselves through class attributes
(``id``, ``label``, ``default_settings`` ...). A registry turns each class into
a read-only definition when it is registered and later instantiates plugins by
id. Registration order is preserved and is the order used for lookups such as
``first_installed_plugin_id()`` and ``get_extensions()``.

The built-in plugins are listed in ``parsers.PARSERS`` and
``extensions.EXTENSIONS``; projects add their own through the ``parsers`` and
``extensions`` keys of ``settings.MARKDOWN`` (dotted paths to plugin classes).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Optional

from django.utils.module_loading import import_string

from ..exceptions import NoParserAvailableError, UnknownExtensionError, UnknownParserError
from .config import MarkdownSettings, get_markdown_settings

if TYPE_CHECKING:
    from .extensions.base import MarkdownExtension
    from .parsers.base import BaseParser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParserDefinition:
    """Descriptor of a registered parser plugin."""

    id: str
    label: str
    plugin_class: type
    settings: dict = field(default_factory=dict)
    description: str = ""
    url: str = ""
    installed: bool = True


@dataclass(frozen=True)
class ExtensionDefinition:
    """Descriptor of a registered extension plugin."""

    id: str
    label: str
    plugin_class: type
    # Owning parser id; None when the extension is not bound to a parser.
    parser: Optional[str] = None
    settings: dict = field(default_factory=dict)
    enabled: bool = False
    description: str = ""
    url: str = ""


def _load_plugin_classes(builtin: Iterable[type], dotted_paths: Iterable[str]) -> list[type]:
    classes = list(builtin)
    for path in dotted_paths or ():
        classes.append(import_string(path))
    return classes


class ExtensionPluginManager:
    """Registry of Markdown extension plugins."""

    def __init__(self, plugin_classes: Iterable[type] = ()):
        self._definitions: dict[str, ExtensionDefinition] = {}
        for plugin_class in plugin_classes:
            self.register(plugin_class)

    @classmethod
    def create(cls, markdown_settings: Optional[MarkdownSettings] = None) -> "ExtensionPluginManager":
        """Build a registry holding the built-in and configured extensions."""
        from .extensions import EXTENSIONS

        markdown_settings = markdown_settings or get_markdown_settings()
        return cls(_load_plugin_classes(EXTENSIONS, markdown_settings.get("extensions", [])))

    def register(self, plugin_class: type) -> ExtensionDefinition:
        definition = ExtensionDefinition(
            id=plugin_class.id,
            label=getattr(plugin_class, "label", "") or plugin_class.id,
            plugin_class=plugin_class,
            parser=getattr(plugin_class, "parser", None),
            settings=dict(getattr(plugin_class, "default_settings", {}) or {}),
            enabled=bool(getattr(plugin_class, "enabled_by_default", False)),
            description=getattr(plugin_class, "description", ""),
            url=getattr(plugin_class, "url", ""),
        )
        self._definitions[definition.id] = definition
        logger.debug("Registered Markdown extension '%s' (parser: %s)", definition.id, definition.parser)
        return definition

    def get_definitions(self) -> dict[str, ExtensionDefinition]:
        return dict(self._definitions)

    def get_definition(self, plugin_id: str) -> ExtensionDefinition:
        try:
            return self._definitions[plugin_id]
        except KeyError:
            raise UnknownExtensionError(plugin_id) from None

    def has_definition(self, plugin_id: str) -> bool:
        return plugin_id in self._definitions

    def create_instance(self, plugin_id: str, configuration: Optional[dict] = None) -> "MarkdownExtension":
        definition = self.get_definition(plugin_id)
        return definition.plugin_class(configuration if configuration is not None else {}, plugin_id, definition)

    def get_extensions(self, parser: Optional[str] = None) -> dict[str, "MarkdownExtension"]:
        """
        Instantiate extensions, optionally only those owned by ``parser``.

        When a parser id is given, extensions that do not name an owning
        parser are left out; they are only part of the unfiltered listing.
        """
        extensions = {}
        for plugin_id, definition in self._definitions.items():
            if parser is not None and definition.parser != parser:
                continue
            extensions[plugin_id] = self.create_instance(plugin_id)
        return extensions


class ParserPluginManager:
    """Registry of Markdown parser plugins."""

    def __init__(
        self,
        plugin_classes: Iterable[type] = (),
        extension_manager: Optional[ExtensionPluginManager] = None,
    ):
        self.extension_manager = extension_manager
        self._definitions: dict[str, ParserDefinition] = {}
        for plugin_class in plugin_classes:
            self.register(plugin_class)

    @classmethod
    def create(
        cls,
        markdown_settings: Optional[MarkdownSettings] = None,
        extension_manager: Optional[ExtensionPluginManager] = None,
    ) -> "ParserPluginManager":
        """Build a registry holding the built-in and configured parsers."""
        from .parsers import PARSERS

        markdown_settings = markdown_settings or get_markdown_settings()
        if extension_manager is None:
            extension_manager = ExtensionPluginManager.create(markdown_settings)
        return cls(
            _load_plugin_classes(PARSERS, markdown_settings.get("parsers", [])),
            extension_manager=extension_manager,
        )

    def register(self, plugin_class: type) -> ParserDefinition:
        definition = ParserDefinition(
            id=plugin_class.id,
            label=getattr(plugin_class, "label", "") or plugin_class.id,
            plugin_class=plugin_class,
            settings=dict(getattr(plugin_class, "default_settings", {}) or {}),
            description=getattr(plugin_class, "description", ""),
            url=getattr(plugin_class, "url", ""),
            installed=bool(plugin_class.is_installed()),
        )
        self._definitions[definition.id] = definition
        logger.debug(
            "Registered Markdown parser '%s' (installed: %s)", definition.id, definition.installed
        )
        return definition

    def get_definitions(self) -> dict[str, ParserDefinition]:
        return dict(self._definitions)

    def get_definition(self, plugin_id: str) -> ParserDefinition:
        try:
            return self._definitions[plugin_id]
        except KeyError:
            raise UnknownParserError(plugin_id) from None

    def has_definition(self, plugin_id: str) -> bool:
        return plugin_id in self._definitions

    def installed_plugin_ids(self) -> list[str]:
        return [plugin_id for plugin_id, definition in self._definitions.items() if definition.installed]

    def first_installed_plugin_id(self) -> str:
        installed = self.installed_plugin_ids()
        if not installed:
            raise NoParserAvailableError()
        return installed[0]

    def create_instance(self, plugin_id: str, configuration: Optional[dict[str, Any]] = None) -> "BaseParser":
        """Create a new parser bound to ``configuration`` (used as given)."""
        definition = self.get_definition(plugin_id)
        return definition.plugin_class.create(
            configuration if configuration is not None else {},
            plugin_id,
            definition,
            extension_manager=self.extension_manager,
        )
