"""
Markdown parsing service.

- service: Markdown facade (load/parse/cache)
- plugins: parser and extension registries
- parsers/: parser plugins (Python-Markdown, Pandoc)
- extensions/: extension plugins
- preprocessors/, postprocessors/: render strategy pipeline
"""

from .config import MarkdownSettings, get_markdown_settings
from .parsed import ParsedMarkdown
from .plugins import (
    ExtensionDefinition,
    ExtensionPluginManager,
    ParserDefinition,
    ParserPluginManager,
)
from .service import Markdown

__all__ = [
    "ExtensionDefinition",
    "ExtensionPluginManager",
    "Markdown",
    "MarkdownSettings",
    "ParsedMarkdown",
    "ParserDefinition",
    "ParserPluginManager",
    "get_markdown_settings",
]
