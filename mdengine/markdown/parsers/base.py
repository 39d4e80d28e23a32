"""
BaseParser - common behaviour of every Markdown parser plugin.

A parser plugin converts Markdown to HTML (``convert``) and describes the
syntax it supports (``get_guidelines``). ``parse`` wraps ``convert`` with the
render strategy pipeline and produces a ``ParsedMarkdown`` ready for caching:

    raw Markdown
      → preprocessors (render strategy)
      → convert()
      → postprocessors (render strategy)
      → ParsedMarkdown(expire = now + lifetime)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any, Optional

from ..parsed import ParsedMarkdown
from ..postprocessors import POSTPROCESSORS, apply_postprocessors
from ..preprocessors import apply_preprocessors
from ..utils import merge_deep

if TYPE_CHECKING:
    from ..plugins import ExtensionPluginManager, ParserDefinition

logger = logging.getLogger(__name__)

RENDER_STRATEGIES = tuple(POSTPROCESSORS)
DEFAULT_RENDER_STRATEGY = "filter_output"


class BaseParser:
    """Base class for parser plugins."""

    id: str = ""
    label: str = ""
    description: str = ""
    url: str = ""
    default_settings: dict[str, Any] = {}
    # True when convert() itself shows raw HTML literally for the "escape"
    # render strategy; otherwise the Markdown source is escaped beforehand.
    escapes_html: bool = False

    def __init__(self, configuration: dict[str, Any], plugin_id: str, definition: "ParserDefinition"):
        self.configuration = configuration
        self.plugin_id = plugin_id
        self.definition = definition
        self.settings = merge_deep(definition.settings, configuration.get("settings"))
        self.lifetime: Optional[int] = configuration.get("lifetime")
        self.render_strategy = configuration.get("render_strategy") or DEFAULT_RENDER_STRATEGY
        if self.render_strategy not in RENDER_STRATEGIES:
            raise ValueError(
                f"Unknown render strategy '{self.render_strategy}', "
                f"expected one of: {', '.join(RENDER_STRATEGIES)}"
            )

    @classmethod
    def create(
        cls,
        configuration: dict[str, Any],
        plugin_id: str,
        definition: "ParserDefinition",
        extension_manager: Optional["ExtensionPluginManager"] = None,
    ) -> "BaseParser":
        """Factory used by the parser registry."""
        return cls(configuration, plugin_id, definition)

    @classmethod
    def is_installed(cls) -> bool:
        """Whether the library backing this parser is available."""
        return True

    def convert(self, markdown: str, language: Optional[str] = None) -> str:
        """Convert Markdown to HTML. Subclasses must implement this."""
        raise NotImplementedError(f"{type(self).__name__} must implement convert()")

    def parse(self, markdown: str, language: Optional[str] = None) -> ParsedMarkdown:
        context = {
            "parser_id": self.plugin_id,
            "render_strategy": self.render_strategy,
            "escapes_html": self.escapes_html,
            "language": language,
        }
        source = apply_preprocessors(markdown, context)
        html = self.convert(source, language)
        html = apply_postprocessors(html, context)

        expire = time.time() + self.lifetime if self.lifetime is not None else None
        logger.debug(
            "Parsed %d characters of Markdown with '%s' (%s)",
            len(markdown),
            self.plugin_id,
            self.render_strategy,
        )
        return ParsedMarkdown(
            html=html,
            markdown=markdown,
            expire=expire,
            parser_id=self.plugin_id,
            language=language,
        )

    def get_guidelines(self) -> dict[str, Any]:
        """
        Describe the supported syntax.

        Returns a dict with the parser id and label plus ``items``, a dict of
        guide entries keyed by topic. Each entry has a ``title``, a
        ``description`` and a list of Markdown ``examples``.
        """
        guides = {
            "parser": self.plugin_id,
            "label": self.definition.label,
            "items": {
                "headings": {
                    "title": "Headings",
                    "description": "Start a line with one to six # characters.",
                    "examples": ["# Heading 1", "## Heading 2", "### Heading 3"],
                },
                "emphasis": {
                    "title": "Emphasis",
                    "description": "Wrap text in asterisks or underscores.",
                    "examples": ["*emphasis*", "**strong**", "_emphasis_"],
                },
                "links": {
                    "title": "Links",
                    "description": "Put the text in brackets and the URL in parentheses.",
                    "examples": ["[Django](https://www.djangoproject.com)", "<https://example.com>"],
                },
                "images": {
                    "title": "Images",
                    "description": "Like links, prefixed with an exclamation mark.",
                    "examples": ["![Alt text](/media/picture.png)"],
                },
                "lists": {
                    "title": "Lists",
                    "description": "Start lines with -, * or a number followed by a period.",
                    "examples": ["- First\n- Second", "1. First\n2. Second"],
                },
                "code": {
                    "title": "Code",
                    "description": "Wrap inline code in backticks, indent blocks by four spaces.",
                    "examples": ["`inline code`", "    indented code block"],
                },
                "blockquotes": {
                    "title": "Blockquotes",
                    "description": "Start a line with >.",
                    "examples": ["> Quoted text"],
                },
            },
        }
        self.alter_guidelines(guides)
        return guides

    def alter_guidelines(self, guides: dict[str, Any]) -> None:
        """Hook to modify the guidelines in place. Does nothing by default."""
