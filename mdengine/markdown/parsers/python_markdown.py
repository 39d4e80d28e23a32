"""
Parser plugin backed by Python-Markdown.

Enabled extension plugins contribute Python-Markdown extensions, which are
loaded into a fresh ``markdown.Markdown`` instance for every conversion.
"""

from typing import Any, Optional

import markdown

from ..extensions.escape_html import EscapeHtmlExtension
from .extensible import ExtensibleParser

# Parser settings passed straight to markdown.Markdown()
MARKDOWN_OPTIONS = ("output_format", "tab_length")


class PythonMarkdownParser(ExtensibleParser):
    id = "python_markdown"
    label = "Python-Markdown"
    description = "Python implementation of John Gruber's Markdown, with extensions."
    url = "https://python-markdown.github.io/"
    escapes_html = True
    default_settings = {
        "output_format": "html",
        "tab_length": 4,
    }

    def markdown_options(self) -> dict[str, Any]:
        return {key: self.settings[key] for key in MARKDOWN_OPTIONS if key in self.settings}

    def convert(self, text: str, language: Optional[str] = None) -> str:
        extensions = []
        extension_configs = {}
        for extension in self.get_extensions(enabled=True).values():
            name, config = extension.build()
            extensions.append(name)
            if config:
                extension_configs[name] = config
        if self.render_strategy == "escape":
            extensions.append(EscapeHtmlExtension())

        md = markdown.Markdown(
            extensions=extensions,
            extension_configs=extension_configs,
            **self.markdown_options(),
        )
        return md.convert(text or "")
