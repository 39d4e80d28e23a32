"""
Parser plugin backed by Pandoc, through pypandoc.

Pandoc has built-in support for most Markdown syntax extensions; enabled
extension plugins switch them on as ``+name`` flags on the input format, e.g.
``markdown+footnotes+pipe_tables``.
"""

import logging
from typing import Optional

import pypandoc

from .extensible import ExtensibleParser

logger = logging.getLogger(__name__)


class PandocParser(ExtensibleParser):
    id = "pandoc"
    label = "Pandoc"
    description = "Universal document converter, driven through pypandoc."
    url = "https://pandoc.org/"
    escapes_html = True
    default_settings = {
        "from": "markdown",
        "to": "html5",
        "extra_args": [
            # Math rendering with MathJax
            "--mathjax",
        ],
    }

    @classmethod
    def is_installed(cls) -> bool:
        try:
            pypandoc.get_pandoc_version()
        except OSError:
            logger.info("Pandoc binary not found - the 'pandoc' parser is unavailable")
            return False
        return True

    def input_format(self) -> str:
        flags = "".join(extension.build() for extension in self.get_extensions(enabled=True).values())
        if self.render_strategy == "escape":
            # raw HTML is read as literal text
            flags += "-raw_html"
        return f"{self.settings['from']}{flags}"

    def convert(self, text: str, language: Optional[str] = None) -> str:
        extra_args = list(self.settings.get("extra_args", []))
        if language:
            extra_args.append(f"--metadata=lang:{language}")

        return pypandoc.convert_text(
            text or "",
            to=self.settings["to"],
            format=self.input_format(),
            extra_args=extra_args,
        )
