# mdengine/markdown/parsers/__init__.py

from .base import BaseParser
from .extensible import ExtensibleParser
from .pandoc import PandocParser
from .python_markdown import PythonMarkdownParser

# Built-in parser plugins. Order matters - the first installed one is the
# fallback when no parser id is configured.
PARSERS = [
    PythonMarkdownParser,
    PandocParser,
]

__all__ = [
    "PARSERS",
    "BaseParser",
    "ExtensibleParser",
    "PandocParser",
    "PythonMarkdownParser",
]
