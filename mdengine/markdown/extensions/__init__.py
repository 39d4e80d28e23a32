# mdengine/markdown/extensions/__init__.py

from .base import MarkdownExtension, PandocExtension, PythonMarkdownExtension
from .blockquote_levels import BlockquoteLevels
from .pandoc import PandocFootnotes, PandocPipeTables, PandocSmart, PandocTaskLists
from .paragraph_classes import ParagraphClasses
from .python_markdown import (
    AttrListExtension,
    FencedCodeExtension,
    FootnotesExtension,
    TablesExtension,
    TocExtension,
)

# Built-in extension plugins. Order matters - extensions are loaded, and
# alter the guidelines, in this order.
EXTENSIONS = [
    # Python-Markdown
    FootnotesExtension,
    TablesExtension,
    FencedCodeExtension,
    TocExtension,
    AttrListExtension,
    ParagraphClasses,
    BlockquoteLevels,
    # Pandoc
    PandocFootnotes,
    PandocPipeTables,
    PandocSmart,
    PandocTaskLists,
]

__all__ = [
    "EXTENSIONS",
    "MarkdownExtension",
    "PandocExtension",
    "PythonMarkdownExtension",
]
