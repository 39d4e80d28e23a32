"""
Preprocessor for the "escape" render strategy, for parsers that cannot show
raw HTML literally on their own (``BaseParser.escapes_html`` is False).

Escapes HTML special characters in the Markdown source before conversion:

    <script>alert(1)</script>   →   &lt;script&gt;alert(1)&lt;/script&gt;

Leading blockquote markers (``>``) are Markdown syntax and are kept as-is.
The built-in parsers escape raw HTML during conversion instead, which keeps
code spans and autolinks intact.
"""

import re

from django.utils.html import escape

_QUOTE_MARKERS_RE = re.compile(r"^(?:[ ]{0,3}>[ ]?)+")


def escape_markdown(text: str, context: dict) -> str:
    if context.get("escapes_html"):
        return text

    lines = []
    for line in text.splitlines(keepends=True):
        match = _QUOTE_MARKERS_RE.match(line)
        markers = match.group(0) if match else ""
        lines.append(markers + escape(line[len(markers):]))
    return "".join(lines)
