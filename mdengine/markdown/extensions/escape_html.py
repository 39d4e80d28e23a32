# mdengine/markdown/extensions/escape_html.py
"""
Markdown extension that shows raw HTML literally instead of passing it through.

Used by the "escape" render strategy:

    Some <b>bold</b> text      →   <p>Some &lt;b&gt;bold&lt;/b&gt; text</p>
    Compare `a < b` here       →   <p>Compare <code>a &lt; b</code> here</p>
    <https://example.com>      →   <p><a href="https://example.com">...</a></p>

Only the raw HTML handlers are removed (the "html_block" preprocessor and the
"html" inline pattern). Code spans, fenced code, autolinks and entities are
processed as usual, and the serializer escapes the leftover markup once.
"""

from markdown.extensions import Extension


class EscapeHtmlExtension(Extension):
    def extendMarkdown(self, md):
        md.preprocessors.deregister("html_block", strict=False)
        md.inlinePatterns.deregister("html", strict=False)


def makeExtension(**kwargs):
    return EscapeHtmlExtension(**kwargs)
