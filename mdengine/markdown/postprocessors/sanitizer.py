# mdengine/markdown/postprocessors/sanitizer.py

import logging
from functools import lru_cache

import bleach

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Allow-lists for the HTML that parsers are expected to produce."""
    allowed_tags = set(bleach.sanitizer.ALLOWED_TAGS).union(
        {
            # text
            "p",
            "br",
            "div",
            "span",
            "del",
            "ins",
            "mark",
            "sup",  # footnote references
            "sub",
            "q",
            "cite",
            # headings
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            # lists
            "ul",
            "ol",
            "li",
            "dl",
            "dt",
            "dd",
            "hr",
            "blockquote",
            # code
            "pre",
            "code",
            "kbd",
            "samp",
            # tables
            "table",
            "thead",
            "tbody",
            "tfoot",
            "tr",
            "th",
            "td",
            "caption",
            # media
            "img",
            "figure",
            "figcaption",
            # task lists
            "input",
            "label",
            # pandoc wraps footnotes in a section
            "section",
            "nav",
        }
    )

    allowed_attrs = {
        "*": ["class", "id", "title", "role"],
        "a": ["href", "title", "rel", "name"],
        "img": ["src", "alt", "title", "width", "height", "loading"],
        "ol": ["start", "type"],
        "th": ["colspan", "rowspan", "scope", "align"],
        "td": ["colspan", "rowspan", "align"],
        "input": ["type", "checked", "disabled"],
        "blockquote": ["cite"],
        "q": ["cite"],
    }

    allowed_protocols = ["http", "https", "mailto", "tel"]

    return frozenset(allowed_tags), allowed_attrs, allowed_protocols


def sanitize_html(html, context):
    """
    Filter rendered HTML down to the allow-list, escaping anything else.

    Used by the "filter_output" render strategy.
    """
    allowed_tags, allowed_attrs, allowed_protocols = _get_bleach_config()
    return bleach.clean(
        html,
        tags=allowed_tags,
        attributes=allowed_attrs,
        protocols=allowed_protocols,
        strip=False,  # disallowed tags are escaped, not dropped
    )


def strip_html(html, context):
    """
    Remove disallowed tags from rendered HTML, keeping their text.

    Used by the "strip" render strategy.
    """
    allowed_tags, allowed_attrs, allowed_protocols = _get_bleach_config()
    logger.debug("Stripping disallowed HTML for parser '%s'", context.get("parser_id"))
    return bleach.clean(
        html,
        tags=allowed_tags,
        attributes=allowed_attrs,
        protocols=allowed_protocols,
        strip=True,
        strip_comments=True,
    )
