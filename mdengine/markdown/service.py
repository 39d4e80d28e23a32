"""
Markdown - the service entry point.

Resolves which parser to use, loads Markdown from memory, local files or
remote URLs, and keeps parsed results in a Django cache:

    md = Markdown.create()
    md.parse("# Hello").html
    md.load_path("docs/README.md")          # cached until the file changes
    md.load_url("https://example.com/x.md")  # cached by URL

Cache identities:
- load_path(): "<basename><keyed hash of the real path>:<mtime>" unless an id
  is given; the modification time is always appended so edited files miss.
- load_url(): the URL itself unless an id is given.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Optional
from urllib.parse import urljoin, urlsplit

import requests
from django.core.cache import caches

from ..exceptions import MarkdownFileNotFoundError, RemoteContentNotFoundError
from .config import MarkdownSettings, get_markdown_settings
from .parsed import ParsedMarkdown
from .parsers.base import BaseParser
from .plugins import ExtensionPluginManager, ParserPluginManager
from .utils import hash_base64, merge_deep

logger = logging.getLogger(__name__)


class Markdown:
    """Load, parse and cache Markdown through parser plugins."""

    def __init__(
        self,
        cache,
        markdown_settings: MarkdownSettings,
        http_client,
        parser_manager: ParserPluginManager,
    ):
        """
        Args:
            cache: Django cache backend storing ParsedMarkdown objects
            markdown_settings: The merged MARKDOWN settings
            http_client: Object with a requests-compatible get(url) method
            parser_manager: Registry of parser plugins
        """
        self.cache = cache
        self.settings = markdown_settings
        self.http_client = http_client
        self.parser_manager = parser_manager

    @classmethod
    def create(cls, markdown_settings: Optional[MarkdownSettings] = None) -> "Markdown":
        """Wire the service from Django settings and caches."""
        markdown_settings = markdown_settings or get_markdown_settings()
        extension_manager = ExtensionPluginManager.create(markdown_settings)
        parser_manager = ParserPluginManager.create(markdown_settings, extension_manager)

        session = requests.Session()
        session.headers.update({"Accept": "text/markdown, text/plain;q=0.9, */*;q=0.1"})

        return cls(
            caches[markdown_settings.get("cache", "default")],
            markdown_settings,
            session,
            parser_manager,
        )

    # -------------------------------------------------------------------------
    # Cache
    # -------------------------------------------------------------------------

    def load(self, id: str) -> Optional[ParsedMarkdown]:
        """Return the cached ParsedMarkdown for ``id``, or None."""
        if not id:
            return None
        parsed = self.cache.get(id)
        if isinstance(parsed, ParsedMarkdown):
            logger.debug("Markdown cache hit: %s", id)
            return parsed
        logger.debug("Markdown cache miss: %s", id)
        return None

    def save(self, id: str, parsed: ParsedMarkdown) -> ParsedMarkdown:
        """Store ``parsed`` under ``id`` until it expires and return it."""
        self.cache.set(id, parsed, parsed.timeout())
        return parsed

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def load_path(self, path: str, id: Optional[str] = None, language: Optional[str] = None) -> ParsedMarkdown:
        """
        Parse a local Markdown file, cached until the file is modified.

        Raises:
            MarkdownFileNotFoundError: If the file does not exist
        """
        realpath = os.path.realpath(os.fspath(path))
        if not os.path.exists(realpath):
            raise MarkdownFileNotFoundError(realpath)

        if not id:
            id = os.path.basename(realpath) + hash_base64(realpath)

        # Append the file modification time as a cache buster in case it changed.
        id = f"{id}:{int(os.path.getmtime(realpath))}"

        parsed = self.load(id)
        if parsed is None:
            with open(realpath, encoding="utf-8") as f:
                parsed = self.save(id, self.parse(f.read(), language))
        return parsed

    def load_url(self, url: Any, id: Optional[str] = None, language: Optional[str] = None) -> ParsedMarkdown:
        """
        Parse a remote Markdown document, cached by URL.

        The body is decoded with the charset of the Content-Type header, UTF-8
        when none is given.

        Raises:
            RemoteContentNotFoundError: If the response status is not 2xx/3xx
        """
        url = self.absolute_url(url)
        if not id:
            id = url

        parsed = self.load(id)
        if parsed is None:
            logger.info("Fetching remote Markdown: %s", url)
            response = self.http_client.get(url)
            if response.status_code < 200 or response.status_code >= 400:
                raise RemoteContentNotFoundError(url, response.status_code)
            # requests falls back to ISO-8859-1 for text/* without a charset
            if "charset=" not in response.headers.get("Content-Type", "").lower():
                response.encoding = "utf-8"
            parsed = self.save(id, self.parse(response.text, language))
        return parsed

    def absolute_url(self, url: Any) -> str:
        """Return ``url`` as a string, joined onto the configured base_url if relative."""
        url = str(url)
        base_url = self.settings.get("base_url")
        if base_url and not urlsplit(url).scheme:
            url = urljoin(base_url, url)
        return url

    # -------------------------------------------------------------------------
    # Parsing
    # -------------------------------------------------------------------------

    def parse(self, markdown: str, language: Optional[str] = None) -> ParsedMarkdown:
        """Parse ``markdown`` with the default parser."""
        return self.get_parser().parse(markdown, language)

    def get_parser(self, parser_id: Optional[str] = None, configuration: Optional[dict] = None) -> BaseParser:
        """
        Return a parser instance.

        With an explicit ``parser_id`` the parser is created with exactly the
        given configuration. Otherwise the configured parser (or the first
        installed one) is created with the configured parser settings merged
        with ``configuration``.
        """
        if parser_id is not None:
            return self.parser_manager.create_instance(parser_id, configuration or {})

        parser_id = self.settings.get("parser.id")
        if not parser_id:
            parser_id = self.parser_manager.first_installed_plugin_id()
            logger.debug("No Markdown parser configured, using '%s'", parser_id)
        return self.parser_manager.create_instance(
            parser_id, merge_deep(self.settings.get("parser", {}), configuration)
        )
