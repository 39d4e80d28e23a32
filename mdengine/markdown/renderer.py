# mdengine/markdown/renderer.py

from functools import lru_cache

from django.core.signals import setting_changed
from django.dispatch import receiver

from .service import Markdown


@lru_cache(maxsize=1)
def get_markdown_service():
    """
    Return the shared Markdown service.

    Built from settings on first use, so the plugin registries, the Pandoc
    probe and the HTTP session are set up once per process.
    """
    return Markdown.create()


@receiver(setting_changed)
def reset_markdown_service(setting, **kwargs):
    if setting in ("MARKDOWN", "CACHES"):
        get_markdown_service.cache_clear()


def render_markdown(text, language=None):
    """
    Render markdown text to HTML with the default parser.

    Args:
        text: Raw markdown text
        language: Optional language code handed to the parser
    """
    return get_markdown_service().parse(text or "", language).html


def render_markdown_file(path, language=None):
    """Render a markdown file, reusing the cached result until the file changes"""
    return get_markdown_service().load_path(path, language=language).html


def render_markdown_url(url, language=None):
    """Render a remote markdown document, cached by URL"""
    return get_markdown_service().load_url(url, language=language).html
