# mdengine/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from mdengine.markdown.renderer import render_markdown, render_markdown_file, render_markdown_url

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value, language=None):
    return mark_safe(render_markdown(value, language))


@register.simple_tag
def markdown_file(path, language=None):
    """Render a Markdown file, cached until the file changes"""
    return mark_safe(render_markdown_file(path, language))


@register.simple_tag
def markdown_url(url, language=None):
    """Render a remote Markdown document, cached by URL"""
    return mark_safe(render_markdown_url(url, language))
