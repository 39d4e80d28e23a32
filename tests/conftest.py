"""Shared fixtures for the mdengine test-suite."""

import os

import django
import pytest
import requests

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "MDProject.settings")


def pytest_configure():
    django.setup()


@pytest.fixture(autouse=True)
def clear_caches():
    from django.core.cache import caches

    from mdengine.markdown.renderer import get_markdown_service

    for alias in ("default", "markdown"):
        caches[alias].clear()
    get_markdown_service.cache_clear()
    yield


@pytest.fixture
def extension_manager():
    from mdengine.markdown.extensions import EXTENSIONS
    from mdengine.markdown.plugins import ExtensionPluginManager

    return ExtensionPluginManager(EXTENSIONS)


@pytest.fixture
def parser_manager(extension_manager):
    from mdengine.markdown.parsers import PythonMarkdownParser
    from mdengine.markdown.plugins import ParserPluginManager

    return ParserPluginManager([PythonMarkdownParser], extension_manager=extension_manager)


@pytest.fixture
def make_response():
    """Build requests responses the way requests' HTTP adapter does."""

    def make(status_code=200, body="# Remote", content_type="text/markdown"):
        response = requests.Response()
        response.status_code = status_code
        response.headers["Content-Type"] = content_type
        response._content = body.encode("utf-8") if isinstance(body, str) else body
        response.encoding = requests.utils.get_encoding_from_headers(response.headers)
        return response

    return make
