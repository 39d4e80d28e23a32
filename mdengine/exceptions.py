"""
Exceptions raised by the Markdown service.

Every error is raised where it is detected and propagates unchanged to the
caller, so views and commands can branch on the concrete type (a missing local
file is not the same failure as a missing remote document).
"""

from typing import Optional


class MarkdownError(Exception):
    """Base class for all Markdown service errors."""


class UnknownParserError(MarkdownError, LookupError):
    """Raised when a parser plugin id is not registered."""

    def __init__(self, plugin_id: str):
        self.plugin_id = plugin_id
        super().__init__(f"Unknown Markdown parser: '{plugin_id}'")


class UnknownExtensionError(MarkdownError, LookupError):
    """Raised when an extension plugin id is not registered."""

    def __init__(self, plugin_id: str):
        self.plugin_id = plugin_id
        super().__init__(f"Unknown Markdown extension: '{plugin_id}'")


class NoParserAvailableError(MarkdownError):
    """Raised when none of the registered parsers is installed."""

    def __init__(self, message: str = "No installed Markdown parser is available."):
        super().__init__(message)


class MarkdownFileNotFoundError(MarkdownError, FileNotFoundError):
    """Raised when a Markdown file to load does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Markdown file does not exist: {path}")


class RemoteContentNotFoundError(MarkdownError):
    """Raised when a remote Markdown document answers outside 2xx/3xx."""

    def __init__(self, url: str, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        super().__init__(f"Markdown URL does not exist: {url} (status {status_code})")
