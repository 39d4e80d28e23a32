"""
ParsedMarkdown - the value object produced by every parser.

Instances are what the service caches: the rendered HTML, the source it was
rendered from, when the cache entry should expire and which parser produced it.
"""

from __future__ import annotations

import hashlib
import math
import time
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ParsedMarkdown:
    """Rendered Markdown plus the metadata needed to cache it."""

    html: str
    markdown: str = ""
    # Absolute UNIX timestamp; None keeps the cache entry until evicted.
    expire: Optional[float] = None
    parser_id: Optional[str] = None
    language: Optional[str] = None

    def __str__(self) -> str:
        return self.html

    @property
    def size(self) -> int:
        """Size of the rendered HTML in bytes."""
        return len(self.html.encode("utf-8"))

    @property
    def hash(self) -> str:
        """SHA-256 hex digest of the Markdown source."""
        return hashlib.sha256(self.markdown.encode("utf-8")).hexdigest()

    def matches(self, markdown: str) -> bool:
        """Whether this result was rendered from ``markdown``."""
        return self.markdown == markdown

    def timeout(self, now: Optional[float] = None) -> Optional[int]:
        """
        Seconds until expiry, in the form Django's cache API expects.

        Rounded up, so an entry with part of a second left is still stored.
        Returns None for permanent entries and 0 once the expiry has passed.
        """
        if self.expire is None:
            return None
        now = time.time() if now is None else now
        return max(0, math.ceil(self.expire - now))
