"""Small helpers shared by the Markdown service, parsers and extensions."""

from __future__ import annotations

import base64
import copy
from collections.abc import Mapping
from typing import Any

from django.utils.crypto import salted_hmac

_PATH_HASH_SALT = "mdengine.markdown.load_path"


def merge_deep(*mappings: Mapping | None) -> dict[str, Any]:
    """
    Merge mappings recursively, later mappings winning on conflicting keys.

    Nested mappings combine key by key instead of replacing each other, so
    ``merge_deep({"a": {"c": 2}}, {"a": {"b": 1}})`` gives
    ``{"a": {"c": 2, "b": 1}}``. Any other value (lists included) is replaced
    wholesale. ``None`` arguments are skipped and the inputs are never mutated.
    """
    result: dict[str, Any] = {}
    for mapping in mappings:
        if not mapping:
            continue
        for key, value in mapping.items():
            existing = result.get(key)
            if isinstance(existing, Mapping) and isinstance(value, Mapping):
                result[key] = merge_deep(existing, value)
            elif isinstance(value, Mapping):
                result[key] = merge_deep(value)
            else:
                result[key] = copy.deepcopy(value)
    return result


def hash_base64(value: str, salt: str = _PATH_HASH_SALT) -> str:
    """Return a keyed, URL-safe base64 digest of ``value`` without padding."""
    digest = salted_hmac(salt, value, algorithm="sha256").digest()
    return base64.urlsafe_b64encode(digest).decode("ascii").rstrip("=")
