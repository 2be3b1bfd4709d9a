"""Shared constants and small predicates used across the framework."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any, Mapping, Optional

EMPTY_OBJECT: Mapping[Any, Any] = MappingProxyType({})
EMPTY_ARRAY: tuple = ()

REG_SKIPERRORS = re.compile(r"epipe|invalid\sdistance|err_ipc_channel_closed")
REG_HTTPHTTPS = re.compile(r"^(http|https)://")

SOCKETWINDOWS = r"\\?\pipe"

IGNORE_AUDIT: frozenset[str] = frozenset(
    {"password", "token", "accesstoken", "access_token", "pin"}
)

# Two slots used when concatenating strings; both start empty.
CONCAT: list[Optional[str]] = [None, None]


def is_skippable_error(message: str) -> bool:
    """Return True if an error message belongs to the class of errors that are ignored."""
    return REG_SKIPERRORS.search(message) is not None


def is_http_url(url: str) -> bool:
    """Return True if ``url`` starts with ``http://`` or ``https://``."""
    return REG_HTTPHTTPS.match(url) is not None


def is_ignored_audit_key(key: str) -> bool:
    """Return True if ``key`` must be left out of audit records."""
    return key in IGNORE_AUDIT