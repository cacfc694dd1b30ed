"""Helpers to sanitize environment variable values before validation."""

from __future__ import annotations

import re
from typing import Any

# A "#" starts a comment at the beginning of the value or after whitespace
_INLINE_COMMENT = re.compile(r"(?:^|\s)#.*$", re.DOTALL)


def strip_inline_comment(value: str) -> str:
    """Remove inline comments of the form "value  # comment".

    Some env-file parsers keep inline comments, so ``3  # characters``
    can reach the process environment. ``foo#bar`` is left intact.
    """
    return _INLINE_COMMENT.sub("", value, count=1).strip()


def sanitize_inline_numeric(value: Any) -> Any:
    """Normalize numeric env vars that may include inline comments."""
    if isinstance(value, str):
        return strip_inline_comment(value) or value
    return value


def normalize_operator_text(value: Any) -> Any:
    """Upper-case an SQL operator and collapse inner whitespace.

    >>> normalize_operator_text("  not   like ")
    'NOT LIKE'
    """
    if isinstance(value, str):
        return " ".join(strip_inline_comment(value).split()).upper()
    return value
