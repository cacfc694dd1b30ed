"""Lazy evaluation support for logging.

Compiling a SQLAlchemy expression is not free, and search conditions are
logged on every call. Arguments wrapped here are only rendered when a
handler actually formats the record, so disabled DEBUG logging costs a
single object allocation.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


class LazyString:
    """String whose value is computed when it is first formatted.

    Example:
        ```python
        logger.debug("Targets: %s", LazyString(lambda: config.as_dict()))
        ```
    """

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[], Any]) -> None:
        self._func = func

    def __str__(self) -> str:
        return str(self._func())

    def __repr__(self) -> str:
        return f"LazyString({self._func!r})"


def lazy(func: Callable[[], Any]) -> LazyString:
    """Wrap a zero-argument callable as a lazily formatted log argument."""
    return LazyString(func)


def lazy_sql(clause: Any) -> LazyString:
    """Lazily compiled SQL for a statement or expression.

    Uses the clause's default dialect with bound parameters left as
    placeholders, so values never end up in log output.

    Example:
        ```python
        logger.debug("Search condition: %s", lazy_sql(condition))
        ```
    """
    return lazy(clause.compile)
