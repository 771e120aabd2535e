"""Cache hints that resolvers attach to the request being executed."""

from __future__ import annotations

import contextvars
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum


class Scope(Enum):
    """Cache-control scope."""

    PUBLIC = 0
    PRIVATE = 1


@dataclass(frozen=True)
class Hint:
    """How long, and for whom, a result may be cached."""

    max_age: timedelta | None = None
    scope: Scope = Scope.PUBLIC

    def __str__(self) -> str:
        """Return the HTTP Cache-Control value for the hint."""
        if self.max_age is None:
            raise ValueError("hint has no max age")
        scope = "private" if self.scope is Scope.PRIVATE else "public"
        return f"{scope}, max-age={int(self.max_age.total_seconds())}"


class HintCollector:
    """Gathers hints for one request and combines them."""

    def __init__(self) -> None:
        self._hints: list[Hint] = []
        self._lock = threading.Lock()

    def add(self, hint: Hint) -> None:
        """Record a hint."""
        with self._lock:
            self._hints.append(hint)

    def resolve(self) -> Hint:
        """Combine the hints: the shortest age, private if any hint is private."""
        with self._lock:
            hints = list(self._hints)
        scope = Scope.PUBLIC
        min_age: timedelta | None = None
        for hint in hints:
            if hint.scope is Scope.PRIVATE:
                scope = Scope.PRIVATE
            if hint.max_age is not None and (min_age is None or hint.max_age < min_age):
                min_age = hint.max_age
        return Hint(max_age=min_age if min_age is not None else timedelta(0), scope=scope)


_current: contextvars.ContextVar[HintCollector | None] = contextvars.ContextVar(
    "cache_hints", default=None
)


def add_hint(hint: Hint) -> None:
    """Apply a hint to the current request; does nothing outside ``hintable``."""
    collector = _current.get()
    if collector is not None:
        collector.add(hint)


@contextmanager
def hintable() -> Iterator[HintCollector]:
    """Make hints added within the block go to a fresh collector."""
    collector = HintCollector()
    token = _current.set(collector)
    try:
        yield collector
    finally:
        _current.reset(token)