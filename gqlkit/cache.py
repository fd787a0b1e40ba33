"""Cache hints that resolvers give and transports turn into Cache-Control."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from datetime import timedelta
from enum import IntEnum

__all__ = [
    "Scope",
    "Hint",
    "HintCollector",
    "ttl",
    "add_hint",
    "hintable",
    "resolve_hints",
]


class Scope(IntEnum):
    """Cache-control scope."""

    PUBLIC = 0
    PRIVATE = 1


@dataclass(frozen=True)
class Hint:
    """How long, and for whom, something may be cached."""

    max_age: timedelta | None = None
    scope: Scope = Scope.PUBLIC

    def __str__(self) -> str:
        if self.max_age is None:
            raise ValueError("hint has no max age")
        return f"{self.scope.name.lower()}, max-age={int(self.max_age.total_seconds())}"


def ttl(duration: timedelta | float) -> timedelta:
    """Return a cache duration; numbers are taken as seconds."""
    if isinstance(duration, timedelta):
        return duration
    return timedelta(seconds=duration)


def resolve_hints(hints: Iterable[Hint]) -> Hint:
    """Merge hints: the shortest max age wins, any private hint makes it private."""
    min_age: timedelta | None = None
    scope = Scope.PUBLIC
    for hint in hints:
        if hint.scope == Scope.PRIVATE:
            scope = Scope.PRIVATE
        if hint.max_age is not None and (min_age is None or hint.max_age < min_age):
            min_age = hint.max_age
    return Hint(max_age=min_age if min_age is not None else timedelta(0), scope=scope)


class HintCollector:
    """Gathers the hints given while one request is executed."""

    def __init__(self) -> None:
        self._hints: list[Hint] = []
        self._lock = threading.Lock()

    def add(self, hint: Hint) -> None:
        with self._lock:
            self._hints.append(hint)

    def resolve(self) -> Hint:
        with self._lock:
            return resolve_hints(list(self._hints))


_current: ContextVar[HintCollector | None] = ContextVar("gqlkit_cache_hints", default=None)


def add_hint(hint: Hint) -> None:
    """Record a hint for the current request; ignored outside ``hintable``."""
    collector = _current.get()
    if collector is not None:
        collector.add(hint)


@contextmanager
def hintable() -> Iterator[HintCollector]:
    """Collect the hints added inside the block."""
    collector = HintCollector()
    token = _current.set(collector)
    try:
        yield collector
    finally:
        _current.reset(token)