"""Query errors reported while parsing, validating and executing GraphQL."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any

__all__ = ["Location", "QueryError", "errorf"]


@dataclass(frozen=True)
class Location:
    """A line and column inside a query document."""

    line: int
    column: int

    def before(self, other: Location) -> bool:
        """Return True if this location comes before ``other``."""
        return (self.line, self.column) < (other.line, other.column)

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "column": self.column}


class QueryError(Exception):
    """An error that belongs in the ``errors`` list of a GraphQL response."""

    def __init__(
        self,
        message: str,
        *,
        locations: list[Location] | None = None,
        path: list[Any] | None = None,
        rule: str = "",
        err: BaseException | None = None,
        resolver_error: BaseException | None = None,
        extensions: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.locations = list(locations or [])
        self.path = list(path or [])
        self.rule = rule
        self.err = err
        self.resolver_error = resolver_error
        self.extensions = extensions
        if err is not None:
            self.__cause__ = err

    def __str__(self) -> str:
        text = f"graphql: {self.message}"
        for loc in self.locations:
            text += f" (line {loc.line}, column {loc.column})"
        return text

    def __repr__(self) -> str:
        return f"QueryError({self.message!r}, path={self.path!r})"

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form of the error, leaving out empty parts."""
        data: dict[str, Any] = {"message": self.message}
        if self.locations:
            data["locations"] = [loc.to_dict() for loc in self.locations]
        if self.path:
            data["path"] = list(self.path)
        if self.extensions:
            data["extensions"] = dict(self.extensions)
        return data


_VERB = re.compile(r"%([-+# 0]*\d*(?:\.\d+)?)([a-zA-Z%])")


def _text(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _format(fmt: str, args: tuple[Any, ...]) -> str:
    remaining = iter(args)

    def substitute(match: re.Match[str]) -> str:
        flags, verb = match.groups()
        if verb == "%":
            return "%"
        try:
            arg = next(remaining)
        except StopIteration:
            return f"%!{verb}(MISSING)"
        if verb in "vs":
            return ("%" + flags + "s") % _text(arg)
        if verb == "q":
            return json.dumps(_text(arg), ensure_ascii=False)
        if verb == "t":
            return _text(bool(arg))
        if verb == "T":
            return type(arg).__name__
        if verb in "dxXoeEfgG":
            try:
                return ("%" + flags + verb) % arg
            except TypeError:
                return f"%!{verb}({_text(arg)})"
        return _text(arg)

    result = _VERB.sub(substitute, fmt)
    extra = list(remaining)
    if extra:
        parts = ", ".join(f"{type(a).__name__}={_text(a)}" for a in extra)
        result += f"%!(EXTRA {parts})"
    return result


def errorf(fmt: str, *args: Any) -> QueryError:
    """Build a QueryError from a format string.

    If the last argument is an exception it becomes the wrapped cause.
    """
    cause = args[-1] if args and isinstance(args[-1], BaseException) else None
    return QueryError(_format(fmt, args), err=cause)