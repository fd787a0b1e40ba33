"""The GraphQL ``ID`` scalar and the protocol for custom input scalars."""

from __future__ import annotations

import json
from typing import Any, Protocol, runtime_checkable

__all__ = ["Unmarshaler", "ID", "parse_id"]


@runtime_checkable
class Unmarshaler(Protocol):
    """A Python type mapped to a custom GraphQL scalar."""

    def implements_graphql_type(self, name: str) -> bool:
        """Return True if this type stands for the named scalar."""
        ...

    def unmarshal_graphql(self, value: Any) -> Any:
        """Build a value of this type from a GraphQL input value."""
        ...


class ID(str):
    """GraphQL's ``ID`` scalar."""

    __slots__ = ()

    def implements_graphql_type(self, name: str) -> bool:
        return name == "ID"

    def unmarshal_graphql(self, value: Any) -> ID:
        return parse_id(value)

    def to_json(self) -> str:
        """Return the ID as a quoted JSON string."""
        return json.dumps(str(self), ensure_ascii=False)


def parse_id(value: Any) -> ID:
    """Build an ID from a string or an integer input value."""
    if isinstance(value, str):
        return ID(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return ID(str(value))
    raise TypeError(f"wrong type for ID: {type(value).__name__}")