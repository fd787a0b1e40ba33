"""Example resolver that gives cache hints for its fields."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from gqlkit.cache import Hint, Scope, add_hint, ttl

__all__ = ["SCHEMA", "UserProfile", "Resolver"]

SCHEMA = """
    schema {
        query: Query
    }

    type Query {
        hello(name: String!): String!
        me: UserProfile!
    }

    type UserProfile {
        name: String!
    }
"""


@dataclass(frozen=True)
class UserProfile:
    name: str


class Resolver:
    """Root query resolver."""

    def hello(self, name: str) -> str:
        add_hint(Hint(max_age=ttl(timedelta(hours=1)), scope=Scope.PUBLIC))
        return f"Hello {name}!"

    def me(self) -> UserProfile:
        add_hint(Hint(max_age=ttl(timedelta(minutes=1)), scope=Scope.PRIVATE))
        return UserProfile(name="World")