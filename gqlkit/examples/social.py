"""Example schema and resolvers for a small social network of users."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from gqlkit.ident import ID

__all__ = [
    "SCHEMA",
    "UserNotFoundError",
    "Page",
    "Contact",
    "User",
    "AdminResolver",
    "SearchResult",
    "Resolver",
    "USERS",
]

SCHEMA = """
    schema {
        query: Query
    }

    type Query {
        admin(id: ID!, role: Role = ADMIN): Admin!
        user(id: ID!): User!
        search(text: String!): [SearchResult]!
    }

    interface Admin {
        id: ID!
        name: String!
        role: Role!
    }

    interface Person {
        name: String!
    }

    scalar Time

    type User implements Admin & Person {
        id: ID!
        name: String!
        email: String!
        role: Role!
        phone: String!
        address: [String!]
        friends(page: Pagination): [User]
        createdAt: Time!
    }

    input Pagination {
        first: Int
        last: Int
    }

    enum Role {
        ADMIN
        USER
    }

    union SearchResult = User
"""


class UserNotFoundError(LookupError):
    """Raised when no user matches a lookup."""


@dataclass(frozen=True)
class Page:
    """Pagination arguments for a user's friends."""

    first: float | None = None
    last: float | None = None


@dataclass(frozen=True)
class Contact:
    email: str
    phone: str


@dataclass(eq=False)
class User:
    """A member of the network; may act as an admin."""

    id_field: str
    name_field: str
    role_field: str
    contact: Contact
    address: list[str] | None = None
    friends: list[User] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def id(self) -> ID:
        return ID(self.id_field)

    def name(self) -> str:
        return self.name_field

    def role(self) -> str:
        return self.role_field

    @property
    def email(self) -> str:
        return self.contact.email

    @property
    def phone(self) -> str:
        return self.contact.phone

    def friends_resolver(self, page: Page | None = None) -> list[User]:
        """Return a slice of the friends list chosen by ``page``."""
        count = len(self.friends)
        start, end = 0, count
        if page is not None:
            if page.first is not None:
                start = int(page.first)
                if start > count:
                    raise ValueError("not enough users")
            if page.last is not None:
                end = int(page.last)
                if end == 0 or end > count:
                    end = count
        if start < 0 or end < start:
            raise ValueError(f"invalid page range [{start}:{end}]")
        return self.friends[start:end]


class AdminResolver:
    """Resolves the ``Admin`` interface."""

    def __init__(self, admin: User) -> None:
        self._admin = admin

    def id(self) -> ID:
        return self._admin.id()

    def name(self) -> str:
        return self._admin.name()

    def role(self) -> str:
        return self._admin.role()

    def to_user(self) -> User | None:
        return self._admin if isinstance(self._admin, User) else None


class SearchResult:
    """Resolves the ``SearchResult`` union."""

    def __init__(self, result: object) -> None:
        self._result = result

    def to_user(self) -> User | None:
        return self._result if isinstance(self._result, User) else None


def _contact() -> Contact:
    return Contact(email="[email]", phone="[phone]")


def _build_users() -> tuple[User, ...]:
    albus = User("0x01", "Albus Dumbledore", "ADMIN", _contact(),
                 ["Office @ Hogwarts", "where Horcruxes are"])
    harry = User("0x02", "Harry Potter", "USER", _contact(),
                 ["123 dorm room @ Hogwarts", "456 random place"])
    hermione = User("0x03", "Hermione Granger", "USER", _contact(),
                    ["233 dorm room @ Hogwarts", "786 @ random place"])
    ronald = User("0x04", "Ronald Weasley", "USER", _contact(),
                  ["411 dorm room @ Hogwarts", "981 @ random place"])
    albus.friends = [harry]
    harry.friends = [albus, hermione, ronald]
    hermione.friends = [harry, ronald]
    ronald.friends = [harry, hermione]
    return albus, harry, hermione, ronald


USERS: tuple[User, ...] = _build_users()
_USERS_BY_ID = {u.id_field: u for u in USERS}


class Resolver:
    """Root query resolver."""

    def admin(self, id: str, role: str = "ADMIN") -> AdminResolver:
        user = _USERS_BY_ID.get(id)
        if user is not None and user.role_field == role:
            return AdminResolver(user)
        raise UserNotFoundError(f"user with id={id} and role={role} does not exist")

    def user(self, id: str) -> User:
        user = _USERS_BY_ID.get(id)
        if user is None:
            raise UserNotFoundError(f"user with id={id} does not exist")
        return user

    def search(self, text: str) -> list[SearchResult]:
        return [SearchResult(u) for u in USERS if text in u.name_field]