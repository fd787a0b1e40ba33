"""Example schema and resolvers built around Star Wars characters."""

from __future__ import annotations

import base64
import binascii
import re
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from gqlkit.ident import ID

__all__ = [
    "SCHEMA",
    "Human",
    "Droid",
    "Starship",
    "ReviewInput",
    "Review",
    "Resolver",
    "CharacterResolver",
    "HumanResolver",
    "DroidResolver",
    "StarshipResolver",
    "SearchResultResolver",
    "ReviewResolver",
    "FriendsConnectionResolver",
    "FriendsEdgeResolver",
    "PageInfoResolver",
    "convert_length",
    "encode_cursor",
    "resolve_character",
    "resolve_characters",
    "new_friends_connection",
]

SCHEMA = """
    schema {
        query: Query
        mutation: Mutation
    }
    # The query type, represents all of the entry points into our object graph
    type Query {
        hero(episode: Episode = NEWHOPE): Character
        reviews(episode: Episode!): [Review]!
        search(text: String!): [SearchResult]!
        character(id: ID!): Character
        droid(id: ID!): Droid
        human(id: ID!): Human
        starship(id: ID!): Starship
    }
    # The mutation type, represents all updates we can make to our data
    type Mutation {
        createReview(episode: Episode!, review: ReviewInput!): Review
    }
    # The episodes in the Star Wars trilogy
    enum Episode {
        # Star Wars Episode IV: A New Hope, released in 1977.
        NEWHOPE
        # Star Wars Episode V: The Empire Strikes Back, released in 1980.
        EMPIRE
        # Star Wars Episode VI: Return of the Jedi, released in 1983.
        JEDI
    }
    # A character from the Star Wars universe
    interface Character {
        # The ID of the character
        id: ID!
        # The name of the character
        name: String!
        # The friends of the character, or an empty list if they have none
        friends: [Character]
        # The friends of the character exposed as a connection with edges
        friendsConnection(first: Int, after: ID): FriendsConnection!
        # The movies this character appears in
        appearsIn: [Episode!]!
    }
    # Units of height
    enum LengthUnit {
        # The standard unit around the world
        METER
        # Primarily used in the United States
        FOOT
    }
    # A humanoid creature from the Star Wars universe
    type Human implements Character {
        # The ID of the human
        id: ID!
        # What this human calls themselves
        name: String!
        # Height in the preferred unit, default is meters
        height(unit: LengthUnit = METER): Float!
        # Mass in kilograms, or null if unknown
        mass: Float
        # This human's friends, or an empty list if they have none
        friends: [Character]
        # The friends of the human exposed as a connection with edges
        friendsConnection(first: Int, after: ID): FriendsConnection!
        # The movies this human appears in
        appearsIn: [Episode!]!
        # A list of starships this person has piloted, or an empty list if none
        starships: [Starship]
    }
    # An autonomous mechanical character in the Star Wars universe
    type Droid implements Character {
        # The ID of the droid
        id: ID!
        # What others call this droid
        name: String!
        # This droid's friends, or an empty list if they have none
        friends: [Character]
        # The friends of the droid exposed as a connection with edges
        friendsConnection(first: Int, after: ID): FriendsConnection!
        # The movies this droid appears in
        appearsIn: [Episode!]!
        # This droid's primary function
        primaryFunction: String
    }
    # A connection object for a character's friends
    type FriendsConnection {
        # The total number of friends
        totalCount: Int!
        # The edges for each of the character's friends.
        edges: [FriendsEdge]
        # A list of the friends, as a convenience when edges are not needed.
        friends: [Character]
        # Information for paginating this connection
        pageInfo: PageInfo!
    }
    # An edge object for a character's friends
    type FriendsEdge {
        # A cursor used for pagination
        cursor: ID!
        # The character represented by this friendship edge
        node: Character
    }
    # Information for paginating this connection
    type PageInfo {
        startCursor: ID
        endCursor: ID
        hasNextPage: Boolean!
    }
    # Represents a review for a movie
    type Review {
        # The number of stars this review gave, 1-5
        stars: Int!
        # Comment about the movie
        commentary: String
    }
    # The input object sent when someone is creating a new review
    input ReviewInput {
        # 0-5 stars
        stars: Int!
        # Comment about the movie, optional
        commentary: String
    }
    type Starship {
        # The ID of the starship
        id: ID!
        # The name of the starship
        name: String!
        # Length of the starship, along the longest axis
        length(unit: LengthUnit = METER): Float!
    }
    union SearchResult = Human | Droid | Starship
"""

_ALL_EPISODES = ("NEWHOPE", "EMPIRE", "JEDI")


@dataclass(frozen=True)
class Human:
    id: ID
    name: str
    friends: tuple[ID, ...]
    appears_in: tuple[str, ...]
    height: float
    mass: int
    starships: tuple[ID, ...] = ()


@dataclass(frozen=True)
class Droid:
    id: ID
    name: str
    friends: tuple[ID, ...]
    appears_in: tuple[str, ...]
    primary_function: str


@dataclass(frozen=True)
class Starship:
    id: ID
    name: str
    length: float


@dataclass(frozen=True)
class ReviewInput:
    stars: int
    commentary: str | None = None


@dataclass(frozen=True)
class Review:
    stars: int
    commentary: str | None = None


def _ids(*values: str) -> tuple[ID, ...]:
    return tuple(ID(v) for v in values)


HUMANS: tuple[Human, ...] = (
    Human(ID("1000"), "Luke Skywalker", _ids("1002", "1003", "2000", "2001"),
          _ALL_EPISODES, 1.72, 77, _ids("3001", "3003")),
    Human(ID("1001"), "Darth Vader", _ids("1004"), _ALL_EPISODES, 2.02, 136, _ids("3002")),
    Human(ID("1002"), "Han Solo", _ids("1000", "1003", "2001"),
          _ALL_EPISODES, 1.8, 80, _ids("3000", "3003")),
    Human(ID("1003"), "Leia Organa", _ids("1000", "1002", "2000", "2001"),
          _ALL_EPISODES, 1.5, 49),
    Human(ID("1004"), "Wilhuff Tarkin", _ids("1001"), ("NEWHOPE",), 1.8, 0),
)

DROIDS: tuple[Droid, ...] = (
    Droid(ID("2000"), "C-3PO", _ids("1000", "1002", "1003", "2001"), _ALL_EPISODES, "Protocol"),
    Droid(ID("2001"), "R2-D2", _ids("1000", "1002", "1003"), _ALL_EPISODES, "Astromech"),
)

STARSHIPS: tuple[Starship, ...] = (
    Starship(ID("3000"), "Millennium Falcon", 34.37),
    Starship(ID("3001"), "X-Wing", 12.5),
    Starship(ID("3002"), "TIE Advanced x1", 9.2),
    Starship(ID("3003"), "Imperial shuttle", 20.0),
)

_HUMAN_DATA = {h.id: h for h in HUMANS}
_DROID_DATA = {d.id: d for d in DROIDS}
_STARSHIP_DATA = {s.id: s for s in STARSHIPS}


def convert_length(meters: float, unit: str) -> float:
    """Convert a length in meters to the given unit."""
    if unit == "METER":
        return meters
    if unit == "FOOT":
        return meters * 3.28084
    raise ValueError("invalid unit")


def encode_cursor(index: int) -> ID:
    """Return the pagination cursor of the friend at ``index``."""
    return ID(base64.b64encode(f"cursor{index + 1}".encode()).decode("ascii"))


_CURSOR_NUMBER = re.compile(r"[+-]?\d+")


def _decode_cursor(cursor: str) -> int:
    try:
        raw = base64.b64decode(cursor, validate=True).decode()
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise ValueError(f"invalid cursor {cursor!r}") from exc
    text = raw.removeprefix("cursor")
    if not _CURSOR_NUMBER.fullmatch(text):
        raise ValueError(f"invalid cursor {cursor!r}")
    return int(text)


def resolve_character(id: str) -> CharacterResolver | None:
    """Return the human or droid with the given ID, or None."""
    human = _HUMAN_DATA.get(ID(id))
    if human is not None:
        return CharacterResolver(HumanResolver(human))
    droid = _DROID_DATA.get(ID(id))
    if droid is not None:
        return CharacterResolver(DroidResolver(droid))
    return None


def resolve_characters(ids: Iterable[str]) -> list[CharacterResolver]:
    """Resolve the known characters among ``ids``, in order."""
    return [c for c in map(resolve_character, ids) if c is not None]


def new_friends_connection(
    ids: Iterable[str], first: int | None = None, after: str | None = None
) -> FriendsConnectionResolver:
    """Page through ``ids``, starting after the ``after`` cursor."""
    ids = tuple(ID(i) for i in ids)
    start = _decode_cursor(after) if after is not None else 0
    end = len(ids)
    if first is not None:
        end = min(start + first, len(ids))
    if start < 0 or start > len(ids) or end < start:
        raise ValueError("cursor out of range")
    return FriendsConnectionResolver(ids, start, end)


class HumanResolver:
    def __init__(self, human: Human) -> None:
        self._human = human

    def id(self) -> ID:
        return self._human.id

    def name(self) -> str:
        return self._human.name

    def height(self, unit: str = "METER") -> float:
        return convert_length(self._human.height, unit)

    def mass(self) -> float | None:
        return float(self._human.mass) if self._human.mass else None

    def friends(self) -> list[CharacterResolver]:
        return resolve_characters(self._human.friends)

    def friends_connection(
        self, first: int | None = None, after: str | None = None
    ) -> FriendsConnectionResolver:
        return new_friends_connection(self._human.friends, first, after)

    def appears_in(self) -> list[str]:
        return list(self._human.appears_in)

    def starships(self) -> list[StarshipResolver]:
        return [StarshipResolver(_STARSHIP_DATA[i]) for i in self._human.starships]


class DroidResolver:
    def __init__(self, droid: Droid) -> None:
        self._droid = droid

    def id(self) -> ID:
        return self._droid.id

    def name(self) -> str:
        return self._droid.name

    def friends(self) -> list[CharacterResolver]:
        return resolve_characters(self._droid.friends)

    def friends_connection(
        self, first: int | None = None, after: str | None = None
    ) -> FriendsConnectionResolver:
        return new_friends_connection(self._droid.friends, first, after)

    def appears_in(self) -> list[str]:
        return list(self._droid.appears_in)

    def primary_function(self) -> str | None:
        return self._droid.primary_function or None


class StarshipResolver:
    def __init__(self, starship: Starship) -> None:
        self._starship = starship

    def id(self) -> ID:
        return self._starship.id

    def name(self) -> str:
        return self._starship.name

    def length(self, unit: str = "METER") -> float:
        return convert_length(self._starship.length, unit)


class CharacterResolver:
    """Resolves the ``Character`` interface for a human or a droid."""

    def __init__(self, character: HumanResolver | DroidResolver) -> None:
        self._character = character

    def id(self) -> ID:
        return self._character.id()

    def name(self) -> str:
        return self._character.name()

    def friends(self) -> list[CharacterResolver]:
        return self._character.friends()

    def friends_connection(
        self, first: int | None = None, after: str | None = None
    ) -> FriendsConnectionResolver:
        return self._character.friends_connection(first, after)

    def appears_in(self) -> list[str]:
        return self._character.appears_in()

    def to_human(self) -> HumanResolver | None:
        return self._character if isinstance(self._character, HumanResolver) else None

    def to_droid(self) -> DroidResolver | None:
        return self._character if isinstance(self._character, DroidResolver) else None


class SearchResultResolver:
    """Resolves the ``SearchResult`` union."""

    def __init__(self, result: HumanResolver | DroidResolver | StarshipResolver) -> None:
        self._result = result

    def to_human(self) -> HumanResolver | None:
        return self._result if isinstance(self._result, HumanResolver) else None

    def to_droid(self) -> DroidResolver | None:
        return self._result if isinstance(self._result, DroidResolver) else None

    def to_starship(self) -> StarshipResolver | None:
        return self._result if isinstance(self._result, StarshipResolver) else None


class ReviewResolver:
    def __init__(self, review: Review) -> None:
        self._review = review

    def stars(self) -> int:
        return self._review.stars

    def commentary(self) -> str | None:
        return self._review.commentary


class FriendsEdgeResolver:
    def __init__(self, cursor: ID, id: ID) -> None:
        self._cursor = cursor
        self._id = id

    def cursor(self) -> ID:
        return self._cursor

    def node(self) -> CharacterResolver | None:
        return resolve_character(self._id)


class PageInfoResolver:
    def __init__(self, start_cursor: ID, end_cursor: ID, has_next_page: bool) -> None:
        self._start_cursor = start_cursor
        self._end_cursor = end_cursor
        self._has_next_page = has_next_page

    def start_cursor(self) -> ID:
        return self._start_cursor

    def end_cursor(self) -> ID:
        return self._end_cursor

    def has_next_page(self) -> bool:
        return self._has_next_page


class FriendsConnectionResolver:
    """One page of a character's friends."""

    def __init__(self, ids: tuple[ID, ...], start: int, end: int) -> None:
        self._ids = ids
        self._start = start
        self._end = end

    def total_count(self) -> int:
        return len(self._ids)

    def edges(self) -> list[FriendsEdgeResolver]:
        return [
            FriendsEdgeResolver(encode_cursor(index), self._ids[index])
            for index in range(self._start, self._end)
        ]

    def friends(self) -> list[CharacterResolver]:
        return resolve_characters(self._ids[self._start:self._end])

    def page_info(self) -> PageInfoResolver:
        return PageInfoResolver(
            start_cursor=encode_cursor(self._start),
            end_cursor=encode_cursor(self._end - 1),
            has_next_page=self._end < len(self._ids),
        )


class Resolver:
    """Root resolver for queries and mutations; keeps its own reviews."""

    def __init__(self) -> None:
        self._reviews: defaultdict[str, list[Review]] = defaultdict(list)

    def hero(self, episode: str = "NEWHOPE") -> CharacterResolver:
        if episode == "EMPIRE":
            return CharacterResolver(HumanResolver(_HUMAN_DATA[ID("1000")]))
        return CharacterResolver(DroidResolver(_DROID_DATA[ID("2001")]))

    def reviews(self, episode: str) -> list[ReviewResolver]:
        return [ReviewResolver(r) for r in self._reviews.get(episode, ())]

    def search(self, text: str) -> list[SearchResultResolver]:
        results = [SearchResultResolver(HumanResolver(h)) for h in HUMANS if text in h.name]
        results += [SearchResultResolver(DroidResolver(d)) for d in DROIDS if text in d.name]
        results += [SearchResultResolver(StarshipResolver(s)) for s in STARSHIPS if text in s.name]
        return results

    def character(self, id: str) -> CharacterResolver | None:
        return resolve_character(id)

    def human(self, id: str) -> HumanResolver | None:
        human = _HUMAN_DATA.get(ID(id))
        return HumanResolver(human) if human is not None else None

    def droid(self, id: str) -> DroidResolver | None:
        droid = _DROID_DATA.get(ID(id))
        return DroidResolver(droid) if droid is not None else None

    def starship(self, id: str) -> StarshipResolver | None:
        starship = _STARSHIP_DATA.get(ID(id))
        return StarshipResolver(starship) if starship is not None else None

    def create_review(self, episode: str, review: ReviewInput) -> ReviewResolver:
        stored = Review(stars=review.stars, commentary=review.commentary)
        self._reviews[episode].append(stored)
        return ReviewResolver(stored)