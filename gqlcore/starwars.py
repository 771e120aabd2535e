"""A sample schema and resolvers built around Star Wars characters."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass, field
from typing import Union

from gqlcore.ids import ID

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
    """A human character."""

    id: ID
    name: str
    friends: tuple[ID, ...]
    appears_in: tuple[str, ...]
    height: float
    mass: int
    starships: tuple[ID, ...] = ()


@dataclass(frozen=True)
class Droid:
    """A droid character."""

    id: ID
    name: str
    friends: tuple[ID, ...]
    appears_in: tuple[str, ...]
    primary_function: str


@dataclass(frozen=True)
class Starship:
    """A starship."""

    id: ID
    name: str
    length: float


@dataclass(frozen=True)
class Review:
    """A stored movie review."""

    stars: int
    commentary: str | None = None


@dataclass(frozen=True)
class ReviewInput:
    """Input for creating a review."""

    stars: int
    commentary: str | None = None


def _ids(*values: str) -> tuple[ID, ...]:
    return tuple(ID(v) for v in values)


HUMANS: tuple[Human, ...] = (
    Human(ID("1000"), "Luke Skywalker", _ids("1002", "1003", "2000", "2001"),
          _ALL_EPISODES, 1.72, 77, _ids("3001", "3003")),
    Human(ID("1001"), "Darth Vader", _ids("1004"), _ALL_EPISODES, 2.02, 136,
          _ids("3002")),
    Human(ID("1002"), "Han Solo", _ids("1000", "1003", "2001"), _ALL_EPISODES,
          1.8, 80, _ids("3000", "3003")),
    Human(ID("1003"), "Leia Organa", _ids("1000", "1002", "2000", "2001"),
          _ALL_EPISODES, 1.5, 49),
    Human(ID("1004"), "Wilhuff Tarkin", _ids("1001"), ("NEWHOPE",), 1.8, 0),
)

DROIDS: tuple[Droid, ...] = (
    Droid(ID("2000"), "C-3PO", _ids("1000", "1002", "1003", "2001"),
          _ALL_EPISODES, "Protocol"),
    Droid(ID("2001"), "R2-D2", _ids("1000", "1002", "1003"), _ALL_EPISODES,
          "Astromech"),
)

STARSHIPS: tuple[Starship, ...] = (
    Starship(ID("3000"), "Millennium Falcon", 34.37),
    Starship(ID("3001"), "X-Wing", 12.5),
    Starship(ID("3002"), "TIE Advanced x1", 9.2),
    Starship(ID("3003"), "Imperial shuttle", 20.0),
)

_human_data = {h.id: h for h in HUMANS}
_droid_data = {d.id: d for d in DROIDS}
_starship_data = {s.id: s for s in STARSHIPS}


def convert_length(meters: float, unit: str) -> float:
    """Convert a length in meters to ``unit`` (METER or FOOT)."""
    if unit == "METER":
        return meters
    if unit == "FOOT":
        return meters * 3.28084
    raise ValueError("invalid unit")


def encode_cursor(index: int) -> ID:
    """Return the opaque cursor for the item at ``index``."""
    return ID(base64.b64encode(f"cursor{index + 1}".encode()).decode("ascii"))


def _decode_cursor(cursor: str) -> int:
    try:
        raw = base64.b64decode(cursor, validate=True).decode()
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise ValueError(f"invalid cursor {cursor!r}") from exc
    text = raw[len("cursor"):] if raw.startswith("cursor") else raw
    return int(text)


Character = Union["HumanResolver", "DroidResolver"]


def resolve_character(id: str) -> Character | None:
    """Return the human or droid with ``id``, or None."""
    key = ID(id)
    if key in _human_data:
        return HumanResolver(_human_data[key])
    if key in _droid_data:
        return DroidResolver(_droid_data[key])
    return None


def resolve_characters(ids) -> list[Character]:
    """Return the characters found among ``ids``, skipping unknown ones."""
    return [c for c in map(resolve_character, ids) if c is not None]


class HumanResolver:
    """Resolves the fields of a Human."""

    def __init__(self, human: Human) -> None:
        self._h = human

    def id(self) -> ID:
        return self._h.id

    def name(self) -> str:
        return self._h.name

    def height(self, unit: str = "METER") -> float:
        return convert_length(self._h.height, unit)

    def mass(self) -> float | None:
        return float(self._h.mass) if self._h.mass else None

    def friends(self) -> list[Character]:
        return resolve_characters(self._h.friends)

    def friends_connection(self, first: int | None = None,
                           after: str | None = None) -> FriendsConnectionResolver:
        return FriendsConnectionResolver.create(self._h.friends, first, after)

    def appears_in(self) -> list[str]:
        return list(self._h.appears_in)

    def starships(self) -> list[StarshipResolver]:
        return [StarshipResolver(_starship_data[i]) for i in self._h.starships]


class DroidResolver:
    """Resolves the fields of a Droid."""

    def __init__(self, droid: Droid) -> None:
        self._d = droid

    def id(self) -> ID:
        return self._d.id

    def name(self) -> str:
        return self._d.name

    def friends(self) -> list[Character]:
        return resolve_characters(self._d.friends)

    def friends_connection(self, first: int | None = None,
                           after: str | None = None) -> FriendsConnectionResolver:
        return FriendsConnectionResolver.create(self._d.friends, first, after)

    def appears_in(self) -> list[str]:
        return list(self._d.appears_in)

    def primary_function(self) -> str | None:
        return self._d.primary_function or None


class StarshipResolver:
    """Resolves the fields of a Starship."""

    def __init__(self, starship: Starship) -> None:
        self._s = starship

    def id(self) -> ID:
        return self._s.id

    def name(self) -> str:
        return self._s.name

    def length(self, unit: str = "METER") -> float:
        return convert_length(self._s.length, unit)


class ReviewResolver:
    """Resolves the fields of a Review."""

    def __init__(self, review: Review) -> None:
        self._r = review

    def stars(self) -> int:
        return self._r.stars

    def commentary(self) -> str | None:
        return self._r.commentary


@dataclass(frozen=True)
class PageInfoResolver:
    """Pagination details of a connection."""

    _start_cursor: ID
    _end_cursor: ID
    _has_next_page: bool

    def start_cursor(self) -> ID:
        return self._start_cursor

    def end_cursor(self) -> ID:
        return self._end_cursor

    def has_next_page(self) -> bool:
        return self._has_next_page


@dataclass(frozen=True)
class FriendsEdgeResolver:
    """One edge of a friends connection."""

    _cursor: ID
    _id: ID

    def cursor(self) -> ID:
        return self._cursor

    def node(self) -> Character | None:
        return resolve_character(self._id)


@dataclass(frozen=True)
class FriendsConnectionResolver:
    """A window onto a list of friend ids."""

    ids: tuple[ID, ...]
    start: int
    stop: int

    @classmethod
    def create(cls, ids, first: int | None = None,
               after: str | None = None) -> FriendsConnectionResolver:
        """Build the window selected by ``first`` and the ``after`` cursor."""
        ids = tuple(ids)
        start = _decode_cursor(after) if after is not None else 0
        stop = len(ids)
        if first is not None:
            stop = min(start + first, len(ids))
        return cls(ids, start, stop)

    def total_count(self) -> int:
        return len(self.ids)

    def edges(self) -> list[FriendsEdgeResolver]:
        return [FriendsEdgeResolver(encode_cursor(i), self.ids[i])
                for i in range(self.start, self.stop)]

    def friends(self) -> list[Character]:
        return resolve_characters(self.ids[self.start:self.stop])

    def page_info(self) -> PageInfoResolver:
        return PageInfoResolver(
            encode_cursor(self.start),
            encode_cursor(self.stop - 1),
            self.stop < len(self.ids),
        )


@dataclass
class Resolver:
    """Root resolver for queries and mutations of the schema."""

    _reviews: dict[str, list[Review]] = field(default_factory=dict)

    def hero(self, episode: str = "NEWHOPE") -> Character:
        if episode == "EMPIRE":
            return HumanResolver(_human_data[ID("1000")])
        return DroidResolver(_droid_data[ID("2001")])

    def reviews(self, episode: str) -> list[ReviewResolver]:
        return [ReviewResolver(r) for r in self._reviews.get(episode, [])]

    def search(self, text: str) -> list[HumanResolver | DroidResolver | StarshipResolver]:
        found: list[HumanResolver | DroidResolver | StarshipResolver] = []
        found.extend(HumanResolver(h) for h in HUMANS if text in h.name)
        found.extend(DroidResolver(d) for d in DROIDS if text in d.name)
        found.extend(StarshipResolver(s) for s in STARSHIPS if text in s.name)
        return found

    def character(self, id: str) -> Character | None:
        return resolve_character(id)

    def human(self, id: str) -> HumanResolver | None:
        h = _human_data.get(ID(id))
        return HumanResolver(h) if h is not None else None

    def droid(self, id: str) -> DroidResolver | None:
        d = _droid_data.get(ID(id))
        return DroidResolver(d) if d is not None else None

    def starship(self, id: str) -> StarshipResolver | None:
        s = _starship_data.get(ID(id))
        return StarshipResolver(s) if s is not None else None

    def create_review(self, episode: str, review: ReviewInput) -> ReviewResolver:
        stored = Review(stars=review.stars, commentary=review.commentary)
        self._reviews.setdefault(episode, []).append(stored)
        return ReviewResolver(stored)