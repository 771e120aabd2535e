"""A sample social-network schema with interfaces, unions and inputs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from gqlcore.ids import ID

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


@dataclass(frozen=True)
class Page:
    """Pagination input: the first index and the end index of a slice."""

    first: float | None = None
    last: float | None = None


@dataclass(eq=False)
class User:
    """A user of the social network."""

    id_field: str
    name_field: str
    role_field: str
    address: list[str] | None = None
    friends: list[User] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    email: str = ""
    phone: str = ""

    def id(self) -> ID:
        return ID(self.id_field)

    def name(self) -> str:
        return self.name_field

    def role(self) -> str:
        return self.role_field

    def friends_resolver(self, page: Page | None = None) -> list[User]:
        """Return the friends, sliced by ``page`` when given."""
        count = len(self.friends)
        start, stop = 0, count
        if page is not None:
            if page.first is not None:
                start = int(page.first)
                if start > count:
                    raise ValueError("not enough users")
            if page.last is not None:
                stop = int(page.last)
                if stop == 0 or stop > count:
                    stop = count
        if start < 0 or stop < 0 or start > stop:
            raise IndexError(f"slice bounds out of range [{start}:{stop}]")
        return self.friends[start:stop]


def _build_users() -> list[User]:
    users = [
        User("0x01", "Albus Dumbledore", "ADMIN",
             ["Office @ Hogwarts", "where Horcruxes are"],
             email="[email]", phone="[phone]"),
        User("0x02", "Harry Potter", "USER",
             ["123 dorm room @ Hogwarts", "456 random place"],
             email="[email]", phone="[phone]"),
        User("0x03", "Hermione Granger", "USER",
             ["233 dorm room @ Hogwarts", "786 @ random place"],
             email="[email]", phone="[phone]"),
        User("0x04", "Ronald Weasley", "USER",
             ["411 dorm room @ Hogwarts", "981 @ random place"],
             email="[email]", phone="[phone]"),
    ]
    albus, harry, hermione, ron = users
    albus.friends = [harry]
    harry.friends = [albus, hermione, ron]
    hermione.friends = [harry, ron]
    ron.friends = [harry, hermione]
    return users


USERS: list[User] = _build_users()
_users_by_id = {u.id_field: u for u in USERS}


class SocialResolver:
    """Root resolver for the social schema."""

    def admin(self, id: str, role: str = "ADMIN") -> User:
        usr = _users_by_id.get(id)
        if usr is not None and usr.role_field == role:
            return usr
        raise LookupError(f"user with id={id} and role={role} does not exist")

    def user(self, id: str) -> User:
        usr = _users_by_id.get(id)
        if usr is None:
            raise LookupError(f"user with id={id} does not exist")
        return usr

    def search(self, text: str) -> list[User]:
        return [u for u in USERS if text in u.name_field]