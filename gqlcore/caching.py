"""A small schema whose resolvers report cache hints."""

from __future__ import annotations

from datetime import timedelta

from gqlcore.cache import Hint, Scope, add_hint

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


class UserProfile:
    """The profile of the current user."""

    def __init__(self, name: str) -> None:
        self._name = name

    def name(self) -> str:
        return self._name


class CachingResolver:
    """Root resolver for the caching schema."""

    def hello(self, name: str) -> str:
        add_hint(Hint(max_age=timedelta(hours=1), scope=Scope.PUBLIC))
        return f"Hello {name}!"

    def me(self) -> UserProfile:
        add_hint(Hint(max_age=timedelta(minutes=1), scope=Scope.PRIVATE))
        return UserProfile("World")