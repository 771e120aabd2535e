"""A sample schema whose resolver reports errors with extensions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from gqlcore.ids import ID

SCHEMA = """
	schema {
		query: Query
	}
	type Query {
		droid(id: ID!): Droid!
	}
	# An autonomous mechanical character in the Star Wars universe
	type Droid {
		# The ID of the droid
		id: ID!
		# What others call this droid
		name: String!
	}
"""


@dataclass(frozen=True)
class _Droid:
    id: ID
    name: str


_DROIDS = (
    _Droid(ID("2000"), "C-3PO"),
    _Droid(ID("2001"), "R2-D2"),
)
_droid_data = {d.id: d for d in _DROIDS}


class DroidNotFoundError(Exception):
    """Raised when no droid has the requested id."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(code, message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"error [{self.code}]: {self.message}"

    def extensions(self) -> dict[str, Any]:
        """Return the extra data reported with the error."""
        return {"code": self.code, "message": self.message}


class DroidResolver:
    """Resolves the fields of a Droid."""

    def __init__(self, droid: _Droid) -> None:
        self._d = droid

    def id(self) -> ID:
        return self._d.id

    def name(self) -> str:
        return self._d.name


class CustomErrorsResolver:
    """Root resolver for the custom-errors schema."""

    def droid(self, id: str) -> DroidResolver:
        found = _droid_data.get(ID(id))
        if found is None:
            raise DroidNotFoundError(
                code="NotFound",
                message="This is not the droid you are looking for",
            )
        return DroidResolver(found)