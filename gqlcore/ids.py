"""The GraphQL ID scalar and the custom scalar interface."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class Unmarshaler(ABC):
    """A Python type mapped to a custom GraphQL scalar type.

    Values of such a type are built from GraphQL input by a parse function
    that raises when the input has the wrong shape.
    """

    @abstractmethod
    def implements_graphql_type(self, name: str) -> bool:
        """Return True if this type stands for the scalar ``name``."""


class ID(str, Unmarshaler):
    """GraphQL's ``ID`` scalar."""

    def implements_graphql_type(self, name: str) -> bool:
        return name == "ID"

    def to_json(self) -> str:
        """Return the value as a quoted JSON string."""
        return json.dumps(str(self), ensure_ascii=False)


def parse_id(value: Any) -> ID:
    """Build an ID from a string or 32-bit integer input value."""
    if isinstance(value, str):
        return ID(value)
    if (
        isinstance(value, int)
        and not isinstance(value, bool)
        and _INT32_MIN <= value <= _INT32_MAX
    ):
        return ID(str(value))
    raise TypeError(f"wrong type for ID: {type(value).__name__}")