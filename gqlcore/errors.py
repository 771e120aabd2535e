"""Query errors and panic handling for GraphQL execution."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Location:
    """A position in a query document."""

    line: int
    column: int

    def before(self, other: Location) -> bool:
        """Return True if this location comes before ``other``."""
        return self.line < other.line or (
            self.line == other.line and self.column < other.column
        )


@dataclass
class QueryError(Exception):
    """An error reported to the client as part of a GraphQL response."""

    message: str = ""
    locations: list[Location] = field(default_factory=list)
    path: list[Any] = field(default_factory=list)
    rule: str = ""
    extensions: dict[str, Any] | None = None
    err: BaseException | None = field(default=None, compare=False, repr=False)
    resolver_error: BaseException | None = field(default=None, compare=False)

    __hash__ = Exception.__hash__

    def __post_init__(self) -> None:
        super().__init__(self.message)
        if self.err is not None:
            self.__cause__ = self.err

    def __str__(self) -> str:
        text = f"graphql: {self.message}"
        for loc in self.locations:
            text += f" (line {loc.line}, column {loc.column})"
        return text

    def unwrap(self) -> BaseException | None:
        """Return the underlying error, if any."""
        return self.err

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form, leaving out empty members."""
        result: dict[str, Any] = {"message": self.message}
        if self.locations:
            result["locations"] = [
                {"line": loc.line, "column": loc.column} for loc in self.locations
            ]
        if self.path:
            result["path"] = list(self.path)
        if self.extensions:
            result["extensions"] = dict(self.extensions)
        return result


def errorf(message_format: str, *args: Any) -> QueryError:
    """Build a QueryError from a %-style format.

    If the last argument is an exception, it becomes the wrapped error.
    """
    wrapped = args[-1] if args and isinstance(args[-1], BaseException) else None
    message = message_format % args if args else message_format
    return QueryError(message=message, err=wrapped)


class PanicHandler(ABC):
    """Turns unexpected failures during execution into query errors."""

    @abstractmethod
    def make_panic_error(self, value: Any) -> QueryError:
        """Create a QueryError describing ``value``."""


class DefaultPanicHandler(PanicHandler):
    """The panic handler used unless another is configured."""

    def make_panic_error(self, value: Any) -> QueryError:
        return errorf("panic occurred: %s", value)