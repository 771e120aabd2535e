# gqlcore

Building blocks for GraphQL services in Python: query error types, the `ID`
and `Map` scalars, cache hints collected while a request runs, and sample
schemas with their resolvers.

## What is inside

- `gqlcore.errors`
  - `Location(line, column)` with `before(other)` to order positions.
  - `QueryError`, an exception with `message`, `locations`, `path`, `rule`,
    `extensions`, the wrapped `err` and `resolver_error`. `str()` gives
    `graphql: <message>` followed by ` (line L, column C)` for each location;
    `unwrap()` returns the wrapped error; `to_dict()` gives the JSON-ready
    form, leaving out empty locations, path and extensions.
  - `errorf(format, *args)` builds a `QueryError` from a `%`-style format; if
    the last argument is an exception it becomes the wrapped error.
  - `PanicHandler`, an abstract base with `make_panic_error(value)`, and
    `DefaultPanicHandler`, which returns a `QueryError` with the message
    `panic occurred: <value>`.
- `gqlcore.ids`
  - `Unmarshaler`, an abstract base for types that stand for a custom scalar,
    with `implements_graphql_type(name)`.
  - `ID`, a `str` subclass for the `ID` scalar, with `to_json()`.
  - `parse_id(value)` accepts a string or a 32-bit integer and raises
    `TypeError` for anything else.
- `gqlcore.scalars`: `Map`, a `dict` subclass for a `Map` scalar, and
  `parse_map(value)`, which raises `TypeError` unless given a dict.
- `gqlcore.cache`: `Scope` (`PUBLIC`, `PRIVATE`), `Hint(max_age, scope)` whose
  `str()` is a `Cache-Control` value, `HintCollector` with `add()` and
  `resolve()`, `add_hint(hint)` and the `hintable()` context manager. Outside
  a `hintable()` block `add_hint` does nothing. `resolve()` takes the shortest
  age (zero when no hint has one) and is private if any hint is private.
- Sample schemas, each with a `SCHEMA` string and resolver classes:
  - `gqlcore.starwars`: characters, starships, reviews and cursor-based friend
    connections (`Resolver`, `HumanResolver`, `DroidResolver`,
    `StarshipResolver`, `FriendsConnectionResolver`, `convert_length`,
    `encode_cursor`, `resolve_character`, `resolve_characters`).
    `Resolver.create_review` stores reviews on the resolver instance.
  - `gqlcore.social`: `User`, `Page` and `SocialResolver`; unknown users raise
    `LookupError`, and `User.friends_resolver` raises `ValueError` when the
    page starts past the end.
  - `gqlcore.customerrors`: `CustomErrorsResolver`, which raises
    `DroidNotFoundError` (with `extensions()`) for an unknown droid.
  - `gqlcore.caching`: `CachingResolver`, whose fields add cache hints.

## Installation

```
pip install .
```

## Examples

Errors:

```python
from gqlcore.errors import errorf, Location

err = errorf("field %s not found", "name")
err.locations.append(Location(line=3, column=5))
str(err)        # 'graphql: field name not found (line 3, column 5)'
err.to_dict()   # {'message': 'field name not found', 'locations': [{'line': 3, 'column': 5}]}
```

IDs:

```python
from gqlcore.ids import parse_id

parse_id(1234) == "1234"    # True
parse_id(1234).to_json()    # '"1234"'
parse_id(1.5)               # raises TypeError: wrong type for ID: float
```

Cache hints:

```python
from datetime import timedelta
from gqlcore.cache import Hint, Scope, add_hint, hintable

with hintable() as collector:
    add_hint(Hint(max_age=timedelta(hours=1), scope=Scope.PUBLIC))
    add_hint(Hint(max_age=timedelta(minutes=1), scope=Scope.PRIVATE))

str(collector.resolve())    # 'private, max-age=60'
```

Sample resolvers:

```python
from gqlcore.starwars import Resolver

hero = Resolver().hero("EMPIRE")
hero.name()                 # 'Luke Skywalker'
hero.height("FOOT")         # about 5.643
```

## What this package does not do

There is no GraphQL parser, validator or executor here. The `SCHEMA` strings
are plain text and nothing in the package reads them; the resolvers are
ordinary Python objects that you call directly or hand to an execution engine
of your own. There is no HTTP server or request handler either: `Hint` gives
you a `Cache-Control` value, but setting it on a response is up to you.

## Running the tests

```
pip install .[test]
pytest
```