# gqlkit

Small, dependency-free building blocks for GraphQL services in Python.

## What is inside

- `gqlkit.errors`: `QueryError` and `Location`.
  - `QueryError` is the error shape returned to GraphQL clients. `str()` gives
    `graphql: <message>` followed by ` (line L, column C)` for each location.
    `to_dict()` gives the JSON form and leaves out empty locations, path and
    extensions.
  - `Location.before()` orders two positions in a document.
  - `errorf()` formats a message with `%s`, `%v`, `%q`, `%d` style verbs. When
    the last argument is an exception, it is kept as the wrapped cause (`err`,
    and `__cause__`).
- `gqlkit.ident`: the `ID` scalar (a `str` subclass), `ID.to_json()`, and
  `parse_id()`. `parse_id()` accepts strings and integers (rendered as decimal
  text) and raises `TypeError` for anything else. The module also holds the
  `Unmarshaler` protocol for custom scalar types.
- `gqlkit.cache`: cache-control hints.
  - `hintable()` is a context manager that opens a collection scope and yields
    a `HintCollector`.
  - `add_hint()` records a `Hint` in the current scope and is ignored outside
    one.
  - `resolve_hints()` and `HintCollector.resolve()` merge hints into one: the
    shortest max age wins, with zero if no hint has one, and any private hint
    makes the result private.
  - `str(hint)` renders a `Cache-Control` value such as `public, max-age=3600`.
  - `ttl()` turns a number of seconds or a `timedelta` into a `timedelta`.
- `gqlkit.examples`: sample schemas (as `SCHEMA` strings) and resolvers.
  - `starwars`: humans, droids and starships, with relay-style friend
    connections using base64 cursors. Reviews are stored per `Resolver`
    instance.
  - `social`: a small graph of users with paginated friends. It raises
    `UserNotFoundError` for unknown users.
  - `customerrors`: a resolver that raises `DroidNotFoundError`, which carries
    `extensions()`.
  - `caching`: a resolver whose fields add cache hints.

## What it does not do

The package has no schema parser, no query validator or executor, and no HTTP
server. The `SCHEMA` strings are plain text, and the resolvers are ordinary
Python objects you call directly or wire into an engine of your choice.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Example

```python
from datetime import timedelta
from gqlkit.cache import hintable, add_hint, Hint, Scope, ttl

with hintable() as collector:
    add_hint(Hint(max_age=ttl(timedelta(hours=1)), scope=Scope.PUBLIC))
    add_hint(Hint(max_age=ttl(timedelta(minutes=1)), scope=Scope.PRIVATE))

print(collector.resolve())  # private, max-age=60
```

```python
from gqlkit.errors import errorf

err = errorf("no operation with name %q", "Fetch")
print(err)  # graphql: no operation with name "Fetch"
```

```python
from gqlkit.examples.starwars import Resolver

hero = Resolver().hero("EMPIRE")
print(hero.name())                                   # Luke Skywalker
print([f.name() for f in hero.friends_connection(first=2).friends()])
# ['Han Solo', 'Leia Organa']
```