# Argloom CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Shorthands for building wide trees without deeply nested pairs.

`a.both(b).both(c)` extracts `((a, b), c)`. The helpers here build the same
chain and flatten its value:

    all_of(a, b, c)              # -> (a, b, c)
    map_all(make_server, a, b)   # -> make_server(a, b)
    record(host=a, port=b)       # -> {"host": a, "port": b}
    any_of(a, b, c)              # -> a.choice(b).choice(c)

They add no behavior of their own: registration order, names and errors are
those of the underlying `Both`/`Choice` chain.
"""
from __future__ import annotations

from functools import reduce
from typing import Any, Callable, TypeVar

from argloom.arg import Arg

U = TypeVar("U")


def _flatten(count: int) -> Callable[[Any], tuple[Any, ...]]:
    def unnest(nested: Any) -> tuple[Any, ...]:
        items = []
        for _ in range(count - 1):
            nested, last = nested
            items.append(last)
        items.append(nested)
        return tuple(reversed(items))

    return unnest


def all_of(*args: Arg[Any]) -> Arg[Any]:
    """
    Extract every descriptor in order and return their values as one tuple.

    A single descriptor is returned unchanged, not wrapped in a 1-tuple.
    """
    if not args:
        raise ValueError("all_of() needs at least one argument")
    if len(args) == 1:
        return args[0]
    chained = reduce(lambda left, right: left.both(right), args)
    return chained.map(_flatten(len(args)))


def map_all(function: Callable[..., U], *args: Arg[Any]) -> Arg[U]:
    """Extract every descriptor and call `function` with their values."""
    if len(args) == 1:
        return args[0].map(function)
    return all_of(*args).map(lambda values: function(*values))


def record(**args: Arg[Any]) -> Arg[dict[str, Any]]:
    """Extract every descriptor and return a dict keyed by the keyword names."""
    if not args:
        raise ValueError("record() needs at least one argument")
    names = list(args)
    if len(names) == 1:
        return args[names[0]].map(lambda value: {names[0]: value})
    return all_of(*args.values()).map(lambda values: dict(zip(names, values)))


def any_of(*args: Arg[Any]) -> Arg[Any]:
    """Chain optional descriptors with `choice`: at most one may be given."""
    if not args:
        raise ValueError("any_of() needs at least one argument")
    return reduce(lambda left, right: left.choice(right), args)
