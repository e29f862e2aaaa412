# Argloom CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Leaf descriptors: `Flag`, `Opt` and `Value`.

- `Flag` registers a presence-only switch and extracts `True`/`False`.
- `Opt` registers a value-taking switch and extracts the raw string or `None`.
- `Value` registers nothing and always extracts the constant it was built with.

None of them can fail. Typed options are built by converting an `Opt`:

    opt("n", "count", "How many", "N", type=int)

is `Opt(...).option_convert_string(...)` using `argloom.coerce.coerce_value`.
"""
from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar

from argloom.arg import Arg
from argloom.coerce import coerce_value
from argloom.matching import Matches
from argloom.switches import FlagShape, OptShape, Switches, SwitchSpec

T = TypeVar("T")


class Flag(Arg[bool]):
    """Presence-only switch, e.g. `-v/--verbose`."""

    def __init__(self, short: str, long: str, doc: str = "") -> None:
        self.spec = SwitchSpec(short, long, doc)

    def register(self, switches: Switches) -> None:
        switches.add(self.spec, FlagShape())

    def name(self) -> str:
        return self.spec.long or self.spec.short

    def _extract(self, matches: Matches) -> bool:
        return matches.present(self.spec.key)


class Opt(Arg[Optional[str]]):
    """Switch taking one string value, e.g. `-o/--output FILE`."""

    def __init__(
        self, short: str, long: str, doc: str = "", hint: str = "VALUE"
    ) -> None:
        self.spec = SwitchSpec(short, long, doc)
        self.hint = hint

    def register(self, switches: Switches) -> None:
        switches.add(self.spec, OptShape(self.hint))

    def name(self) -> str:
        return self.spec.long or self.spec.short

    def _extract(self, matches: Matches) -> str | None:
        return matches.value(self.spec.key)


class Value(Arg[T], Generic[T]):
    """Constant injected into a tree; registers no switch."""

    def __init__(self, name: str, value: T) -> None:
        self._name = name
        self.value = value

    def register(self, switches: Switches) -> None:
        pass

    def name(self) -> str:
        return self._name

    def _extract(self, matches: Matches) -> T:
        return self.value


def flag(short: str, long: str, doc: str = "") -> Flag:
    return Flag(short, long, doc)


def opt(
    short: str,
    long: str,
    doc: str = "",
    hint: str = "VALUE",
    type: type | Callable[[str], Any] = str,
) -> Arg[Any]:
    """
    Build an optional typed option.

    Args:
        short (str): Short name without the dash, or "".
        long (str): Long name without the dashes, or "".
        doc (str): Help text.
        hint (str): Placeholder shown for the value in usage text.
        type (type | Callable): Target type for `coerce_value`, or any callable
            taking the raw string and raising on bad input.

    Returns:
        Arg: Descriptor extracting the converted value, or `None` when absent.
    """
    return Opt(short, long, doc, hint).option_convert_string(
        lambda raw: coerce_value(raw, type)
    )


def value(name: str, value: T) -> Value[T]:
    return Value(name, value)
