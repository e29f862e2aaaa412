# Argloom CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Combinators that build new descriptors out of existing ones.

| Combinator            | Value                          | Errors                                   |
|-----------------------|--------------------------------|------------------------------------------|
| `Map`                 | `f(value)`                     | child's, unchanged                       |
| `OptionMap`           | `f(value)` or `None`           | child's, unchanged                       |
| `WithDefault`         | value, or the default          | child's, unchanged                       |
| `Both`                | `(a_value, b_value)`           | `BothError` tagged "a" or "b"            |
| `Choice`              | `a_value`, `b_value` or `None` | `ChoiceBranchError`, `MutuallyExclusiveError` |
| `Required`            | value                          | `RequiredArgError`, `MissingRequiredError` |
| `OptionConvertString` | `f(raw)` or `None`             | `ConvertArgError`, `FailedToConvertError` |
| `WithHelp`            | `Provided(value)` or `HelpRequested()` | child's, unchanged               |

Every combinator registers its children in a fixed order, so the validation pass
and the real registration always see the same switches.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Optional, TypeVar, Union

from argloom.arg import Arg
from argloom.exceptions import (
    ArgumentError,
    BothError,
    Branch,
    ChoiceBranchError,
    ConvertArgError,
    FailedToConvertError,
    MissingRequiredError,
    MutuallyExclusiveError,
    RequiredArgError,
)
from argloom.logger import logger
from argloom.matching import Matches
from argloom.primitives import Flag
from argloom.switches import Switches

T = TypeVar("T")
U = TypeVar("U")


class Map(Arg[U], Generic[T, U]):
    """Transform the value of `arg` with `function`."""

    def __init__(self, arg: Arg[T], function: Callable[[T], U]) -> None:
        self.arg = arg
        self.function = function

    def register(self, switches: Switches) -> None:
        self.arg.register(switches)

    def name(self) -> str:
        return self.arg.name()

    def _extract(self, matches: Matches) -> U:
        return self.function(self.arg.extract(matches))


class OptionMap(Arg[Optional[U]], Generic[T, U]):
    """Transform the value of an optional `arg` only when it is present."""

    def __init__(self, arg: Arg[Optional[T]], function: Callable[[T], U]) -> None:
        self.arg = arg
        self.function = function

    def register(self, switches: Switches) -> None:
        self.arg.register(switches)

    def name(self) -> str:
        return self.arg.name()

    def _extract(self, matches: Matches) -> U | None:
        value = self.arg.extract(matches)
        if value is None:
            return None
        return self.function(value)


class WithDefault(Arg[T]):
    """Collapse an optional `arg` to a required value using `default`."""

    def __init__(self, arg: Arg[Optional[T]], default: T) -> None:
        self.arg = arg
        self.default = default

    def register(self, switches: Switches) -> None:
        self.arg.register(switches)

    def name(self) -> str:
        return self.arg.name()

    def _extract(self, matches: Matches) -> T:
        value = self.arg.extract(matches)
        if value is None:
            return self.default
        return value


class Both(Arg[tuple[T, U]]):
    """
    Extract `a`, then `b`, and pair their values.

    `a` is extracted fully before `b` is touched, so when both would fail the
    error reported is `a`'s.
    """

    def __init__(self, a: Arg[T], b: Arg[U]) -> None:
        self.a = a
        self.b = b

    def register(self, switches: Switches) -> None:
        self.a.register(switches)
        self.b.register(switches)

    def name(self) -> str:
        return f"({self.a.name()} and {self.b.name()})"

    def _extract(self, matches: Matches) -> tuple[T, U]:
        try:
            a_value = self.a.extract(matches)
        except ArgumentError as error:
            raise BothError(error, "a") from error
        try:
            b_value = self.b.extract(matches)
        except ArgumentError as error:
            raise BothError(error, "b") from error
        return a_value, b_value


class Choice(Arg[Optional[T]]):
    """
    At most one of two optional descriptors may be given.

    Yields whichever value is present, or `None`. When both are present, raises
    `MutuallyExclusiveError` naming both descriptors.
    """

    def __init__(self, a: Arg[Optional[T]], b: Arg[Optional[T]]) -> None:
        self.a = a
        self.b = b

    def register(self, switches: Switches) -> None:
        self.a.register(switches)
        self.b.register(switches)

    def name(self) -> str:
        return f"choose ({self.a.name()}) or ({self.b.name()})"

    def _extract_branch(self, branch: Branch, matches: Matches) -> T | None:
        arg = self.a if branch == "a" else self.b
        try:
            return arg.extract(matches)
        except ArgumentError as error:
            raise ChoiceBranchError(error, branch) from error

    def _extract(self, matches: Matches) -> T | None:
        a_name, b_name = self.a.name(), self.b.name()
        a_value = self._extract_branch("a", matches)
        if a_value is None:
            return self._extract_branch("b", matches)
        if self._extract_branch("b", matches) is not None:
            logger.debug("Both (%s) and (%s) were given", a_name, b_name)
            raise MutuallyExclusiveError(a_name, b_name)
        return a_value


class Required(Arg[T]):
    """Turn an absent optional value into `MissingRequiredError`."""

    def __init__(self, arg: Arg[Optional[T]]) -> None:
        self.arg = arg

    def register(self, switches: Switches) -> None:
        self.arg.register(switches)

    def name(self) -> str:
        return self.arg.name()

    def _extract(self, matches: Matches) -> T:
        name = self.arg.name()
        try:
            value = self.arg.extract(matches)
        except ArgumentError as error:
            raise RequiredArgError(error) from error
        if value is None:
            raise MissingRequiredError(name)
        return value


class OptionConvertString(Arg[Optional[T]]):
    """
    Convert a present string value with a function that may raise.

    Absence is not an error. Any exception raised by `function` is wrapped in a
    `FailedToConvertError` carrying the descriptor name and the raw string.
    """

    def __init__(self, arg: Arg[Optional[str]], function: Callable[[str], T]) -> None:
        self.arg = arg
        self.function = function

    def register(self, switches: Switches) -> None:
        self.arg.register(switches)

    def name(self) -> str:
        return self.arg.name()

    def _extract(self, matches: Matches) -> T | None:
        name = self.name()
        try:
            arg_string = self.arg.extract(matches)
        except ArgumentError as error:
            raise ConvertArgError(error) from error
        if arg_string is None:
            return None
        try:
            return self.function(arg_string)
        except Exception as error:
            raise FailedToConvertError(name, arg_string, error) from error


@dataclass(frozen=True)
class Provided(Generic[T]):
    """Value extracted by a `WithHelp` descriptor when help was not asked for."""

    value: T


@dataclass(frozen=True)
class HelpRequested:
    """Marker extracted by a `WithHelp` descriptor when the help flag was given."""


OrHelp = Union[Provided[T], HelpRequested]


class WithHelp(Arg[OrHelp[T]]):
    """
    Add a help flag that short-circuits extraction.

    The help flag is checked before `arg`. When it is present `arg` is never
    extracted, so none of its errors can surface.
    """

    def __init__(self, arg: Arg[T], help_flag: Flag) -> None:
        self.arg = arg
        self.help_flag = help_flag

    def register(self, switches: Switches) -> None:
        self.arg.register(switches)
        self.help_flag.register(switches)

    def name(self) -> str:
        return f"({self.arg.name()}) with help"

    def _extract(self, matches: Matches) -> OrHelp[T]:
        if self.help_flag.extract(matches):
            logger.debug("Help requested for %s", self.name())
            return HelpRequested()
        return Provided(self.arg.extract(matches))

    def parse_specified_or_exit(self, program_name: str, args: Iterable[str]) -> T:
        """
        Parse `args` and return the wrapped value, or exit.

        - help: usage text on stdout, exit status 0;
        - error: the error, a blank line and usage text on stderr, exit status 1.
        """
        from argloom.parse import value_or_exit

        return value_or_exit(self.parse_specified(program_name, args))

    def parse_env_or_exit(self) -> T:
        """`parse_specified_or_exit` against the process arguments."""
        from argloom.parse import value_or_exit

        return value_or_exit(self.parse_env())
