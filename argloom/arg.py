# Argloom CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Arg`, the abstract base class every argloom descriptor implements.

A descriptor describes one logical command-line argument. It can:

- `register(switches)`: push the switches it needs onto a registration surface,
- `name()`: report a display name used in error messages,
- `extract(matches)`: turn a match surface into its typed value, or raise an
  `ArgumentError` describing what went wrong.

Extraction consumes the descriptor: a second call raises `ArgumentReusedError`.
Registration never reads matches and may be repeated freely, which is how the
validation pass and the real parse see the same switches.

`Arg` also carries the combinator methods (`map`, `both`, `choice`, `required`,
...) so trees read left to right:

    port = opt("p", "port", "Port to listen on", "PORT", type=int).with_default(8080)
    host = opt("", "host", "Host to bind", "HOST").required()
    cli = host.both(port).with_help_default()

and the driver entry points (`parse_specified`, `parse_env`).
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, TypeVar

from argloom.exceptions import ArgumentReusedError
from argloom.matching import Matches
from argloom.switches import Switches
from argloom.validation import Checker, Invalid

if TYPE_CHECKING:
    from argloom.combinators import (
        Both,
        Choice,
        Map,
        OptionConvertString,
        OptionMap,
        Required,
        WithDefault,
        WithHelp,
    )
    from argloom.parse import ParseOutcome
    from argloom.primitives import Flag

T = TypeVar("T")
U = TypeVar("U")


class Arg(ABC, Generic[T]):
    """
    Base class for all argloom descriptors.

    Subclasses implement `register`, `name` and `_extract`. The public `extract`
    enforces the single-use contract before delegating to `_extract`.
    """

    _extracted: bool = False

    @abstractmethod
    def register(self, switches: Switches) -> None:
        """Push this descriptor's switches onto `switches`."""
        raise NotImplementedError("register must be implemented by subclasses")

    @abstractmethod
    def name(self) -> str:
        """Return the display name used in error messages."""
        raise NotImplementedError("name must be implemented by subclasses")

    @abstractmethod
    def _extract(self, matches: Matches) -> T:
        raise NotImplementedError("_extract must be implemented by subclasses")

    def extract(self, matches: Matches) -> T:
        """
        Consume this descriptor and return its value.

        Raises:
            ArgumentError: If the matched switches cannot produce a value.
            ArgumentReusedError: If this descriptor was already extracted.
        """
        if self._extracted:
            raise ArgumentReusedError(
                f"Argument '{self.name()}' has already been extracted"
            )
        self._extracted = True
        return self._extract(matches)

    def validate(self) -> Invalid | None:
        """Register onto a fresh `Checker` and return its collision report."""
        checker = Checker()
        self.register(checker)
        return checker.invalid()

    # Combinators

    def map(self, function: Callable[[T], U]) -> Map[T, U]:
        """Transform the extracted value with `function`."""
        from argloom.combinators import Map

        return Map(self, function)

    def option_map(self, function: Callable[[Any], U]) -> OptionMap[Any, U]:
        """Transform an optional value with `function` when it is present."""
        from argloom.combinators import OptionMap

        return OptionMap(self, function)

    def with_default(self, default: Any) -> WithDefault[Any]:
        """Replace an absent optional value with `default`."""
        from argloom.combinators import WithDefault

        return WithDefault(self, default)

    def both(self, other: Arg[U]) -> Both[T, U]:
        """Extract this descriptor, then `other`, and pair their values."""
        from argloom.combinators import Both

        return Both(self, other)

    def choice(self, other: Arg[Any]) -> Choice[Any]:
        """Allow at most one of this descriptor and `other` to be given."""
        from argloom.combinators import Choice

        return Choice(self, other)

    def required(self) -> Required[Any]:
        """Fail with `MissingRequiredError` when the optional value is absent."""
        from argloom.combinators import Required

        return Required(self)

    def option_convert_string(
        self, function: Callable[[str], U]
    ) -> OptionConvertString[U]:
        """Convert a present string value with `function`, which may raise."""
        from argloom.combinators import OptionConvertString

        return OptionConvertString(self, function)

    def with_help(self, help_flag: Flag) -> WithHelp[T]:
        """Short-circuit extraction when `help_flag` is given."""
        from argloom.combinators import WithHelp

        return WithHelp(self, help_flag)

    def with_help_default(self) -> WithHelp[T]:
        """`with_help` using the conventional `-h/--help` flag."""
        from argloom.primitives import Flag

        return self.with_help(Flag("h", "help", "print this help menu"))

    def __and__(self, other: Arg[U]) -> Both[T, U]:
        return self.both(other)

    def __or__(self, other: Arg[Any]) -> Choice[Any]:
        return self.choice(other)

    # Drivers

    def parse_specified(
        self, program_name: str, args: Iterable[str]
    ) -> ParseOutcome[T]:
        """Validate, register and extract against `args`."""
        from argloom.parse import parse_specified

        return parse_specified(self, program_name, args)

    def parse_specified_ignoring_validation(
        self, program_name: str, args: Iterable[str]
    ) -> ParseOutcome[T]:
        """Register and extract against `args` without the duplicate check."""
        from argloom.parse import parse_specified_ignoring_validation

        return parse_specified_ignoring_validation(self, program_name, args)

    def parse_env(self) -> ParseOutcome[T]:
        """`parse_specified` against the process arguments."""
        from argloom.parse import parse_env

        return parse_env(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name()!r})"

