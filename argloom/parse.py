# Argloom CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Top-level driver: turns a descriptor tree and an argument list into a
`ParseOutcome`.

One parse attempt:

1. Validate the tree. Colliding switches are a bug in the CLI definition, so
   they raise `InvalidCommandSpecError` instead of producing an outcome.
2. Register every switch on a fresh `SwitchRegistry` and match the arguments.
3. Extract the typed value. A matching failure is wrapped in
   `MatchFailedError`, an extraction failure in `ExtractionFailedError`.

`ParseOutcome` carries the `Usage` together with the value or the error. The
only side effects in argloom live in `value_or_exit`, which prints usage and
errors and terminates the process.
"""
from __future__ import annotations

import sys
from argparse import ArgumentError as MatchEngineError
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Iterable, NoReturn, TypeVar

from rich.console import Console

from argloom.console import console, err_console
from argloom.exceptions import (
    ArgumentError,
    ExtractionFailedError,
    InvalidCommandSpecError,
    MatchFailedError,
    TopLevelError,
)
from argloom.logger import logger
from argloom.matching import SwitchRegistry
from argloom.switches import OptShape, SwitchShape, SwitchSpec
from argloom.utils import get_program_invocation

if TYPE_CHECKING:
    from argloom.arg import Arg

T = TypeVar("T")

USAGE_COLUMN = 28


@dataclass(frozen=True)
class Usage:
    """Renders help text from the registered switches and the program name."""

    registry: SwitchRegistry
    program_name: str

    @staticmethod
    def format_switch(spec: SwitchSpec, shape: SwitchShape) -> str:
        """Return the `-f, --foo HINT` column for one switch."""
        if spec.short and spec.long:
            flags = f"-{spec.short}, --{spec.long}"
        elif spec.short:
            flags = f"-{spec.short}"
        else:
            flags = f"    --{spec.long}"
        if isinstance(shape, OptShape):
            flags = f"{flags} {shape.hint}"
        return flags

    def lines(self) -> list[str]:
        lines = [f"Usage: {self.program_name} [options]"]
        if len(self.registry):
            lines.extend(["", "Options:"])
        for spec, shape in self.registry.switches:
            flags = self.format_switch(spec, shape)
            if not spec.doc:
                lines.append(f"    {flags}")
            elif len(flags) > USAGE_COLUMN:
                lines.append(f"    {flags}")
                lines.append(f"    {'':<{USAGE_COLUMN}} {spec.doc}")
            else:
                lines.append(f"    {flags:<{USAGE_COLUMN}} {spec.doc}")
        return lines

    def render(self) -> str:
        """Return the usage text, one line per registered switch."""
        return "\n".join(self.lines()) + "\n"

    def render_help(self, target: Console | None = None) -> None:
        """Print the usage text, styling the header only on a terminal."""
        target = target or console
        header, *rest = self.lines()
        target.print(
            header,
            style="usage" if target.is_terminal else None,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )
        for line in rest:
            target.print(
                line, markup=False, highlight=False, emoji=False, soft_wrap=True
            )


@dataclass
class ParseOutcome(Generic[T]):
    """Result of one parse attempt: the usage, plus a value or an error."""

    usage: Usage
    value: T | None = None
    error: TopLevelError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def parse_specified_ignoring_validation(
    arg: Arg[T], program_name: str, args: Iterable[str]
) -> ParseOutcome[T]:
    """Register `arg`, match `args` and extract, skipping the duplicate check."""
    registry = SwitchRegistry(program_name)
    arg.register(registry)
    usage = Usage(registry, program_name)
    try:
        matches = registry.match(list(args))
    except MatchEngineError as error:
        logger.debug("Matching failed: %s", error)
        return ParseOutcome(usage, error=MatchFailedError(error))
    try:
        value = arg.extract(matches)
    except ArgumentError as error:
        logger.debug("Extraction of %s failed: %s", arg.name(), error)
        return ParseOutcome(usage, error=ExtractionFailedError(error))
    return ParseOutcome(usage, value=value)


def parse_specified(
    arg: Arg[T], program_name: str, args: Iterable[str]
) -> ParseOutcome[T]:
    """
    Validate `arg`, then parse `args` with it.

    Raises:
        InvalidCommandSpecError: If the tree registers colliding switches.
    """
    invalid = arg.validate()
    if invalid:
        logger.error("Invalid command spec for '%s':\n%s", program_name, invalid)
        raise InvalidCommandSpecError(invalid)
    return parse_specified_ignoring_validation(arg, program_name, args)


def parse_env(arg: Arg[T]) -> ParseOutcome[T]:
    """`parse_specified` against `sys.argv`."""
    return parse_specified(arg, get_program_invocation(), sys.argv[1:])


def value_or_exit(outcome: ParseOutcome[Any]) -> Any:
    """
    Unpack the outcome of a help-aware parse, printing and exiting when needed.

    - error: the error, a blank line and the usage text on stderr, exit 1;
    - help requested: the usage text on stdout, exit 0;
    - otherwise: return the value wrapped in `Provided`.
    """
    from argloom.combinators import HelpRequested

    if outcome.error is not None:
        err_console.print(
            f"{outcome.error}\n",
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )
        outcome.usage.render_help(err_console)
        _exit(1)
    if isinstance(outcome.value, HelpRequested):
        outcome.usage.render_help(console)
        _exit(0)
    return outcome.value.value  # type: ignore[union-attr]


def _exit(status: int) -> NoReturn:
    logger.debug("Exiting with status %d", status)
    sys.exit(status)
