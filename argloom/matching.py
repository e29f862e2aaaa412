# Argloom CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Adapter between argloom descriptors and the `argparse` matching engine.

`SwitchRegistry` is the registration surface used for real parsing: each
`(SwitchSpec, SwitchShape)` pair becomes one `argparse` option whose `dest` is the
spec's key. `SwitchRegistry.match()` runs the engine over an argument list and
returns a read-only `Matches` surface, or raises the engine's own
`argparse.ArgumentError` for malformed input.

The engine is configured so that it never prints or exits:
- no implicit `-h/--help` (help is an ordinary descriptor in argloom),
- no abbreviation of long options,
- a switch given twice is rejected,
- stray positional tokens are rejected.

A value that starts with `-` is read as a switch, so `--pattern -x` fails with
"expected one argument". Attach such values with `=`: `--pattern=-x`. Negative
numbers (`--offset -3`) are still taken as values.
"""
from __future__ import annotations

import argparse
from argparse import ArgumentError, ArgumentParser, Namespace
from types import MappingProxyType
from typing import Any, Mapping, NoReturn, Sequence

from argloom.logger import logger
from argloom.switches import FlagShape, OptShape, SwitchShape, SwitchSpec


class _FlagOnce(argparse.Action):
    """Store `True` when present; reject a second occurrence."""

    def __init__(self, option_strings, dest, default=False, required=False, help=None):
        super().__init__(
            option_strings=option_strings,
            dest=dest,
            nargs=0,
            default=default,
            required=required,
            help=help,
        )

    def __call__(self, parser, namespace, values, option_string=None):
        if getattr(namespace, self.dest, False):
            raise ArgumentError(self, "option given more than once")
        setattr(namespace, self.dest, True)


class _StoreOnce(argparse.Action):
    """Store the single value; reject a second occurrence."""

    def __call__(self, parser, namespace, values, option_string=None):
        if getattr(namespace, self.dest, None) is not None:
            raise ArgumentError(self, "option given more than once")
        setattr(namespace, self.dest, values)


class SwitchParser(ArgumentParser):
    """`ArgumentParser` that raises instead of printing and exiting."""

    def __init__(self, prog: str | None = None) -> None:
        super().__init__(
            prog=prog,
            add_help=False,
            allow_abbrev=False,
            exit_on_error=False,
        )

    def error(self, message: str) -> NoReturn:
        raise ArgumentError(None, message)


class Matches:
    """
    Read-only view of one matching pass.

    Keys are `SwitchSpec.key` values. Flags map to `True`/`False`, options to the
    supplied string or `None`. Looking up a key that was never registered raises
    `KeyError`: that is a bug in the descriptor, not in the command line.
    """

    def __init__(self, values: Mapping[str, Any]) -> None:
        self._values: Mapping[str, Any] = MappingProxyType(dict(values))

    @classmethod
    def from_namespace(cls, namespace: Namespace) -> Matches:
        return cls(vars(namespace))

    def present(self, key: str) -> bool:
        """Return True if the switch keyed `key` appeared on the command line."""
        value = self._values[key]
        return value is not None and value is not False

    def value(self, key: str) -> str | None:
        """Return the string supplied for the option keyed `key`, if any."""
        value = self._values[key]
        if isinstance(value, bool):
            return None
        return value

    def keys(self) -> list[str]:
        return list(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __repr__(self) -> str:
        return f"Matches({dict(self._values)!r})"


class SwitchRegistry:
    """
    Registration surface backed by `argparse`.

    Keeps the registered switches in order so `Usage` can render them.
    """

    def __init__(self, program: str | None = None) -> None:
        self.program = program
        self._parser = SwitchParser(prog=program)
        self._switches: list[tuple[SwitchSpec, SwitchShape]] = []

    def add(self, spec: SwitchSpec, shape: SwitchShape) -> None:
        if isinstance(shape, FlagShape):
            self._parser.add_argument(
                *spec.flags,
                action=_FlagOnce,
                dest=spec.key,
                default=False,
                help=spec.doc,
            )
        elif isinstance(shape, OptShape):
            self._parser.add_argument(
                *spec.flags,
                action=_StoreOnce,
                dest=spec.key,
                default=None,
                metavar=shape.hint,
                help=spec.doc,
            )
        else:
            raise TypeError(f"Unsupported switch shape: {shape!r}")
        self._switches.append((spec, shape))
        logger.debug("Registered switch %s (%s)", spec, type(shape).__name__)

    @property
    def switches(self) -> list[tuple[SwitchSpec, SwitchShape]]:
        return list(self._switches)

    def match(self, args: Sequence[str]) -> Matches:
        """
        Run the matching engine over `args`.

        Raises:
            argparse.ArgumentError: If `args` is not a valid command line for the
                registered switches.
        """
        namespace = self._parser.parse_args(list(args))
        matches = Matches.from_namespace(namespace)
        logger.debug("Matched %s", matches)
        return matches

    def __len__(self) -> int:
        return len(self._switches)

    def __repr__(self) -> str:
        return f"SwitchRegistry(program={self.program!r}, switches={len(self)})"
