# Argloom CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the switch identity and shape types shared by every registration surface.

A `SwitchSpec` names a switch as the user types it (`-f` / `--foo`) together with
its doc string. A shape says whether the switch is presence-only (`FlagShape`) or
takes a value shown as `hint` in usage text (`OptShape`).

Descriptors push `(SwitchSpec, SwitchShape)` pairs onto any object implementing
the `Switches` protocol. Two implementations ship with argloom:

- `argloom.matching.SwitchRegistry`: registers onto the matching engine.
- `argloom.validation.Checker`: records specs to detect collisions.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable

from argloom.exceptions import SwitchSpecError


@dataclass(frozen=True)
class SwitchSpec:
    """
    Identity of a switch as seen by the user.

    Attributes:
        short (str): Single character short name, without the leading `-`. May be empty.
        long (str): Long name, without the leading `--`. May be empty.
        doc (str): Help text shown in usage output.
    """

    short: str
    long: str
    doc: str = ""

    def __post_init__(self) -> None:
        if not self.short and not self.long:
            raise SwitchSpecError("A switch needs a short or a long name")
        if len(self.short) > 1:
            raise SwitchSpecError(
                f"Short name '{self.short}' must be a single character"
            )
        for name in (self.short, self.long):
            if name.startswith("-"):
                raise SwitchSpecError(
                    f"Switch name '{name}' must be given without leading dashes"
                )
            if any(char.isspace() for char in name):
                raise SwitchSpecError(f"Switch name '{name}' must not contain spaces")

    @property
    def key(self) -> str:
        """Deduplication and lookup key: the short name if set, else the long name."""
        return self.short or self.long

    @property
    def flags(self) -> tuple[str, ...]:
        """Option strings as typed on the command line, short form first."""
        flags = []
        if self.short:
            flags.append(f"-{self.short}")
        if self.long:
            flags.append(f"--{self.long}")
        return tuple(flags)

    def __str__(self) -> str:
        return ", ".join(self.flags)


@dataclass(frozen=True)
class FlagShape:
    """Presence-only switch."""


@dataclass(frozen=True)
class OptShape:
    """Switch taking a single value, displayed as `hint` in usage text."""

    hint: str = "VALUE"


SwitchShape = Union[FlagShape, OptShape]


@runtime_checkable
class Switches(Protocol):
    """Anything descriptors can register their switches onto."""

    def add(self, spec: SwitchSpec, shape: SwitchShape) -> None: ...
