# Argloom CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Detects duplicate switches in a descriptor tree before any parsing happens.

`Checker` is a stand-in registration surface: descriptors register onto it exactly
as they would onto the matching engine, and it records every `SwitchSpec` it sees.
`Checker.invalid()` then reports:

- every key (short name, or long name when there is no short name) registered
  more than once, together with all specs that used it;
- every long name shared by specs whose keys differ, which the matching engine
  would otherwise refuse to register.

An empty report means the tree is valid. The report is a plain value, so two
checkers fed the same tree compare equal.
"""
from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field

from argloom.switches import SwitchShape, SwitchSpec


@dataclass(frozen=True)
class Invalid:
    """Collision report produced by `Checker.invalid()`."""

    duplicate_keys: dict[str, list[SwitchSpec]] = field(default_factory=dict)
    duplicate_longs: dict[str, list[SwitchSpec]] = field(default_factory=dict)

    @property
    def keys(self) -> list[str]:
        """All colliding keys, in first-registration order."""
        return list(self.duplicate_keys)

    def __bool__(self) -> bool:
        return bool(self.duplicate_keys or self.duplicate_longs)

    def __str__(self) -> str:
        lines = []
        for key, specs in self.duplicate_keys.items():
            lines.append(f"switch '{key}' is registered {len(specs)} times:")
            lines.extend(f"    {spec}  {spec.doc}".rstrip() for spec in specs)
        for long, specs in self.duplicate_longs.items():
            lines.append(f"long name '--{long}' is shared by {len(specs)} switches:")
            lines.extend(f"    {spec}  {spec.doc}".rstrip() for spec in specs)
        return "\n".join(lines)


class Checker:
    """Registration surface that records switches instead of parsing them."""

    def __init__(self) -> None:
        self._by_key: dict[str, list[SwitchSpec]] = defaultdict(list)
        self._by_long: dict[str, list[SwitchSpec]] = defaultdict(list)

    def add(self, spec: SwitchSpec, shape: SwitchShape) -> None:
        self._by_key[spec.key].append(spec)
        if spec.long:
            self._by_long[spec.long].append(spec)

    def invalid(self) -> Invalid | None:
        """Return the collision report, or None if every switch is unique."""
        duplicate_keys = {
            key: list(specs) for key, specs in self._by_key.items() if len(specs) > 1
        }
        duplicate_longs = {
            long: list(specs)
            for long, specs in self._by_long.items()
            if len({spec.key for spec in specs}) > 1
        }
        report = Invalid(duplicate_keys=duplicate_keys, duplicate_longs=duplicate_longs)
        return report if report else None
