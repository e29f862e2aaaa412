# Argloom CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Declarative argloom definitions loaded from YAML or TOML.

A definition lists switches and groups of mutually exclusive options:

    program: deploy
    switches:
      - dest: env
        short: e
        long: env
        hint: ENV
        required: true
      - dest: replicas
        long: replicas
        type: int
        default: 1
      - dest: verbose
        short: v
        long: verbose
        kind: flag
    exclusive:
      - dest: target
        switches:
          - {long: host, hint: HOST}
          - {long: cluster, hint: NAME}

`ArgloomConfig.to_arg()` turns it into a descriptor extracting a dict keyed by
`dest`, wrapped with the default help flag unless `help: false`.
"""
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Literal

import toml
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from argloom.arg import Arg
from argloom.coerce import coerce_value
from argloom.compose import any_of, record
from argloom.logger import logger
from argloom.primitives import flag, opt

TYPES: dict[str, Any] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "path": Path,
    "datetime": datetime,
}


class RawSwitch(BaseModel):
    """One flag or option in a definition file."""

    dest: str = ""
    short: str = ""
    long: str = ""
    doc: str = ""
    kind: Literal["flag", "opt"] = "opt"
    hint: str = "VALUE"
    type: str = "str"
    default: Any = None
    required: bool = False

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: str) -> str:
        if value not in TYPES:
            raise ValueError(f"type must be one of: {', '.join(TYPES)}")
        return value

    @model_validator(mode="after")
    def validate_switch(self) -> RawSwitch:
        if not self.short and not self.long:
            raise ValueError("a switch needs a short or a long name")
        if self.kind == "flag" and (self.required or self.default is not None):
            raise ValueError(
                f"flag '{self.short or self.long}' cannot be required or have a default"
            )
        if self.required and self.default is not None:
            raise ValueError(
                f"option '{self.short or self.long}' cannot be both required and defaulted"
            )
        if isinstance(self.default, str) and self.type != "str":
            self.default = coerce_value(self.default, TYPES[self.type])
        if not self.dest:
            self.dest = (self.long or self.short).replace("-", "_")
        return self

    def to_arg(self) -> Arg[Any]:
        if self.kind == "flag":
            return flag(self.short, self.long, self.doc)
        arg = opt(self.short, self.long, self.doc, self.hint, type=TYPES[self.type])
        if self.required:
            return arg.required()
        if self.default is not None:
            return arg.with_default(self.default)
        return arg


class RawExclusive(BaseModel):
    """Options of which at most one may be given; the value is the one present."""

    dest: str
    switches: list[RawSwitch] = Field(min_length=2)
    required: bool = False

    @field_validator("switches")
    @classmethod
    def validate_switches(cls, value: list[RawSwitch]) -> list[RawSwitch]:
        for switch in value:
            if switch.kind != "opt" or switch.required or switch.default is not None:
                raise ValueError(
                    "exclusive groups only hold plain options (no flags, defaults "
                    "or required)"
                )
        return value

    def to_arg(self) -> Arg[Any]:
        arg = any_of(*(switch.to_arg() for switch in self.switches))
        return arg.required() if self.required else arg


class ArgloomConfig(BaseModel):
    """A whole definition file."""

    program: str = ""
    help: bool = True
    switches: list[RawSwitch] = Field(default_factory=list)
    exclusive: list[RawExclusive] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_dests(self) -> ArgloomConfig:
        dests = [switch.dest for switch in self.switches]
        dests.extend(group.dest for group in self.exclusive)
        if not dests:
            raise ValueError("a definition needs at least one switch")
        duplicates = sorted({dest for dest in dests if dests.count(dest) > 1})
        if duplicates:
            raise ValueError(f"duplicate dest: {', '.join(duplicates)}")
        return self

    def to_arg(self) -> Arg[Any]:
        """Build the descriptor tree for this definition."""
        args: dict[str, Arg[Any]] = {
            switch.dest: switch.to_arg() for switch in self.switches
        }
        args.update({group.dest: group.to_arg() for group in self.exclusive})
        arg = record(**args)
        return arg.with_help_default() if self.help else arg


def loader(file_path: Path | str) -> ArgloomConfig:
    """
    Load an argloom definition from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to a `.yaml`, `.yml` or `.toml` file.

    Returns:
        ArgloomConfig: The validated definition.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or the content is not a mapping.
        pydantic.ValidationError: If the definition is malformed.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a mapping with a list of switches.\n"
            "Example:\n"
            "program: 'deploy'\n"
            "switches:\n"
            "  - long: 'env'\n"
            "    hint: 'ENV'\n"
            "    required: true"
        )

    config = ArgloomConfig(**raw_config)
    if not config.program:
        config.program = path.stem
    logger.debug(
        "Loaded %d switches and %d exclusive groups from %s",
        len(config.switches),
        len(config.exclusive),
        path,
    )
    return config
