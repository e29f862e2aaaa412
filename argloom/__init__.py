"""
Argloom CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .arg import Arg
from .combinators import (
    Both,
    Choice,
    HelpRequested,
    Map,
    OptionConvertString,
    OptionMap,
    OrHelp,
    Provided,
    Required,
    WithDefault,
    WithHelp,
)
from .compose import all_of, any_of, map_all, record
from .logger import logger
from .matching import Matches, SwitchRegistry
from .parse import ParseOutcome, Usage
from .primitives import Flag, Opt, Value, flag, opt, value
from .switches import FlagShape, OptShape, Switches, SwitchSpec
from .validation import Checker, Invalid

__all__ = [
    "Arg",
    "Both",
    "Checker",
    "Choice",
    "Flag",
    "FlagShape",
    "HelpRequested",
    "Invalid",
    "Map",
    "Matches",
    "Opt",
    "OptShape",
    "OptionConvertString",
    "OptionMap",
    "OrHelp",
    "ParseOutcome",
    "Provided",
    "Required",
    "SwitchRegistry",
    "SwitchSpec",
    "Switches",
    "Usage",
    "Value",
    "WithDefault",
    "WithHelp",
    "all_of",
    "any_of",
    "flag",
    "logger",
    "map_all",
    "opt",
    "record",
    "value",
]
