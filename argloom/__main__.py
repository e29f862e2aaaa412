"""
Argloom CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from pydantic import ValidationError
from rich.table import Table

from argloom.combinators import WithHelp
from argloom.compose import record
from argloom.config import loader
from argloom.console import console, err_console
from argloom.exceptions import InvalidCommandSpecError, SwitchSpecError
from argloom.logger import logger
from argloom.parse import value_or_exit
from argloom.primitives import flag, opt
from argloom.themes import OneColors
from argloom.utils import LOG_MODES, get_program_invocation, setup_logging


def _log_mode(value: str) -> str:
    if value not in LOG_MODES:
        raise ValueError(f"must be one of: {', '.join(LOG_MODES)}")
    return value


def get_cli() -> WithHelp:
    """Descriptor tree for the `argloom` command itself."""
    return record(
        config=opt(
            "c", "config", "YAML or TOML argument definition", "PATH", type=Path
        ).required(),
        check=flag("", "check", "validate the definition and exit"),
        json=flag("", "json", "print parsed values as JSON"),
        log_mode=opt("", "log-mode", "cli or json", "MODE", type=_log_mode),
        log_file=opt("", "log-file", "also write logs to this file", "PATH"),
        verbose=flag("v", "verbose", "show debug logging"),
    ).with_help_default()


def split_argv(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split at the first `--`: our own options, then the arguments to parse."""
    argv = list(argv)
    if "--" in argv:
        index = argv.index("--")
        return argv[:index], argv[index + 1 :]
    return argv, []


def render_values(values: dict[str, Any], as_json: bool) -> None:
    if as_json:
        console.print(
            json.dumps(values, indent=2, default=str),
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )
        return
    table = Table(show_header=True, header_style=OneColors.BLUE_b)
    table.add_column("dest")
    table.add_column("value")
    table.add_column("type", style=OneColors.COMMENT_GREY)
    for dest, value in values.items():
        table.add_row(dest, repr(value), type(value).__name__)
    console.print(table)


def run(argv: Sequence[str]) -> dict[str, Any] | None:
    """
    Parse `argv` against the definition it names and print the values.

    Returns the parsed values, or None after `--check`.
    """
    own_args, rest = split_argv(argv)
    options = get_cli().parse_specified_or_exit(get_program_invocation(), own_args)

    setup_logging(
        mode=options["log_mode"],
        log_filename=options["log_file"],
        console_log_level=logging.DEBUG if options["verbose"] else logging.WARNING,
    )

    try:
        config = loader(options["config"])
        arg = config.to_arg()
        if options["check"]:
            invalid = arg.validate()
            if invalid:
                err_console.print("[error]Invalid definition:[/]")
                err_console.print(
                    str(invalid), markup=False, highlight=False, soft_wrap=True
                )
                sys.exit(1)
            console.print("[success]Definition is valid.[/]")
            return None
        outcome = arg.parse_specified(config.program, rest)
    except (FileNotFoundError, TypeError, ValueError, ValidationError) as error:
        logger.debug("Could not load %s", options["config"], exc_info=True)
        err_console.print("[error]Could not load definition:[/]")
        err_console.print(str(error), markup=False, highlight=False, soft_wrap=True)
        sys.exit(2)
    except (InvalidCommandSpecError, SwitchSpecError) as error:
        err_console.print(str(error), markup=False, highlight=False, soft_wrap=True)
        sys.exit(2)

    if config.help:
        values = value_or_exit(outcome)
    elif outcome.error is not None:
        err_console.print(
            f"{outcome.error}\n", markup=False, highlight=False, soft_wrap=True
        )
        outcome.usage.render_help(err_console)
        sys.exit(1)
    else:
        values = outcome.value

    render_values(values, options["json"])
    return values


def main(argv: Sequence[str] | None = None) -> None:
    """Console script entry point; exits 0 unless `run` exits first."""
    run(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":
    main()
