import sys
from argparse import ArgumentError
from io import StringIO

import pytest
from rich.console import Console

from argloom import Provided, all_of, flag, opt
from argloom.exceptions import (
    ExtractionFailedError,
    InvalidCommandSpecError,
    MatchFailedError,
    MissingRequiredError,
)
from argloom.matching import SwitchRegistry
from argloom.parse import Usage
from argloom.themes import get_nord_theme


def server_cli():
    return all_of(
        opt("", "host", "host to bind", "HOST").required(),
        opt("p", "port", "port to listen on", "PORT", type=int).with_default(8080),
        flag("v", "verbose", "chatty logs"),
    ).with_help_default()


def test_usage_render():
    usage = server_cli().parse_specified("server", []).usage
    lines = usage.render().splitlines()
    assert lines[:3] == ["Usage: server [options]", "", "Options:"]
    assert lines[3] == "        --host HOST              host to bind"
    assert lines[4] == "    -p, --port PORT              port to listen on"
    assert lines[5] == "    -v, --verbose                chatty logs"
    assert lines[6] == "    -h, --help                   print this help menu"
    assert usage.render().endswith("\n")


def test_usage_without_switches():
    assert Usage(SwitchRegistry("tool"), "tool").render() == "Usage: tool [options]\n"


def test_usage_wraps_long_switches():
    arg = opt("", "a-rather-long-option-name", "its doc", "VALUE")
    lines = arg.parse_specified("tool", []).usage.lines()
    assert lines[3] == "        --a-rather-long-option-name VALUE"
    assert lines[4].strip() == "its doc"
    assert lines[4].index("its doc") == 4 + 28 + 1


def test_usage_short_only_and_no_doc():
    lines = flag("q", "").parse_specified("tool", []).usage.lines()
    assert lines[3] == "    -q"


def test_outcome_carries_usage_on_error():
    outcome = server_cli().parse_specified("server", ["--port", "x"])
    assert isinstance(outcome.error, ExtractionFailedError)
    assert outcome.value is None
    assert outcome.usage.program_name == "server"


def test_match_failure():
    outcome = server_cli().parse_specified("server", ["--nope"])
    assert isinstance(outcome.error, MatchFailedError)
    assert "--nope" in str(outcome.error)


def test_spec_collision_raises():
    arg = flag("f", "foo") & opt("f", "file")
    with pytest.raises(InvalidCommandSpecError) as excinfo:
        arg.parse_specified("tool", [])
    assert "Invalid command spec" in str(excinfo.value)
    assert excinfo.value.invalid.keys == ["f"]


def test_ignoring_validation_skips_check():
    outcome = flag("v", "verbose").parse_specified_ignoring_validation("tool", ["-v"])
    assert outcome.unwrap() is True


def test_ignoring_validation_leaves_clashes_to_the_engine():
    arg = flag("a", "alpha") & flag("a", "again")
    with pytest.raises(ArgumentError):
        arg.parse_specified_ignoring_validation("tool", [])


def test_parse_env(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["prog", "--foo", "5"])
    outcome = opt("f", "foo", "", "", type=int).required().parse_env()
    assert outcome.unwrap() == 5
    assert outcome.usage.program_name.endswith("prog")


def test_or_exit_returns_value():
    assert server_cli().parse_specified_or_exit("server", ["--host", "h"]) == (
        "h",
        8080,
        False,
    )


def test_or_exit_help(capsys):
    with pytest.raises(SystemExit) as excinfo:
        server_cli().parse_specified_or_exit("server", ["--help"])
    assert excinfo.value.code == 0
    captured = capsys.readouterr()
    assert "Usage: server [options]" in captured.out
    assert "port to listen on" in captured.out
    assert captured.err == ""


def test_or_exit_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        server_cli().parse_specified_or_exit("server", [])
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("missing required argument (host)\n\n")
    assert "Usage: server [options]" in captured.err


def test_or_exit_match_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        server_cli().parse_specified_or_exit("server", ["--host"])
    assert excinfo.value.code == 1
    assert "--host" in capsys.readouterr().err


def test_parse_env_or_exit(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["server", "--host", "h", "-v"])
    assert server_cli().parse_env_or_exit() == ("h", 8080, True)


def test_unwrap_raises_top_level_error():
    outcome = opt("f", "foo").required().parse_specified("", [])
    with pytest.raises(ExtractionFailedError) as excinfo:
        outcome.unwrap()
    assert isinstance(excinfo.value.error, MissingRequiredError)


def test_provided_outcome():
    outcome = flag("v", "verbose").with_help_default().parse_specified("", ["-v"])
    assert outcome.ok
    assert outcome.value == Provided(True)


def render_to(force_terminal):
    target = Console(
        file=StringIO(),
        color_system="truecolor",
        theme=get_nord_theme(),
        force_terminal=force_terminal,
    )
    server_cli().parse_specified("server", []).usage.render_help(target)
    return target.file.getvalue()


def test_render_help_plain_when_redirected():
    output = render_to(force_terminal=False)
    assert "\x1b[" not in output
    assert output == server_cli().parse_specified("server", []).usage.render()


def test_render_help_styles_header_on_terminal():
    output = render_to(force_terminal=True)
    header = output.splitlines()[0]
    assert header.startswith("\x1b[")
    assert "Usage: server [options]" in header
    assert "\x1b[" not in "\n".join(output.splitlines()[1:])
