from datetime import datetime
from pathlib import Path

import pytest
from pydantic import ValidationError

from argloom import HelpRequested, Provided, WithHelp
from argloom.config import ArgloomConfig, RawSwitch, loader

DEPLOY_YAML = """\
program: deploy
switches:
  - {short: e, long: env, hint: ENV, required: true}
  - {long: replicas, type: int, default: 1}
  - {short: v, long: verbose, kind: flag}
exclusive:
  - dest: target
    switches:
      - {long: host, hint: HOST}
      - {long: cluster, hint: NAME}
"""

DEPLOY_TOML = """\
[[switches]]
long = "count"
type = "int"
required = true

[[switches]]
dest = "dry_run"
long = "dry-run"
kind = "flag"
"""


@pytest.fixture
def deploy_yaml(tmp_path):
    path = tmp_path / "deploy.yaml"
    path.write_text(DEPLOY_YAML)
    return path


def test_loader_yaml(deploy_yaml):
    config = loader(deploy_yaml)
    assert config.program == "deploy"
    assert [switch.dest for switch in config.switches] == ["env", "replicas", "verbose"]
    outcome = config.to_arg().parse_specified(config.program, ["-e", "prod", "--host", "h1"])
    assert outcome.unwrap() == Provided(
        {"env": "prod", "replicas": 1, "verbose": False, "target": "h1"}
    )


def test_loader_yaml_errors(deploy_yaml):
    config = loader(str(deploy_yaml))
    outcome = config.to_arg().parse_specified(
        config.program, ["-e", "prod", "--host", "h1", "--cluster", "c1"]
    )
    assert str(outcome.error) == "(host) and (cluster) are mutually exclusive"


def test_loader_yaml_help(deploy_yaml):
    config = loader(deploy_yaml)
    assert config.to_arg().parse_specified("deploy", ["-h"]).unwrap() == HelpRequested()


def test_loader_toml(tmp_path):
    path = tmp_path / "counter.toml"
    path.write_text(DEPLOY_TOML)
    config = loader(path)
    assert config.program == "counter"
    outcome = config.to_arg().parse_specified(config.program, ["--count", "3"])
    assert outcome.unwrap() == Provided({"count": 3, "dry_run": False})


def test_help_disabled(tmp_path):
    path = tmp_path / "bare.yaml"
    path.write_text("help: false\nswitches:\n  - {long: name}\n")
    arg = loader(path).to_arg()
    assert arg.parse_specified("bare", ["--name", "x"]).unwrap() == {"name": "x"}
    assert not isinstance(arg, WithHelp)


def test_loader_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "missing.yaml")


def test_loader_bad_type():
    with pytest.raises(TypeError):
        loader(42)


def test_loader_unsupported_suffix(tmp_path):
    path = tmp_path / "deploy.json"
    path.write_text("{}")
    with pytest.raises(ValueError) as excinfo:
        loader(path)
    assert "Unsupported config format" in str(excinfo.value)


def test_loader_not_a_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- {long: env}\n")
    with pytest.raises(ValueError) as excinfo:
        loader(path)
    assert "mapping" in str(excinfo.value)


@pytest.mark.parametrize(
    "raw",
    [
        {},
        {"long": "x", "type": "complex"},
        {"long": "x", "kind": "flag", "required": True},
        {"long": "x", "kind": "flag", "default": 1},
        {"long": "x", "required": True, "default": 1},
        {"long": "x", "kind": "switch"},
    ],
)
def test_raw_switch_rejects(raw):
    with pytest.raises(ValidationError):
        RawSwitch(**raw)


def test_raw_switch_dest_defaults():
    assert RawSwitch(long="dry-run").dest == "dry_run"
    assert RawSwitch(short="q").dest == "q"
    assert RawSwitch(short="q", dest="quiet").dest == "quiet"


def test_config_rejects_duplicate_dest():
    with pytest.raises(ValidationError) as excinfo:
        ArgloomConfig(switches=[{"long": "env"}, {"short": "e", "dest": "env"}])
    assert "duplicate dest: env" in str(excinfo.value)


def test_config_rejects_empty():
    with pytest.raises(ValidationError):
        ArgloomConfig(program="x")


def test_exclusive_group_rules():
    with pytest.raises(ValidationError):
        ArgloomConfig(exclusive=[{"dest": "t", "switches": [{"long": "a"}]}])
    with pytest.raises(ValidationError):
        ArgloomConfig(
            exclusive=[
                {"dest": "t", "switches": [{"long": "a"}, {"long": "b", "kind": "flag"}]}
            ]
        )


def test_required_exclusive_group():
    config = ArgloomConfig(
        help=False,
        exclusive=[
            {"dest": "t", "required": True, "switches": [{"long": "a"}, {"long": "b"}]}
        ],
    )
    outcome = config.to_arg().parse_specified("x", [])
    assert str(outcome.error) == "missing required argument (choose (a) or (b))"


def test_colliding_definition_is_caught_by_validation():
    config = ArgloomConfig(
        switches=[{"short": "e", "long": "env"}, {"short": "e", "long": "extra"}]
    )
    assert config.to_arg().validate().keys == ["e"]


@pytest.mark.parametrize(
    "type_name, default, expected",
    [
        ("int", "3", 3),
        ("float", "0.5", 0.5),
        ("bool", "off", False),
        ("path", "/var/log", Path("/var/log")),
        ("datetime", "2024-01-01", datetime(2024, 1, 1)),
        ("str", "plain", "plain"),
        ("int", 7, 7),
    ],
)
def test_string_defaults_follow_type(type_name, default, expected):
    switch = RawSwitch(long="x", type=type_name, default=default)
    assert switch.default == expected
    assert type(switch.default) is type(expected)


def test_bad_default_is_rejected():
    with pytest.raises(ValidationError) as excinfo:
        RawSwitch(long="count", type="int", default="many")
    assert "many" in str(excinfo.value)


def test_defaults_from_file_are_typed(tmp_path):
    path = tmp_path / "since.toml"
    path.write_text('[[switches]]\nlong = "since"\ntype = "datetime"\ndefault = "2024-01-01"\n')
    config = loader(path)
    outcome = config.to_arg().parse_specified(config.program, [])
    assert outcome.unwrap() == Provided({"since": datetime(2024, 1, 1)})
