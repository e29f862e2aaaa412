import pytest

from argloom.exceptions import SwitchSpecError
from argloom.switches import FlagShape, OptShape, Switches, SwitchSpec


def test_key_prefers_short():
    assert SwitchSpec("f", "foo", "").key == "f"
    assert SwitchSpec("", "foo", "").key == "foo"
    assert SwitchSpec("f", "", "").key == "f"


def test_flags_and_str():
    assert SwitchSpec("f", "foo").flags == ("-f", "--foo")
    assert SwitchSpec("", "dry-run").flags == ("--dry-run",)
    assert str(SwitchSpec("f", "foo")) == "-f, --foo"


@pytest.mark.parametrize(
    "short,long",
    [
        ("", ""),
        ("ab", "foo"),
        ("-f", "foo"),
        ("f", "--foo"),
        ("", "two words"),
    ],
)
def test_invalid_specs(short, long):
    with pytest.raises(SwitchSpecError):
        SwitchSpec(short, long, "doc")


def test_specs_are_values():
    assert SwitchSpec("f", "foo", "doc") == SwitchSpec("f", "foo", "doc")
    assert hash(SwitchSpec("f", "foo", "doc")) == hash(SwitchSpec("f", "foo", "doc"))
    assert OptShape("N") == OptShape("N")
    assert FlagShape() != OptShape()


def test_switches_protocol():
    class Recorder:
        def add(self, spec, shape):
            pass

    assert isinstance(Recorder(), Switches)
    assert not isinstance(object(), Switches)
