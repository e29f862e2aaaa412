from argloom import Checker, flag, opt, value
from argloom.switches import FlagShape, SwitchSpec


def test_valid_tree():
    arg = opt("f", "foo", "", "N") & flag("v", "verbose") & value("x", 1)
    assert arg.validate() is None


def test_duplicate_short():
    arg = flag("f", "foo") & flag("f", "force")
    invalid = arg.validate()
    assert invalid
    assert invalid.keys == ["f"]
    assert [spec.long for spec in invalid.duplicate_keys["f"]] == ["foo", "force"]


def test_duplicate_long_without_short():
    invalid = (opt("", "out", "", "FILE") & flag("", "out")).validate()
    assert invalid.keys == ["out"]


def test_long_shared_by_different_shorts():
    invalid = (flag("a", "all") & flag("b", "all")).validate()
    assert invalid
    assert invalid.keys == []
    assert list(invalid.duplicate_longs) == ["all"]


def test_same_switch_twice_is_reported_once():
    invalid = (flag("f", "foo") & flag("f", "foo")).validate()
    assert invalid.keys == ["f"]
    assert invalid.duplicate_longs == {}


def test_every_collision_is_listed():
    arg = flag("a", "alpha") & flag("a", "again") & opt("b", "beta") & opt("b", "bis")
    invalid = arg.validate()
    assert invalid.keys == ["a", "b"]
    text = str(invalid)
    assert "switch 'a' is registered 2 times" in text
    assert "switch 'b' is registered 2 times" in text
    assert "-b, --bis" in text


def test_help_flag_collision():
    arg = flag("h", "host").with_help_default()
    assert arg.validate().keys == ["h"]


def test_validation_is_idempotent():
    arg = flag("f", "foo") & opt("f", "file") & flag("", "foo")
    first, second = Checker(), Checker()
    arg.register(first)
    arg.register(second)
    assert first.invalid() == second.invalid()
    assert arg.validate() == first.invalid()


def test_checker_direct():
    checker = Checker()
    checker.add(SwitchSpec("x", "", ""), FlagShape())
    assert checker.invalid() is None
    checker.add(SwitchSpec("x", "", ""), FlagShape())
    assert checker.invalid().keys == ["x"]
