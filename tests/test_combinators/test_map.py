from argloom import Opt, flag, opt


def test_map():
    arg = flag("v", "verbose").map(lambda verbose: "loud" if verbose else "quiet")
    assert arg.parse_specified("", ["-v"]).unwrap() == "loud"
    assert arg.name() == "verbose"


def test_map_chain():
    arg = opt("n", "count", "", "N", type=int).with_default(1).map(lambda n: n * 10)
    assert arg.parse_specified("", ["-n", "4"]).unwrap() == 40


def test_option_map_present():
    arg = Opt("n", "name").option_map(str.upper)
    assert arg.parse_specified("", ["--name", "abc"]).unwrap() == "ABC"


def test_option_map_absent_skips_function():
    calls = []

    def spy(raw):
        calls.append(raw)
        return raw

    arg = Opt("n", "name").option_map(spy)
    assert arg.parse_specified("", []).unwrap() is None
    assert calls == []


def test_map_errors_pass_through():
    arg = opt("n", "count", "", "N", type=int).required().map(lambda n: n + 1)
    outcome = arg.parse_specified("", [])
    assert str(outcome.error) == "missing required argument (count)"
