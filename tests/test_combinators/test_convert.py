import pytest

from argloom import Opt, opt
from argloom.exceptions import ConvertError, FailedToConvertError


def test_converts_present_value():
    arg = Opt("p", "port", "", "PORT").option_convert_string(int)
    assert arg.parse_specified("", ["-p", "80"]).unwrap() == 80


def test_absent_is_none():
    calls = []
    arg = Opt("p", "port").option_convert_string(calls.append)
    assert arg.parse_specified("", []).unwrap() is None
    assert calls == []


def test_failure_carries_name_and_raw_string():
    arg = Opt("p", "port", "", "PORT").option_convert_string(int)
    error = arg.parse_specified("", ["--port", "eighty"]).error.error
    assert isinstance(error, FailedToConvertError)
    assert isinstance(error, ConvertError)
    assert error.name == "port"
    assert error.arg_string == "eighty"
    assert isinstance(error.error, ValueError)
    assert str(error).startswith('failed to convert argument (port). "eighty" could not')


@pytest.mark.parametrize("exception", [ValueError, KeyError, TypeError, RuntimeError])
def test_any_exception_is_wrapped(exception):
    def convert(raw):
        raise exception(raw)

    arg = Opt("x", "").option_convert_string(convert)
    error = arg.parse_specified("", ["-x", "1"]).error.error
    assert isinstance(error, FailedToConvertError)
    assert error.name == "x"


def test_name_is_forwarded():
    assert opt("p", "port", type=int).name() == "port"
