# Argloom CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by argloom.

Errors fall into three groups:

- Authoring errors (`SwitchSpecError`, `InvalidCommandSpecError`,
  `ArgumentReusedError`) signal a bug in the CLI definition itself. They are
  never turned into a parse outcome and are expected to crash the program.
- Extraction errors (`ArgumentError` and subclasses) are raised by descriptors
  when matched switches cannot be turned into a value. Each combinator that can
  fail has its own family so callers can tell which branch of a tree failed;
  wrapping errors display exactly as the error they wrap.
- Top-level errors (`TopLevelError`) are produced by the parse driver and wrap
  either the matching engine's failure or an extraction error.

Exception Hierarchy:
- ArgloomError
    ├── SwitchSpecError
    ├── InvalidCommandSpecError
    ├── ArgumentReusedError
    ├── ArgumentError
    │   ├── NestedArgumentError
    │   │   └── BothError
    │   ├── ChoiceError
    │   │   ├── ChoiceBranchError
    │   │   └── MutuallyExclusiveError
    │   ├── RequiredError
    │   │   ├── RequiredArgError
    │   │   └── MissingRequiredError
    │   └── ConvertError
    │       ├── ConvertArgError
    │       └── FailedToConvertError
    └── TopLevelError
        ├── MatchFailedError
        └── ExtractionFailedError
"""
from __future__ import annotations

from argparse import ArgumentError as MatchEngineError
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from argloom.validation import Invalid

Branch = Literal["a", "b", "arg"]


class ArgloomError(Exception):
    """Base exception for argloom."""


class SwitchSpecError(ArgloomError):
    """Exception raised when a switch is declared with unusable names."""


class InvalidCommandSpecError(ArgloomError):
    """Exception raised when a descriptor tree registers colliding switches."""

    def __init__(self, invalid: Invalid) -> None:
        super().__init__(f"Invalid command spec:\n{invalid}")
        self.invalid = invalid


class ArgumentReusedError(ArgloomError):
    """Exception raised when a descriptor is extracted more than once."""


class ArgumentError(ArgloomError):
    """Base class for errors raised while extracting a descriptor's value."""


class NestedArgumentError(ArgumentError):
    """Wraps the error of a child descriptor, tagged with the branch it came from."""

    def __init__(self, error: ArgumentError, branch: Branch = "arg") -> None:
        super().__init__(str(error))
        self.error = error
        self.branch = branch

    def __str__(self) -> str:
        return str(self.error)

    def root_cause(self) -> ArgumentError:
        """Return the innermost error that is not itself a wrapper."""
        error: ArgumentError = self
        while isinstance(error, NestedArgumentError):
            error = error.error
        return error


class BothError(NestedArgumentError):
    """One side of a `Both` descriptor failed."""


class ChoiceError(ArgumentError):
    """Base class for failures of a `Choice` descriptor."""


class ChoiceBranchError(ChoiceError, NestedArgumentError):
    """One branch of a `Choice` descriptor failed."""


class MutuallyExclusiveError(ChoiceError):
    """Both branches of a `Choice` descriptor were given."""

    def __init__(self, a: str, b: str) -> None:
        super().__init__(f"({a}) and ({b}) are mutually exclusive")
        self.a = a
        self.b = b


class RequiredError(ArgumentError):
    """Base class for failures of a `Required` descriptor."""


class RequiredArgError(RequiredError, NestedArgumentError):
    """The descriptor wrapped by `Required` failed."""


class MissingRequiredError(RequiredError):
    """A required argument was not given."""

    def __init__(self, name: str) -> None:
        super().__init__(f"missing required argument ({name})")
        self.name = name


class ConvertError(ArgumentError):
    """Base class for failures of an `OptionConvertString` descriptor."""


class ConvertArgError(ConvertError, NestedArgumentError):
    """The descriptor wrapped by `OptionConvertString` failed."""


class FailedToConvertError(ConvertError):
    """The conversion function rejected the raw string."""

    def __init__(self, name: str, arg_string: str, error: Exception) -> None:
        super().__init__(
            f'failed to convert argument ({name}). "{arg_string}" could not be parsed '
            f"(error: {error})"
        )
        self.name = name
        self.arg_string = arg_string
        self.error = error


class TopLevelError(ArgloomError):
    """Base class for errors reported by the parse driver."""

    def __init__(self, error: Exception) -> None:
        super().__init__(str(error))
        self.error = error


class MatchFailedError(TopLevelError):
    """The matching engine rejected the command line."""

    error: MatchEngineError


class ExtractionFailedError(TopLevelError):
    """The descriptor tree could not extract its value."""

    error: ArgumentError
