# Argloom CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
String to value conversion used by typed options.

`opt(..., type=T)` converts the raw string of an option with `coerce_value`,
which understands plain types and callables, `Enum`, `bool`, `datetime`,
`Literal` and unions. Any exception raised here is reported to the user as a
`FailedToConvertError` naming the option and the offending string.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_enum: Convert a string or raw value to an Enum instance.
- coerce_value: General-purpose coercion to a target type.
"""
import types
from datetime import datetime
from enum import EnumMeta
from typing import Any, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

from argloom.logger import logger


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts 'true', 'yes', 'on', '1' and their negative counterparts, in any case.

    Args:
        value (str): The input string or boolean.

    Returns:
        bool: Parsed boolean result.

    Raises:
        ValueError: If the string is not a recognised boolean spelling.
    """
    if isinstance(value, bool):
        return value
    value = value.strip().lower()
    if value in {"true", "t", "1", "yes", "y", "on"}:
        return True
    elif value in {"false", "f", "0", "no", "n", "off"}:
        return False
    raise ValueError(f"'{value}' is not a boolean (use true/false, yes/no, on/off, 1/0)")


def coerce_enum(value: Any, enum_type: EnumMeta) -> Any:
    """
    Convert a raw value or string to an Enum instance.

    Tries to resolve by name, then by value of the enum's base type.

    Raises:
        ValueError: If the value cannot be resolved to a valid Enum member.
    """
    if isinstance(value, enum_type):
        return value

    if isinstance(value, str):
        try:
            return enum_type[value]
        except KeyError:
            pass

    base_type = type(next(iter(enum_type)).value)
    try:
        coerced_value = base_type(value)
        return enum_type(coerced_value)
    except (ValueError, TypeError):
        values = [str(enum.value) for enum in enum_type]
        raise ValueError(f"'{value}' should be one of {{{', '.join(values)}}}") from None


def coerce_value(value: str, target_type: Any) -> Any:
    """
    Attempt to convert a string to the given target type.

    Handles typing constructs such as Union and Literal, Enum classes, bool and
    datetime. Anything else is called with the string.

    Args:
        value (str): The input string to convert.
        target_type (Any): The desired type, or a callable taking the string.

    Returns:
        Any: The coerced value.

    Raises:
        ValueError: If conversion fails or the value is invalid. Callables may
            raise their own exception types.
    """
    origin = get_origin(target_type)
    args = get_args(target_type)

    if origin is Literal:
        if value not in args:
            raise ValueError(
                f"Value '{value}' is not a valid literal for type {target_type}"
            )
        return value

    if isinstance(target_type, types.UnionType) or origin is Union:
        for arg in args:
            try:
                return coerce_value(value, arg)
            except Exception as error:
                logger.debug("'%s' is not a %s: %s", value, arg, error)
                continue
        raise ValueError(f"Value '{value}' could not be coerced to any of {args}")

    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)

    if target_type is bool:
        return coerce_bool(value)

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(f"Value '{value}' could not be parsed as a datetime") from error

    return target_type(value)
