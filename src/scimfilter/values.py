"""
Introspection of document values. Documents are trees of JSON-like values, where mappings
are objects, lists and tuples are arrays, `bytes` are binary values and `datetime` objects
are dateTime values.
"""

from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal
from typing import Any, Iterable


def is_null(value: Any) -> bool:
    return value is None


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_numeric(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_binary(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray))


def is_datetime(value: Any) -> bool:
    return isinstance(value, datetime)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_empty(value: Any) -> bool:
    """
    Checks whether the value is considered empty, that is `None` or an array which contains
    empty values only (nested arrays included).

    RFC-7643, section 2.5: "Unassigned attributes, the null value, or empty array (in the case
    of a multi-valued attribute) SHALL be considered to be equivalent in 'state'."
    """
    if is_array(value):
        return all(is_empty(item) for item in value)
    return is_null(value)


def is_empty_sequence(values: Iterable[Any]) -> bool:
    """
    Checks whether all provided values are empty. No values at all mean the attribute is
    unassigned, so the result is `True`.
    """
    return all(is_empty(value) for value in values)
