import math
import re
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional

from scimfilter.values import (
    is_array,
    is_binary,
    is_boolean,
    is_datetime,
    is_numeric,
    is_object,
    is_string,
)

_DATETIME = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}")
_FRACTION = re.compile(r"(T\d{2}:\d{2}:\d{2})\.(\d+)")


def _sign(value: Any) -> int:
    return (value > 0) - (value < 0)


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _is_nan(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    return isinstance(value, float) and math.isnan(value)


def parse_datetime(value: str) -> Optional[datetime]:
    """
    Parses xsd:dateTime string. Returns `None` if the value is not in the expected format.
    Values without time zone are considered UTC.
    """
    if not _DATETIME.match(value):
        return None
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    # fromisoformat accepts only 3 or 6 fractional digits before Python 3.11
    value = _FRACTION.sub(lambda m: f"{m.group(1)}.{m.group(2)[:6]:0<6}", value, count=1)
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    return _aware(parsed)


def _aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _as_datetime(value: Any) -> Optional[datetime]:
    if is_datetime(value):
        return _aware(value)
    if is_string(value):
        return parse_datetime(value)
    return None


def compare(
    a: Any,
    b: Any,
    *,
    case_exact: bool = False,
    parse_datetimes: bool = True,
) -> Optional[int]:
    """
    Compares two document values and returns negative number if `a` is lesser than `b`,
    zero if they are equal, and positive number if `a` is greater than `b`.

    Values are only comparable within the same type (numbers, strings, dateTimes, booleans,
    binaries, nulls). Arrays and objects can only be equal. For any other combination `None`
    is returned, meaning the values are neither equal nor ordered.

    Args:
        a: The left operand.
        b: The right operand.
        case_exact: Whether strings are compared case-sensitively.
        parse_datetimes: Whether strings in xsd:dateTime format are compared chronologically.

    Examples:
        >>> compare("Bjensen", "bjensen")
        0
        >>> compare("2011-05-13T04:42:34Z", "2011-05-13T06:42:34+02:00")
        0
        >>> compare(1, "1") is None
        True
    """
    if is_numeric(a) and is_numeric(b):
        if _is_nan(a) or _is_nan(b):
            return None
        return _cmp(a, b)

    if is_datetime(a) or is_datetime(b):
        a_dt, b_dt = _as_datetime(a), _as_datetime(b)
        if a_dt is None or b_dt is None:
            return None
        return _cmp(a_dt, b_dt)

    if is_string(a) and is_string(b):
        if parse_datetimes:
            a_dt, b_dt = parse_datetime(a), parse_datetime(b)
            if a_dt is not None and b_dt is not None:
                return _cmp(a_dt, b_dt)
        if case_exact:
            return _cmp(a, b)
        return _cmp(a.lower(), b.lower())

    if is_boolean(a) and is_boolean(b):
        return _cmp(a, b)

    if is_binary(a) and is_binary(b):
        return _cmp(bytes(a), bytes(b))

    if a is None and b is None:
        return 0

    if (is_array(a) and is_array(b)) or (is_object(a) and is_object(b)):
        return 0 if deep_equal(a, b) else None

    return None


def equals(a: Any, b: Any, *, case_exact: bool = False, parse_datetimes: bool = True) -> bool:
    """
    Checks whether two document values are equal, according to `compare`.
    """
    return compare(a, b, case_exact=case_exact, parse_datetimes=parse_datetimes) == 0


def satisfies(result: Optional[int], op: str) -> bool:
    """
    Checks whether the comparison `result` satisfies the ordering operator `op`
    (one of `gt`, `ge`, `lt`, `le`). Incomparable values never satisfy any of them.
    """
    if result is None:
        return False
    sign = _sign(result)
    if op == "gt":
        return sign > 0
    if op == "ge":
        return sign >= 0
    if op == "lt":
        return sign < 0
    if op == "le":
        return sign <= 0
    raise ValueError(f"unknown ordering operator {op!r}")


def deep_equal(a: Any, b: Any) -> bool:
    """
    Strict structural equality. Unlike `equals`, strings are compared exactly, and booleans
    are never equal to numbers.
    """
    if is_boolean(a) or is_boolean(b):
        return is_boolean(a) and is_boolean(b) and a == b

    if is_numeric(a) or is_numeric(b):
        return is_numeric(a) and is_numeric(b) and not (_is_nan(a) or _is_nan(b)) and a == b

    if is_array(a) or is_array(b):
        if not (is_array(a) and is_array(b)) or len(a) != len(b):
            return False
        return all(deep_equal(a_item, b_item) for a_item, b_item in zip(a, b))

    if is_object(a) or is_object(b):
        if not (is_object(a) and is_object(b)) or set(a) != set(b):
            return False
        return all(deep_equal(a[key], b[key]) for key in a)

    if is_binary(a) and is_binary(b):
        return bytes(a) == bytes(b)

    return type(a) is type(b) and a == b
