from datetime import datetime
from decimal import Decimal

import pytest

from scimfilter.identifiers import AttrRep
from scimfilter.operator import (
    And,
    ComplexAttributeOperator,
    Contains,
    EndsWith,
    Equal,
    GreaterThan,
    GreaterThanOrEqual,
    LesserThan,
    LesserThanOrEqual,
    Not,
    NotEqual,
    Or,
    Present,
    StartsWith,
)
from scimfilter.path import AttrPath


@pytest.mark.parametrize(
    "operator_cls",
    (Equal, NotEqual, Contains, StartsWith, EndsWith),
)
@pytest.mark.parametrize(
    "value",
    ("abc", True, 1, 1.5, Decimal("1.5"), None, b"abc", datetime(2024, 1, 1)),
)
def test_equality_and_substring_operators_accept_scalar_values(operator_cls, value):
    operator = operator_cls("attr", value)

    assert operator.value is value


@pytest.mark.parametrize(
    "operator_cls",
    (Equal, NotEqual, Contains, StartsWith, EndsWith),
)
@pytest.mark.parametrize("value", ([1], {"a": 1}))
def test_equality_and_substring_operators_reject_complex_values(operator_cls, value):
    with pytest.raises(TypeError, match="is not supported by"):
        operator_cls("attr", value)


@pytest.mark.parametrize(
    "operator_cls",
    (GreaterThan, GreaterThanOrEqual, LesserThan, LesserThanOrEqual),
)
@pytest.mark.parametrize("value", ("abc", 1, 1.5, Decimal("1.5"), datetime(2024, 1, 1)))
def test_ordering_operators_accept_ordered_values(operator_cls, value):
    operator = operator_cls("attr", value)

    assert operator.value is value


@pytest.mark.parametrize(
    "operator_cls",
    (GreaterThan, GreaterThanOrEqual, LesserThan, LesserThanOrEqual),
)
@pytest.mark.parametrize("value", (True, False, b"abc", None))
def test_ordering_operators_reject_boolean_and_binary_values(operator_cls, value):
    with pytest.raises(TypeError, match="is not supported by"):
        operator_cls("attr", value)


@pytest.mark.parametrize("operator_cls", (And, Or))
def test_logical_operator_requires_sub_operators(operator_cls):
    with pytest.raises(ValueError, match="requires at least one sub-operator"):
        operator_cls()


def test_attribute_operator_accepts_path_representations():
    expected = AttrPath(AttrRep(attr="name", sub_attr="givenName"))

    assert Present("name.givenName").path == expected
    assert Present(AttrRep(attr="name", sub_attr="givenName")).path == expected
    assert Present(expected).path == expected
    assert Present("name.givenName").attr_rep == AttrRep(attr="name", sub_attr="givenName")


def test_attribute_operator_fails_for_bad_attr():
    with pytest.raises(ValueError, match="is not valid attribute representation"):
        Equal("emails[type", "work")


@pytest.mark.parametrize(
    ("operator_1", "operator_2", "expected"),
    (
        (Equal("userName", "a"), Equal("USERNAME", "a"), True),
        (Equal("userName", "a"), Equal("userName", "b"), False),
        (Equal("userName", 1), Equal("userName", True), False),
        (Equal("userName", "a"), NotEqual("userName", "a"), False),
        (Present("userName"), Present("userName"), True),
        (Present("userName"), Present("title"), False),
        (
            And(Present("userName"), Equal("title", "a")),
            And(Present("userName"), Equal("title", "a")),
            True,
        ),
        (
            And(Present("userName"), Equal("title", "a")),
            Or(Present("userName"), Equal("title", "a")),
            False,
        ),
        (Not(Present("userName")), Not(Present("userName")), True),
        (
            ComplexAttributeOperator("emails", Equal("type", "work")),
            ComplexAttributeOperator("emails", Equal("type", "work")),
            True,
        ),
        (
            ComplexAttributeOperator("emails", Equal("type", "work")),
            ComplexAttributeOperator("emails", Equal("type", "home")),
            False,
        ),
    ),
)
def test_operators_equality(operator_1, operator_2, expected):
    assert (operator_1 == operator_2) is expected


def test_sub_operators_can_not_be_modified():
    operator = And(Present("userName"))

    operator.sub_operators.append(Present("title"))

    assert operator.sub_operators == [Present("userName")]


@pytest.mark.parametrize(
    ("operator", "expected"),
    (
        (Equal("userName", "bjensen"), "Equal(userName, 'bjensen')"),
        (Present("title"), "Present(title)"),
        (
            Or(Present("title"), Not(Equal("active", True))),
            "Or(Present(title), Not(Equal(active, True)))",
        ),
        (
            ComplexAttributeOperator("emails", Present("value")),
            "ComplexAttributeOperator(emails, Present(value))",
        ),
    ),
)
def test_operator_repr(operator, expected):
    assert repr(operator) == expected


@pytest.mark.parametrize(
    ("operator_cls", "attr_value", "op_value", "expected"),
    (
        (Contains, "bjensen@example.com", "example", True),
        (Contains, "bjensen@example.com", "other", False),
        (StartsWith, "bjensen@example.com", "bjensen", True),
        (StartsWith, "bjensen@example.com", "example", False),
        (EndsWith, "bjensen@example.com", ".com", True),
        (EndsWith, "bjensen@example.com", ".org", False),
    ),
)
def test_substring_operator_relation(operator_cls, attr_value, op_value, expected):
    assert operator_cls.operator(attr_value, op_value) is expected
