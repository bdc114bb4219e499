import abc
from datetime import datetime
from decimal import Decimal
from typing import Any, Generic, TypeVar, Union

from typing_extensions import TypeAlias

from scimfilter.identifiers import AttrRep
from scimfilter.path import AttrPath

AttrLike: TypeAlias = Union[AttrPath, AttrRep, str]


class Operator(abc.ABC):
    """
    Base class for operators. Operators are immutable nodes of the filter tree and do not
    evaluate themselves, see `scimfilter.evaluator.FilterEvaluator`.
    """

    op: str


class LogicalOperator(Operator, abc.ABC):
    """
    Base class for logical operators.
    """

    def __init__(self, *sub_operators: Operator):
        """
        Args:
            *sub_operators: Sub-operators which are evaluated separately.

        Raises:
            ValueError: If no sub-operators are provided.
        """
        if not sub_operators:
            raise ValueError(f"{self.op!r} operator requires at least one sub-operator")
        self._sub_operators = tuple(sub_operators)

    @property
    def sub_operators(self) -> list[Operator]:
        """Sub-operators contained inside the operator."""
        return list(self._sub_operators)

    def __eq__(self, other: Any) -> bool:
        if type(self) is not type(other):
            return False
        return self._sub_operators == other._sub_operators

    def __repr__(self) -> str:
        sub_operators = ", ".join(repr(sub_operator) for sub_operator in self._sub_operators)
        return f"{self.__class__.__name__}({sub_operators})"


class And(LogicalOperator):
    """
    Represents `and` SCIM operator. Matches if all sub-operators match.
    """

    op = "and"


class Or(LogicalOperator):
    """
    Represents `or` SCIM operator. Matches if any of sub-operators match.
    """

    op = "or"


class Not(LogicalOperator):
    """
    Represents `not` SCIM operator. Matches if a sub-operator does not match.
    """

    op = "not"

    def __init__(self, sub_operator: Operator):
        super().__init__(sub_operator)

    @property
    def sub_operator(self) -> Operator:
        """The inverted sub-operator."""
        return self._sub_operators[0]


class AttributeOperator(Operator, abc.ABC):
    """
    Base class for all operators that involve attributes directly.
    """

    def __init__(self, attr: AttrLike):
        """
        Args:
            attr: The path to the attribute which values should be matched. Attribute
                representations and strings are converted to `AttrPath`.
        """
        self._path = AttrPath.from_any(attr)

    @property
    def path(self) -> AttrPath:
        """
        The path to the attribute which values should be matched.
        """
        return self._path

    @property
    def attr_rep(self) -> AttrRep:
        """
        The representation of an attribute which value should be matched.
        """
        return self._path.attr_rep


class UnaryAttributeOperator(AttributeOperator, abc.ABC):
    """
    Base class for all unary operators.
    """

    def __eq__(self, other: Any) -> bool:
        if type(self) is not type(other):
            return False
        return self._path == other._path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._path})"


class Present(UnaryAttributeOperator):
    """
    Represents `pr` SCIM operator.
    """

    op = "pr"


class BinaryAttributeOperator(AttributeOperator, abc.ABC):
    """
    Base class for all binary operators. Every subclass which is not an abstract must specify
    `op` and `supported_types` class attributes.
    """

    supported_types: set[type]

    def __init__(self, attr: AttrLike, value: Any):
        """
        Args:
            attr: A path to an attribute which value should be compared with the operator's
                value.
            value: The operator's value (right operand), compared to the attribute's value
                (left operand).

        Raises:
            TypeError: If the type of `value` is not supported by the operator.
        """
        super().__init__(attr)
        if type(value) not in self.supported_types:
            raise TypeError(
                f"value type {type(value).__name__!r} is not supported by {self.op!r} operator"
            )
        self._value = value

    @property
    def value(self) -> Any:
        """
        The operator's value (right operand), compared to the attribute's value (left operand).
        """
        return self._value

    def __eq__(self, other: Any) -> bool:
        if type(self) is not type(other):
            return False
        return (
            self._path == other._path
            and type(self._value) is type(other._value)
            and self._value == other._value
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._path}, {self._value!r})"


_SCALAR_TYPES = {str, bool, int, float, Decimal, type(None), bytes, bytearray, datetime}


class Equal(BinaryAttributeOperator):
    """
    Represents `eq` SCIM operator.
    """

    op = "eq"
    supported_types = _SCALAR_TYPES


class NotEqual(BinaryAttributeOperator):
    """
    Represents `ne` SCIM operator.
    """

    op = "ne"
    supported_types = _SCALAR_TYPES


class SubstringAttributeOperator(BinaryAttributeOperator, abc.ABC):
    """
    Base class for operators matching a part of string values. Non-string operands are
    accepted, but can only match values that are exactly the same.
    """

    supported_types = _SCALAR_TYPES

    @staticmethod
    @abc.abstractmethod
    def operator(attr_value: str, op_value: str) -> bool:
        """
        Implements operator's logic for matching the provided value.
        """


class Contains(SubstringAttributeOperator):
    """
    Represents `co` SCIM operator.
    """

    op = "co"

    @staticmethod
    def operator(attr_value: str, op_value: str) -> bool:
        return op_value in attr_value


class StartsWith(SubstringAttributeOperator):
    """
    Represents `sw` SCIM operator.
    """

    op = "sw"

    @staticmethod
    def operator(attr_value: str, op_value: str) -> bool:
        return attr_value.startswith(op_value)


class EndsWith(SubstringAttributeOperator):
    """
    Represents `ew` SCIM operator.
    """

    op = "ew"

    @staticmethod
    def operator(attr_value: str, op_value: str) -> bool:
        return attr_value.endswith(op_value)


class OrderingAttributeOperator(BinaryAttributeOperator, abc.ABC):
    """
    Base class for ordering operators. Ordering is not defined for boolean and binary values,
    so these can not be used as operands.
    """

    supported_types = {str, int, float, Decimal, datetime}


class GreaterThan(OrderingAttributeOperator):
    """
    Represents `gt` SCIM operator.
    """

    op = "gt"


class GreaterThanOrEqual(OrderingAttributeOperator):
    """
    Represents `ge` SCIM operator.
    """

    op = "ge"


class LesserThan(OrderingAttributeOperator):
    """
    Represents `lt` SCIM operator.
    """

    op = "lt"


class LesserThanOrEqual(OrderingAttributeOperator):
    """
    Represents `le` SCIM operator.
    """

    op = "le"


TLogicalOrAttributeOperator = TypeVar(
    "TLogicalOrAttributeOperator", bound=Union[LogicalOperator, AttributeOperator]
)


class ComplexAttributeOperator(Operator, Generic[TLogicalOrAttributeOperator]):
    """
    Represents complex attribute grouping operator (`attr[sub_filter]`). Can be used for
    single-valued and multi-valued complex attributes, as well as multi-valued attributes
    of simple type, which values are referenced with `value` sub-attribute.

    Args:
        attr: A path to a complex attribute which value should be matched.
        sub_operator: A sub-operator used to test complex attribute's sub-attribute values.
    """

    op = "complex"

    def __init__(
        self,
        attr: AttrLike,
        sub_operator: TLogicalOrAttributeOperator,
    ):
        self._path = AttrPath.from_any(attr)
        self._sub_operator = sub_operator

    @property
    def path(self) -> AttrPath:
        """
        The path to the complex attribute which value should be matched.
        """
        return self._path

    @property
    def attr_rep(self) -> AttrRep:
        """
        The representation of the complex attribute which value should be matched.
        """
        return self._path.attr_rep

    @property
    def sub_operator(self) -> TLogicalOrAttributeOperator:
        """
        The sub-operator used to test complex attribute's sub-attribute values.
        """
        return self._sub_operator

    def __eq__(self, other: Any) -> bool:
        if type(self) is not type(other):
            return False
        return self._path == other._path and self._sub_operator == other._sub_operator

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._path}, {self._sub_operator!r})"
