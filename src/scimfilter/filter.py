import base64
import json
from datetime import datetime
from decimal import Decimal
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar, Union

from scimfilter import operator as op
from scimfilter.evaluator import FilterEvaluator
from scimfilter.identifiers import AttrRep, BoundedAttrRep

TOperator = TypeVar("TOperator", bound=op.Operator)


def serialize_value(value: Any) -> str:
    """
    Serializes the comparison value to its filter expression form.
    """
    if isinstance(value, datetime):
        return json.dumps(value.isoformat())
    if isinstance(value, (bytes, bytearray)):
        return json.dumps(base64.b64encode(bytes(value)).decode("ascii"))
    if isinstance(value, Decimal):
        return str(value)
    return json.dumps(value)


class Filter(Generic[TOperator]):
    """
    Data filter supporting SCIM operators.

    Args:
        operator: Underlying filter operator, used for data filtering.
        evaluator: Evaluator used to match the data. If not provided, an evaluator with
            the global configuration is created.

    Examples:
        >>> username_filter = Filter(Equal("userName", "Pagerous"))
        >>> username_filter({"userName": "Pagerous"})
        True
        >>> username_filter({"userName": "NotPagerous"})
        False
        >>> username_filter.serialize()
        'userName eq "Pagerous"'
    """

    def __init__(self, operator: TOperator, evaluator: Optional[FilterEvaluator] = None):
        self._operator = operator
        self._evaluator = evaluator or FilterEvaluator()

    @property
    def operator(self) -> TOperator:
        """
        Underlying filter operator, used for data filtering.
        """
        return self._operator

    @property
    def attr_reps(self) -> list[AttrRep]:
        """
        List of bounded and unbounded attribute representations
        included in the filter. Useful to determine if there is
        enough data to use filter, since no data means no match
        (except for `not pr` and `eq null` operators).
        """
        return self._get_attr_reps(self._operator)

    @staticmethod
    def _get_attr_reps(operator) -> list[AttrRep]:
        reps: list[AttrRep] = []

        def get_sub_attr_name(sub_rep_):
            return sub_rep_.sub_attr if sub_rep_.is_sub_attr else sub_rep_.attr

        def extend_reps(reps_: Iterable[AttrRep]):
            for rep_ in reps_:
                if rep_ not in reps:
                    reps.append(rep_)

        if isinstance(operator, op.AttributeOperator):
            reps.append(operator.attr_rep)
        elif isinstance(operator, op.ComplexAttributeOperator):
            rep = operator.attr_rep
            sub_reps: Iterable[Union[AttrRep, BoundedAttrRep]]
            if rep.is_sub_attr:
                sub_reps = [rep]
            elif isinstance(rep, BoundedAttrRep):
                sub_reps = [
                    BoundedAttrRep(
                        schema=rep.schema,
                        attr=rep.attr,
                        sub_attr=get_sub_attr_name(sub_rep),
                    )
                    for sub_rep in Filter._get_attr_reps(operator.sub_operator)
                ]
            else:
                sub_reps = [
                    AttrRep(attr=rep.attr, sub_attr=get_sub_attr_name(sub_rep))
                    for sub_rep in Filter._get_attr_reps(operator.sub_operator)
                ]
            extend_reps(sub_reps)
        elif isinstance(operator, op.LogicalOperator):
            for sub_op in operator.sub_operators:
                extend_reps(Filter._get_attr_reps(sub_op))
        return reps

    def __call__(self, data: Any) -> bool:
        """
        Matches the data against the filter.

        Args:
            data: Data to be matched.

        Raises:
            InvalidFilter: If an ordering operator is used against boolean or binary value.

        Returns:
            Flag indicating whether the data matches the filter.
        """
        return self._evaluator.evaluate(self._operator, data)

    def select(self, resources: Iterable[Any]) -> Iterator[Any]:
        """
        Lazily yields resources that match the filter, preserving their order.
        """
        for resource in resources:
            if self(resource):
                yield resource

    def serialize(self) -> str:
        """
        Serializes `Filter` to string filter expression.
        """
        output = self._serialize(self._operator)
        if output.startswith("(") and output.endswith(")"):
            output = output[1:-1]
        return output

    @staticmethod
    def _serialize(operator) -> str:
        if isinstance(operator, op.AttributeOperator):
            output = f"{operator.path} {operator.op}"
            if isinstance(operator, op.BinaryAttributeOperator):
                output += f" {serialize_value(operator.value)}"
            return output

        if isinstance(operator, op.ComplexAttributeOperator):
            return f"{operator.path}[{Filter(operator.sub_operator).serialize()}]"

        if isinstance(operator, op.Not):
            sub_output = Filter._serialize(operator.sub_operator)
            if not sub_output.startswith("("):
                sub_output = f"({sub_output})"
            return f"{operator.op} {sub_output}"

        if isinstance(operator, (op.And, op.Or)):
            output = f" {operator.op} ".join(
                [Filter._serialize(sub_operator) for sub_operator in operator.sub_operators]
            )
            return f"({output})"

        raise TypeError(f"unsupported filter type '{type(operator).__name__}'")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Filter):
            return False
        return self._operator == other._operator

    def to_dict(self) -> dict:
        """
        Convert the filter to a dictionary.
        """
        return self._to_dict(self._operator)

    @staticmethod
    def _to_dict(operator):
        if isinstance(operator, op.AttributeOperator):
            filter_dict = {
                "op": operator.op,
                "attr": str(operator.path),
            }
            if isinstance(operator, op.BinaryAttributeOperator):
                filter_dict["value"] = operator.value
            return filter_dict

        if isinstance(operator, op.ComplexAttributeOperator):
            return {
                "op": operator.op,
                "attr": str(operator.path),
                "sub_op": Filter._to_dict(operator.sub_operator),
            }

        if isinstance(operator, op.Not):
            return {
                "op": operator.op,
                "sub_op": Filter._to_dict(operator.sub_operator),
            }

        if isinstance(operator, (op.And, op.Or)):
            return {
                "op": operator.op,
                "sub_ops": [
                    Filter._to_dict(sub_operator) for sub_operator in operator.sub_operators
                ],
            }
        raise TypeError(f"unsupported filter type '{type(operator).__name__}'")
