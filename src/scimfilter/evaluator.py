import logging
from typing import Any, Callable, Iterator, Optional

from scimfilter import comparator
from scimfilter import config as _config
from scimfilter.config import EvaluatorConfig
from scimfilter.error import InvalidFilter
from scimfilter.lookup import get_values
from scimfilter.operator import (
    And,
    ComplexAttributeOperator,
    Equal,
    Not,
    NotEqual,
    Operator,
    Or,
    OrderingAttributeOperator,
    Present,
    SubstringAttributeOperator,
)
from scimfilter.path import VALUE_PATH, AttrPath
from scimfilter.values import (
    is_array,
    is_binary,
    is_boolean,
    is_empty,
    is_empty_sequence,
    is_object,
    is_string,
)

logger = logging.getLogger(__name__)


class FilterEvaluator:
    """
    Evaluates filter operators against the data. The evaluator keeps no state between calls
    (apart from immutable configuration), so a single instance can be shared between threads.

    Examples:
        >>> evaluator = FilterEvaluator()
        >>> evaluator.evaluate(Equal("userName", "bjensen"), {"userName": "BJensen"})
        True
        >>> evaluator.evaluate(
        >>>     ComplexAttributeOperator("emails", Equal("type", "home")),
        >>>     {"emails": [{"type": "work"}, {"type": "home"}]},
        >>> )
        True
    """

    def __init__(self, config: Optional[EvaluatorConfig] = None):
        """
        Args:
            config: Evaluation configuration. If not provided, the global configuration
                (`scimfilter.config.evaluator_config`) at the time of creation is used.
        """
        self._config = config or _config.evaluator_config
        self._handlers: dict[type, Callable[[Any, Any], bool]] = {
            Equal: self._visit_equal,
            NotEqual: self._visit_not_equal,
            SubstringAttributeOperator: self._visit_substring,
            Present: self._visit_present,
            OrderingAttributeOperator: self._visit_ordering,
            And: self._visit_and,
            Or: self._visit_or,
            Not: self._visit_not,
            ComplexAttributeOperator: self._visit_complex,
        }

    @property
    def config(self) -> EvaluatorConfig:
        return self._config

    def evaluate(self, operator: Operator, data: Any) -> bool:
        """
        Tests the `data` against the `operator` and returns `True` if it matches,
        `False` otherwise.

        Args:
            operator: The filter operator.
            data: The data to test, usually a resource (mapping).

        Raises:
            InvalidFilter: If an ordering operator is used against boolean or binary value.
            TypeError: If the operator is not supported.

        Returns:
            Flag indicating whether the data matches the operator.
        """
        for cls in type(operator).__mro__:
            handler = self._handlers.get(cls)
            if handler is not None:
                return handler(operator, data)
        raise TypeError(f"unsupported filter type {type(operator).__name__!r}")

    def candidates(self, path: AttrPath, data: Any) -> Iterator[Any]:
        """
        Yields values from the `data` that should be tested against an operator for the
        specified `path`. Multi-valued attributes are flattened, so every item is tested
        separately.

        If the `data` itself is an array, its items are the candidates. If the `data` is a
        simple value and the `path` is `value`, the `data` itself is the candidate, which
        enables filters like `nicknames[value eq "Babs"]` for multi-valued attributes of
        simple type.
        """
        if is_array(data):
            yield from data
        elif is_object(data):
            for value in get_values(path, data, self.evaluate):
                if is_array(value):
                    yield from value
                else:
                    yield value
        elif path == VALUE_PATH:
            yield data

    def _equals(self, attr_value: Any, op_value: Any) -> bool:
        return comparator.equals(
            attr_value,
            op_value,
            case_exact=self._config.case_exact,
            parse_datetimes=self._config.parse_datetimes,
        )

    def _visit_equal(self, operator: Equal, data: Any) -> bool:
        candidates = list(self.candidates(operator.path, data))
        if operator.value is None and is_empty_sequence(candidates):
            return True
        return any(self._equals(candidate, operator.value) for candidate in candidates)

    def _visit_not_equal(self, operator: NotEqual, data: Any) -> bool:
        candidates = list(self.candidates(operator.path, data))
        if operator.value is None and is_empty_sequence(candidates):
            return False
        for candidate in candidates:
            if self._equals(candidate, operator.value):
                return False
        return True

    def _visit_substring(self, operator: SubstringAttributeOperator, data: Any) -> bool:
        op_value = operator.value
        op_value_lower = op_value.lower() if is_string(op_value) else None
        for candidate in self.candidates(operator.path, data):
            if (
                op_value_lower is not None
                and is_string(candidate)
                and operator.operator(candidate.lower(), op_value_lower)
            ):
                return True
            if comparator.deep_equal(candidate, op_value):
                return True
        return False

    def _visit_present(self, operator: Present, data: Any) -> bool:
        for candidate in self.candidates(operator.path, data):
            if not is_empty(candidate):
                return True
        return False

    def _visit_ordering(self, operator: OrderingAttributeOperator, data: Any) -> bool:
        for candidate in self.candidates(operator.path, data):
            if is_boolean(candidate) or is_binary(candidate):
                logger.debug("rejecting %r, candidate value is %r", operator, candidate)
                raise InvalidFilter.ordering_not_supported(operator, candidate)
            result = comparator.compare(
                candidate,
                operator.value,
                case_exact=self._config.case_exact,
                parse_datetimes=self._config.parse_datetimes,
            )
            if comparator.satisfies(result, operator.op):
                return True
        return False

    def _visit_and(self, operator: And, data: Any) -> bool:
        for sub_operator in operator.sub_operators:
            if not self.evaluate(sub_operator, data):
                return False
        return True

    def _visit_or(self, operator: Or, data: Any) -> bool:
        for sub_operator in operator.sub_operators:
            if self.evaluate(sub_operator, data):
                return True
        return False

    def _visit_not(self, operator: Not, data: Any) -> bool:
        return not self.evaluate(operator.sub_operator, data)

    def _visit_complex(self, operator: ComplexAttributeOperator, data: Any) -> bool:
        for candidate in self.candidates(operator.path, data):
            if is_array(candidate):
                for item in candidate:
                    if self.evaluate(operator.sub_operator, item):
                        return True
            elif self.evaluate(operator.sub_operator, candidate):
                return True
        return False


def evaluate(operator: Operator, data: Any) -> bool:
    """
    Tests the `data` against the `operator`, using the global evaluator configuration.

    Raises:
        InvalidFilter: If an ordering operator is used against boolean or binary value.
    """
    return FilterEvaluator().evaluate(operator, data)
