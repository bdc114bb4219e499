from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from scimfilter.operator import Operator


ERROR_SCHEMA = "urn:ietf:params:scim:api:messages:2.0:Error"


class ScimErrorType(str, Enum):
    INVALID_FILTER = "invalidFilter"


INVALID_FILTER = {
    "status": "400",
    "scimType": ScimErrorType.INVALID_FILTER,
    "detail": (
        "The specified filter syntax is invalid, "
        "or the specified attribute and filter comparison combination is not supported."
    ),
}


class InvalidFilter(ValueError):
    """
    Raised when the filter can not be evaluated against the data, because the requested
    comparison is not defined for the data type (e.g. ordering of boolean or binary values).
    It indicates a bug in the filter, so it is never a reason to retry.
    """

    scim_error = ScimErrorType.INVALID_FILTER

    def __init__(
        self,
        message: str,
        operator: Optional["Operator"] = None,
        value: Any = None,
    ):
        """
        Args:
            message: Human-readable description of the problem.
            operator: The operator that failed to evaluate.
            value: The candidate value that the operator could not be applied to.
        """
        super().__init__(message)
        self.message = message
        self.operator = operator
        self.value = value

    @classmethod
    def ordering_not_supported(cls, operator: "Operator", value: Any) -> "InvalidFilter":
        type_name = "boolean" if isinstance(value, bool) else "binary"
        return cls(
            message=(
                f"{operator.op!r} operator can not compare {type_name} attribute values"
            ),
            operator=operator,
            value=value,
        )

    def to_dict(self) -> dict[str, Any]:
        """
        Returns SCIM error response body, as specified in RFC-7644, section 3.12.
        """
        return {
            "schemas": [ERROR_SCHEMA],
            "status": INVALID_FILTER["status"],
            "scimType": self.scim_error.value,
            "detail": self.message or INVALID_FILTER["detail"],
        }
