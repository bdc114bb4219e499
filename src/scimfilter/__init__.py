from scimfilter.config import EvaluatorConfig, set_evaluator_config
from scimfilter.error import InvalidFilter, ScimErrorType
from scimfilter.evaluator import FilterEvaluator, evaluate
from scimfilter.filter import Filter
from scimfilter.identifiers import AttrName, AttrRep, AttrRepFactory, BoundedAttrRep, SchemaUri
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
from scimfilter.path import VALUE_PATH, AttrPath
from scimfilter.registry import register_schema

USER_SCHEMA = SchemaUri("urn:ietf:params:scim:schemas:core:2.0:User")
GROUP_SCHEMA = SchemaUri("urn:ietf:params:scim:schemas:core:2.0:Group")
ENTERPRISE_USER_SCHEMA = SchemaUri("urn:ietf:params:scim:schemas:extension:enterprise:2.0:User")

register_schema(USER_SCHEMA)
register_schema(GROUP_SCHEMA)
register_schema(ENTERPRISE_USER_SCHEMA, extension=True)

__all__ = [
    "And",
    "AttrName",
    "AttrPath",
    "AttrRep",
    "AttrRepFactory",
    "BoundedAttrRep",
    "ComplexAttributeOperator",
    "Contains",
    "ENTERPRISE_USER_SCHEMA",
    "EndsWith",
    "Equal",
    "EvaluatorConfig",
    "Filter",
    "FilterEvaluator",
    "GROUP_SCHEMA",
    "GreaterThan",
    "GreaterThanOrEqual",
    "InvalidFilter",
    "LesserThan",
    "LesserThanOrEqual",
    "Not",
    "NotEqual",
    "Or",
    "Present",
    "SchemaUri",
    "ScimErrorType",
    "StartsWith",
    "USER_SCHEMA",
    "VALUE_PATH",
    "evaluate",
    "register_schema",
    "set_evaluator_config",
]
