import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable

from scimfilter.identifiers import BoundedAttrRep
from scimfilter.path import AttrPath
from scimfilter.values import is_array, is_object

if TYPE_CHECKING:
    from scimfilter.operator import Operator

logger = logging.getLogger(__name__)

Matcher = Callable[["Operator", Any], bool]


class _MissingType:
    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Missing"


Missing = _MissingType()


def get_field(data: Mapping, name: str) -> Any:
    """
    Returns the value stored under the key that matches `name` case-insensitively,
    or `Missing` if there is no such key. Exact match takes precedence.
    """
    name = str(name)
    if name in data:
        return data[name]
    lower_name = name.lower()
    for key, value in data.items():
        if isinstance(key, str) and key.lower() == lower_name:
            return value
    return Missing


def get_values(path: AttrPath, data: Mapping, matcher: Matcher) -> list[Any]:
    """
    Returns values located by the `path` in the `data`, in the order they appear in the data.
    Unassigned attributes produce no values. Attributes set to `null` produce `None`.

    Args:
        path: The path to the values.
        data: The data to retrieve values from.
        matcher: Callable used to check whether an attribute value matches the path's value
            selection filter. Not used if the path has no filter.

    Examples:
        >>> data = {
        >>>     "emails": [
        >>>         {"type": "work", "value": "bjensen@example.com"},
        >>>         {"type": "home", "value": "babs@jensen.org"},
        >>>     ],
        >>> }
        >>> get_values(AttrPath.deserialize("emails.value"), data, evaluate)
        ["bjensen@example.com", "babs@jensen.org"]
        >>> get_values(
        >>>     AttrPath(AttrRep("emails"), Equal("type", "work"), "value"), data, evaluate
        >>> )
        ["bjensen@example.com"]
        >>> get_values(AttrPath.deserialize("phoneNumbers"), data, evaluate)
        []
    """
    attr_rep = path.attr_rep
    container: Any = data
    if isinstance(attr_rep, BoundedAttrRep) and attr_rep.extension:
        container = get_field(data, attr_rep.schema)
        if not is_object(container):
            return []

    value = get_field(container, attr_rep.attr)
    if value is Missing:
        return []

    if path.filter is not None:
        items = value if is_array(value) else [value]
        value = [item for item in items if matcher(path.filter, item)]
        if not value:
            return []

    if attr_rep.is_sub_attr:
        sub_attr = attr_rep.sub_attr
    elif path.sub_attr_name is not None:
        sub_attr = path.sub_attr_name
    else:
        return [value]

    if is_object(value):
        sub_value = get_field(value, sub_attr)
        return [] if sub_value is Missing else [sub_value]

    if not is_array(value):
        logger.debug("can not read sub-attribute %r from simple value of %r", sub_attr, path)
        return []

    values = []
    for item in value:
        if not is_object(item):
            continue
        sub_value = get_field(item, sub_attr)
        if sub_value is not Missing:
            values.append(sub_value)
    return values
