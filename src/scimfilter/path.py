from typing import TYPE_CHECKING, Any, Optional, Union

from scimfilter.identifiers import AttrName, AttrRep, AttrRepFactory

if TYPE_CHECKING:
    from scimfilter.operator import Operator


class AttrPath:
    """
    Path to attribute values in the data. Consists of the attribute representation,
    optional value selection filter for the attribute values, and optional sub-attribute
    name, which can follow the value selection filter.

    Examples:
        >>> AttrPath(AttrRep(attr="name", sub_attr="givenName"))
        AttrPath(name.givenName)
        >>> AttrPath(
        >>>     AttrRep(attr="emails"),
        >>>     filter_=Equal("type", "work"),
        >>>     sub_attr_name="value",
        >>> )
        AttrPath(emails[type eq "work"].value)
    """

    def __init__(
        self,
        attr_rep: AttrRep,
        filter_: Optional["Operator"] = None,
        sub_attr_name: Optional[str] = None,
    ):
        """
        Args:
            attr_rep: The representation of the attribute being targeted.
            filter_: Value selection filter, applied to the attribute values.
            sub_attr_name: The sub-attribute read from the values selected by `filter_`.

        Raises:
            ValueError: When `filter_` is provided and `attr_rep` is a sub-attribute
                representation.
            ValueError: When `sub_attr_name` is provided without `filter_`.
        """
        if filter_ is not None and attr_rep.is_sub_attr:
            raise ValueError("value selection filter can not be applied to a sub-attribute")
        if sub_attr_name is not None:
            if filter_ is None:
                raise ValueError(
                    "'sub_attr_name' requires value selection filter, "
                    "use sub-attribute representation instead"
                )
            sub_attr_name = AttrName(sub_attr_name)

        self._attr_rep = attr_rep
        self._filter = filter_
        self._sub_attr_name = sub_attr_name

    @property
    def attr_rep(self) -> AttrRep:
        """
        The representation of the attribute being targeted.
        """
        return self._attr_rep

    @property
    def filter(self) -> Optional["Operator"]:
        """
        Value selection filter, if any.
        """
        return self._filter

    @property
    def sub_attr_name(self) -> Optional[AttrName]:
        """
        The sub-attribute read after value selection, if any.
        """
        return self._sub_attr_name

    @property
    def has_filter(self) -> bool:
        return self._filter is not None

    @classmethod
    def deserialize(cls, path_exp: str) -> "AttrPath":
        """
        Deserializes attribute path without value selection filter, e.g. `userName`,
        `name.givenName`, or
        `urn:ietf:params:scim:schemas:extension:enterprise:2.0:User:manager.value`.

        Raises:
            ValueError: If the provided `path_exp` is not valid attribute path.
        """
        return cls(AttrRepFactory.deserialize(path_exp.strip()))

    @classmethod
    def from_any(cls, value: Union["AttrPath", AttrRep, str]) -> "AttrPath":
        if isinstance(value, AttrPath):
            return value
        if isinstance(value, AttrRep):
            return cls(value)
        if isinstance(value, str):
            return cls.deserialize(value)
        raise TypeError(f"can not create attribute path from {type(value).__name__!r}")

    def __str__(self) -> str:
        if self._filter is None:
            return str(self._attr_rep)
        from scimfilter.filter import Filter

        output = f"{self._attr_rep}[{Filter(self._filter).serialize()}]"
        if self._sub_attr_name is not None:
            output += f".{self._sub_attr_name}"
        return output

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self)})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, AttrPath):
            return False
        return (
            self._attr_rep == other._attr_rep
            and self._filter == other._filter
            and self._sub_attr_name == other._sub_attr_name
        )

    def __hash__(self):
        return hash((self._attr_rep, self._sub_attr_name))


VALUE_PATH = AttrPath(AttrRep(attr="value"))
