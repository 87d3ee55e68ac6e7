"""Building blocks of the XML schema that describes configurations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

TAG_XSD_UNBOUNDED = "unbounded"


class XsdNodeType(Enum):
    ELEMENT = "element"
    ATTRIBUTE = "attribute"
    CHOICE = "choice"


def _occurs(value: int | str | None) -> str | None:
    """Normalise an occurrence bound; None or an empty string means not given."""
    if value is None:
        return None
    text = str(value)
    return text if text else None


@dataclass
class XsdAttribute:
    """An attribute of a schema element."""

    name: str = ""
    type: str = ""
    required: bool = True

    @property
    def node_type(self) -> XsdNodeType:
        return XsdNodeType.ATTRIBUTE


class XsdElement:
    """A schema element with optional occurrence bounds and attributes.

    An integer ``min_occurs`` without ``max_occurs`` makes the maximum
    ``unbounded``; a missing or empty bound otherwise stays not given.
    """

    node_type = XsdNodeType.ELEMENT

    def __init__(
        self,
        name: str = "",
        type: str = "",
        min_occurs: int | str | None = None,
        max_occurs: int | str | None = None,
    ) -> None:
        self.name = name
        self.type = type
        self.attributes: list[XsdAttribute] = []
        self.min_occurs = _occurs(min_occurs)
        if max_occurs is None and isinstance(min_occurs, int):
            self.max_occurs: str | None = TAG_XSD_UNBOUNDED
        else:
            self.max_occurs = _occurs(max_occurs)

    @property
    def min_occurs_given(self) -> bool:
        return self.min_occurs is not None

    @property
    def max_occurs_given(self) -> bool:
        return self.max_occurs is not None

    def set_min_occurs(self, value: int | str) -> None:
        self.min_occurs = str(value)

    def set_max_occurs(self, value: int | str) -> None:
        self.max_occurs = str(value)

    def add(self, attribute: XsdAttribute) -> None:
        self.attributes.append(attribute)

    def __repr__(self) -> str:
        return (
            f"XsdElement(name={self.name!r}, type={self.type!r}, "
            f"min_occurs={self.min_occurs!r}, max_occurs={self.max_occurs!r})"
        )


@dataclass
class XsdChoice:
    """A choice between elements, with its own attributes and sequences."""

    name: str
    min_occurs: str | None = None
    max_occurs: str | None = None
    elements: list[XsdElement] = field(default_factory=list)
    attributes: list[XsdAttribute] = field(default_factory=list)
    sequences: list[Any] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.min_occurs is not None:
            self.min_occurs = str(self.min_occurs)
        if self.max_occurs is not None:
            self.max_occurs = str(self.max_occurs)

    @property
    def node_type(self) -> XsdNodeType:
        return XsdNodeType.CHOICE

    @property
    def min_occurs_given(self) -> bool:
        return self.min_occurs is not None

    @property
    def max_occurs_given(self) -> bool:
        return self.max_occurs is not None

    def add(self, item: Any) -> None:
        """Add an element, an attribute, a list of elements, or a sequence."""
        if isinstance(item, XsdElement):
            self.elements.append(item)
        elif isinstance(item, XsdAttribute):
            self.attributes.append(item)
        elif isinstance(item, (list, tuple)):
            for element in item:
                self.add(element)
        else:
            self.sequences.append(item)

    def set_min_occurs(self, value: int | str) -> None:
        self.min_occurs = str(value)

    def set_max_occurs(self, value: int | str) -> None:
        self.max_occurs = str(value)