"""Elements and attributes handed from the XML reader to the data model."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass
class ParseAttribute:
    """An attribute of an XML element; its value is kept as text."""

    name: str = ""
    value: str = ""

    def int_value(self) -> int:
        """Leading integer of the value, or 0 if there is none."""
        match = _INT.match(self.value)
        return int(match.group(1)) if match else 0

    def real_value(self) -> float:
        """Leading number of the value, or 0.0 if there is none."""
        match = _FLOAT.match(self.value)
        return float(match.group(1)) if match else 0.0

    def bool_value(self) -> bool:
        """True only if the value is exactly ``true``."""
        return self.value == "true"


class ElementKind(Enum):
    OPENING = 2001
    CLOSING = 2002


@dataclass
class ParseElement:
    """An opening or closing XML tag with its attributes."""

    kind: ElementKind
    name: str = ""
    attributes: list[ParseAttribute] = field(default_factory=list)

    def add(self, attribute: ParseAttribute) -> None:
        self.attributes.append(attribute)

    def attribute(self, name: str) -> ParseAttribute | None:
        """Return the first attribute with this name, or None."""
        return next((a for a in self.attributes if a.name == name), None)

    def has_attribute(self, name: str) -> bool:
        return self.attribute(name) is not None

    def opening(self, name: str) -> bool:
        return self.name == name and self.kind is ElementKind.OPENING

    def closing(self, name: str) -> bool:
        return self.name == name and self.kind is ElementKind.CLOSING

    def get_str(self, name: str, default: str = "") -> str:
        attribute = self.attribute(name)
        return default if attribute is None else attribute.value

    def get_float(self, name: str, default: float = 0.0) -> float:
        attribute = self.attribute(name)
        return default if attribute is None else attribute.real_value()

    def get_int(self, name: str, default: int = 0) -> int:
        attribute = self.attribute(name)
        return default if attribute is None else attribute.int_value()

    def get_bool(self, name: str, default: bool = False) -> bool:
        attribute = self.attribute(name)
        return default if attribute is None else attribute.bool_value()

    def __iter__(self) -> Iterator[ParseAttribute]:
        return iter(self.attributes)

    def __len__(self) -> int:
        return len(self.attributes)

    def __str__(self) -> str:
        return f"{self.name}: {self.kind.value}"