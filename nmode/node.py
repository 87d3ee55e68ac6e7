"""Nodes of a network module: neurons as they appear in the configuration."""

from __future__ import annotations

import math
from typing import Any

from nmode.errors import NMODEError
from nmode.geometry import P3D
from nmode.parsing import ParseElement

TAG_MODULE_NODE = "node"
TAG_MODULE_NODE_DEFINITION = "module_node_definition"

TAG_ACTUATOR = "actuator"
TAG_SENSOR = "sensor"
TAG_INPUT = "input"
TAG_OUTPUT = "output"
TAG_HIDDEN = "hidden"
TAG_CONNECTOR = "connector"

TAG_TANH = "tanh"
TAG_SIGM = "sigm"
TAG_ID = "id"

NODE_TYPES = (TAG_SENSOR, TAG_ACTUATOR, TAG_INPUT, TAG_OUTPUT, TAG_HIDDEN, TAG_CONNECTOR)
TRANSFER_FUNCTIONS = (TAG_TANH, TAG_SIGM, TAG_ID)

_SOURCE_TYPES = frozenset({TAG_ACTUATOR, TAG_SENSOR, TAG_INPUT, TAG_HIDDEN, TAG_CONNECTOR})
_DESTINATION_TYPES = frozenset({TAG_ACTUATOR, TAG_OUTPUT, TAG_HIDDEN, TAG_CONNECTOR})
_BIAS_TOLERANCE = 0.000001


class Node:
    """A node of a module, with the edges that lead into it.

    Edges are any objects with ``source_node``, ``destination_node`` and
    ``weight`` attributes.
    """

    def __init__(self, parent: Any = None) -> None:
        self.parent = parent
        self.edges: list[Any] = []
        self.position = P3D()
        self.is_destination = False
        self.is_source = False
        self.inactive = False
        self.bias = 0.0
        self.label = ""
        self.module_name = ""
        self.node_name = ""
        self.transferfunction = ""
        self._type = ""

    @property
    def type(self) -> str:
        return self._type

    @type.setter
    def type(self, node_type: str) -> None:
        self.set_type(node_type)

    def _update_roles(self) -> None:
        if self._type in _SOURCE_TYPES:
            self.is_source = True
        if self._type in _DESTINATION_TYPES:
            self.is_destination = True

    def add(self, element: ParseElement) -> Any:
        """Take in one parsed element; return the node that handles the next one."""
        if element.closing(TAG_MODULE_NODE):
            return self.parent
        if element.opening(TAG_MODULE_NODE):
            self._type = element.get_str("type", self._type)
            self.label = element.get_str("label", self.label)
            self.inactive = element.get_bool("inactive", self.inactive)
            self._update_roles()
        if element.opening("position"):
            self.position = P3D(
                element.get_float("x", self.position.x),
                element.get_float("y", self.position.y),
                element.get_float("z", self.position.z),
            )
        if element.opening("transferfunction"):
            self.transferfunction = element.get_str("name", self.transferfunction)
        if element.opening("bias"):
            self.bias = element.get_float("value", self.bias)
        return self

    def set_type(self, node_type: str) -> None:
        """Set the node type; unknown types raise :class:`NMODEError`."""
        if node_type not in NODE_TYPES:
            raise NMODEError(f'Unknown node type "{node_type}" given')
        self._type = node_type
        self._update_roles()

    def contains(self, node: Node) -> bool:
        """Whether an incoming edge starts at ``node``."""
        return any(edge.source_node is node for edge in self.edges)

    def add_edge(self, edge: Any) -> None:
        self.edges.append(edge)

    def remove_edge(self, edge: Any) -> bool:
        """Remove this very edge; return whether it was present."""
        for index, candidate in enumerate(self.edges):
            if candidate is edge:
                del self.edges[index]
                return True
        return False

    def remove_edge_from(self, node: Node) -> None:
        """Remove the first incoming edge whose source carries ``node``'s label."""
        for edge in self.edges:
            if edge.source_node.label == node.label and self.remove_edge(edge):
                return

    def copy(self) -> Node:
        """Copy every property except the edges, which the caller must rebuild."""
        duplicate = Node()
        duplicate._type = self._type
        duplicate.label = self.label
        duplicate.position = P3D(self.position.x, self.position.y, self.position.z)
        duplicate.transferfunction = self.transferfunction
        duplicate.node_name = self.node_name
        duplicate.module_name = self.module_name
        duplicate.bias = self.bias
        duplicate.is_source = self.is_source
        duplicate.is_destination = self.is_destination
        duplicate.inactive = self.inactive
        return duplicate

    def equal(self, other: Node) -> bool:
        """Full comparison of every property, bias within a small tolerance."""
        return (
            math.fabs(self.bias - other.bias) < _BIAS_TOLERANCE
            and self.position == other.position
            and self.is_destination == other.is_destination
            and self.is_source == other.is_source
            and self.inactive == other.inactive
            and self.label == other.label
            and self.module_name == other.module_name
            and self.node_name == other.node_name
            and self.transferfunction == other.transferfunction
            and self._type == other._type
        )

    def __eq__(self, other: object) -> bool:
        """Equal when position, label, type and transfer function agree."""
        if not isinstance(other, Node):
            return NotImplemented
        return (
            self.position == other.position
            and self.label == other.label
            and self._type == other._type
            and self.transferfunction == other.transferfunction
        )

    # Nodes serve as identity keys when a network is built from them.
    __hash__ = object.__hash__

    def to_xml(self) -> str:
        """Render the node as an XML fragment."""
        p = self.position
        return (
            f'        <node type="{self._type}" label="{self.label}">\n'
            f'          <position x="{p.x:g}" y="{p.y:g}" z="{p.z:g}"/>\n'
            f'          <transferfunction name="{self.transferfunction}"/>\n'
            f'          <bias value="{self.bias:g}"/>\n'
            f"        </node>\n"
        )

    def __repr__(self) -> str:
        return f"Node(type={self._type!r}, label={self.label!r})"