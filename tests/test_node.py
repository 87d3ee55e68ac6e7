from dataclasses import dataclass
from typing import Any

import pytest

from nmode.errors import NMODEError
from nmode.geometry import P3D
from nmode.node import Node
from nmode.parsing import ElementKind, ParseAttribute, ParseElement


@dataclass(eq=False)
class FakeEdge:
    source_node: Any
    destination_node: Any
    weight: float = 1.0


def element(kind, name, **attributes):
    e = ParseElement(kind, name)
    for key, value in attributes.items():
        e.add(ParseAttribute(key, value))
    return e


def make(node_type, label):
    n = Node()
    n.set_type(node_type)
    n.label = label
    return n


def test_parse_inactive_flag():
    n = Node()
    n.add(element(ElementKind.OPENING, "node", type="sensor", label="s", inactive="true"))
    assert n.inactive is True
    assert n.is_source and not n.is_destination


@pytest.mark.parametrize(
    "node_type,source,destination",
    [
        ("sensor", True, False),
        ("actuator", True, True),
        ("input", True, False),
        ("output", False, True),
        ("hidden", True, True),
        ("connector", True, True),
    ],
)
def test_set_type_roles(node_type, source, destination):
    n = Node()
    n.set_type(node_type)
    assert n.type == node_type
    assert n.is_source is source
    assert n.is_destination is destination


def test_unknown_type_raises():
    n = Node()
    with pytest.raises(NMODEError, match="bogus"):
        n.set_type("bogus")
    with pytest.raises(NMODEError):
        n.type = "neuron"


def test_contains_and_remove_edge():
    src = make("sensor", "s")
    dst = make("actuator", "a")
    edge = FakeEdge(src, dst)
    dst.add_edge(edge)
    assert dst.contains(src)
    assert not dst.contains(dst)
    assert dst.remove_edge(edge) is True
    assert dst.remove_edge(edge) is False
    assert not dst.contains(src)
    assert dst.edges == []


def test_remove_edge_from_uses_label():
    src = make("sensor", "s")
    other = make("sensor", "t")
    dst = make("hidden", "h")
    e1 = FakeEdge(src, dst)
    e2 = FakeEdge(other, dst)
    e3 = FakeEdge(src, dst)
    for e in (e1, e2, e3):
        dst.add_edge(e)
    twin = make("sensor", "s")
    dst.remove_edge_from(twin)
    assert dst.edges == [e2, e3]


def test_copy_is_equal_without_edges():
    n = make("hidden", "h1")
    n.position = P3D(1, 2, 3)
    n.bias = -0.5
    n.transferfunction = "sigm"
    n.module_name = "m"
    n.node_name = "n"
    n.inactive = True
    n.add_edge(FakeEdge(make("sensor", "s"), n))
    c = n.copy()
    assert c is not n
    assert c.equal(n)
    assert c == n
    assert c.edges == []
    c.position.x = 9
    assert n.position.x == 1


def test_equal_detects_differences():
    a = make("hidden", "h")
    b = a.copy()
    b.bias = a.bias + 1.0
    assert not a.equal(b)
    assert a == b
    b.label = "other"
    assert a != b


def test_to_xml_round_trip():
    n = make("output", "o")
    n.position = P3D(1, 0, -2)
    n.transferfunction = "id"
    n.bias = 0.5
    xml = n.to_xml()
    assert '<node type="output" label="o">' in xml
    assert '<position x="1" y="0" z="-2"/>' in xml
    assert '<transferfunction name="id"/>' in xml
    assert '<bias value="0.5"/>' in xml
    assert xml.rstrip().endswith("</node>")