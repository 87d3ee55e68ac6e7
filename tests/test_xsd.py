from nmode.xsd import (
    TAG_XSD_UNBOUNDED,
    XsdAttribute,
    XsdChoice,
    XsdElement,
    XsdNodeType,
)


def test_attribute_defaults():
    a = XsdAttribute()
    assert a.name == ""
    assert a.type == ""
    assert a.required is True
    assert a.node_type is XsdNodeType.ATTRIBUTE


def test_attribute_values():
    a = XsdAttribute("label", "xs:string", False)
    assert (a.name, a.type, a.required) == ("label", "xs:string", False)


def test_element_without_bounds():
    e = XsdElement()
    assert e.name == ""
    assert not e.min_occurs_given
    assert not e.max_occurs_given
    assert e.node_type is XsdNodeType.ELEMENT


def test_element_int_min_only_is_unbounded():
    e = XsdElement("individual", "individual_definition", 1)
    assert e.min_occurs == "1"
    assert e.max_occurs == TAG_XSD_UNBOUNDED
    assert e.max_occurs == "unbounded"
    assert e.max_occurs_given


def test_element_int_bounds_become_strings():
    e = XsdElement("simulator", "simulator_definition", 0, 1)
    assert e.min_occurs == "0"
    assert e.max_occurs == "1"


def test_element_empty_string_bounds_not_given():
    e = XsdElement("a", "b", "", "")
    assert not e.min_occurs_given
    assert not e.max_occurs_given


def test_element_int_min_with_string_max():
    e = XsdElement("a", "b", 2, "unbounded")
    assert e.min_occurs == "2"
    assert e.max_occurs == "unbounded"


def test_element_setters_and_attributes():
    e = XsdElement("a", "b")
    e.set_min_occurs(3)
    e.set_max_occurs("7")
    e.add(XsdAttribute("x", "xs:decimal", True))
    assert e.min_occurs == "3"
    assert e.max_occurs == "7"
    assert [a.name for a in e.attributes] == ["x"]


def test_choice_bounds():
    c = XsdChoice("c")
    assert not c.min_occurs_given and not c.max_occurs_given
    c2 = XsdChoice("c", 0, 4)
    assert (c2.min_occurs, c2.max_occurs) == ("0", "4")
    assert c2.node_type is XsdNodeType.CHOICE


def test_choice_empty_string_bounds_are_given():
    c = XsdChoice("c", "", "")
    assert c.min_occurs_given and c.max_occurs_given


def test_choice_add_dispatches_by_kind():
    c = XsdChoice("c")
    e1 = XsdElement("one", "t")
    e2 = XsdElement("two", "t")
    e3 = XsdElement("three", "t")
    attribute = XsdAttribute("name", "xs:string", True)
    sequence = object()
    c.add(e1)
    c.add([e2, e3])
    c.add(attribute)
    c.add(sequence)
    assert [e.name for e in c.elements] == ["one", "two", "three"]
    assert c.attributes == [attribute]
    assert c.sequences == [sequence]


def test_choice_setters():
    c = XsdChoice("c")
    c.set_min_occurs(1)
    c.set_max_occurs("unbounded")
    assert c.min_occurs == "1"
    assert c.max_occurs == "unbounded"