"""Tests for the document model."""

from toyparse import ElementNode, TextNode, parse_html
from toyparse.node import element, text


class TestConstructors:
    def test_text_factory(self):
        node = text("hello")
        assert isinstance(node, TextNode)
        assert node.data == "hello"
        assert node.name == "#text"
        assert node.children == []
        assert not node.has_child_nodes()

    def test_element_factory(self):
        child = text("x")
        node = element("div", {"id": "a"}, [child])
        assert isinstance(node, ElementNode)
        assert node.name == "div"
        assert node.attrs == {"id": "a"}
        assert node.children == [child]
        assert node.has_child_nodes()


class TestEquality:
    def test_structural_equality(self):
        assert element("p", {"a": "1", "b": "2"}, [text("x")]) == element("p", {"b": "2", "a": "1"}, [text("x")])

    def test_variants_are_never_equal(self):
        assert TextNode("p") != ElementNode("p")

    def test_child_order_matters(self):
        assert element("p", {}, [text("a"), text("b")]) != element("p", {}, [text("b"), text("a")])

    def test_nodes_are_unhashable(self):
        assert TextNode.__hash__ is None
        assert ElementNode.__hash__ is None


class TestAccessors:
    def test_id_and_classes(self):
        node = parse_html('<div id="main" class="note  wide"></div>')
        assert node.id == "main"
        assert node.classes() == {"note", "wide"}

    def test_missing_id_and_classes(self):
        node = ElementNode("div")
        assert node.id is None
        assert node.classes() == set()

    def test_to_text(self):
        node = parse_html("<div><p>Hello </p><p>World</p></div>")
        assert node.to_text() == "Hello World"
        assert node.to_text(separator="", strip=False) == "Hello World"

    def test_text_node_to_text(self):
        assert TextNode("  x ").to_text() == "x"
        assert TextNode("  x ").to_text(strip=False) == "  x "
