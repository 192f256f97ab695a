"""Tests for XPath addressing and character position resolution."""

import pytest
from lxml import etree

from xmldelta.tree import (
    DOMLocator,
    Element,
    NodeLocator,
    Text,
    from_lxml,
    xpath_child_number,
)


class TestDOMLocator:
    """Test DOMLocator paths and character positions."""

    def setup_method(self) -> None:
        """Set up test fixtures."""
        self.locator = DOMLocator()
        self.document = from_lxml(etree.fromstring(
            '<root id="r">hello<b><c/></b>tail<!--note--><?app run?></root>'
        ))
        self.root = self.document.root

    def test_satisfies_locator_protocol(self) -> None:
        """Test DOMLocator is a NodeLocator."""
        assert isinstance(self.locator, NodeLocator)

    def test_root_path(self) -> None:
        """Test the document element is the first document child."""
        assert self.locator.get_xpath(self.root) == "/node()[1]"

    def test_child_paths_count_all_node_kinds(self) -> None:
        """Test text, comment and PI siblings are counted."""
        paths = [self.locator.get_xpath(child) for child in self.root.children]

        assert paths == [
            "/node()[1]/node()[1]",
            "/node()[1]/node()[2]",
            "/node()[1]/node()[3]",
            "/node()[1]/node()[4]",
            "/node()[1]/node()[5]",
        ]

    def test_nested_path(self) -> None:
        """Test paths of nested elements."""
        c = self.root.children[1].children[0]

        assert self.locator.get_xpath(c) == "/node()[1]/node()[2]/node()[1]"

    def test_attribute_path(self) -> None:
        """Test attributes are addressed with an @ step."""
        attribute = self.root.attributes.get("id")

        assert self.locator.get_xpath(attribute) == "/node()[1]/@id"

    def test_unowned_attribute_raises_error(self) -> None:
        """Test attributes without an element cannot be addressed."""
        attribute = self.root.attributes.get("id")
        self.root.attributes.remove("id")

        with pytest.raises(ValueError, match="not owned by an element"):
            self.locator.get_xpath(attribute)

    def test_document_path(self) -> None:
        """Test the document itself is addressed as the root path."""
        assert self.locator.get_xpath(self.document) == "/"

    def test_root_after_top_level_comment(self) -> None:
        """Test top-level siblings shift the root element position."""
        document = from_lxml(etree.fromstring("<!--top--><root/>"))

        assert self.locator.get_xpath(document.root) == "/node()[2]"

    def test_detached_element_is_first_document_child(self) -> None:
        """Test standalone elements are addressed as a document element."""
        element = Element("item", children=[Element("a"), Element("b")])

        assert self.locator.get_xpath(element) == "/node()[1]"
        assert self.locator.get_xpath(element.children[1]) == "/node()[1]/node()[2]"

    def test_non_text_nodes_start_at_position_one(self) -> None:
        """Test character positions of non-text nodes."""
        assert self.locator.resolve_char_position(self.root) == 1
        assert self.locator.resolve_char_position(self.root.attributes.get("id")) == 1

    def test_single_text_node_position(self) -> None:
        """Test a lone text node starts at position 1."""
        assert self.locator.resolve_char_position(self.root.children[0]) == 1

    def test_detached_text_is_unresolvable(self) -> None:
        """Test a text node without a parent resolves to the sentinel 0."""
        assert self.locator.resolve_char_position(Text("orphan")) == 0


class TestSplitTextNodes:
    """Test addressing of adjacent text siblings."""

    def setup_method(self) -> None:
        """Set up test fixtures."""
        self.locator = DOMLocator()
        self.root = Element("root")
        self.first = self.root.append(Text("abc"))
        self.second = self.root.append(Text("de"))
        self.element = self.root.append(Element("b"))
        self.third = self.root.append(Text("fgh"))

    def test_adjacent_text_nodes_share_child_number(self) -> None:
        """Test a text run occupies a single XPath position."""
        assert xpath_child_number(self.first) == 1
        assert xpath_child_number(self.second) == 1
        assert xpath_child_number(self.element) == 2
        assert xpath_child_number(self.third) == 3
        assert self.locator.get_xpath(self.second) == "/node()[1]/node()[1]"

    def test_char_position_within_run(self) -> None:
        """Test offsets accumulate across a text run and reset after it."""
        assert self.locator.resolve_char_position(self.first) == 1
        assert self.locator.resolve_char_position(self.second) == 4
        assert self.locator.resolve_char_position(self.third) == 1

    def test_child_number_of_foreign_node_raises_error(self) -> None:
        """Test nodes missing from their parent's children are rejected."""
        stray = Text("stray")
        stray.parent = self.root

        with pytest.raises(ValueError, match="not a child of its parent"):
            xpath_child_number(stray)
        assert self.locator.resolve_char_position(stray) == 0
