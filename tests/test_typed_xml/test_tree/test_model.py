"""Tests for the immutable tree value model."""

import pytest

from typed_xml.tree import Element, Text, is_element, is_text


class TestElement:
    """Test Element construction and accessors."""

    def test_element_creation_with_valid_data(self) -> None:
        """Test creating an Element with attributes and children."""
        element = Element("root", [("id", "1")], [Text("hi"), Element("child")])

        assert element.tag == "root"
        assert element.attributes == (("id", "1"),)
        assert element.children == (Text("hi"), Element("child"))

    def test_element_creation_with_empty_tag_raises_error(self) -> None:
        """Test that an empty tag raises ValueError."""
        with pytest.raises(ValueError, match="Element tag cannot be empty"):
            Element("")

    def test_element_with_invalid_child_raises_error(self) -> None:
        """Test that a child that is not a tree value is rejected."""
        with pytest.raises(TypeError, match="Child must be an Element or Text"):
            Element("root", children=["not a node"])  # type: ignore

    def test_get_attribute_returns_value_or_none(self) -> None:
        """Test attribute lookup for present and absent names."""
        element = Element("root", [("id", "1"), ("empty", "")])

        assert element.get_attribute("id") == "1"
        assert element.get_attribute("empty") == ""
        assert element.get_attribute("missing") is None

    def test_get_attribute_with_duplicates_returns_first(self) -> None:
        """Test that duplicate names resolve to the first pair."""
        element = Element("root", [("k", "first"), ("k", "second")])

        assert element.get_attribute("k") == "first"
        assert element.attribute_names == ["k", "k"]

    def test_attribute_names_preserve_order(self) -> None:
        """Test attribute names in document order."""
        element = Element("root", [("b", "2"), ("a", "1"), ("c", "3")])

        assert element.attribute_names == ["b", "a", "c"]

    def test_iter_elements_skips_text(self) -> None:
        """Test iterating over element children only."""
        a, b = Element("a"), Element("b")
        element = Element("root", children=[Text(" "), a, Text("x"), b])

        assert list(element.iter_elements()) == [a, b]

    def test_structural_equality_and_hashing(self) -> None:
        """Test that equal trees compare equal and hash alike."""
        first = Element("root", [("id", "1")], [Text("x")])
        second = Element("root", (("id", "1"),), (Text("x"),))

        assert first == second
        assert hash(first) == hash(second)
        assert first != Element("root", [("id", "2")], [Text("x")])

    def test_element_is_immutable(self) -> None:
        """Test that fields cannot be reassigned."""
        element = Element("root")

        with pytest.raises(AttributeError):
            element.tag = "other"  # type: ignore


class TestKindHelpers:
    """Test the variant helpers."""

    def test_is_element_and_is_text(self) -> None:
        assert is_element(Element("a"))
        assert not is_element(Text("a"))
        assert is_text(Text("a"))
        assert not is_text(Element("a"))
