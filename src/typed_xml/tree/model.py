"""Immutable XML tree values handed to decoders and built by encoders.

A tree value is either an ``Element`` (tag name, ordered attribute pairs,
ordered children) or a ``Text`` leaf. Comment nodes never appear: they are
discarded while a parsed document is converted into tree values.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union


class UnsupportedNodeError(TypeError):
    """Raised for a source node that is neither element, text nor comment.

    This is a contract violation of the tree collaborator, not a decode
    failure, so it is raised rather than returned.
    """

    def __init__(self, node_kind: str) -> None:
        super().__init__(f"Unexpected node type {node_kind}")
        self.node_kind = node_kind


@dataclass(frozen=True)
class Text:
    """Character data leaf."""

    content: str


@dataclass(frozen=True)
class Element:
    """XML element with raw attribute pairs and ordered children.

    Attribute names are not required to be unique; lookups return the first
    matching pair.
    """

    tag: str
    attributes: Tuple[Tuple[str, str], ...] = ()
    children: Tuple["XmlValue", ...] = ()

    def __post_init__(self) -> None:
        """Validate the tag name and freeze list arguments into tuples."""
        if not self.tag:
            raise ValueError("Element tag cannot be empty")
        # Accept lists from callers while keeping the value hashable
        object.__setattr__(
            self, "attributes", tuple((str(k), str(v)) for k, v in self.attributes)
        )
        object.__setattr__(self, "children", tuple(self.children))
        for child in self.children:
            if not isinstance(child, (Element, Text)):
                raise TypeError(
                    f"Child must be an Element or Text, got {type(child).__name__}"
                )

    def get_attribute(self, name: str) -> Optional[str]:
        """Return the value of attribute ``name``, or None when absent."""
        for key, value in self.attributes:
            if key == name:
                return value
        return None

    @property
    def attribute_names(self) -> List[str]:
        return [key for key, _ in self.attributes]

    def iter_elements(self) -> Iterator["Element"]:
        """Yield the direct Element children, skipping Text."""
        for child in self.children:
            if isinstance(child, Element):
                yield child


XmlValue = Union[Element, Text]


def is_element(value: XmlValue) -> bool:
    return isinstance(value, Element)


def is_text(value: XmlValue) -> bool:
    return isinstance(value, Text)
