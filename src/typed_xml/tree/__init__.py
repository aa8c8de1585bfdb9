"""Tree values for typed XML decoding and encoding.

Key Components:
    Element: XML element with ordered attribute pairs and children
    Text: Character data leaf
    XmlValue: Union of the two variants
    from_lxml / to_lxml: Conversion to and from lxml trees
"""

from .convert import from_lxml, to_lxml
from .model import (
    Element,
    Text,
    UnsupportedNodeError,
    XmlValue,
    is_element,
    is_text,
)

__all__ = [
    "Element",
    "Text",
    "UnsupportedNodeError",
    "XmlValue",
    "from_lxml",
    "is_element",
    "is_text",
    "to_lxml",
]
