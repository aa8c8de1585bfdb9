"""Encoders building tree values from application data.

An encoder is any callable turning a value into an ``XmlValue``. ``tag`` and
``data`` build the nodes; ``encode_string`` runs an encoder and serializes the
result.

Example:
    >>> def item(i):
    ...     return tag("item", [data(i["name"])], attrs=[("id", i["id"])])
    >>> encode_string(item, {"id": "1", "name": "Pen"})
    '<item id="1">Pen</item>'
"""

from typing import Callable, Iterable, Optional, Tuple, TypeVar

from typed_xml.backend import XmlSerializer
from typed_xml.shared import get_logger
from typed_xml.tree import Element, Text, XmlValue

T = TypeVar("T")

Encoder = Callable[[T], XmlValue]


def tag(
    name: str,
    children: Iterable[XmlValue] = (),
    attrs: Iterable[Tuple[str, str]] = (),
) -> Element:
    """Build an element; a ``prefix:local`` name keeps its prefix when serialized.

    Attributes are set in order; a repeated name overwrites the earlier value
    and keeps its original position.

    Args:
        name: Tag name
        children: Child values, appended in order
        attrs: ``(name, value)`` pairs

    Returns:
        The new Element
    """
    store = {}
    for key, value in attrs:
        store[key] = value
    return Element(name, tuple(store.items()), tuple(children))


def data(string: str) -> Text:
    """Build a text node; escaping is left to the serializer."""
    return Text(string)


def value(x: XmlValue) -> XmlValue:
    """Identity encoder for values that already are tree values."""
    return x


def encode_string(
    encoder: Encoder,
    v: T,
    serializer: Optional[XmlSerializer] = None,
    correlation_id: Optional[str] = None,
) -> str:
    """Encode ``v`` and serialize the resulting tree to markup.

    Args:
        encoder: Callable producing a tree value
        v: Value to encode
        serializer: Serializer collaborator; a default ``XmlSerializer`` is
            built when omitted
        correlation_id: Optional correlation ID for request tracking

    Returns:
        The serialized markup
    """
    logger = get_logger(__name__, correlation_id, "encode_string")
    serializer = serializer or XmlSerializer()
    node = encoder(v)
    text = serializer.serialize(node)
    logger.debug(
        "Encoded value",
        extra={"root": getattr(node, "tag", "#text"), "output_length": len(text)},
    )
    return text
