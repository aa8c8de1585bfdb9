"""Parser and serializer collaborators backed by lxml.

Both classes are cheap to construct and hold no per-document state. Entry
points accept an instance to use and build a fresh one when none is given;
there is no module-level parser or serializer.
"""

from typing import Optional, Union
from xml.sax.saxutils import escape

from lxml import etree

from typed_xml.shared import ParserConfig, SerializerConfig
from typed_xml.tree import Element, Text, XmlValue, from_lxml, to_lxml


class XmlParseError(Exception):
    """Raised by ``XmlParser.parse`` when no tree can be produced."""

    def __init__(self, message: str, line: Optional[int] = None,
                 column: Optional[int] = None) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


class XmlParser:
    """Parse markup text into an ``Element`` rooted at the document element."""

    def __init__(self, config: Optional[ParserConfig] = None) -> None:
        self.config = config or ParserConfig()

    def _lxml_parser(self) -> etree.XMLParser:
        return etree.XMLParser(
            encoding="utf-8",
            remove_comments=False,
            remove_pis=self.config.remove_pis,
            resolve_entities=self.config.resolve_entities,
            no_network=self.config.no_network,
            huge_tree=self.config.huge_tree,
            recover=self.config.recover,
        )

    def parse(self, text: Union[str, bytes]) -> Element:
        """Parse ``text`` and return its document element.

        ``str`` input is encoded to UTF-8 and parsed with the encoding
        overridden, so an XML declaration naming another encoding is
        accepted. Comments and the prolog are not part of the result.

        Args:
            text: Markup as text or UTF-8 bytes

        Returns:
            The root Element

        Raises:
            XmlParseError: On malformed markup, empty documents, or input
                above ``max_input_bytes``
            UnsupportedNodeError: If the document holds processing
                instructions or entity references that the config keeps
        """
        raw = text.encode("utf-8") if isinstance(text, str) else text
        if not raw.strip():
            raise XmlParseError("Document is empty")
        limit = self.config.max_input_bytes
        if limit is not None and len(raw) > limit:
            raise XmlParseError(
                f"Input of {len(raw)} bytes exceeds the limit of {limit} bytes"
            )

        try:
            root = etree.fromstring(raw, self._lxml_parser())
        except etree.XMLSyntaxError as e:
            line, column = e.position if e.position else (None, None)
            raise XmlParseError(str(e), line, column) from e
        if root is None:
            raise XmlParseError("Document is empty")
        return from_lxml(root)


class XmlSerializer:
    """Serialize tree values back to markup text."""

    def __init__(self, config: Optional[SerializerConfig] = None) -> None:
        self.config = config or SerializerConfig()

    def serialize(self, value: XmlValue) -> str:
        """Return the markup for ``value``.

        Escaping and quoting are left to lxml; a bare Text value only needs
        ``&``, ``<`` and ``>`` escaped.

        Raises:
            ValueError: If lxml rejects a tag or attribute name
        """
        if isinstance(value, Text):
            return escape(value.content)
        if not isinstance(value, Element):
            raise TypeError(f"Cannot serialize {type(value).__name__}")
        return etree.tostring(
            to_lxml(value),
            encoding="unicode",
            pretty_print=self.config.pretty_print,
        )
