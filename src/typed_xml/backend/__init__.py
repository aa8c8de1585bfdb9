"""lxml-backed parser and serializer collaborators."""

from .collaborators import XmlParseError, XmlParser, XmlSerializer

__all__ = [
    "XmlParseError",
    "XmlParser",
    "XmlSerializer",
]
