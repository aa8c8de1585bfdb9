"""Typed XML.

Decoder combinators that turn a parsed XML tree into application values with
contextual error reports, and the dual encoders that build and serialize XML
trees.

Progressive API Disclosure:
- Level 1: Functions - decode_string(), decode_value(), encode_string()
- Level 2: Configured codec - Codec class with CodecConfig
"""

__version__ = "0.1.0"
__author__ = "Typed XML Team"

from . import decode, encode
from .api import Codec
from .backend import XmlParseError, XmlParser, XmlSerializer
from .decode import (
    ChildErrorPolicy,
    DecodeError,
    Decoder,
    ErrorKind,
    decode_string,
    decode_value,
    render,
)
from .encode import encode_string
from .shared import (
    CodecConfig,
    DecodeFailure,
    Err,
    ErrorRenderConfig,
    Ok,
    ParserConfig,
    SerializerConfig,
)
from .tree import Element, Text, UnsupportedNodeError, XmlValue

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: combinator namespaces and entry points
    "decode",
    "encode",
    "decode_string",
    "decode_value",
    "encode_string",
    "render",

    # Level 2: configured codec
    "Codec",
    "CodecConfig",
    "ErrorRenderConfig",
    "ParserConfig",
    "SerializerConfig",

    # Values and errors
    "ChildErrorPolicy",
    "DecodeError",
    "DecodeFailure",
    "Decoder",
    "Element",
    "Err",
    "ErrorKind",
    "Ok",
    "Text",
    "UnsupportedNodeError",
    "XmlParseError",
    "XmlParser",
    "XmlSerializer",
    "XmlValue",
]
