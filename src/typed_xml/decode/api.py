"""Entry points applying decoders to tree values or raw markup."""

from typing import Optional, Union

from typed_xml.backend import XmlParseError, XmlParser
from typed_xml.shared import Err, Ok, get_logger
from typed_xml.tree import XmlValue

from . import errors
from .decoders import Decoder, DecodeResult
from .errors import ErrorKind

PARSE_ERROR_LABEL = "Parse error"


def of_string(text: Union[str, bytes], parser: Optional[XmlParser] = None) -> DecodeResult:
    """Parse markup into its root Element.

    Args:
        text: Markup to parse
        parser: Parser collaborator; a default ``XmlParser`` is built when omitted

    Returns:
        ``Ok(root)`` or an ``Err`` tagged ``Parse error`` holding the parser's
        diagnostic
    """
    parser = parser or XmlParser()
    try:
        return Ok(parser.parse(text))
    except XmlParseError as e:
        return Err(errors.tag(
            PARSE_ERROR_LABEL,
            errors.make(str(e), ErrorKind.PARSE_FAILURE),
            ErrorKind.PARSE_FAILURE,
        ))


def decode_value(decoder: Decoder, value: XmlValue) -> DecodeResult:
    """Apply ``decoder`` to an already constructed tree value."""
    return decoder(value)


def decode_string(
    decoder: Decoder,
    text: Union[str, bytes],
    parser: Optional[XmlParser] = None,
    correlation_id: Optional[str] = None,
) -> DecodeResult:
    """Parse ``text`` and apply ``decoder`` to its root element.

    Parsing happens once and is not retried. Malformed markup produces a
    ``Parse error`` failure rather than an exception.

    Args:
        decoder: Decoder for the root element
        text: Markup to parse
        parser: Parser collaborator; a default ``XmlParser`` is built when omitted
        correlation_id: Optional correlation ID for request tracking

    Returns:
        The decoder's result, or the parse failure

    Examples:
        >>> from typed_xml.decode.decoders import attr
        >>> decode_string(attr("id"), '<item id="7"/>')
        Ok(value='7')
    """
    logger = get_logger(__name__, correlation_id, "decode_string")
    logger.debug(
        "Decoding markup",
        extra={"decoder": getattr(decoder, "name", repr(decoder)), "input_length": len(text)},
    )

    root = of_string(text, parser)
    if not root.success:
        logger.warning(
            "Markup could not be parsed",
            extra={"diagnostic": errors.root_causes(root.error)[0].message},
        )
        return root

    result = decode_value(decoder, root.value)
    if not result.success:
        logger.debug(
            "Decoding failed",
            extra={"root_causes": len(errors.root_causes(result.error))},
        )
    return result
