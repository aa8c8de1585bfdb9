"""Configured codec object bundling the collaborators and render settings.

The module-level functions in ``typed_xml.decode`` and ``typed_xml.encode``
build default collaborators per call. ``Codec`` builds them once from a
``CodecConfig`` and reuses them for every call it serves.
"""

from typing import Any, Optional, Union

from typed_xml.backend import XmlParser, XmlSerializer
from typed_xml.decode import Decoder, DecodeError, DecodeResult, decode_string, decode_value, render
from typed_xml.encode import Encoder, encode_string
from typed_xml.shared import CodecConfig, get_logger, level_from_name
from typed_xml.tree import XmlValue


class Codec:
    """Decode and encode XML with one configuration.

    Attributes:
        config: Current codec configuration
        correlation_id: Correlation ID attached to every log record

    Examples:
        >>> from typed_xml.decode import attr
        >>> codec = Codec(CodecConfig.lenient())
        >>> codec.decode_string(attr("id"), '<item id="7">')
        Ok(value='7')
    """

    def __init__(
        self,
        config: Optional[CodecConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize the codec.

        Args:
            config: Codec configuration (defaults to ``CodecConfig()``)
            correlation_id: Optional correlation ID, overriding the config's
        """
        self.config = config or CodecConfig()
        self.correlation_id = correlation_id or self.config.correlation_id
        self.logger = get_logger(__name__, self.correlation_id, "codec")
        self._build_collaborators()

    def _build_collaborators(self) -> None:
        self.parser = XmlParser(self.config.parser)
        self.serializer = XmlSerializer(self.config.serializer)
        self._diagnostic_level = level_from_name(self.config.diagnostic_level)

    def decode_value(self, decoder: Decoder, value: XmlValue) -> DecodeResult:
        result = decode_value(decoder, value)
        self._report(result)
        return result

    def decode_string(self, decoder: Decoder, text: Union[str, bytes]) -> DecodeResult:
        """Parse ``text`` with the configured parser and decode its root."""
        result = decode_string(decoder, text, self.parser, self.correlation_id)
        self._report(result)
        return result

    def encode_string(self, encoder: Encoder, v: Any) -> str:
        """Encode ``v`` and serialize it with the configured serializer."""
        return encode_string(encoder, v, self.serializer, self.correlation_id)

    def render_error(self, error: DecodeError) -> str:
        """Render ``error`` with the configured settings and serializer."""
        return render(error, self.config.rendering, self.serializer)

    def reconfigure(self, **overrides: Any) -> None:
        """Apply ``CodecConfig.override`` keywords and rebuild collaborators.

        Example:
            >>> codec = Codec()
            >>> codec.reconfigure(parser__recover=True, rendering__indent=4)
        """
        self.config = self.config.override(**overrides)
        self._build_collaborators()
        self.logger.info(
            "Codec reconfigured",
            extra={"overrides": sorted(overrides)}
        )

    def _report(self, result: DecodeResult) -> None:
        if result.success or not self.logger.is_enabled_for(self._diagnostic_level):
            return
        self.logger.log(
            self._diagnostic_level,
            "Decode failed:\n" + self.render_error(result.error),
        )
