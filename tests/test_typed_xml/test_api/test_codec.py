"""Tests for the configured Codec entry point."""

import logging

from typed_xml import Codec, CodecConfig
from typed_xml.decode import decoders as D
from typed_xml.decode.errors import ErrorKind
from typed_xml.encode import data, tag
from typed_xml.shared import ErrorRenderConfig, Ok
from typed_xml.tree import Element


class TestCodec:
    """Test Level 2: configured codec."""

    def test_default_configuration(self) -> None:
        codec = Codec()

        assert codec.config == CodecConfig()
        assert codec.parser.config == codec.config.parser
        assert codec.serializer.config == codec.config.serializer

    def test_correlation_id_from_config_or_argument(self) -> None:
        assert Codec(CodecConfig(correlation_id="cfg")).correlation_id == "cfg"
        assert Codec(CodecConfig(correlation_id="cfg"), "arg").correlation_id == "arg"

    def test_decode_string_and_value(self) -> None:
        codec = Codec()

        assert codec.decode_string(D.attr("id"), '<a id="1"/>') == Ok("1")
        assert codec.decode_value(D.any_tag, Element("b")) == Ok("b")

    def test_strict_codec_reports_parse_failure(self) -> None:
        result = Codec(CodecConfig.strict()).decode_string(D.any_tag, '<item id="7">')

        assert result.error.kind is ErrorKind.PARSE_FAILURE

    def test_lenient_codec_recovers(self) -> None:
        result = Codec(CodecConfig.lenient()).decode_string(D.attr("id"), '<item id="7">')

        assert result == Ok("7")

    def test_encode_string_uses_configured_serializer(self) -> None:
        codec = Codec(CodecConfig().override(serializer__pretty_print=True))

        assert codec.encode_string(lambda s: tag("a", [tag("b", [data(s)])]), "x") == (
            "<a>\n  <b>x</b>\n</a>\n"
        )

    def test_render_error_uses_configured_settings(self) -> None:
        codec = Codec(CodecConfig(rendering=ErrorRenderConfig(indent=1)))
        result = codec.decode_string(D.children(D.any_tag), "<r>text</r>")

        assert codec.render_error(result.error) == (
            "Expected a Tag, but got text\n"
            " While decoding child 0\n"
            "  In tag r"
        )

    def test_reconfigure_rebuilds_collaborators(self) -> None:
        codec = Codec()
        codec.reconfigure(parser__recover=True, rendering__indent=4)

        assert codec.parser.config.recover is True
        assert codec.config.rendering.indent == 4
        assert codec.decode_string(D.any_tag, "<a><b></a>") == Ok("a")

    def test_failures_logged_at_diagnostic_level(self, caplog) -> None:
        codec = Codec(CodecConfig(diagnostic_level="WARNING", correlation_id="req-2"))

        with caplog.at_level(logging.WARNING, logger="typed_xml.api"):
            codec.decode_value(D.attr("id"), Element("item"))

        record = next(r for r in caplog.records if r.name == "typed_xml.api.codec")
        assert record.levelno == logging.WARNING
        assert record.correlation_id == "req-2"
        assert 'Expected an attribute named "id", but got <item/>' in record.getMessage()

    def test_successes_are_not_logged(self, caplog) -> None:
        codec = Codec(CodecConfig(diagnostic_level="WARNING"))

        with caplog.at_level(logging.DEBUG, logger="typed_xml.api"):
            codec.decode_value(D.any_tag, Element("item"))

        assert not [r for r in caplog.records if r.name == "typed_xml.api.codec"]

    def test_prefixed_failure_is_logged(self, caplog) -> None:
        codec = Codec(CodecConfig(diagnostic_level="debug"))

        with caplog.at_level(logging.DEBUG, logger="typed_xml.api"):
            result = codec.decode_string(D.tag("x"), '<p:a xmlns:p="urn:u"/>')

        assert result.error.kind is ErrorKind.TAG_MISMATCH
        record = next(r for r in caplog.records if r.name == "typed_xml.api.codec")
        assert record.levelno == logging.DEBUG
        assert "but got <p:a " in record.getMessage()
