"""Tests for the configuration system."""

import json

import pytest

from typed_xml.shared.config import (
    CodecConfig,
    ConfigError,
    ConfigValidationError,
    ErrorRenderConfig,
    ParserConfig,
    SerializerConfig,
)


class TestComponentConfigs:
    """Test suite for the component configurations."""

    def test_default_configuration(self):
        """Test default component values."""
        parser = ParserConfig()
        rendering = ErrorRenderConfig()

        assert parser.remove_pis is False
        assert parser.resolve_entities == "internal"
        assert parser.no_network is True
        assert parser.recover is False
        assert parser.max_input_bytes is None
        assert SerializerConfig().pretty_print is False
        assert rendering.indent == 2
        assert rendering.max_errors_shown == 5
        assert rendering.max_value_length is None

    def test_parser_config_validation_failures(self):
        """Test parser configuration validation."""
        with pytest.raises(ValueError, match="max_input_bytes must be > 0 or None"):
            ParserConfig(max_input_bytes=0)
        with pytest.raises(ValueError, match="resolve_entities must be"):
            ParserConfig(resolve_entities="external")

    def test_render_config_validation_failures(self):
        """Test rendering configuration validation."""
        with pytest.raises(ValueError, match="indent must be >= 0"):
            ErrorRenderConfig(indent=-1)
        with pytest.raises(ValueError, match="max_errors_shown must be > 0"):
            ErrorRenderConfig(max_errors_shown=0)
        with pytest.raises(ValueError, match="max_value_length must be > 0 or None"):
            ErrorRenderConfig(max_value_length=0)


class TestCodecConfig:
    """Test suite for the aggregate configuration."""

    def test_defaults(self):
        config = CodecConfig()

        assert config.parser == ParserConfig()
        assert config.diagnostic_level == "INFO"
        assert config.correlation_id is None

    def test_diagnostic_level_is_case_insensitive(self):
        config = CodecConfig(diagnostic_level="debug")

        assert config.diagnostic_level == "DEBUG"
        assert CodecConfig.from_dict(config.to_dict()) == config

    def test_invalid_diagnostic_level(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            CodecConfig(diagnostic_level="LOUD")

        assert exc_info.value.field_name == "diagnostic_level"
        assert "DEBUG" in exc_info.value.suggestions

    def test_wrong_component_type(self):
        with pytest.raises(ConfigValidationError, match="parser must be a ParserConfig"):
            CodecConfig(parser=SerializerConfig())  # type: ignore

    def test_presets(self):
        assert CodecConfig.strict().parser.recover is False
        lenient = CodecConfig.lenient()
        assert lenient.parser.recover is True
        assert lenient.parser.remove_pis is True
        debugging = CodecConfig.debugging()
        assert debugging.diagnostic_level == "DEBUG"
        assert debugging.rendering.max_errors_shown == 1000

    def test_override_component_and_top_level_fields(self):
        config = CodecConfig().override(
            parser__recover=True,
            rendering__indent=4,
            name="custom",
        )

        assert config.parser.recover is True
        assert config.rendering.indent == 4
        assert config.name == "custom"
        assert CodecConfig().parser.recover is False

    def test_override_rejects_unknown_names(self):
        with pytest.raises(ConfigValidationError, match="Unknown configuration component"):
            CodecConfig().override(tokenizer__x=1)
        with pytest.raises(ConfigValidationError, match="Unknown configuration field"):
            CodecConfig().override(colour="blue")
        with pytest.raises(ConfigValidationError):
            CodecConfig().override(parser__no_such_option=True)

    def test_override_revalidates_components(self):
        with pytest.raises(ConfigValidationError):
            CodecConfig().override(rendering__indent=-2)

    def test_dict_round_trip(self):
        config = CodecConfig.lenient().override(rendering__max_value_length=80)

        data = config.to_dict()

        assert data["parser"]["recover"] is True
        assert data["rendering"]["max_value_length"] == 80
        assert CodecConfig.from_dict(data) == config

    def test_json_round_trip(self):
        config = CodecConfig(correlation_id="abc", diagnostic_level="WARNING")

        restored = CodecConfig.from_json(config.to_json())

        assert restored == config
        assert json.loads(config.to_json())["correlation_id"] == "abc"

    def test_from_dict_partial(self):
        config = CodecConfig.from_dict({"serializer": {"pretty_print": True}})

        assert config.serializer.pretty_print is True
        assert config.parser == ParserConfig()

    def test_from_dict_invalid_section(self):
        with pytest.raises(ConfigValidationError):
            CodecConfig.from_dict({"parser": {"bogus": 1}})

    def test_from_json_invalid(self):
        with pytest.raises(ConfigError, match="Invalid configuration JSON"):
            CodecConfig.from_json("{not json")
