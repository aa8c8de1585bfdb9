"""Tests for correlation-aware logging."""

import logging

import pytest

from typed_xml.shared import get_logger, level_from_name


class TestCorrelationLogger:
    """Test the logging wrapper."""

    def test_records_carry_component_and_correlation_id(self, caplog) -> None:
        logger = get_logger("typed_xml.tests", "req-9", "unit")

        with caplog.at_level(logging.DEBUG, logger="typed_xml.tests"):
            logger.debug("hello", extra={"size": 3})

        record = caplog.records[-1]
        assert record.component == "unit"
        assert record.correlation_id == "req-9"
        assert record.size == 3

    def test_component_defaults_to_module_name(self) -> None:
        assert get_logger("typed_xml.decode.api").component == "api"

    def test_log_at_numeric_level(self, caplog) -> None:
        logger = get_logger("typed_xml.tests")

        with caplog.at_level(logging.INFO, logger="typed_xml.tests"):
            logger.log(logging.WARNING, "numeric")
            assert logger.is_enabled_for(logging.INFO)
            assert not logger.is_enabled_for(logging.DEBUG)

        assert caplog.records[-1].levelno == logging.WARNING


class TestLevelFromName:
    """Test level name translation."""

    def test_known_levels(self) -> None:
        assert level_from_name("debug") == logging.DEBUG
        assert level_from_name("WARNING") == logging.WARNING

    def test_unknown_level(self) -> None:
        with pytest.raises(ValueError, match="Unknown logging level"):
            level_from_name("LOUD")
