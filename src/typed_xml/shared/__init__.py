"""Shared utilities for typed XML decoding and encoding.

This module provides the result values, configuration objects and logging
helpers used across the tree, decode and encode layers.
"""

from .result import (
    DecodeFailure,
    Err,
    Ok,
    Result,
)
from .config import (
    CodecConfig,
    ConfigError,
    ConfigValidationError,
    ErrorRenderConfig,
    ParserConfig,
    SerializerConfig,
)
from .logging import (
    CorrelationLogger,
    get_logger,
    level_from_name,
)

__all__ = [
    "DecodeFailure",
    "Err",
    "Ok",
    "Result",
    "CodecConfig",
    "ConfigError",
    "ConfigValidationError",
    "ErrorRenderConfig",
    "ParserConfig",
    "SerializerConfig",
    "CorrelationLogger",
    "get_logger",
    "level_from_name",
]
