"""Configuration classes for typed XML decoding and encoding.

This module provides configuration objects for the parser and serializer
collaborators and for error rendering, plus an aggregate ``CodecConfig`` with
presets and dict/JSON round-tripping.
"""

import json
import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Union

_COMPONENTS = ("parser", "serializer", "rendering")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class ParserConfig:
    """Options passed through to the lxml parser collaborator."""

    remove_pis: bool = False           # Drop processing instructions instead of rejecting them
    resolve_entities: Union[bool, str] = "internal"  # Expand DTD-declared entities, never external ones
    no_network: bool = True
    huge_tree: bool = False
    recover: bool = False              # Let lxml repair malformed markup
    max_input_bytes: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate parser configuration."""
        if self.resolve_entities not in (True, False, "internal"):
            raise ValueError("resolve_entities must be True, False or \"internal\"")
        if self.max_input_bytes is not None and self.max_input_bytes <= 0:
            raise ValueError("max_input_bytes must be > 0 or None")


@dataclass(frozen=True)
class SerializerConfig:
    """Options passed through to the lxml serializer collaborator."""

    pretty_print: bool = False


@dataclass(frozen=True)
class ErrorRenderConfig:
    """Controls how decode errors are rendered as text."""

    indent: int = 2
    max_errors_shown: int = 5
    max_value_length: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate rendering configuration."""
        if self.indent < 0:
            raise ValueError("indent must be >= 0")
        if self.max_errors_shown <= 0:
            raise ValueError("max_errors_shown must be > 0")
        if self.max_value_length is not None and self.max_value_length <= 0:
            raise ValueError("max_value_length must be > 0 or None")


@dataclass(frozen=True)
class CodecConfig:
    """Complete configuration for a ``Codec``.

    Immutable; use ``override`` to derive variants. Component fields can be
    overridden with ``component__field`` keyword names.
    """

    parser: ParserConfig = field(default_factory=ParserConfig)
    serializer: SerializerConfig = field(default_factory=SerializerConfig)
    rendering: ErrorRenderConfig = field(default_factory=ErrorRenderConfig)

    correlation_id: Optional[str] = None
    diagnostic_level: str = "INFO"
    name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the complete codec configuration."""
        for component in _COMPONENTS:
            value = getattr(self, component)
            expected = self.__dataclass_fields__[component].type
            if not isinstance(value, expected):
                raise ConfigValidationError(
                    f"{component} must be a {expected.__name__}",
                    field_name=component,
                )
        object.__setattr__(self, "diagnostic_level", self.diagnostic_level.upper())
        if not isinstance(logging.getLevelName(self.diagnostic_level), int):
            raise ConfigValidationError(
                f"Unknown diagnostic_level: {self.diagnostic_level}",
                field_name="diagnostic_level",
                suggestions=["DEBUG", "INFO", "WARNING", "ERROR"],
            )

    def override(self, **kwargs: Any) -> "CodecConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Field overrides; ``parser__recover=True`` targets a
                component field, ``name="x"`` a top-level one

        Returns:
            New CodecConfig instance with overrides applied

        Raises:
            ConfigValidationError: If a name does not match any field or a
                component rejects the new value

        Example:
            >>> config = CodecConfig().override(parser__recover=True)
            >>> config.parser.recover
            True
        """
        nested_overrides: Dict[str, Dict[str, Any]] = {}
        top_level: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if "__" in key:
                component, field_name = key.split("__", 1)
                if component not in _COMPONENTS:
                    raise ConfigValidationError(
                        f"Unknown configuration component: {component}",
                        field_name=key,
                        suggestions=list(_COMPONENTS),
                    )
                nested_overrides.setdefault(component, {})[field_name] = value
            elif key in self.__dataclass_fields__:
                top_level[key] = value
            else:
                raise ConfigValidationError(
                    f"Unknown configuration field: {key}", field_name=key
                )

        new_fields: Dict[str, Any] = dict(top_level)
        for component, overrides in nested_overrides.items():
            try:
                new_fields[component] = replace(getattr(self, component), **overrides)
            except (TypeError, ValueError) as e:
                raise ConfigValidationError(str(e), field_name=component) from e

        return replace(self, **new_fields)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        result: Dict[str, Any] = {}
        for name in self.__dataclass_fields__:
            value = getattr(self, name)
            if hasattr(value, "__dataclass_fields__"):
                result[name] = {
                    sub: getattr(value, sub) for sub in value.__dataclass_fields__
                }
            else:
                result[name] = value
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CodecConfig":
        """Create configuration from dictionary.

        Missing keys fall back to defaults.

        Raises:
            ConfigValidationError: If a component section holds unknown keys
                or invalid values
        """
        field_values: Dict[str, Any] = {}
        for name, field_info in cls.__dataclass_fields__.items():
            if name not in data:
                continue
            value = data[name]
            if name in _COMPONENTS:
                try:
                    field_values[name] = field_info.type(**value)
                except (TypeError, ValueError) as e:
                    raise ConfigValidationError(str(e), field_name=name) from e
            else:
                field_values[name] = value
        return cls(**field_values)

    @classmethod
    def from_json(cls, json_str: str) -> "CodecConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid configuration JSON: {e}") from e
        return cls.from_dict(data)

    # Preset factory methods
    @classmethod
    def strict(cls) -> "CodecConfig":
        """Reject anything lxml cannot parse cleanly."""
        return cls(name="strict")

    @classmethod
    def lenient(cls) -> "CodecConfig":
        """Let lxml recover from broken markup and drop processing instructions."""
        return cls(
            parser=ParserConfig(recover=True, remove_pis=True),
            name="lenient",
        )

    @classmethod
    def debugging(cls) -> "CodecConfig":
        """Render every grouped failure and log at DEBUG level."""
        return cls(
            rendering=ErrorRenderConfig(max_errors_shown=1000),
            diagnostic_level="DEBUG",
            name="debugging",
        )
