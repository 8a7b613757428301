"""Library configuration.

Settings are plain validated dataclasses. The library reads no environment
variables; host applications build a ``Settings`` (directly or from a
config-file mapping with ``Settings.from_mapping``) and install it with
``configure()``.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from functools import lru_cache
from typing import Any

from image_sizes.core.enums import Environment, LogFormat, LogLevel
from image_sizes.core.errors import ConfigurationError
from image_sizes.core.logging import apply_settings


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings for the image-sizes library.

    Attributes:
        environment: Host environment, drives logging defaults
        log_level: Minimum level emitted by library loggers
        log_format: Renderer used when the host calls ``configure_logging``
        compact_json: Encode records without whitespace
        json_max_size_kb: Reject encoded records larger than this (None = no limit)
        slow_codec_threshold: Seconds after which an encode/decode is logged as slow

    Usage Example:
        settings = Settings.from_mapping({"log_level": "debug", "compact_json": False})
        configure(settings)
    """

    environment: Environment = field(default=Environment.PRODUCTION)
    log_level: LogLevel = field(default=LogLevel.INFO)
    log_format: LogFormat = field(default=LogFormat.JSON)
    compact_json: bool = field(default=True)
    json_max_size_kb: int | None = field(default=None)
    slow_codec_threshold: float = field(default=0.1)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Validate settings values.

        Raises:
            ConfigurationError: If a value is out of range or of the wrong type
        """
        for name, enum_class in (
            ("environment", Environment),
            ("log_level", LogLevel),
            ("log_format", LogFormat),
        ):
            if not isinstance(getattr(self, name), enum_class):
                raise ConfigurationError(
                    f"{name} must be a {enum_class.__name__}", config_key=name
                )

        if not isinstance(self.compact_json, bool):
            raise ConfigurationError("compact_json must be a boolean", config_key="compact_json")

        if self.json_max_size_kb is not None and (
            isinstance(self.json_max_size_kb, bool)
            or not isinstance(self.json_max_size_kb, int)
            or self.json_max_size_kb < 1
        ):
            raise ConfigurationError(
                "json_max_size_kb must be a positive integer or None",
                config_key="json_max_size_kb",
            )

        if (
            isinstance(self.slow_codec_threshold, bool)
            or not isinstance(self.slow_codec_threshold, int | float)
            or self.slow_codec_threshold <= 0
        ):
            raise ConfigurationError(
                "slow_codec_threshold must be a positive number",
                config_key="slow_codec_threshold",
            )

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "Settings":
        """
        Build settings from a config-file style mapping.

        Enum-valued keys accept their string form (``"debug"``, ``"prod"``,
        ``"console"``). Unknown keys are rejected.

        Raises:
            ConfigurationError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys: {', '.join(unknown)}",
                config_key=unknown[0],
            )

        values = dict(data)
        try:
            if isinstance(values.get("environment"), str):
                values["environment"] = Environment.from_string(values["environment"])
            if isinstance(values.get("log_level"), str):
                values["log_level"] = LogLevel.from_string(values["log_level"])
            if isinstance(values.get("log_format"), str):
                values["log_format"] = LogFormat.from_string(values["log_format"])
        except ValueError as e:
            raise ConfigurationError(f"Invalid configuration value: {e}") from e

        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to a plain mapping (inverse of ``from_mapping``)."""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, LogLevel):
                value = value.level_name.lower()
            elif isinstance(value, Enum):
                value = value.value
            result[f.name] = value
        return result

    @property
    def json_separators(self) -> tuple[str, str] | None:
        return (",", ":") if self.compact_json else None


_settings_override: Settings | None = None


@lru_cache
def _default_settings() -> Settings:
    return Settings()


def get_settings() -> Settings:
    """Return the installed settings, or the defaults."""
    if _settings_override is not None:
        return _settings_override
    return _default_settings()


def configure(settings: Settings | None) -> None:
    """
    Install library-wide settings.

    Codecs created afterwards use the new settings, and library loggers
    switch to the new log level, format and environment immediately.

    Args:
        settings: New settings, or None to restore the defaults
    """
    global _settings_override  # noqa: PLW0603

    if settings is not None and not isinstance(settings, Settings):
        raise ConfigurationError("configure() expects a Settings instance")
    _settings_override = settings
    apply_settings(get_settings())


__all__ = [
    "Settings",
    "configure",
    "get_settings",
]
