"""Shared enums for the image-sizes library.

Runtime-configuration enumerations used by ``core.config`` and
``core.logging``. Domain enumerations (Orientation, Scale) live in
``image_sizes.domain``.

Each enum parses its config-file spelling with ``from_string``; a bad
value raises ``ValueError``, which ``Settings.from_mapping`` reports as a
``ConfigurationError``.
"""

from enum import Enum


class Environment(Enum):
    """Host application environment, drives logging defaults."""

    DEVELOPMENT = "dev"
    TESTING = "test"
    STAGING = "staging"
    PRODUCTION = "prod"

    @classmethod
    def from_string(cls, value: str) -> "Environment":
        """Accept the short value (``"dev"``) or the member name (``"development"``)."""
        normalized = value.strip().lower()
        for environment in cls:
            if normalized in (environment.value, environment.name.lower()):
                return environment
        raise ValueError(f"Invalid environment: {value}")


class LogLevel(Enum):
    """Logging levels with priority mapping."""

    DEBUG = ("DEBUG", 10)
    INFO = ("INFO", 20)
    WARNING = ("WARNING", 30)
    ERROR = ("ERROR", 40)
    CRITICAL = ("CRITICAL", 50)

    def __init__(self, level_name: str, priority: int):
        self.level_name = level_name
        self.priority = priority

    @classmethod
    def from_string(cls, value: str) -> "LogLevel":
        """Parse a level name case-insensitively; ``"warn"`` means WARNING."""
        normalized = value.strip().upper()
        if normalized == "WARN":
            return cls.WARNING
        for level in cls:
            if level.level_name == normalized:
                return level
        raise ValueError(f"Invalid log level: {value}")

    def to_logging_level(self) -> int:
        """Convert to standard logging module level."""
        return self.priority


class LogFormat(Enum):
    """Renderer used by the structlog processor chain."""

    JSON = "json"
    CONSOLE = "console"
    PLAIN = "plain"

    @classmethod
    def from_string(cls, value: str) -> "LogFormat":
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Invalid log format: {value}") from None
