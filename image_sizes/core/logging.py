# ruff: noqa: A005
"""Structured logging for the image-sizes library.

Built on structlog. Modules obtain a logger with ``get_logger(__name__)``
and log with keyword context::

    logger = get_logger(__name__)
    logger.debug("Unrecognized scale token", token="huge")

The library never configures structlog on its own, since that would
override the host application's logging setup. Hosts that want the
library's processor chain call ``configure_logging()`` once at startup.

Architecture:
- LogConfig: Configuration with validation and environment defaults
- StructuredLogger: Level-filtered wrapper around a structlog logger
- LoggerFactory: Logger creation, caching and structlog configuration
"""

import logging
import sys
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

import structlog
from structlog.contextvars import merge_contextvars

from image_sizes.core.enums import Environment, LogFormat, LogLevel
from image_sizes.core.errors import ConfigurationError

if TYPE_CHECKING:
    from image_sizes.core.config import Settings

# =====================================================================================
# CONFIGURATION
# =====================================================================================


@dataclass
class LogConfig:
    """
    Logging configuration with validation and environment defaults.

    Usage Example:
        config = LogConfig(
            level=LogLevel.DEBUG,
            format=LogFormat.CONSOLE,
            environment=Environment.DEVELOPMENT,
        )
        configure_logging(config)
    """

    level: LogLevel = field(default=LogLevel.INFO)
    format: LogFormat = field(default=LogFormat.JSON)
    environment: Environment = field(default=Environment.PRODUCTION)

    enable_timestamps: bool = field(default=True)
    enable_caller_info: bool = field(default=False)
    enable_exception_info: bool = field(default=True)

    truncate_long_messages: bool = field(default=True)
    max_message_length: int = field(default=10000)

    def __post_init__(self):
        """Post-initialization validation and setup."""
        self.validate()
        self.apply_environment_defaults()

    def validate(self) -> None:
        """
        Validate logging configuration parameters.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if not isinstance(self.level, LogLevel):
            raise ConfigurationError("Log level must be a LogLevel", config_key="level")

        if not isinstance(self.format, LogFormat):
            raise ConfigurationError("Log format must be a LogFormat", config_key="format")

        if self.max_message_length < 100:
            raise ConfigurationError(
                "Maximum message length must be at least 100 characters",
                config_key="max_message_length",
            )

    def apply_environment_defaults(self) -> None:
        """Apply environment-specific defaults. The output format is left as given."""
        if self.environment == Environment.DEVELOPMENT:
            self.enable_caller_info = True

        elif self.environment == Environment.TESTING:
            self.enable_timestamps = False

        elif self.environment == Environment.PRODUCTION:
            self.enable_caller_info = False

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "level": self.level.level_name,
            "format": self.format.value,
            "environment": self.environment.value,
            "enable_timestamps": self.enable_timestamps,
            "enable_caller_info": self.enable_caller_info,
            "enable_exception_info": self.enable_exception_info,
            "truncate_long_messages": self.truncate_long_messages,
            "max_message_length": self.max_message_length,
        }


# =====================================================================================
# STRUCTURED LOGGER
# =====================================================================================


class StructuredLogger:
    """
    Level-filtered structured logger.

    Wraps a structlog logger, drops records below the configured level and
    keeps per-logger statistics. Loggers are module globals shared across
    threads, so the counters are updated under a lock.
    """

    def __init__(self, name: str, config: LogConfig):
        """
        Initialize structured logger.

        Args:
            name: Logger name
            config: Logging configuration
        """
        self.name = name
        self.config = config

        self._logger = structlog.get_logger(name)

        self._log_count = 0
        self._error_count = 0
        self._last_log_time: datetime | None = None
        self._stats_lock = threading.Lock()

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._log(LogLevel.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message."""
        self._log(LogLevel.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._log(LogLevel.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error message."""
        self._log(LogLevel.ERROR, message, **kwargs)
        with self._stats_lock:
            self._error_count += 1

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log exception with traceback."""
        kwargs["exc_info"] = True
        self.error(message, **kwargs)

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level.priority >= self.config.level.priority

    def _log(self, level: LogLevel, message: str, **kwargs: Any) -> None:
        """Internal logging method with level filtering."""
        if not self.is_enabled_for(level):
            return

        if (
            self.config.truncate_long_messages
            and len(message) > self.config.max_message_length
        ):
            message = message[: self.config.max_message_length] + "...[TRUNCATED]"

        getattr(self._logger, level.level_name.lower())(message, **kwargs)
        with self._stats_lock:
            self._log_count += 1
            self._last_log_time = datetime.now(timezone.utc)

    def get_stats(self) -> dict[str, Any]:
        """Get logger statistics."""
        with self._stats_lock:
            return {
                "logger_name": self.name,
                "log_count": self._log_count,
                "error_count": self._error_count,
                "last_log_time": self._last_log_time.isoformat()
                if self._last_log_time
                else None,
            }


# =====================================================================================
# LOGGER FACTORY
# =====================================================================================


class LoggerFactory:
    """Creates and caches structured loggers for one configuration."""

    def __init__(self, config: LogConfig):
        """Initialize logger factory."""
        self.config = config
        self._loggers: dict[str, StructuredLogger] = {}
        self._configured = False

    def build_processors(self) -> list[Any]:
        """Build the structlog processor chain for this configuration."""
        processors = [
            merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
        ]

        if self.config.enable_timestamps:
            processors.append(structlog.processors.TimeStamper(fmt="iso"))

        if self.config.enable_caller_info:
            processors.append(
                structlog.processors.CallsiteParameterAdder(
                    parameters=[
                        structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO,
                        structlog.processors.CallsiteParameter.FUNC_NAME,
                    ]
                )
            )

        if self.config.enable_exception_info:
            processors.extend(
                [
                    structlog.processors.StackInfoRenderer(),
                    structlog.processors.format_exc_info,
                ]
            )

        processors.append(structlog.processors.UnicodeDecoder())

        if self.config.format == LogFormat.JSON:
            processors.append(structlog.processors.JSONRenderer())
        elif self.config.format == LogFormat.CONSOLE:
            processors.append(structlog.dev.ConsoleRenderer(colors=False))
        else:
            processors.append(structlog.processors.KeyValueRenderer())

        return processors

    def configure_logging(self) -> None:
        """Install the structlog processor chain and stdlib handler."""
        if self._configured:
            return

        structlog.configure(
            processors=self.build_processors(),
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )

        logging.basicConfig(
            format="%(message)s",
            stream=sys.stdout,
            level=self.config.level.to_logging_level(),
        )

        self._configured = True

    def get_logger(self, name: str) -> StructuredLogger:
        """Get or create structured logger."""
        if name not in self._loggers:
            self._loggers[name] = StructuredLogger(name, self.config)

        return self._loggers[name]

    def get_all_logger_stats(self) -> dict[str, dict[str, Any]]:
        """Get statistics for all loggers."""
        return {name: logger.get_stats() for name, logger in self._loggers.items()}


# =====================================================================================
# GLOBAL FACTORY
# =====================================================================================

_logger_factory: LoggerFactory | None = None


def _config_from_settings(settings: "Settings") -> LogConfig:
    return LogConfig(
        level=settings.log_level,
        format=settings.log_format,
        environment=settings.environment,
    )


def _default_config() -> LogConfig:
    from image_sizes.core.config import get_settings

    return _config_from_settings(get_settings())


def configure_logging(config: LogConfig | None = None) -> None:
    """
    Configure structlog for the host process.

    Loggers handed out earlier keep working and pick up the new level.

    Args:
        config: Logging configuration (built from settings if not provided)
    """
    global _logger_factory  # noqa: PLW0603

    if config is None:
        config = _default_config()

    previous = _logger_factory
    _logger_factory = LoggerFactory(config)
    if previous is not None:
        for name, logger in previous._loggers.items():
            logger.config = config
            _logger_factory._loggers[name] = logger
    _logger_factory.configure_logging()


def get_logger(name: str) -> StructuredLogger:
    """
    Get structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        StructuredLogger: Logger instance
    """
    global _logger_factory  # noqa: PLW0603

    if _logger_factory is None:
        _logger_factory = LoggerFactory(_default_config())

    return _logger_factory.get_logger(name)


def get_logging_stats() -> dict[str, Any]:
    """Get logging configuration and per-logger statistics."""
    if _logger_factory is None:
        return {"error": "Logging not configured"}

    return {
        "configuration": _logger_factory.config.to_dict(),
        "logger_stats": _logger_factory.get_all_logger_stats(),
        "configured": _logger_factory._configured,
    }


def apply_settings(settings: "Settings") -> None:
    """
    Point loggers handed out earlier at the logging fields of ``settings``.

    Called by ``core.config.configure``. If the host already installed the
    processor chain with ``configure_logging``, the chain is rebuilt too.
    """
    if _logger_factory is None:
        return

    config = _config_from_settings(settings)
    if _logger_factory._configured:
        configure_logging(config)
        return

    _logger_factory.config = config
    for logger in _logger_factory._loggers.values():
        logger.config = config


__all__ = [
    "LogConfig",
    "LoggerFactory",
    "StructuredLogger",
    "apply_settings",
    "configure_logging",
    "get_logger",
    "get_logging_stats",
]
