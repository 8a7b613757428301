"""Error classes for the image-sizes library.

Every error raised by the library derives from ``ImageSizesError``. Errors
carry a machine-readable code, a severity and structured details, and log
themselves through the standard ``logging`` module when created.

Token coercion never raises: unrecognized orientation/scale tokens are
normalized to the ``UNKNOWN`` member instead.
"""

import logging
import time
import uuid
from enum import Enum
from typing import Any


class ErrorSeverity(Enum):
    """Error severity levels for monitoring and alerting."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ImageSizesError(Exception):
    """
    Base exception for all image-sizes errors.

    Carries an error ID, a severity level and structured details so host
    applications can log or serialize failures uniformly.
    """

    default_code: str = "ERROR"
    severity: ErrorSeverity = ErrorSeverity.MEDIUM

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message
        self.code = kwargs.get("code") or self.default_code
        self.details = kwargs.get("details") or {}
        self.error_id = str(uuid.uuid4())
        self.timestamp = time.time()
        self.context = kwargs.get("context") or {}
        self.__cause__ = kwargs.get("cause")

        self._log_error()

    def _log_error(self) -> None:
        """Log error with structured data."""
        logger = logging.getLogger(f"image_sizes.errors.{self.__class__.__name__}")
        log_data = {
            "error_id": self.error_id,
            "code": self.code,
            "error_message": self.message,
            "severity": self.severity.value,
            "details": self._sanitize_details(self.details),
            "context": self._sanitize_details(self.context),
            "error_class": self.__class__.__name__,
        }

        if self.severity == ErrorSeverity.CRITICAL:
            logger.critical("Critical error occurred", extra=log_data)
        elif self.severity == ErrorSeverity.HIGH:
            logger.error("High severity error", extra=log_data)
        elif self.severity == ErrorSeverity.MEDIUM:
            logger.warning("Medium severity error", extra=log_data)
        else:
            logger.info("Low severity error", extra=log_data)

    def _sanitize_details(self, details: dict) -> dict:
        """Remove credential-like values from details before logging."""
        if not details:
            return {}

        # orientation/scale "token" keys stay visible
        sensitive_keys = {"password", "secret", "credential", "authorization"}
        sanitized = {}

        for key, value in details.items():
            if any(sensitive in key.lower() for sensitive in sensitive_keys):
                sanitized[key] = "***REDACTED***"
            elif isinstance(value, dict):
                sanitized[key] = self._sanitize_details(value)
            else:
                sanitized[key] = value

        return sanitized

    def to_dict(self, include_details: bool = True) -> dict[str, Any]:
        """
        Serialize error for API responses or logs.

        Args:
            include_details: Include structured error details
        """
        data = {
            "error": self.code,
            "message": self.message,
            "error_id": self.error_id,
            "severity": self.severity.value,
            "timestamp": self.timestamp,
        }

        if include_details and self.details:
            data["details"] = {
                k: v for k, v in self.details.items() if not k.startswith("_")
            }

        return data

    def with_context(self, **context: Any) -> "ImageSizesError":
        """Add context to error and return self for chaining."""
        self.context.update(context)
        return self

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class DomainError(ImageSizesError):
    """Base class for domain errors."""

    default_code = "DOMAIN_ERROR"
    severity = ErrorSeverity.MEDIUM


class InfrastructureError(ImageSizesError):
    """Base class for infrastructure errors."""

    default_code = "INFRASTRUCTURE_ERROR"
    severity = ErrorSeverity.HIGH


class ValidationError(DomainError):
    """Invalid argument passed to a constructor or column binding."""

    default_code = "VALIDATION_ERROR"
    severity = ErrorSeverity.LOW

    def __init__(
        self,
        message: str,
        field: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        if field:
            self.details["field"] = field
        self.code = self.default_code

    @property
    def field(self) -> str | None:
        return self.details.get("field")


class DecodeError(ValidationError):
    """Structured input (a record, JSON document or stored cell) is malformed."""

    default_code = "DECODE_ERROR"
    severity = ErrorSeverity.MEDIUM

    def __init__(
        self,
        message: str,
        field: str | None = None,
        payload_preview: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, field=field, **kwargs)
        if payload_preview is not None:
            self.details["payload_preview"] = payload_preview
        self.code = self.default_code


class ConfigurationError(InfrastructureError):
    """Invalid library configuration."""

    default_code = "CONFIGURATION_ERROR"
    severity = ErrorSeverity.CRITICAL

    def __init__(
        self, message: str, config_key: str | None = None, **kwargs: Any
    ) -> None:
        super().__init__(message, **kwargs)
        if config_key:
            self.details["config_key"] = config_key
        self.code = self.default_code


__all__ = [
    "ConfigurationError",
    "DecodeError",
    "DomainError",
    "ErrorSeverity",
    "ImageSizesError",
    "InfrastructureError",
    "ValidationError",
]
