"""JSON encoding of Size records.

The encoded form is a JSON object with exactly the keys ``orientation``,
``scale``, ``width`` and ``height``. It is shared by the wire format and
the single-column persistence binding, so one round-trip law covers both.
"""

import json
import time
from collections.abc import Mapping
from typing import Any

from image_sizes.core.config import Settings, get_settings
from image_sizes.core.errors import DecodeError, ValidationError
from image_sizes.core.logging import get_logger
from image_sizes.domain.size import Size

logger = get_logger(__name__)

# PostgreSQL's binary JSONB format prefixes the document with a version byte.
JSONB_VERSION_PREFIX = "\x01"

_PREVIEW_LENGTH = 100


def _preview(text: str) -> str:
    return text[:_PREVIEW_LENGTH] if len(text) > _PREVIEW_LENGTH else text


class SizeCodec:
    """
    Encoder/decoder between ``Size`` and its JSON record.

    Usage Example:
        codec = SizeCodec()
        payload = codec.encode(Size.new_thumbnail(64, Scale.SM))
        assert codec.decode(payload) == Size.new_thumbnail(64, Scale.SM)
    """

    def __init__(self, settings: Settings | None = None, max_size_kb: float | None = None):
        """
        Initialize codec.

        Args:
            settings: Settings to use (the installed settings if not provided)
            max_size_kb: Override for ``settings.json_max_size_kb``
        """
        self.settings = settings or get_settings()
        self.max_size_kb = (
            max_size_kb if max_size_kb is not None else self.settings.json_max_size_kb
        )

    def to_record(self, size: Size) -> dict[str, Any]:
        """
        Record (plain dict) form of a Size.

        Raises:
            ValidationError: If value is not a Size
        """
        if not isinstance(size, Size):
            raise ValidationError(
                f"Expected a Size, got {type(size).__name__}", field="size"
            )
        return size.to_dict()

    def from_record(self, record: Any) -> Size:
        """
        Size from an already-parsed record.

        Raises:
            DecodeError: If the record is malformed
        """
        return Size.from_dict(record)

    def encode(self, size: Size) -> str:
        """
        Encode a Size as a JSON document.

        Raises:
            ValidationError: If value is not a Size or the document exceeds
                the configured size limit
        """
        start_time = time.perf_counter()
        json_str = json.dumps(
            self.to_record(size),
            ensure_ascii=False,
            separators=self.settings.json_separators,
        )

        if self.max_size_kb:
            size_kb = len(json_str.encode("utf-8")) / 1024
            if size_kb > self.max_size_kb:
                raise ValidationError(
                    f"JSON size {size_kb:.1f}KB exceeds limit of {self.max_size_kb}KB"
                )

        self._track_duration("encode", start_time, len(json_str))
        return json_str

    def decode(self, data: str | bytes | bytearray | Mapping[str, Any]) -> Size:
        """
        Decode a Size from a JSON document or an already-parsed mapping.

        Text and bytes may carry the JSONB version prefix, which is
        stripped before parsing.

        Raises:
            DecodeError: If the input is not valid JSON, not a JSON object,
                or the record is malformed
        """
        if isinstance(data, Mapping):
            return self.from_record(data)

        if isinstance(data, bytes | bytearray):
            try:
                data = bytes(data).decode("utf-8")
            except UnicodeDecodeError as e:
                raise DecodeError(f"Size payload is not valid UTF-8: {e}") from e

        if not isinstance(data, str):
            raise DecodeError(
                f"Cannot decode a Size from {type(data).__name__}", field="payload"
            )

        start_time = time.perf_counter()
        text = data.removeprefix(JSONB_VERSION_PREFIX)
        try:
            record = json.loads(text)
        except ValueError as e:
            logger.warning(
                "Size JSON decoding failed", error=str(e), json_preview=_preview(text)
            )
            raise DecodeError(
                f"Size payload is not valid JSON: {e}", payload_preview=_preview(text)
            ) from e

        if not isinstance(record, dict):
            raise DecodeError(
                f"Size payload must be a JSON object, got {type(record).__name__}",
                payload_preview=_preview(text),
            )

        size = self.from_record(record)
        self._track_duration("decode", start_time, len(text))
        return size

    def _track_duration(self, operation: str, start_time: float, json_size: int) -> None:
        elapsed = time.perf_counter() - start_time
        if elapsed > self.settings.slow_codec_threshold:
            logger.warning(
                "Slow Size JSON operation",
                operation=operation,
                duration_seconds=elapsed,
                json_size_bytes=json_size,
            )


def encode_size(size: Size) -> str:
    """Encode a Size as JSON using the installed settings."""
    return SizeCodec().encode(size)


def decode_size(data: str | bytes | bytearray | Mapping[str, Any]) -> Size:
    """Decode a Size from JSON text, bytes or a parsed mapping."""
    return SizeCodec().decode(data)


__all__ = [
    "JSONB_VERSION_PREFIX",
    "SizeCodec",
    "decode_size",
    "encode_size",
]
