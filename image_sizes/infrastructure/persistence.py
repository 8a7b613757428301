"""SQLAlchemy column types for Size, Orientation and Scale.

``SizeType`` stores a whole Size in a single column using the same JSON
record as the wire format (``JSONB`` on PostgreSQL, text elsewhere).
``OrientationType`` and ``ScaleType`` store a bare canonical token.

Usage Example:
    class ImageModel(Base):
        __tablename__ = "images"

        id: Mapped[int] = mapped_column(primary_key=True)
        size: Mapped[Size] = mapped_column(SizeType())
        scale: Mapped[Scale] = mapped_column(ScaleType())

Driver errors raised while executing statements are not caught here.
"""

from collections.abc import Mapping
from typing import Any

from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.types import String, Text, TypeDecorator

from image_sizes.core.errors import ValidationError
from image_sizes.domain.orientation import Orientation
from image_sizes.domain.scale import Scale
from image_sizes.domain.size import Size
from image_sizes.infrastructure.serialization import SizeCodec

TOKEN_COLUMN_LENGTH = 16


class SizeType(TypeDecorator):
    """
    Single-column binding for ``Size``.

    Writes encode the Size record; reads decode it. NULL maps to None in
    both directions. Reads accept text, bytes (optionally carrying the JSONB
    version byte) or a mapping already decoded by the driver.
    """

    impl = Text
    cache_ok = True

    def __init__(self, max_size_kb: float | None = None, **kwargs):
        """
        Initialize Size column type.

        Args:
            max_size_kb: Maximum encoded size in KB (settings default if None)
            **kwargs: Additional SQLAlchemy type arguments
        """
        super().__init__(**kwargs)
        self.max_size_kb = max_size_kb

    @property
    def python_type(self) -> type:
        return Size

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(JSONB())
        return dialect.type_descriptor(Text())

    def _codec(self) -> SizeCodec:
        return SizeCodec(max_size_kb=self.max_size_kb)

    def process_bind_param(self, value: Any, dialect) -> Any:
        """
        Encode a Size for storage.

        Raises:
            ValidationError: If value is neither None nor a Size, or its encoded
                record exceeds ``max_size_kb``
        """
        if value is None:
            return None

        if not isinstance(value, Size):
            raise ValidationError(
                f"SizeType column expects a Size, got {type(value).__name__}",
                field="size",
            )

        codec = self._codec()
        if dialect.name == "postgresql":
            # JSONB's own bind processor serializes the record.
            if codec.max_size_kb:
                codec.encode(value)
            return codec.to_record(value)
        return codec.encode(value)

    def process_result_value(self, value: Any, dialect) -> Size | None:
        """
        Decode a stored Size.

        Raises:
            DecodeError: If the stored value is malformed
        """
        if value is None:
            return None

        codec = self._codec()
        if isinstance(value, Mapping):
            return codec.from_record(value)
        return codec.decode(value)


class _TokenType(TypeDecorator):
    """Stores an enum member as its canonical token."""

    impl = String(TOKEN_COLUMN_LENGTH)
    cache_ok = True

    enum_class: type | None = None

    @property
    def python_type(self) -> type:
        return self.enum_class

    def process_bind_param(self, value: Any, dialect) -> str | None:
        if value is None:
            return None

        if not isinstance(value, self.enum_class):
            raise ValidationError(
                f"{self.__class__.__name__} column expects "
                f"{self.enum_class.__name__} values, got {type(value).__name__}",
                field=self.enum_class.__name__.lower(),
            )
        return value.to_token()

    def process_result_value(self, value: Any, dialect) -> Any:
        if value is None:
            return None
        return self.enum_class.from_token(value)


class OrientationType(_TokenType):
    """Single-column binding for ``Orientation``."""

    cache_ok = True
    enum_class = Orientation


class ScaleType(_TokenType):
    """Single-column binding for ``Scale``."""

    cache_ok = True
    enum_class = Scale


__all__ = [
    "OrientationType",
    "ScaleType",
    "SizeType",
]
