"""Adapters: JSON serialization and SQLAlchemy column types."""

from .persistence import OrientationType, ScaleType, SizeType
from .serialization import SizeCodec, decode_size, encode_size

__all__ = [
    "OrientationType",
    "ScaleType",
    "SizeCodec",
    "SizeType",
    "decode_size",
    "encode_size",
]
