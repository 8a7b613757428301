"""
Image size value types.

Models an image's geometry as an immutable ``Size`` made of an
``Orientation``, a ``Scale`` and pixel dimensions, with lenient string
coercion, a JSON record format and SQLAlchemy column bindings.

Example:
    >>> from image_sizes import Scale, new_landscape, encode_size, decode_size
    >>> banner = new_landscape(1920, 1080, Scale.LG)
    >>> decode_size(encode_size(banner)) == banner
    True
"""

from image_sizes.core.errors import (
    ConfigurationError,
    DecodeError,
    ImageSizesError,
    ValidationError,
)
from image_sizes.domain import Orientation, Scale, Size
from image_sizes.infrastructure import (
    OrientationType,
    ScaleType,
    SizeCodec,
    SizeType,
    decode_size,
    encode_size,
)

__version__ = "0.1.0"


def new_thumbnail(dimension: int, scale: Scale) -> Size:
    """Square thumbnail Size; see ``Size.new_thumbnail``."""
    return Size.new_thumbnail(dimension, scale)


def new_landscape(width: int, height: int, scale: Scale) -> Size:
    """Landscape Size; see ``Size.new_landscape``."""
    return Size.new_landscape(width, height, scale)


def new_portrait(width: int, height: int, scale: Scale) -> Size:
    """Portrait Size; see ``Size.new_portrait``."""
    return Size.new_portrait(width, height, scale)


def default_size() -> Size:
    """The empty Size."""
    return Size.default()


__all__ = [
    "ConfigurationError",
    "DecodeError",
    "ImageSizesError",
    "Orientation",
    "OrientationType",
    "Scale",
    "ScaleType",
    "Size",
    "SizeCodec",
    "SizeType",
    "ValidationError",
    "decode_size",
    "default_size",
    "encode_size",
    "new_landscape",
    "new_portrait",
    "new_thumbnail",
]
