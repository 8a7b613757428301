"""Size value object: orientation, scale and pixel dimensions of an image."""

from collections.abc import Mapping
from typing import Any

from image_sizes.core.errors import DecodeError
from image_sizes.domain.base import MAX_INT64, ValueObject
from image_sizes.domain.orientation import Orientation
from image_sizes.domain.scale import Scale

# Wire/storage field names, in encoding order.
RECORD_FIELDS = ("orientation", "scale", "width", "height")

# Dimensions are bounded so every Size fits a BIGINT column and encodes as JSON.
MAX_DIMENSION = MAX_INT64


class Size(ValueObject):
    """
    Immutable description of an image's geometry.

    Sizes are normally built with the named constructors. The orientation is
    asserted by the caller: ``new_landscape`` does not check that width
    exceeds height, and ``new_portrait`` does not check the reverse.

    ``Size()`` with no arguments is the empty Size (UNKNOWN orientation,
    UNKNOWN scale, 0x0). Any other value, including a partially populated
    one, is not empty.

    Example:
        >>> icon = Size.new_thumbnail(64, Scale.SM)
        >>> (icon.width, icon.height, icon.orientation)
        (64, 64, <Orientation.THUMBNAIL: 'thumbnail'>)
        >>> Size().is_empty()
        True
    """

    def __init__(
        self,
        orientation: Orientation = Orientation.UNKNOWN,
        scale: Scale = Scale.UNKNOWN,
        width: int = 0,
        height: int = 0,
    ):
        """
        Initialize and validate a Size.

        Raises:
            ValidationError: If orientation/scale are not enum members or a
                dimension is not an integer in 0..MAX_DIMENSION
        """
        super().__init__()
        self.validate_type(orientation, Orientation, "orientation")
        self.validate_type(scale, Scale, "scale")
        self.validate_non_negative_int(width, "width", MAX_DIMENSION)
        self.validate_non_negative_int(height, "height", MAX_DIMENSION)

        self.orientation = orientation
        self.scale = scale
        self.width = width
        self.height = height
        self._freeze()

    # -------------------------------------------------------------------------
    # Named constructors
    # -------------------------------------------------------------------------

    @classmethod
    def new_thumbnail(cls, dimension: int, scale: Scale) -> "Size":
        """Square thumbnail: ``dimension`` is used for both width and height."""
        return cls(Orientation.THUMBNAIL, scale, dimension, dimension)

    @classmethod
    def new_landscape(cls, width: int, height: int, scale: Scale) -> "Size":
        """Landscape size; width and height are stored as given."""
        return cls(Orientation.LANDSCAPE, scale, width, height)

    @classmethod
    def new_portrait(cls, width: int, height: int, scale: Scale) -> "Size":
        """Portrait size; width and height are stored as given."""
        return cls(Orientation.PORTRAIT, scale, width, height)

    @classmethod
    def default(cls) -> "Size":
        """The empty Size."""
        return cls()

    def is_empty(self) -> bool:
        """True only for the exact default value."""
        return self == Size.default()

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    def with_scale(self, scale: Scale) -> "Size":
        """Return a copy with a different scale."""
        return Size(self.orientation, scale, self.width, self.height)

    def derived_orientation(self) -> Orientation:
        """
        Orientation implied by the dimensions alone.

        Informational only; it never changes the stored orientation.
        """
        if self.width == 0 and self.height == 0:
            return Orientation.UNKNOWN
        if self.width == self.height:
            return Orientation.THUMBNAIL
        if self.width > self.height:
            return Orientation.LANDSCAPE
        return Orientation.PORTRAIT

    def matches_dimensions(self) -> bool:
        """Whether the asserted orientation agrees with ``derived_orientation()``."""
        return self.orientation == self.derived_orientation()

    def sort_key(self) -> tuple[int, int, int]:
        return (self.scale.rank, self.width, self.height)

    # -------------------------------------------------------------------------
    # Structured representation
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Four-field record with canonical tokens and integer dimensions."""
        return {
            "orientation": self.orientation.to_token(),
            "scale": self.scale.to_token(),
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Size":
        """
        Build a Size from its record form.

        Unrecognized or missing orientation/scale tokens become UNKNOWN.
        Extra keys are ignored.

        Raises:
            DecodeError: If data is not a mapping, or width/height is missing
                or not an integer in 0..MAX_DIMENSION
        """
        if not isinstance(data, Mapping):
            raise DecodeError(
                f"Size record must be a mapping, got {type(data).__name__}"
            )

        return cls(
            Orientation.from_token(data.get("orientation")),
            Scale.from_token(data.get("scale")),
            _read_dimension(data, "width"),
            _read_dimension(data, "height"),
        )

    def __str__(self) -> str:
        orientation = self.orientation.to_token() or "unknown"
        scale = self.scale.to_token() or "unknown"
        return f"{orientation}/{scale} {self.width}x{self.height}"


def _read_dimension(data: Mapping[str, Any], key: str) -> int:
    if key not in data:
        raise DecodeError(f"Size record is missing '{key}'", field=key)

    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(
            f"Size record '{key}' must be an integer, got {type(value).__name__}",
            field=key,
        )
    if value < 0:
        raise DecodeError(f"Size record '{key}' must not be negative", field=key)
    if value > MAX_DIMENSION:
        raise DecodeError(
            f"Size record '{key}' must not exceed {MAX_DIMENSION}", field=key
        )
    return value
