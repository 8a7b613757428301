"""Value object base class.

Value objects are immutable and defined entirely by their public
attributes: two instances with equal attributes are equal and hash alike.
Subclasses assign their attributes in ``__init__`` and then call
``_freeze()``; any later assignment or deletion raises ``AttributeError``.
"""

from abc import ABC, abstractmethod
from typing import Any

from image_sizes.core.errors import ValidationError

# Largest value a signed 64-bit column (BIGINT) or JSON consumer can hold.
MAX_INT64 = 2**63 - 1


class ValueObject(ABC):
    """
    Base value object.

    Usage Example:
        class Dimension(ValueObject):
            def __init__(self, pixels: int):
                super().__init__()
                self.validate_non_negative_int(pixels, "pixels")
                self.pixels = pixels
                self._freeze()

            def __str__(self) -> str:
                return f"{self.pixels}px"
    """

    def __init__(self):
        self._frozen = False
        self._hash_cache = None

    def _freeze(self) -> None:
        """Mark the object as frozen (immutable)."""
        self._frozen = True

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_frozen", False) and name != "_hash_cache":
            raise AttributeError(f"Cannot modify immutable {self.__class__.__name__}")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if getattr(self, "_frozen", False):
            raise AttributeError(
                f"Cannot delete attribute from immutable {self.__class__.__name__}"
            )
        super().__delattr__(name)

    def _public_attrs(self) -> dict[str, Any]:
        return {k: v for k, v in self.__dict__.items() if not k.startswith("_")}

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self._public_attrs() == other._public_attrs()

    def __hash__(self) -> int:
        if self._hash_cache is None:
            values = tuple(sorted(self._public_attrs().items()))
            self._hash_cache = hash((self.__class__.__name__, values))
        return self._hash_cache

    def __repr__(self) -> str:
        attrs = ", ".join(f"{k}={v!r}" for k, v in self._public_attrs().items())
        return f"{self.__class__.__name__}({attrs})"

    @abstractmethod
    def __str__(self) -> str:
        """String representation. Must be implemented by subclasses."""

    @classmethod
    def validate_type(cls, value: Any, expected_type: type, field_name: str) -> None:
        """
        Validate value type.

        Raises:
            ValidationError: If value is wrong type
        """
        if not isinstance(value, expected_type):
            raise ValidationError(
                f"{field_name} must be of type {expected_type.__name__}, "
                f"got {type(value).__name__}",
                field=field_name,
            )

    @classmethod
    def validate_non_negative_int(
        cls, value: Any, field_name: str, maximum: int = MAX_INT64
    ) -> None:
        """
        Validate that value is an int (not a bool) between zero and ``maximum``.

        Raises:
            ValidationError: If value is not an integer in range
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(
                f"{field_name} must be an integer, got {type(value).__name__}",
                field=field_name,
            )
        if value < 0:
            raise ValidationError(
                f"{field_name} must not be negative", field=field_name
            )
        if value > maximum:
            raise ValidationError(
                f"{field_name} must not exceed {maximum}", field=field_name
            )
