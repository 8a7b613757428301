"""Image orientation enumeration."""

from enum import Enum
from typing import Any

from image_sizes.core.logging import get_logger

logger = get_logger(__name__)


class Orientation(Enum):
    """
    Orientation of an image.

    - THUMBNAIL: square aspect ratio
    - LANDSCAPE: wider than tall
    - PORTRAIT: taller than wide
    - UNKNOWN: no orientation recorded, or an unrecognized token

    Member values are the canonical lowercase tokens used on the wire and in
    storage. UNKNOWN's token is the empty string.

    Example:
        >>> Orientation.from_token("LANDSCAPE")
        <Orientation.LANDSCAPE: 'landscape'>
        >>> Orientation.from_token("panorama").to_token()
        ''
    """

    UNKNOWN = ""
    THUMBNAIL = "thumbnail"
    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"

    @classmethod
    def from_token(cls, token: Any) -> "Orientation":
        """
        Coerce an external token into an Orientation.

        Matching is case-insensitive and ignores surrounding whitespace.
        Anything that does not match a named orientation, including the
        empty string, None and non-string values, yields UNKNOWN.
        """
        if not isinstance(token, str):
            return cls.UNKNOWN

        normalized = token.strip().lower()
        if not normalized:
            return cls.UNKNOWN

        try:
            return cls(normalized)
        except ValueError:
            logger.debug("Unrecognized orientation token", token=token)
            return cls.UNKNOWN

    def to_token(self) -> str:
        """Canonical lowercase token; empty string for UNKNOWN."""
        return self.value

    @property
    def is_known(self) -> bool:
        return self is not Orientation.UNKNOWN

    @classmethod
    def tokens(cls) -> tuple[str, ...]:
        """Canonical tokens accepted by ``from_token``."""
        return tuple(member.value for member in cls if member.is_known)

    def __str__(self) -> str:
        return self.value
