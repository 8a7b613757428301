"""Discrete image size-scale enumeration."""

from enum import Enum
from typing import Any

from image_sizes.core.logging import get_logger

logger = get_logger(__name__)


class Scale(Enum):
    """
    Size scale of an image, smallest to largest.

    - XXSM: extra extra small
    - XSM: extra small
    - SM: small
    - MD: medium
    - LG: large
    - XLG: extra large
    - XXLG: extra extra large
    - UNKNOWN: no scale recorded, or an unrecognized token

    Scales are totally ordered by ``rank``. UNKNOWN ranks lowest, so
    "no scale" sorts before every real scale.

    Example:
        >>> Scale.from_token("Lg")
        <Scale.LG: 'lg'>
        >>> Scale.SM < Scale.LG
        True
    """

    # Definition order is the sort order.
    UNKNOWN = ""
    XXSM = "xxsm"
    XSM = "xsm"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XLG = "xlg"
    XXLG = "xxlg"

    @classmethod
    def from_token(cls, token: Any) -> "Scale":
        """
        Coerce an external token into a Scale.

        Matching is case-insensitive and ignores surrounding whitespace.
        Anything that does not match one of the seven named scales yields
        UNKNOWN; this never raises.
        """
        if not isinstance(token, str):
            return cls.UNKNOWN

        normalized = token.strip().lower()
        if not normalized:
            return cls.UNKNOWN

        try:
            return cls(normalized)
        except ValueError:
            logger.debug("Unrecognized scale token", token=token)
            return cls.UNKNOWN

    def to_token(self) -> str:
        """Canonical lowercase token; empty string for UNKNOWN."""
        return self.value

    @property
    def rank(self) -> int:
        """Position in the ascending order (UNKNOWN=0, XXSM=1 ... XXLG=7)."""
        return list(Scale).index(self)

    @property
    def is_known(self) -> bool:
        return self is not Scale.UNKNOWN

    @classmethod
    def ordered(cls) -> tuple["Scale", ...]:
        """The seven named scales in ascending order."""
        return tuple(member for member in cls if member.is_known)

    @classmethod
    def tokens(cls) -> tuple[str, ...]:
        """Canonical tokens accepted by ``from_token``."""
        return tuple(member.value for member in cls.ordered())

    def __lt__(self, other: "Scale") -> bool:
        if not isinstance(other, Scale):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: "Scale") -> bool:
        if not isinstance(other, Scale):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: "Scale") -> bool:
        if not isinstance(other, Scale):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: "Scale") -> bool:
        if not isinstance(other, Scale):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        return self.value
