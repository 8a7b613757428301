"""Domain value types: Orientation, Scale and Size."""

from .orientation import Orientation
from .scale import Scale
from .size import MAX_DIMENSION, RECORD_FIELDS, Size

__all__ = [
    "MAX_DIMENSION",
    "RECORD_FIELDS",
    "Orientation",
    "Scale",
    "Size",
]
