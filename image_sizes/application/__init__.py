"""Application-layer transfer objects."""

from .dtos import SizeDTO

__all__ = ["SizeDTO"]
