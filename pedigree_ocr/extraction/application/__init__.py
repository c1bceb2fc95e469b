"""Application слой домена Extraction."""

from .factory import ExtractionComponentFactory

__all__ = ["ExtractionComponentFactory"]
