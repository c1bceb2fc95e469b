"""Pre-OCR Infrastructure: фильтры."""

from .filters import apply_upscale, apply_average_grayscale, apply_threshold, binary_to_rgba

__all__ = ["apply_upscale", "apply_average_grayscale", "apply_threshold", "binary_to_rgba"]
