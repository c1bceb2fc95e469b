"""Domain слой домена Extraction: интерфейсы и исключения."""

from .exceptions import (
    ExtractionError,
    ImageProcessingError,
    ImageNotFoundError,
    ImageDecodeError,
    RecognitionError,
    OCRProviderError,
    ExtractionConfigurationError,
)
from .interfaces import IOCRProvider, IImagePreprocessor, RecognitionProgress

__all__ = [
    "ExtractionError",
    "ImageProcessingError",
    "ImageNotFoundError",
    "ImageDecodeError",
    "RecognitionError",
    "OCRProviderError",
    "ExtractionConfigurationError",
    "IOCRProvider",
    "IImagePreprocessor",
    "RecognitionProgress",
]
