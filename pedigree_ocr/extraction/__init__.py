"""
Домен Extraction: Pre-OCR + OCR обработка.

1. Декодирование фото сертификата (ImageFileReader)
2. Upscale + бинаризация (ImagePreprocessor)
3. OCR через внешний провайдер (TesseractOCR / GoogleVisionOCR)

Граница домена: contracts.RawOCRResult
"""

from .pre_ocr import ImageFileReader, ImagePreprocessor, ImageEncoder
from .ocr import TesseractOCR, GoogleVisionOCR
from .application.factory import ExtractionComponentFactory

__all__ = [
    "ImageFileReader",
    "ImagePreprocessor",
    "ImageEncoder",
    "TesseractOCR",
    "GoogleVisionOCR",
    "ExtractionComponentFactory",
]
