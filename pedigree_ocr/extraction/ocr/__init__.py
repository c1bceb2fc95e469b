"""OCR провайдеры (внешние коллабораторы за интерфейсом IOCRProvider)."""

from .tesseract_ocr import TesseractOCR
from .google_vision_ocr import GoogleVisionOCR

__all__ = ["TesseractOCR", "GoogleVisionOCR"]
