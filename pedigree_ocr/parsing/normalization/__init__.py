"""Нормализация сырого текста OCR и словари извлечения."""

from .text_normalizer import TextNormalizer
from . import vocabulary

__all__ = ["TextNormalizer", "vocabulary"]
