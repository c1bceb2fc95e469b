"""
Pre-OCR: декодирование, препроцессинг и кодирование изображения.
"""

from .image_file_reader import ImageFileReader
from .preprocessor import ImagePreprocessor
from .image_encoder import ImageEncoder

__all__ = ["ImageFileReader", "ImagePreprocessor", "ImageEncoder"]
