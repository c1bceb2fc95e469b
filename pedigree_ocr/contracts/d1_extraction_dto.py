"""
DTO контракт: D1 (Extraction) -> D2 (Parsing)

Изображение сертификата до и после препроцессинга и сырой текст OCR.

ВАЖНО: Переносы строк в RawOCRResult.full_text значимы. Экстракторы
D2 опираются на относительное положение строк ("строка над кодом реестра").
"""

from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np


@dataclass(frozen=True)
class SourceImage:
    """
    Декодированное исходное изображение.

    pixels: массив (height, width, 4), uint8, порядок каналов RGBA.
    Живёт только в рамках одной попытки, никуда не сохраняется.
    """
    pixels: np.ndarray
    source_name: str = "unknown"

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])


@dataclass(frozen=True)
class PreprocessedImage:
    """
    Бинаризованное изображение для OCR.

    pixels: массив (height, width, 4), uint8, каждый канал строго 0 или 255.
    Размеры = исходные * UPSCALE_FACTOR. Массив read-only.
    """
    pixels: np.ndarray
    source_width: int
    source_height: int
    source_name: str = "unknown"
    applied: List[str] = field(default_factory=list)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def gray(self) -> np.ndarray:
        """Одноканальное представление (все RGB-каналы равны)."""
        return np.ascontiguousarray(self.pixels[:, :, 0])


@dataclass
class OCRMetadata:
    """
    Метаданные OCR обработки.
    """
    source_file: str                              # Имя исходного файла
    image_width: int                              # Ширина изображения (px)
    image_height: int                             # Высота изображения (px)
    processed_at: str                             # Timestamp обработки (ISO 8601)
    provider: str = "unknown"                     # tesseract / google_vision / stub
    preprocessing_applied: List[str] = field(default_factory=list)


@dataclass
class RawOCRResult:
    """
    Результат OCR: один текстовый блок с сохранёнными переносами строк.
    """
    full_text: str = ""
    metadata: Optional[OCRMetadata] = None

    @property
    def lines(self) -> List[str]:
        return self.full_text.splitlines()
