"""
Интерфейсы (абстрактные классы) для домена Extraction.

Домен Extraction отвечает за:
1. Декодирование и препроцессинг изображения (pre-ocr)
2. OCR распознавание текста (внешний коллаборатор)
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from ...contracts.d1_extraction_dto import SourceImage, PreprocessedImage, RawOCRResult

# Прогресс распознавания в диапазоне [0, 1]
RecognitionProgress = Callable[[float], None]


class IOCRProvider(ABC):
    """Интерфейс для провайдеров OCR (домен Extraction)."""

    name: str = "unknown"

    @abstractmethod
    def recognize(
        self,
        image: PreprocessedImage,
        on_progress: Optional[RecognitionProgress] = None
    ) -> RawOCRResult:
        """
        Распознаёт текст на изображении.

        Args:
            image: Бинаризованное изображение
            on_progress: Колбэк прогресса [0, 1] (опционально)

        Returns:
            RawOCRResult с full_text (переносы строк сохранены)

        Raises:
            RecognitionError: OCR упал или текст пустой
        """
        pass


class IImagePreprocessor(ABC):
    """Интерфейс для препроцессоров изображений (домен Extraction)."""

    @abstractmethod
    def preprocess(self, image: SourceImage) -> PreprocessedImage:
        """
        Готовит изображение к OCR.

        Операция чистая и детерминированная.
        """
        pass
