"""
OCR: Google Vision API интеграция.

- Отправка бинаризованного изображения в Google Vision
- DOCUMENT_TEXT_DETECTION с подсказкой языка (латиница)
- Формирование RawOCRResult (контракт D1->D2)
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional

from google.cloud import vision
from loguru import logger

from ...config.settings import GOOGLE_APPLICATION_CREDENTIALS, OCR_LANGUAGE_HINTS
from ...contracts.d1_extraction_dto import PreprocessedImage, RawOCRResult, OCRMetadata
from ..domain.exceptions import RecognitionError, OCRProviderError, ExtractionConfigurationError
from ..domain.interfaces import IOCRProvider, RecognitionProgress
from ..pre_ocr.image_encoder import ImageEncoder


class GoogleVisionOCR(IOCRProvider):
    """
    Обёртка над Google Cloud Vision API.

    Реализует интерфейс IOCRProvider. Промежуточного прогресса API
    не даёт: колбэк получает 0.0 до запроса и 1.0 после.
    """

    name = "google_vision"

    def __init__(
        self,
        credentials_path: Optional[str] = None,
        language_hints: Optional[List[str]] = None,
        client: Optional[Any] = None
    ):
        """
        Args:
            credentials_path: Путь к JSON-файлу credentials.
                            Если не указан, берётся из settings.
            language_hints: Подсказки языка для OCR
            client: Готовый ImageAnnotatorClient (для тестов)
        """
        self.language_hints = language_hints or list(OCR_LANGUAGE_HINTS)

        if client is not None:
            self.client = client
        else:
            creds_path = credentials_path or GOOGLE_APPLICATION_CREDENTIALS

            if not creds_path:
                raise ExtractionConfigurationError(
                    message="Google credentials не указаны (GOOGLE_APPLICATION_CREDENTIALS)",
                    component="GoogleVisionOCR"
                )

            if not Path(creds_path).exists():
                raise ExtractionConfigurationError(
                    message=f"Credentials файл не найден: {creds_path}",
                    component="GoogleVisionOCR"
                )

            # Устанавливаем credentials через переменную окружения
            os.environ["GOOGLE_APPLICATION_CREDENTIALS"] = str(creds_path)
            self.client = vision.ImageAnnotatorClient()

        logger.info(f"[GoogleVisionOCR] Клиент инициализирован (hints={self.language_hints})")

    def recognize(
        self,
        image: PreprocessedImage,
        on_progress: Optional[RecognitionProgress] = None
    ) -> RawOCRResult:
        logger.debug(f"[GoogleVisionOCR] Распознавание: {image.source_name}")
        if on_progress:
            on_progress(0.0)

        content = ImageEncoder.encode(image)

        try:
            response = self.client.document_text_detection(
                image=vision.Image(content=content),
                image_context=vision.ImageContext(language_hints=self.language_hints)
            )
        except Exception as e:
            raise OCRProviderError(
                message=f"Ошибка запроса к Google Vision: {image.source_name}",
                component="GoogleVisionOCR",
                original_error=e
            )

        if response.error.message:
            raise OCRProviderError(
                message=f"Google Vision API error: {response.error.message}",
                component="GoogleVisionOCR"
            )

        full_text = ""
        if response.full_text_annotation:
            full_text = response.full_text_annotation.text

        if not full_text or not full_text.strip():
            raise RecognitionError(
                message=f"OCR вернул пустой текст: {image.source_name}",
                component="GoogleVisionOCR"
            )

        if on_progress:
            on_progress(1.0)

        logger.debug(f"[GoogleVisionOCR] Распознано {len(full_text)} символов")

        return RawOCRResult(
            full_text=full_text,
            metadata=OCRMetadata(
                source_file=image.source_name,
                image_width=image.width,
                image_height=image.height,
                processed_at=datetime.now().isoformat(),
                provider=self.name,
                preprocessing_applied=list(image.applied),
            )
        )
