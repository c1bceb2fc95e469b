"""
OCR: Tesseract через pytesseract.

Один проход распознавания латиницы ("eng"). Tesseract не отдаёт
промежуточный прогресс, поэтому колбэк получает 0.0 до вызова и 1.0 после.
"""

from datetime import datetime
from typing import Optional

import pytesseract
from loguru import logger
from PIL import Image

from ...config.settings import TESSERACT_LANGUAGE, TESSERACT_CMD, OCR_TIMEOUT_SECONDS
from ...contracts.d1_extraction_dto import PreprocessedImage, RawOCRResult, OCRMetadata
from ..domain.exceptions import RecognitionError, OCRProviderError
from ..domain.interfaces import IOCRProvider, RecognitionProgress


class TesseractOCR(IOCRProvider):
    """
    Обёртка над Tesseract (pytesseract.image_to_string).

    Возвращает RawOCRResult с full_text, переносы строк соответствуют
    визуальным строкам документа.
    """

    name = "tesseract"

    def __init__(
        self,
        language: str = TESSERACT_LANGUAGE,
        tesseract_cmd: Optional[str] = TESSERACT_CMD or None,
        timeout: int = OCR_TIMEOUT_SECONDS
    ):
        self.language = language
        self.timeout = timeout

        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

        logger.info(f"[TesseractOCR] Инициализирован (lang={language}, timeout={timeout}s)")

    def recognize(
        self,
        image: PreprocessedImage,
        on_progress: Optional[RecognitionProgress] = None
    ) -> RawOCRResult:
        logger.debug(f"[TesseractOCR] Распознавание: {image.source_name}")
        if on_progress:
            on_progress(0.0)

        pil_image = Image.fromarray(image.gray)

        try:
            text = pytesseract.image_to_string(
                pil_image,
                lang=self.language,
                timeout=self.timeout
            )
        except pytesseract.TesseractNotFoundError as e:
            raise OCRProviderError(
                message="tesseract не найден в PATH",
                component="TesseractOCR",
                original_error=e
            )
        except (pytesseract.TesseractError, RuntimeError) as e:
            # RuntimeError: pytesseract так сигнализирует таймаут
            raise OCRProviderError(
                message=f"Tesseract завершился с ошибкой: {image.source_name}",
                component="TesseractOCR",
                original_error=e
            )

        if not text or not text.strip():
            raise RecognitionError(
                message=f"OCR вернул пустой текст: {image.source_name}",
                component="TesseractOCR"
            )

        if on_progress:
            on_progress(1.0)

        logger.debug(f"[TesseractOCR] Распознано {len(text)} символов")

        return RawOCRResult(
            full_text=text,
            metadata=OCRMetadata(
                source_file=image.source_name,
                image_width=image.width,
                image_height=image.height,
                processed_at=datetime.now().isoformat(),
                provider=self.name,
                preprocessing_applied=list(image.applied),
            )
        )
