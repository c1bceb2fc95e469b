"""
Фабрика для создания компонентов домена Extraction.
"""

from typing import Optional
from loguru import logger

from ...config.settings import OCR_PROVIDER, validate_config
from ..domain.exceptions import ExtractionConfigurationError
from ..domain.interfaces import IOCRProvider, IImagePreprocessor
from ..ocr.google_vision_ocr import GoogleVisionOCR
from ..ocr.tesseract_ocr import TesseractOCR
from ..pre_ocr.image_file_reader import ImageFileReader
from ..pre_ocr.preprocessor import ImagePreprocessor


class ExtractionComponentFactory:
    """
    Фабрика для создания компонентов домена Extraction.

    Домен Extraction отвечает за:
    - Декодирование и препроцессинг изображений
    - OCR распознавание текста
    """

    @staticmethod
    def create_ocr_provider(
        provider: Optional[str] = None,
        credentials_path: Optional[str] = None
    ) -> IOCRProvider:
        """
        Создает провайдер OCR.

        Args:
            provider: "tesseract" | "google_vision" (по умолчанию из settings)
            credentials_path: Путь к credentials Google Cloud (для google_vision)
        """
        provider = provider or OCR_PROVIDER
        logger.debug(f"[Extraction] Создание OCR провайдера: {provider}")

        if provider == "tesseract":
            return TesseractOCR()

        if provider == "google_vision":
            if credentials_path is None:
                try:
                    validate_config(provider)
                except ValueError as e:
                    raise ExtractionConfigurationError(
                        message="Некорректная конфигурация Google Vision",
                        component="ExtractionComponentFactory",
                        original_error=e
                    )
            return GoogleVisionOCR(credentials_path)

        raise ExtractionConfigurationError(
            message=f"Неизвестный OCR провайдер: {provider!r}",
            component="ExtractionComponentFactory"
        )

    @staticmethod
    def create_image_preprocessor() -> IImagePreprocessor:
        """Создает препроцессор изображений с настройками из settings."""
        logger.debug("[Extraction] Создание препроцессора изображений")
        return ImagePreprocessor()

    @staticmethod
    def create_image_reader() -> ImageFileReader:
        return ImageFileReader()

