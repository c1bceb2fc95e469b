"""
Исключения для домена Extraction.

Ошибки декодирования изображения и OCR. Пайплайн перехватывает их
на своей границе и переводит пользователя к ручному вводу.
"""

from typing import Optional


class ExtractionError(Exception):
    """Базовое исключение для ошибок домена Extraction."""

    def __init__(
        self,
        message: str,
        component: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        self.message = message
        self.component = component
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"Extraction Error: {self.message}"
        if self.component:
            msg += f" (Component: {self.component})"
        if self.original_error:
            msg += f" [Original: {type(self.original_error).__name__}: {str(self.original_error)}]"
        return msg


class ImageProcessingError(ExtractionError):
    """Ошибка обработки изображения."""
    pass


class ImageNotFoundError(ImageProcessingError):
    """Изображение не найдено."""
    pass


class ImageDecodeError(ImageProcessingError):
    """Изображение повреждено или не читается."""
    pass


class RecognitionError(ExtractionError):
    """OCR упал или вернул пустой текст."""
    pass


class OCRProviderError(RecognitionError):
    """Ошибка провайдера OCR (API, бинарник, таймаут)."""
    pass


class ExtractionConfigurationError(ExtractionError):
    """Ошибка конфигурации домена Extraction."""
    pass
