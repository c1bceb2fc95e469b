"""
Image Encoder для pre-OCR пайплайна.

Кодирование бинаризованного изображения в PNG bytes для OCR провайдера.
PNG без потерь: бинаризация не размывается артефактами JPEG.
"""

import cv2
from loguru import logger

from ...contracts.d1_extraction_dto import PreprocessedImage
from ..domain.exceptions import ImageProcessingError


class ImageEncoder:
    """
    Кодирует PreprocessedImage в PNG bytes (один канал).

    ЦКП: PNG байты изображения.
    """

    @staticmethod
    def encode(image: PreprocessedImage) -> bytes:
        """
        Raises:
            ImageProcessingError: Если не удалось закодировать изображение
        """
        success, buffer = cv2.imencode(".png", image.gray)

        if not success:
            raise ImageProcessingError(
                message="Не удалось закодировать изображение в PNG",
                component="ImageEncoder"
            )

        encoded_bytes = buffer.tobytes()

        logger.debug(
            f"[ImageEncoder] Изображение закодировано: "
            f"{image.width}x{image.height}, {len(encoded_bytes)} байт"
        )

        return encoded_bytes
