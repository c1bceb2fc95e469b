"""
Image File Reader для pre-OCR пайплайна.

Чтение и декодирование изображений из файла или байтов.
Операция отвечает только за декодирование в RGBA numpy array.
"""

import io
from pathlib import Path
from typing import Union

import numpy as np
from loguru import logger
from PIL import Image, ImageOps, UnidentifiedImageError

from ...config.settings import MAX_SOURCE_PIXELS, SUPPORTED_IMAGE_FORMATS
from ...contracts.d1_extraction_dto import SourceImage
from ..domain.exceptions import ImageDecodeError, ImageNotFoundError


class ImageFileReader:
    """
    Читает изображение (JPEG/PNG) и декодирует в SourceImage.

    ЦКП: RGBA массив с учётом EXIF-ориентации (фото с телефона).
    """

    @staticmethod
    def read(source: Union[Path, str, bytes], source_name: str = "unknown") -> SourceImage:
        """
        Читает файл или байты изображения.

        Args:
            source: Путь к файлу или сырые байты
            source_name: Имя для логов/метаданных (для байтов)

        Returns:
            SourceImage

        Raises:
            ImageNotFoundError: Если файл не найден
            ImageDecodeError: Если формат не JPEG/PNG или не удалось декодировать
        """
        if isinstance(source, (str, Path)):
            image_path = Path(source)
            if not image_path.exists():
                raise ImageNotFoundError(
                    message=f"Изображение не найдено: {image_path}",
                    component="ImageFileReader"
                )
            if image_path.suffix.lower() not in SUPPORTED_IMAGE_FORMATS:
                raise ImageDecodeError(
                    message=f"Неподдерживаемый формат: {image_path.suffix or image_path.name}",
                    component="ImageFileReader"
                )
            raw_bytes = image_path.read_bytes()
            source_name = image_path.name
        else:
            raw_bytes = source

        return ImageFileReader.decode(raw_bytes, source_name)

    @staticmethod
    def decode(raw_bytes: bytes, source_name: str = "unknown") -> SourceImage:
        """Декодирует байты в SourceImage (RGBA)."""
        if not raw_bytes:
            raise ImageDecodeError(
                message=f"Пустой файл изображения: {source_name}",
                component="ImageFileReader"
            )

        try:
            with Image.open(io.BytesIO(raw_bytes)) as pil_img:
                width, height = pil_img.size
                if width * height > MAX_SOURCE_PIXELS:
                    raise ImageDecodeError(
                        message=f"Изображение слишком большое: {width}x{height}",
                        component="ImageFileReader"
                    )
                pil_img = ImageOps.exif_transpose(pil_img)
                pixels = np.array(pil_img.convert("RGBA"), dtype=np.uint8)
        except ImageDecodeError:
            raise
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
            raise ImageDecodeError(
                message=f"Не удалось декодировать изображение: {source_name}",
                component="ImageFileReader",
                original_error=e
            )

        logger.debug(
            f"[ImageFileReader] Изображение прочитано: {source_name}, "
            f"размер: {pixels.shape[1]}x{pixels.shape[0]}"
        )

        return SourceImage(pixels=pixels, source_name=source_name)
