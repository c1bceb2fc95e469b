"""
ImagePreprocessor: подготовка фото сертификата к OCR.

1. Увеличение в UPSCALE_FACTOR раз (выше видимый DPI)
2. Grayscale как среднее трёх каналов
3. Бинаризация по фиксированному порогу

Бинаризация убирает цветные водяные знаки, печати и градиенты фона,
но безвозвратно теряет полутона.
"""

from loguru import logger

from ...config.settings import UPSCALE_FACTOR, BINARIZATION_THRESHOLD
from ...contracts.d1_extraction_dto import SourceImage, PreprocessedImage
from ..domain.exceptions import ImageProcessingError
from ..domain.interfaces import IImagePreprocessor
from .infrastructure.filters import (
    apply_upscale, apply_average_grayscale, apply_threshold, binary_to_rgba
)


class ImagePreprocessor(IImagePreprocessor):
    """
    Препроцессор: upscale -> average grayscale -> threshold.

    Чистая функция от входа: одинаковый SourceImage -> побайтно
    одинаковый PreprocessedImage.
    """

    def __init__(
        self,
        upscale_factor: float = UPSCALE_FACTOR,
        threshold: int = BINARIZATION_THRESHOLD
    ):
        if upscale_factor <= 0:
            raise ValueError(f"upscale_factor должен быть > 0, получено: {upscale_factor}")
        if not 0 <= threshold <= 255:
            raise ValueError(f"threshold должен быть в [0, 255], получено: {threshold}")

        self.upscale_factor = upscale_factor
        self.threshold = threshold
        logger.debug(
            f"[ImagePreprocessor] Инициализирован "
            f"(upscale={upscale_factor}, threshold={threshold})"
        )

    def preprocess(self, image: SourceImage) -> PreprocessedImage:
        pixels = image.pixels
        if pixels.ndim != 3 or pixels.shape[2] != 4 or pixels.size == 0:
            raise ImageProcessingError(
                message=f"Ожидался RGBA массив (H, W, 4), получено: {pixels.shape}",
                component="ImagePreprocessor"
            )

        upscaled = apply_upscale(pixels, self.upscale_factor)
        gray = apply_average_grayscale(upscaled)
        binary = apply_threshold(gray, self.threshold)
        result = binary_to_rgba(binary)
        result.setflags(write=False)

        logger.debug(
            f"[ImagePreprocessor] {image.source_name}: "
            f"{image.width}x{image.height} -> {result.shape[1]}x{result.shape[0]}, "
            f"белых пикселей {float((binary == 255).mean()):.1%}"
        )

        return PreprocessedImage(
            pixels=result,
            source_width=image.width,
            source_height=image.height,
            source_name=image.source_name,
            applied=["upscale", "average_grayscale", "threshold"],
        )
