"""
Pre-OCR Infrastructure: Фильтры и операции обработки изображений.

Утилиты низкого уровня, из которых собирается ImagePreprocessor.
"""

import cv2
import numpy as np
import numpy.typing as npt


def apply_upscale(image: npt.NDArray[np.uint8], factor: float) -> npt.NDArray[np.uint8]:
    """
    Линейное увеличение (bilinear).

    Args:
        image: RGBA изображение (H, W, 4)
        factor: Коэффициент увеличения по каждой оси
    """
    h, w = image.shape[:2]
    new_w = max(1, int(w * factor))
    new_h = max(1, int(h * factor))
    return cv2.resize(image, (new_w, new_h), interpolation=cv2.INTER_LINEAR)  # type: ignore[return-value]


def apply_average_grayscale(image: npt.NDArray[np.uint8]) -> npt.NDArray[np.float32]:
    """
    Grayscale как среднее арифметическое R, G, B (без весов яркости).

    Alpha-канал игнорируется.
    """
    if len(image.shape) == 2:
        return image.astype(np.float32)
    return image[:, :, :3].astype(np.float32).mean(axis=2)


def apply_threshold(gray: npt.NDArray[np.float32], threshold: int) -> npt.NDArray[np.uint8]:
    """
    Бинаризация: строго выше порога -> 255, иначе 0.
    """
    return np.where(gray > threshold, 255, 0).astype(np.uint8)


def binary_to_rgba(binary: npt.NDArray[np.uint8]) -> npt.NDArray[np.uint8]:
    """Разворачивает бинарную маску в RGBA (alpha = 255)."""
    alpha = np.full_like(binary, 255)
    return np.dstack([binary, binary, binary, alpha])
