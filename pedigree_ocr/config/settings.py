"""
Настройки проекта Pedigree OCR.

Все значения можно переопределить через переменные окружения,
если они помечены os.getenv.
"""

import os
from pathlib import Path

# =============================================================================
# ПУТИ ПРОЕКТА
# =============================================================================
PACKAGE_ROOT = Path(__file__).parent.parent
PROFILES_DIR = PACKAGE_ROOT / "parsing" / "profiles"

# =============================================================================
# НАСТРОЙКИ PRE-OCR
# =============================================================================
# Поддерживаемые форматы изображений
SUPPORTED_IMAGE_FORMATS = [".jpg", ".jpeg", ".png"]

# Линейный коэффициент увеличения (выше видимый DPI -> лучше OCR на сертификатах)
UPSCALE_FACTOR = 1.5

# Порог бинаризации по средней яркости (0-255): > порога -> белый, иначе чёрный
BINARIZATION_THRESHOLD = 160

# Защита от "бомб" декомпрессии (пикселей в исходнике)
MAX_SOURCE_PIXELS = 60_000_000

# =============================================================================
# НАСТРОЙКИ OCR
# =============================================================================
# Провайдер: "tesseract" | "google_vision"
OCR_PROVIDER = os.getenv("PEDIGREE_OCR_PROVIDER", "tesseract")

# Tesseract: один проход, латиница
TESSERACT_LANGUAGE = "eng"
TESSERACT_CMD = os.getenv("TESSERACT_CMD", "")
OCR_TIMEOUT_SECONDS = int(os.getenv("PEDIGREE_OCR_TIMEOUT", "60"))

# Google Cloud Vision
GOOGLE_APPLICATION_CREDENTIALS = os.getenv("GOOGLE_APPLICATION_CREDENTIALS", "")
OCR_LANGUAGE_HINTS = ["en"]

# =============================================================================
# ПРОГРЕСС
# =============================================================================
# После препроцессинга; прогресс OCR [0, 1] линейно ложится на [10, 100]
PROGRESS_AFTER_PREPROCESSING = 10
PROGRESS_COMPLETE = 100

# =============================================================================
# НАСТРОЙКИ EXTRACTION
# =============================================================================
# Сколько первых строк смотреть при fallback-поиске клички
NAME_FALLBACK_SCAN_LINES = 5

# Допустимая длина значения поля (после очистки)
MIN_FIELD_LENGTH = 2
MAX_FIELD_LENGTH = 60

# Дата рождения: год не раньше этого и не позже текущего
MIN_BIRTH_YEAR = 1950

# Профиль сертификата по умолчанию (parsing/profiles/<code>.yaml)
DEFAULT_PROFILE = os.getenv("PEDIGREE_PROFILE", "kcth")

# =============================================================================
# ЛОГИРОВАНИЕ
# =============================================================================
LOG_LEVEL = os.getenv("PEDIGREE_LOG_LEVEL", "INFO")

# =============================================================================
# ПРОВЕРКА КОНФИГУРАЦИИ
# =============================================================================
KNOWN_OCR_PROVIDERS = ("tesseract", "google_vision")


def validate_config(provider: str = OCR_PROVIDER):
    """Проверяет корректность конфигурации."""
    errors = []

    if provider not in KNOWN_OCR_PROVIDERS:
        errors.append(
            f"Неизвестный OCR провайдер: {provider!r}. "
            f"Допустимые значения: {', '.join(KNOWN_OCR_PROVIDERS)}"
        )

    if provider == "google_vision":
        if not GOOGLE_APPLICATION_CREDENTIALS:
            errors.append(
                "GOOGLE_APPLICATION_CREDENTIALS не указан!\n"
                "Укажите путь к JSON-ключу через переменную окружения."
            )
        elif not Path(GOOGLE_APPLICATION_CREDENTIALS).exists():
            errors.append(
                f"Файл credentials не найден: {GOOGLE_APPLICATION_CREDENTIALS}"
            )

    if errors:
        raise ValueError("\n".join(errors))

    return True
