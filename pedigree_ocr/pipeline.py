"""
Пайплайн распознавания сертификата родословной.

Фото -> ImageFileReader -> ImagePreprocessor -> OCR -> PedigreeParser.

Любая ошибка на любом этапе превращается в ExtractionOutcome с пустой
записью: регистрация животного никогда не блокируется из-за OCR,
пользователь просто заполняет форму вручную.
"""

import math
from pathlib import Path
from typing import Callable, Optional, Union

from loguru import logger

from .config.settings import (
    DEFAULT_PROFILE, PROGRESS_AFTER_PREPROCESSING, PROGRESS_COMPLETE
)
from .contracts.d1_extraction_dto import SourceImage
from .contracts.d2_pedigree_dto import ExtractionOutcome, PedigreeRecord
from .extraction.application.factory import ExtractionComponentFactory
from .extraction.domain.exceptions import ExtractionError
from .extraction.domain.interfaces import IImagePreprocessor, IOCRProvider
from .extraction.pre_ocr.image_file_reader import ImageFileReader
from .parsing.domain.exceptions import ParsingError
from .parsing.domain.interfaces import IPedigreeParser
from .parsing.parser.pedigree_parser import PedigreeParser
from .parsing.profiles.certificate_profile import CertificateProfile

# Прогресс для UI, проценты 0..100
ProgressCallback = Callable[[int], None]

ImageSource = Union[Path, str, bytes, SourceImage]


class PedigreeExtractionPipeline:
    """
    Оркестратор одной попытки распознавания.

    Синхронный: декодирование и OCR - блокирующие вызовы. Токена отмены
    нет; закрытая форма просто не забирает результат. Каждая попытка
    начинается с чистого листа: счётчик попыток увеличивается, а
    last_outcome сбрасывается до начала работы.
    """

    def __init__(
        self,
        ocr_provider: Optional[IOCRProvider] = None,
        preprocessor: Optional[IImagePreprocessor] = None,
        reader: Optional[ImageFileReader] = None,
        parser: Optional[IPedigreeParser] = None
    ):
        """
        Args:
            ocr_provider: Провайдер OCR (по умолчанию из settings.OCR_PROVIDER, лениво)
            preprocessor: Препроцессор (upscale + бинаризация)
            reader: Декодер изображений
            parser: Парсер текста (по умолчанию с профилем DEFAULT_PROFILE)
        """
        self._ocr_provider = ocr_provider
        self.preprocessor = preprocessor or ExtractionComponentFactory.create_image_preprocessor()
        self.reader = reader or ExtractionComponentFactory.create_image_reader()
        self.parser = parser or PedigreeParser(profile=CertificateProfile.load(DEFAULT_PROFILE))

        self.attempt_id = 0
        self.last_outcome: Optional[ExtractionOutcome] = None

        logger.info("[Pipeline] Инициализирован")

    @property
    def ocr_provider(self) -> IOCRProvider:
        """Провайдер OCR; по умолчанию создаётся при первом распознавании."""
        if self._ocr_provider is None:
            self._ocr_provider = ExtractionComponentFactory.create_ocr_provider()
        return self._ocr_provider

    def extract(
        self,
        source: ImageSource,
        on_progress: Optional[ProgressCallback] = None,
        source_name: str = "upload"
    ) -> ExtractionOutcome:
        """
        Распознаёт сертификат.

        Args:
            source: Путь к файлу, байты или уже декодированный SourceImage
            on_progress: Колбэк прогресса 0..100
            source_name: Имя для логов (для байтов)

        Returns:
            ExtractionOutcome: запись или ошибка с пустой записью; не бросает
        """
        self.attempt_id += 1
        attempt_id = self.attempt_id
        self.last_outcome = None
        report = on_progress or (lambda pct: None)

        raw_text = ""
        try:
            image = self._decode(source, source_name)
            logger.info(f"[Pipeline] Попытка {attempt_id}: {image.source_name} ({image.width}x{image.height})")

            preprocessed = self.preprocessor.preprocess(image)
            report(PROGRESS_AFTER_PREPROCESSING)
            logger.debug(f"[Pipeline] Препроцессинг: {', '.join(preprocessed.applied)}")

            ocr_result = self.ocr_provider.recognize(
                preprocessed, on_progress=lambda p: report(self.map_progress(p))
            )
            raw_text = ocr_result.full_text
            logger.debug(f"[Pipeline] OCR: {len(raw_text)} символов, {len(ocr_result.lines)} строк")

            record = self.parser.parse(raw_text)
            outcome = ExtractionOutcome(record=record, raw_text=raw_text, attempt_id=attempt_id)

        except ExtractionError as e:
            logger.warning(f"[Pipeline] Попытка {attempt_id}: переход к ручному вводу ({e})")
            outcome = self._failed(e, raw_text, attempt_id)
        except ParsingError as e:
            logger.warning(f"[Pipeline] Попытка {attempt_id}: ошибка разбора текста ({e})")
            outcome = self._failed(
                ExtractionError(message="Ошибка разбора текста", component="PedigreeParser", original_error=e),
                raw_text,
                attempt_id
            )
        except Exception as e:
            logger.error(f"[Pipeline] Попытка {attempt_id}: непредвиденная ошибка: {e}")
            outcome = self._failed(
                ExtractionError(message="Непредвиденная ошибка", component="Pipeline", original_error=e),
                raw_text,
                attempt_id
            )

        if attempt_id != self.attempt_id:
            # Устаревшая попытка: результат не сохраняем
            logger.debug(f"[Pipeline] Попытка {attempt_id} устарела")
            return outcome

        self.last_outcome = outcome
        if outcome.succeeded:
            logger.info(
                f"[Pipeline] Попытка {attempt_id} завершена: "
                f"{len(outcome.record.sources)} полей распознано"
            )
        return outcome

    def parse_text(self, raw_text: str) -> ExtractionOutcome:
        """Только разбор уже распознанного текста (без изображения и OCR)."""
        self.attempt_id += 1
        self.last_outcome = None
        try:
            record = self.parser.parse(raw_text)
            outcome = ExtractionOutcome(record=record, raw_text=raw_text, attempt_id=self.attempt_id)
        except ParsingError as e:
            logger.warning(f"[Pipeline] Ошибка разбора текста: {e}")
            outcome = self._failed(
                ExtractionError(message="Ошибка разбора текста", component="PedigreeParser", original_error=e),
                raw_text,
                self.attempt_id
            )
        self.last_outcome = outcome
        return outcome

    @staticmethod
    def map_progress(fraction: float) -> int:
        """Прогресс OCR [0, 1] -> 10..100 (первые 10% - препроцессинг)."""
        fraction = min(max(fraction, 0.0), 1.0)
        span = PROGRESS_COMPLETE - PROGRESS_AFTER_PREPROCESSING
        return PROGRESS_AFTER_PREPROCESSING + math.floor(fraction * span)

    def _decode(self, source: ImageSource, source_name: str) -> SourceImage:
        if isinstance(source, SourceImage):
            return source
        return self.reader.read(source, source_name)

    @staticmethod
    def _failed(error: ExtractionError, raw_text: str, attempt_id: int) -> ExtractionOutcome:
        return ExtractionOutcome(
            record=PedigreeRecord(),
            raw_text=raw_text,
            error=error,
            attempt_id=attempt_id
        )
