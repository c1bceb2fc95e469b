"""
Главный парсер домена Parsing: сырой текст OCR -> PedigreeRecord.

Экстракторы запускаются последовательно, каждый видит уже найденные
поля через ExtractionContext.known. Запись собирается один раз в конце.
"""

from typing import Dict, Optional, Sequence

from loguru import logger
from pydantic import ValidationError

from ...contracts.d2_pedigree_dto import Gender, PedigreeRecord, same_text
from ..domain.exceptions import FieldExtractionError
from ..domain.interfaces import IFieldExtractor, IPedigreeParser
from ..fields import DEFAULT_EXTRACTORS, ExtractionContext
from ..normalization.text_normalizer import TextNormalizer
from ..profiles.certificate_profile import CertificateProfile


class PedigreeParser(IPedigreeParser):
    """
    Главный парсер сертификатов родословной.

    Отсутствие поля - нормальный исход: parse() на тексте без единой
    метки возвращает пустую запись, а не исключение.
    """

    def __init__(
        self,
        profile: Optional[CertificateProfile] = None,
        normalizer: Optional[TextNormalizer] = None,
        extractors: Optional[Sequence[IFieldExtractor]] = None
    ):
        self.profile = profile or CertificateProfile.default()
        self.normalizer = normalizer or TextNormalizer.from_profile(self.profile)
        self.extractors = list(extractors) if extractors is not None else [
            extractor_cls() for extractor_cls in DEFAULT_EXTRACTORS
        ]

    def parse(self, raw_text: str) -> PedigreeRecord:
        """
        Args:
            raw_text: Текст OCR с сохранёнными переносами строк

        Returns:
            PedigreeRecord: Все найденные поля и стратегии-источники

        Raises:
            FieldExtractionError: найденные значения не собрались в запись
        """
        context = ExtractionContext.build(raw_text, self.profile, self.normalizer)
        values: Dict[str, str] = {}
        sources: Dict[str, str] = {}

        for extractor in self.extractors:
            candidate = extractor.extract(context)
            if not candidate.found:
                continue
            values[extractor.field_name] = candidate.value
            sources[extractor.field_name] = candidate.strategy
            context = context.with_known(extractor.field_name, candidate.value)

        self._resolve_parents(values, sources)

        if "gender" in values:
            values["gender"] = Gender(values["gender"])

        try:
            record = PedigreeRecord(**values, sources=sources)
        except ValidationError as e:
            raise FieldExtractionError(
                message="Найденные поля не собрались в PedigreeRecord",
                component="PedigreeParser",
                original_error=e
            )

        logger.info(
            f"[PedigreeParser] Найдено полей: {len(sources)} из {len(self.extractors)} "
            f"({', '.join(sources) or 'нет'})"
        )
        return record

    @staticmethod
    def _resolve_parents(values: Dict[str, str], sources: Dict[str, str]) -> None:
        """Одинаковые sire и dam - одно неразрешённое имя, а не два родителя."""
        sire = values.get("sire_name")
        if not same_text(sire, values.get("dam_name")):
            return

        logger.warning(f"[PedigreeParser] sire и dam совпали ({sire!r}), оставляем для ручного выбора")
        values.pop("dam_name")
        values["unresolved_parent_name"] = values.pop("sire_name")
        sources["unresolved_parent_name"] = f"{sources.pop('sire_name')}/{sources.pop('dam_name')}"
