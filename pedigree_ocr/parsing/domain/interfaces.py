"""
Интерфейсы (абстрактные классы) для домена Parsing.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ...contracts.d2_pedigree_dto import ExtractionCandidate, PedigreeRecord

if TYPE_CHECKING:
    from ..fields.base import ExtractionContext


class IFieldExtractor(ABC):
    """Экстрактор одного поля записи."""

    field_name: str = ""

    @abstractmethod
    def extract(self, context: "ExtractionContext") -> ExtractionCandidate:
        """
        Возвращает первого успешного кандидата или ExtractionCandidate.missing().

        Никогда не бросает исключение из-за отсутствия поля.
        """
        pass


class IPedigreeParser(ABC):
    """Парсер: сырой текст OCR -> PedigreeRecord."""

    @abstractmethod
    def parse(self, raw_text: str) -> PedigreeRecord:
        pass
