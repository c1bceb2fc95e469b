"""
Порода.

1. label: "Breed:" (или OCR-обрывок "Bo:"), значение канонизируется
   по ключевым словам профиля
2. keyword: ключевое слово породы в любом месте текста
"""

import re
from typing import List, Optional

from ..normalization.vocabulary import BREED_LABELS
from .base import ExtractionContext, FieldExtractor, Strategy
from .labels import find_label_value


def canonical_breed(value: str, context: ExtractionContext) -> Optional[str]:
    """Каноническое название, если в значении есть ключевое слово породы."""
    for keyword, canonical in context.profile.breed_keywords.items():
        if re.search(rf"(?<![A-Za-z]){re.escape(keyword)}(?![A-Za-z])", value, re.IGNORECASE):
            return canonical
    return None


class BreedExtractor(FieldExtractor):
    field_name = "breed"

    def build_strategies(self) -> List[Strategy]:
        return [
            Strategy(priority=1, name="label", extract=self._from_label),
            Strategy(priority=2, name="keyword", extract=self._from_keyword),
        ]

    def _from_label(self, context: ExtractionContext) -> Optional[str]:
        value = find_label_value(context.raw_text, BREED_LABELS)
        if value is None:
            # "Breed" после рамки часто читается как "Bo", но только с разделителем
            value = find_label_value(context.raw_text, ("Bo",), require_separator=True)
        if value is None:
            return None
        return canonical_breed(value, context) or value

    def _from_keyword(self, context: ExtractionContext) -> Optional[str]:
        return canonical_breed(context.raw_text, context)
