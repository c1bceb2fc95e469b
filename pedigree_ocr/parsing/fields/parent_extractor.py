"""
Клички родителей.

Sire:
1. label: "Sire:" до конца строки или следующей метки
2. line_above_registry: строка над чужим номером реестра
   (не над номером самого животного)

Dam (структурная эвристика первой, метка во втором приоритете):
1. line_above_date_color: строка над строкой "дата d/m/yyyy + окрас",
   если она не совпадает с уже найденным sire
2. label: "Dam:"

Позиционное допущение dam рассчитано на одно семейство макетов
(KCTH); на других макетах строка над "датой и окрасом" может оказаться
чем угодно, поэтому всё равно проверяет человек.
"""

import re
from typing import List, Optional

from ...contracts.d2_pedigree_dto import same_text
from ..normalization.vocabulary import DAM_LABELS, SIRE_LABELS
from .base import ExtractionContext, FieldExtractor, Strategy
from .color_extractor import canonical_color_re
from .labels import find_label_value, is_label_line, registration_key

NUMERIC_DATE = re.compile(r"(?<!\d)\d{1,2}\s*[/.\-]\s*\d{1,2}\s*[/.\-]\s*\d{4}(?!\d)")


class ParentExtractor(FieldExtractor):
    """Общая чистка кличек родителей."""

    def clean_value(self, value: str, context: ExtractionContext) -> str:
        # Номер реестра родителя часто стоит в той же строке
        value = context.registry_re.sub(" ", value)
        return context.normalizer.clean_parent_name(value)

    @staticmethod
    def _line_above(context: ExtractionContext, index: int) -> Optional[str]:
        if index == 0:
            return None
        candidate = context.non_blank_lines[index - 1]
        if is_label_line(candidate):
            return None
        return candidate


class SireExtractor(ParentExtractor):
    field_name = "sire_name"

    def build_strategies(self) -> List[Strategy]:
        return [
            Strategy(priority=1, name="label", extract=self._from_label),
            Strategy(priority=2, name="line_above_registry", extract=self._above_registry),
        ]

    def _from_label(self, context: ExtractionContext) -> Optional[str]:
        return find_label_value(context.raw_text, SIRE_LABELS)

    def _above_registry(self, context: ExtractionContext) -> Optional[str]:
        own = registration_key(context.known.get("registration_number", ""))
        for index, line in enumerate(context.non_blank_lines):
            match = context.registry_re.search(line)
            if match is None or (own and registration_key(match.group(0)) == own):
                continue
            candidate = self._line_above(context, index)
            if candidate and not context.registry_re.search(candidate):
                return candidate
        return None


class DamExtractor(ParentExtractor):
    field_name = "dam_name"

    def build_strategies(self) -> List[Strategy]:
        return [
            Strategy(priority=1, name="line_above_date_color", extract=self._above_date_color),
            Strategy(priority=2, name="label", extract=self._from_label),
        ]

    def _above_date_color(self, context: ExtractionContext) -> Optional[str]:
        color_re = canonical_color_re(context)
        sire = context.known.get("sire_name")
        for index, line in enumerate(context.non_blank_lines):
            if not (NUMERIC_DATE.search(line) and color_re.search(line)):
                continue
            candidate = self._line_above(context, index)
            if candidate is None:
                continue
            if same_text(self.clean_value(candidate, context), sire):
                continue
            return candidate
        return None

    def _from_label(self, context: ExtractionContext) -> Optional[str]:
        return find_label_value(context.raw_text, DAM_LABELS)
