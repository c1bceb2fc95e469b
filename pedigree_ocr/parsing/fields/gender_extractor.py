"""
Пол: ключевые слова самки ("Female", "Bitch") важнее слов самца.

"Dog" в названии породы ("Thai Ridgeback Dog") полом не считается.
"""

import re
from typing import List, Optional, Sequence

from ...contracts.d2_pedigree_dto import Gender
from .base import ExtractionContext, FieldExtractor, Strategy


def _keyword_re(keywords: Sequence[str]) -> re.Pattern:
    alternation = "|".join(re.escape(k) for k in sorted(keywords, key=len, reverse=True))
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)


class GenderExtractor(FieldExtractor):
    field_name = "gender"

    def build_strategies(self) -> List[Strategy]:
        return [
            Strategy(priority=1, name="female_keyword", extract=self._female),
            Strategy(priority=2, name="male_keyword", extract=self._male),
        ]

    def _female(self, context: ExtractionContext) -> Optional[str]:
        if _keyword_re(context.profile.female_keywords).search(context.raw_text):
            return Gender.FEMALE.value
        return None

    def _male(self, context: ExtractionContext) -> Optional[str]:
        text = self._without_breed_names(context)
        if _keyword_re(context.profile.male_keywords).search(text):
            return Gender.MALE.value
        return None

    @staticmethod
    def _without_breed_names(context: ExtractionContext) -> str:
        text = context.raw_text
        for keyword in context.profile.breed_keywords:
            text = re.sub(
                rf"\b{re.escape(keyword)}\s+Dogs?\b", " ", text, flags=re.IGNORECASE
            )
        return text
