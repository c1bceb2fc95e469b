"""
Окрас.

1. label: "Color:" / "Colour:" до следующей метки
2. canonical_color: первый канонический окрас в тексте
"""

import re
from typing import List, Optional

from ..normalization.vocabulary import COLOR_LABELS
from .base import ExtractionContext, FieldExtractor, Strategy
from .labels import find_label_value


def canonical_color_re(context: ExtractionContext) -> re.Pattern:
    colors = sorted(context.profile.canonical_colors, key=len, reverse=True)
    alternation = "|".join(r"\s+".join(re.escape(p) for p in c.split()) for c in colors)
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)


class ColorExtractor(FieldExtractor):
    field_name = "color"

    def build_strategies(self) -> List[Strategy]:
        return [
            Strategy(priority=1, name="label", extract=self._from_label),
            Strategy(priority=2, name="canonical_color", extract=self._from_canonical),
        ]

    def _from_label(self, context: ExtractionContext) -> Optional[str]:
        return find_label_value(context.raw_text, COLOR_LABELS)

    def _from_canonical(self, context: ExtractionContext) -> Optional[str]:
        match = canonical_color_re(context).search(context.raw_text)
        if match is None:
            return None
        # Написание профиля, а не OCR ("FAWN" -> "Fawn")
        found = " ".join(match.group(0).split()).casefold()
        for color in context.profile.canonical_colors:
            if color.casefold() == found:
                return color
        return match.group(0)
