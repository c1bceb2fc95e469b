"""
Кличка животного.

1. label: "Name:" / "Registered Name" и OCR-искажения, до следующей метки
   или слов MALE/FEMALE
2. header_line: первые строки документа, первая строка с заглавным словом;
   строки с префиксом реестра ("KCTH PEDIGREE CERTIFICATE") пропускаются
"""

import re
from typing import List, Optional

from ...config.settings import NAME_FALLBACK_SCAN_LINES
from ..normalization.vocabulary import NAME_LABELS
from .base import ExtractionContext, FieldExtractor, Strategy
from .labels import find_label_value, is_label_line

UPPERCASE_RUN = re.compile(r"[A-Z]{3,}")


class NameExtractor(FieldExtractor):
    field_name = "name"

    def build_strategies(self) -> List[Strategy]:
        return [
            Strategy(priority=1, name="label", extract=self._from_label),
            Strategy(priority=2, name="header_line", extract=self._from_header),
        ]

    def _from_label(self, context: ExtractionContext) -> Optional[str]:
        return find_label_value(
            context.raw_text,
            NAME_LABELS,
            extra_stops=("MALE", "FEMALE"),
            not_after=(
                "owner", "owner's", "breeder", "breeder's",
                "sire", "sire's", "dam", "dam's",
            ),
        )

    def _from_header(self, context: ExtractionContext) -> Optional[str]:
        for line in context.non_blank_lines[:NAME_FALLBACK_SCAN_LINES]:
            if context.registry_marker_re.search(line) or is_label_line(line):
                continue
            if UPPERCASE_RUN.search(line):
                return " ".join(re.sub(r"[^A-Za-z]+", " ", line).split())
        return None
