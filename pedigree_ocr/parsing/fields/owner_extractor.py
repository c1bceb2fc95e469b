"""
Владелец.

1. label: "Owner:" до конца строки, без хвостового номера (телефон, индекс)
2. honorific: "Mr." / "Mrs." / "Miss" + слова из букв
"""

import re
from typing import List, Optional

from .base import ExtractionContext, FieldExtractor, Strategy
from .labels import find_label_value

OWNER_LABELS_FULL = ("Owner's Name", "Owner Name", "Owner")
TRAILING_NUMBER = re.compile(r"[ \t]+[\d\-/ ]*\d[ \t]*$")


def honorific_re(context: ExtractionContext) -> re.Pattern:
    parts = []
    for title in sorted(context.profile.honorifics, key=len, reverse=True):
        tail = r"(?![A-Za-z])" if title[-1].isalpha() else ""
        parts.append(re.escape(title) + tail)
    return re.compile(
        rf"(?<![A-Za-z])(?:{'|'.join(parts)})[ \t]*[A-Za-z][A-Za-z'\-]*(?:[ \t]+[A-Za-z][A-Za-z'\-]*)*"
    )


class OwnerExtractor(FieldExtractor):
    field_name = "owner_name"

    def build_strategies(self) -> List[Strategy]:
        return [
            Strategy(priority=1, name="label", extract=self._from_label),
            Strategy(priority=2, name="honorific", extract=self._from_honorific),
        ]

    def _from_label(self, context: ExtractionContext) -> Optional[str]:
        value = find_label_value(context.raw_text, OWNER_LABELS_FULL, to_line_end=True)
        if value is None:
            return None
        return TRAILING_NUMBER.sub("", value)

    def _from_honorific(self, context: ExtractionContext) -> Optional[str]:
        match = honorific_re(context).search(context.raw_text)
        return match.group(0) if match else None
