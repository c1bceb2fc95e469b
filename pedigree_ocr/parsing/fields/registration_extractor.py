"""
Регистрационный номер.

1. registry_prefix: префикс реестра профиля + код ("KCTH 2024-0091")
2. reg_label: "Reg. No." / "Registration No." + код с цифрой
"""

import re
from typing import List, Optional

from .base import ExtractionContext, FieldExtractor, Strategy
from .labels import normalize_registration

REG_NO_LABEL = re.compile(
    r"(?<![A-Za-z])Reg(?:istration)?\.?[ \t]*(?:No|Number|#)\.?[ \t]*[:.\-#]?[ \t]*"
    r"(?P<value>(?=[A-Z0-9\-/]*\d)[A-Z0-9][A-Z0-9\-/]*)",
    re.IGNORECASE,
)


class RegistrationExtractor(FieldExtractor):
    field_name = "registration_number"

    def build_strategies(self) -> List[Strategy]:
        return [
            Strategy(priority=1, name="registry_prefix", extract=self._from_registry),
            Strategy(priority=2, name="reg_label", extract=self._from_label),
        ]

    def _from_registry(self, context: ExtractionContext) -> Optional[str]:
        match = context.registry_re.search(context.raw_text)
        return normalize_registration(match.group(0)) if match else None

    def _from_label(self, context: ExtractionContext) -> Optional[str]:
        match = REG_NO_LABEL.search(context.raw_text)
        return normalize_registration(match.group("value")) if match else None
