"""
TextNormalizer: очистка сырого текста OCR.

Намеренно узкая: удаляет только токены, которые эмпирически засоряют
сертификаты, двоеточия и лишние пробелы. Не исправляет орфографию.
"""

import re
from typing import Iterable, Optional, TYPE_CHECKING

from .vocabulary import NOISE_TOKENS, PARENT_NAME_NOISE_PREFIXES

if TYPE_CHECKING:
    from ..profiles.certificate_profile import CertificateProfile


class TextNormalizer:
    """
    clean() - для любого значения поля.
    clean_parent_name() - дополнительно срезает мусорные префиксы
    в начале кличек родителей (эти строки шумнее одиночных меток).
    """

    def __init__(
        self,
        noise_tokens: Iterable[str] = NOISE_TOKENS,
        parent_noise_prefixes: Iterable[str] = PARENT_NAME_NOISE_PREFIXES
    ):
        self.noise_tokens = tuple(noise_tokens)
        self.parent_noise_prefixes = tuple(parent_noise_prefixes)

        # Токен только целиком (слева и справа пробел или край строки) и с учётом
        # регистра: "SE" заглавными бывает частью клички
        if self.noise_tokens:
            alternation = "|".join(
                re.escape(t) for t in sorted(self.noise_tokens, key=len, reverse=True)
            )
            self._noise_re: Optional[re.Pattern] = re.compile(
                rf"(?<!\S)(?:{alternation})(?!\S)"
            )
        else:
            self._noise_re = None

        if self.parent_noise_prefixes:
            alternation = "|".join(re.escape(p) for p in self.parent_noise_prefixes)
            self._prefix_re: Optional[re.Pattern] = re.compile(rf"^(?:(?:{alternation})\s+)+")
        else:
            self._prefix_re = None

    @classmethod
    def from_profile(cls, profile: "CertificateProfile") -> "TextNormalizer":
        return cls(
            noise_tokens=profile.noise_tokens,
            parent_noise_prefixes=profile.parent_noise_prefixes,
        )

    def clean(self, raw: Optional[str]) -> str:
        """Убирает двоеточия и шумовые токены, схлопывает пробелы."""
        if not raw:
            return ""
        text = raw.replace(":", " ")
        if self._noise_re is not None:
            text = self._noise_re.sub(" ", text)
        return " ".join(text.split())

    def clean_parent_name(self, raw: Optional[str]) -> str:
        """clean() + срез мусорных префиксов и ведущей пунктуации."""
        text = self.clean(raw)
        text = re.sub(r"^[^A-Za-z0-9]+", "", text)
        if self._prefix_re is not None:
            text = self._prefix_re.sub("", text)
        return text.strip()
