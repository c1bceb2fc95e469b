"""
Каркас экстракторов полей.

Каждый экстрактор - упорядоченный список стратегий (priority, applies, extract).
Стратегии пробуются по приоритету; первая, давшая непустое значение
допустимой длины, побеждает, остальные не запускаются. Слияния и
голосования между стратегиями нет: каждое поле всё равно проверяет человек.
"""

import re
from abc import abstractmethod
from dataclasses import dataclass, field, replace
from functools import cached_property
from typing import Callable, Dict, List, Optional

from loguru import logger

from ...config.settings import MIN_FIELD_LENGTH, MAX_FIELD_LENGTH
from ...contracts.d2_pedigree_dto import ExtractionCandidate
from ..domain.interfaces import IFieldExtractor
from ..normalization.text_normalizer import TextNormalizer
from ..profiles.certificate_profile import CertificateProfile
from .labels import is_label, registry_marker_pattern, registry_pattern


@dataclass(frozen=True)
class ExtractionContext:
    """
    Всё, что видят стратегии: сырой текст, профиль, нормализатор и
    уже найденные поля (номер реестра нужен поиску sire, sire - поиску dam).
    """
    raw_text: str
    profile: CertificateProfile
    normalizer: TextNormalizer
    known: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        raw_text: str,
        profile: Optional[CertificateProfile] = None,
        normalizer: Optional[TextNormalizer] = None
    ) -> "ExtractionContext":
        profile = profile or CertificateProfile.default()
        return cls(
            raw_text=raw_text or "",
            profile=profile,
            normalizer=normalizer or TextNormalizer.from_profile(profile),
        )

    @cached_property
    def lines(self) -> List[str]:
        return self.raw_text.splitlines()

    @cached_property
    def non_blank_lines(self) -> List[str]:
        return [line.strip() for line in self.lines if line.strip()]

    @cached_property
    def registry_re(self) -> re.Pattern:
        return registry_pattern(self.profile.registry_prefixes)

    @cached_property
    def registry_marker_re(self) -> re.Pattern:
        return registry_marker_pattern(self.profile.registry_prefixes)

    def with_known(self, field_name: str, value: str) -> "ExtractionContext":
        """Новый контекст с добавленным полем (исходный не меняется)."""
        return replace(self, known={**self.known, field_name: value})


def _always(context: ExtractionContext) -> bool:
    return True


@dataclass(frozen=True)
class Strategy:
    """Одна эвристика поля."""
    priority: int
    name: str
    extract: Callable[[ExtractionContext], Optional[str]]
    applies: Callable[[ExtractionContext], bool] = _always


class FieldExtractor(IFieldExtractor):
    """
    Базовый экстрактор: прогоняет стратегии по приоритету.

    Наследники задают field_name и build_strategies(); при необходимости
    переопределяют clean_value() и is_valid().
    """

    field_name = ""

    def __init__(self) -> None:
        self._strategies = sorted(self.build_strategies(), key=lambda s: s.priority)

    @abstractmethod
    def build_strategies(self) -> List[Strategy]:
        pass

    @property
    def strategies(self) -> List[Strategy]:
        return list(self._strategies)

    def clean_value(self, value: str, context: ExtractionContext) -> str:
        return context.normalizer.clean(value)

    def is_valid(self, value: str) -> bool:
        return MIN_FIELD_LENGTH <= len(value) <= MAX_FIELD_LENGTH and not is_label(value)

    def extract(self, context: ExtractionContext) -> ExtractionCandidate:
        tag = type(self).__name__

        for strategy in self._strategies:
            if not strategy.applies(context):
                logger.trace(f"[{tag}] {strategy.name}: неприменима")
                continue

            try:
                raw_value = strategy.extract(context)
            except (ValueError, IndexError, KeyError, TypeError) as e:
                logger.warning(f"[{tag}] Стратегия {strategy.name} упала: {e}")
                continue

            if not raw_value:
                logger.trace(f"[{tag}] {strategy.name}: промах")
                continue

            value = self.clean_value(raw_value, context)
            if not self.is_valid(value):
                logger.trace(f"[{tag}] {strategy.name}: отклонено {value!r}")
                continue

            logger.debug(f"[{tag}] {self.field_name} = {value!r} (стратегия: {strategy.name})")
            return ExtractionCandidate(value=value, strategy=strategy.name)

        logger.trace(f"[{tag}] {self.field_name} не найдено")
        return ExtractionCandidate.missing()
