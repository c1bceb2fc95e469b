"""
Профиль сертификата: словари конкретного семейства документов.

Профиль загружается из YAML (parsing/profiles/<code>.yaml) и кешируется.
Отсутствующие в YAML списки берутся из normalization/vocabulary.py.
"""

from pathlib import Path
from typing import Dict, List, Optional

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...config.settings import PROFILES_DIR
from ..domain.exceptions import ParsingConfigurationError
from ..normalization import vocabulary

_PROFILE_CACHE: Dict[str, "CertificateProfile"] = {}


class CertificateProfile(BaseModel):
    """Словари одного семейства сертификатов."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Код профиля (kcth)")
    registry_prefixes: List[str] = Field(
        default_factory=lambda: list(vocabulary.REGISTRY_PREFIXES),
        description="Буквенные префиксы регистрационных номеров"
    )
    breed_keywords: Dict[str, str] = Field(
        default_factory=lambda: dict(vocabulary.BREED_KEYWORDS),
        description="Ключевое слово породы -> каноническое название"
    )
    canonical_colors: List[str] = Field(
        default_factory=lambda: list(vocabulary.CANONICAL_COLORS)
    )
    female_keywords: List[str] = Field(default_factory=lambda: list(vocabulary.FEMALE_KEYWORDS))
    male_keywords: List[str] = Field(default_factory=lambda: list(vocabulary.MALE_KEYWORDS))
    honorifics: List[str] = Field(default_factory=lambda: list(vocabulary.HONORIFICS))
    noise_tokens: List[str] = Field(default_factory=lambda: list(vocabulary.NOISE_TOKENS))
    parent_noise_prefixes: List[str] = Field(
        default_factory=lambda: list(vocabulary.PARENT_NAME_NOISE_PREFIXES)
    )

    @field_validator("registry_prefixes")
    @classmethod
    def validate_registry_prefixes(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("registry_prefixes не может быть пустым")
        for prefix in v:
            if not prefix.isalpha():
                raise ValueError(f"Префикс реестра должен состоять из букв: {prefix!r}")
        return [p.upper() for p in v]

    @field_validator("breed_keywords")
    @classmethod
    def validate_breed_keywords(cls, v: Dict[str, str]) -> Dict[str, str]:
        return {k.upper(): canonical for k, canonical in v.items()}

    @classmethod
    def default(cls) -> "CertificateProfile":
        """Профиль только из констант vocabulary, без чтения файлов."""
        return cls(code="default")

    @classmethod
    def load(cls, code: str, profiles_dir: Optional[Path] = None) -> "CertificateProfile":
        """
        Загружает профиль из YAML.

        Raises:
            ParsingConfigurationError: файл не найден или невалиден
        """
        cache_key = f"{profiles_dir or PROFILES_DIR}:{code}"
        if cache_key in _PROFILE_CACHE:
            return _PROFILE_CACHE[cache_key]

        config_file = Path(profiles_dir or PROFILES_DIR) / f"{code}.yaml"
        if not config_file.exists():
            raise ParsingConfigurationError(
                message=f"Профиль {code!r} не найден: {config_file}",
                component="CertificateProfile"
            )

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            data["code"] = code
            profile = cls(**data)
        except (yaml.YAMLError, ValidationError, TypeError) as e:
            raise ParsingConfigurationError(
                message=f"Некорректный профиль {code!r}: {config_file}",
                component="CertificateProfile",
                original_error=e
            )

        _PROFILE_CACHE[cache_key] = profile
        logger.debug(
            f"[CertificateProfile] Загружен {code}: "
            f"{len(profile.registry_prefixes)} префиксов реестра, "
            f"{len(profile.breed_keywords)} пород, "
            f"{len(profile.noise_tokens)} шумовых токенов"
        )
        return profile

    @classmethod
    def clear_cache(cls) -> None:
        _PROFILE_CACHE.clear()
