"""
DTO контракт: D2 (Parsing) -> форма регистрации

Структурированная запись родословной. Все поля опциональны: отсутствие
значения - нормальный и частый исход, форма всегда показывает поле для
ручного ввода.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, Optional, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

if TYPE_CHECKING:
    from ..extraction.domain.exceptions import ExtractionError


class Gender(str, Enum):
    """Пол животного."""
    MALE = "male"
    FEMALE = "female"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ExtractionCandidate:
    """
    Значение поля и имя стратегии, которая его нашла.

    Экстрактор возвращает не больше одного кандидата: первая успешная
    стратегия в порядке приоритета.
    """
    value: Optional[str]
    strategy: Optional[str] = None

    @property
    def found(self) -> bool:
        return bool(self.value)

    @classmethod
    def missing(cls) -> "ExtractionCandidate":
        return cls(value=None, strategy=None)


def same_text(a: Optional[str], b: Optional[str]) -> bool:
    """Совпадение без учёта регистра и пробелов; пустые значения не совпадают."""
    if not a or not b:
        return False
    return " ".join(a.split()).casefold() == " ".join(b.split()).casefold()


class PedigreeRecord(BaseModel):
    """
    Итог распознавания сертификата родословной.

    Инварианты:
    - birth_date, если есть, строго yyyy-mm-dd и реальная календарная дата
    - sire_name и dam_name, если оба есть, текстуально различны
    """

    name: Optional[str] = Field(None, description="Кличка")
    breed: Optional[str] = Field(None, description="Порода (каноническое название)")
    gender: Optional[Gender] = Field(None, description="Пол")
    color: Optional[str] = Field(None, description="Окрас")
    registration_number: Optional[str] = Field(None, description="Регистрационный номер")
    birth_date: Optional[str] = Field(None, description="Дата рождения (ISO yyyy-mm-dd)")
    sire_name: Optional[str] = Field(None, description="Отец")
    dam_name: Optional[str] = Field(None, description="Мать")
    owner_name: Optional[str] = Field(None, description="Владелец")
    unresolved_parent_name: Optional[str] = Field(
        None, description="Имя родителя, которое не удалось отнести к sire/dam"
    )
    sources: Dict[str, str] = Field(
        default_factory=dict, description="Поле -> стратегия, давшая значение"
    )

    model_config = ConfigDict(frozen=True, use_enum_values=False)

    @field_validator("birth_date")
    @classmethod
    def validate_birth_date(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        if len(v) != 10 or v[4] != "-" or v[7] != "-":
            raise ValueError(f"birth_date должна быть в формате yyyy-mm-dd, получено: {v!r}")
        # Проверка календаря (30 февраля и т.п.)
        date.fromisoformat(v)
        return v

    @model_validator(mode="after")
    def validate_parents_differ(self) -> "PedigreeRecord":
        if same_text(self.sire_name, self.dam_name):
            raise ValueError(
                f"sire_name и dam_name совпадают ({self.sire_name!r}): "
                "неразрешённый кандидат должен быть в unresolved_parent_name"
            )
        return self

    @property
    def is_empty(self) -> bool:
        return not any(
            getattr(self, f) for f in (
                "name", "breed", "gender", "color", "registration_number",
                "birth_date", "sire_name", "dam_name", "owner_name",
                "unresolved_parent_name",
            )
        )

    def to_dict(self) -> Dict[str, Any]:
        """Преобразует запись в словарь (JSON-совместимый)."""
        return self.model_dump(mode="json")

    def to_form_values(self, today: Optional[date] = None) -> Dict[str, Any]:
        """
        Значения для формы регистрации с безопасными дефолтами.

        gender -> male, birth_date -> сегодня, остальное -> пустая строка.
        Сама запись не меняется.
        """
        today = today or date.today()
        gender = self.gender if self.gender and self.gender != Gender.UNKNOWN else Gender.MALE
        return {
            "name": self.name or "",
            "breed": self.breed or "",
            "gender": gender.value,
            "color": self.color or "",
            "registration_number": self.registration_number or "",
            "birth_date": self.birth_date or today.isoformat(),
            "sire_name": self.sire_name or "",
            "dam_name": self.dam_name or "",
            "owner_name": self.owner_name or "",
        }


@dataclass(frozen=True)
class ExtractionOutcome:
    """
    Результат одной попытки распознавания.

    При любой ошибке record пустой, error заполнен, и пользователь
    переходит к ручному вводу. raw_text показывается как подсказка.
    """
    record: PedigreeRecord
    raw_text: str = ""
    error: Optional["ExtractionError"] = None
    attempt_id: int = 0

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def needs_manual_entry(self) -> bool:
        return self.error is not None or self.record.is_empty
