"""
Проверка возраста выбранного родителя относительно животного.

Сообщения показываются в форме регистрации рядом с выбором sire/dam.
"""

from datetime import date, datetime
from typing import Optional, Union

from dateutil import parser as date_parser
from loguru import logger

MIN_PARENT_AGE_DAYS = 365

DateLike = Union[str, date, datetime, None]


class LineageValidator:
    """Предупреждения о невозможных родословных (родитель младше потомка)."""

    @staticmethod
    def to_date(value: DateLike) -> Optional[date]:
        """ISO-строка, date или datetime -> date; нераспознанное -> None."""
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        try:
            return date_parser.parse(value).date()
        except (ValueError, OverflowError):
            logger.debug(f"[LineageValidator] Нераспознанная дата: {value!r}")
            return None

    @classmethod
    def parent_age_warning(
        cls,
        child_birth: DateLike,
        parent_birth: DateLike,
        label: str = "Parent"
    ) -> Optional[str]:
        """
        Args:
            child_birth: Дата рождения регистрируемого животного
            parent_birth: Дата рождения выбранного родителя
            label: "Sire" или "Dam"

        Returns:
            Текст предупреждения или None, если всё в порядке
        """
        if child_birth is None or child_birth == "":
            return f"{label} selected. Add the pet birth date to validate lineage."

        parent_date = cls.to_date(parent_birth)
        if parent_date is None:
            return f"{label} birth date is missing."

        child_date = cls.to_date(child_birth)
        if child_date is None:
            return None

        diff_days = (child_date - parent_date).days
        if diff_days < 0:
            return f"{label} birth date is after the child."
        if diff_days < MIN_PARENT_AGE_DAYS:
            return f"{label} should be at least 1 year older than the child."
        return None
