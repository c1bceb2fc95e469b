"""
Дата рождения -> строго yyyy-mm-dd.

1. month_day_year: "JULY 15, 2007", "dec 1.1999"
2. day_month_year: "15 JULY 2007"
3. date_label: "Date of Birth: 15/07/2007", разбирается dateutil
   (day-first) только в крайнем случае

Для стратегий 1-2 строка собирается из таблицы месяцев напрямую, без
datetime-парсера и часовых поясов; date() только проверяет календарь.
"""

import re
from datetime import date
from typing import List, Optional

from dateutil import parser as date_parser
from loguru import logger

from ...config.settings import MIN_BIRTH_YEAR
from ..normalization.vocabulary import DATE_LABELS, MONTH_NUMBERS
from .base import ExtractionContext, FieldExtractor, Strategy
from .labels import find_label_values

_MONTHS = "|".join(sorted(MONTH_NUMBERS, key=len, reverse=True))
_DAY = r"(?P<day>\d{1,2})(?:st|nd|rd|th)?"
_YEAR = r"(?P<year>\d{4})(?!\d)"

MONTH_DAY_YEAR = re.compile(
    rf"(?<![A-Za-z])(?P<month>{_MONTHS})(?![A-Za-z])\.?[ \t]*"
    rf"(?<!\d){_DAY}(?:[ \t]*[,./\-][ \t]*|[ \t]+){_YEAR}",
    re.IGNORECASE,
)

DAY_MONTH_YEAR = re.compile(
    rf"(?<!\d){_DAY}[ \t]*[,./\-]?[ \t]*"
    rf"(?P<month>{_MONTHS})(?![A-Za-z])\.?(?:[ \t]*[,./\-][ \t]*|[ \t]+){_YEAR}",
    re.IGNORECASE,
)

# "Date of Registration", "Date of Issue" - не дата рождения
_NOT_BIRTH = re.compile(r"^\s*of\s+(?!birth)", re.IGNORECASE)
_PLAUSIBLE_YEAR = re.compile(r"(?<!\d)(?:19|20)\d{2}(?!\d)")


def iso_date(year: int, month: str, day: int) -> Optional[str]:
    """
    Собирает yyyy-mm-dd, если дата существует и год правдоподобен.

    Args:
        year: Год
        month: Номер месяца "01".."12"
        day: День
    """
    if not MIN_BIRTH_YEAR <= year <= date.today().year:
        return None
    try:
        date(year, int(month), day)
    except ValueError:
        return None
    return f"{year:04d}-{month}-{day:02d}"


class BirthDateExtractor(FieldExtractor):
    field_name = "birth_date"

    def build_strategies(self) -> List[Strategy]:
        return [
            Strategy(priority=1, name="month_day_year", extract=self._month_day_year),
            Strategy(priority=2, name="day_month_year", extract=self._day_month_year),
            Strategy(priority=3, name="date_label", extract=self._from_label),
        ]

    def _month_day_year(self, context: ExtractionContext) -> Optional[str]:
        return self._first_valid(MONTH_DAY_YEAR, context.raw_text)

    def _day_month_year(self, context: ExtractionContext) -> Optional[str]:
        return self._first_valid(DAY_MONTH_YEAR, context.raw_text)

    @staticmethod
    def _first_valid(pattern: re.Pattern, text: str) -> Optional[str]:
        for match in pattern.finditer(text):
            value = iso_date(
                int(match.group("year")),
                MONTH_NUMBERS[match.group("month").upper()],
                int(match.group("day")),
            )
            if value:
                return value
        return None

    def _from_label(self, context: ExtractionContext) -> Optional[str]:
        for value in find_label_values(context.raw_text, DATE_LABELS, to_line_end=True):
            if _NOT_BIRTH.match(value) or not _PLAUSIBLE_YEAR.search(value):
                continue
            parsed = self._parse_loose(value)
            if parsed:
                return parsed
        return None

    @staticmethod
    def _parse_loose(value: str) -> Optional[str]:
        numbers = re.findall(r"\d+", value)
        has_month = re.search(rf"(?<![A-Za-z])(?:{_MONTHS})(?![A-Za-z])", value, re.IGNORECASE)
        # Иначе dateutil достроит день/месяц из сегодняшней даты
        if len(numbers) < 3 and not (has_month and len(numbers) >= 2):
            return None
        try:
            parsed = date_parser.parse(value, dayfirst=True, fuzzy=True)
        except (ValueError, OverflowError) as e:
            logger.trace(f"[BirthDateExtractor] dateutil не разобрал {value!r}: {e}")
            return None
        return iso_date(parsed.year, f"{parsed.month:02d}", parsed.day)
