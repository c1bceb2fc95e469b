"""
Поиск значений по меткам полей ("Breed: Thai Ridgeback").

Значение берётся до конца строки или до следующей известной метки,
потому что OCR часто сливает несколько полей сертификата в одну строку.
"""

import re
from functools import lru_cache
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from ..normalization.vocabulary import ALL_LABELS


def label_alternation(labels: Iterable[str]) -> str:
    """Regex-альтернатива меток: длинные раньше коротких, пробелы гибкие."""
    ordered = sorted(set(labels), key=len, reverse=True)
    return "|".join(r"\s+".join(re.escape(part) for part in label.split()) for label in ordered)


@lru_cache(maxsize=64)
def _label_value_re(
    labels: Tuple[str, ...],
    stops: Tuple[str, ...],
    require_separator: bool
) -> re.Pattern:
    separator = r"[ \t]*[:.\-][ \t]*" if require_separator else r"[ \t]*[:.\-]?[ \t]*"
    if stops:
        boundary = rf"(?=[ \t]*(?<![A-Za-z])(?:{label_alternation(stops)})(?![A-Za-z])|[ \t]*$)"
    else:
        boundary = r"(?=[ \t]*$)"
    return re.compile(
        rf"(?<![A-Za-z])(?:{label_alternation(labels)})(?![A-Za-z])"
        rf"{separator}(?P<value>[^\n]+?){boundary}",
        re.IGNORECASE | re.MULTILINE,
    )


def find_label_values(
    text: str,
    labels: Sequence[str],
    extra_stops: Sequence[str] = (),
    not_after: Sequence[str] = (),
    require_separator: bool = False,
    to_line_end: bool = False
) -> Iterator[str]:
    """
    Все значения после любой из меток, в порядке появления в тексте.

    Args:
        text: Сырой текст OCR
        labels: Метки поля
        extra_stops: Дополнительные слова-ограничители (кроме ALL_LABELS)
        not_after: Слова, после которых метка не считается меткой поля
                   ("Owner Name" - не кличка)
        require_separator: Метка обязана заканчиваться ":", "." или "-"
        to_line_end: Значение до конца строки, чужие метки не ограничивают
    """
    stops = () if to_line_end else tuple(ALL_LABELS) + tuple(extra_stops)
    pattern = _label_value_re(tuple(labels), stops, require_separator)
    for match in pattern.finditer(text):
        if not_after and _preceded_by(text, match.start(), not_after):
            continue
        # Метка без значения ("Sire:" в конце строки) даёт value == ":"
        value = match.group("value").lstrip(" \t:.-").rstrip()
        if value:
            yield value


def find_label_value(text: str, labels: Sequence[str], **kwargs) -> Optional[str]:
    """Первое значение после метки (см. find_label_values)."""
    return next(find_label_values(text, labels, **kwargs), None)


def _preceded_by(text: str, position: int, words: Sequence[str]) -> bool:
    line_start = text.rfind("\n", 0, position) + 1
    before = text[line_start:position].rstrip().lower()
    return any(re.search(rf"(?<![a-z]){re.escape(word.lower())}$", before) for word in words)


@lru_cache(maxsize=1)
def _label_line_re() -> re.Pattern:
    return re.compile(
        rf"^\s*(?:{label_alternation(ALL_LABELS)})(?![A-Za-z])",
        re.IGNORECASE,
    )


def is_label_line(line: str) -> bool:
    """Строка начинается с метки поля ("Sire: ...", "DAM")."""
    return bool(_label_line_re().match(line))


def is_label(text: str) -> bool:
    """Текст целиком - метка поля (без значения)."""
    bare = text.strip().rstrip(":.").strip().casefold()
    return any(bare == " ".join(label.split()).casefold() for label in ALL_LABELS)


def registry_pattern(prefixes: Sequence[str]) -> re.Pattern:
    """
    Номер реестра: префикс + буквенно-цифровой код с хотя бы одной цифрой.

    KCTH 2024-0091, KCTH-A1234, kcth2019/77
    """
    alternation = "|".join(re.escape(p) for p in sorted(prefixes, key=len, reverse=True))
    return re.compile(
        rf"(?<![A-Za-z])(?:{alternation})[ \t]*[-.:#]?[ \t]*"
        rf"(?=[A-Z0-9\-/]*\d)[A-Z0-9](?:[A-Z0-9\-/]*[A-Z0-9])?",
        re.IGNORECASE,
    )


def registry_marker_pattern(prefixes: Sequence[str]) -> re.Pattern:
    """Префикс реестра отдельным словом, с номером или без ("KCTH PEDIGREE")."""
    alternation = "|".join(re.escape(p) for p in sorted(prefixes, key=len, reverse=True))
    return re.compile(rf"(?<![A-Za-z])(?:{alternation})(?![A-Za-z])", re.IGNORECASE)


def normalize_registration(value: str) -> str:
    """Единый вид номера: верхний регистр, одиночные пробелы."""
    return " ".join(value.upper().split())


def registration_key(value: str) -> str:
    """Ключ для сравнения номеров: только буквы и цифры."""
    return re.sub(r"[^A-Z0-9]", "", value.upper())
