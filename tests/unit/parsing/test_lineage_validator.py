import pytest
from datetime import date, datetime

from pedigree_ocr.parsing import LineageValidator


@pytest.mark.parametrize("child,parent,expected", [
    ("2020-05-01", "2017-01-01", None),
    ("2020-05-01", "2021-01-01", "Sire birth date is after the child."),
    ("2020-05-01", "2019-12-01", "Sire should be at least 1 year older than the child."),
    ("2020-05-01", None, "Sire birth date is missing."),
    ("2020-05-01", "not a date", "Sire birth date is missing."),
    (None, "2017-01-01", "Sire selected. Add the pet birth date to validate lineage."),
    ("", "2017-01-01", "Sire selected. Add the pet birth date to validate lineage."),
])
def test_parent_age_warning(child, parent, expected):
    assert LineageValidator.parent_age_warning(child, parent, "Sire") == expected


def test_exactly_one_year_is_enough():
    """Тест: 365 дней разницы - уже без предупреждения."""
    assert LineageValidator.parent_age_warning("2021-01-01", "2020-01-02", "Dam") is None
    assert LineageValidator.parent_age_warning("2021-01-01", "2020-01-03", "Dam") is not None


def test_accepts_date_objects():
    assert LineageValidator.parent_age_warning(date(2020, 5, 1), datetime(2015, 1, 1, 12, 0), "Dam") is None


def test_unparseable_child_date_gives_no_warning():
    assert LineageValidator.parent_age_warning("soon", "2015-01-01", "Dam") is None
