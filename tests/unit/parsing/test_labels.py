import pytest

from pedigree_ocr.parsing.fields.labels import (
    find_label_value, find_label_values, is_label, is_label_line,
    normalize_registration, registration_key, registry_marker_pattern, registry_pattern
)


def test_value_stops_at_next_label():
    """Тест: значение до следующей метки в той же строке."""
    text = "Name: SORNRUK Breed: Thai Ridgeback Sex: Female"

    assert find_label_value(text, ("Name",)) == "SORNRUK"
    assert find_label_value(text, ("Breed",)) == "Thai Ridgeback"


def test_value_stops_at_line_end():
    """Тест: значение не переходит на следующую строку."""
    assert find_label_value("Colour: Red\nMicrochip 1234", ("Colour",)) == "Red"


def test_multiword_label_with_ocr_spacing():
    """Тест: "Date  of Birth" с лишними пробелами."""
    assert find_label_value("Date  of  Birth: 15/07/2007", ("Date of Birth",)) == "15/07/2007"


def test_label_inside_word_ignored():
    """Тест: метка внутри слова не считается меткой ("Amsterdam")."""
    assert find_label_value("AMSTERDAM KENNEL", ("Dam",)) is None


def test_not_after():
    """Тест: "Owner Name" - не кличка животного."""
    text = "Owner Name: Mr. Somchai\nName: SORNRUK"

    assert find_label_value(text, ("Name",), not_after=("owner",)) == "SORNRUK"


def test_require_separator():
    """Тест: короткая метка засчитывается только с разделителем."""
    assert find_label_value("Bo: Thai Ridgeback", ("Bo",), require_separator=True) == "Thai Ridgeback"
    assert find_label_value("Bo Thai Ridgeback", ("Bo",), require_separator=True) is None


def test_to_line_end_ignores_other_labels():
    """Тест: to_line_end - значение до конца строки, даже с метками внутри."""
    text = "Owner: Mr. Reg Smith"

    assert find_label_value(text, ("Owner",)) == "Mr."
    assert find_label_value(text, ("Owner",), to_line_end=True) == "Mr. Reg Smith"


def test_find_all_values_in_order():
    """Тест: все значения по порядку."""
    text = "Sire: A ONE\nDam: B TWO\nSire: C THREE"

    assert list(find_label_values(text, ("Sire",))) == ["A ONE", "C THREE"]


@pytest.mark.parametrize("line,expected", [
    ("Sire: GOLDEN THUNDER", True),
    ("  DAM", True),
    ("Date of Birth 15/07/2007", True),
    ("SORNRUK", False),
    ("REGAL STAR", False),
])
def test_is_label_line(line, expected):
    assert is_label_line(line) is expected


def test_is_label():
    assert is_label("Breed:")
    assert is_label("date of birth")
    assert not is_label("Thai Ridgeback")


@pytest.mark.parametrize("text,expected", [
    ("Reg: KCTH 2024-0091 Sex", "KCTH 2024-0091"),
    ("kcth-A1234", "kcth-A1234"),
    ("KCTH2019/77.", "KCTH2019/77"),
])
def test_registry_pattern(text, expected):
    """Тест: номер реестра с разными разделителями."""
    match = registry_pattern(["KCTH"]).search(text)

    assert match.group(0) == expected


def test_registry_pattern_requires_digit():
    """Тест: "KCTH CERTIFICATE" - не номер."""
    assert registry_pattern(["KCTH"]).search("KCTH CERTIFICATE") is None


@pytest.mark.parametrize("line", [
    "KCTH PEDIGREE CERTIFICATE",
    "Kennel Club of Thailand (kcth)",
    "KCTH 2024-0091",
])
def test_registry_marker_with_or_without_code(line):
    """Тест: префикс реестра узнаётся и без номера."""
    assert registry_marker_pattern(["KCTH"]).search(line)


def test_registry_marker_whole_word_only():
    assert registry_marker_pattern(["KCTH"]).search("KCTHAI RIDGE") is None


def test_not_after_matches_whole_word():
    """Тест: "Sire Name" пропускается, "Madam Name" - нет."""
    assert find_label_value("Sire Name: GOLDEN THUNDER", ("Name",), not_after=("sire",)) is None
    assert find_label_value("Madam Name: SORNRUK", ("Name",), not_after=("dam",)) == "SORNRUK"


def test_registration_normalization():
    assert normalize_registration("kcth  2024-0091") == "KCTH 2024-0091"
    assert registration_key("KCTH 2024-0091") == registration_key("kcth2024 0091")
