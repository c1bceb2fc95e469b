import pytest

from pedigree_ocr.parsing.fields import (
    BreedExtractor, ColorExtractor, ExtractionContext, FieldExtractor,
    GenderExtractor, NameExtractor, OwnerExtractor, RegistrationExtractor, Strategy
)


def ctx(text, **known):
    """Контекст с профилем по умолчанию."""
    context = ExtractionContext.build(text)
    for field_name, value in known.items():
        context = context.with_known(field_name, value)
    return context


# =============================================================================
# FieldExtractor (каркас стратегий)
# =============================================================================

class _StubExtractor(FieldExtractor):
    field_name = "stub"

    def __init__(self, strategies):
        self._given = strategies
        super().__init__()

    def build_strategies(self):
        return self._given


def _broken(context):
    raise ValueError("broken heuristic")


def test_strategies_run_in_priority_order():
    """Тест: порядок по priority, а не по порядку в списке."""
    extractor = _StubExtractor([
        Strategy(priority=2, name="second", extract=lambda c: "LATE"),
        Strategy(priority=1, name="first", extract=lambda c: "EARLY"),
    ])

    candidate = extractor.extract(ctx("anything"))

    assert candidate.value == "EARLY"
    assert candidate.strategy == "first"


def test_first_success_wins_no_merging():
    """Тест: после первого успеха остальные стратегии не запускаются."""
    calls = []

    def tracked(context):
        calls.append("second")
        return "OTHER"

    extractor = _StubExtractor([
        Strategy(priority=1, name="first", extract=lambda c: "VALUE"),
        Strategy(priority=2, name="second", extract=tracked),
    ])

    assert extractor.extract(ctx("")).value == "VALUE"
    assert calls == []


def test_failing_strategy_is_a_miss():
    """Тест: упавшая стратегия не ломает поле."""
    extractor = _StubExtractor([
        Strategy(priority=1, name="broken", extract=_broken),
        Strategy(priority=2, name="fallback", extract=lambda c: "VALUE"),
    ])

    candidate = extractor.extract(ctx(""))

    assert candidate.strategy == "fallback"


@pytest.mark.parametrize("raw", ["X", "A" * 61, "Breed:", "ee ||"])
def test_invalid_values_rejected(raw):
    """Тест: слишком короткое/длинное значение, голая метка, чистый шум."""
    extractor = _StubExtractor([Strategy(priority=1, name="only", extract=lambda c: raw)])

    assert not extractor.extract(ctx("")).found


def test_applies_predicate():
    """Тест: неприменимая стратегия пропускается."""
    extractor = _StubExtractor([
        Strategy(priority=1, name="gated", extract=lambda c: "GATED", applies=lambda c: "KCTH" in c.raw_text),
        Strategy(priority=2, name="open", extract=lambda c: "OPEN"),
    ])

    assert extractor.extract(ctx("no registry")).value == "OPEN"
    assert extractor.extract(ctx("KCTH 1")).value == "GATED"


def test_context_with_known_is_immutable():
    """Тест: with_known возвращает новый контекст."""
    base = ctx("text")
    extended = base.with_known("registration_number", "KCTH 1")

    assert base.known == {}
    assert extended.known == {"registration_number": "KCTH 1"}


# =============================================================================
# Name
# =============================================================================

@pytest.fixture
def name_extractor():
    return NameExtractor()


@pytest.mark.parametrize("text,expected", [
    ("Name: SORNRUK Sex: Female", "SORNRUK"),
    ("Registered Name: BIG BOSS MALE", "BIG BOSS"),
    ("Narne: SORNRUK\nBreed: Thai Ridgeback", "SORNRUK"),
    ("NAME. Phu Fah Breed Thai Ridgeback", "Phu Fah"),
])
def test_name_label(name_extractor, text, expected):
    candidate = name_extractor.extract(ctx(text))

    assert candidate.value == expected
    assert candidate.strategy == "label"


def test_name_ignores_owner_name_label(name_extractor):
    """Тест: "Owner Name" не кличка; срабатывает запасная стратегия."""
    candidate = name_extractor.extract(ctx("Owner Name: Mr. Somchai\nSORNRUK"))

    assert candidate.value == "SORNRUK"
    assert candidate.strategy == "header_line"


def test_name_header_skips_registry_line(name_extractor):
    """Тест: строка с номером реестра пропускается, не-буквы удаляются."""
    candidate = name_extractor.extract(ctx("KCTH 2024-0091\nthai kennel club\nSORNRUK 2"))

    assert candidate.value == "SORNRUK"


@pytest.mark.parametrize("text", [
    "Sire Name: GOLDEN THUNDER\nName: SORNRUK",
    "Dam's Name: SILVER MOON\nName: SORNRUK",
    "SIRE NAME GOLDEN THUNDER\nNAME SORNRUK",
])
def test_name_label_ignores_parent_name_labels(name_extractor, text):
    """Тест: "Sire Name" / "Dam Name" - клички родителей, не животного."""
    candidate = name_extractor.extract(ctx(text))

    assert candidate.value == "SORNRUK"
    assert candidate.strategy == "label"


@pytest.mark.parametrize("header", [
    "KCTH PEDIGREE CERTIFICATE",
    "THE KENNEL CLUB OF THAILAND - KCTH",
])
def test_name_header_skips_registry_marker_without_code(name_extractor, header):
    """Тест: заголовок с префиксом реестра без номера - не кличка."""
    candidate = name_extractor.extract(ctx(f"{header}\nSORNRUK\nFemale\nKCTH 2024-0091\n"))

    assert candidate.value == "SORNRUK"
    assert candidate.strategy == "header_line"


def test_name_header_scans_first_five_lines_only(name_extractor):
    text = "one\ntwo\nthree\nfour\nfive\nSORNRUK"

    assert not name_extractor.extract(ctx(text)).found


# =============================================================================
# Breed
# =============================================================================

@pytest.fixture
def breed_extractor():
    return BreedExtractor()


@pytest.mark.parametrize("text,expected", [
    ("Breed: Thai Ridgeback", "Thai Ridgeback Dog"),
    ("BREED: THAI RIDGEBACK DOG Sex: Male", "Thai Ridgeback Dog"),
    ("Bo: Thai Bangkaew", "Thai Bangkaew Dog"),
    ("Breed: Poodle Date of Birth: 01/02/2020", "Poodle"),
])
def test_breed_label(breed_extractor, text, expected):
    candidate = breed_extractor.extract(ctx(text))

    assert candidate.value == expected
    assert candidate.strategy == "label"


def test_breed_keyword_fallback(breed_extractor):
    candidate = breed_extractor.extract(ctx("THAI RIDGEBACK DOG ASSOCIATION\nSORNRUK"))

    assert candidate.value == "Thai Ridgeback Dog"
    assert candidate.strategy == "keyword"


def test_breed_missing(breed_extractor):
    assert not breed_extractor.extract(ctx("SORNRUK\nBobby")).found


# =============================================================================
# Gender
# =============================================================================

@pytest.fixture
def gender_extractor():
    return GenderExtractor()


@pytest.mark.parametrize("text,expected", [
    ("Sex: Female", "female"),
    ("Sex: BITCH", "female"),
    ("Sex: Male", "male"),
    ("Sex: Dog", "male"),
    ("Male Female", "female"),
    ("Thai Ridgeback Dog\nSex: Dog", "male"),
])
def test_gender(gender_extractor, text, expected):
    assert gender_extractor.extract(ctx(text)).value == expected


def test_breed_name_dog_is_not_gender(gender_extractor):
    """Тест: "Dog" в названии породы полом не считается."""
    assert not gender_extractor.extract(ctx("Breed: Thai Ridgeback Dog")).found


def test_gender_missing(gender_extractor):
    assert not gender_extractor.extract(ctx("SORNRUK")).found


# =============================================================================
# Color
# =============================================================================

@pytest.fixture
def color_extractor():
    return ColorExtractor()


def test_color_label(color_extractor):
    candidate = color_extractor.extract(ctx("Colour: Light Fawn Microchip: 9001"))

    assert candidate.value == "Light Fawn"
    assert candidate.strategy == "label"


@pytest.mark.parametrize("text,expected", [
    ("SORNRUK\nRED 12/03/2019", "Red"),
    ("LIGHT FAWN", "Light Fawn"),
    ("Blue then Black", "Blue"),
])
def test_color_canonical_fallback(color_extractor, text, expected):
    candidate = color_extractor.extract(ctx(text))

    assert candidate.value == expected
    assert candidate.strategy == "canonical_color"


def test_color_not_inside_words(color_extractor):
    assert not color_extractor.extract(ctx("Registered Ridgeback")).found


# =============================================================================
# Registration number
# =============================================================================

@pytest.fixture
def registration_extractor():
    return RegistrationExtractor()


@pytest.mark.parametrize("text,expected", [
    ("Reg: KCTH 2024-0091", "KCTH 2024-0091"),
    ("kcth-a1234", "KCTH-A1234"),
])
def test_registration_registry_prefix(registration_extractor, text, expected):
    candidate = registration_extractor.extract(ctx(text))

    assert candidate.value == expected
    assert candidate.strategy == "registry_prefix"


@pytest.mark.parametrize("text,expected", [
    ("Reg. No. 2024/0091", "2024/0091"),
    ("Registration Number: A-55120", "A-55120"),
])
def test_registration_label(registration_extractor, text, expected):
    candidate = registration_extractor.extract(ctx(text))

    assert candidate.value == expected
    assert candidate.strategy == "reg_label"


def test_registration_missing(registration_extractor):
    assert not registration_extractor.extract(ctx("Reg. No. pending")).found


# =============================================================================
# Owner
# =============================================================================

@pytest.fixture
def owner_extractor():
    return OwnerExtractor()


@pytest.mark.parametrize("text,expected", [
    ("Owner: Mr. Somchai", "Mr. Somchai"),
    ("OWNER: Mrs. Malee Saetang 0812345678", "Mrs. Malee Saetang"),
    ("Owner's Name: Somchai Jaidee", "Somchai Jaidee"),
    ("Owner: Mr. Reg Smith", "Mr. Reg Smith"),
])
def test_owner_label(owner_extractor, text, expected):
    candidate = owner_extractor.extract(ctx(text))

    assert candidate.value == expected
    assert candidate.strategy == "label"


@pytest.mark.parametrize("text,expected", [
    ("SORNRUK\nMiss Ploy\n", "Miss Ploy"),
    ("kennel of Mrs Malee", "Mrs Malee"),
    ("Mr.Somchai", "Mr.Somchai"),
])
def test_owner_honorific_fallback(owner_extractor, text, expected):
    candidate = owner_extractor.extract(ctx(text))

    assert candidate.value == expected
    assert candidate.strategy == "honorific"


def test_owner_missing(owner_extractor):
    assert not owner_extractor.extract(ctx("Mississippi Mrsomething")).found
