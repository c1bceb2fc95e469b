import pytest

from pedigree_ocr.contracts import Gender, PedigreeRecord
from pedigree_ocr.parsing import CertificateProfile, PedigreeParser
from pedigree_ocr.parsing.fields import NameExtractor
from pedigree_ocr.parsing.normalization.vocabulary import NOISE_TOKENS

SEED_TEXT = """SORNRUK
Breed: Thai Ridgeback
Female
KCTH 2024-0091
Owner: Mr. Somchai
JULY 15, 2007
"""

FULL_CERTIFICATE = """KENNEL CLUB OF THAILAND
Name: PHU FAH THUNDER Breed: Thai Ridgeback Dog
Sex: Male Colour: Blue
Date of Birth: 12/04/2021
Registration: KCTH 2021-1234
Owner: Mrs. Malee Saetang 0812345678
Se GOLDEN THUNDER
KCTH 2019-0100 01/02/2017 Red
Ce SILVER MOON
KCTH 2020-0200 15/03/2018 Fawn
"""


@pytest.fixture
def parser():
    """Fixture: парсер с профилем по умолчанию."""
    return PedigreeParser()


def test_seed_scenario(parser):
    """Тест: эталонный сертификат."""
    record = parser.parse(SEED_TEXT)

    assert record.name == "SORNRUK"
    assert record.breed == "Thai Ridgeback Dog"
    assert record.gender == Gender.FEMALE
    assert record.registration_number == "KCTH 2024-0091"
    assert record.owner_name == "Mr. Somchai"
    assert record.birth_date == "2007-07-15"
    assert record.sire_name is None
    assert record.dam_name is None


def test_seed_scenario_sources(parser):
    """Тест: для каждого поля записана стратегия-источник."""
    record = parser.parse(SEED_TEXT)

    assert record.sources == {
        "registration_number": "registry_prefix",
        "name": "header_line",
        "breed": "label",
        "gender": "female_keyword",
        "birth_date": "month_day_year",
        "owner_name": "label",
    }


def test_seed_scenario_with_kcth_profile():
    """Тест: YAML-профиль даёт тот же результат, что и константы."""
    CertificateProfile.clear_cache()
    record = PedigreeParser(profile=CertificateProfile.load("kcth")).parse(SEED_TEXT)

    assert record == PedigreeParser().parse(SEED_TEXT)


def test_full_certificate(parser):
    """Тест: все поля, включая родителей по структуре документа."""
    record = parser.parse(FULL_CERTIFICATE)

    assert record.name == "PHU FAH THUNDER"
    assert record.breed == "Thai Ridgeback Dog"
    assert record.gender == Gender.MALE
    assert record.color == "Blue"
    assert record.birth_date == "2021-04-12"
    assert record.registration_number == "KCTH 2021-1234"
    assert record.owner_name == "Mrs. Malee Saetang"
    assert record.sire_name == "GOLDEN THUNDER"
    assert record.dam_name == "SILVER MOON"
    assert record.unresolved_parent_name is None


@pytest.mark.parametrize("text", [
    "",
    "   \n\n",
    "the quick brown fox\njumps over 12 lazy cats",
    "!!! ### ???\n1234 5678",
])
def test_graceful_emptiness(parser, text):
    """Тест: нет меток и структур -> пустая запись без исключений."""
    record = parser.parse(text)

    assert record.is_empty
    assert record.sources == {}
    assert record == PedigreeRecord()


def test_sire_dam_not_same_line(parser):
    """Тест: два блока родителей -> sire и dam из разных строк."""
    text = (
        "Registration: KCTH 2024-0091\n"
        "GOLDEN THUNDER\n"
        "KCTH 2019-0100 01/02/2017 Red\n"
        "SILVER MOON\n"
        "KCTH 2020-0200 15/03/2018 Fawn\n"
    )

    record = parser.parse(text)

    assert record.sire_name == "GOLDEN THUNDER"
    assert record.dam_name == "SILVER MOON"
    assert record.sire_name != record.dam_name


def test_same_parent_becomes_unresolved(parser):
    """Тест: одинаковые sire и dam -> одно неразрешённое имя."""
    record = parser.parse("Sire: GOLDEN THUNDER\nDam: Golden  Thunder")

    assert record.sire_name is None
    assert record.dam_name is None
    assert record.unresolved_parent_name == "GOLDEN THUNDER"
    assert record.sources["unresolved_parent_name"] == "label/label"
    assert "sire_name" not in record.sources


def test_registry_header_without_code_is_not_name(parser):
    """Тест: заголовок "KCTH PEDIGREE CERTIFICATE" пропускается при поиске клички."""
    record = parser.parse("KCTH PEDIGREE CERTIFICATE\nSORNRUK\nFemale\nKCTH 2024-0091\n")

    assert record.name == "SORNRUK"
    assert record.registration_number == "KCTH 2024-0091"
    assert record.gender == Gender.FEMALE


def test_parent_name_labels(parser):
    """Тест: метки "Sire Name" / "Dam Name" в любом порядке относительно "Name"."""
    record = parser.parse("Sire Name: GOLDEN THUNDER\nName: SORNRUK\nDam Name: SILVER MOON")

    assert record.name == "SORNRUK"
    assert record.sire_name == "GOLDEN THUNDER"
    assert record.dam_name == "SILVER MOON"


@pytest.mark.parametrize("token", NOISE_TOKENS)
def test_noise_resilience(parser, token):
    """Тест: токен шума рядом со значением не попадает в значение."""
    text = (
        f"Name: {token} SORNRUK {token}\n"
        f"Owner: Mr. Somchai {token}\n"
        f"Sire: {token} GOLDEN THUNDER {token}\n"
    )

    record = parser.parse(text)

    assert record.name == "SORNRUK"
    assert record.owner_name == "Mr. Somchai"
    assert record.sire_name == "GOLDEN THUNDER"
    for value in (record.name, record.owner_name, record.sire_name):
        assert token not in value


def test_deterministic(parser):
    """Тест: одинаковый текст -> одинаковая запись."""
    assert parser.parse(FULL_CERTIFICATE) == parser.parse(FULL_CERTIFICATE)


def test_custom_extractor_set():
    """Тест: набор экстракторов настраивается."""
    record = PedigreeParser(extractors=[NameExtractor()]).parse(SEED_TEXT)

    assert record.name == "SORNRUK"
    assert record.breed is None
    assert list(record.sources) == ["name"]
