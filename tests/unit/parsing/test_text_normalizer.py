import pytest

from pedigree_ocr.parsing.normalization import TextNormalizer
from pedigree_ocr.parsing.normalization.vocabulary import (
    NOISE_TOKENS, PARENT_NAME_NOISE_PREFIXES
)


@pytest.fixture
def normalizer():
    """Fixture для TextNormalizer со словарями по умолчанию."""
    return TextNormalizer()


@pytest.mark.parametrize("token", NOISE_TOKENS)
def test_each_noise_token_removed(normalizer, token):
    """Тест: каждый токен шума удаляется как отдельное слово."""
    cleaned = normalizer.clean(f"{token} GOLDEN THUNDER {token}")

    assert cleaned == "GOLDEN THUNDER"


@pytest.mark.parametrize("word", ["SE", "IE", "AE"])
def test_uppercase_word_is_not_noise(normalizer, word):
    """Тест: заглавное слово в кличке не принимается за шум ("se" -> "SE")."""
    assert normalizer.clean(f"GOLDEN {word} THUNDER") == f"GOLDEN {word} THUNDER"


def test_lowercase_noise_next_to_uppercase_name(normalizer):
    assert normalizer.clean("se SORNRUK SE") == "SORNRUK SE"


def test_noise_inside_word_kept(normalizer):
    """Тест: буквы внутри слов не трогаются ("GREEN", "ROSE")."""
    assert normalizer.clean("GREEN ROSE") == "GREEN ROSE"


def test_colons_and_whitespace(normalizer):
    """Тест: двоеточия убираются, пробелы схлопываются."""
    assert normalizer.clean("  Breed:   Thai\tRidgeback \n") == "Breed Thai Ridgeback"


@pytest.mark.parametrize("raw", [None, "", "   ", "ee | ~"])
def test_empty_results(normalizer, raw):
    """Тест: пустой вход и чистый шум -> пустая строка."""
    assert normalizer.clean(raw) == ""


@pytest.mark.parametrize("prefix", PARENT_NAME_NOISE_PREFIXES)
def test_each_parent_prefix_removed(normalizer, prefix):
    """Тест: мусорный префикс в начале клички родителя."""
    assert normalizer.clean_parent_name(f"{prefix} GOLDEN THUNDER") == "GOLDEN THUNDER"


def test_parent_prefix_is_case_sensitive(normalizer):
    """Тест: "RE " заглавными - часть клички, не мусор."""
    assert normalizer.clean_parent_name("RE MIX") == "RE MIX"


def test_parent_leading_punctuation_and_repeated_prefixes(normalizer):
    """Тест: ведущая пунктуация и несколько префиксов подряд."""
    assert normalizer.clean_parent_name("» Ce Se SILVER MOON") == "SILVER MOON"


def test_prefix_only_at_start(normalizer):
    """Тест: префикс в середине строки не удаляется."""
    assert normalizer.clean_parent_name("SILVER Sa MOON") == "SILVER Sa MOON"


def test_custom_vocabulary():
    """Тест: словари переопределяются (профиль другого реестра)."""
    normalizer = TextNormalizer(noise_tokens=["xx"], parent_noise_prefixes=[])

    assert normalizer.clean("xx ee NAME") == "ee NAME"
    assert normalizer.clean_parent_name("Se NAME") == "Se NAME"
