import pytest

from utils.keywords import generate_keywords, keywords_for


def test_prefixes_per_word():
    assert generate_keywords("Milk 2L") == {"m", "mi", "mil", "milk", "2", "2l"}


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_blank_input_has_no_keywords(text):
    assert generate_keywords(text) == set()


@pytest.mark.parametrize("text", ["Asha Rao", "asha@shopmail.in", "9876543210", "Nandini  Gold"])
def test_full_lowercase_words_are_included(text):
    keywords = generate_keywords(text)
    assert keywords
    for word in text.lower().split():
        assert word in keywords


def test_generation_is_idempotent():
    assert generate_keywords("Toned Milk") == generate_keywords("Toned Milk")


def test_repeated_words_are_deduplicated():
    assert generate_keywords("aa aa") == {"a", "aa"}


def test_keywords_for_unions_sources_sorted():
    keywords = keywords_for("Milk", "Nandini")

    assert keywords == sorted(generate_keywords("Milk") | generate_keywords("Nandini"))
    assert "nandini" in keywords
    assert "milk" in keywords
