import pytest

from core.learning import is_correct_answer, levenshtein, normalize_answer


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("  The Dog ", "dog"),
        ("a cat", "cat"),
        ("an apple", "apple"),
        ("os  livros", "livros"),
        ("o   cão   grande", "cão grande"),
        ("dog", "dog"),
        ("", ""),
    ],
)
def test_normalize_answer(raw, expected):
    assert normalize_answer(raw) == expected


def test_normalize_strips_only_one_article():
    assert normalize_answer("the a thing") == "a thing"


def test_levenshtein_distances():
    assert levenshtein("", "") == 0
    assert levenshtein("abc", "") == 3
    assert levenshtein("dog", "dog") == 0
    assert levenshtein("dog", "dgo") == 2
    assert levenshtein("kitten", "sitting") == 3
    assert levenshtein("house", "hous") == 1


def test_exact_answer_in_either_language():
    answers = ["dog", "cão"]
    assert is_correct_answer("dog", answers)
    assert is_correct_answer("Cão", answers)


def test_article_and_case_are_ignored():
    assert is_correct_answer("The Dog", ["dog"])
    assert is_correct_answer("dog", ["the dog"])


def test_one_typo_is_tolerated():
    assert is_correct_answer("doog", ["dog"])
    assert is_correct_answer("hous", ["house"])


def test_two_typos_are_rejected():
    # a swap counts as two edits
    assert not is_correct_answer("dgo", ["dog"])
    assert not is_correct_answer("hxxse", ["house"])


def test_empty_input_is_never_correct():
    assert not is_correct_answer("", ["a"])
    assert not is_correct_answer("   ", ["dog"])


def test_empty_accepted_answers_are_skipped():
    assert not is_correct_answer("x", ["", "  "])
    assert not is_correct_answer("dog", [])
