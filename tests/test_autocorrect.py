import pytest

from wordhash.autocorrect import autocorrect_text, edit_distance


@pytest.mark.parametrize("word", ["", "a", "hello", "banana"])
def test_distance_to_self_is_zero(word):
    assert edit_distance(word, word) == 0


@pytest.mark.parametrize("word", ["a", "hello", "banana"])
def test_distance_to_empty_is_length(word):
    assert edit_distance(word, "") == len(word)
    assert edit_distance("", word) == len(word)


@pytest.mark.parametrize("a,b", [("kitten", "sitting"), ("flaw", "lawn"), ("abc", "yabd")])
def test_distance_is_symmetric(a, b):
    assert edit_distance(a, b) == edit_distance(b, a)


def test_known_distance():
    assert edit_distance("kitten", "sitting") == 3


def test_distance_bounded_by_longer_length():
    assert edit_distance("abc", "xyz") <= 3


def test_corrects_misspellings():
    assert autocorrect_text("helo wrld", ["hello", "world"]) == ["hello", "world"]


def test_exact_word_kept():
    assert autocorrect_text("world", ["hello", "world"]) == ["world"]


def test_no_candidate_keeps_word():
    assert autocorrect_text("a", ["elephant"]) == ["a"]


def test_tie_goes_to_first_dictionary_word():
    assert autocorrect_text("hat", ["cat", "bat"]) == ["cat"]


def test_empty_text():
    assert autocorrect_text("   ", ["word"]) == []


def test_splits_on_any_whitespace():
    assert autocorrect_text("helo\n\twrld", ["hello", "world"]) == ["hello", "world"]