# src/e2e/test_search.py
from collections import Counter

import pytest

from anagrams.index import DictionaryIndex
from anagrams.occurrences import sentence_occurrences
from anagrams.search import sentence_anagrams, iter_sentence_anagrams, sentences_for_occurrences

YES_MAN_DICT = ["man", "yes", "men", "say", "as", "en", "my", "sane", "Sean"]


@pytest.fixture
def yes_man_index():
    return DictionaryIndex.build(YES_MAN_DICT)


def _as_set(sentences):
    return {tuple(s) for s in sentences}


def test_empty_sentence_has_exactly_one_anagram(yes_man_index):
    assert sentence_anagrams([], yes_man_index) == [[]]


def test_single_word_anagrams():
    idx = DictionaryIndex.build(["eat", "tea", "ate", "man"])
    out = sentence_anagrams(["eat"], idx)
    assert sorted(out) == [["ate"], ["eat"], ["tea"]]


def test_yes_man(yes_man_index):
    out = sentence_anagrams(["Yes", "man"], yes_man_index)
    expected = {
        ("en", "as", "my"), ("en", "my", "as"),
        ("man", "yes"), ("men", "say"),
        ("as", "en", "my"), ("as", "my", "en"),
        ("sane", "my"), ("Sean", "my"),
        ("my", "en", "as"), ("my", "as", "en"),
        ("my", "sane"), ("my", "Sean"),
        ("say", "men"), ("yes", "man"),
    }
    assert _as_set(out) == expected
    # each decomposition exactly once
    assert len(out) == len(expected)
    assert max(Counter(map(tuple, out)).values()) == 1


def test_results_reuse_exactly_the_input_letters(yes_man_index):
    target = sentence_occurrences(["Yes", "man"])
    for s in sentence_anagrams(["Yes", "man"], yes_man_index):
        assert sentence_occurrences(s) == target
        assert all(w in YES_MAN_DICT for w in s)


def test_i_love_you():
    idx = DictionaryIndex.build(["I", "love", "you", "olive", "be", "a"])
    out = _as_set(sentence_anagrams(["I", "love", "you"], idx))
    assert ("you", "olive") in out and ("olive", "you") in out
    assert ("I", "love", "you") in out
    assert len(out) == 8


def test_no_anagrams_when_letters_cannot_be_covered(yes_man_index):
    assert sentence_anagrams(["xyz"], yes_man_index) == []


def test_iterator_is_lazy_and_matches_eager(yes_man_index):
    it = iter_sentence_anagrams(["Yes", "man"], yes_man_index)
    first = next(it)
    assert sentence_occurrences(first) == sentence_occurrences(["yes", "man"])
    rest = list(it)
    assert _as_set([first] + rest) == _as_set(sentence_anagrams(["yes", "man"], yes_man_index))


def test_sentences_for_empty_occurrences(yes_man_index):
    assert list(sentences_for_occurrences((), yes_man_index)) == [[]]
