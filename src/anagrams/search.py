from __future__ import annotations
from typing import Iterable, Iterator, List

from .index import DictionaryIndex
from .models import Occurrences, Sentence, Word
from .occurrences import combinations, sentence_occurrences, subtract

def sentences_for_occurrences(occ: Occurrences, index: DictionaryIndex) -> Iterator[Sentence]:
    """
    Depth-first: pick a sub-multiset, take every dictionary word spelled by it,
    and recurse on the letters left over. Yields each full decomposition once.
    """
    if not occ:
        yield []
        return
    for piece in combinations(occ):
        if not piece:
            # empty piece would recurse on the same letters
            continue
        words = index.lookup(piece)
        if not words:
            continue
        remaining = subtract(occ, piece)
        for rest in sentences_for_occurrences(remaining, index):
            for w in words:
                yield [w] + rest

def iter_sentence_anagrams(sentence: Iterable[Word], index: DictionaryIndex) -> Iterator[Sentence]:
    """Lazy version of sentence_anagrams(); the empty sentence yields [] exactly once."""
    return sentences_for_occurrences(sentence_occurrences(sentence), index)

def sentence_anagrams(sentence: Iterable[Word], index: DictionaryIndex) -> List[Sentence]:
    """
    All anagram sentences of `sentence` made of words from `index`.

    Sentences with the same words in a different order are distinct results,
    and the sentence itself is included when all of its words are in the
    dictionary. sentence_anagrams([], index) == [[]].
    """
    return list(iter_sentence_anagrams(sentence, index))
