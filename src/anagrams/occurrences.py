from __future__ import annotations
from collections import Counter
from typing import Dict, Iterable, List

from .models import Occurrences, Word, EMPTY

def _canonical(counts: Dict[str, int]) -> Occurrences:
    """Sorted (char, count) pairs, zero entries dropped."""
    return tuple(sorted((c, n) for c, n in counts.items() if n > 0))

def word_occurrences(word: Word) -> Occurrences:
    """
    Letter multiset of a word.
    Rules:
      * case-insensitive: characters are lowercased before counting
      * every character counts, including non-letters
      * result is sorted by character and has no zero counts
    """
    return _canonical(Counter(word.lower()))

def sentence_occurrences(sentence: Iterable[Word]) -> Occurrences:
    """Letter multiset of all words of a sentence taken together."""
    return word_occurrences("".join(sentence))

def occurrences_size(occ: Occurrences) -> int:
    """Total number of letters in the multiset."""
    return sum(n for _, n in occ)

def combinations(occ: Occurrences) -> List[Occurrences]:
    """
    Every sub-multiset of `occ`, including () and `occ` itself.

    For each (char, freq) pair a count in 0..freq is chosen independently,
    so the result has prod(freq + 1) elements. Order is not significant.

    >>> combinations((("a", 2), ("b", 1)))  # doctest: +NORMALIZE_WHITESPACE
    [(), (('b', 1),), (('a', 1),), (('a', 1), ('b', 1)),
     (('a', 2),), (('a', 2), ('b', 1))]
    """
    if not occ:
        return [EMPTY]
    (c, freq), tail = occ[0], occ[1:]
    rest = combinations(tail)
    out: List[Occurrences] = []
    for i in range(freq + 1):
        for r in rest:
            # c sorts before every char in tail, so prepending keeps canonical order
            out.append(((c, i),) + r if i else r)
    return out

def subtract(x: Occurrences, y: Occurrences) -> Occurrences:
    """
    Remove multiset `y` from multiset `x`.

    `y` must be a sub-multiset of `x`; otherwise ValueError("invalid subtraction ...")
    is raised instead of producing negative or missing counts.
    """
    counts = dict(x)
    for c, n in y:
        have = counts.get(c, 0)
        left = have - n
        if left < 0:
            raise ValueError(
                f"invalid subtraction: {n} x {c!r} requested, only {have} available"
            )
        if left == 0:
            counts.pop(c, None)
        else:
            counts[c] = left
    return _canonical(counts)
