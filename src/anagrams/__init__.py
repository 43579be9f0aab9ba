"""
Sentence Anagrams

Enumerates every anagram sentence of an input sentence over a fixed word
dictionary. A sentence's letters are treated as a multiset; the search splits
that multiset into pieces, maps each piece to dictionary words with the same
letters, and recurses on what is left until no letters remain.

The package is split the same way the work is:
- Letter multisets: counting, sub-multiset enumeration, subtraction
- Dictionary index keyed by letter multiset
- Recursive sentence search
- Engine: loading, persistence and limits for the CLI / HTTP front ends

Main Functions:
    word_occurrences(word), sentence_occurrences(sentence)
    combinations(occ), subtract(x, y)
    DictionaryIndex.build(words).word_anagrams(word)
    sentence_anagrams(sentence, index)

Example Usage:
    from anagrams import DictionaryIndex, sentence_anagrams

    index = DictionaryIndex.build(["yes", "man", "men", "say", "as", "en", "my", "sane", "Sean"])
    for s in sentence_anagrams(["Yes", "man"], index):
        print(" ".join(s))
"""

# src/anagrams/__init__.py
from .occurrences import word_occurrences, sentence_occurrences, combinations, subtract  # re-export
from .index import DictionaryIndex
from .search import sentence_anagrams, iter_sentence_anagrams
from .engine import Engine

__version__ = "1.0.0"
__all__ = [
    "word_occurrences", "sentence_occurrences", "combinations", "subtract",
    "DictionaryIndex", "sentence_anagrams", "iter_sentence_anagrams", "Engine",
]
