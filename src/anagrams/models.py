from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

Word = str
Sentence = List[Word]

# Canonical letter multiset: sorted by character, lowercase, no zero counts.
# Tuples keep it hashable so it can key the dictionary index.
Occurrences = Tuple[Tuple[str, int], ...]

EMPTY: Occurrences = ()

@dataclass(frozen=True)
class AnagramResult:
    words: Tuple[Word, ...]   # dictionary spelling, in sentence order
    text: str                 # words joined by a single space

    @classmethod
    def from_sentence(cls, sentence: Sentence) -> "AnagramResult":
        return cls(words=tuple(sentence), text=" ".join(sentence))

    def to_dict(self) -> dict:
        return {"words": list(self.words), "text": self.text}
