from __future__ import annotations
import os
from collections import defaultdict
from typing import Dict, Iterable, Iterator, List, Tuple

from .models import Occurrences, Word
from .occurrences import word_occurrences

VERBOSE = os.environ.get("ANAGRAMS_VERBOSE") == "1" # Progress logging (set ANAGRAMS_VERBOSE=1 to enable)

class DictionaryIndex:
    """
    Dictionary words grouped by letter multiset.
    Built once from a word list; read-only afterwards.
    Unknown multisets map to an empty tuple, so lookups never raise.
    """
    def __init__(self) -> None:
        self._by_occ: Dict[Occurrences, Tuple[Word, ...]] = {}
        self._word_count: int = 0

    @classmethod
    def build(cls, words: Iterable[Word]) -> "DictionaryIndex":
        idx = cls()
        buckets: Dict[Occurrences, List[Word]] = defaultdict(list)
        n = 0
        for w in words:
            occ = word_occurrences(w)
            # an entry with no letters would match the empty piece forever
            if not occ:
                raise ValueError(f"dictionary entry #{n} has no letters: {w!r}")
            buckets[occ].append(w)
            n += 1
        idx._by_occ = {occ: tuple(ws) for occ, ws in buckets.items()}
        idx._word_count = n
        if VERBOSE:
            print(f"[index] words={n:,} multisets={len(idx._by_occ):,}")
        return idx

    # ---- Query ----
    def lookup(self, occ: Occurrences) -> Tuple[Word, ...]:
        return self._by_occ.get(occ, ())

    def word_anagrams(self, word: Word) -> List[Word]:
        """All dictionary words with the same letters as `word` (may include `word`)."""
        return list(self.lookup(word_occurrences(word)))

    # ---- Introspection ----
    @property
    def word_count(self) -> int:
        return self._word_count

    def __len__(self) -> int:
        return len(self._by_occ)

    def __contains__(self, occ: object) -> bool:
        return occ in self._by_occ

    def __iter__(self) -> Iterator[Occurrences]:
        return iter(self._by_occ)
