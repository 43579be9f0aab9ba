# anagrams/engine.py
from __future__ import annotations

import os
import logging
from itertools import islice
from typing import Iterable, Iterator, List, Optional

from . import config as CFG
from .index import DictionaryIndex
from .loader import load_dictionary
from .models import AnagramResult, Sentence, Word
from .occurrences import occurrences_size, sentence_occurrences
from .search import iter_sentence_anagrams
from .storage import save_index, load_index

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - the dictionary word list (loader.load_dictionary or caller-supplied words),
      - the letter-multiset index (DictionaryIndex),
      - the sentence search (search.iter_sentence_anagrams).

    Public API (used by CLI/Flask):
      * build(words | path, ...): load -> index -> (optional) persist
      * load(cache=...):          load a pickled index
      * word_anagrams(word)
      * sentence_anagrams(sentence, limit=...)
      * shutdown()
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.index: Optional[DictionaryIndex] = None
        self.max_letters: int = CFG.MAX_LETTERS

    # /* ~~~ Build the index from a word list ~~~ */
    def build(
        self,
        words: Optional[Iterable[Word]] = None,
        *,
        path: Optional[str] = None,            # word list file; ignored when words are given
        cache: Optional[str] = None,           # pickle path to persist the built index
        max_letters: Optional[int] = None,
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["ANAGRAMS_VERBOSE"] = "1"

        if max_letters is not None:
            self.max_letters = int(max_letters)

        if words is None:
            log.info("Loading dictionary from %s", path or CFG.DICTIONARY_PATH or "bundled word list")
            words = load_dictionary(path)
        words = list(words)
        if not words:
            raise ValueError("build(): the dictionary is empty")

        log.info("Indexing %d words by letter multiset", len(words))
        idx = DictionaryIndex.build(words)

        if cache:
            log.info("Saving pickle index to %s", cache)
            save_index(idx, cache)

        self.index = idx
        log.info("Engine build() complete: words=%d multisets=%d", idx.word_count, len(idx))

    # /* ~~~ Load an already-built index ~~~ */
    def load(self, *, cache: Optional[str] = None, verbose: bool = False) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["ANAGRAMS_VERBOSE"] = "1"

        if not cache:
            raise ValueError("load(): require --cache to load an index")
        log.info("Loading pickle index from %s", cache)
        self.index = load_index(cache)
        log.info("Engine load() complete: words=%d multisets=%d", self.index.word_count, len(self.index))

    # ------------- query -------------

    def word_anagrams(self, word: Word) -> List[Word]:
        return self._require_index().word_anagrams(word)

    def iter_sentence_anagrams(self, sentence: Iterable[Word]) -> Iterator[Sentence]:
        idx = self._require_index()
        sentence = list(sentence)
        size = occurrences_size(sentence_occurrences(sentence))
        if size > self.max_letters:
            raise ValueError(
                f"sentence has {size} letters; the limit is {self.max_letters}"
            )
        return iter_sentence_anagrams(sentence, idx)

    # /* ~~~ Run the sentence search, optionally stopping after `limit` results ~~~ */
    def sentence_anagrams(self, sentence: Iterable[Word], *, limit: Optional[int] = None) -> List[AnagramResult]:
        if limit is not None and limit < 0:
            raise ValueError("limit must be >= 0")
        it = self.iter_sentence_anagrams(sentence)
        if limit is not None:
            it = islice(it, limit)
        return [AnagramResult.from_sentence(s) for s in it]

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.index = None
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require_index(self) -> DictionaryIndex:
        if self.index is None:
            raise RuntimeError("Engine not initialized. Call build() or load() first.")
        return self.index
