from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, Iterator, List

from . import config as CFG
from .models import Word

# Progress logging (set ANAGRAMS_VERBOSE=1 to enable)
VERBOSE = os.environ.get("ANAGRAMS_VERBOSE") == "1"
PROGRESS_EVERY_WORDS = 10_000

BUNDLED_DICTIONARY = Path(__file__).resolve().parent / "data" / "words.txt"

def iter_words(lines: Iterable[str]) -> Iterator[Word]:
    """Yield one word per non-blank, non-comment line (surrounding whitespace stripped)."""
    for raw in lines:
        w = raw.strip()
        if not w or w.startswith(CFG.COMMENT_PREFIX):
            continue
        yield w

def load_dictionary(path: str | os.PathLike | None = None) -> List[Word]:
    """
    Read a word list, one word per line.
    path=None -> config.DICTIONARY_PATH, falling back to the bundled sample list.
    Undecodable bytes are ignored; dictionary order is preserved.
    """
    p = Path(path or CFG.DICTIONARY_PATH or BUNDLED_DICTIONARY)
    if not p.is_file():
        raise FileNotFoundError(str(p))

    words: List[Word] = []
    with p.open("r", encoding=CFG.ENCODING, errors="ignore") as f:
        for w in iter_words(f):
            words.append(w)
            if VERBOSE and len(words) % PROGRESS_EVERY_WORDS == 0:
                print(f"[loaded] words={len(words):,}")

    if VERBOSE:
        print(f"[done] {p.name}: words={len(words):,}")
    return words
