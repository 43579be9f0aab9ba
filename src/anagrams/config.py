from __future__ import annotations
import os

# Word list used when no words/path are given to Engine.build().
# None -> the bundled sample list (anagrams/data/words.txt).
DICTIONARY_PATH: str | None = os.environ.get("ANAGRAMS_DICTIONARY") or None
ENCODING: str = "utf-8"

# Lines starting with this prefix are skipped by the loader
COMMENT_PREFIX: str = "#"

# /* ~~~ safety caps for the sentence search ~~~ */
MAX_LETTERS: int = 20       # longest input (letters) the engine will search
DEFAULT_LIMIT: int = 100    # results returned by CLI / HTTP when not specified
MAX_LIMIT: int = 5000       # hard cap on a requested limit
