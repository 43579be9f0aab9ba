from __future__ import annotations
import os
import pickle

from .index import DictionaryIndex

def save_index(index: DictionaryIndex, path: str) -> None:
    """Pickle atomically: write path.tmp, then replace."""
    tmp = f"{path}.tmp"
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(tmp, "wb") as f:
        pickle.dump(index, f, protocol=pickle.HIGHEST_PROTOCOL)
    os.replace(tmp, path)

def load_index(path: str) -> DictionaryIndex:
    if not os.path.exists(path):
        raise FileNotFoundError(path)
    with open(path, "rb") as f:
        idx = pickle.load(f)
    if not isinstance(idx, DictionaryIndex):
        raise ValueError(f"{path} does not contain a DictionaryIndex")
    return idx
