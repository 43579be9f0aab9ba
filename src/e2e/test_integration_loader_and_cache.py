from pathlib import Path
import pytest
from anagrams import config as CFG
from anagrams.loader import load_dictionary, iter_words, BUNDLED_DICTIONARY
from anagrams.index import DictionaryIndex
from anagrams.storage import save_index, load_index

def _seed(tmp: Path) -> Path:
    p = tmp / "words.txt"
    p.write_text("# comment line\neat\n\n  tea  \nAte\nman\n", encoding="utf-8")
    return p

def test_iter_words_skips_blank_and_comment_lines():
    assert list(iter_words(["a\n", "\n", "# x\n", " b \r\n"])) == ["a", "b"]

@pytest.mark.e2e
def test_load_dictionary_from_file(tmp_path: Path):
    words = load_dictionary(_seed(tmp_path))
    assert words == ["eat", "tea", "Ate", "man"]

@pytest.mark.e2e
def test_load_dictionary_defaults_to_bundled_list(monkeypatch):
    monkeypatch.setattr(CFG, "DICTIONARY_PATH", None)
    words = load_dictionary()
    assert BUNDLED_DICTIONARY.is_file()
    assert {"yes", "man", "Sean", "olive"} <= set(words)

@pytest.mark.e2e
def test_load_dictionary_uses_configured_path(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(CFG, "DICTIONARY_PATH", str(_seed(tmp_path)))
    assert load_dictionary() == ["eat", "tea", "Ate", "man"]

def test_load_dictionary_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_dictionary(tmp_path / "nope.txt")

@pytest.mark.e2e
def test_index_cache_round_trip(tmp_path: Path):
    idx = DictionaryIndex.build(load_dictionary(_seed(tmp_path)))
    cache = tmp_path / "cache" / "words.idx"
    save_index(idx, str(cache))
    assert cache.exists()
    assert not Path(f"{cache}.tmp").exists()

    again = load_index(str(cache))
    assert again.word_count == idx.word_count
    assert again.word_anagrams("tea") == ["eat", "tea", "Ate"]

def test_load_index_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_index(str(tmp_path / "missing.idx"))
