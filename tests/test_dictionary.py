import pytest

from lexitrie import __version__, dictionary, get_version, warm_up
from lexitrie.dictionary import DictionaryLoadError


def test_load_and_lookup(word_file):
    path = word_file(["car", "cart", "cat", "dog"])
    lex = dictionary.load_dictionary(path)

    assert dictionary.is_dictionary_loaded()
    assert dictionary.get_dictionary_size() == 4
    assert lex.num_words() == 4
    assert dictionary.contains("cat")
    assert not dictionary.contains("ca")
    assert dictionary.has_prefix("ca")
    assert dictionary.lookup_prefix("car") == ["car", "cart"]
    assert dictionary.suggest("cot") == {"cat"}
    assert dictionary.match("ca*") == {"car", "cart", "cat"}


def test_load_is_cached(word_file):
    first = dictionary.load_dictionary(word_file(["one"], name="a.txt"))
    second = dictionary.load_dictionary(word_file(["two"], name="b.txt"))
    assert second is first
    assert dictionary.contains("one")
    assert not dictionary.contains("two")


def test_unload(word_file):
    dictionary.load_dictionary(word_file(["one"]))
    dictionary.unload_dictionary()
    assert not dictionary.is_dictionary_loaded()
    assert dictionary.get_dictionary_size() == 0


def test_missing_word_list(tmp_path):
    with pytest.raises(FileNotFoundError):
        dictionary.load_dictionary(tmp_path / "missing.txt")
    assert not dictionary.is_dictionary_loaded()


def test_unreadable_word_list(tmp_path):
    with pytest.raises(DictionaryLoadError):
        dictionary.load_dictionary(tmp_path)
    assert not dictionary.is_dictionary_loaded()


def test_shortcuts_load_default_path(word_file, monkeypatch):
    path = word_file(["default"])
    monkeypatch.setattr(dictionary, "get_dictionary_path", lambda: path)
    assert dictionary.contains("default")
    assert dictionary.is_dictionary_loaded()


def test_warm_up_loads_dictionary(word_file, capsys):
    lex, elapsed = warm_up(word_file(["cat", "dog"]), verbose=True)

    assert dictionary.is_dictionary_loaded()
    assert lex is dictionary.load_dictionary()
    assert lex.num_words() == 2
    assert elapsed >= 0
    assert "2 words" in capsys.readouterr().out


def test_warm_up_reuses_loaded_dictionary(word_file):
    first, _ = warm_up(word_file(["one"], name="a.txt"))
    second, _ = warm_up(word_file(["two"], name="b.txt"))
    assert second is first


def test_warm_up_missing_word_list(tmp_path):
    with pytest.raises(FileNotFoundError):
        warm_up(tmp_path / "missing.txt")


def test_get_version():
    assert get_version() == __version__
