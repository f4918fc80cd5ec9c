import json

import pytest

from lexitrie import __version__
from lexitrie.cli import main


@pytest.fixture
def words(word_file):
    return str(word_file(["cat", "bat", "cot", "dog", "car"]))


def run(capsys, *argv):
    main(list(argv))
    return capsys.readouterr().out


def test_count(capsys, words):
    assert run(capsys, "--words", words, "count").strip() == "5"


def test_list(capsys, words):
    assert run(capsys, "--words", words, "list").split() == ["bat", "car", "cat", "cot", "dog"]
    assert run(capsys, "--words", words, "list", "ca").split() == ["car", "cat"]


def test_contains(capsys, words):
    out = run(capsys, "--words", words, "contains", "cat", "Dog", "cow")
    assert out.splitlines() == ["cat\tTrue", "Dog\tTrue", "cow\tFalse"]


def test_prefix_json(capsys, words):
    out = run(capsys, "--words", words, "--json", "prefix", "co", "x")
    assert json.loads(out) == {"co": True, "x": False}


@pytest.mark.parametrize("backend", ["trie", "set", "marisa"])
def test_suggest(capsys, words, backend):
    out = run(capsys, "--words", words, "--backend", backend, "--json", "suggest", "cat")
    assert json.loads(out) == ["bat", "car", "cat", "cot"]


def test_suggest_distance(capsys, words):
    assert run(capsys, "--words", words, "suggest", "cat", "-d", "0").split() == ["cat"]


def test_match(capsys, words):
    assert run(capsys, "--words", words, "match", "*o_").split() == ["cot", "dog"]


def test_missing_word_list(capsys, tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["--words", str(tmp_path / "missing.txt"), "count"])
    assert exc.value.code == 1
    assert "Error:" in capsys.readouterr().err


def test_version(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])
    assert __version__ in capsys.readouterr().out


def test_list_lowercases_prefix(capsys, words):
    assert run(capsys, "--words", words, "list", "CA").split() == ["car", "cat"]
