import pytest

from lexitrie import MarisaLexicon, SetLexicon, TrieLexicon
from lexitrie import dictionary

BACKENDS = [TrieLexicon, SetLexicon, MarisaLexicon]

ANIMALS = ["cat", "bat", "cot", "dog"]
CA_WORDS = ["cat", "car", "can", "dog"]


@pytest.fixture(params=BACKENDS, ids=lambda cls: cls.__name__)
def backend(request):
    """Each lexicon class in turn."""
    return request.param


@pytest.fixture
def animals():
    return TrieLexicon(ANIMALS)


@pytest.fixture
def ca_words():
    return TrieLexicon(CA_WORDS)


@pytest.fixture
def word_file(tmp_path):
    """Write lines to a word list file and return its path."""
    def _write(lines, name="words.txt"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def _reset_dictionary():
    dictionary.unload_dictionary()
    yield
    dictionary.unload_dictionary()
