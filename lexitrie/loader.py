"""
Word sources for bulk loading.

The lexicon only consumes already-lowercased words; this module turns
files into such word streams. Plain text word lists are read one word
per line, XML word sources are streamed with lxml.
"""

from pathlib import Path
from typing import Iterator, Union

from lxml import etree

# Returned by Lexicon.add_words_from_file() when the source can't be read.
# Never a valid word count.
LOAD_FAILED = -1

DEFAULT_ENCODING = "utf-8"
DEFAULT_XML_TAG = "word"

PathLike = Union[str, Path]


def read_words(path: PathLike, encoding: str = DEFAULT_ENCODING) -> Iterator[str]:
    """
    Read a word list, one word per line.

    Lines are stripped and lowercased; blank lines are skipped. The file
    is closed when the generator is exhausted or discarded.

    Args:
        path: Path to the word list
        encoding: Text encoding of the file

    Yields:
        Lowercased words in file order (duplicates included)

    Raises:
        OSError: If the file can't be opened or read
        ValueError: If the path is invalid or the file isn't valid in the
            given encoding (UnicodeDecodeError)
    """
    with open(path, "r", encoding=encoding) as f:
        for line in f:
            word = line.strip().lower()
            if word:
                yield word


def node_text(elem) -> str:
    """Get the full text content of an XML element."""
    return "".join(elem.itertext()).strip()


def iter_xml_words(path: PathLike, tag: str = DEFAULT_XML_TAG) -> Iterator[str]:
    """
    Stream words out of an XML source.

    Every element named `tag` contributes its text content as one word.
    Elements are cleared once read so large sources stay cheap.

    Args:
        path: Path to the XML file
        tag: Element name holding one word

    Yields:
        Lowercased words in document order
    """
    context = etree.iterparse(
        str(path),
        events=("end",),
        tag=tag,
        recover=True,
        no_network=True,
    )
    for _, elem in context:
        word = node_text(elem).lower()
        elem.clear()
        if word:
            yield word
