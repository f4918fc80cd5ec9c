#!/usr/bin/env python3
"""
Word List Builder for lexitrie.

This script merges one or more word sources into a single word list:
lowercased, deduplicated, sorted, one word per line. Plain text sources
are read one word per line; `.xml` sources are streamed with lxml, taking
the text of every element named by --tag.

Usage:
    python scripts/build_wordlist.py SOURCE [SOURCE ...] [--output PATH] [--tag TAG]
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Iterable, Iterator, Set

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from lexitrie.dictionary import get_dictionary_path
from lexitrie.loader import DEFAULT_XML_TAG, iter_xml_words, read_words

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


# ============================================================================
# Paths
# ============================================================================

DEFAULT_OUTPUT = get_dictionary_path()


# ============================================================================
# Source Reading
# ============================================================================

def iter_source(path: Path, tag: str) -> Iterator[str]:
    """Yield words from a text or XML source."""
    if path.suffix.lower() == ".xml":
        return iter_xml_words(path, tag=tag)
    return read_words(path)


def collect_words(sources: Iterable[Path], tag: str) -> Set[str]:
    """Collect the union of all words from every source."""
    words: Set[str] = set()
    for source in sources:
        logger.info(f"Reading {source}...")
        before = len(words)
        count = 0
        for word in iter_source(source, tag):
            words.add(word)
            count += 1
            if count % 100000 == 0:
                logger.info(f"  Read {count} words...")
        logger.info(f"  {count} words read, {len(words) - before} new")
    return words


def save_wordlist(words: Set[str], output_path: Path):
    """Save words sorted, one per line."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        for word in sorted(words):
            f.write(word)
            f.write("\n")

    file_size = output_path.stat().st_size / (1024 * 1024)
    logger.info(f"Saved {len(words)} words to {output_path} ({file_size:.1f} MB)")


# ============================================================================
# Main
# ============================================================================

def main():
    parser = argparse.ArgumentParser(
        description="Build a lexitrie word list from text and XML sources"
    )
    parser.add_argument(
        'sources',
        nargs='+',
        type=Path,
        help="Word sources (.xml files are parsed as XML, anything else as one word per line)"
    )
    parser.add_argument(
        '--output', '-o',
        type=Path,
        default=DEFAULT_OUTPUT,
        help=f"Output word list path (default: {DEFAULT_OUTPUT})"
    )
    parser.add_argument(
        '--tag', '-t',
        default=DEFAULT_XML_TAG,
        help=f"XML element holding one word (default: {DEFAULT_XML_TAG})"
    )

    args = parser.parse_args()

    for source in args.sources:
        if not source.exists():
            logger.error(f"Source not found: {source}")
            sys.exit(1)

    start_time = time.time()

    words = collect_words(args.sources, args.tag)
    save_wordlist(words, args.output)

    elapsed = time.time() - start_time
    logger.info(f"Build completed in {elapsed:.1f} seconds")


if __name__ == '__main__':
    main()
