"""
CLI interface for lexitrie.

Usage:
    lexitrie --words words.txt count
    lexitrie --words words.txt suggest cat -d 1
    lexitrie --words words.txt --json match "c?t*"
"""

import argparse
import json
import sys
from typing import Iterable, List

from lexitrie import __version__
from lexitrie.compact import MarisaLexicon
from lexitrie.dictionary import DEFAULT_MAX_DISTANCE, get_dictionary_path
from lexitrie.lexicon import Lexicon, SetLexicon, TrieLexicon
from lexitrie.loader import DEFAULT_ENCODING, LOAD_FAILED


BACKENDS = {
    "trie": TrieLexicon,
    "set": SetLexicon,
    "marisa": MarisaLexicon,
}


# ============================================================================
# Output Formatting
# ============================================================================

def format_words(words: Iterable[str], as_json: bool = False) -> str:
    """Format words one per line (or as a JSON array), sorted."""
    ordered = sorted(words)
    if as_json:
        return json.dumps(ordered, ensure_ascii=False)
    return "\n".join(ordered)


def format_checks(items: List[str], results: List[bool], as_json: bool = False) -> str:
    """Format membership checks as `item<TAB>True|False` lines (or a JSON object)."""
    if as_json:
        return json.dumps(dict(zip(items, results)), ensure_ascii=False)
    return "\n".join(f"{item}\t{result}" for item, result in zip(items, results))


# ============================================================================
# Main
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lexitrie",
        description="Query a word list with prefix, near-miss and wildcard lookups",
    )
    parser.add_argument(
        "--words", "-w",
        default=None,
        help=f"Word list, one word per line (default: {get_dictionary_path()})",
    )
    parser.add_argument(
        "--backend", "-b",
        choices=sorted(BACKENDS),
        default="trie",
        help="Dictionary backend (default: trie)",
    )
    parser.add_argument(
        "--encoding", "-e",
        default=DEFAULT_ENCODING,
        help=f"Word list encoding (default: {DEFAULT_ENCODING})",
    )
    parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"lexitrie {__version__}",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("count", help="Print the number of words")

    p = sub.add_parser("list", help="List words in order")
    p.add_argument("prefix", nargs="?", default="", help="Only words with this prefix")

    p = sub.add_parser("contains", help="Check whether words are present")
    p.add_argument("items", nargs="+", metavar="WORD")

    p = sub.add_parser("prefix", help="Check whether prefixes are present")
    p.add_argument("items", nargs="+", metavar="PREFIX")

    p = sub.add_parser("suggest", help="Same-length words within a substitution distance")
    p.add_argument("word")
    p.add_argument(
        "--distance", "-d",
        type=int,
        default=DEFAULT_MAX_DISTANCE,
        help=f"Maximum number of substituted characters (default: {DEFAULT_MAX_DISTANCE})",
    )

    p = sub.add_parser("match", help="Words matching a wildcard pattern (_ ? *)")
    p.add_argument("pattern")

    return parser


def run(lexicon: Lexicon, args: argparse.Namespace) -> str:
    """Run one command against a loaded lexicon and return its output."""
    if args.command == "count":
        return str(lexicon.num_words())
    if args.command == "list":
        return format_words(lexicon.words_with_prefix(args.prefix.lower()), args.json)
    if args.command == "contains":
        results = [lexicon.contains_word(w.lower()) for w in args.items]
        return format_checks(args.items, results, args.json)
    if args.command == "prefix":
        results = [lexicon.contains_prefix(p.lower()) for p in args.items]
        return format_checks(args.items, results, args.json)
    if args.command == "suggest":
        return format_words(lexicon.suggest_corrections(args.word.lower(), args.distance), args.json)
    if args.command == "match":
        return format_words(lexicon.match_regex(args.pattern.lower()), args.json)
    raise ValueError(f"unknown command: {args.command}")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    path = args.words if args.words is not None else get_dictionary_path()
    lexicon = BACKENDS[args.backend]()

    if lexicon.add_words_from_file(path, encoding=args.encoding) == LOAD_FAILED:
        print(f"Error: could not read word list {path}", file=sys.stderr)
        sys.exit(1)

    try:
        output = run(lexicon, args)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if output:
        print(output)


if __name__ == "__main__":
    main()
