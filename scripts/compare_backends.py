#!/usr/bin/env python3
"""
Lexicon Backend Comparison

Loads one word list into every lexicon backend (trie, set, marisa) and
checks that they agree on enumeration, near-miss suggestions and
wildcard matches, reporting the time each backend takes.

Usage:
    python scripts/compare_backends.py --words words.txt
    python scripts/compare_backends.py --words words.txt --suggest cat --match "c?t*"
"""

import sys
import time
import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List

# Add parent to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from lexitrie import LOAD_FAILED, Lexicon, MarisaLexicon, SetLexicon, TrieLexicon

BACKENDS = {
    "trie": TrieLexicon,
    "set": SetLexicon,
    "marisa": MarisaLexicon,
}

DEFAULT_SUGGEST = ["cat", "house", "tree"]
DEFAULT_MATCH = ["c_t", "c?t*", "*ing", "_a_e"]


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class ComparisonResult:
    """Outcome of one query run against every backend."""
    query: str
    agree: bool
    sizes: Dict[str, int] = field(default_factory=dict)
    times: Dict[str, float] = field(default_factory=dict)


# =============================================================================
# Comparison
# =============================================================================

def compare(query: str, lexicons: Dict[str, Lexicon],
            run: Callable[[Lexicon], object]) -> ComparisonResult:
    """Run one query on every backend and check the answers agree."""
    answers = {}
    result = ComparisonResult(query=query, agree=True)
    for name, lexicon in lexicons.items():
        t0 = time.perf_counter()
        answers[name] = run(lexicon)
        result.times[name] = (time.perf_counter() - t0) * 1000
        result.sizes[name] = len(answers[name])

    reference = answers["trie"]
    result.agree = all(answer == reference for answer in answers.values())
    return result


def print_result(result: ComparisonResult):
    """Print a single comparison result."""
    icon = "✓" if result.agree else "✗"
    timings = "  ".join(
        f"{name}={result.times[name]:.1f}ms/{result.sizes[name]}" for name in result.times
    )
    print(f"  {icon} {result.query:<24} {timings}")


# =============================================================================
# Main
# =============================================================================

def main():
    parser = argparse.ArgumentParser(description="Compare lexicon backends on one word list")
    parser.add_argument("--words", "-w", type=Path, required=True, help="Word list, one word per line")
    parser.add_argument("--suggest", "-s", nargs="*", default=DEFAULT_SUGGEST, help="Words to suggest corrections for")
    parser.add_argument("--distance", "-d", type=int, default=1, help="Maximum substitution distance")
    parser.add_argument("--match", "-m", nargs="*", default=DEFAULT_MATCH, help="Wildcard patterns to match")
    args = parser.parse_args()

    print("=" * 60)
    print("Loading backends")
    print("=" * 60)

    lexicons: Dict[str, Lexicon] = {}
    for name, cls in BACKENDS.items():
        lexicon = cls()
        t0 = time.perf_counter()
        added = lexicon.add_words_from_file(args.words)
        elapsed = (time.perf_counter() - t0) * 1000
        if added == LOAD_FAILED:
            print(f"Could not read word list {args.words}")
            return 1
        print(f"  {name:<8} {elapsed:>8.1f}ms ({added:,} words)")
        lexicons[name] = lexicon

    print()
    results: List[ComparisonResult] = [
        compare("<enumerate>", lexicons, lambda lex: lex.words()),
    ]
    for word in args.suggest:
        results.append(compare(f"suggest {word}", lexicons,
                               lambda lex, w=word: lex.suggest_corrections(w, args.distance)))
    for pattern in args.match:
        results.append(compare(f"match {pattern}", lexicons,
                               lambda lex, p=pattern: lex.match_regex(p)))

    for result in results:
        print_result(result)

    disagreements = sum(1 for r in results if not r.agree)
    print()
    print(f"{len(results)} queries, {disagreements} disagreements")
    return 0 if disagreements == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
