"""Terminal rendering of found combinations."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from src.solver import Combination
from src.words import WordList


def format_combination(word_list: WordList, combination: Combination) -> str:
    """Render a combination as its original spellings separated by tabs."""
    return "\t".join(word_list.originals(combination))


def sort_combinations(word_list: WordList,
                      combinations: Iterable[Combination]) -> list[Combination]:
    """Order combinations by their spellings, for reproducible output."""
    return sorted(combinations, key=lambda c: word_list.originals(c))


def print_combinations(word_list: WordList, combinations: Iterable[Combination],
                       file: TextIO | None = None) -> int:
    """Print one combination per line. Returns how many were printed."""
    out = file or sys.stdout
    count = 0
    for combination in combinations:
        print(format_combination(word_list, combination), file=out)
        count += 1
    return count
