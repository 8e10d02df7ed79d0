"""Shared fixtures for disjoint words tests."""

from __future__ import annotations

from itertools import combinations

import pytest

from src.words import WordList, build_word_list


@pytest.fixture
def five_disjoint_lines() -> list[str]:
    """Five pairwise disjoint words plus one with repeated letters."""
    return ["abcde", "fghij", "klmno", "pqrst", "uvwxy", "aabbc"]


@pytest.fixture
def small_word_list() -> WordList:
    """Hand-picked five-letter words, including anagrams and rejects."""
    lines = [
        "fjord", "gucks", "nymph", "vibex", "waltz",   # a known 25-letter answer
        "chunk", "fjord", "gymps", "vibex", "waltz",   # repeats
        "dwarf", "glyph", "jocks", "muntz", "vibex",
        "ardor",                                       # repeated letter
        "ofjrd",                                       # anagram of fjord
        "brick", "glent", "jumpy", "vozhd", "waqfs",   # another known answer
        "four", "fourteen",                            # wrong length
    ]
    return build_word_list(lines)


@pytest.fixture
def letter_triples() -> WordList:
    """Every three-letter combination of a-i, one spelling per signature."""
    return build_word_list(("".join(c) for c in combinations("abcdefghi", 3)), length=3)
