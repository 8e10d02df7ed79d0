"""Word signatures, anagram deduplication and the disjointness test."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from src.constants import STDIN_PATH, WORD_LENGTH

logger = logging.getLogger(__name__)


def all_characters_unique(chars: Sequence[str]) -> bool:
    """True if *chars* has no repeated element. Assumes *chars* is sorted."""
    for i in range(1, len(chars)):
        if chars[i - 1] == chars[i]:
            return False
    return True


def canonicalize(line: str, length: int = WORD_LENGTH) -> tuple[str, str] | None:
    """Turn a raw input line into ``(signature, original)``.

    The signature is the line's characters sorted ascending. Returns None
    when the line is not exactly *length* characters long or repeats a
    character. Length and repeats are counted in code points, not bytes.
    """
    original = line.rstrip("\r\n")
    if len(original) != length:
        return None
    chars = sorted(original)
    if not all_characters_unique(chars):
        return None
    return "".join(chars), original


def is_disjoint(a: str, b: str) -> bool:
    """True if two sorted, duplicate-free signatures share no character.

    Merge-style scan: advance whichever cursor points at the smaller
    character and stop at the first match.
    """
    i = j = 0
    len_a, len_b = len(a), len(b)
    while i < len_a and j < len_b:
        ca, cb = a[i], b[j]
        if ca == cb:
            return False
        if ca < cb:
            i += 1
        else:
            j += 1
    return True


@dataclass(frozen=True)
class Word:
    """A deduplicated dictionary entry.

    Only the signature takes part in equality and hashing, so anagrams of
    each other are the same Word.
    """
    signature: str
    original: str = field(compare=False)

    def is_disjoint_with(self, other: Word) -> bool:
        return is_disjoint(self.signature, other.signature)


class WordList(tuple):
    """Immutable, index-addressed list of Words shared by every search."""

    __slots__ = ()

    @property
    def signatures(self) -> tuple[str, ...]:
        return tuple(w.signature for w in self)

    def originals(self, combination: Iterable[int]) -> list[str]:
        """Resolve a combination of indices to the original spellings."""
        return [self[i].original for i in combination]


def build_word_list(lines: Iterable[str], length: int = WORD_LENGTH) -> WordList:
    """Canonicalize *lines* and collapse anagrams into a WordList.

    The first spelling seen for a signature is kept; later anagrams are
    dropped and reported at DEBUG level.
    """
    if length < 1:
        raise ValueError(f"Word length must be at least 1, got {length}")

    by_signature: dict[str, Word] = {}
    total_lines = 0
    anagrams = 0

    for line in lines:
        total_lines += 1
        canonical = canonicalize(line, length)
        if canonical is None:
            continue
        signature, original = canonical

        existing = by_signature.get(signature)
        if existing is not None:
            anagrams += 1
            logger.debug(
                "An anagram of the word %s is already in the list (%s).",
                original, existing.original,
            )
            continue

        logger.debug("Adding the word %s to the list.", original)
        by_signature[signature] = Word(signature, original)

    logger.info(
        "Read %d lines: kept %d words, dropped %d anagrams",
        total_lines, len(by_signature), anagrams,
    )
    return WordList(by_signature.values())


def load_word_list(path: str | Path | None = None,
                   length: int = WORD_LENGTH) -> WordList:
    """Load words from a file (one word per line), or stdin for None / "-"."""
    if path is None or str(path) == STDIN_PATH:
        logger.info("Reading words from standard input")
        return build_word_list(sys.stdin, length)

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word list not found: {path}")

    logger.info("Reading words from %s", path)
    with open(path, encoding="utf-8") as f:
        return build_word_list(f, length)
