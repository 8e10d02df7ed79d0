"""Backtracking search for combinations of mutually disjoint words."""

from __future__ import annotations

import logging
import os
import sys
import time
from collections.abc import Iterable, Iterator, Sequence
from multiprocessing import Pool

from tqdm import tqdm

from src.constants import COMBINATION_LENGTH, PROGRESS_BAR_ASCII, PROGRESS_BAR_FORMAT
from src.words import WordList, is_disjoint

logger = logging.getLogger(__name__)

Combination = tuple[int, ...]


class SearchTimeout(Exception):
    """Raised when a search runs past its deadline."""


def _narrow(signatures: Sequence[str], state: list[int],
            valid_indices: Iterable[int]) -> list[int]:
    """Keep the indices in *valid_indices* that are disjoint with the last
    chosen word.

    Everything in *valid_indices* is already disjoint with the earlier words
    of *state*, so only the newest one needs checking.
    """
    assert state, "search state must not be empty"
    last_signature = signatures[state[-1]]
    return [j for j in valid_indices if is_disjoint(last_signature, signatures[j])]


def search_partition(signatures: Sequence[str], length: int, start: int,
                     deadline: float | None = None) -> list[Combination]:
    """Find every disjoint combination of *length* words whose first
    (lowest) index is *start*.

    Combinations are built index-ascending so each set of words is found
    exactly once. *deadline* is a ``time.monotonic()`` value; once it has
    passed the search stops with SearchTimeout and nothing is returned.
    """
    if length < 1:
        raise ValueError(f"Combination length must be at least 1, got {length}")

    results: list[Combination] = []
    state = [start]

    def _backtrack(valid_indices: Iterable[int]) -> None:
        if deadline is not None and time.monotonic() > deadline:
            raise SearchTimeout(f"Search timed out at starting word {start}")

        if len(state) == length:
            results.append(tuple(state))
            return

        narrowed = _narrow(signatures, state, valid_indices)
        last = state[-1]
        for next_index in narrowed:
            # Words before *last* were already tried as earlier picks
            if next_index < last:
                continue
            state.append(next_index)
            _backtrack(narrowed)
            state.pop()

    _backtrack(range(len(signatures)))
    return results


# ---------------------------------------------------------------------------
# Parallel dispatch — one task per starting word
# ---------------------------------------------------------------------------

_worker_signatures: tuple[str, ...] = ()
_worker_length = COMBINATION_LENGTH
_worker_deadline: float | None = None


def _init_worker(signatures: tuple[str, ...], length: int,
                 deadline: float | None) -> None:
    """Install the shared read-only search inputs once per worker process."""
    global _worker_signatures, _worker_length, _worker_deadline
    _worker_signatures = signatures
    _worker_length = length
    _worker_deadline = deadline


def _search_worker(start: int) -> list[Combination]:
    return search_partition(_worker_signatures, _worker_length, start, _worker_deadline)


def _progress(iterable: Iterable, total: int, enabled: bool) -> tqdm:
    return tqdm(
        iterable,
        total=total,
        disable=not enabled,
        file=sys.stderr,
        ascii=PROGRESS_BAR_ASCII,
        bar_format=PROGRESS_BAR_FORMAT,
    )


def _partitions(signatures: tuple[str, ...], length: int, workers: int,
                deadline: float | None) -> Iterator[list[Combination]]:
    n = len(signatures)
    if workers == 1 or n < 2:
        for start in range(n):
            yield search_partition(signatures, length, start, deadline)
        return

    with Pool(
        processes=min(workers, n),
        initializer=_init_worker,
        initargs=(signatures, length, deadline),
    ) as pool:
        # Partition size shrinks with the starting index
        yield from pool.imap_unordered(_search_worker, range(n), chunksize=1)


def search(
    word_list: WordList,
    length: int = COMBINATION_LENGTH,
    workers: int | None = None,
    progress: bool = False,
    timeout: float | None = None,
) -> list[Combination]:
    """Find all combinations of *length* pairwise disjoint words.

    Each combination is a strictly increasing tuple of indices into
    *word_list*. Partitions run on a pool of *workers* processes (default:
    one per CPU); ``workers=1`` searches in-process. The order of the
    returned combinations is not defined.
    """
    if length < 1:
        raise ValueError(f"Combination length must be at least 1, got {length}")
    if workers is None:
        workers = os.cpu_count() or 1
    if workers < 1:
        raise ValueError(f"Worker count must be at least 1, got {workers}")

    signatures = word_list.signatures
    n = len(signatures)
    deadline = time.monotonic() + timeout if timeout is not None else None
    start_time = time.time()
    logger.info("Searching %d words for %d-word combinations with %d worker(s)",
                n, length, workers)

    verbose = logger.isEnabledFor(logging.DEBUG)
    results: list[Combination] = []
    with _progress(_partitions(signatures, length, workers, deadline), n, progress) as bar:
        for found in bar:
            if verbose:
                for combination in found:
                    logger.debug("Found: %s", " ".join(word_list.originals(combination)))
            results.extend(found)

    logger.info("Found %d combinations in %.2fs", len(results), time.time() - start_time)
    return results
