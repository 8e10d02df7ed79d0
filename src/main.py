"""CLI entry point for the disjoint words finder."""

from __future__ import annotations

import argparse
import logging
import sys

from src.constants import COMBINATION_LENGTH, STDIN_PATH, WORD_LENGTH
from src.display import print_combinations, sort_combinations
from src.solver import SearchTimeout, search
from src.words import load_word_list

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Read a list of words and print every tab-separated combination "
            "of words that have no characters in common. Anagrams of words "
            "already in the list are ignored."
        ),
    )
    parser.add_argument(
        "--input-file", "-i",
        type=str,
        default=None,
        help=f"Path to a file with one word per line (default: stdin, or '{STDIN_PATH}')",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--progress", "-p",
        action="store_true",
        help="Show a progress bar on standard error",
    )
    output.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Add extra output to standard error, can't be used with --progress",
    )
    parser.add_argument(
        "--count", "-n",
        type=int,
        default=COMBINATION_LENGTH,
        help=f"Number of words per combination (default: {COMBINATION_LENGTH})",
    )
    parser.add_argument(
        "--word-length", "-l",
        type=int,
        default=WORD_LENGTH,
        help=f"Length of the words to consider (default: {WORD_LENGTH})",
    )
    parser.add_argument(
        "--workers", "-j",
        type=int,
        default=None,
        help="Number of worker processes (default: one per CPU)",
    )
    parser.add_argument(
        "--timeout", "-t",
        type=float,
        default=None,
        help="Give up after this many seconds (default: no limit)",
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        help="Sort combinations alphabetically before printing",
    )
    args = parser.parse_args(argv)

    if args.count < 1:
        parser.error("--count must be at least 1")
    if args.word_length < 1:
        parser.error("--word-length must be at least 1")
    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be at least 1")
    return args


def setup_logging(verbose: bool) -> None:
    """Send diagnostics to stderr; debug detail only with --verbose."""
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)

    # 1. Load words
    try:
        word_list = load_word_list(args.input_file, length=args.word_length)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Could not read word list: {e}", file=sys.stderr)
        sys.exit(1)

    # 2. Search
    try:
        combinations = search(
            word_list,
            length=args.count,
            workers=args.workers,
            progress=args.progress,
            timeout=args.timeout,
        )
    except SearchTimeout as e:
        print(f"No result: {e}", file=sys.stderr)
        sys.exit(1)

    # 3. Display
    if args.sort:
        combinations = sort_combinations(word_list, combinations)
    printed = print_combinations(word_list, combinations)
    logger.info("Printed %d combinations", printed)


if __name__ == "__main__":
    main()
