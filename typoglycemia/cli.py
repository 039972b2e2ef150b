"""Command-line interface for the typoglycemia text shuffler.

WHY: The common use is one shell command: take a text file, write a
shuffled copy. The CLI wires argument parsing, logging setup, and
TextShuffler.process_file() behind that command.

HOW: Uses argparse for two positional paths plus --seed and --verbose.
The parser reports usage errors on stdout with exit code 1 (instead of
argparse's stderr / exit 2). FileError from the library is caught here
and only here, printed as "Error: <message>", and turned into exit 1.

RULES:
- Positional arguments: input_file, output_file (exactly two)
- Wrong argument count -> usage + example on stdout, exit 1
- Success -> confirmation naming the output path on stdout, exit 0
- Failure -> "Error: <message>" on stdout, exit 1
- Log records go to stderr via logging; user-facing messages go to stdout
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, NoReturn, Optional

from typoglycemia.config import DEFAULT_LOG_LEVEL, load_seed
from typoglycemia.core.shuffler import FileError, TextShuffler

logger = logging.getLogger(__name__)

EXAMPLE_TEXT = "Example: typoglycemia text.txt shuffled_text.txt"


class _UsageParser(argparse.ArgumentParser):
    """ArgumentParser that prints usage errors to stdout and exits with 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stdout)
        print(EXAMPLE_TEXT)
        print("{}: error: {}".format(self.prog, message))
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() lets tests inspect
    the parser without touching the filesystem.
    """
    parser = _UsageParser(
        prog="typoglycemia",
        description="Shuffle the interior letters of every word in a text file, "
                    "keeping first and last letters and punctuation in place.",
        epilog=EXAMPLE_TEXT,
    )

    parser.add_argument(
        "input_file",
        help="Path to the UTF-8 text file to read.",
    )

    parser.add_argument(
        "output_file",
        help="Path to write the shuffled text to (overwritten if it exists).",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible output "
             "(default: TYPOGLYCEMIA_SEED from the environment, else random).",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log progress details to stderr.",
    )

    return parser


def _resolve_log_level(name: str) -> int:
    """Map a level name such as "INFO" to its number; unknown names give WARNING."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else _resolve_log_level(DEFAULT_LOG_LEVEL)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        seed = args.seed if args.seed is not None else load_seed()
        shuffler = TextShuffler(rng=random.Random(seed))
    except ValueError as e:
        # Malformed TYPOGLYCEMIA_SEED or TYPOGLYCEMIA_ENCODING
        print("Error: {}".format(e))
        sys.exit(1)

    logger.debug("Using seed %s, encoding %s", seed, shuffler.encoding)

    try:
        result = shuffler.process_file(args.input_file, args.output_file)
    except FileError as e:
        logger.debug("Processing failed (%s)", e.kind.value)
        print("Error: {}".format(e.message))
        sys.exit(1)

    logger.info("Wrote %d lines, %d words", result.line_count, result.word_count)
    print("File has been successfully processed!")
    print("Result saved to: {}".format(args.output_file))


if __name__ == "__main__":
    main()
