"""File-level typoglycemia processing and its error taxonomy.

WHY: The CLI (and any other caller) wants one call that turns an input
file into a shuffled output file and reports failures in a way it can
show to a user. This module wraps the pure transforms from words.py
with file I/O and typed errors.

HOW: TextShuffler holds the random source and encoding. process_file()
reads the whole input, transforms it line by line, and writes the whole
output. OS and decoding errors are re-raised as one of three FileError
subclasses, each tagged with a FileErrorKind.

RULES:
- Read and write with newline translation off, so "\\r\\n" is kept as data
- Missing input -> InputNotFoundError; any other read failure -> InputUnreadableError
- Write failure -> OutputUnwritableError (a partial output file may remain)
- All errors are terminal; nothing is retried
- The original OSError/ValueError is chained as __cause__
- An unknown encoding is rejected with ValueError when TextShuffler is built
"""

from __future__ import annotations

import codecs
import enum
import logging
import random
from pathlib import Path
from typing import Optional, Union

from typoglycemia.config import LINE_SEPARATOR, WORD_SEPARATOR, load_encoding, load_seed
from typoglycemia.core import words
from typoglycemia.core.ir import ProcessResult

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FileErrorKind(enum.Enum):
    """Which step of process_file() failed."""

    INPUT_NOT_FOUND = "input_not_found"
    INPUT_UNREADABLE = "input_unreadable"
    OUTPUT_UNWRITABLE = "output_unwritable"


class FileError(Exception):
    """Raised when process_file() cannot read its input or write its output.

    WHY: Callers need one exception type to catch and a kind to branch on,
    without parsing messages or inspecting errno.

    HOW: Carries the failing path and the FileErrorKind. The message is a
    short sentence naming the path, suitable for printing as-is.

    RULES:
    - Always include kind and path
    - Subclasses fix the kind and the message wording
    """

    kind: FileErrorKind

    def __init__(self, path: PathLike, message: str) -> None:
        self.path = Path(path)
        self.message = message
        super().__init__(message)


class InputNotFoundError(FileError):
    """The input path does not exist."""

    kind = FileErrorKind.INPUT_NOT_FOUND

    def __init__(self, path: PathLike) -> None:
        super().__init__(path, "File '{}' does not exist!".format(path))


class InputUnreadableError(FileError):
    """The input exists but could not be read or decoded."""

    kind = FileErrorKind.INPUT_UNREADABLE

    def __init__(self, path: PathLike) -> None:
        super().__init__(path, "Cannot read file '{}'!".format(path))


class OutputUnwritableError(FileError):
    """The output file could not be opened or written."""

    kind = FileErrorKind.OUTPUT_UNWRITABLE

    def __init__(self, path: PathLike) -> None:
        super().__init__(path, "Cannot write to file '{}'!".format(path))


class TextShuffler:
    """Applies the typoglycemia effect to text and text files.

    WHY: Bundles the random source with the transforms so a caller can
    seed once and get reproducible output across many calls.

    HOW: Thin methods over the functions in words.py, each passing the
    instance's rng. process_file() adds the read/write steps.

    RULES:
    - rng=None builds random.Random(load_seed()); an unset seed means OS entropy
    - encoding=None reads TYPOGLYCEMIA_ENCODING (default utf-8)
    - encoding must name a codec known to Python, else ValueError
    - The instance holds no per-call state
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        encoding: Optional[str] = None,
    ) -> None:
        if encoding is None:
            encoding = load_encoding()
        try:
            codecs.lookup(encoding)
        except LookupError:
            raise ValueError("Unknown text encoding: {!r}".format(encoding)) from None
        self.rng = rng if rng is not None else random.Random(load_seed())
        self.encoding = encoding

    def shuffle_word(self, core: str) -> str:
        return words.shuffle_word(core, self.rng)

    def process_word(self, word: str) -> str:
        return words.process_word(word, self.rng)

    def process_line(self, line: str) -> str:
        return words.process_line(line, self.rng)

    def process_text(self, text: str) -> str:
        return words.process_text(text, self.rng)

    def process_file(self, input_path: PathLike, output_path: PathLike) -> ProcessResult:
        """Read ``input_path``, shuffle every word, and write ``output_path``.

        Args:
            input_path: Text file to read.
            output_path: File to create or overwrite with the result.

        Returns:
            ProcessResult with line and word counts.

        Raises:
            InputNotFoundError: ``input_path`` does not exist.
            InputUnreadableError: ``input_path`` cannot be read or decoded.
            OutputUnwritableError: ``output_path`` cannot be written.
        """
        source = Path(input_path)
        target = Path(output_path)

        content = self._read(source)
        lines = content.split(LINE_SEPARATOR)
        word_count = sum(len(line.split(WORD_SEPARATOR)) for line in lines)
        logger.debug("Read %d lines (%d words) from %s", len(lines), word_count, source)

        shuffled = self.process_text(content)

        self._write(target, shuffled)
        logger.info("Shuffled %d lines from %s into %s", len(lines), source, target)

        return ProcessResult(
            input_path=source,
            output_path=target,
            line_count=len(lines),
            word_count=word_count,
        )

    def _read(self, path: Path) -> str:
        if not path.exists():
            raise InputNotFoundError(path)
        try:
            with open(path, "r", encoding=self.encoding, newline="") as f:
                return f.read()
        except FileNotFoundError as exc:
            raise InputNotFoundError(path) from exc
        except (OSError, ValueError) as exc:
            logger.debug("Read of %s failed: %s", path, exc)
            raise InputUnreadableError(path) from exc

    def _write(self, path: Path, content: str) -> None:
        try:
            with open(path, "w", encoding=self.encoding, newline="") as f:
                f.write(content)
        except (OSError, ValueError) as exc:
            logger.debug("Write to %s failed: %s", path, exc)
            raise OutputUnwritableError(path) from exc
