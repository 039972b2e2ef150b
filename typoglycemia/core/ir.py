"""Value types passed between the word transforms and their callers.

WHY: A word is more than a string here. Its leading punctuation, letter
core and trailing punctuation are handled differently, and callers of
process_file want to know what was processed. Small dataclasses keep
those shapes explicit.

HOW: Two dataclasses:
  WordParts     - a word split into prefix, letter core, and suffix
  ProcessResult - summary of one successful process_file() call

RULES:
- prefix + core + suffix always equals the original word
- A word with no letters has an empty core and the whole word as prefix
- ProcessResult is only built on success
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class WordParts:
    """A word split into its three contiguous regions.

    RULES:
    - prefix: leading non-letter characters (may be empty)
    - core: first letter through last letter, inclusive (may contain
      non-letters between them, e.g. "word-hyphen")
    - suffix: trailing non-letter characters (may be empty)
    """

    prefix: str
    core: str
    suffix: str

    @property
    def has_letters(self) -> bool:
        return bool(self.core)

    def join(self) -> str:
        return self.prefix + self.core + self.suffix


@dataclass
class ProcessResult:
    """Summary of a successfully processed file.

    Attributes:
        input_path: File that was read.
        output_path: File that was written.
        line_count: Number of lines (``text.split("\\n")`` entries).
        word_count: Number of space-separated tokens across all lines,
                    empty tokens included.
    """

    input_path: Path
    output_path: Path
    line_count: int
    word_count: int
