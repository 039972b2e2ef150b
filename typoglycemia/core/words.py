"""Per-word and per-line typoglycemia transforms.

WHY: The whole effect comes down to one rule applied to every word:
keep the first and last letter, scramble the ones in between. Words carry
punctuation ("(world)", "hello!") and non-Latin letters ("książka"), so
the rule has to find the letter core first and work on code points, not
bytes.

HOW: split_word() scans from both ends for the first and last Unicode
letter and returns WordParts. shuffle_word() permutes the interior of a
core with random.Random.shuffle (Fisher-Yates). process_word() ties the
two together, process_line() maps it over space-separated tokens, and
process_text() maps that over lines.

RULES:
- A letter is any code point whose Unicode category is in LETTER_CATEGORIES
- Cores shorter than MIN_SHUFFLE_LENGTH come back unchanged
- Words with no letters come back unchanged
- Lines split on the ASCII space only; empty tokens round-trip
- Every function preserves code-point length
- rng is optional everywhere; None means the module-level random source
"""

from __future__ import annotations

import random
import unicodedata
from typing import List, Optional

from typoglycemia.config import (
    LETTER_CATEGORIES,
    LINE_SEPARATOR,
    MIN_SHUFFLE_LENGTH,
    WORD_SEPARATOR,
)
from typoglycemia.core.ir import WordParts


def is_letter(char: str) -> bool:
    """Return True if the single code point ``char`` is a Unicode letter."""
    return unicodedata.category(char) in LETTER_CATEGORIES


def split_word(word: str) -> WordParts:
    """Split a word into leading non-letters, letter core, and trailing non-letters.

    WHY: Punctuation glued to a word ("(world)", "text.") must stay where
    it is. Only the span from the first letter to the last letter is a
    candidate for shuffling.

    HOW: Walk forward from the start to the first letter, then backward
    from the end to the last letter. If the two scans cross, the word has
    no letters at all.

    Args:
        word: A single space-free token.

    Returns:
        WordParts whose prefix + core + suffix equals ``word``.
    """
    start = 0
    end = len(word) - 1

    while start <= end and not is_letter(word[start]):
        start += 1

    while end >= start and not is_letter(word[end]):
        end -= 1

    if start > end:
        return WordParts(prefix=word, core="", suffix="")

    return WordParts(
        prefix=word[:start],
        core=word[start:end + 1],
        suffix=word[end + 1:],
    )


def shuffle_word(core: str, rng: Optional[random.Random] = None) -> str:
    """Shuffle the interior code points of ``core``, keeping the ends fixed.

    WHY: This is the typoglycemia step itself. First and last code point
    anchor the word; everything between is scrambled.

    HOW: Slice out indices 1..n-2, shuffle them in place with
    Random.shuffle (an unbiased Fisher-Yates), and reassemble.

    RULES:
    - len(core) < MIN_SHUFFLE_LENGTH: returned unchanged
    - Result may equal the input by chance; no retry loop

    Args:
        core: The letter core of a word (see split_word).
        rng: Random source; defaults to the ``random`` module.

    Returns:
        A string of the same length with the same first and last code point.
    """
    if len(core) < MIN_SHUFFLE_LENGTH:
        return core

    middle = list(core[1:-1])
    (rng or random).shuffle(middle)
    return core[0] + "".join(middle) + core[-1]


def process_word(word: str, rng: Optional[random.Random] = None) -> str:
    """Apply the typoglycemia effect to one token, leaving punctuation in place."""
    if not word:
        return word

    parts = split_word(word)
    if not parts.has_letters:
        return word

    parts.core = shuffle_word(parts.core, rng)
    return parts.join()


def process_line(line: str, rng: Optional[random.Random] = None) -> str:
    """Shuffle every word in a line.

    Splits on the ASCII space only, so runs of spaces produce empty tokens
    that are written back as-is. Tabs and other whitespace stay inside
    their token.
    """
    tokens: List[str] = line.split(WORD_SEPARATOR)
    return WORD_SEPARATOR.join(process_word(token, rng) for token in tokens)


def process_text(text: str, rng: Optional[random.Random] = None) -> str:
    """Shuffle every line of a document, keeping line breaks (and a trailing one)."""
    lines = text.split(LINE_SEPARATOR)
    return LINE_SEPARATOR.join(process_line(line, rng) for line in lines)
