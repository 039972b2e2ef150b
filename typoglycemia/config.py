"""Configuration constants and .env loading.

WHY: Keeps the tunable values (which characters count as letters, the
minimum shuffle length, file encoding, log level, random seed) in one
place instead of buried in the word logic.

HOW: python-dotenv loads the .env file on import. Constants are plain
module-level values; the few that can be overridden read os.getenv().
load_seed() parses the optional seed and gives a clear error when it is
malformed.

RULES:
- LETTER_CATEGORIES are Unicode general categories (unicodedata.category)
- Words whose letter core is shorter than MIN_SHUFFLE_LENGTH are never changed
- All overridable defaults use the TYPOGLYCEMIA_ prefix
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the working directory
load_dotenv()

# ---------------------------------------------------------------------------
# Text model
# ---------------------------------------------------------------------------

LETTER_CATEGORIES: frozenset[str] = frozenset({"Lu", "Ll", "Lt", "Lm", "Lo"})
"""Unicode general categories treated as letters (upper, lower, title, modifier, other)."""

MIN_SHUFFLE_LENGTH = 4
"""Shortest letter core (in code points) that has a non-empty interior to shuffle."""

WORD_SEPARATOR = " "
LINE_SEPARATOR = "\n"

# ---------------------------------------------------------------------------
# Runtime defaults
# ---------------------------------------------------------------------------

DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = os.getenv("TYPOGLYCEMIA_LOG_LEVEL", "WARNING").upper()


def load_seed() -> int | None:
    """Load the optional random seed from the environment.

    WHY: Shuffled output is random by default. A fixed seed makes runs
    reproducible, which is handy for demos and regression fixtures.

    HOW: Reads TYPOGLYCEMIA_SEED and parses it as a base-10 integer.

    RULES:
    - Missing or blank value returns None (OS entropy)
    - Non-integer value raises ValueError
    """
    raw = os.getenv("TYPOGLYCEMIA_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            "TYPOGLYCEMIA_SEED must be an integer, got {!r}".format(raw)
        ) from None


def load_encoding() -> str:
    """Load the file encoding from TYPOGLYCEMIA_ENCODING, falling back to DEFAULT_ENCODING.

    Read at call time so the value is not fixed at import. The codec name
    is checked by TextShuffler, not here.
    """
    return os.getenv("TYPOGLYCEMIA_ENCODING", "").strip() or DEFAULT_ENCODING
