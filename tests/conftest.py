"""Shared test fixtures for the typoglycemia test suite.

WHY: Several test modules need a seeded random source and a small
multi-line input file. Centralizing them keeps the samples consistent.

HOW: Pytest fixtures provide a deterministic random.Random, a
TextShuffler built on it, and a sample text file written to tmp_path.

RULES:
- All file I/O uses tmp_path for isolation.
- The sample text has exactly 3 lines and no trailing newline.
"""

import random

import pytest

from typoglycemia.core.shuffler import TextShuffler

SAMPLE_TEXT = "This is a test file.\nWith multiple lines.\nContaining various words."


@pytest.fixture
def rng():
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def shuffler(rng):
    """TextShuffler using the seeded rng."""
    return TextShuffler(rng=rng)


@pytest.fixture
def sample_file(tmp_path):
    """Three-line UTF-8 input file."""
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE_TEXT, encoding="utf-8")
    return path
