"""Typoglycemia text shuffler: scrambles word interiors in text files.

WHY: Readers can usually still read a word when its interior letters are
scrambled, as long as the first and last letters stay put. This package
applies that effect to whole text files while keeping punctuation,
spacing, and line structure intact.

HOW: Single-pass pipeline: read file, split into lines, split lines on
spaces, shuffle each word's letter core, rejoin, write file. The word
operations live in core/words.py, file handling in core/shuffler.py, and
the command-line wrapper in cli.py.

RULES:
- Only the interior of a word's letter core is permuted
- Character, word, and line counts never change
- Letters are Unicode letters (Polish, German, etc. all work)
"""

__version__ = "0.1.0"
