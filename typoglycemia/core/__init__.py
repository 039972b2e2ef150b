"""Core word transformation and file processing.

WHY: Keeps the shuffling logic separate from the command-line wrapper so
it can be imported and tested on its own.

HOW: ir.py defines the small value types, words.py holds the pure
per-word/per-line transforms, shuffler.py adds file I/O and the error
taxonomy on top.

RULES:
- words.py never touches the filesystem
- shuffler.py is the only module that raises FileError
"""
