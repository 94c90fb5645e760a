"""Split raw lines of verse into words."""

import re

# Whitespace and punctuation found in edited Latin texts
_SEPARATORS = re.compile(r"[\s,.:;\"'()\[\]\-_=+/\\`~!?]+")


def split_words(line: str) -> list[str]:
    """Split a line on whitespace and punctuation, dropping empty pieces."""
    return [w for w in _SEPARATORS.split(line) if w]


def read_lines(text: str) -> list[str]:
    """Return the non-blank lines of a text, stripped."""
    return [line.strip() for line in text.splitlines() if line.strip()]
