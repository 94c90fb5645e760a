"""Scansion of Latin verse: syllables, quantities and meter for a line."""

import logging

from scansion.latin.scanner import scan
from scansion.latin.syllabify import syllabify
from scansion.meter import scan_meter
from scansion.text import split_words
from scansion.types import LineScan, Meter, Syllable, WordError

logger = logging.getLogger(__name__)


def syllabify_words(
    words: list[str],
    skip_invalid: bool = False,
) -> list[list[Syllable]]:
    """Syllabify each word of a line.

    Args:
        words: Words as split from the line.
        skip_invalid: Drop words with unknown characters instead of raising.

    Raises:
        WordError: if a word cannot be syllabified and skip_invalid is False.
    """
    result = []
    for word in words:
        try:
            syllables = syllabify(word)
        except WordError as e:
            if not skip_invalid:
                raise
            logger.warning(f"Skipping {word!r}: {e}")
            continue
        if syllables:
            result.append(syllables)
    return result


def scan_words(words: list[str], elide: bool = True) -> list[list[Syllable]]:
    """Syllabify and scan a line given as words."""
    return scan(syllabify_words(words), elide=elide)


def match_words(words: list[str], meter: Meter | str = Meter.HEXAMETER) -> bool:
    """True if the words, scanned with elision, form a line of the meter."""
    return scan_meter(scan_words(words, elide=True), meter).valid


def scan_line(
    text: str,
    elide: bool = True,
    meter: Meter | str = Meter.HEXAMETER,
    skip_invalid: bool = False,
) -> LineScan:
    """Run the full pipeline on one line of raw text.

    Splits the line into words, syllabifies them, applies
    position-lengthening (and elision unless disabled) and matches the
    result against the meter.
    """
    words = split_words(text)
    syllables = syllabify_words(words, skip_invalid=skip_invalid)
    scanned = scan(syllables, elide=elide)
    match = scan_meter(scanned, meter)
    logger.debug(
        f"{text!r}: {sum(len(w) for w in scanned)} syllables, "
        f"{'valid' if match.valid else match.reason}"
    )
    return LineScan(
        text=text,
        words=words,
        syllables=syllables,
        scanned=scanned,
        match=match,
    )
