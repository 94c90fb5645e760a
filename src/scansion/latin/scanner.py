"""Cross-word scansion: position-lengthening and elision.

Syllabification sees one word at a time. Two rules need the neighbour:
a final syllable becomes long by position when the consonants that
follow it are split across the word boundary, and a final vowel (or
vowel + m) is elided before a word opening on a vowel.
"""

import logging
from dataclasses import replace

from scansion.latin.letters import (
    is_consonant,
    is_liquid,
    is_open,
    is_vowel,
    starts_with_scan_consonant,
    starts_with_vowel,
)
from scansion.types import Quantity, Syllable

logger = logging.getLogger(__name__)

# Joins the texts of two syllables merged by elision
ELISION_MARK = "_"


def _lengthen_by_position(last: Syllable, following: Syllable) -> None:
    """Revise the quantity of a word-final syllable from the next word's onset."""
    if last.quantity is Quantity.LONG:
        return

    onset = following.text
    if is_consonant(last.text[-1]) and starts_with_scan_consonant(onset):
        # -C C-
        last.quantity = Quantity.LONG
    elif is_consonant(onset[0]) and starts_with_scan_consonant(onset[1:]):
        # -V CC-; a stop before a different liquid leaves the syllable open
        second = onset[1:2]
        flexible = second != onset[0] and is_liquid(second)
        last.quantity = Quantity.AMBIGUOUS if flexible else Quantity.LONG
    else:
        return

    logger.debug(f"{last.text!r} before {onset!r} → {last.quantity.value}")


def _elides(last: Syllable, following: Syllable) -> bool:
    """True if last is swallowed by the vowel opening the next word."""
    if not starts_with_vowel(following.text):
        return False
    if is_open(last.text):
        return True
    # -vm v-
    text = last.text
    return len(text) > 1 and text[-1] in "mM" and is_vowel(text[-2])


def lengthen_by_position(words: list[list[Syllable]]) -> list[list[Syllable]]:
    """Apply position-lengthening across word boundaries.

    Returns new syllable lists; the input is left untouched.
    """
    result = [[replace(syl) for syl in word] for word in words]
    for prev, word in zip(result, result[1:]):
        if prev and word:
            _lengthen_by_position(prev[-1], word[0])
    return result


def elide_words(words: list[list[Syllable]]) -> list[list[Syllable]]:
    """Merge elided word endings into the following word.

    The merged syllable keeps both texts joined by ELISION_MARK and takes
    the quantity of the syllable that survives. The rest of the following
    word continues the merged one, so the output may hold fewer words.
    """
    result: list[list[Syllable]] = []
    for word in words:
        word = [replace(syl) for syl in word]
        if result and result[-1] and word and _elides(result[-1][-1], word[0]):
            prev = result[-1]
            first, rest = word[0], word[1:]
            logger.debug(f"Elision: {prev[-1].text!r} + {first.text!r}")
            prev[-1] = Syllable(
                text=f"{prev[-1].text}{ELISION_MARK}{first.text}",
                quantity=first.quantity,
            )
            prev.extend(rest)
        else:
            result.append(word)
    return result


def scan(words: list[list[Syllable]], elide: bool = True) -> list[list[Syllable]]:
    """Scan a line of syllabified words.

    Args:
        words: One syllable list per word, in line order.
        elide: Also perform elision after position-lengthening.

    Returns:
        New syllable lists per (possibly merged) word.
    """
    result = lengthen_by_position(words)
    if elide:
        result = elide_words(result)
    return result
