"""Syllabification: a Latin word with macrons → syllables with quantities.

A single left-to-right pass over the word with at most two characters of
lookahead. Vowel length is read from the macrons; no dictionary is used,
so unmarked long vowels are scanned short.
"""

import unicodedata
from enum import Enum, auto

from scansion.latin.letters import (
    forms_diphthong,
    is_consonant,
    is_liquid,
    is_long_vowel,
    is_vowel,
    split_consonant,
)
from scansion.types import InvalidCharacter, Quantity, Syllable


class _State(Enum):
    """What kind of nucleus the syllable being built has opened."""
    IDLE = auto()               # no vowel yet
    MONOPHTHONG = auto()
    LONG_MONOPHTHONG = auto()
    DIPHTHONG = auto()          # closed to further vowels


def _opening(vowel: str) -> _State:
    return _State.LONG_MONOPHTHONG if is_long_vowel(vowel) else _State.MONOPHTHONG


def _is_consonantal_i(chars: list[str], pos: int) -> bool:
    """Guess whether the 'i' at pos is consonantal ('j').

    Only an 'i' before a vowel can be consonantal. Without a written 'j'
    there is no certain test, so three rules of thumb are applied:
    word-initial (iam, Iūnō), after a vowel (Trōia, where the 'i' is
    really doubled), and before a 'c' (iaciō and compounds like obiectum).
    Anywhere else it is taken as a vowel.
    """
    if pos >= len(chars) or chars[pos] not in "iI":
        return False
    if pos + 1 >= len(chars) or not is_vowel(chars[pos + 1]):
        return False
    if pos == 0:
        return True
    if is_vowel(chars[pos - 1]):
        return True
    return pos + 2 < len(chars) and chars[pos + 2] in "cC"


def _is_vowel_at(chars: list[str], pos: int) -> bool:
    """True if pos holds a vowel acting as a vowel."""
    return pos < len(chars) and is_vowel(chars[pos]) and not _is_consonantal_i(chars, pos)


def syllabify(word: str) -> list[Syllable]:
    """Split a Latin word into syllables and mark their quantities.

    Macrons must already be written; combining macrons are composed first.
    A double consonant (x) is split across the boundary, so the syllable
    texts spell 'c' + 's' where the word has 'x'.

    Raises:
        InvalidCharacter: if a character is neither vowel nor consonant.
    """
    chars = list(unicodedata.normalize("NFC", word))
    syllables: list[Syllable] = []
    buffer = ""
    state = _State.IDLE

    def close(text: str, quantity: Quantity) -> None:
        syllables.append(Syllable(text=text, quantity=quantity))

    for i, current in enumerate(chars):
        nxt = chars[i + 1] if i + 1 < len(chars) else None

        if is_consonant(current) or _is_consonantal_i(chars, i):
            if state is _State.IDLE:
                # Onset: consonants gather until the nucleus opens
                buffer += current
                continue

            split = split_consonant(current)
            if split is not None:
                # Double consonant, long by position
                end, start = split
                close(buffer + end, Quantity.LONG)
                buffer = start
                state = _State.IDLE
            elif _is_vowel_at(chars, i + 1):
                long_nucleus = state in (_State.LONG_MONOPHTHONG, _State.DIPHTHONG)
                close(buffer, Quantity.LONG if long_nucleus else Quantity.SHORT)
                buffer = current
                state = _State.IDLE
            elif _is_vowel_at(chars, i + 2):
                if is_liquid(nxt) and nxt != current:
                    # Muta cum liquida: the pair may open the next syllable
                    close(buffer, Quantity.AMBIGUOUS)
                    buffer = current
                else:
                    close(buffer + current, Quantity.LONG)
                    buffer = ""
                state = _State.IDLE
            else:
                buffer += current
                if nxt is None:
                    closed = len(buffer) > 1 and is_consonant(buffer[-2])
                    close(buffer, Quantity.LONG if closed else Quantity.SHORT)
                    buffer = ""

        elif is_vowel(current):
            if state is _State.IDLE:
                # 'qu' is a single onset; the 'u' opens nothing
                if not (buffer[-1:] in ("q", "Q") and current in "uU"):
                    state = _opening(current)
                buffer += current
            elif state is _State.DIPHTHONG:
                close(buffer, Quantity.LONG)
                buffer = current
                state = _opening(current)
            elif buffer and forms_diphthong(buffer[-1], current):
                buffer += current
                state = _State.DIPHTHONG
            else:
                last_long = bool(buffer) and is_long_vowel(buffer[-1])
                close(buffer, Quantity.LONG if last_long else Quantity.SHORT)
                buffer = current
                state = _opening(current)

        else:
            raise InvalidCharacter(word, current, i)

    if buffer:
        long_nucleus = state in (_State.LONG_MONOPHTHONG, _State.DIPHTHONG)
        close(buffer, Quantity.LONG if long_nucleus else Quantity.SHORT)

    return syllables
