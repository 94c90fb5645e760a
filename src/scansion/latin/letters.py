"""Latin letter classes: vowels, consonants, liquids, diphthongs."""

_SHORT_VOWELS = set("aeiouyAEIOUY")
_LONG_VOWELS = set("āēīōūȳĀĒĪŌŪȲ")
_VOWELS = _SHORT_VOWELS | _LONG_VOWELS

_LIQUIDS = set("rlRL")

# Latin has no triphthongs
_DIPHTHONGS = {("a", "e"), ("a", "u"), ("e", "i"), ("e", "u"), ("o", "e")}

# Double consonants and their phonetic halves
_SPLITS = {"x": ("c", "s"), "X": ("c", "s")}

# Transliterated Greek letters ('kh' is sometimes seen for chi)
_GREEK_LETTERS = {"th", "ch", "kh", "ph", "ps", "rh"}


def is_vowel(c: str) -> bool:
    return c in _VOWELS


def is_long_vowel(c: str) -> bool:
    """True for a vowel carrying a macron."""
    return c in _LONG_VOWELS


def is_consonant(c: str) -> bool:
    """True for any ASCII letter that is not a vowel."""
    return len(c) == 1 and c.isascii() and c.isalpha() and not is_vowel(c)


def is_liquid(c: str | None) -> bool:
    return c is not None and c in _LIQUIDS


def forms_diphthong(first: str, second: str) -> bool:
    """True if the vowel pair forms a Latin diphthong (ae, au, ei, eu, oe)."""
    return (first.lower(), second.lower()) in _DIPHTHONGS


def split_consonant(c: str) -> tuple[str, str] | None:
    """Split a double consonant into its two halves, or None if it is simple."""
    return _SPLITS.get(c)


def is_greek_letter(value: str) -> bool:
    return value in _GREEK_LETTERS


def starts_with_vowel(text: str) -> bool:
    """True if text opens on a vowel.

    An 'i' followed by another vowel is a consonantal onset, not a vowel.
    """
    if not text or not is_vowel(text[0]):
        return False
    return not (text[0] in "iI" and len(text) > 1 and is_vowel(text[1]))


def starts_with_scan_consonant(text: str) -> bool:
    """True if text opens on a consonant that counts for position.

    'h' does not make position.
    """
    return not starts_with_vowel(text) and text[:1] not in ("h", "H")


def is_open(text: str) -> bool:
    """True if a syllable ends in a vowel or diphthong."""
    return bool(text) and is_vowel(text[-1])
