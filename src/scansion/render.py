"""Plain-text rendering of syllables, quantities and feet."""

from scansion.types import MeterMatch, Quantity, Syllable

MARKS = {
    Quantity.LONG: "-",
    Quantity.SHORT: "u",
    Quantity.AMBIGUOUS: "?",
}


def quantity_mark(quantity: Quantity) -> str:
    return MARKS[quantity]


def format_syllables(word: list[Syllable], sep: str = "-") -> str:
    """'arma' → 'ar-ma'."""
    return sep.join(syl.text for syl in word)


def format_line(words: list[list[Syllable]]) -> str:
    """Words joined by spaces, each spelled from its syllables."""
    return " ".join("".join(syl.text for syl in word) for word in words)


def format_marks(words: list[list[Syllable]]) -> str:
    """Quantity marks aligned under format_line's output.

    Each mark sits under the first letter of its syllable.
    """
    return " ".join(
        "".join(quantity_mark(syl.quantity).ljust(len(syl.text)) for syl in word)
        for word in words
    ).rstrip()


def format_feet(match: MeterMatch) -> str:
    """'| ar ma vi | rum que ca | ...' for the matched feet."""
    if not match.feet:
        return ""
    feet = [" ".join(syl.text for syl in foot.syllables) for foot in match.feet]
    return "| " + " | ".join(feet) + " |"
