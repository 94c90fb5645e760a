"""Core data types for scansion."""

from dataclasses import dataclass, field
from enum import Enum


class Quantity(Enum):
    """Metrical length of a syllable."""
    LONG = "long"
    SHORT = "short"
    AMBIGUOUS = "ambiguous"   # unresolved, context-dependent


class Slot(Enum):
    """One position of a foot template."""
    LONG = "long"
    SHORT = "short"
    EITHER = "either"

    def accepts(self, quantity: Quantity) -> bool:
        if self is Slot.EITHER:
            return True
        if self is Slot.LONG:
            return quantity is Quantity.LONG
        return quantity is Quantity.SHORT


class Meter(Enum):
    HEXAMETER = "hexameter"


@dataclass
class Syllable:
    """A run of characters forming one syllable."""
    text: str
    quantity: Quantity

    @property
    def is_long(self) -> bool:
        return self.quantity is Quantity.LONG


Word = list[Syllable]
Line = list[Word]


@dataclass
class Foot:
    """A matched metrical foot."""
    name: str                   # "dactyl", "spondee", "final spondee"
    syllables: list[Syllable]


@dataclass
class MeterMatch:
    """Outcome of matching a line against a meter."""
    valid: bool
    meter: str
    feet: list[Foot] = field(default_factory=list)
    reason: str | None = None   # why the match failed, None when valid


@dataclass
class LineScan:
    """Output of the scansion pipeline for one line of verse."""
    text: str
    words: list[str]
    syllables: Line             # per-word syllabification, before scanning
    scanned: Line               # after position-lengthening and elision
    match: MeterMatch

    @property
    def valid(self) -> bool:
        return self.match.valid


class WordError(ValueError):
    """A word could not be syllabified."""


class InvalidCharacter(WordError):
    """A character is neither a Latin vowel nor a consonant."""

    def __init__(self, word: str, character: str, position: int):
        self.word = word
        self.character = character
        self.position = position
        super().__init__(
            f"invalid character {character!r} at position {position} in {word!r}"
        )
