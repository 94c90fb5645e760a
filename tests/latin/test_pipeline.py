"""Tests for the line scansion pipeline."""

import pytest

from scansion.latin import match_words, scan_line, scan_words, syllabify_words
from scansion.text import split_words
from scansion.types import Meter, Quantity, WordError

L, S, A = Quantity.LONG, Quantity.SHORT, Quantity.AMBIGUOUS

AENEID_1_1 = "Arma virumque canō, Trōiae quī prīmus ab ōrīs"
AENEID_1_7 = "Albānīque patrēs atque altae moenia Rōmae"


class TestSyllabifyWords:
    def test_one_list_per_word(self):
        result = syllabify_words(["arma", "virumque"])
        assert [[s.text for s in w] for w in result] == [["ar", "ma"], ["vi", "rum", "que"]]

    def test_invalid_word_raises(self):
        with pytest.raises(WordError):
            syllabify_words(["arma", "v1rum"])

    def test_invalid_word_skipped(self, caplog):
        result = syllabify_words(["arma", "v1rum", "canō"], skip_invalid=True)
        assert len(result) == 2
        assert "v1rum" in caplog.text


class TestScanLine:
    def test_aeneid_first_line_is_hexameter(self):
        result = scan_line(AENEID_1_1)
        assert result.valid
        assert result.words == split_words(AENEID_1_1)
        assert [f.name for f in result.match.feet] == [
            "dactyl", "dactyl", "spondee", "spondee", "dactyl", "final spondee",
        ]
        assert [[s.text for s in f.syllables] for f in result.match.feet] == [
            ["Ar", "ma", "vi"],
            ["rum", "que", "ca"],
            ["nō", "Trō"],
            ["iae", "quī"],
            ["prī", "mus", "ab"],
            ["ō", "rīs"],
        ]

    def test_elision_inside_line(self):
        result = scan_line(AENEID_1_7)
        assert result.valid
        texts = [s.text for w in result.scanned for s in w]
        assert "que_al" in texts
        assert len(result.scanned) == len(result.syllables) - 1

    def test_muta_cum_liquida_through_flexible_slot(self):
        result = scan_line(AENEID_1_7)
        pa = [s for w in result.scanned for s in w if s.text == "pa"][0]
        assert pa.quantity is A

    def test_quantities_of_first_line(self):
        result = scan_line(AENEID_1_1)
        quantities = [s.quantity for w in result.scanned for s in w]
        assert quantities == [L, S, S, L, S, S, L, L, L, L, L, S, S, L, S]

    def test_half_line_fails(self):
        result = scan_line("Arma virumque canō")
        assert not result.valid
        assert result.match.reason

    def test_unsupported_meter(self):
        result = scan_line(AENEID_1_1, meter="pentameter")
        assert not result.valid
        assert result.match.reason.startswith("unsupported meter")

    def test_no_elision(self):
        result = scan_line(AENEID_1_7, elide=False)
        assert len(result.scanned) == len(result.words)

    def test_invalid_character_raises(self):
        with pytest.raises(WordError):
            scan_line("Arma v1rumque canō")


class TestWordEntryPoints:
    def test_scan_words(self):
        scanned = scan_words(split_words(AENEID_1_7))
        assert len(scanned) == 5
        assert len(scan_words(split_words(AENEID_1_7), elide=False)) == 6

    def test_match_words(self):
        assert match_words(split_words(AENEID_1_1), Meter.HEXAMETER)
        assert not match_words(split_words(AENEID_1_1), "elegiac")
