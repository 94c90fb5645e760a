"""Tests for Latin letter classes."""

import pytest

from scansion.latin.letters import (
    forms_diphthong,
    is_consonant,
    is_greek_letter,
    is_liquid,
    is_long_vowel,
    is_open,
    is_vowel,
    split_consonant,
    starts_with_scan_consonant,
    starts_with_vowel,
)


class TestVowels:
    @pytest.mark.parametrize("c", list("aeiouyAEIOUYāēīōūȳĀĒĪŌŪȲ"))
    def test_vowels(self, c):
        assert is_vowel(c)
        assert not is_consonant(c)

    @pytest.mark.parametrize("c", list("āēīōūȳĀĒĪŌŪȲ"))
    def test_long_vowels(self, c):
        assert is_long_vowel(c)

    @pytest.mark.parametrize("c", list("aeiouyAEIOUY"))
    def test_plain_vowels_not_long(self, c):
        assert not is_long_vowel(c)

    def test_consonants_not_vowels(self):
        assert not is_vowel("b")
        assert not is_vowel("x")


class TestConsonants:
    @pytest.mark.parametrize("c", list("bcdfghjklmnpqrstvxzBCDFGHJKLMNPQRSTVXZ"))
    def test_consonants(self, c):
        assert is_consonant(c)

    def test_w_is_ordinary_consonant(self):
        assert is_consonant("w")
        assert is_consonant("W")

    @pytest.mark.parametrize("c", ["3", " ", ",", "ç", "ß", "", "ab"])
    def test_not_consonants(self, c):
        assert not is_consonant(c)

    def test_liquids(self):
        for c in "rlRL":
            assert is_liquid(c)
        for c in "mnst":
            assert not is_liquid(c)
        assert not is_liquid(None)


class TestDiphthongs:
    @pytest.mark.parametrize("pair", ["ae", "au", "ei", "eu", "oe"])
    def test_diphthongs(self, pair):
        assert forms_diphthong(pair[0], pair[1])

    def test_case_insensitive(self):
        assert forms_diphthong("A", "e")
        assert forms_diphthong("O", "E")

    @pytest.mark.parametrize("pair", ["ea", "ui", "ia", "ou", "āe", "ie"])
    def test_not_diphthongs(self, pair):
        assert not forms_diphthong(pair[0], pair[1])


class TestSplitConsonant:
    def test_x_splits(self):
        assert split_consonant("x") == ("c", "s")
        assert split_consonant("X") == ("c", "s")

    def test_other_consonants_do_not_split(self):
        assert split_consonant("z") is None
        assert split_consonant("s") is None


class TestGreekLetters:
    @pytest.mark.parametrize("pair", ["th", "ch", "kh", "ph", "ps", "rh"])
    def test_greek(self, pair):
        assert is_greek_letter(pair)

    def test_not_greek(self):
        assert not is_greek_letter("st")
        assert not is_greek_letter("t")


class TestOnsets:
    def test_starts_with_vowel(self):
        assert starts_with_vowel("ab")
        assert starts_with_vowel("ōrīs")
        assert starts_with_vowel("i")
        assert starts_with_vowel("in")

    def test_i_before_vowel_is_consonantal(self):
        assert not starts_with_vowel("iam")
        assert not starts_with_vowel("Iūnō")

    def test_consonant_start(self):
        assert not starts_with_vowel("cā")
        assert not starts_with_vowel("")

    def test_scan_consonant(self):
        assert starts_with_scan_consonant("prī")
        assert starts_with_scan_consonant("iam")
        assert not starts_with_scan_consonant("ab")

    def test_h_does_not_make_position(self):
        assert not starts_with_scan_consonant("hīc")
        assert not starts_with_scan_consonant("Hector")

    def test_is_open(self):
        assert is_open("ma")
        assert is_open("rae")
        assert not is_open("rum")
        assert not is_open("")
