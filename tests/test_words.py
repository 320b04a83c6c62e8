"""Tests for the Word value type and letter masks."""

import pytest

from words import ALL_LETTERS, Word, encode, is_valid_word, letter_mask, mask_letters


def test_mask_is_union_of_letter_bits():
    word = encode("crane")
    expected = 0
    for char in "crane":
        expected |= 1 << (ord(char) - ord('a'))
    assert word.letters == expected
    assert mask_letters(word.letters) == "acenr"


def test_duplicate_letters_contribute_one_bit():
    word = encode("sissy")
    assert word.letters == letter_mask("s") | letter_mask("i") | letter_mask("y")
    assert bin(word.letters).count("1") == 3


def test_letter_mask_bounds():
    assert letter_mask("a") == 1
    assert letter_mask("z") == 1 << 25
    assert mask_letters(ALL_LETTERS) == "abcdefghijklmnopqrstuvwxyz"


@pytest.mark.parametrize("text, valid", [
    ("crane", True),
    ("Crane", False),
    ("cran", False),
    ("cranes", False),
    ("cr4ne", False),
    ("cra e", False),
    ("crané", False),
])
def test_is_valid_word(text, valid):
    assert is_valid_word(text) is valid


def test_words_are_values():
    assert encode("crane") == Word("crane")
    assert len({encode("crane"), encode("crane"), encode("slate")}) == 2
    assert str(encode("slate")) == "slate"
    assert encode("slate")[2] == "a"
    assert list(encode("slate")) == list("slate")
