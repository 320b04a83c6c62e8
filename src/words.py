"""
Words module for Wordle Solver.

Five-letter word value type with a precomputed letter-presence bitmask.
Bit ``i`` of a mask stands for the letter ``chr(ord('a') + i)``.
"""

from dataclasses import dataclass, field


WORD_LENGTH = 5
ALPHABET_SIZE = 26

# Every letter allowed
ALL_LETTERS = (1 << ALPHABET_SIZE) - 1


def letter_mask(char: str) -> int:
    """Return the single-bit mask for a lowercase letter."""
    return 1 << (ord(char) - ord('a'))


def mask_letters(mask: int) -> str:
    """
    Expand a letter mask back into its letters, alphabetically.

    Args:
        mask: 26-bit letter set

    Returns:
        String of the letters whose bits are set, e.g. 0b101 -> "ac"
    """
    return "".join(
        chr(ord('a') + i) for i in range(ALPHABET_SIZE) if mask & (1 << i)
    )


def is_valid_word(text: str) -> bool:
    """
    Check that text is exactly five lowercase ASCII letters.

    This is the gate every reader must pass before calling ``encode``.
    """
    return (
        len(text) == WORD_LENGTH
        and text.isascii()
        and text.isalpha()
        and text.islower()
    )


@dataclass(frozen=True)
class Word:
    """
    Immutable five-letter word.

    Attributes:
        text: The five lowercase letters
        letters: Union of the per-character masks (derived, order and
                 duplicate insensitive)
    """
    text: str
    letters: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        letters = 0
        for char in self.text:
            letters |= letter_mask(char)
        # Frozen dataclass: derived field must bypass __setattr__
        object.__setattr__(self, "letters", letters)

    def __getitem__(self, index: int) -> str:
        return self.text[index]

    def __iter__(self):
        return iter(self.text)

    def __len__(self) -> int:
        return WORD_LENGTH

    def __str__(self) -> str:
        return self.text


def encode(text: str) -> Word:
    """
    Build a Word from already validated text.

    Args:
        text: Five lowercase letters (see ``is_valid_word``)

    Returns:
        Word with its letter mask computed
    """
    return Word(text)
