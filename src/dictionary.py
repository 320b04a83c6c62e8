"""
Dictionary module for Wordle Solver.

Loads and validates the goal and extra word lists and assembles the two
candidate pools.
"""

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from words import Word, encode, is_valid_word

log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent.parent / "data"
DEFAULT_GOALS_PATH = DATA_DIR / "goals.txt"
DEFAULT_EXTRA_PATH = DATA_DIR / "extra.txt"


@dataclass
class WordPools:
    """
    The two candidate pools.

    Attributes:
        goals: Words that can be the answer
        dictionary: Every acceptable guess (extra words plus goals)
    """
    goals: List[Word]
    dictionary: List[Word]


def load_word_list(filepath: str | Path) -> List[Word]:
    """
    Load a word list, one word per line.

    Surrounding whitespace is stripped and blank lines are skipped. Any other
    line must be exactly five lowercase letters; a bad line is an error
    rather than being dropped silently.

    Args:
        filepath: Path to the word list file

    Returns:
        Words in file order

    Raises:
        FileNotFoundError: If the word list file doesn't exist
        ValueError: If a line is not a valid five-letter word
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Word list file not found: {filepath}")

    words: List[Word] = []
    with open(filepath, 'r', encoding='utf-8') as f:
        for line_number, line in enumerate(f, 1):
            text = line.strip()
            if not text:
                continue
            if not is_valid_word(text):
                raise ValueError(
                    f"{filepath}:{line_number}: malformed word '{text}' "
                    f"(need five lowercase letters)"
                )
            words.append(encode(text))

    log.info(f"Read {len(words)} words from {filepath}")
    return words


def load_word_pools(
    goals_path: str | Path | None = None,
    extra_path: str | Path | None = None,
    seed: Optional[int] = None,
    shuffle: bool = True
) -> WordPools:
    """
    Load both word lists and build the goal and dictionary pools.

    The pools are shuffled once so that ties in the guess search do not
    always go to the same word.

    Args:
        goals_path: Goal word list (default: data/goals.txt)
        extra_path: Extra accepted guesses (default: data/extra.txt)
        seed: Seed for the shuffle; None for a fresh random order
        shuffle: Set False to keep file order

    Returns:
        WordPools with dictionary = extra + goals

    Raises:
        ValueError: If the goal list is empty
    """
    goals = load_word_list(goals_path or DEFAULT_GOALS_PATH)
    if not goals:
        raise ValueError(f"No goal words found in {goals_path or DEFAULT_GOALS_PATH}")

    dictionary = load_word_list(extra_path or DEFAULT_EXTRA_PATH)
    dictionary.extend(goals)

    if shuffle:
        rng = random.Random(seed)
        rng.shuffle(goals)
        rng.shuffle(dictionary)

    return WordPools(goals=goals, dictionary=dictionary)
