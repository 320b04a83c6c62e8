"""
Solver module for Wordle Solver.

Candidate filtering based on the accumulated constraint.
"""

from typing import List

from constraints import Constraint
from words import Word


def filter_candidates(words: List[Word], constraint: Constraint) -> List[Word]:
    """
    Filter word list to only candidates matching the constraint.

    Args:
        words: List of candidate words to filter
        constraint: Constraint to apply

    Returns:
        New list of matching words, in their original order
    """
    return [word for word in words if constraint.matches(word)]


def retain_candidates(words: List[Word], constraint: Constraint) -> int:
    """
    Filter a word list in place, keeping order.

    Args:
        words: List to narrow (mutated)
        constraint: Constraint to apply

    Returns:
        Number of words removed
    """
    before = len(words)
    words[:] = filter_candidates(words, constraint)
    return before - len(words)


def count_matches(words: List[Word], constraint: Constraint) -> int:
    """Count the words consistent with a constraint."""
    return sum(1 for word in words if constraint.matches(word))
