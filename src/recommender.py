"""
Recommender module for Wordle Solver.

Minimax guess search: for every candidate guess, play it against every goal
word still possible, and score it by the worst-case number of goal words
that would survive the resulting feedback. The guess with the smallest worst
case wins.

Cost is O(|pool| x |goals|^2) constraint checks, so callers only search once
the goal pool is reasonably small.
"""

import logging
import math
import sys
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from time import perf_counter
from typing import List, Optional, Sequence, Tuple

from tqdm import tqdm

from constraints import Constraint, Outcome
from solver import count_matches
from words import Word

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoredGuess:
    """
    A guess and its minimax score.

    ``score`` is the negated worst case so that higher is always better.
    """
    word: Word
    score: int

    @property
    def worst_case(self) -> int:
        return -self.score


@dataclass(frozen=True)
class Recommendation:
    """
    Result of one search.

    Attributes:
        word: The guess to play
        worst_case: At most this many goal words remain after playing it
        from_goals: True if the guess is itself a possible answer
        dictionary_best: Best guess over the whole dictionary
        goal_best: Best guess over the goal pool
    """
    word: Word
    worst_case: int
    from_goals: bool
    dictionary_best: ScoredGuess
    goal_best: ScoredGuess


def worst_case_remaining(
    constraint: Constraint,
    goals: Sequence[Word],
    guess: Word
) -> int:
    """
    Largest number of goal words left after playing ``guess``.

    Each goal is tried as the hidden answer; its feedback is folded into a
    copy of the constraint and the surviving goal words are counted. The
    passed constraint is never modified.

    Args:
        constraint: Current knowledge
        goals: Goal words still possible
        guess: Guess to evaluate

    Returns:
        Maximum survivor count over all goals (0 for an empty goal list)
    """
    worst = 0
    for goal in goals:
        hypothetical = constraint.copy()
        hypothetical.refine(guess, Outcome.compare(goal, guess))
        remaining = count_matches(goals, hypothetical)
        if remaining > worst:
            worst = remaining
    return worst


def _best_in(
    pool: Sequence[Word],
    constraint: Constraint,
    goals: Sequence[Word],
    progress: Optional[tqdm] = None
) -> Optional[ScoredGuess]:
    """Exhaustive scan; the first guess seen keeps a tie."""
    best: Optional[ScoredGuess] = None
    for guess in pool:
        score = -worst_case_remaining(constraint, goals, guess)
        if best is None or score > best.score:
            best = ScoredGuess(guess, score)
        if progress is not None:
            progress.update(1)
    return best


def _best_in_chunk(
    job: Tuple[Sequence[Word], Constraint, Sequence[Word]]
) -> Optional[ScoredGuess]:
    # Runs in a worker process on a pickled snapshot
    pool, constraint, goals = job
    return _best_in(pool, constraint, goals)


def pick_recommendation(
    dictionary_best: ScoredGuess,
    goal_best: ScoredGuess
) -> Recommendation:
    """
    Choose between the best dictionary guess and the best goal guess.

    A goal guess can win outright, so it is preferred unless the dictionary
    guess leaves at least two fewer words in the worst case.

    Args:
        dictionary_best: Winner over the full dictionary
        goal_best: Winner over the goal pool

    Returns:
        Recommendation for the chosen guess

    Raises:
        AssertionError: If the dictionary result is worse than the goal
                        result, which is impossible when the dictionary
                        contains every goal word
    """
    assert dictionary_best.score >= goal_best.score, (
        f"dictionary search ({dictionary_best.word}, worst case "
        f"{dictionary_best.worst_case}) lost to goal search ({goal_best.word}, "
        f"worst case {goal_best.worst_case})"
    )

    if goal_best.score + 1 >= dictionary_best.score:
        chosen, from_goals = goal_best, True
    else:
        chosen, from_goals = dictionary_best, False

    return Recommendation(
        word=chosen.word,
        worst_case=chosen.worst_case,
        from_goals=from_goals,
        dictionary_best=dictionary_best,
        goal_best=goal_best
    )


class WordRecommender:
    """
    Recommends the next guess by worst-case (minimax) search.

    The dictionary pool is fixed for the life of the recommender; the goal
    pool and constraint are passed in on every call.
    """

    def __init__(
        self,
        dictionary: List[Word],
        workers: int = 1,
        show_progress: bool = False
    ):
        """
        Args:
            dictionary: Every acceptable guess (must include every goal word)
            workers: Processes used to scan the guess pool; 1 = in process
            show_progress: Draw a progress bar on stderr while searching
        """
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")

        self.dictionary = dictionary
        self.workers = workers
        self.show_progress = show_progress

    def best_from(
        self,
        pool: Sequence[Word],
        constraint: Constraint,
        goals: Sequence[Word]
    ) -> ScoredGuess:
        """
        Best guess from ``pool`` against the current goal words.

        Args:
            pool: Candidate guesses, scanned in order
            constraint: Current knowledge (not modified)
            goals: Goal words still possible

        Returns:
            The first guess with the best (least bad) worst case

        Raises:
            ValueError: If pool is empty
        """
        if not pool:
            raise ValueError("Cannot search an empty guess pool")

        if self.workers > 1 and len(pool) > self.workers:
            return self._best_from_parallel(pool, constraint, goals)

        with tqdm(
            total=len(pool),
            disable=not self.show_progress,
            file=sys.stderr,
            leave=False,
            unit="guess"
        ) as progress:
            return _best_in(pool, constraint, goals, progress)

    def _best_from_parallel(
        self,
        pool: Sequence[Word],
        constraint: Constraint,
        goals: Sequence[Word]
    ) -> ScoredGuess:
        """
        Shard the pool into contiguous chunks, one per worker.

        Chunk winners are merged in chunk order with the same strict
        comparison as the serial scan, so the selection is identical.
        """
        chunk_size = math.ceil(len(pool) / self.workers)
        snapshot = constraint.copy()
        goals = list(goals)
        jobs = [
            (list(pool[start:start + chunk_size]), snapshot, goals)
            for start in range(0, len(pool), chunk_size)
        ]

        best: Optional[ScoredGuess] = None
        with ProcessPoolExecutor(max_workers=self.workers) as executor:
            results = executor.map(_best_in_chunk, jobs)
            for result in tqdm(
                results,
                total=len(jobs),
                disable=not self.show_progress,
                file=sys.stderr,
                leave=False,
                unit="chunk"
            ):
                if best is None or result.score > best.score:
                    best = result
        return best

    def recommend(
        self,
        constraint: Constraint,
        goals: Sequence[Word]
    ) -> Recommendation:
        """
        Recommend the next guess.

        Searches the full dictionary and the goal pool separately, then
        applies ``pick_recommendation``.

        Args:
            constraint: Current knowledge (not modified)
            goals: Goal words still consistent with the constraint

        Returns:
            Recommendation with the chosen guess and its worst case

        Raises:
            ValueError: If no goal words remain
        """
        if not goals:
            raise ValueError(
                "No goal words remain; the feedback so far is contradictory "
                "or the answer is not in the goal list."
            )

        start = perf_counter()
        dictionary_best = self.best_from(self.dictionary, constraint, goals)
        goal_best = self.best_from(goals, constraint, goals)
        log.debug(
            f"Searched {len(self.dictionary)} + {len(goals)} guesses against "
            f"{len(goals)} goals in {perf_counter() - start:.2f} s "
            f"(dictionary best {dictionary_best.word}/{dictionary_best.worst_case}, "
            f"goal best {goal_best.word}/{goal_best.worst_case})"
        )

        return pick_recommendation(dictionary_best, goal_best)


if __name__ == "__main__":
    from words import encode

    goals = [encode(w) for w in ["cigar", "cider", "cinch", "civic"]]
    dictionary = [encode(w) for w in ["fuzzy", "bench", "cigar", "cider", "cinch", "civic"]]
    recommender = WordRecommender(dictionary)
    recommendation = recommender.recommend(Constraint(), goals)
    print(f"Goals: {[str(g) for g in goals]}")
    print(
        f"Recommended: {recommendation.word} "
        f"(at most {recommendation.worst_case} possible words, "
        f"{'goal' if recommendation.from_goals else 'dictionary'} pool)"
    )
