"""
UI module for Wordle Solver.

Terminal session loop:
- Shows what is known, how many goal words remain and the recommended guess
- Reads the guess actually played
- Simulation mode (goal known): scores the guess itself
- Assist mode (goal unknown): reads the G/Y/X colors shown by the game
"""

import logging
import sys
from dataclasses import dataclass, field
from typing import List, Optional, TextIO

from config import SolverConfig
from constraints import Constraint, Outcome
from recommender import WordRecommender
from solver import retain_candidates
from words import Word, encode, is_valid_word

log = logging.getLogger(__name__)


@dataclass
class RoundRecord:
    """One played round."""
    guess: Word
    outcome: Outcome
    remaining: int


@dataclass
class SessionState:
    """Live state of one game, owned by the session loop."""
    goals: List[Word]
    constraint: Constraint = field(default_factory=Constraint)
    history: List[RoundRecord] = field(default_factory=list)
    round_number: int = 1
    solved: bool = False


class WordleSolverCLI:
    """
    Interactive solver on a pair of text streams.

    Every round prints the constraint, the remaining goal words and (when the
    pool is small enough to search) the minimax recommendation, then waits
    for the guess that was played.
    """

    def __init__(
        self,
        recommender: WordRecommender,
        goals: List[Word],
        config: SolverConfig,
        goal: Optional[Word] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None
    ):
        """
        Args:
            recommender: Search over the full dictionary
            goals: Goal pool; copied, the caller's list is left alone
            config: Display and search thresholds
            goal: Hidden answer for simulation mode; None for assist mode
            stdin: Input stream (default: sys.stdin)
            stdout: Output stream (default: sys.stdout)
        """
        self.recommender = recommender
        self.config = config
        self.goal = goal
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.state = SessionState(goals=list(goals))

    def _print(self, text: str = ""):
        print(text, file=self.stdout)

    def _prompt(self, text: str) -> Optional[str]:
        """Read one line; None at end of input."""
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.strip()

    def run(self) -> SessionState:
        """
        Play rounds until solved, contradictory, out of rounds or out of input.

        Returns:
            Final session state
        """
        mode = "simulation" if self.goal is not None else "assist"
        log.info(f"Starting {mode} session with {len(self.state.goals)} goal words")

        while True:
            self._show_state()

            if not self.state.goals:
                self._print(
                    "No goal words left. The feedback is contradictory or the "
                    "answer is not in the goal list."
                )
                break

            max_rounds = self.config.max_rounds
            if max_rounds and self.state.round_number > max_rounds:
                self._print(f"Out of guesses after {max_rounds} rounds.")
                break

            guess = self._read_guess()
            if guess is None:
                break

            self._print(
                f"guess matches constraint? "
                f"{'yes' if self.state.constraint.matches(guess) else 'no'}"
            )

            outcome = self._read_outcome(guess)
            if outcome is None:
                break

            self.submit_round(guess, outcome)
            if outcome.is_solved:
                self._print(
                    f"Solved in {len(self.state.history)} "
                    f"guess{'es' if len(self.state.history) != 1 else ''}: {guess}"
                )
                break

        return self.state

    def submit_round(self, guess: Word, outcome: Outcome):
        """
        Fold one round of feedback into the session.

        Refines the live constraint and narrows the goal pool in place.
        """
        self._print(f"outcome is {outcome}")

        state = self.state
        state.constraint.refine(guess, outcome)
        removed = retain_candidates(state.goals, state.constraint)
        log.debug(f"Round {state.round_number}: {guess} {outcome.code} removed {removed} goals")

        state.history.append(RoundRecord(guess, outcome, len(state.goals)))
        state.round_number += 1
        state.solved = outcome.is_solved

    def _show_state(self):
        state = self.state
        self._print()
        self._print(f"--- Round {state.round_number} ---")
        self._print(f"constraint: {state.constraint}")
        self._print(f"  {len(state.goals)} matching goal words")

        if 0 < len(state.goals) <= self.config.list_threshold:
            for word in state.goals:
                self._print(f"  {word}")

        if state.goals and len(state.goals) < self.config.search_threshold:
            recommendation = self.recommender.recommend(state.constraint, state.goals)
            self._print(
                f"recommended guess is {recommendation.word} "
                f"(at most {recommendation.worst_case} possible words)"
            )

    def _read_guess(self) -> Optional[Word]:
        while True:
            text = self._prompt("guess> ")
            if text is None:
                return None
            if not is_valid_word(text):
                self._print("invalid")
                continue
            return encode(text)

    def _read_outcome(self, guess: Word) -> Optional[Outcome]:
        if self.goal is not None:
            return Outcome.compare(self.goal, guess)

        while True:
            text = self._prompt("feedback (G=here, Y=elsewhere, X=nowhere)> ")
            if text is None:
                return None
            try:
                return Outcome.from_feedback(guess, text)
            except ValueError as e:
                self._print(f"invalid: {e}")
