"""
Constraints module for Wordle Solver.

Handles feedback outcomes, constraint representation and refinement.

Duplicate letters follow the simple containment rule: a guessed letter that
is not in the right spot is ELSEWHERE whenever the goal contains it at all,
so a guess with two copies of a letter that the goal holds once reports
ELSEWHERE for both copies. The stricter per-letter budget used by the real
game is NOT applied; feedback typed in from the real game is normalized to
this rule by ``Outcome.from_feedback``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from words import ALL_LETTERS, WORD_LENGTH, Word, letter_mask, mask_letters


class LetterOutcome(Enum):
    """Per-letter feedback"""
    NOWHERE = "X"
    ELSEWHERE = "Y"
    HERE = "G"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    LetterOutcome.HERE: "🟩",
    LetterOutcome.ELSEWHERE: "🟨",
    LetterOutcome.NOWHERE: "⬜",
}

# Accepted spellings when the player types feedback
_FEEDBACK_CODES = {
    "g": LetterOutcome.HERE,
    "y": LetterOutcome.ELSEWHERE,
    "x": LetterOutcome.NOWHERE,
    ".": LetterOutcome.NOWHERE,
    "-": LetterOutcome.NOWHERE,
}


@dataclass(frozen=True)
class Outcome:
    """
    Feedback for one guess against one goal: exactly five LetterOutcomes.

    Outcomes are cheap to recompute and are never cached.
    """
    letters: Tuple[LetterOutcome, ...]

    def __post_init__(self):
        if len(self.letters) != WORD_LENGTH:
            raise ValueError(
                f"Outcome must have {WORD_LENGTH} letters, got {len(self.letters)}"
            )

    @classmethod
    def compare(cls, goal: Word, guess: Word) -> 'Outcome':
        """
        Score a guess against a goal.

        Position i is HERE when the letters agree, otherwise ELSEWHERE if
        the guessed letter occurs anywhere in the goal, otherwise NOWHERE.

        Args:
            goal: The hidden answer
            guess: The word played

        Returns:
            Outcome for the guess
        """
        result = []
        for goal_char, guess_char in zip(goal.text, guess.text):
            if goal_char == guess_char:
                result.append(LetterOutcome.HERE)
            elif goal.letters & letter_mask(guess_char):
                result.append(LetterOutcome.ELSEWHERE)
            else:
                result.append(LetterOutcome.NOWHERE)
        return cls(tuple(result))

    @classmethod
    def from_feedback(cls, guess: Word, text: str) -> 'Outcome':
        """
        Parse feedback typed by the player, e.g. "GYXXY".

        G = right spot, Y = wrong spot, X (or '.' / '-') = absent.
        The real game marks surplus copies of a letter as absent even when
        another copy is present; such marks are turned into ELSEWHERE so the
        result agrees with ``compare`` and never reports a letter as both
        present and absent.

        Args:
            guess: The word that was played
            text: Five feedback characters, case-insensitive

        Returns:
            Normalized Outcome

        Raises:
            ValueError: If text is not five valid feedback characters
        """
        text = text.strip().lower()
        if len(text) != WORD_LENGTH:
            raise ValueError(
                f"Feedback must be {WORD_LENGTH} characters, got {len(text)}: '{text}'"
            )
        try:
            raw = [_FEEDBACK_CODES[c] for c in text]
        except KeyError as e:
            raise ValueError(
                f"Invalid feedback character {e.args[0]!r}; use G, Y or X"
            ) from None

        present = 0
        for char, outcome in zip(guess.text, raw):
            if outcome != LetterOutcome.NOWHERE:
                present |= letter_mask(char)

        normalized = [
            LetterOutcome.ELSEWHERE
            if outcome == LetterOutcome.NOWHERE and present & letter_mask(char)
            else outcome
            for char, outcome in zip(guess.text, raw)
        ]
        return cls(tuple(normalized))

    @property
    def is_solved(self) -> bool:
        return all(o == LetterOutcome.HERE for o in self.letters)

    @property
    def code(self) -> str:
        """Feedback in G/Y/X form"""
        return "".join(o.value for o in self.letters)

    def __getitem__(self, index: int) -> LetterOutcome:
        return self.letters[index]

    def __iter__(self):
        return iter(self.letters)

    def __str__(self) -> str:
        return "".join(o.symbol for o in self.letters)


@dataclass
class Constraint:
    """
    Accumulated knowledge about the goal word.

    Attributes:
        positive_letters: Letters known to occur somewhere in the goal
        negative_letters: Letters known not to occur in the goal
        per_position: For each position, the letters still allowed there.
                      Starts with all letters allowed and only ever narrows.
    """
    positive_letters: int = 0
    negative_letters: int = 0
    per_position: List[int] = field(
        default_factory=lambda: [ALL_LETTERS] * WORD_LENGTH
    )

    def matches(self, word: Word) -> bool:
        """
        Check whether a word is consistent with everything known.

        Args:
            word: Word to check

        Returns:
            True if the word holds every positive letter, no negative letter,
            and an allowed letter at every position
        """
        if word.letters & self.positive_letters != self.positive_letters:
            return False
        if word.letters & self.negative_letters:
            return False
        return all(
            allowed & letter_mask(char)
            for char, allowed in zip(word.text, self.per_position)
        )

    def refine(self, guess: Word, outcome: Outcome) -> None:
        """
        Fold one round of feedback into this constraint, in place.

        Slots are applied left to right. A NOWHERE clears its letter from
        every position, including one pinned earlier in the same guess.

        Args:
            guess: The word that was played
            outcome: Feedback for that word
        """
        for i, (char, result) in enumerate(zip(guess.text, outcome)):
            m = letter_mask(char)
            if result == LetterOutcome.NOWHERE:
                self.negative_letters |= m
                self.per_position = [allowed & ~m for allowed in self.per_position]
            elif result == LetterOutcome.ELSEWHERE:
                self.positive_letters |= m
                self.per_position[i] &= ~m
            else:
                self.positive_letters |= m
                self.per_position[i] = m

    def copy(self) -> 'Constraint':
        """Independent copy for hypothetical refinement."""
        return Constraint(
            positive_letters=self.positive_letters,
            negative_letters=self.negative_letters,
            per_position=list(self.per_position),
        )

    @property
    def is_empty(self) -> bool:
        """True while nothing is known yet."""
        return (
            self.positive_letters == 0
            and self.negative_letters == 0
            and all(allowed == ALL_LETTERS for allowed in self.per_position)
        )

    def __str__(self) -> str:
        slots = []
        for allowed in self.per_position:
            if allowed == ALL_LETTERS:
                slots.append("*")
            elif bin(allowed).count("1") == 1:
                slots.append(mask_letters(allowed).upper())
            else:
                slots.append(f"[{mask_letters(allowed)}]")
        return (
            f"present: {mask_letters(self.positive_letters) or '-'}  "
            f"absent: {mask_letters(self.negative_letters) or '-'}  "
            f"positions: {' '.join(slots)}"
        )


if __name__ == "__main__":
    from words import encode

    print("=== Outcome: guess APPLE against goal ANGLE ===")
    outcome = Outcome.compare(encode("angle"), encode("apple"))
    print(f"{outcome}  {outcome.code}")

    print("\n=== Refine with the same feedback ===")
    constraint = Constraint()
    constraint.refine(encode("apple"), outcome)
    print(constraint)
    for text in ["angle", "ample", "apple", "addle"]:
        print(f"  {text}: {'MATCH' if constraint.matches(encode(text)) else 'NO MATCH'}")
