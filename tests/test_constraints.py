"""Tests for outcomes and constraint refinement / matching."""

import itertools

import pytest

from constraints import Constraint, LetterOutcome, Outcome
from words import ALL_LETTERS, encode, letter_mask

H = LetterOutcome.HERE
E = LetterOutcome.ELSEWHERE
N = LetterOutcome.NOWHERE

SAMPLE = ["apple", "angle", "ample", "cigar", "cider", "speed", "abide", "eerie", "sissy", "crane"]


def test_apple_against_angle():
    # a=a, p not in angle (twice), l=l, e=e
    outcome = Outcome.compare(encode("angle"), encode("apple"))
    assert outcome.letters == (H, N, N, H, H)
    assert outcome.code == "GXXGG"


def test_here_iff_same_letter():
    for goal_text, guess_text in itertools.product(SAMPLE, repeat=2):
        outcome = Outcome.compare(encode(goal_text), encode(guess_text))
        for i in range(5):
            assert (outcome[i] == H) == (goal_text[i] == guess_text[i])


def test_duplicate_guess_letters_all_report_elsewhere():
    # abide holds one 'e'; both 'e's of speed report ELSEWHERE
    outcome = Outcome.compare(encode("abide"), encode("speed"))
    assert outcome.letters == (N, N, E, E, E)


def test_solved_outcome():
    outcome = Outcome.compare(encode("crane"), encode("crane"))
    assert outcome.is_solved
    assert str(outcome) == "🟩" * 5
    assert not Outcome.compare(encode("crane"), encode("slate")).is_solved


def test_outcome_length_checked():
    with pytest.raises(ValueError):
        Outcome((H, H))


def test_from_feedback_parses_codes():
    outcome = Outcome.from_feedback(encode("crane"), "GyX.-")
    assert outcome.letters == (H, E, N, N, N)


def test_from_feedback_normalizes_surplus_duplicates():
    # The real game marks the second 'e' absent when the answer has one 'e'
    outcome = Outcome.from_feedback(encode("speed"), "XXGXX")
    assert outcome.letters == (N, N, H, E, N)

    constraint = Constraint()
    constraint.refine(encode("speed"), outcome)
    assert constraint.positive_letters & constraint.negative_letters == 0
    assert constraint.matches(encode("steel")) is False
    assert constraint.matches(encode("ahead")) is False
    assert constraint.matches(encode("wreck")) is True


@pytest.mark.parametrize("text", ["GGGG", "GGGGGG", "GGZGG", ""])
def test_from_feedback_rejects_malformed(text):
    with pytest.raises(ValueError):
        Outcome.from_feedback(encode("crane"), text)


def test_refine_zzzzz_all_nowhere():
    constraint = Constraint()
    constraint.refine(encode("zzzzz"), Outcome((N,) * 5))

    assert constraint.negative_letters == letter_mask("z")
    assert constraint.positive_letters == 0
    for allowed in constraint.per_position:
        assert allowed == ALL_LETTERS & ~letter_mask("z")
    assert not constraint.matches(encode("fuzzy"))
    assert not constraint.matches(encode("zebra"))
    assert constraint.matches(encode("crane"))


def test_refine_already_excluded_letters_is_noop():
    constraint = Constraint()
    constraint.refine(encode("fuzzy"), Outcome((N,) * 5))
    before = constraint.copy()

    # every letter of "fuzzy" is already absent
    constraint.refine(encode("yuzzf"), Outcome((N,) * 5))
    assert constraint.positive_letters == before.positive_letters
    assert constraint.per_position == before.per_position
    assert constraint.negative_letters == before.negative_letters


def test_refine_narrows_monotonically():
    goal = encode("cider")
    constraint = Constraint()
    for text in ["crane", "speed", "civic", "cigar", "cider"]:
        guess = encode(text)
        before = list(constraint.per_position)
        constraint.refine(guess, Outcome.compare(goal, guess))
        for old, new in zip(before, constraint.per_position):
            assert new & old == new
        assert constraint.positive_letters & constraint.negative_letters == 0
        assert constraint.matches(goal)


def test_refine_pins_here_and_excludes_elsewhere():
    guess = encode("crane")
    outcome = Outcome.compare(encode("cigar"), guess)
    assert outcome.letters == (H, E, E, N, N)

    constraint = Constraint()
    constraint.refine(guess, outcome)
    assert constraint.per_position[0] == letter_mask("c")
    assert not constraint.per_position[1] & letter_mask("r")
    assert not constraint.per_position[2] & letter_mask("a")
    assert constraint.matches(encode("cigar"))
    assert not constraint.matches(encode("crane"))
    # 'r' required somewhere
    assert not constraint.matches(encode("civic"))


def test_refine_applies_slots_in_order():
    # A raw outcome marking 'b' both here and nowhere: the later NOWHERE
    # clears the position pinned by the earlier HERE
    constraint = Constraint()
    constraint.refine(encode("abbey"), Outcome((N, H, N, N, N)))
    assert constraint.per_position[1] == 0
    assert not constraint.matches(encode("ebbed"))


def test_matches_rejects_negative_letters():
    constraint = Constraint()
    guess = encode("slate")
    constraint.refine(guess, Outcome.compare(encode("cigar"), guess))
    negative = constraint.negative_letters
    for text in SAMPLE:
        word = encode(text)
        if word.letters & negative:
            assert not constraint.matches(word)


def test_empty_constraint_matches_everything():
    constraint = Constraint()
    assert constraint.is_empty
    for text in SAMPLE:
        assert constraint.matches(encode(text))


def test_copy_is_independent():
    constraint = Constraint()
    hypothetical = constraint.copy()
    hypothetical.refine(encode("crane"), Outcome((H,) * 5))
    assert constraint.is_empty
    assert constraint == Constraint()
    assert not hypothetical.is_empty


def test_constraint_str():
    constraint = Constraint()
    constraint.refine(encode("crane"), Outcome.compare(encode("cigar"), encode("crane")))
    text = str(constraint)
    assert "present: acr" in text
    assert "absent: en" in text
    assert "positions: C " in text
