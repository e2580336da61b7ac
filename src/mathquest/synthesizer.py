# src/mathquest/synthesizer.py
"""Wrong answer synthesis.

Two helpers live here:
- synthesize_wrong_answers: numeric distractors near a correct number
- pick_distractors: exclude-then-fill over an ordered candidate list,
  for archetypes whose answers are strings or have hand-picked mistakes
"""

from __future__ import annotations

import logging
import math
from collections.abc import Hashable, Iterable
from typing import TypeVar

from mathquest.random_source import RandomSource

logger = logging.getLogger(__name__)

H = TypeVar("H", bound=Hashable)

DEFAULT_MIN_WRONG = 3
DEFAULT_MAX_ATTEMPTS = 50


def _is_valid(value: int, correct: int, chosen: set[int], require_positive: bool) -> bool:
    if value == correct or value in chosen:
        return False
    return not require_positive or value > 0


def synthesize_wrong_answers(
    correct: int,
    grade: float,
    rng: RandomSource,
    *,
    require_positive: bool = True,
    min_wrong: int = DEFAULT_MIN_WRONG,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    max_difference: float | None = None,
) -> list[int]:
    """Produce up to ``min_wrong`` distinct wrong numbers near ``correct``.

    Random perturbation is tried first. Answers of 3 or less draw from a
    small fixed set instead, since perturbing tiny numbers mostly lands on
    zero or negatives. A deterministic backfill tops up the result when the
    random phase runs out of attempts.

    Never raises. If even the backfill cannot find enough valid values the
    shorter list is returned and a warning is logged.

    Args:
        correct: The correct answer
        grade: Grade level; wider variation at higher grades
        rng: Random source
        require_positive: Reject wrong answers <= 0
        min_wrong: Number of wrong answers wanted
        max_attempts: Budget for the random phase
        max_difference: Override for the variation magnitude

    Returns:
        List of at most ``min_wrong`` distinct integers, none equal to ``correct``
    """
    if max_difference is not None:
        variation = max(1, math.floor(max_difference))
    else:
        variation = max(2, math.floor(grade * 3))

    chosen: list[int] = []
    seen: set[int] = set()

    attempts = 0
    while len(chosen) < min_wrong and attempts < max_attempts:
        attempts += 1
        if correct <= 3:
            alternatives = [
                correct + 1,
                correct + 2,
                correct * 2,
                max(1, correct - 1) if require_positive else correct - 1,
            ]
            wrong = rng.choice(alternatives)
        else:
            sign = 1 if rng.chance() else -1
            wrong = correct + sign * rng.randint(1, variation)

        if _is_valid(wrong, correct, seen, require_positive):
            chosen.append(wrong)
            seen.add(wrong)

    backup = [correct + 1, correct + 2, correct + 3, correct * 2, max(1, correct - 1)]
    for wrong in backup:
        if len(chosen) >= min_wrong:
            break
        if _is_valid(wrong, correct, seen, require_positive):
            chosen.append(wrong)
            seen.add(wrong)

    if len(chosen) < min_wrong:
        logger.warning(
            "Only %d of %d wrong answers found for correct answer %d (grade %.2f)",
            len(chosen),
            min_wrong,
            correct,
            grade,
        )
    return chosen[:min_wrong]


def pick_distractors(correct: H, candidates: Iterable[H], count: int) -> list[H]:
    """Take the first ``count`` candidates that are unique and not ``correct``.

    Candidates are consumed in order, so callers list the most plausible
    mistakes first and generic fillers last.
    """
    picked: list[H] = []
    seen: set[H] = {correct}
    for candidate in candidates:
        if len(picked) >= count:
            break
        if candidate in seen:
            continue
        picked.append(candidate)
        seen.add(candidate)
    return picked
