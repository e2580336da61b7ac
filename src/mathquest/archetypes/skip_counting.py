# src/mathquest/archetypes/skip_counting.py
"""Skip counting: continue a sequence that steps by a fixed stride."""

import math
from dataclasses import dataclass

from mathquest.archetypes.base import Archetype
from mathquest.models import ArchetypeKind, Question, scaled_difficulty
from mathquest.random_source import RandomSource
from mathquest.synthesizer import pick_distractors


@dataclass(frozen=True)
class SkipBand:
    """Strides and start window for one grade band."""

    max_grade: float
    strides: tuple[int, ...]
    start_min: int
    start_max: int


SKIP_BANDS: tuple[SkipBand, ...] = (
    SkipBand(0.5, (2,), 0, 10),
    SkipBand(1.0, (2, 5, 10), 0, 20),
    SkipBand(1.5, (2, 3, 4, 5, 10), 0, 50),
    SkipBand(2.0, (2, 3, 4, 5, 10, 100), 0, 100),
    SkipBand(2.5, (2, 3, 4, 5, 10, 25, 50, 100), 0, 200),
    SkipBand(math.inf, (2, 3, 4, 5, 10, 25, 50, 100, -2, -5, -10), -50, 500),
)


def skip_band(grade: float) -> SkipBand:
    for band in SKIP_BANDS:
        if grade <= band.max_grade:
            return band
    return SKIP_BANDS[-1]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class SkipCounting(Archetype):
    """``What comes next: a, a+s, a+2s, ___?``

    Wrong answers model common mistakes rather than random noise: stepping
    one stride too far, repeating the last shown term, and adding one and a
    half strides to the last shown term.
    """

    kind = ArchetypeKind.SKIP_COUNTING

    def choose_start(self, stride: int, band: SkipBand, rng: RandomSource) -> int:
        """Pick a start so the shown terms stay inside the band's window.

        Positive strides start on a multiple of the stride. When the stride
        is too wide for the window the sequence starts at 0. Negative strides
        count down from between 4 and 8 strides above zero.
        """
        if stride < 0:
            return abs(stride) * rng.randint(4, 8)

        low_step = math.ceil(band.start_min / stride)
        high_step = (band.start_max - 2 * stride) // stride
        if high_step < low_step:
            return max(0, low_step) * stride
        return rng.randint(low_step, high_step) * stride

    def generate(self, grade: float, rng: RandomSource) -> Question:
        band = skip_band(grade)
        stride = rng.choice(band.strides)
        start = self.choose_start(stride, band, rng)

        shown = [start, start + stride, start + 2 * stride]
        answer = start + 3 * stride

        mistakes = [
            answer + stride,
            shown[-1],
            start + _round_half_up(stride * 3.5),
            # fillers, only reached if the mistakes above collide
            answer + 2 * stride,
            answer + 1,
            answer - 1,
        ]
        wrong = pick_distractors(answer, mistakes, self.wrong_count)

        if grade <= 1.0:
            feedback = f"Count by {abs(stride)}s to find what comes next."
        elif stride < 0:
            feedback = f"Count backwards by {abs(stride)}s to find the pattern."
        elif stride >= 100:
            feedback = "Count by hundreds to find the pattern."
        elif stride >= 10:
            feedback = "Count by tens to find the pattern."
        else:
            feedback = f"Look for the pattern: each number goes up by {stride}."

        return self.build(
            grade,
            text=f"What comes next: {', '.join(str(n) for n in shown)}, ___?",
            correct=answer,
            wrong=wrong,
            feedback=feedback,
            difficulty=scaled_difficulty(abs(answer), band.start_max),
        )
