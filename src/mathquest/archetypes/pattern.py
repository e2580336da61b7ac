# src/mathquest/archetypes/pattern.py
"""Pattern recognition: find the missing glyph in a repeating pattern."""

import math

from mathquest.archetypes.base import Archetype
from mathquest.models import ArchetypeKind, Question
from mathquest.random_source import RandomSource
from mathquest.synthesizer import pick_distractors

BLANK = "___"

PATTERN_CATEGORIES: dict[str, list[str]] = {
    "colors": ["🔵", "🔴", "🟢", "🟡", "🟣"],
    "animals": ["🐶", "🐱", "🐭", "🐹", "🐰", "🐼", "🐨", "🦁"],
    "weather": ["☀️", "🌧️", "❄️", "🌈", "🌪️", "🌤️", "🌩️"],
    "sky": ["⭐", "🌙", "🌟", "☄️", "💫", "✨", "🌕"],
    "squares": ["🟨", "🟥", "🟧", "🟩", "🟦", "⬛", "⬜"],
    "fruits": ["🍎", "🍊", "🍋", "🍉", "🍇", "🍓", "🍒"],
    "music": ["🎵", "🎶", "🎷", "🎸", "🥁", "🎺", "🎻"],
    "vehicles": ["🚗", "🚙", "🛵", "🚲", "✈️", "🚀", "🛶"],
    "nature": ["🌳", "🌲", "🌴", "🌵", "🌾", "🌿", "🍂"],
    "foods": ["🍕", "🍔", "🌭", "🌮", "🍩", "🍪", "🍰"],
    "fashion": ["👗", "👒", "🧥", "👞", "👜", "🕶️", "🎩"],
    "sports": ["⚽", "🏀", "🏈", "⚾", "🎾", "🏐", "🏓"],
    "school": ["📚", "📖", "📕", "📗", "📘", "📙", "📝"],
    "boats": ["⛵", "🚤", "🛳️", "⛴️", "🚢", "⚓", "🪝"],
    "bugs": ["🐝", "🐞", "🦋", "🐌", "🐜", "🐛", "🦂"],
    "fantasy": ["🦄", "🐉", "🐲", "🐦‍⬛", "🦜", "🦩", "🐺"],
    "flowers": ["🍄", "🌸", "🌺", "🌼", "🌻", "🌷", "🌹"],
    "party": ["🎂", "🎉", "🎁", "🎈", "🎊", "🎀", "🪅"],
    "adventure": ["🔑", "🛡️", "⚔️", "🗡️", "🏹", "🧭", "🗺️"],
}


def base_pattern(symbols: list[str], length: int, rng: RandomSource) -> list[str]:
    """A repeating unit of ``length`` glyphs with at least two distinct ones."""
    pattern = rng.sample(symbols, 2)
    pattern += [rng.choice(symbols) for _ in range(length - 2)]
    return rng.shuffle(pattern)


class PatternRecognition(Archetype):
    """A repeated glyph unit with one position blanked out."""

    kind = ArchetypeKind.PATTERN_RECOGNITION

    def generate(self, grade: float, rng: RandomSource) -> Question:
        symbols = PATTERN_CATEGORIES[rng.choice(list(PATTERN_CATEGORIES))]

        length = 2 if grade <= 0.5 else rng.randint(3, 5)
        repeats = 3 if grade <= 0.5 else 4
        unit = base_pattern(symbols, length, rng)
        sequence = unit * repeats

        blank = rng.randint(0, len(sequence) - 1)
        answer = sequence[blank]
        shown = [*sequence]
        shown[blank] = BLANK

        in_pattern = [s for s in unit if s != answer]
        unused = rng.shuffle([s for s in symbols if s not in unit])
        wrong = pick_distractors(answer, [*in_pattern, *unused], self.wrong_count)

        return self.build(
            grade,
            text=f"What is missing in the pattern? {' '.join(shown)}",
            correct=answer,
            wrong=wrong,
            feedback=f"The pattern repeats: {' '.join(unit)}",
            difficulty=math.ceil(length / 3),
        )
