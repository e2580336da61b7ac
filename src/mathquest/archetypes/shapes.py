# src/mathquest/archetypes/shapes.py
"""Shape properties: names, side and corner counts, defining features."""

from dataclasses import dataclass

from mathquest.archetypes.base import Archetype
from mathquest.models import ArchetypeKind, Question
from mathquest.random_source import RandomSource
from mathquest.synthesizer import pick_distractors


@dataclass(frozen=True)
class Shape:
    """A catalog shape.

    ``feature`` is the property that only this shape in the catalog has,
    so it can be offered as a wrong answer for any other shape.
    """

    name: str
    glyph: str
    sides: int
    corners: int
    feature: str


SHAPES: dict[str, Shape] = {
    s.name: s
    for s in (
        Shape("square", "□", 4, 4, "4 equal sides and 4 right angles"),
        Shape("triangle", "△", 3, 3, "3 sides and 3 corners"),
        Shape("circle", "○", 0, 0, "round with no corners"),
        Shape("rectangle", "▭", 4, 4, "4 right angles with 2 long sides and 2 short sides"),
        Shape("diamond", "◇", 4, 4, "4 equal sides but no right angles"),
        Shape("pentagon", "⬠", 5, 5, "5 sides and 5 corners"),
        Shape("hexagon", "⬡", 6, 6, "6 sides and 6 corners"),
        Shape("octagon", "⯃", 8, 8, "8 sides and 8 corners"),
        Shape("semicircle", "◗", 2, 2, "1 curved side and 1 straight side"),
        Shape("trapezoid", "⏢", 4, 4, "exactly 1 pair of parallel sides"),
    )
}

BASIC = ["square", "triangle", "circle", "rectangle", "diamond"]


def available_shapes(grade: float) -> list[Shape]:
    """Shapes in play at a grade; later bands add to earlier ones."""
    if grade <= 0.5:
        names = BASIC[:3]
    elif grade <= 1.0:
        names = BASIC
    elif grade <= 1.5:
        names = [*BASIC, "pentagon"]
    elif grade <= 2.0:
        names = [*BASIC, "pentagon", "hexagon", "trapezoid"]
    else:
        names = list(SHAPES)
    return [SHAPES[name] for name in names]


class ShapeProperties(Archetype):
    """Identify a shape glyph or one of its properties.

    Distractors always match the kind of the correct answer: other shape
    names for a name, nearby numbers for a count, other shapes' features
    for a feature. Shapes outside the grade's band are used as fillers
    when the band alone has too few.
    """

    kind = ArchetypeKind.SHAPE_PROPERTIES

    def wrong_names(self, shape: Shape, in_play: list[Shape], rng: RandomSource) -> list[str]:
        others = rng.shuffle([s.name for s in in_play])
        rest = rng.shuffle(list(SHAPES))
        return pick_distractors(shape.name, [*others, *rest], self.wrong_count)

    def wrong_features(self, shape: Shape, in_play: list[Shape], rng: RandomSource) -> list[str]:
        others = rng.shuffle([s.feature for s in in_play])
        rest = rng.shuffle([s.feature for s in SHAPES.values()])
        return pick_distractors(shape.feature, [*others, *rest], self.wrong_count)

    def wrong_counts(self, count: int) -> list[int]:
        candidates = [count + 1, count - 1, count + 2, count + 3, count + 4]
        return pick_distractors(count, [c for c in candidates if c >= 0], self.wrong_count)

    def generate(self, grade: float, rng: RandomSource) -> Question:
        in_play = available_shapes(grade)
        shape = rng.choice(in_play)

        if grade <= 0.5:
            return self.build(
                grade,
                text=f"What shape is this? {shape.glyph}",
                correct=shape.name,
                wrong=self.wrong_names(shape, in_play, rng),
                feedback="Look at the shape carefully.",
            )

        if grade <= 1.0:
            part = rng.choice(["sides", "corners"])
            count = shape.sides if part == "sides" else shape.corners
            return self.build(
                grade,
                text=f"How many {part} does this shape have? {shape.glyph}",
                correct=count,
                wrong=self.wrong_counts(count),
                feedback=f"Count the {part} one by one.",
            )

        if grade <= 2.0:
            if shape.sides > 0 and rng.chance():
                return self.build(
                    grade,
                    text=f"How many sides does this shape have? {shape.glyph}",
                    correct=shape.sides,
                    wrong=self.wrong_counts(shape.sides),
                    feedback="Count the sides one by one.",
                    difficulty=2,
                )
            return self.build(
                grade,
                text=f"What kind of shape is this? {shape.glyph}",
                correct=shape.name,
                wrong=self.wrong_names(shape, in_play, rng),
                feedback="Count the sides to identify the shape.",
                difficulty=2,
            )

        if rng.chance():
            text = f"Which is true about this shape? {shape.glyph}"
            feedback = "Think about the sides and angles of the shape."
        else:
            text = f"This is a {shape.name}. What makes it special?"
            feedback = "Look at the number and type of sides."
        return self.build(
            grade,
            text=text,
            correct=shape.feature,
            wrong=self.wrong_features(shape, in_play, rng),
            feedback=feedback,
            difficulty=3,
        )
