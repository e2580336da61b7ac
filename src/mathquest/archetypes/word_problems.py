# src/mathquest/archetypes/word_problems.py
"""Word problems for the four operations.

Each problem picks a name and a plural noun and drops them into one of
several templates. Templates repeat the name instead of using pronouns.
"""

from dataclasses import dataclass

from mathquest.archetypes.base import Archetype
from mathquest.models import ArchetypeKind, Question, number_range, scaled_difficulty
from mathquest.random_source import RandomSource

NAMES = ["Sam", "Maya", "Leo", "Ava", "Noah", "Zoe", "Eli", "Lily", "Omar", "Ruby"]
NOUNS = ["apples", "stickers", "marbles", "crayons", "cookies", "shells", "books", "balloons"]


@dataclass(frozen=True)
class Template:
    text: str
    feedback: str


class WordProblem(Archetype):
    """Shared template filling for the word problem archetypes."""

    templates: tuple[Template, ...] = ()

    def fill(self, rng: RandomSource, **numbers: int) -> tuple[str, str]:
        template = rng.choice(self.templates)
        words = {"name": rng.choice(NAMES), "noun": rng.choice(NOUNS), **numbers}
        return template.text.format(**words), template.feedback.format(**words)


class WordProbAdd(WordProblem):
    kind = ArchetypeKind.WORD_PROBLEM_ADD
    templates = (
        Template(
            "{name} has {a} {noun} and finds {b} more. How many {noun} does {name} have in total?",
            "Add the two amounts together to find the total.",
        ),
        Template(
            "There are {a} {noun} in one box and {b} {noun} in another. "
            "How many {noun} are there altogether?",
            "Combine both boxes to get the total.",
        ),
        Template(
            "{name} collects {a} {noun} on Monday and {b} {noun} on Tuesday. "
            "How many {noun} did {name} collect?",
            "Add Monday and Tuesday together.",
        ),
    )

    def generate(self, grade: float, rng: RandomSource) -> Question:
        span = number_range(grade)
        a = rng.randint(span.min, span.max - 1)
        b = rng.randint(span.min, span.max - a)
        total = a + b
        text, feedback = self.fill(rng, a=a, b=b)
        return self.build(
            grade,
            text=text,
            correct=total,
            wrong=self.numeric_wrong_answers(total, grade, rng),
            feedback=feedback,
            difficulty=scaled_difficulty(total, span.max),
        )


class WordProbSub(WordProblem):
    kind = ArchetypeKind.WORD_PROBLEM_SUB
    templates = (
        Template(
            "{name} has {a} {noun} and gives away {b}. How many {noun} does {name} have left?",
            "Take away the {noun} that were given away.",
        ),
        Template(
            "There are {a} {noun} on a shelf. {b} {noun} are taken. How many {noun} remain?",
            "Subtract the {noun} that were taken from the total.",
        ),
        Template(
            "{name} had {a} {noun} and lost {b} of them. How many {noun} does {name} still have?",
            "Take away the lost {noun} from the total.",
        ),
    )

    def generate(self, grade: float, rng: RandomSource) -> Question:
        span = number_range(grade)
        a = rng.randint(span.min, span.max)
        b = rng.randint(min(1, a), a)
        left = a - b
        text, feedback = self.fill(rng, a=a, b=b)
        return self.build(
            grade,
            text=text,
            correct=left,
            wrong=self.numeric_wrong_answers(left, grade, rng),
            feedback=feedback,
            difficulty=scaled_difficulty(a, span.max),
        )


class WordProbMult(WordProblem):
    kind = ArchetypeKind.WORD_PROBLEM_MULT
    templates = (
        Template(
            "There are {a} bags with {b} {noun} in each bag. How many {noun} are there in total?",
            "Multiply the number of bags by the {noun} in each bag.",
        ),
        Template(
            "{name} makes {a} rows of {noun} with {b} in each row. How many {noun} is that?",
            "Multiply the rows by how many are in each row.",
        ),
        Template(
            "{a} friends each bring {b} {noun}. How many {noun} do the friends bring altogether?",
            "Multiply the number of friends by the {noun} each one brings.",
        ),
    )

    def generate(self, grade: float, rng: RandomSource) -> Question:
        span = number_range(grade)
        a = rng.randint(2, max(2, min(10, span.max // 2)))
        b = rng.randint(1, max(1, min(10, span.max // a)))
        product = a * b
        text, feedback = self.fill(rng, a=a, b=b)
        return self.build(
            grade,
            text=text,
            correct=product,
            wrong=self.numeric_wrong_answers(product, grade, rng),
            feedback=feedback,
            difficulty=scaled_difficulty(product, span.max),
        )


class WordProbDiv(WordProblem):
    """Division that always comes out even: dividend = divisor x quotient."""

    kind = ArchetypeKind.WORD_PROBLEM_DIV
    templates = (
        Template(
            "{name} shares {a} {noun} equally among {b} friends. How many {noun} does each friend get?",
            "Divide the {noun} by the number of friends.",
        ),
        Template(
            "{name} packs {a} {noun} into bags with {b} in each bag. How many bags does {name} fill?",
            "Divide the {noun} by how many go in each bag.",
        ),
        Template(
            "There are {a} {noun} split equally into {b} groups. How many {noun} are in each group?",
            "Split the {noun} equally by dividing.",
        ),
    )

    def generate(self, grade: float, rng: RandomSource) -> Question:
        span = number_range(grade)
        divisor = rng.randint(2, max(2, min(5, span.max)))
        quotient = rng.randint(1, max(1, span.max // divisor))
        dividend = divisor * quotient
        text, feedback = self.fill(rng, a=dividend, b=divisor)
        return self.build(
            grade,
            text=text,
            correct=dividend // divisor,
            wrong=self.numeric_wrong_answers(quotient, grade, rng),
            feedback=feedback,
            difficulty=scaled_difficulty(quotient, span.max),
        )
