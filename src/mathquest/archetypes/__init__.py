# src/mathquest/archetypes/__init__.py
"""Question archetypes."""

from mathquest.archetypes.arithmetic import Addition, CountingObjects, NumberSequence, Subtraction
from mathquest.archetypes.base import Archetype
from mathquest.archetypes.clock import TimeQuestion
from mathquest.archetypes.comparison import ComparisonQuestion, relation
from mathquest.archetypes.money import MoneyCounting, coin_visual, parse_coin_visual
from mathquest.archetypes.pattern import PatternRecognition
from mathquest.archetypes.shapes import ShapeProperties
from mathquest.archetypes.skip_counting import SkipCounting
from mathquest.archetypes.word_problems import WordProbAdd, WordProbDiv, WordProbMult, WordProbSub

__all__ = [
    "Archetype",
    "Addition",
    "Subtraction",
    "CountingObjects",
    "NumberSequence",
    "SkipCounting",
    "ComparisonQuestion",
    "PatternRecognition",
    "ShapeProperties",
    "MoneyCounting",
    "TimeQuestion",
    "WordProbAdd",
    "WordProbSub",
    "WordProbMult",
    "WordProbDiv",
    "coin_visual",
    "parse_coin_visual",
    "relation",
]
