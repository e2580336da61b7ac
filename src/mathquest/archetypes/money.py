# src/mathquest/archetypes/money.py
"""Money: count coins, make change, convert cents, solve spend/save problems."""

import math
from dataclasses import dataclass

from mathquest.archetypes.base import Archetype
from mathquest.formatting import format_cents
from mathquest.models import ArchetypeKind, Question, scaled_difficulty
from mathquest.random_source import RandomSource
from mathquest.synthesizer import pick_distractors

COIN_GLYPH = "🪙"
BILL_GLYPH = "💵"
VISUAL_SEPARATOR = " + "


@dataclass(frozen=True)
class MoneyBand:
    max_grade: float
    denominations: tuple[int, ...]
    max_total: int


MONEY_BANDS: tuple[MoneyBand, ...] = (
    MoneyBand(0.5, (1,), 10),
    MoneyBand(1.0, (1, 5, 10), 25),
    MoneyBand(1.5, (1, 5, 10, 25), 50),
    MoneyBand(2.0, (1, 5, 10, 25), 100),
    MoneyBand(2.5, (1, 5, 10, 25, 50, 100), 200),
    MoneyBand(math.inf, (1, 5, 10, 25, 50, 100), 500),
)


def money_band(grade: float) -> MoneyBand:
    for band in MONEY_BANDS:
        if grade <= band.max_grade:
            return band
    return MONEY_BANDS[-1]


def coin_visual(values: list[int]) -> str:
    """Render coins and one-dollar bills, e.g. ``🪙25¢ + 🪙10¢``."""
    parts = []
    for value in values:
        if value == 100:
            parts.append(f"{BILL_GLYPH}$1")
        elif 0 < value < 100:
            parts.append(f"{COIN_GLYPH}{value}¢")
        else:
            raise ValueError(f"No coin or bill worth {value}¢")
    return VISUAL_SEPARATOR.join(parts)


def parse_coin_visual(text: str) -> list[int]:
    """Read the cent values back out of a :func:`coin_visual` string."""
    values = []
    for part in text.split(VISUAL_SEPARATOR):
        part = part.strip()
        if part == f"{BILL_GLYPH}$1":
            values.append(100)
        elif part.startswith(COIN_GLYPH) and part.endswith("¢"):
            values.append(int(part[len(COIN_GLYPH) : -1]))
        else:
            raise ValueError(f"Not a coin or bill: {part!r}")
    return values


class MoneyCounting(Archetype):
    """Money questions whose answers are formatted amounts (``"36¢"``).

    Every band counts coins. Above grade 1.5 making change joins in, above
    2.0 reading cents as dollars, and the top band adds spending and saving
    word problems and two-item change.
    """

    kind = ArchetypeKind.MONEY_COUNTING

    def pick_coins(self, band: MoneyBand, rng: RandomSource) -> list[int]:
        """Random coins that never add up past the band's maximum."""
        count = rng.randint(1, band.max_total) if band.denominations == (1,) else rng.randint(2, 5)
        coins: list[int] = []
        total = 0
        for _ in range(count):
            fits = [d for d in band.denominations if total + d <= band.max_total]
            if not fits:
                break
            coin = rng.choice(fits)
            coins.append(coin)
            total += coin
        return sorted(coins, reverse=True)

    def wrong_amounts(
        self, correct: int, mistakes: list[int], grade: float, rng: RandomSource
    ) -> list[str]:
        near = self.numeric_wrong_answers(correct, grade, rng)
        fillers = [correct + 1, correct + 5, correct + 10, correct + 25]
        candidates = [format_cents(c) for c in [*mistakes, *near, *fillers] if c > 0]
        return pick_distractors(format_cents(correct), candidates, self.wrong_count)

    def counting(self, grade: float, band: MoneyBand, rng: RandomSource) -> Question:
        coins = self.pick_coins(band, rng)
        total = sum(coins)
        only_pennies = set(coins) == {1}
        return self.build(
            grade,
            text=f"How much money is this? {coin_visual(coins)}",
            correct=format_cents(total),
            # counting the coins instead of adding their values
            wrong=self.wrong_amounts(total, [len(coins)], grade, rng),
            feedback=(
                "Count each penny one by one."
                if only_pennies
                else "Start with the biggest coins, then count down to pennies."
            ),
            difficulty=scaled_difficulty(total, band.max_total),
        )

    def making_change(self, grade: float, band: MoneyBand, rng: RandomSource) -> Question:
        unit = rng.choice([100, 500]) if band.max_total >= 500 else 100
        price = rng.randint(5, band.max_total - 5)
        if price % unit == 0:
            price -= rng.randint(1, 4)
        payment = math.ceil(price / unit) * unit
        change = payment - price
        return self.build(
            grade,
            text=(
                f"If something costs {format_cents(price)} and you pay with "
                f"{format_cents(payment)}, how much change should you get back?"
            ),
            correct=format_cents(change),
            wrong=self.wrong_amounts(change, [change + 5, change - 5, change + 10], grade, rng),
            feedback="Subtract the price from the payment, or count up from the price.",
            difficulty=scaled_difficulty(payment, band.max_total),
        )

    def word_problem(self, grade: float, band: MoneyBand, rng: RandomSource) -> Question:
        whole = rng.randint(100, band.max_total)
        part = rng.randint(5, whole - 5)
        if rng.chance():
            text = (
                f"You have {format_cents(whole)} and spend {format_cents(part)} "
                "on lunch. How much money do you have left?"
            )
        else:
            text = (
                f"You need {format_cents(whole)} for a toy. You have saved "
                f"{format_cents(part)}. How much more do you need?"
            )
        answer = whole - part
        return self.build(
            grade,
            text=text,
            correct=format_cents(answer),
            # adding instead of subtracting
            wrong=self.wrong_amounts(answer, [whole + part], grade, rng),
            feedback="Take the smaller amount away from the bigger amount.",
            difficulty=scaled_difficulty(whole, band.max_total),
        )

    def multi_step_change(self, grade: float, band: MoneyBand, rng: RandomSource) -> Question:
        first = rng.randint(50, band.max_total // 2)
        second = rng.randint(50, band.max_total // 2)
        total = first + second
        unit = rng.choice([100, 500])
        payment = (total // unit + 1) * unit
        change = payment - total
        return self.build(
            grade,
            text=(
                f"You buy two items at the store: one costs {format_cents(first)} and "
                f"another costs {format_cents(second)}. If you pay with "
                f"{format_cents(payment)}, how much change should you get back?"
            ),
            correct=format_cents(change),
            # paying for only one of the items, or handing back the total
            wrong=self.wrong_amounts(
                change, [payment - first, payment - second, total], grade, rng
            ),
            feedback="First add the prices, then subtract the total from the payment.",
            difficulty=scaled_difficulty(payment, band.max_total),
        )

    def cents_to_dollars(self, grade: float, band: MoneyBand, rng: RandomSource) -> Question:
        amount = rng.randint(101, band.max_total)
        item = rng.choice(["toy", "book", "game", "lunch"])
        correct = format_cents(amount)
        # moving the decimal point the wrong number of places
        scale_mistakes = [format_cents(amount * 10), format_cents(amount * 100), f"{amount}¢"]
        return self.build(
            grade,
            text=f"A {item} costs {amount}¢. How many dollars and cents is that?",
            correct=correct,
            wrong=pick_distractors(
                correct,
                [*scale_mistakes, *self.wrong_amounts(amount, [], grade, rng)],
                self.wrong_count,
            ),
            feedback="There are 100 cents in a dollar, so divide the cents by 100.",
            difficulty=scaled_difficulty(amount, band.max_total),
        )

    def generate(self, grade: float, rng: RandomSource) -> Question:
        band = money_band(grade)
        variants = [self.counting]
        if grade > 1.5:
            variants.append(self.making_change)
        if grade > 2.0:
            variants.append(self.cents_to_dollars)
        if grade > 2.5:
            variants.extend([self.word_problem, self.multi_step_change])
        return rng.choice(variants)(grade, band, rng)
