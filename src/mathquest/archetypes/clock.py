# src/mathquest/archetypes/clock.py
"""Time questions: reading clocks, elapsed time, schedules, AM/PM."""

from mathquest.archetypes.base import Archetype
from mathquest.formatting import format_clock, format_duration, wrap_hour
from mathquest.models import ArchetypeKind, Question
from mathquest.random_source import RandomSource
from mathquest.synthesizer import pick_distractors

# one glyph per hour, 1 o'clock first
HOUR_CLOCKS = "🕐🕑🕒🕓🕔🕕🕖🕗🕘🕙🕚🕛"
HALF_HOUR_CLOCKS = "🕜🕝🕞🕟🕠🕡🕢🕣🕤🕥🕦🕧"

DIAL_MINUTES = 12 * 60

AM_ACTIVITIES = ["breakfast", "the morning walk", "the school bell"]
PM_ACTIVITIES = ["dinner", "sunset", "the bedtime story"]


def clock_glyph(hour: int, half: bool = False) -> str:
    glyphs = HALF_HOUR_CLOCKS if half else HOUR_CLOCKS
    return glyphs[wrap_hour(hour) - 1]


def dial_time(minutes: int) -> str:
    """``H:MM`` for a count of minutes past 12:00 on the dial."""
    return format_clock(0, minutes % DIAL_MINUTES)


def spoken_time(minutes: int) -> str:
    """Quarter-hour times in words: o'clock, quarter past, half past, quarter to."""
    minutes %= DIAL_MINUTES
    hour, rest = divmod(minutes, 60)
    if rest == 0:
        return f"{wrap_hour(hour)} o'clock"
    if rest == 15:
        return f"quarter past {wrap_hour(hour)}"
    if rest == 30:
        return f"half past {wrap_hour(hour)}"
    if rest == 45:
        return f"quarter to {wrap_hour(hour + 1)}"
    raise ValueError(f"{minutes} minutes is not on a quarter hour")


def flip_period(period: str) -> str:
    return "PM" if period == "AM" else "AM"


class TimeQuestion(Archetype):
    """Clock and schedule questions; answers are time or duration strings.

    Wrong answers are always in the same format as the correct one: clock
    times are near misses on the dial, spoken times are other quarter hours,
    and durations are near misses in minutes.
    """

    kind = ArchetypeKind.TIME

    def wrong_times(self, minutes: int, offsets: list[int], render=dial_time) -> list[str]:
        candidates = [render(minutes + offset) for offset in offsets]
        return pick_distractors(render(minutes), candidates, self.wrong_count)

    def wrong_durations(self, minutes: int, offsets: list[int]) -> list[str]:
        candidates = [format_duration(minutes + o) for o in offsets if minutes + o > 0]
        return pick_distractors(format_duration(minutes), candidates, self.wrong_count)

    def hour_reading(self, grade: float, rng: RandomSource) -> Question:
        hour = rng.randint(1, 12)
        return self.build(
            grade,
            text=f"What time is shown? {clock_glyph(hour)}",
            correct=dial_time(hour * 60),
            wrong=self.wrong_times(hour * 60, [60, -60, 30, 120, -120]),
            feedback="When both hands point to a number, it's exactly that hour.",
        )

    def hour_hand(self, grade: float, rng: RandomSource) -> Question:
        hour = rng.randint(1, 12)
        minutes = hour * 60
        return self.build(
            grade,
            text=f"What time is it when the hour hand points to {hour}? {clock_glyph(hour)}",
            correct=spoken_time(minutes),
            wrong=self.wrong_times(minutes, [60, -60, 30, 120], render=spoken_time),
            feedback="When we say the hour, we say 'o'clock'.",
        )

    def half_hour_reading(self, grade: float, rng: RandomSource) -> Question:
        hour = rng.randint(1, 12)
        minutes = hour * 60 + 30
        return self.build(
            grade,
            text=f"What time is shown? {clock_glyph(hour, half=True)}",
            correct=dial_time(minutes),
            wrong=self.wrong_times(minutes, [-30, 60, -60, 30, 120]),
            feedback="When the minute hand points to 6, it's half past the hour.",
        )

    def quarter_phrase(self, grade: float, rng: RandomSource) -> Question:
        hour = rng.randint(1, 12)
        past = rng.choice([0, 15, 30])
        if past == 0:
            text = f"What time is it? {clock_glyph(hour)}"
            feedback = "When both hands point to the number, it's o'clock."
        elif past == 15:
            text = f"When the minute hand points to 3, what time is it after {hour} o'clock?"
            feedback = "When the minute hand points to 3, it's quarter past the hour."
        else:
            text = f"What time is shown? {clock_glyph(hour, half=True)}"
            feedback = "When the minute hand points to 6, it's half past the hour."
        minutes = hour * 60 + past
        return self.build(
            grade,
            text=text,
            correct=spoken_time(minutes),
            wrong=self.wrong_times(minutes, [15, 30, -15, 60, -60], render=spoken_time),
            feedback=feedback,
        )

    def quarter_to(self, grade: float, rng: RandomSource) -> Question:
        hour = rng.randint(1, 12)
        next_hour = wrap_hour(hour + 1)
        minutes = hour * 60 + 45
        return self.build(
            grade,
            text=(
                f"When the minute hand points to 9, what time is it "
                f"before {next_hour} o'clock?"
            ),
            correct=spoken_time(minutes),
            wrong=self.wrong_times(minutes, [-30, 15, -60, 60, -45], render=spoken_time),
            feedback="When the minute hand points to 9, it's quarter to the next hour.",
            difficulty=2,
        )

    def five_minutes(self, grade: float, rng: RandomSource) -> Question:
        hour = rng.randint(1, 12)
        mark = rng.randint(1, 11)
        minutes = hour * 60 + mark * 5
        return self.build(
            grade,
            text=(
                f"When the minute hand points to {mark}, what time is it "
                f"after {hour} o'clock?"
            ),
            correct=dial_time(minutes),
            wrong=self.wrong_times(minutes, [5, -5, 60, 10, -10]),
            feedback="Count by 5s as you move around the clock face.",
            difficulty=2,
        )

    def interval(self, grade: float, rng: RandomSource) -> Question:
        start = rng.randint(1, 11) * 60 + rng.randint(0, 11) * 5
        length = rng.randint(2, 12) * 15
        return self.build(
            grade,
            text=(
                f"If an activity starts at {dial_time(start)} and ends at "
                f"{dial_time(start + length)}, how long does it last?"
            ),
            correct=format_duration(length),
            wrong=self.wrong_durations(length, [15, -15, 60, -60, 30]),
            feedback="Count the hours first, then the minutes, from start to end.",
            difficulty=2,
        )

    def end_time(self, grade: float, rng: RandomSource) -> Question:
        start = rng.randint(1, 12) * 60 + rng.randint(1, 11) * 5
        length = rng.randint(1, 4) * 15
        end = start + length
        return self.build(
            grade,
            text=(
                f"If your dance class starts at {dial_time(start)} and lasts "
                f"{format_duration(length)}, what time does it end?"
            ),
            correct=dial_time(end),
            wrong=self.wrong_times(end, [-60, 60, 15, -15, 30]),
            feedback="Add the minutes first, then move to the next hour if you pass 60.",
            difficulty=2,
        )

    def schedule(self, grade: float, rng: RandomSource) -> Question:
        start = rng.randint(1, 11) * 60 + rng.randint(0, 11) * 5
        warm_up = rng.randint(2, 9) * 5
        game = rng.randint(3, 18) * 5
        end = start + warm_up + game
        return self.build(
            grade,
            text=(
                f"Practice starts at {dial_time(start)}. The warm-up takes "
                f"{format_duration(warm_up)}, then the game takes "
                f"{format_duration(game)}. What time does the game end?"
            ),
            correct=dial_time(end),
            # stopping after the warm-up is the step most often skipped
            wrong=self.wrong_times(end, [-game, 60, -60, 5, -5]),
            feedback="Add one step at a time: first the warm-up, then the game.",
            difficulty=3,
        )

    def elapsed(self, grade: float, rng: RandomSource) -> Question:
        start = rng.randint(1, 11) * 60 + rng.randint(0, 11) * 5
        extra_minutes = rng.randint(1, 11) * 5
        length = rng.randint(1, 3) * 60 + extra_minutes
        end = start + length
        return self.build(
            grade,
            text=(
                f"If an event starts at {dial_time(start)} and lasts "
                f"{format_duration(length)}, what time does it end?"
            ),
            correct=dial_time(end),
            # adding only the hours
            wrong=self.wrong_times(end, [-extra_minutes, -60, 5, 60]),
            feedback="Add hours and minutes separately, then combine them.",
            difficulty=3,
        )

    def movie(self, grade: float, rng: RandomSource) -> Question:
        start = rng.randint(1, 8) * 60
        length = rng.randint(2, 4) * 30
        end = start + length
        return self.build(
            grade,
            text=(
                f"A movie starts at {dial_time(start)} and is {length} minutes long. "
                "What time does it end?"
            ),
            correct=dial_time(end),
            wrong=self.wrong_times(end, [-60, 15, 60, -30, 30]),
            feedback="Change the minutes into hours and minutes, then add them to the start.",
            difficulty=3,
        )

    def am_pm(self, grade: float, rng: RandomSource) -> Question:
        hour = rng.randint(1, 12)
        later = rng.randint(2, 5)
        period = rng.choice(["AM", "PM"])
        activity = rng.choice(AM_ACTIVITIES if period == "AM" else PM_ACTIVITIES)

        end_hour = wrap_hour(hour + later)
        end_period = flip_period(period) if hour % 12 + later >= 12 else period
        correct = f"{end_hour}:00 {end_period}"
        candidates = [
            f"{end_hour}:00 {flip_period(end_period)}",
            f"{wrap_hour(end_hour + 1)}:00 {end_period}",
            f"{end_hour}:30 {end_period}",
            f"{wrap_hour(end_hour - 1)}:00 {end_period}",
        ]
        return self.build(
            grade,
            text=f"If {activity} is at {hour}:00 {period}, what time will it be {later} hours later?",
            correct=correct,
            wrong=pick_distractors(correct, candidates, self.wrong_count),
            feedback="Remember to switch between AM and PM when you pass 12 o'clock.",
            difficulty=3,
        )

    def ride_length(self, grade: float, rng: RandomSource) -> Question:
        start_hour = rng.randint(8, 11)
        end_hour = rng.randint(1, 3)
        hours = (end_hour + 12 - start_hour) % 12 or 12
        return self.build(
            grade,
            text=(
                f"A train ride starts at {start_hour}:00 and ends at {end_hour}:00. "
                "How long is the ride?"
            ),
            correct=format_duration(hours * 60),
            wrong=self.wrong_durations(hours * 60, [60, -60, 120, 30]),
            feedback="Count the hours between the start and end time, past 12 o'clock.",
            difficulty=3,
        )

    def generate(self, grade: float, rng: RandomSource) -> Question:
        if grade <= 0.5:
            variants = [self.hour_reading, self.hour_hand]
        elif grade <= 1.0:
            variants = [self.hour_reading, self.half_hour_reading]
        elif grade <= 1.5:
            variants = [self.quarter_phrase]
        elif grade <= 2.0:
            variants = [self.quarter_to, self.five_minutes]
        elif grade <= 2.5:
            variants = [self.interval, self.end_time]
        else:
            variants = [self.schedule, self.elapsed, self.movie, self.am_pm, self.ride_length]
        return rng.choice(variants)(grade, rng)
