# src/mathquest/formatting.py
"""Display formats shared by the money and time archetypes."""

from __future__ import annotations

import re

_CENTS_RE = re.compile(r"^(\d+)¢$")
_DOLLARS_RE = re.compile(r"^\$(\d+)\.(\d{2})$")


def format_cents(cents: int) -> str:
    """Format an amount of money.

    Below one dollar the amount is shown in cents (``"37¢"``); at or above
    one dollar it is shown in dollars with two decimals (``"$1.25"``).

    Raises:
        ValueError: If ``cents`` is negative
    """
    if cents < 0:
        raise ValueError(f"Cannot format a negative amount: {cents}")
    if cents < 100:
        return f"{cents}¢"
    return f"${cents // 100}.{cents % 100:02d}"


def parse_cents(text: str) -> int:
    """Parse a string produced by :func:`format_cents` back to cents.

    Raises:
        ValueError: If the text is not a cents or dollar amount
    """
    text = text.strip()
    if match := _CENTS_RE.match(text):
        return int(match.group(1))
    if match := _DOLLARS_RE.match(text):
        return int(match.group(1)) * 100 + int(match.group(2))
    raise ValueError(f"Not a money amount: {text!r}")


def wrap_hour(hour: int) -> int:
    """Map any hour count onto a 12-hour dial (1..12)."""
    return (hour - 1) % 12 + 1


def format_clock(hour: int, minute: int = 0) -> str:
    """Format a 12-hour dial time as ``H:MM``; minutes roll into hours."""
    total = hour * 60 + minute
    return f"{wrap_hour(total // 60)}:{total % 60:02d}"


def format_duration(minutes: int) -> str:
    """Format elapsed minutes as ``H hours and M minutes``.

    Zero parts are omitted (``"2 hours"``, ``"45 minutes"``) but never both;
    a zero duration is ``"0 minutes"``. One hour or minute is singular.
    """
    if minutes < 0:
        raise ValueError(f"Duration cannot be negative: {minutes}")
    hours, rest = divmod(minutes, 60)
    hour_part = f"{hours} hour" if hours == 1 else f"{hours} hours"
    minute_part = f"{rest} minute" if rest == 1 else f"{rest} minutes"
    if hours and rest:
        return f"{hour_part} and {minute_part}"
    if hours:
        return hour_part
    return minute_part
