"""Reminder parsing: task titles and relative dates from free text.

Supported date expressions:
    "... tomorrow"         -> now + 1 day
    "in N day(s)/week(s)"  -> now + N days / now + 7N days

N must be a positive integer so a recovered date is always in the future.
When a natural reminder starts with "in N unit" the task title is
dropped. A trailing " in N unit" only counts when it parses to a date;
otherwise the whole remainder stays the title ("remind me to log in 2
accounts").
"""
from __future__ import annotations
import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

REMINDER_PHRASES = ("remind me to", "add a reminder to")
TOMORROW_SUFFIX = " tomorrow"
RELATIVE_PREFIX = "remind me in"

UNIT_DAYS = {
    'day': 1,
    'days': 1,
    'week': 7,
    'weeks': 7,
}

_TRAILING_RELATIVE_RE = re.compile(r"\s+in\s+([+-]?\d+)\s+(\S+)\s*$", re.IGNORECASE)


@dataclass(frozen=True)
class ParsedReminder:
    phrase: Optional[str]
    title: Optional[str]
    date: Optional[datetime]


def _parse_int(raw: str) -> Optional[int]:
    try:
        return int(raw)
    except ValueError:
        return None


def relative_date(amount: int, unit: str, now: datetime) -> Optional[datetime]:
    """Date ``amount`` units after now, or None for unknown units / non-positive amounts."""
    per_unit = UNIT_DAYS.get(unit.lower())
    if per_unit is None or amount <= 0:
        return None
    return now + timedelta(days=amount * per_unit)


def parse_relative_reminder(text: str, now: Optional[datetime] = None) -> Optional[datetime]:
    """Parse "<integer> <unit>" (text already stripped of "remind me in")."""
    parts = text.split()
    if len(parts) < 2:
        return None
    amount = _parse_int(parts[0])
    if amount is None:
        return None
    return relative_date(amount, parts[1], now or datetime.now())


def strip_relative_prefix(reply: str) -> str:
    """Normalize a follow-up reply like "Remind me in 3 days" to "3 days"."""
    return reply.lower().replace(RELATIVE_PREFIX, "").strip()


def parse_natural_reminder(text: str, now: Optional[datetime] = None) -> ParsedReminder:
    """Extract (title, date) from "remind me to ..." / "add a reminder to ...".

    The remainder after the phrase becomes the title unless a date
    expression is recognized; see the module docstring for the forms.
    """
    now = now or datetime.now()
    lowered = text.lower()
    phrase = None
    idx = -1
    for candidate in REMINDER_PHRASES:
        idx = lowered.find(candidate)
        if idx >= 0:
            phrase = candidate
            break
    if phrase is None:
        return ParsedReminder(phrase=None, title=None, date=None)

    remainder = text[idx + len(phrase):].strip()
    remainder_lower = remainder.lower()

    if remainder_lower.endswith(TOMORROW_SUFFIX):
        title = remainder[:-len(TOMORROW_SUFFIX)].strip()
        return ParsedReminder(phrase, title or None, now + timedelta(days=1))

    if remainder_lower.startswith("in "):
        parts = remainder[3:].split()
        if len(parts) >= 2:
            amount = _parse_int(parts[0])
            if amount is not None:
                return ParsedReminder(phrase, None, relative_date(amount, parts[1], now))

    # trailing form only when it names a real date; "log in 2 accounts" is a title
    m = _TRAILING_RELATIVE_RE.search(remainder)
    if m:
        date = relative_date(int(m.group(1)), m.group(2), now)
        if date is not None:
            return ParsedReminder(phrase, None, date)

    return ParsedReminder(phrase, remainder or None, None)
