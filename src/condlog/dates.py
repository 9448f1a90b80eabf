"""Day-note helpers and the default natural-language date parser."""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from functools import lru_cache
from typing import Optional

from condlog.config import DATE_PLACEHOLDER_PATTERN
from condlog.errors import DateParseError


_UNITS = {
    "minute": timedelta(minutes=1),
    "hour": timedelta(hours=1),
    "day": timedelta(days=1),
    "week": timedelta(weeks=1),
}
_DAY_WORDS = {"today": 0, "yesterday": -1, "tomorrow": 1}

_AGO = re.compile(r"^(\d+|an?|one)\s+(minute|hour|day|week)s?\s+ago$")
_IN = re.compile(r"^in\s+(\d+|an?|one)\s+(minute|hour|day|week)s?$")
_LAST_NEXT = re.compile(r"^(last|next)\s+(minute|hour|day|week)$")
_ORDINAL = re.compile(r"(\d{1,2})(st|nd|rd|th)\b")


@lru_cache(maxsize=32)
def _compiled_placeholder(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


def is_date_placeholder(target: str, pattern: str = DATE_PLACEHOLDER_PATTERN) -> bool:
    """True when ``target`` is the ``{date}`` token standing for any day-note page."""

    return bool(_compiled_placeholder(pattern).search(target))


def to_epoch_millis(moment: datetime) -> int:
    return int(round(moment.timestamp() * 1000))


def day_note_title(day: date) -> str:
    """Title of the day-note page for ``day``, e.g. ``October 19th, 2026``."""

    n = day.day
    if 11 <= n % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{day.strftime('%B')} {n}{suffix}, {day.year}"


def parse_nlp_date(text: str, now: Optional[datetime] = None) -> datetime:
    """Parse a small natural-language date expression.

    Understands ``now``, ``today``, ``yesterday``, ``tomorrow``,
    ``3 days ago``, ``in 2 weeks``, ``last week``, ISO dates and datetimes,
    ``MM/DD/YYYY`` and day-note titles. Day words resolve to midnight.
    """

    if not isinstance(text, str):
        raise DateParseError(f"Date expression must be a string: {text!r}")
    now = now or datetime.now()
    phrase = " ".join(text.strip().lower().split())
    if not phrase:
        raise DateParseError("Date expression is empty.")

    if phrase == "now":
        return now
    if phrase in _DAY_WORDS:
        midnight = datetime.combine(now.date(), datetime.min.time(), tzinfo=now.tzinfo)
        return midnight + timedelta(days=_DAY_WORDS[phrase])

    match = _AGO.match(phrase)
    if match:
        return now - _count(match.group(1)) * _UNITS[match.group(2)]
    match = _IN.match(phrase)
    if match:
        return now + _count(match.group(1)) * _UNITS[match.group(2)]
    match = _LAST_NEXT.match(phrase)
    if match:
        step = _UNITS[match.group(2)]
        return now - step if match.group(1) == "last" else now + step

    absolute = _parse_absolute(text.strip())
    if absolute is None:
        raise DateParseError(f"Could not parse date expression: {text!r}")
    return absolute


def _count(token: str) -> int:
    if token in ("a", "an", "one"):
        return 1
    return int(token)


def _parse_absolute(text: str) -> Optional[datetime]:
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    cleaned = _ORDINAL.sub(r"\1", text)
    for fmt in ("%B %d, %Y", "%B %d %Y", "%b %d, %Y", "%b %d %Y", "%m/%d/%Y"):
        try:
            return datetime.strptime(cleaned, fmt)
        except ValueError:
            continue
    return None
