"""Canonical forms for free-form event text: dates, times and slugs."""

import re
from datetime import date, datetime, timezone
from email.utils import parsedate_to_datetime

from events.domain.errors import (
    EmptySlugError,
    InvalidDateError,
    InvalidHoursError,
    InvalidMinutesError,
    InvalidTimeFormatError,
)

# strptime fallbacks, tried in order after ISO 8601 and RFC 2822.
# Month names are matched in English; %b/%B follow the C locale.
DATE_FORMATS = (
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%B %d, %Y",
    "%B %d %Y",
    "%b %d, %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%A, %B %d, %Y",
    "%a, %b %d, %Y",
)

TIME_PATTERN = re.compile(r"^([0-9]{1,2})(?::([0-9]{2})(?::[0-9]{2})?)?\s*([ap]m)?$")

SLUG_QUOTES = re.compile(r"['\"`‘’“”]")
SLUG_SEPARATORS = re.compile(r"[^a-z0-9]+")


def _parse_datetime(value: str) -> datetime | date | None:
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        pass
    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError):
        pass
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def normalize_date(value: str) -> str:
    """Return ``value`` as an ISO calendar date (``YYYY-MM-DD``).

    Offset-aware timestamps are converted to UTC before the calendar day is
    taken, so ``2025-03-01T23:30:00-05:00`` becomes ``2025-03-02``.

    Raises:
        InvalidDateError: If the value cannot be parsed as a date, or its UTC
            day falls outside years 1-9999.
    """
    parsed = _parse_datetime(value.strip())
    if parsed is None:
        raise InvalidDateError()
    if isinstance(parsed, datetime):
        if parsed.tzinfo is not None:
            try:
                parsed = parsed.astimezone(timezone.utc)
            except OverflowError as exc:
                raise InvalidDateError() from exc
        parsed = parsed.date()
    return parsed.isoformat()


def normalize_time(value: str) -> str:
    """Return ``value`` as a zero-padded 24-hour ``HH:MM`` string.

    Accepts ``H``, ``HH``, ``H:MM``, ``HH:MM`` and ``HH:MM:SS``, each
    optionally followed by ``am``/``pm``. Seconds are discarded.

    Raises:
        InvalidTimeFormatError: If the value has none of the accepted shapes.
        InvalidMinutesError: If minutes fall outside 0-59.
        InvalidHoursError: If hours fall outside 0-23, or 1-12 with am/pm.
    """
    match = TIME_PATTERN.match(value.strip().lower())
    if match is None:
        raise InvalidTimeFormatError()

    hours = int(match.group(1))
    minutes = int(match.group(2)) if match.group(2) else 0
    meridiem = match.group(3)

    if not 0 <= minutes <= 59:
        raise InvalidMinutesError()

    if meridiem is None:
        if not 0 <= hours <= 23:
            raise InvalidHoursError(twelve_hour=False)
    else:
        if not 1 <= hours <= 12:
            raise InvalidHoursError(twelve_hour=True)
        if meridiem == "pm" and hours != 12:
            hours += 12
        elif meridiem == "am" and hours == 12:
            hours = 0

    return f"{hours:02d}:{minutes:02d}"


def slugify(title: str) -> str:
    """Derive a URL-safe lower-case slug from ``title``.

    Raises:
        EmptySlugError: If the title has no ASCII letters or digits.
    """
    slug = SLUG_QUOTES.sub("", title.lower().strip())
    slug = SLUG_SEPARATORS.sub("-", slug).strip("-")
    if not slug:
        raise EmptySlugError()
    return slug
