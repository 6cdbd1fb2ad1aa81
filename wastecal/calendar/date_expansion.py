"""Date expansion: schedule rules to concrete dates in the schedule year."""

import datetime
import logging

from dateutil.relativedelta import relativedelta, weekday as relative_weekday

from wastecal.calendar.models import LiteralDay, ScheduleRule, Weekday, WeekdayAllOccurrences
from wastecal.core.exceptions import InvalidScheduleDateError

logger = logging.getLogger(__name__)

MAX_WEEKDAY_OCCURRENCES = 5


def nth_weekday_of_month(year: int, month: int, weekday: Weekday, n: int) -> datetime.date | None:
    """Return the n-th (1-based) occurrence of weekday in the month, or None if it has no such day."""
    first = datetime.date(year, month, 1)
    candidate = first + relativedelta(day=1, weekday=relative_weekday(int(weekday), n))
    if candidate.month != month:
        return None
    return candidate


def weekday_occurrences(year: int, month: int, weekday: Weekday) -> list[datetime.date]:
    """Return every date in the month falling on weekday, ascending."""
    occurrences = []
    for n in range(1, MAX_WEEKDAY_OCCURRENCES + 1):
        candidate = nth_weekday_of_month(year, month, weekday, n)
        if candidate is not None:
            occurrences.append(candidate)
    return occurrences


def literal_date(year: int, month: int, day: int) -> datetime.date:
    """Build a concrete date, failing the run if the month has no such day.

    Raises:
        InvalidScheduleDateError: If (year, month, day) is not a calendar date.
    """
    try:
        return datetime.date(year, month, day)
    except ValueError as exc:
        raise InvalidScheduleDateError(f"{year}-{month:02d}-{day:02d} is not a valid date") from exc


def expand_rule(rule: ScheduleRule, year: int) -> list[datetime.date]:
    """Expand one rule into its dates for the given year, in ascending order."""
    spec = rule.date_spec
    if isinstance(spec, LiteralDay):
        return [literal_date(year, rule.month, spec.day)]
    if isinstance(spec, WeekdayAllOccurrences):
        dates = weekday_occurrences(year, rule.month, spec.weekday)
        logger.debug(
            "Expanded %s in %d-%02d to %d dates", spec.weekday.name, year, rule.month, len(dates)
        )
        return dates
    raise TypeError(f"Unsupported date specification: {spec!r}")
