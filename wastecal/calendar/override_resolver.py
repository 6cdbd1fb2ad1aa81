"""Override resolution: moves expanded dates according to the replacement table."""

import datetime
import logging
from collections.abc import Mapping

from wastecal.calendar.date_expansion import literal_date
from wastecal.calendar.models import MonthDay

logger = logging.getLogger(__name__)


class OverrideResolver:
    """Single-step lookup of expanded dates in the override table.

    Overrides are not chained: if the target of one override is itself a key
    of the table, it is used as is. Targets are only checked against the
    calendar when they are resolved.
    """

    def __init__(self, year: int, overrides: Mapping[MonthDay, MonthDay]) -> None:
        self.year = year
        self._overrides = dict(overrides)

    def lookup(self, key: MonthDay) -> MonthDay:
        """Return the replacement for key, or key itself when there is none."""
        return self._overrides.get(key, key)

    def resolve(self, date: datetime.date) -> datetime.date:
        """Return the effective date for an expanded date.

        Raises:
            InvalidScheduleDateError: If the replacement is not a valid date in the year.
        """
        key = MonthDay.of(date)
        target = self.lookup(key)
        if target == key:
            return date
        logger.debug("Moving %s to %02d-%02d", date.isoformat(), target.month, target.day)
        return literal_date(self.year, target.month, target.day)
