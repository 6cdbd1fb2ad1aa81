"""Event emission: pairs resolved dates with category names."""

import logging
from collections.abc import Iterable, Mapping

from wastecal.calendar.date_expansion import expand_rule
from wastecal.calendar.models import CalendarEvent, ScheduleRule, WasteCategory
from wastecal.calendar.override_resolver import OverrideResolver
from wastecal.core.exceptions import MissingCategoryNameError

logger = logging.getLogger(__name__)


def category_name(names: Mapping[WasteCategory, str], category: WasteCategory) -> str:
    """Return the display name of a category.

    Raises:
        MissingCategoryNameError: If the names row declared no name for the category.
    """
    try:
        return names[category]
    except KeyError as exc:
        raise MissingCategoryNameError(
            f"No display name for category {category.name} (column group {int(category)})"
        ) from exc


def emit_events(
    rules: Iterable[ScheduleRule],
    names: Mapping[WasteCategory, str],
    resolver: OverrideResolver,
) -> list[CalendarEvent]:
    """Build calendar events for every rule, in rule order.

    Dates from a weekday rule are emitted in ascending order before overrides
    are applied. Identical events are kept; nothing is deduplicated.
    """
    events: list[CalendarEvent] = []
    moved = 0
    for rule in rules:
        name = category_name(names, rule.category)
        for expanded in expand_rule(rule, resolver.year):
            effective = resolver.resolve(expanded)
            if effective != expanded:
                moved += 1
            events.append(CalendarEvent.for_category(effective, name))

    logger.info("Emitted %d events (%d moved by overrides)", len(events), moved)
    return events
