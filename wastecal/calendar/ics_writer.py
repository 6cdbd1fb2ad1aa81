"""ICS serialization of collection events."""

from __future__ import annotations

import datetime
import logging
import uuid
from collections.abc import Sequence
from pathlib import Path
from typing import Optional, Union

from icalendar import Calendar, Event as ICalEvent

from wastecal.calendar.models import CalendarEvent
from wastecal.core.config_loader import DEFAULT_PRODID

logger = logging.getLogger(__name__)

UID_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_DNS, "wastecal.local")


def event_uid(sequence: int, event: CalendarEvent) -> str:
    """Deterministic UID so re-running on the same sheet produces the same calendar."""
    return str(uuid.uuid5(UID_NAMESPACE, f"{sequence}:{event.date.isoformat()}:{event.title}"))


def build_ical_event(
    sequence: int, event: CalendarEvent, stamp: datetime.datetime
) -> ICalEvent:
    """Build an all-day VEVENT for a collection event."""
    vevent = ICalEvent()
    vevent.add("uid", event_uid(sequence, event))
    vevent.add("dtstamp", stamp)
    vevent.add("dtstart", event.date)
    vevent.add("dtend", event.date + datetime.timedelta(days=1))
    vevent.add("summary", event.title)
    vevent.add("description", event.description)
    return vevent


def build_calendar(
    events: Sequence[CalendarEvent],
    prodid: str = DEFAULT_PRODID,
    calendar_name: Optional[str] = None,
    stamp: Optional[datetime.datetime] = None,
) -> Calendar:
    """Build an icalendar.Calendar holding one VEVENT per event, in order."""
    if stamp is None:
        stamp = datetime.datetime.now(datetime.timezone.utc)

    calendar = Calendar()
    calendar.add("prodid", prodid)
    calendar.add("version", "2.0")
    if calendar_name:
        calendar.add("x-wr-calname", calendar_name)

    for sequence, event in enumerate(events):
        calendar.add_component(build_ical_event(sequence, event, stamp))
    return calendar


def render_calendar(
    events: Sequence[CalendarEvent],
    prodid: str = DEFAULT_PRODID,
    calendar_name: Optional[str] = None,
) -> bytes:
    """Serialize events to ICS bytes."""
    return build_calendar(events, prodid=prodid, calendar_name=calendar_name).to_ical()


def write_calendar(path: Union[str, Path], payload: bytes) -> Path:
    """Write an already rendered calendar to disk in a single call."""
    output = Path(path)
    output.write_bytes(payload)
    logger.info("Wrote calendar to %s (%d bytes)", output, len(payload))
    return output
