"""Conversion pipeline for wastecal.

Runs the stages strictly in order, each consuming the previous stage's output:

    row stream -> section parser -> date expansion + override resolution
               -> event emission -> ICS rendering -> file write

The calendar is rendered fully in memory before the output file is opened, so
a fatal error at any stage leaves no partial file behind.

Usage:
    result = convert_schedule("harmonogram.csv", "output.ics")
    print(result.event_count)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from wastecal.calendar.event_emitter import emit_events
from wastecal.calendar.ics_writer import render_calendar, write_calendar
from wastecal.calendar.models import CalendarEvent, ParsedSchedule, SkippedCell
from wastecal.calendar.override_resolver import OverrideResolver
from wastecal.core.config_loader import Config
from wastecal.sheet.row_stream import open_row_stream
from wastecal.sheet.section_parser import parse_schedule

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Outcome of a successful conversion."""

    year: int
    events: list[CalendarEvent] = field(default_factory=list)
    skipped_cells: list[SkippedCell] = field(default_factory=list)
    output_path: Optional[Path] = None

    @property
    def event_count(self) -> int:
        return len(self.events)


def events_from_schedule(schedule: ParsedSchedule) -> list[CalendarEvent]:
    """Expand, resolve and name every rule of a parsed schedule."""
    resolver = OverrideResolver(schedule.year, schedule.overrides)
    return emit_events(schedule.rules, schedule.names, resolver)


def build_events(rows: Iterable[list[str]]) -> ConversionResult:
    """Run the in-memory part of the pipeline over already-read rows."""
    schedule = parse_schedule(rows)
    events = events_from_schedule(schedule)
    return ConversionResult(
        year=schedule.year,
        events=events,
        skipped_cells=schedule.skipped_cells,
    )


def convert_schedule(
    input_path: Union[str, Path],
    output_path: Union[str, Path, None] = None,
    config: Optional[Config] = None,
) -> ConversionResult:
    """Convert a collection sheet into an ICS file.

    Args:
        input_path: CSV export of the collection sheet
        output_path: Destination ICS path (defaults to config.default_output_path)
        config: Optional configuration; defaults are used when omitted

    Returns:
        ConversionResult with the emitted events and the written path

    Raises:
        ScheduleError: On any fatal sheet problem; nothing is written in that case.
    """
    cfg = config or Config()
    destination = Path(output_path or cfg.default_output_path)

    with open_row_stream(input_path, delimiter=cfg.delimiter, encoding=cfg.encoding) as rows:
        schedule = parse_schedule(rows)

    events = events_from_schedule(schedule)
    payload = render_calendar(events, prodid=cfg.prodid, calendar_name=cfg.calendar_name)
    written = write_calendar(destination, payload)

    if schedule.skipped_cells:
        logger.warning(
            "%d cells were not understood and produced no events", len(schedule.skipped_cells)
        )

    return ConversionResult(
        year=schedule.year,
        events=events,
        skipped_cells=schedule.skipped_cells,
        output_path=written,
    )
