"""Section parser for waste collection sheets.

A sheet is one undifferentiated stream of rows holding four sections in a
fixed order:

    year row        ,2024
    names row       label,Mixed,,Metal,...
    entries         month,cell,cell,cell,cell,...   (ended by an empty first cell)
    ...anything...
    override marker dzień,za
    overrides       day/month,day/month              (ended by an empty first cell)

The parser walks the stream once with an explicit state cursor. Each row is
handled by the method registered for the current state, and terminator or
marker rows advance the cursor. No row is ever re-read.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Iterable
from enum import Enum
from typing import Callable, Optional

from pydantic import ValidationError

from wastecal.calendar.models import (
    DateSpec,
    LiteralDay,
    MonthDay,
    ParsedSchedule,
    ScheduleRule,
    SkippedCell,
    WasteCategory,
    WeekdayAllOccurrences,
)
from wastecal.core.exceptions import (
    EmptyInputError,
    InvalidScheduleDateError,
    ScheduleFormatError,
)
from wastecal.sheet.tokens import (
    cell_at,
    is_override_marker,
    parse_unsigned,
    weekday_from_token,
)

logger = logging.getLogger(__name__)

CELLS_PER_CATEGORY = 3


class ParserState(str, Enum):
    """Position of the parser within the sheet."""

    AWAIT_YEAR = "await_year"
    AWAIT_NAMES = "await_names"
    AWAIT_ENTRIES = "await_entries"
    AWAIT_OVERRIDE_MARKER = "await_override_marker"
    AWAIT_OVERRIDES = "await_overrides"
    DONE = "done"


def parse_date_spec(cell: str) -> Optional[DateSpec]:
    """Interpret an entry cell as a day of month or a weekday token.

    Returns:
        LiteralDay for numeric cells, WeekdayAllOccurrences for weekday tokens,
        None when the cell is neither.

    Raises:
        InvalidScheduleDateError: If the cell is numeric but no month has that day.
    """
    day = parse_unsigned(cell)
    if day is not None:
        try:
            return LiteralDay(day=day)
        except ValidationError as exc:
            raise InvalidScheduleDateError(f"Day {day} does not exist in any month") from exc

    weekday = weekday_from_token(cell)
    if weekday is not None:
        return WeekdayAllOccurrences(weekday=weekday)
    return None


def parse_month_day(text: str) -> MonthDay:
    """Parse a "day/month" override cell.

    Raises:
        ScheduleFormatError: If the cell does not start with two '/'-separated integers.
    """
    parts = text.split("/")
    # trailing parts (e.g. a year in "24/12/2024") are ignored
    if len(parts) < 2:
        raise ScheduleFormatError(f"Override date {text!r} is not in day/month form")
    day, month = (parse_unsigned(part) for part in parts[:2])
    if day is None or month is None:
        raise ScheduleFormatError(f"Override date {text!r} is not in day/month form")
    return MonthDay(month=month, day=day)


class SectionParser:
    """Single-pass state machine turning sheet rows into a ParsedSchedule.

    A parser instance is good for one sheet. Use parse_schedule() for the
    common case; feed()/finish() are exposed so tests can drive the machine
    row by row and inspect the state in between.
    """

    def __init__(self) -> None:
        self.state = ParserState.AWAIT_YEAR
        self._row_number = -1
        self._year: Optional[int] = None
        self._names: dict[WasteCategory, str] = {}
        self._rules: list[ScheduleRule] = []
        self._overrides: dict[MonthDay, MonthDay] = {}
        self._skipped: list[SkippedCell] = []
        self._handlers: dict[ParserState, Callable[[list[str]], None]] = {
            ParserState.AWAIT_YEAR: self._consume_year,
            ParserState.AWAIT_NAMES: self._consume_names,
            ParserState.AWAIT_ENTRIES: self._consume_entry,
            ParserState.AWAIT_OVERRIDE_MARKER: self._consume_until_marker,
            ParserState.AWAIT_OVERRIDES: self._consume_override,
        }

    def parse(self, rows: Iterable[list[str]]) -> ParsedSchedule:
        """Consume rows until the override table ends or the stream runs out."""
        for row in rows:
            self.feed(row)
            if self.state is ParserState.DONE:
                break
        return self.finish()

    def feed(self, row: list[str]) -> None:
        """Process a single row in the current state."""
        if self.state is ParserState.DONE:
            raise RuntimeError("Parser already finished")
        self._row_number += 1
        self._handlers[self.state](row)

    def finish(self) -> ParsedSchedule:
        """Close the pass and return the collected sections.

        Raises:
            EmptyInputError: If the stream ended before the year or names row.
        """
        if self.state is ParserState.AWAIT_YEAR:
            raise EmptyInputError("Sheet is empty; expected the year row")
        if self.state is ParserState.AWAIT_NAMES:
            raise EmptyInputError("Sheet ended before the category names row")
        if self.state is ParserState.AWAIT_OVERRIDE_MARKER:
            logger.info("No override table found; dates are used as expanded")
        year = self._year
        if year is None:
            raise EmptyInputError("Sheet ended before the year row was read")

        return ParsedSchedule(
            year=year,
            names=dict(self._names),
            rules=list(self._rules),
            overrides=dict(self._overrides),
            skipped_cells=list(self._skipped),
        )

    def _transition(self, new_state: ParserState) -> None:
        logger.debug(
            "Row %d: %s -> %s", self._row_number, self.state.value, new_state.value
        )
        self.state = new_state

    def _consume_year(self, row: list[str]) -> None:
        raw = cell_at(row, 1)
        try:
            self._year = int(raw)
        except ValueError as exc:
            raise ScheduleFormatError(
                f"Row {self._row_number}: year cell {raw!r} is not an integer"
            ) from exc
        if not datetime.MINYEAR <= self._year <= datetime.MAXYEAR:
            raise ScheduleFormatError(
                f"Row {self._row_number}: year {self._year} is outside "
                f"{datetime.MINYEAR}..{datetime.MAXYEAR}"
            )
        logger.info("Schedule year: %d", self._year)
        self._transition(ParserState.AWAIT_NAMES)

    def _consume_names(self, row: list[str]) -> None:
        # first cell is the row label
        for name in row[1:]:
            if not name:
                continue
            category = WasteCategory.from_index(len(self._names))
            self._names[category] = name
        logger.info("Parsed %d category names", len(self._names))
        self._transition(ParserState.AWAIT_ENTRIES)

    def _consume_entry(self, row: list[str]) -> None:
        month_cell = cell_at(row, 0)
        if not month_cell:
            logger.info(
                "Parsed %d schedule rules (%d cells skipped)",
                len(self._rules),
                len(self._skipped),
            )
            self._transition(ParserState.AWAIT_OVERRIDE_MARKER)
            return

        month = parse_unsigned(month_cell)
        if month is None or not 1 <= month <= 12:
            raise ScheduleFormatError(
                f"Row {self._row_number}: month cell {month_cell!r} is not a month number"
            )

        for position, cell in enumerate(row[1:]):
            if not cell:
                continue
            category = WasteCategory.from_index(position // CELLS_PER_CATEGORY)
            date_spec = parse_date_spec(cell)
            if date_spec is None:
                logger.warning(
                    "Row %d column %d: unexpected data %r, skipping",
                    self._row_number,
                    position + 1,
                    cell,
                )
                self._skipped.append(
                    SkippedCell(row_number=self._row_number, column=position + 1, value=cell)
                )
                continue
            self._rules.append(ScheduleRule(month=month, date_spec=date_spec, category=category))

    def _consume_until_marker(self, row: list[str]) -> None:
        if is_override_marker(row):
            self._transition(ParserState.AWAIT_OVERRIDES)

    def _consume_override(self, row: list[str]) -> None:
        source = cell_at(row, 0)
        if not source:
            logger.info("Parsed %d date overrides", len(self._overrides))
            self._transition(ParserState.DONE)
            return

        target = cell_at(row, 1)
        if not target:
            raise ScheduleFormatError(
                f"Row {self._row_number}: override for {source!r} has no replacement date"
            )

        key = parse_month_day(source)
        value = parse_month_day(target)
        if key in self._overrides:
            logger.debug(
                "Row %d: override for %s replaces earlier entry %s",
                self._row_number,
                key,
                self._overrides[key],
            )
        self._overrides[key] = value


def parse_schedule(rows: Iterable[list[str]]) -> ParsedSchedule:
    """Parse a whole sheet in one pass."""
    return SectionParser().parse(rows)
