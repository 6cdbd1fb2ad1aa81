"""Data models for waste collection schedules."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Annotated, Literal, NamedTuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from wastecal.core.exceptions import ScheduleFormatError


class WasteCategory(IntEnum):
    """Waste categories, identified by their column group in the sheet."""

    MIXED = 0
    METAL = 1
    PAPER = 2
    GLASS = 3
    BIO = 4
    BULK = 5
    CHRISTMAS_TREE = 6

    @classmethod
    def from_index(cls, index: int) -> WasteCategory:
        """Map a positional index to a category.

        Raises:
            ScheduleFormatError: If the index is outside the supported 0..6 range.
        """
        try:
            return cls(index)
        except ValueError as exc:
            raise ScheduleFormatError(
                f"Category index {index} is out of range; at most {len(cls)} categories are supported"
            ) from exc


class Weekday(IntEnum):
    """Days of the week, numbered like datetime.date.weekday()."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class LiteralDay(BaseModel):
    """A single day of the month."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["day"] = "day"
    day: int = Field(..., ge=1, le=31, description="Day of month")


class WeekdayAllOccurrences(BaseModel):
    """Every occurrence of a weekday within the month."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["weekdays"] = "weekdays"
    weekday: Weekday


DateSpec = Annotated[Union[LiteralDay, WeekdayAllOccurrences], Field(discriminator="kind")]


class ScheduleRule(BaseModel):
    """One (month, date specification, category) triple from the entries section."""

    model_config = ConfigDict(frozen=True)

    month: int = Field(..., ge=1, le=12, description="Month number")
    date_spec: DateSpec
    category: WasteCategory


class MonthDay(NamedTuple):
    """A (month, day) pair within the schedule year, used by the override table."""

    month: int
    day: int

    @classmethod
    def of(cls, value: datetime.date) -> MonthDay:
        return cls(value.month, value.day)


class SkippedCell(BaseModel):
    """An entry cell that was neither a day number nor a weekday token."""

    model_config = ConfigDict(frozen=True)

    row_number: int = Field(..., description="Zero-based row index in the sheet")
    column: int = Field(..., description="Zero-based column index in the sheet")
    value: str


class CalendarEvent(BaseModel):
    """All-day collection event handed to the calendar writer."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date = Field(..., description="Collection date")
    title: str = Field(..., description="Category display name")
    description: str = Field(..., description="Same text as the title")

    @model_validator(mode="after")
    def _description_matches_title(self) -> CalendarEvent:
        if self.description != self.title:
            raise ValueError("description must equal title")
        return self

    @classmethod
    def for_category(cls, date: datetime.date, name: str) -> CalendarEvent:
        return cls(date=date, title=name, description=name)


@dataclass
class ParsedSchedule:
    """Everything the section parser extracts from one sheet."""

    year: int
    names: dict[WasteCategory, str] = field(default_factory=dict)
    rules: list[ScheduleRule] = field(default_factory=list)
    overrides: dict[MonthDay, MonthDay] = field(default_factory=dict)
    skipped_cells: list[SkippedCell] = field(default_factory=list)
