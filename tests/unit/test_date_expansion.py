"""Unit tests for wastecal.calendar.date_expansion."""

import calendar
from datetime import date

import pytest

from wastecal.calendar.date_expansion import (
    expand_rule,
    literal_date,
    nth_weekday_of_month,
    weekday_occurrences,
)
from wastecal.calendar.models import (
    LiteralDay,
    ScheduleRule,
    WasteCategory,
    Weekday,
    WeekdayAllOccurrences,
)
from wastecal.core.exceptions import InvalidScheduleDateError

pytestmark = pytest.mark.unit


def _rule(month, spec):
    return ScheduleRule(month=month, date_spec=spec, category=WasteCategory.MIXED)


class TestLiteralDay:
    """Literal-day rules produce exactly one date."""

    def test_expand_rule_when_literal_day_then_single_date(self):
        assert expand_rule(_rule(3, LiteralDay(day=15)), 2024) == [date(2024, 3, 15)]

    def test_expand_rule_when_leap_day_in_leap_year_then_valid(self):
        assert expand_rule(_rule(2, LiteralDay(day=29)), 2024) == [date(2024, 2, 29)]

    def test_expand_rule_when_leap_day_in_common_year_then_raises(self):
        with pytest.raises(InvalidScheduleDateError):
            expand_rule(_rule(2, LiteralDay(day=29)), 2025)

    def test_literal_date_when_day_31_in_30_day_month_then_raises(self):
        with pytest.raises(InvalidScheduleDateError) as exc_info:
            literal_date(2024, 4, 31)
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestWeekdayOccurrences:
    """Weekday rules produce every occurrence of the weekday in the month."""

    def test_expand_rule_when_mondays_in_april_2024_then_five_dates(self):
        dates = expand_rule(_rule(4, WeekdayAllOccurrences(weekday=Weekday.MONDAY)), 2024)
        assert dates == [date(2024, 4, d) for d in (1, 8, 15, 22, 29)]

    def test_expand_rule_when_fridays_in_february_2024_then_four_dates(self):
        dates = expand_rule(_rule(2, WeekdayAllOccurrences(weekday=Weekday.FRIDAY)), 2024)
        assert dates == [date(2024, 2, d) for d in (2, 9, 16, 23)]

    def test_expand_rule_when_thursdays_in_february_2024_then_includes_leap_day(self):
        dates = expand_rule(_rule(2, WeekdayAllOccurrences(weekday=Weekday.THURSDAY)), 2024)
        assert dates[-1] == date(2024, 2, 29)
        assert len(dates) == 5

    def test_nth_weekday_when_fifth_missing_then_none(self):
        assert nth_weekday_of_month(2024, 2, Weekday.FRIDAY, 5) is None

    def test_nth_weekday_when_first_is_day_one_then_day_one(self):
        assert nth_weekday_of_month(2024, 4, Weekday.MONDAY, 1) == date(2024, 4, 1)

    @pytest.mark.parametrize("year", [2023, 2024, 2025])
    @pytest.mark.parametrize("month", range(1, 13))
    @pytest.mark.parametrize("weekday", list(Weekday))
    def test_weekday_occurrences_match_calendar_count(self, year, month, weekday):
        expected = [
            date(year, month, day)
            for day in range(1, calendar.monthrange(year, month)[1] + 1)
            if date(year, month, day).weekday() == weekday
        ]
        dates = weekday_occurrences(year, month, weekday)

        assert dates == expected
        assert 4 <= len(dates) <= 5
        assert all(d.month == month and d.year == year for d in dates)
