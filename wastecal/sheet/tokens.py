"""Fixed vocabulary of the collection sheet.

The sheets are published in Polish; the weekday table and the override
marker must match the published spelling exactly (case and diacritics
included), so lookups here are plain dictionary hits with no normalisation.
"""

import re
from typing import Optional

from wastecal.calendar.models import Weekday

WEEKDAY_TOKENS: dict[str, Weekday] = {
    "poniedziałek": Weekday.MONDAY,
    "pon": Weekday.MONDAY,
    "poniedzialek": Weekday.MONDAY,
    "wtorek": Weekday.TUESDAY,
    "wto": Weekday.TUESDAY,
    "środa": Weekday.WEDNESDAY,
    "śro": Weekday.WEDNESDAY,
    "sro": Weekday.WEDNESDAY,
    "czwartek": Weekday.THURSDAY,
    "cz": Weekday.THURSDAY,
    "czw": Weekday.THURSDAY,
    "piątek": Weekday.FRIDAY,
    "pią": Weekday.FRIDAY,
    "pia": Weekday.FRIDAY,
    "pt": Weekday.FRIDAY,
    "sobota": Weekday.SATURDAY,
    "sob": Weekday.SATURDAY,
    "niedziela": Weekday.SUNDAY,
    "niedz": Weekday.SUNDAY,
    "nie": Weekday.SUNDAY,
}

# "dzień" / "za": header of the replacement-dates table ("day" / "moved to")
OVERRIDE_MARKER = ("dzień", "za")

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


def weekday_from_token(token: str) -> Optional[Weekday]:
    """Return the weekday a sheet token names, or None if it names none."""
    return WEEKDAY_TOKENS.get(token)


def parse_unsigned(text: str) -> Optional[int]:
    """Parse an unsigned decimal integer cell.

    Only ASCII digits with an optional leading '+' are accepted; whitespace,
    signs other than '+', and digit separators make the cell non-numeric.
    """
    if _UNSIGNED_RE.fullmatch(text) is None:
        return None
    return int(text)


def is_override_marker(row: list[str]) -> bool:
    """Return True if the row opens the override table."""
    return tuple(cell_at(row, i) for i in range(2)) == OVERRIDE_MARKER


def cell_at(row: list[str], index: int) -> str:
    """Return the cell at index, treating cells past the end of a ragged row as empty."""
    return row[index] if index < len(row) else ""
