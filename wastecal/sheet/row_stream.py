"""Row stream over a collection sheet exported as CSV."""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Union

from wastecal.core.exceptions import ScheduleFormatError

logger = logging.getLogger(__name__)


@contextmanager
def open_row_stream(
    path: Union[str, Path], delimiter: str = ",", encoding: str = "utf-8"
) -> Iterator[Iterator[list[str]]]:
    """Open a sheet and yield an iterator over its rows.

    The sheet has no header row and rows may have different lengths. The file
    handle is closed when the context exits, whether or not parsing succeeded.
    Decoding and CSV errors raised while the rows are consumed are reported
    as ScheduleFormatError.

    Args:
        path: Path to the CSV export of the sheet
        delimiter: Cell delimiter
        encoding: Text encoding of the file

    Yields:
        Iterator of rows, each row a list of string cells
    """
    sheet_path = Path(path)
    logger.debug("Opening sheet %s (delimiter=%r, encoding=%s)", sheet_path, delimiter, encoding)
    with sheet_path.open(newline="", encoding=encoding) as fh:
        try:
            yield csv.reader(fh, delimiter=delimiter)
        except UnicodeDecodeError as exc:
            raise ScheduleFormatError(
                f"Sheet {sheet_path} is not valid {encoding} text: {exc.reason}"
            ) from exc
        except csv.Error as exc:
            raise ScheduleFormatError(f"Sheet {sheet_path} is not readable CSV: {exc}") from exc
    logger.debug("Closed sheet %s", sheet_path)
