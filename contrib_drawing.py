"""
Drawings for the contribution calendar.

The calendar is 7 rows (Sunday..Saturday) by one column per week:

              w0  w1  w2       wn
  Sunday      []  []  []  ...  []
  Monday      []  []  []  ...  []
  ...
  Saturday    []  []  []  ...  []

A drawing is a list of 7 rows of equal length. Each cell is the number
of commits for that day (0 to 15); more commits render darker.
The anchor date is the Sunday of the first column, so cell (row, week)
lands on anchor + 7*week + row days.
"""

import enum
import random
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional, Sequence

ROWS = 7
MIN_INTENSITY = 0
MAX_INTENSITY = 15

# Python weekday(): Mon=0..Sun=6
SUNDAY = 6
SATURDAY = 5

Drawing = Sequence[Sequence[int]]


class PixelArtError(Exception):
    """Base class for errors surfaced to the user."""


class ValidationErrorKind(enum.Enum):
    INVALID_ANCHOR_WEEKDAY = "invalid-anchor-weekday"
    INVALID_END_WEEKDAY = "invalid-end-weekday"
    DATE_RANGE_INVERTED = "date-range-inverted"
    ROW_COUNT_MISMATCH = "row-count-mismatch"
    ROW_LENGTH_MISMATCH = "row-length-mismatch"
    CELL_VALUE_OUT_OF_RANGE = "cell-value-out-of-range"


@dataclass(frozen=True)
class ValidationError:
    kind: ValidationErrorKind
    message: str
    row: Optional[int] = None
    week: Optional[int] = None

    def __str__(self) -> str:
        return self.message


class DrawingError(PixelArtError):
    """Raised by callers that treat a failed validation as fatal."""

    def __init__(self, error: ValidationError):
        super().__init__(error.message)
        self.error = error


# ---------- small helpers ----------

def sunday_on_or_before(d: date) -> date:
    return d - timedelta(days=(d.weekday() + 1) % 7)


def saturday_on_or_after(d: date) -> date:
    return sunday_on_or_before(d) + timedelta(days=6)


def default_anchor(today: date, weeks: int) -> date:
    """Sunday of the first of the last `weeks` columns, ending with this week."""
    return sunday_on_or_before(today) - timedelta(weeks=weeks - 1)


def end_for(drawing: Drawing, anchor: date) -> date:
    """Saturday closing the last week of the drawing."""
    weeks = len(drawing[0]) if drawing else 0
    return anchor + timedelta(days=7 * max(weeks, 1) - 1)


def _is_intensity(cell) -> bool:
    # bool is an int subclass; True/False are not commit counts
    if isinstance(cell, bool) or not isinstance(cell, int):
        return False
    return MIN_INTENSITY <= cell <= MAX_INTENSITY


# ---------- validation & expansion ----------

def validate(drawing: Drawing, anchor_date: date,
             end_date: Optional[date] = None) -> Optional[ValidationError]:
    """
    Check the drawing and its dates. Returns None when everything holds,
    otherwise the first violation found, in this order: anchor weekday,
    end weekday, date order, row count, row lengths, cell values.
    Without an end date the two end checks are skipped.
    """
    if anchor_date.weekday() != SUNDAY:
        return ValidationError(
            ValidationErrorKind.INVALID_ANCHOR_WEEKDAY,
            f"The initial date must be a Sunday, got {anchor_date:%A} {anchor_date}.",
        )
    if end_date is not None:
        if end_date.weekday() != SATURDAY:
            return ValidationError(
                ValidationErrorKind.INVALID_END_WEEKDAY,
                f"The end date must be a Saturday, got {end_date:%A} {end_date}.",
            )
        if not anchor_date < end_date:
            return ValidationError(
                ValidationErrorKind.DATE_RANGE_INVERTED,
                f"The initial date ({anchor_date}) must be before the end date ({end_date}).",
            )

    if len(drawing) != ROWS:
        return ValidationError(
            ValidationErrorKind.ROW_COUNT_MISMATCH,
            f"The drawing must have {ROWS} rows, got {len(drawing)}.",
        )

    width = len(drawing[0])
    for r, row in enumerate(drawing):
        if len(row) != width:
            return ValidationError(
                ValidationErrorKind.ROW_LENGTH_MISMATCH,
                f"Every row must have the same number of cells: "
                f"row 0 has {width}, row {r} has {len(row)}.",
                row=r,
            )

    for r, row in enumerate(drawing):
        for w, cell in enumerate(row):
            if not _is_intensity(cell):
                return ValidationError(
                    ValidationErrorKind.CELL_VALUE_OUT_OF_RANGE,
                    f"The drawing must have values {MIN_INTENSITY} to {MAX_INTENSITY} "
                    f"(inclusive), got {cell!r} at row {r}, week {w}.",
                    row=r,
                    week=w,
                )
    return None


def expand(drawing: Drawing, anchor_date: date) -> List[date]:
    """
    Turn a validated drawing into commit dates, one per unit of intensity.
    Rows are walked outer, weeks inner, so the result is stable for a
    given input. The drawing is assumed valid.
    """
    dates = []
    for r, row in enumerate(drawing):
        for w, value in enumerate(row):
            d = anchor_date + timedelta(days=7 * w + r)
            dates.extend([d] * value)
    return dates


# ---------- drawing sources ----------

def parse_drawing(text: str) -> List[List[int]]:
    """
    Read a drawing from text: one row per non-blank line, one cell per
    character. Hex digits give 0-15 and '.' is 0. The result is not
    validated.
    """
    rows = []
    for lineno, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if not line:
            continue
        row = []
        for ch in line:
            if ch == ".":
                row.append(0)
                continue
            try:
                row.append(int(ch, 16))
            except ValueError:
                raise ValueError(f"Bad cell {ch!r} on line {lineno}") from None
        rows.append(row)
    return rows


# The boat:
#
#   XXX
#    XXX
#      X
#      X
# XXXXXXXXXXX
#  X       X
#   XXXXXXX
BOAT = parse_drawing("""
..444......
...444.....
.....4.....
.....4.....
88888888888
.8.......8.
..8888888..
""")


def random_drawing(weeks: int, high: int = 8, seed: Optional[int] = None) -> List[List[int]]:
    """Every cell a random count in [1, high]. Same seed, same drawing."""
    if weeks < 1:
        raise ValueError("weeks must be at least 1")
    if not 1 <= high <= MAX_INTENSITY:
        raise ValueError(f"high must be between 1 and {MAX_INTENSITY}")
    rng = random.Random(seed)
    return [[rng.randint(1, high) for _ in range(weeks)] for _ in range(ROWS)]
