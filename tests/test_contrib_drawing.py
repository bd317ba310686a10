from collections import Counter
from datetime import date, timedelta

import pytest

from contrib_drawing import (
    BOAT,
    ValidationErrorKind,
    default_anchor,
    end_for,
    expand,
    parse_drawing,
    random_drawing,
    saturday_on_or_after,
    sunday_on_or_before,
    validate,
)

SUNDAY = date(2024, 8, 18)
SATURDAY = date(2024, 8, 24)
WEDNESDAY = date(2024, 8, 21)


def blank(weeks: int = 2) -> list:
    return [[0] * weeks for _ in range(7)]


def test_validate_accepts_valid_drawing() -> None:
    drawing = [[1, 0], [0, 2], [0, 0], [0, 0], [0, 0], [0, 0], [0, 0]]

    assert validate(drawing, SUNDAY, SATURDAY + timedelta(days=7)) is None


def test_validate_accepts_all_zero_drawing() -> None:
    assert validate(blank(), SUNDAY, SATURDAY) is None


def test_validate_without_end_date_skips_end_checks() -> None:
    assert validate(blank(), SUNDAY) is None


def test_validate_rejects_wednesday_anchor() -> None:
    error = validate(blank(), WEDNESDAY, SATURDAY)

    assert error.kind is ValidationErrorKind.INVALID_ANCHOR_WEEKDAY


def test_validate_rejects_end_not_on_saturday() -> None:
    error = validate(blank(), SUNDAY, WEDNESDAY)

    assert error.kind is ValidationErrorKind.INVALID_END_WEEKDAY


def test_validate_rejects_end_before_anchor() -> None:
    error = validate(blank(), SUNDAY, SATURDAY - timedelta(days=7))

    assert error.kind is ValidationErrorKind.DATE_RANGE_INVERTED


def test_validate_rejects_wrong_row_count() -> None:
    error = validate(blank()[:6], SUNDAY, SATURDAY)

    assert error.kind is ValidationErrorKind.ROW_COUNT_MISMATCH


def test_validate_rejects_empty_drawing() -> None:
    error = validate([], SUNDAY)

    assert error.kind is ValidationErrorKind.ROW_COUNT_MISMATCH


def test_validate_rejects_mismatched_row_lengths() -> None:
    drawing = [[1, 2], [1], [1], [1], [1], [1], [1]]

    error = validate(drawing, SUNDAY, SATURDAY)

    assert error.kind is ValidationErrorKind.ROW_LENGTH_MISMATCH
    assert error.row == 1


@pytest.mark.parametrize("value", [0, 15])
def test_validate_accepts_intensity_bounds(value) -> None:
    drawing = blank()
    drawing[3][1] = value

    assert validate(drawing, SUNDAY, SATURDAY) is None


@pytest.mark.parametrize("value", [16, -1, 1.5, True, "3", None])
def test_validate_rejects_out_of_range_cells(value) -> None:
    drawing = blank()
    drawing[6][1] = value

    error = validate(drawing, SUNDAY, SATURDAY)

    assert error.kind is ValidationErrorKind.CELL_VALUE_OUT_OF_RANGE
    assert (error.row, error.week) == (6, 1)


def test_validate_checks_every_cell() -> None:
    drawing = [[1] * 52 for _ in range(7)]
    drawing[6][51] = 99

    error = validate(drawing, SUNDAY)

    assert error.kind is ValidationErrorKind.CELL_VALUE_OUT_OF_RANGE


def test_validate_reports_first_violation_in_order() -> None:
    drawing = [[1, 2], [1]]

    error = validate(drawing, WEDNESDAY, WEDNESDAY)

    assert error.kind is ValidationErrorKind.INVALID_ANCHOR_WEEKDAY


def test_expand_matches_worked_example() -> None:
    drawing = [[1, 0], [0, 2], [0, 0], [0, 0], [0, 0], [0, 0], [0, 0]]

    dates = expand(drawing, SUNDAY)

    d8 = SUNDAY + timedelta(days=8)
    assert dates == [SUNDAY, d8, d8]


def test_expand_all_zero_is_empty() -> None:
    assert expand(blank(), SUNDAY) == []


def test_expand_counts_each_cell() -> None:
    drawing = random_drawing(10, high=15, seed=7)

    dates = expand(drawing, SUNDAY)

    assert len(dates) == sum(map(sum, drawing))
    counts = Counter(dates)
    for r, row in enumerate(drawing):
        for w, value in enumerate(row):
            assert counts[SUNDAY + timedelta(days=7 * w + r)] == value


def test_expand_is_repeatable() -> None:
    assert expand(BOAT, SUNDAY) == expand(BOAT, SUNDAY)


def test_week_helpers() -> None:
    assert sunday_on_or_before(WEDNESDAY) == SUNDAY
    assert sunday_on_or_before(SUNDAY) == SUNDAY
    assert saturday_on_or_after(WEDNESDAY) == SATURDAY
    assert saturday_on_or_after(SATURDAY) == SATURDAY


def test_default_anchor_ends_with_current_week() -> None:
    anchor = default_anchor(WEDNESDAY, 52)

    assert anchor.weekday() == 6
    assert anchor + timedelta(weeks=51) == SUNDAY


def test_end_for_closes_last_week() -> None:
    assert end_for(blank(2), SUNDAY) == SATURDAY + timedelta(days=7)
    assert validate(blank(2), SUNDAY, end_for(blank(2), SUNDAY)) is None


def test_parse_drawing_reads_hex_and_dots() -> None:
    text = "\n1.\n.f\n..\n..\n..\n..\nA0\n"

    assert parse_drawing(text) == [[1, 0], [0, 15], [0, 0], [0, 0], [0, 0], [0, 0], [10, 0]]


def test_parse_drawing_rejects_unknown_characters() -> None:
    with pytest.raises(ValueError, match="line 2"):
        parse_drawing("11\n1x\n")


def test_boat_sample_is_valid() -> None:
    assert validate(BOAT, SUNDAY) is None
    assert len(BOAT[0]) == 11


def test_random_drawing_is_seeded_and_in_range() -> None:
    first = random_drawing(52, seed=3)

    assert first == random_drawing(52, seed=3)
    assert all(1 <= cell <= 8 for row in first for cell in row)
    assert validate(first, SUNDAY) is None


@pytest.mark.parametrize("weeks", [0, -3])
def test_random_drawing_rejects_non_positive_weeks(weeks) -> None:
    with pytest.raises(ValueError, match="weeks must be at least 1"):
        random_drawing(weeks)
