"""Date helpers for stay ranges.

A stay runs from check-in (inclusive) to check-out (exclusive); the
nights of a stay are the dates in that half-open range.
"""

import datetime as dt


def parse_iso_date(value: str) -> dt.date:
    """Parse an ISO-8601 date or datetime string into a date.

    Any time-of-day component is dropped.

    Raises:
        ValueError: If the string is not valid ISO-8601.
    """
    return dt.datetime.fromisoformat(value).date()


def nights_between(check_in: dt.date, check_out: dt.date) -> int:
    """Number of nights between check-in and check-out."""
    return (check_out - check_in).days


def stay_dates(check_in: dt.date, check_out: dt.date) -> list[dt.date]:
    """Generate list of nights in range (end exclusive)."""
    return [
        check_in + dt.timedelta(days=i)
        for i in range(nights_between(check_in, check_out))
    ]


def months_spanned(check_in: dt.date, check_out: dt.date) -> list[tuple[int, int]]:
    """Distinct (year, month) pairs covered by the nights of a stay.

    Check-out itself is not a night, so a stay ending on the 1st does not
    span that month.

    Returns:
        Pairs in chronological order.
    """
    months: list[tuple[int, int]] = []
    for night in stay_dates(check_in, check_out):
        key = (night.year, night.month)
        if not months or months[-1] != key:
            months.append(key)
    return months
