"""Interval intersection at month granularity

A subscription occupies ``[start_date, end_date]`` by month, with a missing
end date meaning it never ends. A requested window is half-open:
``[window_start, window_end)``. Either window bound may be None (unbounded).
"""

from datetime import date
from typing import Optional


def intersects(
    start_date: date,
    end_date: Optional[date],
    window_start: Optional[date],
    window_end: Optional[date],
) -> bool:
    if window_start is not None and end_date is not None and end_date < window_start:
        return False
    if window_end is not None and not start_date < window_end:
        return False
    return True
