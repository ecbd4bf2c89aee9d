"""Month arithmetic

All subscription dates live at month granularity. A month is represented by
its first day (``date(year, month, 1)``) read as the UTC calendar month.
"""

import re
from datetime import MAXYEAR, date, datetime, timezone
from typing import List, Optional, Union
from src.domain.exceptions import InvalidMonthFormat

MONTH_TOKEN_FORMAT = "MM-YYYY"

_MONTH_TOKEN_RE = re.compile(r"([0-9]{2})-([0-9]{4})")

DateLike = Union[date, datetime]


def month_start(value: DateLike) -> date:
    """
    Normalize a date or datetime to the first day of its month

    Timezone-aware datetimes are converted to UTC first; naive datetimes
    are taken as UTC.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return date(value.year, value.month, 1)
    return value.replace(day=1)


def next_month_start(value: DateLike) -> date:
    """
    First day of the following month

    Raises:
        ValueError: value is in December of MAXYEAR (no later month exists)
    """
    current = month_start(value)
    if current.month == 12:
        return date(current.year + 1, 1, 1)
    return date(current.year, current.month + 1, 1)


def parse_month_token(token: str) -> date:
    """
    Parse an ``MM-YYYY`` token into its month start

    Raises:
        InvalidMonthFormat: token has another shape, month is not 01..12
            or year is 0000
    """
    if not isinstance(token, str):
        raise InvalidMonthFormat(repr(token))

    match = _MONTH_TOKEN_RE.fullmatch(token)
    if not match:
        raise InvalidMonthFormat(token)

    month, year = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12 or year < 1:
        raise InvalidMonthFormat(token)

    return date(year, month, 1)


def format_month_token(value: DateLike) -> str:
    start = month_start(value)
    return f"{start.month:02d}-{start.year:04d}"


def month_series(first: DateLike, last: DateLike) -> List[date]:
    """Every month start from ``first`` through ``last``, both inclusive"""
    months = []
    current = month_start(first)
    end = month_start(last)
    while current <= end:
        months.append(current)
        if current == end:
            break
        current = next_month_start(current)
    return months


def exclusive_month_end(value: DateLike) -> Optional[date]:
    """
    Exclusive upper bound for an inclusive month ending at ``value``

    Returns None (unbounded) for December of MAXYEAR, which has no next month.
    """
    current = month_start(value)
    if current.year == MAXYEAR and current.month == 12:
        return None
    return next_month_start(current)


def month_index(value: DateLike) -> int:
    """Absolute month number, ``year * 12 + month - 1``; consecutive months differ by one"""
    current = month_start(value)
    return current.year * 12 + current.month - 1
