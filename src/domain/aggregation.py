"""Total monthly cost over an inclusive range of months"""

from datetime import date
from typing import Iterable, Optional, Protocol
from src.domain.month import exclusive_month_end, month_index, month_start
from src.domain.overlap import intersects


class PricedPeriod(Protocol):
    price: int
    start_date: date
    end_date: Optional[date]


def is_active_in(period: PricedPeriod, month: date) -> bool:
    """True when the subscription is billed for ``month``"""
    return intersects(period.start_date, period.end_date, month, exclusive_month_end(month))


def active_month_count(period: PricedPeriod, from_month: date, to_month: date) -> int:
    """
    Number of months in [from_month, to_month] the subscription is billed for

    Clamps the subscription's [start_date, end_date] to the range and counts
    the months left; an open end_date runs through to_month.
    """
    first = max(month_start(period.start_date), month_start(from_month))
    last = month_start(to_month)
    if period.end_date is not None:
        last = min(last, month_start(period.end_date))
    return max(0, month_index(last) - month_index(first) + 1)


def total_monthly_cost(periods: Iterable[PricedPeriod], from_month: date, to_month: date) -> int:
    """
    Sum of monthly charges incurred between from_month and to_month inclusive

    A subscription active in N of the requested months contributes its price
    N times. Returns 0 when nothing is active or the range is empty.
    """
    return sum(
        period.price * active_month_count(period, from_month, to_month) for period in periods
    )
