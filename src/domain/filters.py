"""Query descriptors for listing and aggregating subscriptions

Both filters take an inclusive-by-month range: ``to_month`` covers its whole
month. Storage code turns it into an exclusive upper bound with
``exclusive_month_end`` so boundary arithmetic never needs inclusive special cases.
"""

from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict
from src.domain.exceptions import InvalidDateRange
from src.domain.month import exclusive_month_end, month_start

DEFAULT_LIST_LIMIT = 50
MAX_LIST_LIMIT = 200


class ListFilter(BaseModel):
    """
    Listing filter

    All fields are optional. A missing month bound leaves that side of the
    window unbounded.
    """

    model_config = ConfigDict(frozen=True)

    user_id: Optional[str] = None
    service_name: Optional[str] = None
    from_month: Optional[date] = None
    to_month: Optional[date] = None
    limit: Optional[int] = None
    offset: Optional[int] = None

    def normalize(self) -> "ListFilter":
        """
        Return a copy with paging clamped and month bounds at month start

        limit: [1, MAX_LIST_LIMIT], DEFAULT_LIST_LIMIT when absent or below 1
        offset: >= 0, 0 when absent
        """
        limit = self.limit
        if limit is None or limit < 1:
            limit = DEFAULT_LIST_LIMIT
        limit = min(limit, MAX_LIST_LIMIT)

        offset = self.offset if self.offset is not None and self.offset > 0 else 0

        return self.model_copy(
            update={
                "limit": limit,
                "offset": offset,
                "from_month": month_start(self.from_month) if self.from_month else None,
                "to_month": month_start(self.to_month) if self.to_month else None,
            }
        )

    def exclusive_end(self) -> Optional[date]:
        if self.to_month is None:
            return None
        return exclusive_month_end(self.to_month)


class TotalFilter(BaseModel):
    """Aggregation filter with a mandatory inclusive month range"""

    model_config = ConfigDict(frozen=True)

    from_month: date
    to_month: date
    user_id: Optional[str] = None
    service_name: Optional[str] = None

    def validate_range(self) -> None:
        """
        Raises:
            InvalidDateRange: to_month precedes from_month
        """
        if month_start(self.to_month) < month_start(self.from_month):
            raise InvalidDateRange()

    def exclusive_end(self) -> Optional[date]:
        """next month start after to_month; None when to_month is the last representable month"""
        return exclusive_month_end(self.to_month)
