"""WHERE-clause builder shared by subscription listing and aggregation

Each optional filter contributes a bound SQLAlchemy expression; values are
never interpolated into SQL text.
"""

from datetime import date
from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.sql.elements import ColumnElement
from src.domain.subscription import Subscription


class SubscriptionPredicateBuilder:
    """
    Accumulates predicates over the subscriptions table

    Usage:
        clauses = (
            SubscriptionPredicateBuilder()
            .with_user(filter.user_id)
            .with_service(filter.service_name)
            .overlapping(filter.from_month, filter.exclusive_end())
            .build()
        )
        statement = select(Subscription).where(*clauses)
    """

    def __init__(self):
        self._clauses: List[ColumnElement] = []

    def with_user(self, user_id: Optional[str]) -> "SubscriptionPredicateBuilder":
        if user_id:
            self._clauses.append(Subscription.user_id == user_id)
        return self

    def with_service(self, service_name: Optional[str]) -> "SubscriptionPredicateBuilder":
        if service_name:
            self._clauses.append(Subscription.service_name == service_name)
        return self

    def overlapping(
        self, window_start: Optional[date], window_end: Optional[date]
    ) -> "SubscriptionPredicateBuilder":
        """
        Subscription period intersects [window_start, window_end)

        Mirrors src.domain.overlap.intersects; a missing end_date never ends.
        """
        if window_start is not None:
            self._clauses.append(
                or_(Subscription.end_date.is_(None), Subscription.end_date >= window_start)
            )
        if window_end is not None:
            self._clauses.append(Subscription.start_date < window_end)
        return self

    def build(self) -> List[ColumnElement]:
        return list(self._clauses)
