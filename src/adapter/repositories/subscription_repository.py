"""SQLAlchemy Subscription Repository Implementation

Implements subscription persistence using SQLAlchemy async session.
"""

from typing import Optional, List
from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.subscription_repository import SubscriptionRepository
from src.domain.aggregation import total_monthly_cost
from src.domain.filters import ListFilter, TotalFilter
from src.domain.subscription import Subscription, utc_now
from .subscription_predicates import SubscriptionPredicateBuilder


class SqlAlchemySubscriptionRepository(SubscriptionRepository):
    """
    SQLAlchemy implementation of SubscriptionRepository

    Features:
    - Row-level locking via SELECT FOR UPDATE for read-modify-write updates
    - One predicate builder for listing and aggregation
    - Month series crossed in memory, so the same query runs on any backend
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, subscription: Subscription) -> Subscription:
        self.session.add(subscription)
        await self.session.flush()
        await self.session.refresh(subscription)
        return subscription

    async def get_by_id(
        self, subscription_id: int, for_update: bool = False
    ) -> Optional[Subscription]:
        """
        Retrieve subscription by ID with optional row-level locking

        Args:
            subscription_id: Subscription ID
            for_update: If True, locks the row with SELECT FOR UPDATE (held until
                commit or rollback)

        Returns:
            Subscription if found, None otherwise
        """
        statement = select(Subscription).where(Subscription.id == subscription_id)

        if for_update:
            statement = statement.with_for_update()

        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def update(self, subscription: Subscription) -> Subscription:
        subscription.updated_at = utc_now()
        self.session.add(subscription)
        await self.session.flush()
        await self.session.refresh(subscription)
        return subscription

    async def delete(self, subscription_id: int) -> bool:
        statement = delete(Subscription).where(Subscription.id == subscription_id)
        result = await self.session.execute(statement)
        return result.rowcount > 0

    async def list(self, filter: ListFilter) -> List[Subscription]:
        """
        List subscriptions page ordered by ID ascending

        Args:
            filter: Normalized ListFilter (limit and offset already clamped)

        Returns:
            Subscriptions on the requested page
        """
        clauses = (
            SubscriptionPredicateBuilder()
            .with_user(filter.user_id)
            .with_service(filter.service_name)
            .overlapping(filter.from_month, filter.exclusive_end())
            .build()
        )

        statement = (
            select(Subscription)
            .where(*clauses)
            .order_by(Subscription.id)
            .limit(filter.limit)
            .offset(filter.offset)
        )

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def total_cost(self, filter: TotalFilter) -> int:
        """
        Sum of monthly prices for every (subscription, month) pair where the
        subscription is active in a month of [from_month, to_month]

        Candidates are fetched once with the overlap predicate against
        [from_month, exclusive_end) (unbounded above when to_month is 12-9999);
        each then counts once per month of the range it is active in.
        """
        filter.validate_range()

        clauses = (
            SubscriptionPredicateBuilder()
            .with_user(filter.user_id)
            .with_service(filter.service_name)
            .overlapping(filter.from_month, filter.exclusive_end())
            .build()
        )

        statement = select(
            Subscription.price, Subscription.start_date, Subscription.end_date
        ).where(*clauses)

        result = await self.session.execute(statement)
        return total_monthly_cost(result.all(), filter.from_month, filter.to_month)
