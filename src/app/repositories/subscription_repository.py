"""Subscription Repository Interface

Defines the contract for subscription persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.filters import ListFilter, TotalFilter
from src.domain.subscription import Subscription


class SubscriptionRepository(ABC):
    """
    Repository interface for Subscription persistence

    Writes are flushed but not committed; the caller commits through its
    UnitOfWork. Database errors propagate as SQLAlchemyError.
    """

    @abstractmethod
    async def create(self, subscription: Subscription) -> Subscription:
        """
        Create a new subscription

        Args:
            subscription: Subscription entity to persist

        Returns:
            Created Subscription with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(
        self, subscription_id: int, for_update: bool = False
    ) -> Optional[Subscription]:
        """
        Retrieve subscription by ID

        Args:
            subscription_id: Subscription ID
            for_update: If True, locks the row until the transaction ends

        Returns:
            Subscription if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, subscription: Subscription) -> Subscription:
        """
        Replace every mutable column of an existing subscription

        Args:
            subscription: Subscription entity with merged values

        Returns:
            Updated Subscription
        """
        pass

    @abstractmethod
    async def delete(self, subscription_id: int) -> bool:
        """
        Delete subscription by ID

        Returns:
            True if a row was deleted, False if none matched
        """
        pass

    @abstractmethod
    async def list(self, filter: ListFilter) -> List[Subscription]:
        """
        List subscriptions matching a normalized filter, ordered by ID

        Applies user/service equality and the period overlap with
        [from_month, filter.exclusive_end()).
        """
        pass

    @abstractmethod
    async def total_cost(self, filter: TotalFilter) -> int:
        """
        Total monthly charges of matching subscriptions over an inclusive
        month range

        Raises:
            InvalidDateRange: to_month precedes from_month
        """
        pass
