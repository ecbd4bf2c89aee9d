"""DeleteSubscription Use Case

Removes a subscription by ID.
"""

import logging
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.subscription_repository import SubscriptionRepository
from .errors import invalid_input, not_found, storage_failure

logger = logging.getLogger(__name__)


class DeleteSubscription:
    """
    Use Case: Delete a subscription

    Deleting an ID that matches no row is reported as SUBSCRIPTION_NOT_FOUND,
    so a second delete of the same ID fails even though storage is unchanged.
    """

    def __init__(self, uow: UnitOfWork, subscription_repo: SubscriptionRepository):
        self.uow = uow
        self.subscription_repo = subscription_repo

    async def execute(self, subscription_id: int) -> Result[int]:
        """
        Args:
            subscription_id: Subscription ID (must be > 0)

        Returns:
            Result[int]: ID of the deleted subscription or error
        """
        if subscription_id <= 0:
            return Return.err(invalid_input("invalid id"))

        try:
            deleted = await self.subscription_repo.delete(subscription_id)
            if not deleted:
                await self.uow.rollback()
                return Return.err(not_found(subscription_id))
            await self.uow.commit()
        except SQLAlchemyError as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete subscription {subscription_id}: {e}")
            return Return.err(storage_failure("Failed to delete subscription", reason=str(e)))

        logger.info(f"Deleted subscription {subscription_id}")
        return Return.ok(subscription_id)
