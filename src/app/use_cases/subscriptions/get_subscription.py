"""Get Subscription Use Case

Retrieves a single subscription by ID.
"""

import logging
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Result, Return
from src.app.repositories.subscription_repository import SubscriptionRepository
from .dtos import SubscriptionResponseDTO
from .errors import invalid_input, not_found, storage_failure

logger = logging.getLogger(__name__)


class GetSubscription:
    """
    Get Subscription Use Case

    Read-only. Distinguishes "confirmed absent" (SUBSCRIPTION_NOT_FOUND) from
    "could not tell" (STORAGE_FAILURE).
    """

    def __init__(self, subscription_repo: SubscriptionRepository):
        self.subscription_repo = subscription_repo

    async def execute(self, subscription_id: int) -> Result[SubscriptionResponseDTO]:
        """
        Args:
            subscription_id: Subscription ID (must be > 0)

        Errors:
            INVALID_INPUT: subscription_id <= 0
            SUBSCRIPTION_NOT_FOUND: No subscription with this ID
            STORAGE_FAILURE: The read failed
        """
        if subscription_id <= 0:
            return Return.err(invalid_input("invalid id"))

        try:
            subscription = await self.subscription_repo.get_by_id(subscription_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to load subscription {subscription_id}: {e}")
            return Return.err(storage_failure("Failed to load subscription", reason=str(e)))

        if not subscription:
            return Return.err(not_found(subscription_id))

        return Return.ok(SubscriptionResponseDTO.from_entity(subscription))
