"""
List Subscriptions Use Case

Retrieves subscriptions matching optional user, service and period filters.
"""
import logging
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Result, Return
from src.app.repositories.subscription_repository import SubscriptionRepository
from src.domain.filters import ListFilter
from .dtos import ListSubscriptionsResponseDTO, SubscriptionResponseDTO
from .errors import storage_failure

logger = logging.getLogger(__name__)


class ListSubscriptions:
    """
    Use case: List subscriptions

    Subscriptions are ordered by ID ascending so that repeated calls with the
    same filter page through the same sequence.
    """

    def __init__(self, subscription_repo: SubscriptionRepository):
        self.subscription_repo = subscription_repo

    async def execute(self, filter: ListFilter) -> Result[ListSubscriptionsResponseDTO]:
        """
        List subscriptions with pagination.

        Args:
            filter: ListFilter; limit/offset are clamped before querying

        Returns:
            Result[ListSubscriptionsResponseDTO]: Page of subscriptions
        """
        normalized = filter.normalize()

        try:
            subscriptions = await self.subscription_repo.list(normalized)
        except SQLAlchemyError as e:
            logger.error(f"Failed to list subscriptions: {e}")
            return Return.err(storage_failure("Failed to list subscriptions", reason=str(e)))

        return Return.ok(
            ListSubscriptionsResponseDTO(
                subscriptions=[SubscriptionResponseDTO.from_entity(s) for s in subscriptions],
                limit=normalized.limit,
                offset=normalized.offset,
            )
        )
