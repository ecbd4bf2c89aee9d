"""UpdateSubscription Use Case

Partially updates a subscription with read-modify-write under a row lock.
"""

import logging
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.subscription_repository import SubscriptionRepository
from src.domain.exceptions import InvalidMonthFormat
from src.domain.month import parse_month_token
from src.domain.subscription import MAX_PRICE
from .dtos import UpdateSubscriptionCommandDTO, SubscriptionResponseDTO
from .errors import invalid_input, not_found, storage_failure

logger = logging.getLogger(__name__)


class UpdateSubscription:
    """
    Use Case: Partially update a subscription

    Business Rules:
    1. Each provided field replaces the stored one; omitted fields are kept
    2. end_date follows its tri-state: keep, clear or set
    3. Field-level checks run before any storage access
    4. end_date >= start_date is checked on the merged row, not the delta
    5. Row is locked (SELECT FOR UPDATE) from read to commit, so concurrent
       updates of one subscription serialize instead of losing writes

    Flow:
    1. Validate provided fields
    2. Load subscription with lock
    3. Merge and re-check date range
    4. Write whole row
    5. Commit
    """

    def __init__(self, uow: UnitOfWork, subscription_repo: SubscriptionRepository):
        self.uow = uow
        self.subscription_repo = subscription_repo

    async def execute(
        self, subscription_id: int, command: UpdateSubscriptionCommandDTO
    ) -> Result[SubscriptionResponseDTO]:
        """
        Execute partial update

        Args:
            subscription_id: Subscription ID (must be > 0)
            command: UpdateSubscriptionCommandDTO with the fields to change

        Returns:
            Result[SubscriptionResponseDTO]: Updated subscription or error

        Errors:
            INVALID_INPUT: Bad ID, bad field value or end_date before start_date
            SUBSCRIPTION_NOT_FOUND: No subscription with this ID
            STORAGE_FAILURE: The database read or write failed
        """
        if subscription_id <= 0:
            return Return.err(invalid_input("invalid id"))

        error = self._validate_fields(command)
        if error:
            return Return.err(error)

        try:
            existing = await self.subscription_repo.get_by_id(subscription_id, for_update=True)
            if not existing:
                await self.uow.rollback()
                return Return.err(not_found(subscription_id))

            start_date = (
                parse_month_token(command.start_date)
                if command.start_date is not None
                else existing.start_date
            )
            end_date = command.end_date.apply(existing.end_date)

            if end_date is not None and end_date < start_date:
                # Releases the row lock; nothing was modified
                await self.uow.rollback()
                return Return.err(invalid_input("end_date before start_date"))

            if command.service_name is not None:
                existing.service_name = command.service_name
            if command.price is not None:
                existing.price = command.price
            if command.user_id is not None:
                existing.user_id = command.user_id
            existing.start_date = start_date
            existing.end_date = end_date

            updated = await self.subscription_repo.update(existing)
            await self.uow.commit()

        except SQLAlchemyError as e:
            await self.uow.rollback()
            logger.error(f"Failed to update subscription {subscription_id}: {e}")
            return Return.err(storage_failure("Failed to update subscription", reason=str(e)))

        logger.info(f"Updated subscription {subscription_id}")
        return Return.ok(SubscriptionResponseDTO.from_entity(updated))

    def _validate_fields(self, command: UpdateSubscriptionCommandDTO) -> Optional[Error]:
        if command.service_name is not None and not command.service_name.strip():
            return invalid_input("service_name must not be empty")
        if command.price is not None and command.price < 0:
            return invalid_input("price must be >= 0")
        if command.price is not None and command.price > MAX_PRICE:
            return invalid_input(f"price must be <= {MAX_PRICE}")
        if command.user_id is not None and not command.user_id.strip():
            return invalid_input("user_id must not be empty")

        if command.start_date is not None:
            try:
                parse_month_token(command.start_date)
            except InvalidMonthFormat as e:
                return invalid_input("invalid start_date", reason=str(e))

        try:
            command.end_date.validate_token()
        except InvalidMonthFormat as e:
            return invalid_input("invalid end_date", reason=str(e))

        return None
