"""CreateSubscription Use Case

Validates a new subscription and persists it.
"""

import logging
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.subscription_repository import SubscriptionRepository
from src.domain.exceptions import InvalidMonthFormat
from src.domain.month import parse_month_token
from src.domain.subscription import MAX_PRICE, Subscription
from .dtos import CreateSubscriptionCommandDTO, SubscriptionResponseDTO
from .errors import invalid_input, storage_failure

logger = logging.getLogger(__name__)


class CreateSubscription:
    """
    Use Case: Create a subscription

    Business Rules:
    1. service_name and user_id are non-empty
    2. 0 <= price <= MAX_PRICE (BIGINT range)
    3. start_date is a valid MM-YYYY token; end_date, if given, too
    4. end_date is not before start_date
    5. Nothing is written unless every rule holds
    """

    def __init__(self, uow: UnitOfWork, subscription_repo: SubscriptionRepository):
        self.uow = uow
        self.subscription_repo = subscription_repo

    async def execute(
        self, command: CreateSubscriptionCommandDTO
    ) -> Result[SubscriptionResponseDTO]:
        """
        Execute subscription creation

        Args:
            command: CreateSubscriptionCommandDTO

        Returns:
            Result[SubscriptionResponseDTO]: Created subscription (with generated ID) or error

        Errors:
            INVALID_INPUT: A field is missing, malformed or inconsistent
            STORAGE_FAILURE: The database rejected or failed the write
        """
        if not command.service_name or not command.service_name.strip():
            return Return.err(invalid_input("service_name must not be empty"))
        if not command.user_id or not command.user_id.strip():
            return Return.err(invalid_input("user_id must not be empty"))
        if command.price < 0:
            return Return.err(invalid_input("price must be >= 0"))
        if command.price > MAX_PRICE:
            return Return.err(invalid_input(f"price must be <= {MAX_PRICE}"))
        if not command.start_date:
            return Return.err(invalid_input("start_date is required"))

        try:
            start_date = parse_month_token(command.start_date)
        except InvalidMonthFormat as e:
            return Return.err(invalid_input("invalid start_date", reason=str(e)))

        end_date = None
        if command.end_date is not None:
            try:
                end_date = parse_month_token(command.end_date)
            except InvalidMonthFormat as e:
                return Return.err(invalid_input("invalid end_date", reason=str(e)))
            if end_date < start_date:
                return Return.err(invalid_input("end_date before start_date"))

        subscription = Subscription(
            service_name=command.service_name,
            price=command.price,
            user_id=command.user_id,
            start_date=start_date,
            end_date=end_date,
        )

        try:
            created = await self.subscription_repo.create(subscription)
            await self.uow.commit()
        except SQLAlchemyError as e:
            await self.uow.rollback()
            logger.error(f"Failed to create subscription for user {command.user_id}: {e}")
            return Return.err(storage_failure("Failed to create subscription", reason=str(e)))

        logger.info(
            f"Created subscription {created.id} ({created.service_name}) for user {created.user_id}"
        )
        return Return.ok(SubscriptionResponseDTO.from_entity(created))
