"""Get Total Cost Use Case

Computes the total monthly spend of matching subscriptions over an inclusive
month range.
"""

import logging
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Result, Return
from src.app.repositories.subscription_repository import SubscriptionRepository
from src.domain.exceptions import InvalidDateRange
from src.domain.filters import TotalFilter
from src.domain.month import format_month_token
from .dtos import TotalCostResponseDTO
from .errors import invalid_date_range, storage_failure

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "RUB"


class GetTotalCost:
    """
    Get Total Cost Use Case

    A subscription active in N of the requested months contributes its price
    N times. Both range ends are inclusive; from == to covers one month.
    """

    def __init__(self, subscription_repo: SubscriptionRepository, currency: str = DEFAULT_CURRENCY):
        self.subscription_repo = subscription_repo
        self.currency = currency

    async def execute(self, filter: TotalFilter) -> Result[TotalCostResponseDTO]:
        """
        Args:
            filter: TotalFilter with mandatory from_month/to_month

        Returns:
            Result[TotalCostResponseDTO]: Total (0 when nothing matches) or error

        Errors:
            INVALID_DATE_RANGE: to_month precedes from_month (storage not queried)
            STORAGE_FAILURE: The aggregation query failed
        """
        try:
            filter.validate_range()
        except InvalidDateRange as e:
            return Return.err(invalid_date_range(reason=str(e)))

        try:
            total = await self.subscription_repo.total_cost(filter)
        except SQLAlchemyError as e:
            logger.error(f"Failed to compute total cost: {e}")
            return Return.err(storage_failure("Failed to compute total cost", reason=str(e)))

        return Return.ok(
            TotalCostResponseDTO(
                total=total,
                currency=self.currency,
                from_month=format_month_token(filter.from_month),
                to_month=format_month_token(filter.to_month),
            )
        )
