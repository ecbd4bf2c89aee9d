"""Unit tests for GetTotalCost use case"""

import pytest
from datetime import date
from sqlalchemy.exc import OperationalError

from src.app.use_cases.subscriptions.get_total_cost import GetTotalCost
from src.domain.filters import TotalFilter


class TestGetTotalCost:
    """Test suite for GetTotalCost use case"""

    @pytest.fixture
    def use_case(self, mock_subscription_repo):
        return GetTotalCost(subscription_repo=mock_subscription_repo, currency="RUB")

    @pytest.mark.asyncio
    async def test_total_with_echoed_range(self, use_case, mock_subscription_repo):
        mock_subscription_repo.total_cost.return_value = 1500
        filter = TotalFilter(user_id="u1", from_month=date(2025, 6, 1), to_month=date(2025, 9, 1))

        result = await use_case.execute(filter)

        assert result.is_ok()
        response = result.value
        assert response.total == 1500
        assert response.currency == "RUB"
        assert response.from_month == "06-2025"
        assert response.to_month == "09-2025"
        assert response.model_dump(by_alias=True)["from"] == "06-2025"
        mock_subscription_repo.total_cost.assert_called_once_with(filter)

    @pytest.mark.asyncio
    async def test_zero_total(self, use_case, mock_subscription_repo):
        mock_subscription_repo.total_cost.return_value = 0

        result = await use_case.execute(
            TotalFilter(from_month=date(2025, 1, 1), to_month=date(2025, 1, 1))
        )

        assert result.is_ok()
        assert result.value.total == 0

    @pytest.mark.asyncio
    async def test_reversed_range_does_not_query_storage(self, use_case, mock_subscription_repo):
        result = await use_case.execute(
            TotalFilter(from_month=date(2025, 10, 1), to_month=date(2025, 7, 1))
        )

        assert result.is_err()
        assert result.error.code == "INVALID_DATE_RANGE"
        mock_subscription_repo.total_cost.assert_not_called()

    @pytest.mark.asyncio
    async def test_storage_failure(self, use_case, mock_subscription_repo):
        mock_subscription_repo.total_cost.side_effect = OperationalError("SELECT", {}, Exception("x"))

        result = await use_case.execute(
            TotalFilter(from_month=date(2025, 1, 1), to_month=date(2025, 3, 1))
        )

        assert result.is_err()
        assert result.error.code == "STORAGE_FAILURE"
