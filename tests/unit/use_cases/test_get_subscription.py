"""Unit tests for GetSubscription use case"""

import pytest
from datetime import date
from sqlalchemy.exc import OperationalError

from src.app.use_cases.subscriptions.get_subscription import GetSubscription


class TestGetSubscription:
    """Test suite for GetSubscription use case"""

    @pytest.fixture
    def use_case(self, mock_subscription_repo):
        return GetSubscription(subscription_repo=mock_subscription_repo)

    @pytest.mark.asyncio
    async def test_found(self, use_case, mock_subscription_repo, make_subscription):
        mock_subscription_repo.get_by_id.return_value = make_subscription(
            id=7, start_date=date(2025, 7, 1), end_date=date(2025, 10, 1)
        )

        result = await use_case.execute(7)

        assert result.is_ok()
        assert result.value.id == 7
        assert result.value.start_date == "07-2025"
        assert result.value.end_date == "10-2025"
        mock_subscription_repo.get_by_id.assert_called_once_with(7)

    @pytest.mark.asyncio
    async def test_not_found(self, use_case, mock_subscription_repo):
        mock_subscription_repo.get_by_id.return_value = None

        result = await use_case.execute(99)

        assert result.is_err()
        assert result.error.code == "SUBSCRIPTION_NOT_FOUND"
        assert "99" in result.error.message

    @pytest.mark.asyncio
    @pytest.mark.parametrize("subscription_id", [0, -3])
    async def test_non_positive_id_is_invalid_input(
        self, use_case, mock_subscription_repo, subscription_id
    ):
        result = await use_case.execute(subscription_id)

        assert result.is_err()
        assert result.error.code == "INVALID_INPUT"
        mock_subscription_repo.get_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_storage_failure_is_not_reported_as_not_found(self, use_case, mock_subscription_repo):
        mock_subscription_repo.get_by_id.side_effect = OperationalError("SELECT", {}, Exception("timeout"))

        result = await use_case.execute(1)

        assert result.is_err()
        assert result.error.code == "STORAGE_FAILURE"
