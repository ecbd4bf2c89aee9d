"""Shared fixtures for subscription use case unit tests"""

import pytest
from datetime import date, datetime, timezone
from unittest.mock import AsyncMock

from src.domain.subscription import Subscription


@pytest.fixture
def mock_uow():
    """Mock unit of work"""
    return AsyncMock()


@pytest.fixture
def mock_subscription_repo():
    """Mock subscription repository"""
    return AsyncMock()


@pytest.fixture
def make_subscription():
    """Factory for stored Subscription entities"""

    def _make(
        id: int = 1,
        service_name: str = "Netflix",
        price: int = 500,
        user_id: str = "60601fee-2bf1-4721-ae6f-7636e79a0cba",
        start_date: date = date(2025, 7, 1),
        end_date: date = None,
    ) -> Subscription:
        return Subscription(
            id=id,
            service_name=service_name,
            price=price,
            user_id=user_id,
            start_date=start_date,
            end_date=end_date,
            created_at=datetime(2025, 7, 1, tzinfo=timezone.utc),
            updated_at=datetime(2025, 7, 1, tzinfo=timezone.utc),
        )

    return _make
