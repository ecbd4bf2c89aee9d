"""Subscription Domain Entity

A user's paid subscription to a service, billed monthly.
"""

from datetime import datetime, date, timezone
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, CheckConstraint, Date, DateTime, Integer, String
from src.domain.base import BaseModel

# SQLite only auto-increments INTEGER PRIMARY KEY columns
_ID_TYPE = BigInteger().with_variant(Integer, "sqlite")

# Largest price a BIGINT column holds
MAX_PRICE = 2**63 - 1


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Subscription(BaseModel, table=True):
    """
    Subscription - monthly charge a user pays for a service

    Domain Rules:
    - start_date and end_date are month starts (day 1)
    - end_date is optional (None = still active)
    - end_date, when present, is not before start_date
    - price is an integer amount of minor currency units per month in
      [0, MAX_PRICE]
    - created_at/updated_at are timezone-aware UTC
    """

    __tablename__ = "subscriptions"
    __table_args__ = (
        Index('ix_subscriptions_user_id', 'user_id'),
        Index('ix_subscriptions_service_name', 'service_name'),
        CheckConstraint('price >= 0', name='ck_subscriptions_price_non_negative'),
        CheckConstraint(
            'end_date IS NULL OR end_date >= start_date',
            name='ck_subscriptions_end_after_start',
        ),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(_ID_TYPE, primary_key=True, autoincrement=True),
        description="Unique subscription identifier (auto-increment)"
    )

    service_name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Name of the subscribed service"
    )

    price: int = Field(
        sa_column=Column(BigInteger, nullable=False),
        description="Monthly price in minor currency units"
    )

    user_id: str = Field(
        sa_column=Column(String(64), nullable=False),
        description="User identifier (UUID)"
    )

    start_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="First billed month (month start)"
    )

    end_date: Optional[date] = Field(
        default=None,
        sa_column=Column(Date, nullable=True),
        description="Last billed month (month start, None = ongoing)"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Subscription creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last update timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "service_name": "Yandex Plus",
                "price": 400,
                "user_id": "60601fee-2bf1-4721-ae6f-7636e79a0cba",
                "start_date": "2025-07-01",
                "end_date": None,
                "created_at": "2025-07-01T00:00:00Z",
                "updated_at": "2025-07-01T00:00:00Z"
            }
        }
