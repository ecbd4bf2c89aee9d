"""Data Transfer Objects for Subscription Use Cases

Pydantic models for command inputs and response outputs. Dates cross this
boundary as MM-YYYY tokens; parsing and range checks belong to the use cases.
"""

from typing import Optional, List
from pydantic import BaseModel, Field
from src.domain.month import format_month_token
from src.domain.subscription import Subscription
from .end_date_update import EndDateUpdate


class CreateSubscriptionCommandDTO(BaseModel):
    """
    Command DTO for creating a subscription

    Used as input to CreateSubscription use case.
    """

    service_name: str = Field(
        ...,
        description="Name of the subscribed service"
    )

    price: int = Field(
        ...,
        description="Monthly price in minor currency units (must be >= 0)"
    )

    user_id: str = Field(
        ...,
        description="User identifier (UUID)"
    )

    start_date: str = Field(
        ...,
        description="First billed month (MM-YYYY)"
    )

    end_date: Optional[str] = Field(
        default=None,
        description="Last billed month (MM-YYYY), None = ongoing"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "service_name": "Yandex Plus",
                "price": 400,
                "user_id": "60601fee-2bf1-4721-ae6f-7636e79a0cba",
                "start_date": "07-2025",
                "end_date": None
            }
        }


class UpdateSubscriptionCommandDTO(BaseModel):
    """
    Command DTO for partially updating a subscription

    None on service_name/price/user_id/start_date means "leave unchanged".
    end_date carries its own tri-state (keep / clear / set).
    """

    service_name: Optional[str] = Field(
        default=None,
        description="New service name"
    )

    price: Optional[int] = Field(
        default=None,
        description="New monthly price (must be >= 0)"
    )

    user_id: Optional[str] = Field(
        default=None,
        description="New user identifier"
    )

    start_date: Optional[str] = Field(
        default=None,
        description="New first billed month (MM-YYYY)"
    )

    end_date: EndDateUpdate = Field(
        default_factory=EndDateUpdate.not_provided,
        description="End date change (keep, clear or set)"
    )


class SubscriptionResponseDTO(BaseModel):
    """
    Response DTO for a single subscription

    end_date is None for open-ended subscriptions; the API omits it.
    """

    id: int = Field(
        ...,
        description="Subscription ID"
    )

    service_name: str = Field(
        ...,
        description="Name of the subscribed service"
    )

    price: int = Field(
        ...,
        description="Monthly price in minor currency units"
    )

    user_id: str = Field(
        ...,
        description="User identifier"
    )

    start_date: str = Field(
        ...,
        description="First billed month (MM-YYYY)"
    )

    end_date: Optional[str] = Field(
        default=None,
        description="Last billed month (MM-YYYY)"
    )

    @classmethod
    def from_entity(cls, subscription: Subscription) -> "SubscriptionResponseDTO":
        return cls(
            id=subscription.id,
            service_name=subscription.service_name,
            price=subscription.price,
            user_id=subscription.user_id,
            start_date=format_month_token(subscription.start_date),
            end_date=(
                format_month_token(subscription.end_date)
                if subscription.end_date is not None
                else None
            ),
        )

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "service_name": "Yandex Plus",
                "price": 400,
                "user_id": "60601fee-2bf1-4721-ae6f-7636e79a0cba",
                "start_date": "07-2025"
            }
        }


class ListSubscriptionsResponseDTO(BaseModel):
    """Page of subscriptions ordered by ID"""

    subscriptions: List[SubscriptionResponseDTO] = Field(
        ...,
        description="Subscriptions on this page"
    )

    limit: int = Field(
        ...,
        description="Applied page size"
    )

    offset: int = Field(
        ...,
        description="Applied offset"
    )


class TotalCostResponseDTO(BaseModel):
    """
    Response DTO for total cost aggregation

    from/to echo the requested inclusive month range.
    """

    total: int = Field(
        ...,
        description="Sum of monthly charges over the range"
    )

    currency: str = Field(
        ...,
        description="Currency of the total"
    )

    from_month: str = Field(
        ...,
        alias="from",
        description="First month of the range (MM-YYYY)"
    )

    to_month: str = Field(
        ...,
        alias="to",
        description="Last month of the range (MM-YYYY), inclusive"
    )

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "total": 1500,
                "currency": "RUB",
                "from": "06-2025",
                "to": "09-2025"
            }
        }
