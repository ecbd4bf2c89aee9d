"""Request schemas for Subscription API

Pydantic models for validating incoming HTTP requests. They check JSON types
only; field rules (non-empty names, price >= 0, MM-YYYY dates) are enforced by
the use cases so every caller gets the same INVALID_INPUT errors.
"""

from typing import Optional
from pydantic import BaseModel, Field, model_validator


class CreateSubscriptionRequestSchema(BaseModel):
    """
    Request schema for creating a subscription

    Used for POST /subscriptions endpoint.
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
        description="Last billed month (MM-YYYY) or null for ongoing"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "service_name": "Yandex Plus",
                "price": 400,
                "user_id": "60601fee-2bf1-4721-ae6f-7636e79a0cba",
                "start_date": "07-2025"
            }
        }


class UpdateSubscriptionRequestSchema(BaseModel):
    """
    Request schema for partially updating a subscription

    Used for PATCH /subscriptions/{id} endpoint. Omitted fields are left
    unchanged. end_date is the only field that accepts null (clears it).
    """

    service_name: Optional[str] = Field(
        default=None,
        description="New service name"
    )

    price: Optional[int] = Field(
        default=None,
        description="New monthly price"
    )

    user_id: Optional[str] = Field(
        default=None,
        description="New user identifier"
    )

    start_date: Optional[str] = Field(
        default=None,
        description="New first billed month (MM-YYYY)"
    )

    end_date: Optional[str] = Field(
        default=None,
        description="New last billed month (MM-YYYY), or null to make the subscription open-ended"
    )

    @model_validator(mode="after")
    def reject_null_for_required_fields(self):
        """Only end_date may be sent as null"""
        for name in ("service_name", "price", "user_id", "start_date"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} must not be null")
        return self

    @property
    def end_date_provided(self) -> bool:
        return "end_date" in self.model_fields_set

    class Config:
        json_schema_extra = {
            "example": {
                "price": 450,
                "end_date": "12-2025"
            }
        }
