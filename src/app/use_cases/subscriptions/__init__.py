"""Subscription use cases"""
from .create_subscription import CreateSubscription
from .get_subscription import GetSubscription
from .update_subscription import UpdateSubscription
from .delete_subscription import DeleteSubscription
from .list_subscriptions import ListSubscriptions
from .get_total_cost import GetTotalCost
from .end_date_update import EndDateUpdate, EndDateAction
from .dtos import (
    CreateSubscriptionCommandDTO,
    UpdateSubscriptionCommandDTO,
    SubscriptionResponseDTO,
    ListSubscriptionsResponseDTO,
    TotalCostResponseDTO,
)

__all__ = [
    "CreateSubscription",
    "GetSubscription",
    "UpdateSubscription",
    "DeleteSubscription",
    "ListSubscriptions",
    "GetTotalCost",
    "EndDateUpdate",
    "EndDateAction",
    "CreateSubscriptionCommandDTO",
    "UpdateSubscriptionCommandDTO",
    "SubscriptionResponseDTO",
    "ListSubscriptionsResponseDTO",
    "TotalCostResponseDTO",
]
