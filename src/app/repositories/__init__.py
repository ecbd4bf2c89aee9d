from .subscription_repository import SubscriptionRepository

__all__ = [
    "SubscriptionRepository",
]
