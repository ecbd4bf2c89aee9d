from .subscription_repository import SqlAlchemySubscriptionRepository
from .subscription_predicates import SubscriptionPredicateBuilder

__all__ = [
    "SqlAlchemySubscriptionRepository",
    "SubscriptionPredicateBuilder",
]
