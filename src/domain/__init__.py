from .base import BaseModel
from .exceptions import InvalidMonthFormat, InvalidDateRange
from .subscription import Subscription
from .filters import ListFilter, TotalFilter

__all__ = [
    "BaseModel",
    "InvalidMonthFormat",
    "InvalidDateRange",
    "Subscription",
    "ListFilter",
    "TotalFilter",
]
