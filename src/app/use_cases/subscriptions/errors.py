"""Error codes returned by subscription use cases"""

from typing import Optional
from libs.result import Error

SUBSCRIPTION_NOT_FOUND = "SUBSCRIPTION_NOT_FOUND"
INVALID_INPUT = "INVALID_INPUT"
INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
STORAGE_FAILURE = "STORAGE_FAILURE"


def not_found(subscription_id: int) -> Error:
    return Error(
        code=SUBSCRIPTION_NOT_FOUND,
        message=f"Subscription {subscription_id} not found",
    )


def invalid_input(message: str, reason: Optional[str] = None) -> Error:
    return Error(code=INVALID_INPUT, message=message, reason=reason)


def invalid_date_range(reason: Optional[str] = None) -> Error:
    return Error(
        code=INVALID_DATE_RANGE,
        message="Invalid date range: 'to' must not precede 'from'",
        reason=reason,
    )


def storage_failure(message: str, reason: Optional[str] = None) -> Error:
    return Error(code=STORAGE_FAILURE, message=message, reason=reason)
