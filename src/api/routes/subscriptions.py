"""Subscription API Routes

FastAPI routes for subscription CRUD, listing and total cost aggregation.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.api.schemas.subscription_request import (
    CreateSubscriptionRequestSchema,
    UpdateSubscriptionRequestSchema,
)
from src.app.use_cases.subscriptions import (
    CreateSubscription,
    GetSubscription,
    UpdateSubscription,
    DeleteSubscription,
    ListSubscriptions,
    GetTotalCost,
    EndDateUpdate,
    CreateSubscriptionCommandDTO,
    UpdateSubscriptionCommandDTO,
    SubscriptionResponseDTO,
    ListSubscriptionsResponseDTO,
    TotalCostResponseDTO,
)
from src.app.use_cases.subscriptions.errors import (
    SUBSCRIPTION_NOT_FOUND,
    INVALID_INPUT,
    INVALID_DATE_RANGE,
    STORAGE_FAILURE,
    invalid_input,
)
from src.adapter.repositories.subscription_repository import SqlAlchemySubscriptionRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.domain.exceptions import InvalidMonthFormat
from src.domain.filters import ListFilter, TotalFilter
from src.domain.month import parse_month_token
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/subscriptions", tags=["Subscriptions"])

_STATUS_BY_CODE = {
    SUBSCRIPTION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    INVALID_DATE_RANGE: status.HTTP_400_BAD_REQUEST,
    STORAGE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_ERROR_RESPONSES = {
    400: {
        "description": "Invalid input",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "INVALID_INPUT",
                        "message": "invalid start_date",
                        "reason": "invalid date format '2025-07' (expected MM-YYYY)"
                    }
                }
            }
        }
    },
    500: {
        "description": "Storage failure",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "STORAGE_FAILURE",
                        "message": "Failed to load subscription"
                    }
                }
            }
        }
    }
}

_NOT_FOUND_RESPONSE = {
    404: {
        "description": "Subscription not found",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "SUBSCRIPTION_NOT_FOUND",
                        "message": "Subscription 42 not found"
                    }
                }
            }
        }
    }
}


def _raise_client_error(error: Error):
    raise ClientError(error, status_code=_STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST))


def _parse_query_month(name: str, value: Optional[str]):
    if value is None or not value.strip():
        return None
    try:
        return parse_month_token(value.strip())
    except InvalidMonthFormat as e:
        _raise_client_error(invalid_input(f"invalid '{name}' (expected MM-YYYY)", reason=str(e)))


def _optional_query_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


@router.post(
    "",
    response_model=SubscriptionResponseDTO,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
async def create_subscription(
    request: CreateSubscriptionRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Create a subscription.

    **Request body:**
    - `service_name` (required): Name of the subscribed service
    - `price` (required): Monthly price in minor currency units, >= 0
    - `user_id` (required): User identifier
    - `start_date` (required): First billed month, `MM-YYYY`
    - `end_date` (optional): Last billed month, `MM-YYYY`, or null

    **Returns:**
    - 201: Subscription created
    - 400: Invalid input
    """
    uow = SqlAlchemyUnitOfWork(session)
    subscription_repo = SqlAlchemySubscriptionRepository(session)

    command = CreateSubscriptionCommandDTO(
        service_name=request.service_name,
        price=request.price,
        user_id=request.user_id,
        start_date=request.start_date,
        end_date=request.end_date,
    )

    use_case = CreateSubscription(uow, subscription_repo)
    result = await use_case.execute(command)

    if result.is_err():
        _raise_client_error(result.error)

    return result.value


@router.get(
    "/total",
    response_model=TotalCostResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=_ERROR_RESPONSES,
)
async def get_total_cost(
    from_: Optional[str] = Query(None, alias="from", description="First month (MM-YYYY)"),
    to: Optional[str] = Query(None, description="Last month, inclusive (MM-YYYY)"),
    user_id: Optional[str] = Query(None, description="User identifier"),
    service_name: Optional[str] = Query(None, description="Service name"),
    session: AsyncSession = Depends(get_session)
):
    """
    Total monthly cost of matching subscriptions over an inclusive month range.

    A subscription active in three of the requested months counts three times.

    **Example response:**
    ```json
    {"total": 1500, "currency": "RUB", "from": "06-2025", "to": "09-2025"}
    ```

    **Returns:**
    - 200: Total computed (0 when nothing matches)
    - 400: Missing or malformed month, or `to` before `from`
    """
    from_month = _parse_query_month("from", from_)
    to_month = _parse_query_month("to", to)
    if from_month is None or to_month is None:
        _raise_client_error(invalid_input("'from' and 'to' are required (MM-YYYY)"))

    filter = TotalFilter(
        from_month=from_month,
        to_month=to_month,
        user_id=_optional_query_text(user_id),
        service_name=_optional_query_text(service_name),
    )

    subscription_repo = SqlAlchemySubscriptionRepository(session)
    use_case = GetTotalCost(subscription_repo, currency=ApplicationConfig.CURRENCY)
    result = await use_case.execute(filter)

    if result.is_err():
        _raise_client_error(result.error)

    return result.value


@router.get(
    "",
    response_model=ListSubscriptionsResponseDTO,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    responses=_ERROR_RESPONSES,
)
async def list_subscriptions(
    user_id: Optional[str] = Query(None, description="User identifier"),
    service_name: Optional[str] = Query(None, description="Service name"),
    from_: Optional[str] = Query(None, alias="from", description="First month (MM-YYYY)"),
    to: Optional[str] = Query(None, description="Last month, inclusive (MM-YYYY)"),
    limit: Optional[int] = Query(None, description="Page size (1-200, default 50)"),
    offset: Optional[int] = Query(None, description="Rows to skip (default 0)"),
    session: AsyncSession = Depends(get_session)
):
    """
    List subscriptions ordered by ID.

    With `from`/`to`, only subscriptions whose active period intersects the
    inclusive month range are returned.

    **Returns:**
    - 200: Page of subscriptions
    - 400: Malformed month
    """
    filter = ListFilter(
        user_id=_optional_query_text(user_id),
        service_name=_optional_query_text(service_name),
        from_month=_parse_query_month("from", from_),
        to_month=_parse_query_month("to", to),
        limit=limit,
        offset=offset,
    )

    subscription_repo = SqlAlchemySubscriptionRepository(session)
    use_case = ListSubscriptions(subscription_repo)
    result = await use_case.execute(filter)

    if result.is_err():
        _raise_client_error(result.error)

    return result.value


@router.get(
    "/{subscription_id}",
    response_model=SubscriptionResponseDTO,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    responses={**_ERROR_RESPONSES, **_NOT_FOUND_RESPONSE},
)
async def get_subscription(
    subscription_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Get a subscription by ID.

    **Returns:**
    - 200: Subscription found
    - 400: Non-positive ID
    - 404: Subscription not found
    """
    subscription_repo = SqlAlchemySubscriptionRepository(session)
    use_case = GetSubscription(subscription_repo)
    result = await use_case.execute(subscription_id)

    if result.is_err():
        _raise_client_error(result.error)

    return result.value


@router.patch(
    "/{subscription_id}",
    response_model=SubscriptionResponseDTO,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    responses={**_ERROR_RESPONSES, **_NOT_FOUND_RESPONSE},
)
async def update_subscription(
    subscription_id: int,
    request: UpdateSubscriptionRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Partially update a subscription.

    Omitted fields keep their value. `end_date` is tri-state:
    - omitted: unchanged
    - `null`: cleared (subscription becomes open-ended)
    - `"MM-YYYY"`: replaced

    The merged subscription must still have `end_date >= start_date`.

    **Returns:**
    - 200: Updated subscription
    - 400: Invalid field or date range
    - 404: Subscription not found
    """
    uow = SqlAlchemyUnitOfWork(session)
    subscription_repo = SqlAlchemySubscriptionRepository(session)

    if not request.end_date_provided:
        end_date = EndDateUpdate.not_provided()
    elif request.end_date is None:
        end_date = EndDateUpdate.set_null()
    else:
        end_date = EndDateUpdate.set_value(request.end_date)

    command = UpdateSubscriptionCommandDTO(
        service_name=request.service_name,
        price=request.price,
        user_id=request.user_id,
        start_date=request.start_date,
        end_date=end_date,
    )

    use_case = UpdateSubscription(uow, subscription_repo)
    result = await use_case.execute(subscription_id, command)

    if result.is_err():
        _raise_client_error(result.error)

    return result.value


@router.delete(
    "/{subscription_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_ERROR_RESPONSES, **_NOT_FOUND_RESPONSE},
)
async def delete_subscription(
    subscription_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Delete a subscription.

    **Returns:**
    - 204: Deleted
    - 400: Non-positive ID
    - 404: Subscription not found (including a repeated delete)
    """
    uow = SqlAlchemyUnitOfWork(session)
    subscription_repo = SqlAlchemySubscriptionRepository(session)

    use_case = DeleteSubscription(uow, subscription_repo)
    result = await use_case.execute(subscription_id)

    if result.is_err():
        _raise_client_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
