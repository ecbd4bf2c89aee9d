"""Tri-state change of a subscription's end date

A PATCH body can omit ``end_date`` (keep the stored value), send ``null``
(clear it, making the subscription open-ended) or send an ``MM-YYYY`` token
(replace it). Since the stored end date is itself optional, a plain
``Optional[Optional[str]]`` cannot tell the first two apart.
"""

from datetime import date
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, model_validator
from src.domain.month import parse_month_token


class EndDateAction(str, Enum):
    """What a patch does to the end date"""
    KEEP = "keep"      # field omitted
    CLEAR = "clear"    # field sent as null
    SET = "set"        # field sent with a month token


class EndDateUpdate(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: EndDateAction = EndDateAction.KEEP
    value: Optional[str] = None

    @model_validator(mode="after")
    def check_value_matches_action(self):
        if self.action == EndDateAction.SET and self.value is None:
            raise ValueError("SET requires a month token")
        if self.action != EndDateAction.SET and self.value is not None:
            raise ValueError(f"{self.action.value.upper()} does not take a value")
        return self

    @classmethod
    def not_provided(cls) -> "EndDateUpdate":
        return cls(action=EndDateAction.KEEP)

    @classmethod
    def set_null(cls) -> "EndDateUpdate":
        return cls(action=EndDateAction.CLEAR)

    @classmethod
    def set_value(cls, token: str) -> "EndDateUpdate":
        return cls(action=EndDateAction.SET, value=token)

    @property
    def is_provided(self) -> bool:
        return self.action != EndDateAction.KEEP

    def validate_token(self) -> None:
        """
        Raises:
            InvalidMonthFormat: action is SET and the token does not parse
        """
        if self.action == EndDateAction.SET:
            parse_month_token(self.value)

    def apply(self, current: Optional[date]) -> Optional[date]:
        """End date after this change is applied to ``current``"""
        if self.action == EndDateAction.KEEP:
            return current
        if self.action == EndDateAction.CLEAR:
            return None
        return parse_month_token(self.value)
