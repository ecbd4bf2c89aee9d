"""Domain exceptions

Raised by pure domain functions; use cases translate them into Result errors.
"""


class InvalidMonthFormat(ValueError):
    """Month token does not match MM-YYYY or encodes an impossible month"""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"invalid date format {token!r} (expected MM-YYYY)")


class InvalidDateRange(ValueError):
    """Inclusive month range whose 'to' precedes 'from'"""

    def __init__(self, message: str = "invalid date range: 'to' must be >= 'from'"):
        super().__init__(message)
