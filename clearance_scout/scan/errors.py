"""Errors raised while creating or reading scans."""

from datetime import date


class ScanValidationError(ValueError):
    """Malformed scan request; raised before any scan row is written."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class QuotaExceededError(Exception):
    """User has used every scan their plan allows this month."""

    def __init__(self, limit: int, used: int, reset_date: date):
        self.limit = limit
        self.used = used
        self.reset_date = reset_date
        super().__init__(f"Monthly scan limit reached ({used}/{limit}), resets {reset_date.isoformat()}")

    @property
    def remaining(self) -> int:
        return max(0, self.limit - self.used)


class UserNotFoundError(LookupError):
    pass


class ScanNotFoundError(LookupError):
    pass
