"""Domain error taxonomy.

All errors derive from ``FinanceError`` (a ``ValueError``) so callers can
translate any of them into a user-facing message in one place.
"""


class FinanceError(ValueError):
    """Base class for domain validation errors."""


class InvalidRangeError(FinanceError):
    """Raised when a date range or period is malformed."""


class InvalidAmountError(FinanceError):
    """Raised when a settlement amount is not strictly positive."""


class AlreadySettledError(FinanceError):
    """Raised when settling an installment that is already paid."""


class InvalidStrategyError(FinanceError):
    """Raised when the difference strategy is not supported."""


class InvalidEntitlementsError(FinanceError):
    """Raised when module entitlement flags fail validation."""


class InstallmentNotFoundError(FinanceError):
    """Raised when an installment cannot be found in the store."""


__all__ = [
    "FinanceError",
    "InvalidRangeError",
    "InvalidAmountError",
    "AlreadySettledError",
    "InvalidStrategyError",
    "InvalidEntitlementsError",
    "InstallmentNotFoundError",
]
