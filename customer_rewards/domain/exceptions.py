"""Domain-specific exceptions"""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories surfaced by the rewards domain"""

    INVALID_REQUEST = "invalid_request"
    INVALID_TRANSACTION = "invalid_transaction"
    INVALID_DATE_FORMAT = "invalid_date_format"
    CUSTOMER_NOT_FOUND = "customer_not_found"
    UNHANDLED = "unhandled"


class RewardsError(Exception):
    """Tagged domain error; the API layer maps `kind` to an HTTP status"""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"RewardsError(kind={self.kind.name}, message={self.message!r})"
