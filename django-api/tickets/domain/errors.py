"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    NO_TICKETS_REQUESTED = "NO_TICKETS_REQUESTED"
    INVALID_TICKET_COUNT = "INVALID_TICKET_COUNT"
    NEGATIVE_TICKET_COUNT = "NEGATIVE_TICKET_COUNT"
    MISSING_TICKET_TYPE = "MISSING_TICKET_TYPE"
    TICKET_LIMIT_EXCEEDED = "TICKET_LIMIT_EXCEEDED"
    UNACCOMPANIED_MINOR = "UNACCOMPANIED_MINOR"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Raised when a purchase request breaks a business rule."""


class InvalidAccountIdError(InvalidPurchaseError):
    """Raised when the account ID is missing or not a positive integer."""

    def __init__(self, account_id: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT_ID,
            message=f"Account with ID [{account_id}] is invalid.",
        )


class NoTicketsRequestedError(InvalidPurchaseError):
    """Raised when no ticket requests are supplied."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_TICKETS_REQUESTED,
            message="Ticket requests must be provided and contain at least one request.",
        )


class InvalidTicketCountError(InvalidPurchaseError):
    """Raised when a ticket count is not a whole number."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_COUNT,
            message="Number of tickets must be a whole number.",
        )


class NegativeTicketCountError(InvalidPurchaseError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NEGATIVE_TICKET_COUNT,
            message="Number of tickets cannot be negative.",
        )


class MissingTicketTypeError(InvalidPurchaseError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_TICKET_TYPE,
            message="Ticket type cannot be empty.",
        )


class TicketLimitExceededError(InvalidPurchaseError):
    """Raised when the combined ticket count is over the per-purchase ceiling."""

    def __init__(self, limit: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_LIMIT_EXCEEDED,
            message=f"Only a maximum of {limit} tickets can be purchased at a time.",
        )


class UnaccompaniedMinorError(InvalidPurchaseError):
    """Raised when CHILD or INFANT tickets are requested without an ADULT."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.UNACCOMPANIED_MINOR,
            message=(
                "Requests containing CHILD or INFANT tickets must contain "
                "at least one ADULT ticket."
            ),
        )


class UnexpectedTicketTypeError(LookupError):
    """Raised when a ticket type has no price.

    Validation runs before pricing, so this signals a defect rather than
    bad input. It is not an InvalidPurchaseError.
    """

    def __init__(self, ticket_type: object) -> None:
        super().__init__(f"Unexpected ticket type [{ticket_type}].")
        self.ticket_type = ticket_type
