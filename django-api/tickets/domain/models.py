"""Domain models for a ticket purchase.

These are pure domain objects, created per purchase and never persisted.
"""

from dataclasses import dataclass
from enum import Enum


class TicketType(Enum):
    """Kinds of ticket that can be bought."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


@dataclass(frozen=True)
class TicketTypeRequest:
    """One line item of a purchase.

    ticket_type is None when the caller did not say which kind of ticket
    it wants; validation rejects that before anything looks the type up.
    """

    ticket_type: TicketType | None
    count: int


@dataclass(frozen=True)
class PurchaseSummary:
    """Outcome of a completed purchase."""

    account_id: int
    total_seats: int
    total_amount: int
