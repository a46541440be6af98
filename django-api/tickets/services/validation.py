"""Business rules a purchase must satisfy before anything is reserved or paid.

Rules are checked in a fixed order and the first one broken is reported.
"""

from collections.abc import Sequence

from tickets.domain import MAX_TICKETS_PER_PURCHASE, AccountId, TicketType, TicketTypeRequest
from tickets.domain.errors import (
    InvalidAccountIdError,
    InvalidTicketCountError,
    MissingTicketTypeError,
    NegativeTicketCountError,
    NoTicketsRequestedError,
    TicketLimitExceededError,
    UnaccompaniedMinorError,
)


def count_tickets(
    ticket_requests: Sequence[TicketTypeRequest], ticket_type: TicketType
) -> int:
    """Return the number of tickets of one type across all requests."""
    return sum(r.count for r in ticket_requests if r.ticket_type is ticket_type)


def _is_whole_number(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_account_id(account_id: object) -> AccountId:
    try:
        return AccountId.from_value(account_id)
    except ValueError:
        raise InvalidAccountIdError(account_id) from None


def validate_ticket_requests(
    ticket_requests: Sequence[TicketTypeRequest | None] | None,
) -> None:
    """Check the request set.

    Raises:
        NoTicketsRequestedError: If there are no requests, or an entry is None.
        InvalidTicketCountError: If any count is not an int.
        NegativeTicketCountError: If any count is below zero.
        MissingTicketTypeError: If any request has no ticket type.
        TicketLimitExceededError: If the combined count is over the ceiling.
        UnaccompaniedMinorError: If CHILD or INFANT tickets come without ADULT.
    """
    if not ticket_requests or any(r is None for r in ticket_requests):
        raise NoTicketsRequestedError()

    if not all(_is_whole_number(r.count) for r in ticket_requests):
        raise InvalidTicketCountError()

    if any(r.count < 0 for r in ticket_requests):
        raise NegativeTicketCountError()

    if any(r.ticket_type is None for r in ticket_requests):
        raise MissingTicketTypeError()

    # The ceiling applies to every type combined, not per type.
    if sum(r.count for r in ticket_requests) > MAX_TICKETS_PER_PURCHASE:
        raise TicketLimitExceededError(MAX_TICKETS_PER_PURCHASE)

    adults = count_tickets(ticket_requests, TicketType.ADULT)
    minors = count_tickets(ticket_requests, TicketType.CHILD) + count_tickets(
        ticket_requests, TicketType.INFANT
    )
    if minors > 0 and adults == 0:
        raise UnaccompaniedMinorError()


def validate_purchase(
    account_id: object,
    ticket_requests: Sequence[TicketTypeRequest | None] | None,
) -> AccountId:
    """Validate a whole purchase and return the parsed account ID.

    Raises:
        InvalidPurchaseError: Subclass naming the first rule broken.
    """
    account = validate_account_id(account_id)
    validate_ticket_requests(ticket_requests)
    return account
