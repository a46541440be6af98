"""Seat and price arithmetic over a validated set of ticket requests."""

from collections.abc import Iterable

from tickets.domain import DEFAULT_PRICING_TABLE, PricingTable, TicketType, TicketTypeRequest


def total_seats(ticket_requests: Iterable[TicketTypeRequest]) -> int:
    """Return the number of seats to reserve. Infants sit on a lap."""
    return sum(r.count for r in ticket_requests if r.ticket_type is not TicketType.INFANT)


def total_amount(
    ticket_requests: Iterable[TicketTypeRequest],
    pricing: PricingTable = DEFAULT_PRICING_TABLE,
) -> int:
    """Return the amount to charge.

    Raises:
        UnexpectedTicketTypeError: If a request's type has no price.
    """
    return sum(pricing.unit_price(r.ticket_type) * r.count for r in ticket_requests)
