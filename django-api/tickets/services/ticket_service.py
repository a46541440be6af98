"""Ticket service: validates a purchase, then reserves seats and takes payment."""

import logging
from collections.abc import Sequence

from tickets.domain import DEFAULT_PRICING_TABLE, PricingTable, PurchaseSummary, TicketTypeRequest
from tickets.domain.errors import InvalidPurchaseError
from tickets.gateways import SeatReservationService, TicketPaymentService
from tickets.services.pricing import total_amount, total_seats
from tickets.services.validation import validate_purchase

logger = logging.getLogger(__name__)


class TicketService:
    """Service for buying cinema tickets."""

    def __init__(
        self,
        payment_service: TicketPaymentService,
        seat_reservation_service: SeatReservationService,
        pricing: PricingTable = DEFAULT_PRICING_TABLE,
        currency_symbol: str = "£",
    ) -> None:
        self._payment_service = payment_service
        self._seat_reservation_service = seat_reservation_service
        self._pricing = pricing
        self._currency_symbol = currency_symbol

    def purchase_tickets(
        self,
        account_id: int | None,
        ticket_requests: Sequence[TicketTypeRequest] | None,
    ) -> PurchaseSummary:
        """Reserve seats and take payment for a set of ticket requests.

        Nothing is reserved or charged unless every rule passes. Seats are
        reserved before payment is taken; a gateway failure is not undone.

        Raises:
            InvalidPurchaseError: If the account or requests break a rule.
            UnexpectedTicketTypeError: If a ticket type has no price.
        """
        try:
            account = validate_purchase(account_id, ticket_requests)
        except InvalidPurchaseError as exc:
            logger.info("Purchase rejected for account %s: %s", account_id, exc.code.value)
            raise

        seats = total_seats(ticket_requests)
        amount = total_amount(ticket_requests, self._pricing)

        self._seat_reservation_service.reserve_seat(account.value, seats)
        self._payment_service.make_payment(account.value, amount)

        logger.info(
            "Tickets purchased [account_id=%d, seats=%d, amount=%s%d]",
            account.value,
            seats,
            self._currency_symbol,
            amount,
        )
        return PurchaseSummary(account_id=account.value, total_seats=seats, total_amount=amount)
