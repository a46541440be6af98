"""Unit tests for TicketService.

These test orchestration: gateways are only called for valid purchases,
once each, seats before payment.
Run with: pytest tests/test_services.py -v
"""

import logging

import pytest

from tickets.domain import PricingTable, PurchaseSummary, TicketType, TicketTypeRequest
from tickets.domain.errors import InvalidPurchaseError, UnexpectedTicketTypeError
from tickets.gateways import SeatReservationService, TicketPaymentService
from tickets.services import TicketService

ADULT = TicketType.ADULT
CHILD = TicketType.CHILD
INFANT = TicketType.INFANT


class TestPurchaseTickets:
    """Tests for successful purchases."""

    def test_adults_and_child(self, ticket_service, gateway_calls):
        """2 adults and 1 child reserve 3 seats and pay 65."""
        summary = ticket_service.purchase_tickets(
            1, [TicketTypeRequest(ADULT, 2), TicketTypeRequest(CHILD, 1)]
        )

        assert gateway_calls == [("reserve_seat", 1, 3), ("make_payment", 1, 65)]
        assert summary == PurchaseSummary(account_id=1, total_seats=3, total_amount=65)

    def test_mixed_ticket_types(self, ticket_service, gateway_calls):
        """2 of each type reserve 4 seats and pay 80."""
        ticket_service.purchase_tickets(
            1,
            [
                TicketTypeRequest(ADULT, 2),
                TicketTypeRequest(CHILD, 2),
                TicketTypeRequest(INFANT, 2),
            ],
        )

        assert gateway_calls == [("reserve_seat", 1, 4), ("make_payment", 1, 80)]

    def test_zero_ticket_purchase_still_calls_gateways(self, ticket_service, gateway_calls):
        ticket_service.purchase_tickets(5, [TicketTypeRequest(ADULT, 0)])

        assert gateway_calls == [("reserve_seat", 5, 0), ("make_payment", 5, 0)]

    def test_uses_injected_pricing(self, payment_service, seat_reservation_service, gateway_calls):
        service = TicketService(
            payment_service=payment_service,
            seat_reservation_service=seat_reservation_service,
            pricing=PricingTable(prices={ADULT: 10, CHILD: 4, INFANT: 0}),
        )

        service.purchase_tickets(3, [TicketTypeRequest(ADULT, 1), TicketTypeRequest(CHILD, 2)])

        assert gateway_calls[-1] == ("make_payment", 3, 18)

    def test_logs_purchase(self, ticket_service, caplog):
        with caplog.at_level(logging.INFO, logger="tickets"):
            ticket_service.purchase_tickets(1, [TicketTypeRequest(ADULT, 1)])

        assert "Tickets purchased [account_id=1, seats=1, amount=£25]" in caplog.text


class TestRejectedPurchases:
    """Tests that invalid purchases have no side effects."""

    @pytest.mark.parametrize(
        "account_id,requests",
        [
            (0, [TicketTypeRequest(ADULT, 1)]),
            (None, [TicketTypeRequest(ADULT, 1)]),
            (-1, [TicketTypeRequest(ADULT, 1)]),
            (1, []),
            (1, None),
            (1, [TicketTypeRequest(ADULT, -1)]),
            (1, [TicketTypeRequest(ADULT, 1.5)]),
            (1, [TicketTypeRequest(None, 1)]),
            (1, [TicketTypeRequest(ADULT, 26)]),
            (1, [TicketTypeRequest(ADULT, 13), TicketTypeRequest(CHILD, 13)]),
            (1, [TicketTypeRequest(CHILD, 1)]),
            (1, [TicketTypeRequest(INFANT, 1)]),
            (1, [TicketTypeRequest(CHILD, 1), TicketTypeRequest(INFANT, 1)]),
        ],
    )
    def test_rejection_makes_no_gateway_calls(
        self, ticket_service, gateway_calls, account_id, requests
    ):
        with pytest.raises(InvalidPurchaseError):
            ticket_service.purchase_tickets(account_id, requests)

        assert gateway_calls == []

    def test_logs_rejection_code(self, ticket_service, caplog):
        with caplog.at_level(logging.INFO, logger="tickets"):
            with pytest.raises(InvalidPurchaseError):
                ticket_service.purchase_tickets(1, [TicketTypeRequest(CHILD, 1)])

        assert "UNACCOMPANIED_MINOR" in caplog.text

    def test_unpriced_type_fails_before_any_gateway_call(
        self, payment_service, seat_reservation_service, gateway_calls
    ):
        service = TicketService(
            payment_service=payment_service,
            seat_reservation_service=seat_reservation_service,
            pricing=PricingTable(prices={ADULT: 25}),
        )

        with pytest.raises(UnexpectedTicketTypeError):
            service.purchase_tickets(1, [TicketTypeRequest(ADULT, 1), TicketTypeRequest(CHILD, 1)])

        assert gateway_calls == []


class FailingSeatReservationService(SeatReservationService):
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        raise ConnectionError("seat booking unavailable")


class FailingTicketPaymentService(TicketPaymentService):
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        raise ConnectionError("payment gateway unavailable")


class TestGatewayFailures:
    """Gateway errors propagate unchanged and stop the purchase."""

    def test_reservation_failure_skips_payment(self, payment_service, gateway_calls):
        service = TicketService(
            payment_service=payment_service,
            seat_reservation_service=FailingSeatReservationService(),
        )

        with pytest.raises(ConnectionError):
            service.purchase_tickets(1, [TicketTypeRequest(ADULT, 1)])

        assert gateway_calls == []

    def test_payment_failure_leaves_reservation_in_place(
        self, seat_reservation_service, gateway_calls
    ):
        service = TicketService(
            payment_service=FailingTicketPaymentService(),
            seat_reservation_service=seat_reservation_service,
        )

        with pytest.raises(ConnectionError, match="payment gateway unavailable"):
            service.purchase_tickets(1, [TicketTypeRequest(ADULT, 1)])

        assert gateway_calls == [("reserve_seat", 1, 1)]
