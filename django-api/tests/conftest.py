"""Pytest configuration and shared fixtures."""

import pytest

from tickets.gateways import SeatReservationService, TicketPaymentService
from tickets.services import TicketService


class RecordingSeatReservationService(SeatReservationService):
    """Seat gateway that records calls into a shared log."""

    def __init__(self, calls: list[tuple]) -> None:
        self.calls = calls

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        self.calls.append(("reserve_seat", account_id, total_seats_to_allocate))


class RecordingTicketPaymentService(TicketPaymentService):
    """Payment gateway that records calls into a shared log."""

    def __init__(self, calls: list[tuple]) -> None:
        self.calls = calls

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        self.calls.append(("make_payment", account_id, total_amount_to_pay))


@pytest.fixture
def gateway_calls() -> list[tuple]:
    return []


@pytest.fixture
def seat_reservation_service(gateway_calls) -> RecordingSeatReservationService:
    return RecordingSeatReservationService(gateway_calls)


@pytest.fixture
def payment_service(gateway_calls) -> RecordingTicketPaymentService:
    return RecordingTicketPaymentService(gateway_calls)


@pytest.fixture
def ticket_service(payment_service, seat_reservation_service) -> TicketService:
    return TicketService(
        payment_service=payment_service,
        seat_reservation_service=seat_reservation_service,
    )
