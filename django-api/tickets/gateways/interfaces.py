"""Gateway interfaces for the external systems a purchase talks to.

Gateways must be swappable so the service can be tested with fakes that
record calls instead of reserving seats or taking payments.
"""

from abc import ABC, abstractmethod


class SeatReservationService(ABC):
    """Interface for the seat booking system."""

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """Reserve the given number of seats against an account."""
        ...


class TicketPaymentService(ABC):
    """Interface for the payment gateway."""

    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """Charge the given amount to an account."""
        ...
