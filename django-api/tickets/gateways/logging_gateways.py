"""Default gateway implementations.

The real seat booking and payment systems live outside this project.
These stand-ins only record what would have been sent to them.
"""

import logging

from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)


class LoggingSeatReservationService(SeatReservationService):
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        logger.info(
            "Reserving %d seat(s) for account %d", total_seats_to_allocate, account_id
        )


class LoggingTicketPaymentService(TicketPaymentService):
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        logger.info("Taking payment of %d from account %d", total_amount_to_pay, account_id)
