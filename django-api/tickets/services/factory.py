"""Build a TicketService wired from Django settings."""

from tickets.conf import get_gateway_class, get_pricing_table, ticket_setting
from tickets.gateways import SeatReservationService, TicketPaymentService
from tickets.services.ticket_service import TicketService


def get_ticket_service() -> TicketService:
    payment_class = get_gateway_class("PAYMENT_SERVICE", TicketPaymentService)
    seat_class = get_gateway_class("SEAT_RESERVATION_SERVICE", SeatReservationService)
    return TicketService(
        payment_service=payment_class(),
        seat_reservation_service=seat_class(),
        pricing=get_pricing_table(),
        currency_symbol=ticket_setting("CURRENCY_SYMBOL"),
    )
