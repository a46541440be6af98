from tickets.services.factory import get_ticket_service
from tickets.services.ticket_service import TicketService

__all__ = ["TicketService", "get_ticket_service"]
