from tickets.domain.models import PurchaseSummary, TicketType, TicketTypeRequest
from tickets.domain.value_objects import (
    DEFAULT_PRICING_TABLE,
    MAX_TICKETS_PER_PURCHASE,
    AccountId,
    PricingTable,
)

__all__ = [
    "PurchaseSummary",
    "TicketType",
    "TicketTypeRequest",
    "AccountId",
    "PricingTable",
    "DEFAULT_PRICING_TABLE",
    "MAX_TICKETS_PER_PURCHASE",
]
