"""Domain primitives that enforce validity at creation time."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Self

from tickets.domain.errors import UnexpectedTicketTypeError
from tickets.domain.models import TicketType

MAX_TICKETS_PER_PURCHASE = 25


@dataclass(frozen=True)
class AccountId:
    """Positive integer identifying a customer account."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Account ID must be an integer")
        if self.value <= 0:
            raise ValueError("Account ID must be positive")

    @classmethod
    def from_value(cls, value: object) -> Self:
        if value is None:
            raise ValueError("Account ID is required")
        return cls(value=value)


@dataclass(frozen=True)
class PricingTable:
    """Read-only unit price per ticket type, in whole currency units."""

    prices: Mapping[TicketType, int]

    def __post_init__(self) -> None:
        for ticket_type, price in self.prices.items():
            if isinstance(price, bool) or not isinstance(price, int):
                raise ValueError(f"Price for {ticket_type.name} must be an integer")
            if price < 0:
                raise ValueError(f"Price for {ticket_type.name} cannot be negative")
        object.__setattr__(self, "prices", MappingProxyType(dict(self.prices)))

    def __hash__(self) -> int:
        return hash(frozenset(self.prices.items()))

    def unit_price(self, ticket_type: TicketType) -> int:
        """Return the price of one ticket of the given type.

        Raises:
            UnexpectedTicketTypeError: If the type has no price in this table.
        """
        try:
            return self.prices[ticket_type]
        except KeyError:
            raise UnexpectedTicketTypeError(ticket_type) from None


DEFAULT_PRICING_TABLE = PricingTable(
    prices={
        TicketType.ADULT: 25,
        TicketType.CHILD: 15,
        TicketType.INFANT: 0,
    }
)
