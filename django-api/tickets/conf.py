"""Access to the TICKETS settings block, with defaults.

Example::

    TICKETS = {
        "PRICES": {"ADULT": 25, "CHILD": 15, "INFANT": 0},
        "CURRENCY_SYMBOL": "£",
        "SEAT_RESERVATION_SERVICE": "tickets.gateways.LoggingSeatReservationService",
        "PAYMENT_SERVICE": "tickets.gateways.LoggingTicketPaymentService",
    }
"""

import functools
from collections.abc import Mapping
from typing import Any

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from tickets.domain import PricingTable, TicketType

DEFAULTS: dict[str, Any] = {
    "PRICES": {"ADULT": 25, "CHILD": 15, "INFANT": 0},
    "CURRENCY_SYMBOL": "£",
    "SEAT_RESERVATION_SERVICE": "tickets.gateways.LoggingSeatReservationService",
    "PAYMENT_SERVICE": "tickets.gateways.LoggingTicketPaymentService",
}


def ticket_setting(name: str) -> Any:
    """Return a TICKETS setting, falling back to its default."""
    user_settings = getattr(settings, "TICKETS", None) or {}
    return user_settings.get(name, DEFAULTS[name])


@functools.cache
def get_pricing_table() -> PricingTable:
    """Return the pricing table, built once per process.

    Raises:
        ImproperlyConfigured: If PRICES is not a mapping, names an unknown
            type, leaves a type out or holds a bad price.
    """
    configured = ticket_setting("PRICES")
    if not isinstance(configured, Mapping):
        raise ImproperlyConfigured("TICKETS['PRICES'] must be a mapping")
    prices = {}
    for name, price in configured.items():
        try:
            ticket_type = TicketType[name]
        except KeyError:
            raise ImproperlyConfigured(
                f"TICKETS['PRICES'] has unknown ticket type {name!r}"
            ) from None
        prices[ticket_type] = price
    missing = [t.name for t in TicketType if t not in prices]
    if missing:
        raise ImproperlyConfigured(
            f"TICKETS['PRICES'] has no price for {', '.join(missing)}"
        )
    try:
        return PricingTable(prices=prices)
    except ValueError as exc:
        raise ImproperlyConfigured(f"TICKETS['PRICES'] is invalid: {exc}") from exc


def get_gateway_class(name: str, interface: type) -> type:
    path = ticket_setting(name)
    try:
        gateway_class = import_string(path)
    except ImportError as exc:
        raise ImproperlyConfigured(f"TICKETS[{name!r}] cannot import {path!r}") from exc
    if not (isinstance(gateway_class, type) and issubclass(gateway_class, interface)):
        raise ImproperlyConfigured(
            f"TICKETS[{name!r}] must name a {interface.__name__} subclass"
        )
    return gateway_class
