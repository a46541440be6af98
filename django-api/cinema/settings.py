"""Django settings for the cinema project.

Only what the tickets app needs: no database, no URLs, no middleware.
"""

import os

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "django-insecure-cinema-tickets")
DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"

INSTALLED_APPS = [
    "tickets",
]

DATABASES = {}

USE_TZ = True

TICKETS = {
    "PRICES": {"ADULT": 25, "CHILD": 15, "INFANT": 0},
    "CURRENCY_SYMBOL": "£",
    "SEAT_RESERVATION_SERVICE": "tickets.gateways.LoggingSeatReservationService",
    "PAYMENT_SERVICE": "tickets.gateways.LoggingTicketPaymentService",
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "tickets": {
            "handlers": ["console"],
            "level": os.environ.get("TICKETS_LOG_LEVEL", "INFO"),
        },
    },
}
