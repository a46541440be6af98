from django.apps import AppConfig


class TicketsConfig(AppConfig):
    name = "tickets"
    verbose_name = "Cinema tickets"

    def ready(self) -> None:
        from tickets import signals  # noqa: F401
        from tickets.conf import get_pricing_table

        # Fail at startup rather than on the first purchase.
        get_pricing_table()
