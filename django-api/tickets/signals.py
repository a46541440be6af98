"""Django signals for resetting cached configuration."""

from django.core.signals import setting_changed
from django.dispatch import receiver

from tickets.conf import get_pricing_table


@receiver(setting_changed)
def reset_ticket_settings(sender, setting, **kwargs):
    """Drop the cached pricing table when TICKETS is overridden."""
    if setting == "TICKETS":
        get_pricing_table.cache_clear()
