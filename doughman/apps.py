"""
Django Doughman app configuration.
"""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class DoughmanConfig(AppConfig):
    """Doughman application configuration."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "doughman"
    verbose_name = _("Recipes & Materials")

    def ready(self):
        """Import signal handlers when app is ready."""
        # Import handlers to register them
        from doughman.signals import handlers  # noqa: F401
