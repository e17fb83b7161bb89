"""Django app configuration for Hubstock."""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class HubstockConfig(AppConfig):
    """Configuration for Hubstock app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "hubstock"
    verbose_name = _("Warehouse Stock")
