"""
Enums for Hubstock models.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class MovementType(models.TextChoices):
    """
    Kind of ledger entry.

    INBOUND:            Supplier receipt at the hub (or at any warehouse when
                        no hub exists). No source, always a target.
    OUTBOUND:           Stock leaving the network. Source only.
    TRANSFER:           Stock moving between two warehouses, including a
                        branch receipt pulled from the hub.
    INITIAL_ADJUSTMENT: Opening balance seeded when a product is created.
    """
    INBOUND = 'INBOUND', _('Inbound')
    OUTBOUND = 'OUTBOUND', _('Outbound')
    TRANSFER = 'TRANSFER', _('Transfer')
    INITIAL_ADJUSTMENT = 'INITIAL_ADJUSTMENT', _('Initial adjustment')
