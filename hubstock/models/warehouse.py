"""
Warehouse model — Where stock exists.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class Warehouse(models.Model):
    """
    A physical warehouse in the network.

    Warehouses are master data, created and maintained outside the
    movement engine. Which warehouse acts as the hub is never stored: it is
    resolved from codes and names on every call (see hubstock.hub).

    Examples:
        Warehouse.objects.create(code='WH-GUDANG-UTAMA', name='Gudang Utama', location='Jakarta')
        Warehouse.objects.create(code='WH-BDG', name='Cabang Bandung', location='Bandung')
    """

    name = models.CharField(
        max_length=100,
        verbose_name=_('Name'),
    )
    location = models.CharField(
        max_length=255,
        blank=True,
        default='',
        verbose_name=_('Location'),
    )
    code = models.CharField(
        unique=True,
        max_length=50,
        verbose_name=_('Code'),
        help_text=_('Unique identifier (e.g. WH-MAIN)'),
    )
    capacity = models.PositiveIntegerField(
        null=True,
        blank=True,
        verbose_name=_('Capacity'),
        help_text=_('Advisory unit ceiling. Not enforced on movements.'),
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Warehouse')
        verbose_name_plural = _('Warehouses')
        ordering = ['code']

    def __str__(self) -> str:
        return self.name
