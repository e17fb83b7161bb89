"""
StockBalance model — Quantity of one product at one warehouse.
"""

from django.db import models
from django.db.models import Q
from django.utils.translation import gettext_lazy as _


class StockBalanceQuerySet(models.QuerySet):
    """QuerySet with helper methods for balance queries."""

    def for_product(self, product):
        """Filter balances for a specific product."""
        return self.filter(product=product)

    def at_warehouse(self, warehouse):
        """Filter by warehouse."""
        return self.filter(warehouse=warehouse)

    def positive(self):
        """Only balances that actually hold stock."""
        return self.filter(quantity__gt=0)


class StockBalance(models.Model):
    """
    Quantity of a product at a warehouse.

    Rules:
    - One row per (product, warehouse)
    - quantity never goes below zero (checked under row lock and by a
      database constraint)
    - Written only by the movement engine; every change is paired with a
      LedgerEntry in the same transaction
    - A branch row may be removed once it and the hub's row are both empty
    """

    product = models.ForeignKey(
        'hubstock.Product',
        on_delete=models.PROTECT,
        related_name='balances',
        verbose_name=_('Product'),
    )
    warehouse = models.ForeignKey(
        'hubstock.Warehouse',
        on_delete=models.PROTECT,
        related_name='balances',
        verbose_name=_('Warehouse'),
    )
    quantity = models.PositiveIntegerField(
        default=0,
        verbose_name=_('Quantity'),
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = StockBalanceQuerySet.as_manager()

    class Meta:
        verbose_name = _('Stock balance')
        verbose_name_plural = _('Stock balances')
        constraints = [
            models.UniqueConstraint(
                fields=['product', 'warehouse'],
                name='unique_balance_product_warehouse',
            ),
            models.CheckConstraint(
                condition=Q(quantity__gte=0),
                name='balance_quantity_non_negative',
            ),
        ]
        indexes = [
            models.Index(fields=['warehouse', 'quantity'], name='hubstock_st_warehou_5c1d2e_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.product} [{self.warehouse.code}]: {self.quantity}"
