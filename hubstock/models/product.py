"""
Product model — What is stocked.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class ProductQuerySet(models.QuerySet):

    def active(self):
        """Products that have not been soft-deleted."""
        return self.filter(is_deleted=False)


class Product(models.Model):
    """
    Stocked product.

    Prices are kept in minor currency units (price_q = cents) so totals
    never drift through floating point.
    """

    sku = models.CharField(
        unique=True,
        max_length=64,
        verbose_name=_('SKU'),
    )
    name = models.CharField(
        max_length=200,
        verbose_name=_('Name'),
    )
    category = models.CharField(
        max_length=100,
        blank=True,
        default='',
        verbose_name=_('Category'),
    )
    price_q = models.BigIntegerField(
        null=True,
        blank=True,
        verbose_name=_('Price (minor units)'),
    )
    is_deleted = models.BooleanField(
        default=False,
        db_index=True,
        verbose_name=_('Deleted'),
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ProductQuerySet.as_manager()

    class Meta:
        verbose_name = _('Product')
        verbose_name_plural = _('Products')
        ordering = ['sku']

    def __str__(self) -> str:
        return f"{self.sku} {self.name}"
