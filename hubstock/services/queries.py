"""
Stock queries — read-only operations.

All methods are classmethod on Stock and use no locking. Nothing is
cached; every call reads the current table.
"""

from django.db.models import Sum
from django.db.models.functions import Coalesce

from hubstock.conf import hubstock_settings
from hubstock.models.balance import StockBalance
from hubstock.models.product import Product
from hubstock.models.warehouse import Warehouse
from hubstock.services.base import pk_of
from hubstock.services.journal import StockJournal


class StockQueries:
    """Read-only stock query methods."""

    @classmethod
    def total_stock(cls, product) -> int:
        """
        Sum of the product's balances across all warehouses.

        Args:
            product: Product instance or pk

        Returns:
            int, 0 when the product has no balances or the id matches nothing
        """
        return StockBalance.objects.filter(product_id=pk_of(Product, product)).aggregate(
            t=Coalesce(Sum('quantity'), 0)
        )['t']

    @classmethod
    def is_low_stock(cls, product) -> bool:
        """True when total stock is below LOW_STOCK_THRESHOLD."""
        return cls.total_stock(product) < hubstock_settings.LOW_STOCK_THRESHOLD

    @classmethod
    def recent_transactions(cls, limit: int | None = None):
        """Ledger entries newest first; None or <= 0 returns them all."""
        return StockJournal.list_recent(limit)

    @classmethod
    def balance(cls, product, warehouse) -> int:
        """Quantity of product at warehouse (0 if no row)."""
        return (
            StockBalance.objects.filter(
                product_id=pk_of(Product, product),
                warehouse_id=pk_of(Warehouse, warehouse),
            )
            .values_list('quantity', flat=True)
            .first()
        ) or 0

    @classmethod
    def warehouse_stock(cls, warehouse):
        """Balances held at a warehouse, largest first."""
        return (
            StockBalance.objects.at_warehouse(pk_of(Warehouse, warehouse))
            .select_related('product', 'warehouse')
            .order_by('-quantity', 'product__sku')
        )

    @classmethod
    def product_stock(cls, product):
        """Balances of a product per warehouse."""
        return (
            StockBalance.objects.for_product(pk_of(Product, product))
            .select_related('product', 'warehouse')
            .order_by('warehouse__code')
        )

    @classmethod
    def low_stock_products(cls):
        """Active products whose total stock is below LOW_STOCK_THRESHOLD."""
        return (
            Product.objects.active()
            .annotate(total_stock=Coalesce(Sum('balances__quantity'), 0))
            .filter(total_stock__lt=hubstock_settings.LOW_STOCK_THRESHOLD)
            .order_by('total_stock', 'sku')
        )
