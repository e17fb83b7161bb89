"""
Master-data operations that touch stock invariants.

Creating and editing warehouses or products is plain ORM work done by the
host project. Deleting them is not: a warehouse may only go once it holds
nothing, and its ledger history must survive it; a product is only ever
soft-deleted, and only when no stock is left.
"""

import logging

from hubstock.exceptions import StockError
from hubstock.models.balance import StockBalance
from hubstock.models.warehouse import Warehouse
from hubstock.services.base import get_product, get_warehouse, stock_unit
from hubstock.services.journal import StockJournal

logger = logging.getLogger('hubstock')


class StockCatalog:
    """Guarded deletes for warehouses and products."""

    @classmethod
    def delete_warehouse(cls, warehouse) -> int:
        """
        Delete a warehouse that holds no stock.

        Empty balance rows are removed and ledger entries referencing the
        warehouse are detached (source/target set to NULL), all in one
        transaction.

        Returns:
            Number of ledger references detached

        Raises:
            StockError('WAREHOUSE_NOT_EMPTY'): Any balance is still positive
            StockError('NOT_FOUND'): Unknown warehouse
        """
        with stock_unit('warehouse.delete', warehouse=warehouse):
            warehouse = get_warehouse(warehouse)
            warehouse = Warehouse.objects.select_for_update().get(pk=warehouse.pk)

            balances = list(
                StockBalance.objects.select_for_update().filter(warehouse=warehouse)
            )
            held = sum(b.quantity for b in balances)
            if held > 0:
                raise StockError(
                    'WAREHOUSE_NOT_EMPTY',
                    warehouse=warehouse.code,
                    quantity=held,
                )

            StockBalance.objects.filter(warehouse=warehouse).delete()
            detached = StockJournal.detach_warehouse(warehouse)
            code = warehouse.code
            warehouse.delete()

        logger.info("warehouse.delete", extra={"warehouse": code, "detached": detached})
        return detached

    @classmethod
    def delete_product(cls, product):
        """
        Soft-delete a product with no stock left anywhere.

        Raises:
            StockError('PRODUCT_NOT_EMPTY'): Total stock is still positive
            StockError('NOT_FOUND'): Unknown or already deleted product
        """
        with stock_unit('product.delete', product=product):
            product = get_product(product)
            balances = StockBalance.objects.select_for_update().filter(product=product)
            total = sum(b.quantity for b in balances)
            if total > 0:
                raise StockError('PRODUCT_NOT_EMPTY', product=product.sku, quantity=total)

            product.is_deleted = True
            product.save(update_fields=['is_deleted', 'updated_at'])

        logger.info("product.delete", extra={"product": product.sku})
        return product
