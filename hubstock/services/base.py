"""
Shared helpers for stock services: argument checks, lookups and the
atomic unit every state-changing operation runs in.
"""

import logging
from contextlib import contextmanager

from django.core.exceptions import ValidationError
from django.db import InterfaceError, OperationalError, transaction

from hubstock.exceptions import StockError
from hubstock.models.product import Product
from hubstock.models.warehouse import Warehouse

logger = logging.getLogger('hubstock')


def check_quantity(quantity) -> None:
    """Raise INVALID_QUANTITY unless quantity is a positive integer."""
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise StockError('INVALID_QUANTITY', requested=quantity)


def pk_of(model, value):
    """
    Primary key of an instance or raw id, coerced to the model's pk type.

    Ids are opaque to callers, so anything that cannot be a pk of model
    ('abc', a dict) comes back as None, which matches no row.
    """
    pk = getattr(value, 'pk', value)
    if pk is None:
        return None
    try:
        return model._meta.pk.to_python(pk)
    except (TypeError, ValueError, ValidationError):
        return None


def get_product(product) -> Product:
    """
    Load an active product from an instance or a pk.

    Raises:
        StockError('NOT_FOUND'): Missing, soft-deleted or malformed product id
    """
    raw = getattr(product, 'pk', product)
    pk = pk_of(Product, product)
    found = Product.objects.active().filter(pk=pk).first() if pk is not None else None
    if found is None:
        raise StockError('NOT_FOUND', f"Product {raw} not found", entity='product', id=raw)
    return found


def get_warehouse(warehouse) -> Warehouse:
    """
    Load a warehouse from an instance or a pk.

    Raises:
        StockError('NOT_FOUND'): Missing warehouse or malformed warehouse id
    """
    raw = getattr(warehouse, 'pk', warehouse)
    pk = pk_of(Warehouse, warehouse)
    found = Warehouse.objects.filter(pk=pk).first() if pk is not None else None
    if found is None:
        raise StockError('NOT_FOUND', f"Warehouse {raw} not found", entity='warehouse', id=raw)
    return found


def _describe(value):
    """Loggable form of a model instance or raw id."""
    return str(getattr(value, 'pk', value))


@contextmanager
def stock_unit(operation: str, **context):
    """
    Run a block as one atomic unit.

    Everything inside commits together or not at all. Business errors
    propagate unchanged; database connectivity failures become
    StockError('STORE_UNAVAILABLE'), which is safe to retry because the
    transaction was rolled back.

    Usage:
        with stock_unit('stock.outbound', product=product, qty=5):
            ...
    """
    log_context = {k: _describe(v) for k, v in context.items()}
    try:
        with transaction.atomic():
            yield
    except StockError as exc:
        logger.warning(
            "stock.rejected",
            extra={"operation": operation, "code": exc.code, **log_context},
        )
        raise
    except (OperationalError, InterfaceError) as exc:
        logger.warning(
            "stock.store_unavailable",
            extra={"operation": operation, **log_context},
            exc_info=True,
        )
        raise StockError('STORE_UNAVAILABLE', operation=operation) from exc
