"""
Hubstock — warehouse stock ledger with hub consolidation.

Every branch warehouse is supplied by a single hub. Quantities live in
StockBalance rows; every change is recorded as an immutable LedgerEntry.

Usage:
    from hubstock import stock, StockError

    stock.inbound(hub, product, 50)
    stock.inbound(branch, product, 5)    # TRANSFER hub -> branch
    stock.total_stock(product)           # 50
"""


def __getattr__(name):
    """Lazy import to avoid circular imports during app loading."""
    if name == 'stock':
        from hubstock.service import Stock
        return Stock
    elif name == 'StockError':
        from hubstock.exceptions import StockError
        return StockError
    elif name == 'Warehouse':
        from hubstock.models.warehouse import Warehouse
        return Warehouse
    elif name == 'Product':
        from hubstock.models.product import Product
        return Product
    elif name == 'StockBalance':
        from hubstock.models.balance import StockBalance
        return StockBalance
    elif name == 'LedgerEntry':
        from hubstock.models.ledger import LedgerEntry
        return LedgerEntry
    elif name == 'MovementType':
        from hubstock.models.enums import MovementType
        return MovementType
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'stock',
    'StockError',
    'Warehouse',
    'Product',
    'StockBalance',
    'LedgerEntry',
    'MovementType',
]

__version__ = '0.1.0'
