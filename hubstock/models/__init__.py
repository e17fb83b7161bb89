"""
Hubstock Models.

Core models for warehouse stock:
- Warehouse: Where stock exists
- Product: What is stocked
- StockBalance: Quantity per (product, warehouse)
- LedgerEntry: Immutable ledger of movements
"""

from hubstock.models.balance import StockBalance
from hubstock.models.enums import MovementType
from hubstock.models.ledger import LedgerEntry
from hubstock.models.product import Product
from hubstock.models.warehouse import Warehouse

__all__ = [
    'MovementType',
    'Warehouse',
    'Product',
    'StockBalance',
    'LedgerEntry',
]
