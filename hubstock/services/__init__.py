"""
Stock services — modular organization of stock operations.

    from hubstock.services import StockQueries, StockMovements, StockCatalog
"""

from hubstock.services.balances import StockBalances
from hubstock.services.catalog import StockCatalog
from hubstock.services.journal import StockJournal
from hubstock.services.movements import StockMovements
from hubstock.services.queries import StockQueries

__all__ = [
    'StockBalances',
    'StockJournal',
    'StockQueries',
    'StockMovements',
    'StockCatalog',
]
