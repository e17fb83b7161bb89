"""
Stock Service — The single public interface for all stock operations.

Usage:
    from hubstock import stock, StockError

    stock.inbound(hub, product, 100, caller_id='u-1')       # supplier receipt
    stock.inbound(branch, product, 20, caller_id='u-1')     # pulled from hub
    stock.outbound(branch, product, 5, note='Order #881')
    stock.transfer(branch, other_branch, product, 3)
    stock.total_stock(product)                              # 95
"""

from hubstock.services.catalog import StockCatalog
from hubstock.services.movements import StockMovements
from hubstock.services.queries import StockQueries


class Stock(StockQueries, StockMovements, StockCatalog):
    """
    Single interface for all stock operations.

    Warehouse and product arguments accept model instances or primary keys.

    IMPORTANT: All state-changing methods run as one atomic transaction
    and append exactly one ledger entry (create_product appends one only
    when it seeds stock). See each method's docstring.
    """
