"""
Stock movements — state-changing operations (inbound, outbound, transfer,
product seeding, hub consolidation).

Each public method is one atomic unit: balances are read under row lock,
written, and exactly one LedgerEntry is appended, all in the same
transaction. Hub routing is resolved fresh inside that unit.
"""

import logging

from django.db import transaction

from hubstock.exceptions import StockError
from hubstock.hub import find_hub, is_hub
from hubstock.models.balance import StockBalance
from hubstock.models.enums import MovementType
from hubstock.models.ledger import LedgerEntry
from hubstock.models.product import Product
from hubstock.services.balances import StockBalances
from hubstock.services.base import check_quantity, get_product, get_warehouse, stock_unit
from hubstock.services.journal import StockJournal

logger = logging.getLogger('hubstock')

INITIAL_STOCK_NOTE = 'initial stock at creation'


class StockMovements:
    """State-changing stock movement methods."""

    @classmethod
    def inbound(cls, warehouse, product, quantity: int, note: str | None = None,
                caller_id: str | None = None) -> LedgerEntry:
        """
        Stock arriving at a warehouse.

        At the hub (or when there is no hub at all) this is a supplier
        receipt: the balance grows and an INBOUND entry is written.

        At a branch the units are pulled from the hub instead: the hub is
        decremented, the branch incremented, and the entry is a TRANSFER
        from the hub. Branches never create stock.

        Raises:
            StockError('INSUFFICIENT_STOCK'): Branch receipt larger than the
                hub's balance. Nothing changes.
            StockError('INVALID_QUANTITY'): quantity <= 0
            StockError('NOT_FOUND'): Unknown warehouse or product
        """
        check_quantity(quantity)

        with stock_unit('stock.inbound', warehouse=warehouse, product=product, qty=quantity):
            warehouse = get_warehouse(warehouse)
            product = get_product(product)
            hub = find_hub()

            if hub is None or is_hub(warehouse, hub):
                StockBalances.increment(product, warehouse, quantity)
                if note is None and caller_id:
                    note = f"Inbound by staff {caller_id} (Supplier)"
                entry = StockJournal.append(
                    MovementType.INBOUND, product, quantity,
                    target=warehouse, note=note, caller_id=caller_id,
                )
            else:
                # Raises INSUFFICIENT_STOCK naming the hub before the branch is touched
                StockBalances.decrement(product, hub, quantity)
                StockBalances.increment(product, warehouse, quantity)
                if note is None and caller_id:
                    note = f"Inbound by staff {caller_id} from {hub.name}"
                entry = StockJournal.append(
                    MovementType.TRANSFER, product, quantity,
                    source=hub, target=warehouse, note=note, caller_id=caller_id,
                )

        logger.info(
            "stock.inbound",
            extra={
                "product": product.sku,
                "qty": quantity,
                "warehouse": warehouse.code,
                "hub": hub.code if hub else None,
                "entry_type": entry.type,
                "entry_id": entry.pk,
            },
        )
        return entry

    @classmethod
    def outbound(cls, warehouse, product, quantity: int, note: str | None = None,
                 caller_id: str | None = None) -> LedgerEntry:
        """
        Stock leaving the network from a warehouse.

        Raises:
            StockError('INSUFFICIENT_STOCK'): If quantity > balance
            StockError('INVALID_QUANTITY'): If quantity <= 0
            StockError('NOT_FOUND'): Unknown warehouse or product

        Concurrency:
            - Runs under transaction.atomic()
            - Balance row is locked with select_for_update() before the check
        """
        check_quantity(quantity)

        with stock_unit('stock.outbound', warehouse=warehouse, product=product, qty=quantity):
            warehouse = get_warehouse(warehouse)
            product = get_product(product)

            remaining = StockBalances.decrement(product, warehouse, quantity)
            cls._cleanup_empty(product, warehouse, remaining)

            if note is None and caller_id:
                note = f"Outbound by staff {caller_id}"
            entry = StockJournal.append(
                MovementType.OUTBOUND, product, quantity,
                source=warehouse, note=note, caller_id=caller_id,
            )

        logger.info(
            "stock.outbound",
            extra={
                "product": product.sku,
                "qty": quantity,
                "warehouse": warehouse.code,
                "remaining": remaining,
                "entry_id": entry.pk,
            },
        )
        return entry

    @classmethod
    def transfer(cls, from_warehouse, to_warehouse, product, quantity: int,
                 note: str | None = None, caller_id: str | None = None) -> LedgerEntry:
        """
        Move stock between two warehouses.

        Same rules whichever side is the hub. The note is stored as given;
        no default is made up for transfers.

        Raises:
            StockError('INSUFFICIENT_STOCK'): If quantity > source balance
            StockError('INVALID_QUANTITY'): If quantity <= 0
            StockError('NOT_FOUND'): Unknown warehouse or product
        """
        check_quantity(quantity)

        with stock_unit('stock.transfer', source=from_warehouse, target=to_warehouse,
                        product=product, qty=quantity):
            source = get_warehouse(from_warehouse)
            target = get_warehouse(to_warehouse)
            product = get_product(product)

            remaining = StockBalances.decrement(product, source, quantity)
            cls._cleanup_empty(product, source, remaining)
            StockBalances.increment(product, target, quantity)

            entry = StockJournal.append(
                MovementType.TRANSFER, product, quantity,
                source=source, target=target, note=note, caller_id=caller_id,
            )

        logger.info(
            "stock.transfer",
            extra={
                "product": product.sku,
                "qty": quantity,
                "source": source.code,
                "target": target.code,
                "entry_id": entry.pk,
            },
        )
        return entry

    @classmethod
    def create_product(cls, sku: str, name: str, category: str = '',
                       price_q: int | None = None, initial_stock: int = 0,
                       warehouse=None, caller_id: str | None = None) -> Product:
        """
        Create a product, optionally with an opening balance.

        With initial_stock > 0 and a warehouse, the balance is seeded and an
        INITIAL_ADJUSTMENT entry written in the same transaction as the
        product itself.

        Raises:
            StockError('INVALID_QUANTITY'): initial_stock < 0 (no product created)
            StockError('NOT_FOUND'): Unknown warehouse (no product created)
        """
        initial_stock = initial_stock or 0
        if isinstance(initial_stock, bool) or not isinstance(initial_stock, int) or initial_stock < 0:
            raise StockError('INVALID_QUANTITY', requested=initial_stock)

        entry = None
        with stock_unit('stock.seed', sku=sku, warehouse=warehouse, qty=initial_stock):
            if warehouse is not None:
                warehouse = get_warehouse(warehouse)

            product = Product.objects.create(
                sku=sku,
                name=name,
                category=category or '',
                price_q=price_q,
            )

            if initial_stock > 0 and warehouse is not None:
                StockBalances.increment(product, warehouse, initial_stock)
                entry = StockJournal.append(
                    MovementType.INITIAL_ADJUSTMENT, product, initial_stock,
                    target=warehouse, note=INITIAL_STOCK_NOTE, caller_id=caller_id,
                )

        logger.info(
            "stock.seed",
            extra={
                "product": product.sku,
                "qty": initial_stock if entry else 0,
                "warehouse": warehouse.code if warehouse else None,
                "entry_id": entry.pk if entry else None,
            },
        )
        return product

    @classmethod
    def consolidate(cls, dry_run: bool = False, caller_id: str | None = None):
        """
        Pull every branch balance back into the hub.

        One TRANSFER per (product, branch), each in its own transaction. The
        quantity moved is whatever the branch holds when its row is locked,
        so concurrent movements never make the sweep overdraw.

        Args:
            dry_run: Only report the balances that would move

        Returns:
            dry_run: list of StockBalance that would move
            otherwise: list of LedgerEntry written

        Raises:
            StockError('NOT_FOUND'): No warehouses exist, so there is no hub
        """
        hub = find_hub()
        if hub is None:
            raise StockError('NOT_FOUND', "No hub warehouse to consolidate into",
                             entity='warehouse', id=None)

        pending = list(
            StockBalance.objects.positive()
            .exclude(warehouse=hub)
            .select_related('product', 'warehouse')
            .order_by('warehouse__code', 'product__sku')
        )
        if dry_run:
            return pending

        entries = []
        for balance in pending:
            entry = cls._consolidate_one(balance, hub, caller_id)
            if entry is not None:
                entries.append(entry)

        logger.info(
            "stock.consolidate",
            extra={"hub": hub.code, "candidates": len(pending), "moved": len(entries)},
        )
        return entries

    # ══════════════════════════════════════════════════════════════
    # INTERNALS
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def _consolidate_one(cls, balance, hub, caller_id):
        with transaction.atomic():
            quantity = StockBalances.get_balance(balance.product, balance.warehouse, lock=True)
            if quantity <= 0:
                return None
            note = f"AUTO-CONSOLIDATION: moved from {balance.warehouse.name} to {hub.name}"
            return cls.transfer(
                balance.warehouse, hub, balance.product, quantity,
                note=note, caller_id=caller_id,
            )

    @classmethod
    def _cleanup_empty(cls, product, warehouse, remaining: int) -> bool:
        """
        Drop a branch balance row that just reached zero while the hub is
        also empty for the product. The hub's own row is never dropped here.
        """
        if remaining != 0:
            return False

        hub = find_hub()
        if hub is None or is_hub(warehouse, hub):
            return False
        if StockBalances.get_balance(product, hub, lock=True) != 0:
            return False

        removed = StockBalances.delete(product, warehouse)
        if removed:
            logger.info(
                "stock.cleanup",
                extra={"product": product.sku, "warehouse": warehouse.code, "hub": hub.code},
            )
        return removed
