"""
Stock journal — append-only log of LedgerEntry records.

There is no update or delete here. The only write besides append() is
detach_warehouse(), which clears references to a warehouse that is being
removed so its history stays readable.
"""

import logging

from django.db import transaction

from hubstock.models.ledger import LedgerEntry

logger = logging.getLogger('hubstock')


class StockJournal:
    """Append and read ledger entries."""

    @classmethod
    def append(cls, type, product, quantity: int, source=None, target=None,
               note: str | None = None, caller_id: str | None = None) -> LedgerEntry:
        """
        Write one ledger entry.

        Returns:
            The saved entry, with id and timestamp assigned
        """
        return LedgerEntry.objects.create(
            type=type,
            product=product,
            source_warehouse=source,
            target_warehouse=target,
            quantity=quantity,
            note=note,
            caller_id=caller_id or '',
        )

    @classmethod
    def list_recent(cls, limit: int | None = None):
        """
        Entries newest first.

        Args:
            limit: Maximum number of entries; None or <= 0 means all
        """
        qs = LedgerEntry.objects.select_related(
            'product', 'source_warehouse', 'target_warehouse'
        ).newest_first()
        if limit and limit > 0:
            return list(qs[:limit])
        return list(qs)

    @classmethod
    def detach_warehouse(cls, warehouse) -> int:
        """
        Null out source/target references to warehouse.

        Goes through QuerySet.update(), which bypasses LedgerEntry.save(),
        so the entries keep their type, quantity and timestamp.

        Returns:
            Number of references cleared
        """
        with transaction.atomic():
            sources = LedgerEntry.objects.filter(source_warehouse=warehouse).update(
                source_warehouse=None
            )
            targets = LedgerEntry.objects.filter(target_warehouse=warehouse).update(
                target_warehouse=None
            )
        logger.info(
            "warehouse.detach",
            extra={
                "warehouse": warehouse.code,
                "source_refs": sources,
                "target_refs": targets,
            },
        )
        return sources + targets
