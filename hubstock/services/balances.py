"""
Stock balances — the per-(product, warehouse) quantity table.

Every method joins the caller's transaction.atomic() block (each opens its
own atomic block, which nests as a savepoint). Decrements lock the row and
check the quantity after the lock, so two concurrent movements can never
both spend the same units.
"""

from django.db import transaction
from django.db.models import F
from django.utils import timezone

from hubstock.exceptions import StockError
from hubstock.models.balance import StockBalance


class StockBalances:
    """Reads and writes of StockBalance rows."""

    @classmethod
    def get_balance(cls, product, warehouse, lock=False) -> int:
        """
        Current quantity, 0 when no row exists.

        With lock=True the row is read with select_for_update(); use it
        when the value decides a later write in the same transaction.
        """
        qs = StockBalance.objects.filter(product=product, warehouse=warehouse)
        if lock:
            qs = qs.select_for_update()
        quantity = qs.values_list('quantity', flat=True).first()
        return quantity or 0

    @classmethod
    def increment(cls, product, warehouse, amount: int) -> int:
        """
        Add amount to the balance, creating the row if needed.

        Returns:
            New quantity
        """
        if amount <= 0:
            raise StockError('INVALID_QUANTITY', requested=amount)

        with transaction.atomic():
            balance, created = StockBalance.objects.select_for_update().get_or_create(
                product=product,
                warehouse=warehouse,
                defaults={'quantity': amount},
            )
            if not created:
                StockBalance.objects.filter(pk=balance.pk).update(
                    quantity=F('quantity') + amount,
                    updated_at=timezone.now(),
                )
                balance.refresh_from_db(fields=['quantity'])
            return balance.quantity

    @classmethod
    def decrement(cls, product, warehouse, amount: int) -> int:
        """
        Remove amount from the balance.

        Raises:
            StockError('INSUFFICIENT_STOCK'): If the balance would go negative
            StockError('INVALID_QUANTITY'): If amount <= 0

        Returns:
            New quantity
        """
        if amount <= 0:
            raise StockError('INVALID_QUANTITY', requested=amount)

        with transaction.atomic():
            balance = (
                StockBalance.objects.select_for_update()
                .filter(product=product, warehouse=warehouse)
                .first()
            )
            available = balance.quantity if balance else 0

            if available < amount:
                raise StockError(
                    'INSUFFICIENT_STOCK',
                    f"Insufficient stock at {warehouse.name}: "
                    f"{available} available, {amount} requested",
                    warehouse=warehouse.code,
                    warehouse_id=warehouse.pk,
                    available=available,
                    requested=amount,
                    shortfall=amount - available,
                )

            StockBalance.objects.filter(pk=balance.pk).update(
                quantity=F('quantity') - amount,
                updated_at=timezone.now(),
            )
            return available - amount

    @classmethod
    def delete(cls, product, warehouse) -> bool:
        """
        Remove an empty balance row.

        Rows holding stock are never removed.

        Returns:
            True if a row was deleted
        """
        deleted, _ = StockBalance.objects.filter(
            product=product,
            warehouse=warehouse,
            quantity=0,
        ).delete()
        return deleted > 0
