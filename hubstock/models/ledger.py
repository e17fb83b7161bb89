"""
LedgerEntry model — Immutable record of every stock movement.
"""

from django.db import models
from django.db.models import Q
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from hubstock.models.enums import MovementType


class LedgerEntryQuerySet(models.QuerySet):

    def newest_first(self):
        return self.order_by('-timestamp', '-pk')

    def touching(self, warehouse):
        """Entries that reference the warehouse as source or target."""
        return self.filter(Q(source_warehouse=warehouse) | Q(target_warehouse=warehouse))


class LedgerEntry(models.Model):
    """
    Immutable record of one stock movement.

    Rules:
    - NEVER update() or delete() through the model
    - Exactly one entry per movement, written in the same transaction as
      the balance changes it describes
    - Warehouse references survive warehouse deletion as NULL, set
      explicitly by StockJournal.detach_warehouse()
    """

    type = models.CharField(
        max_length=20,
        choices=MovementType.choices,
        db_index=True,
        verbose_name=_('Type'),
    )
    product = models.ForeignKey(
        'hubstock.Product',
        on_delete=models.PROTECT,
        related_name='ledger_entries',
        verbose_name=_('Product'),
    )
    source_warehouse = models.ForeignKey(
        'hubstock.Warehouse',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='outgoing_entries',
        verbose_name=_('Source warehouse'),
    )
    target_warehouse = models.ForeignKey(
        'hubstock.Warehouse',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='incoming_entries',
        verbose_name=_('Target warehouse'),
    )
    quantity = models.PositiveIntegerField(
        verbose_name=_('Quantity'),
    )
    note = models.TextField(
        null=True,
        blank=True,
        verbose_name=_('Reference note'),
    )
    caller_id = models.TextField(
        blank=True,
        default='',
        verbose_name=_('Caller'),
        help_text=_('Opaque identity of whoever requested the movement'),
    )
    timestamp = models.DateTimeField(default=timezone.now, db_index=True, verbose_name=_('Timestamp'))

    objects = LedgerEntryQuerySet.as_manager()

    class Meta:
        verbose_name = _('Ledger entry')
        verbose_name_plural = _('Ledger entries')
        ordering = ['-timestamp', '-id']
        constraints = [
            models.CheckConstraint(
                condition=Q(quantity__gt=0),
                name='ledger_quantity_positive',
            ),
        ]
        indexes = [
            models.Index(fields=['product', 'timestamp'], name='hubstock_le_product_8a4f10_idx'),
        ]

    def clean_shape(self):
        """Check source/target against the movement type."""
        has_source = self.source_warehouse_id is not None
        has_target = self.target_warehouse_id is not None

        if self.type == MovementType.INBOUND and (has_source or not has_target):
            raise ValueError("INBOUND entries need a target and no source")
        if self.type == MovementType.OUTBOUND and (not has_source or has_target):
            raise ValueError("OUTBOUND entries need a source and no target")
        if self.type == MovementType.TRANSFER and not (has_source and has_target):
            raise ValueError("TRANSFER entries need both source and target")
        if self.type == MovementType.INITIAL_ADJUSTMENT and not has_target:
            raise ValueError("INITIAL_ADJUSTMENT entries need a target")

    def save(self, *args, **kwargs):
        """Save a new entry. Existing entries cannot be changed."""
        if self.pk:
            raise ValueError(
                "Ledger entries are immutable. "
                "Record a new movement to correct stock."
            )

        if self.type not in MovementType.values:
            raise ValueError(f"Unknown movement type: {self.type!r}")
        if not self.quantity or self.quantity <= 0:
            raise ValueError("Ledger quantity must be positive")
        self.clean_shape()

        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        """Prevent deletion — ledger entries are immutable."""
        raise ValueError(
            "Ledger entries are immutable and cannot be deleted."
        )

    def __str__(self) -> str:
        src = self.source_warehouse.code if self.source_warehouse else '-'
        dst = self.target_warehouse.code if self.target_warehouse else '-'
        return f"{self.type} {self.quantity} {src} → {dst}"
