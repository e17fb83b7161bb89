"""
Hubstock Admin.

Provides master data editing and read-only views for production debugging:
- Warehouse: list + edit, hub marker, guarded delete
- Product: list + edit (SKU fixed after creation), total stock
- StockBalance: read-only (product, warehouse, quantity)
- LedgerEntry: read-only audit trail
"""

import logging

from django.contrib import admin, messages
from django.db.models import BooleanField, Case, Value, When
from django.utils.translation import gettext_lazy as _

from hubstock.exceptions import StockError
from hubstock.hub import find_hub
from hubstock.models import LedgerEntry, Product, StockBalance, Warehouse

logger = logging.getLogger(__name__)


class ReadOnlyAdmin(admin.ModelAdmin):
    """Stock only changes through the stock service."""

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


# =========================================================================
# WAREHOUSE ADMIN
# =========================================================================

@admin.register(Warehouse)
class WarehouseAdmin(admin.ModelAdmin):
    """Warehouse admin — editable; deletes go through stock.delete_warehouse."""

    list_display = ['code', 'name', 'location', 'capacity', 'is_hub_display']
    search_fields = ['code', 'name', 'location']
    readonly_fields = ['created_at', 'updated_at']
    actions = ['delete_empty_warehouses']

    def has_delete_permission(self, request, obj=None):
        return False

    def get_queryset(self, request):
        # One hub lookup per changelist, not per row.
        hub = find_hub()
        if hub is None:
            hub_flag = Value(False, output_field=BooleanField())
        else:
            hub_flag = Case(
                When(pk=hub.pk, then=Value(True)),
                default=Value(False),
                output_field=BooleanField(),
            )
        return super().get_queryset(request).annotate(hub_flag=hub_flag)

    @admin.display(description=_('Hub'), boolean=True, ordering='hub_flag')
    def is_hub_display(self, obj):
        if hasattr(obj, 'hub_flag'):
            return obj.hub_flag
        hub = find_hub()
        return hub is not None and hub.pk == obj.pk

    @admin.action(description=_('Delete selected empty warehouses'))
    def delete_empty_warehouses(self, request, queryset):
        from hubstock import stock

        count = 0
        for warehouse in queryset:
            try:
                stock.delete_warehouse(warehouse)
                count += 1
            except StockError as exc:
                logger.warning("delete_empty_warehouses: %s kept: %s", warehouse.code, exc)
                self.message_user(request, f'{warehouse.code}: {exc.message}', messages.WARNING)

        self.message_user(request, _('{count} warehouse(s) deleted.').format(count=count))


# =========================================================================
# PRODUCT ADMIN
# =========================================================================

@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Product admin — SKU is fixed once created."""

    list_display = ['sku', 'name', 'category', 'price_q', 'total_stock_display', 'is_deleted']
    list_filter = ['is_deleted', 'category']
    search_fields = ['sku', 'name']

    def get_readonly_fields(self, request, obj=None):
        fields = ['is_deleted', 'created_at', 'updated_at']
        if obj is not None:
            fields.insert(0, 'sku')
        return fields

    def has_delete_permission(self, request, obj=None):
        return False

    @admin.display(description=_('Total stock'))
    def total_stock_display(self, obj):
        from hubstock import stock
        return stock.total_stock(obj)


# =========================================================================
# STOCK BALANCE ADMIN (read-only)
# =========================================================================

@admin.register(StockBalance)
class StockBalanceAdmin(ReadOnlyAdmin):
    """StockBalance admin — read-only."""

    list_display = ['product', 'warehouse', 'quantity', 'updated_at']
    list_filter = ['warehouse']
    search_fields = ['product__sku', 'product__name']
    list_select_related = ['product', 'warehouse']
    ordering = ['warehouse__code', '-quantity']


# =========================================================================
# LEDGER ENTRY ADMIN (read-only audit trail)
# =========================================================================

@admin.register(LedgerEntry)
class LedgerEntryAdmin(ReadOnlyAdmin):
    """LedgerEntry admin — read-only. Immutable audit trail."""

    list_display = ['timestamp', 'type', 'product', 'quantity',
                    'source_warehouse', 'target_warehouse', 'note', 'caller_id']
    list_filter = ['type', 'timestamp']
    search_fields = ['note', 'product__sku', 'caller_id']
    list_select_related = ['product', 'source_warehouse', 'target_warehouse']
    date_hierarchy = 'timestamp'
