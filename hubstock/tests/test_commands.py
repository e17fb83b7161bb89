"""
Tests for management commands and admin wiring.
"""

from io import StringIO

import pytest
from django.contrib import admin
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import RequestFactory

from hubstock import stock
from hubstock.models import LedgerEntry, StockBalance


pytestmark = pytest.mark.django_db


class TestConsolidateCommand:

    def test_dry_run(self, product, hub, branch):
        stock.inbound(hub, product, 4)
        stock.inbound(branch, product, 4)
        out = StringIO()

        call_command('consolidate_to_hub', '--dry-run', stdout=out)

        assert '4 x SKU-001 from WH-BDG' in out.getvalue()
        assert '1 balance(s) would be moved' in out.getvalue()
        assert stock.balance(product, branch) == 4

    def test_moves_stock(self, product, hub, branch):
        stock.inbound(hub, product, 6)
        stock.inbound(branch, product, 4)
        out = StringIO()

        call_command('consolidate_to_hub', '--caller', 'cron', stdout=out)

        assert '1 balance(s) moved to WH-GUDANG-UTAMA' in out.getvalue()
        assert stock.balance(product, hub) == 6
        assert LedgerEntry.objects.newest_first().first().caller_id == 'cron'

    def test_no_warehouses(self):
        with pytest.raises(CommandError):
            call_command('consolidate_to_hub', stdout=StringIO())


class TestRecentTransactionsCommand:

    def test_lists_entries(self, product, hub, branch):
        stock.inbound(hub, product, 6, note='PO-1')
        stock.inbound(branch, product, 2)
        out = StringIO()

        call_command('recent_transactions', '--limit', '1', stdout=out)

        lines = out.getvalue().splitlines()
        assert 'TRANSFER' in lines[0]
        assert 'WH-GUDANG-UTAMA -> WH-BDG' in lines[0]
        assert lines[-1] == '1 entry'

    def test_all_entries(self, product, hub):
        stock.inbound(hub, product, 1)
        stock.inbound(hub, product, 1)
        out = StringIO()

        call_command('recent_transactions', '--limit', '0', stdout=out)

        assert out.getvalue().splitlines()[-1] == '2 entries'


class TestAdmin:

    def test_ledger_and_balances_are_read_only(self):
        request = RequestFactory().get('/')
        for model in (LedgerEntry, StockBalance):
            model_admin = admin.site._registry[model]
            assert not model_admin.has_add_permission(request)
            assert not model_admin.has_change_permission(request)
            assert not model_admin.has_delete_permission(request)

    def test_warehouse_hub_marker(self, hub, branch):
        from hubstock.models import Warehouse
        model_admin = admin.site._registry[Warehouse]
        assert model_admin.is_hub_display(hub) is True
        assert model_admin.is_hub_display(branch) is False

    def test_hub_marker_resolved_once_per_changelist(self, hub, branch, other_branch,
                                                     django_assert_num_queries):
        from hubstock.models import Warehouse
        model_admin = admin.site._registry[Warehouse]
        request = RequestFactory().get('/')

        with django_assert_num_queries(2):
            rows = list(model_admin.get_queryset(request).order_by('code'))
            flags = {w.code: model_admin.is_hub_display(w) for w in rows}

        assert flags == {'WH-BDG': False, 'WH-GUDANG-UTAMA': True, 'WH-SBY': False}

    def test_hub_marker_without_hub(self, db):
        from hubstock.models import Warehouse
        model_admin = admin.site._registry[Warehouse]
        request = RequestFactory().get('/')
        assert list(model_admin.get_queryset(request)) == []
