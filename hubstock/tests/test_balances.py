"""
Tests for the balance store (StockBalances).
"""

import pytest
from django.db import IntegrityError, transaction

from hubstock import StockError
from hubstock.models import StockBalance
from hubstock.services import StockBalances


pytestmark = pytest.mark.django_db


class TestGetBalance:

    def test_absent_row_is_zero(self, product, hub):
        assert StockBalances.get_balance(product, hub) == 0

    def test_reads_quantity(self, product, hub):
        StockBalance.objects.create(product=product, warehouse=hub, quantity=12)
        assert StockBalances.get_balance(product, hub) == 12
        assert StockBalances.get_balance(product, hub, lock=True) == 12


class TestIncrement:

    def test_creates_row(self, product, hub):
        assert StockBalances.increment(product, hub, 5) == 5
        assert StockBalance.objects.get(product=product, warehouse=hub).quantity == 5

    def test_adds_to_existing_row(self, product, hub):
        StockBalances.increment(product, hub, 5)
        assert StockBalances.increment(product, hub, 7) == 12
        assert StockBalance.objects.filter(product=product, warehouse=hub).count() == 1

    def test_rejects_non_positive(self, product, hub):
        with pytest.raises(StockError) as exc:
            StockBalances.increment(product, hub, 0)
        assert exc.value.code == 'INVALID_QUANTITY'
        assert not StockBalance.objects.exists()


class TestDecrement:

    def test_decrements(self, product, hub):
        StockBalances.increment(product, hub, 10)
        assert StockBalances.decrement(product, hub, 4) == 6
        assert StockBalances.get_balance(product, hub) == 6

    def test_to_zero_keeps_row(self, product, hub):
        StockBalances.increment(product, hub, 3)
        assert StockBalances.decrement(product, hub, 3) == 0
        assert StockBalance.objects.filter(product=product, warehouse=hub).exists()

    def test_insufficient_names_warehouse_and_shortfall(self, product, hub):
        StockBalances.increment(product, hub, 3)

        with pytest.raises(StockError) as exc:
            StockBalances.decrement(product, hub, 5)

        assert exc.value.code == 'INSUFFICIENT_STOCK'
        assert exc.value.data['warehouse'] == 'WH-GUDANG-UTAMA'
        assert exc.value.available == 3
        assert exc.value.requested == 5
        assert exc.value.data['shortfall'] == 2
        assert StockBalances.get_balance(product, hub) == 3

    def test_missing_row_is_insufficient(self, product, hub):
        with pytest.raises(StockError) as exc:
            StockBalances.decrement(product, hub, 1)
        assert exc.value.code == 'INSUFFICIENT_STOCK'
        assert exc.value.available == 0


class TestDelete:

    def test_deletes_empty_row(self, product, hub):
        StockBalance.objects.create(product=product, warehouse=hub, quantity=0)
        assert StockBalances.delete(product, hub) is True
        assert not StockBalance.objects.exists()

    def test_never_deletes_stocked_row(self, product, hub):
        StockBalance.objects.create(product=product, warehouse=hub, quantity=1)
        assert StockBalances.delete(product, hub) is False
        assert StockBalance.objects.count() == 1

    def test_missing_row(self, product, hub):
        assert StockBalances.delete(product, hub) is False


class TestConstraints:

    def test_unique_product_warehouse(self, product, hub):
        StockBalance.objects.create(product=product, warehouse=hub, quantity=1)
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                StockBalance.objects.create(product=product, warehouse=hub, quantity=2)
