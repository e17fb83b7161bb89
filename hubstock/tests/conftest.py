"""
Pytest fixtures for Hubstock tests.
"""

import pytest

from hubstock.models import Product, StockBalance, Warehouse


@pytest.fixture
def hub(db):
    """Create the hub warehouse (reserved code)."""
    return Warehouse.objects.create(
        code='WH-GUDANG-UTAMA',
        name='Gudang Utama',
        location='Jakarta',
    )


@pytest.fixture
def branch(db, hub):
    """Create a branch warehouse."""
    return Warehouse.objects.create(
        code='WH-BDG',
        name='Cabang Bandung',
        location='Bandung',
        capacity=500,
    )


@pytest.fixture
def other_branch(db, hub):
    """Create a second branch warehouse."""
    return Warehouse.objects.create(
        code='WH-SBY',
        name='Cabang Surabaya',
        location='Surabaya',
    )


@pytest.fixture
def product(db):
    """Create a test product."""
    return Product.objects.create(
        sku='SKU-001',
        name='Beras 5kg',
        category='Sembako',
        price_q=7500000,
    )


@pytest.fixture
def other_product(db):
    """Create a second product."""
    return Product.objects.create(
        sku='SKU-002',
        name='Minyak Goreng 1L',
        category='Sembako',
        price_q=1800000,
    )


@pytest.fixture
def qty():
    """Read a balance straight from the table (0 when the row is gone)."""
    def _qty(product, warehouse):
        row = StockBalance.objects.filter(product=product, warehouse=warehouse).first()
        return row.quantity if row else 0
    return _qty
