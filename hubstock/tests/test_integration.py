"""
Integration: long random movement sequences against the invariants.

- no balance ever goes negative
- total stock == INBOUND + INITIAL_ADJUSTMENT - OUTBOUND from the ledger
- failed movements change nothing and write nothing
"""

import random
import threading

import pytest
from django.db import connection, connections
from django.db.models import Min

from hubstock import stock, StockError
from hubstock.models import LedgerEntry, MovementType, StockBalance, Warehouse


pytestmark = pytest.mark.django_db


def ledger_total(product):
    entries = LedgerEntry.objects.filter(product=product)
    added = sum(
        e.quantity for e in entries
        if e.type in (MovementType.INBOUND, MovementType.INITIAL_ADJUSTMENT)
    )
    removed = sum(e.quantity for e in entries if e.type == MovementType.OUTBOUND)
    return added - removed


def snapshot():
    return (
        sorted(StockBalance.objects.values_list('product_id', 'warehouse_id', 'quantity')),
        LedgerEntry.objects.count(),
    )


@pytest.mark.parametrize('seed', [3, 17, 2024])
def test_random_sequences_keep_invariants(seed, hub, branch, other_branch):
    rng = random.Random(seed)
    warehouses = [hub, branch, other_branch]
    products = [
        stock.create_product(sku=f'SKU-{i}', name=f'Item {i}', initial_stock=rng.randint(0, 20), warehouse=hub)
        for i in range(3)
    ]

    for _ in range(150):
        product = rng.choice(products)
        op = rng.choice(['inbound', 'outbound', 'transfer'])
        quantity = rng.randint(1, 12)
        before = snapshot()

        try:
            if op == 'inbound':
                stock.inbound(rng.choice(warehouses), product, quantity, caller_id='fuzz')
            elif op == 'outbound':
                stock.outbound(rng.choice(warehouses), product, quantity, caller_id='fuzz')
            else:
                source, target = rng.sample(warehouses, 2)
                stock.transfer(source, target, product, quantity)
        except StockError as exc:
            assert exc.code == 'INSUFFICIENT_STOCK'
            assert snapshot() == before

        low = StockBalance.objects.aggregate(m=Min('quantity'))['m']
        assert low is None or low >= 0

    for product in products:
        assert stock.total_stock(product) == ledger_total(product)


def test_branch_supply_chain(product):
    """Receipts at branches never create stock on their own."""
    pusat = Warehouse.objects.create(code='WH-MAIN', name='Main Warehouse')
    medan = Warehouse.objects.create(code='WH-MDN', name='Cabang Medan')
    solo = Warehouse.objects.create(code='WH-SOC', name='Cabang Solo')

    stock.inbound(pusat, product, 100, caller_id='buyer')
    stock.inbound(medan, product, 30, caller_id='medan-staff')
    stock.inbound(solo, product, 20, caller_id='solo-staff')
    stock.outbound(medan, product, 30, note='Order #1')

    with pytest.raises(StockError):
        stock.inbound(solo, product, 51)

    assert stock.balance(product, pusat) == 50
    assert stock.balance(product, solo) == 20
    assert stock.total_stock(product) == 70
    assert stock.is_low_stock(product) is False

    types = [e.type for e in stock.recent_transactions()]
    assert types == ['OUTBOUND', 'TRANSFER', 'TRANSFER', 'INBOUND']


@pytest.mark.django_db(transaction=True)
def test_competing_outbounds_cannot_oversell(hub, product):
    """Two decrements racing for one balance row: exactly one wins."""
    if not connection.features.has_select_for_update:
        pytest.skip('backend has no row locks')

    stock.inbound(hub, product, 10)
    barrier = threading.Barrier(2)
    results = []

    def take(caller):
        try:
            barrier.wait()
            stock.outbound(hub, product, 7, caller_id=caller)
            results.append('ok')
        except StockError as exc:
            results.append(exc.code)
        finally:
            connections.close_all()

    threads = [threading.Thread(target=take, args=(f'worker-{i}',)) for i in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=30)

    assert sorted(results) == ['INSUFFICIENT_STOCK', 'ok']
    assert stock.balance(product, hub) == 3
    assert LedgerEntry.objects.filter(type=MovementType.OUTBOUND).count() == 1
