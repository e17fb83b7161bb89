"""
Management command to print the newest ledger entries.

Usage:
    python manage.py recent_transactions
    python manage.py recent_transactions --limit 0    # everything
"""

from django.core.management.base import BaseCommand

from hubstock import stock
from hubstock.conf import hubstock_settings


class Command(BaseCommand):
    """Ledger listing command."""

    help = 'Lists ledger entries, newest first'

    def add_arguments(self, parser):
        parser.add_argument(
            '--limit',
            type=int,
            default=None,
            help='Number of entries (0 = all, default from HUBSTOCK settings)'
        )

    def handle(self, *args, **options):
        limit = options['limit']
        if limit is None:
            limit = hubstock_settings.RECENT_TRANSACTIONS_LIMIT

        entries = stock.recent_transactions(limit)
        for entry in entries:
            source = entry.source_warehouse.code if entry.source_warehouse else '-'
            target = entry.target_warehouse.code if entry.target_warehouse else '-'
            self.stdout.write(
                f'{entry.timestamp:%Y-%m-%d %H:%M} {entry.type:<18} '
                f'{entry.product.sku} {entry.quantity:>6} {source} -> {target} '
                f'{entry.note or ""}'.rstrip()
            )
        self.stdout.write(f'{len(entries)} entr{"y" if len(entries) == 1 else "ies"}')
