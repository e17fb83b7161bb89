"""
Management command to pull all branch stock back into the hub.

Usage:
    python manage.py consolidate_to_hub
    python manage.py consolidate_to_hub --dry-run
"""

from django.core.management.base import BaseCommand, CommandError

from hubstock import stock, StockError
from hubstock.hub import find_hub


class Command(BaseCommand):
    """Hub consolidation command."""

    help = 'Moves every branch balance into the hub warehouse'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show what would be moved without moving it'
        )
        parser.add_argument(
            '--caller',
            default='consolidate_to_hub',
            help='Caller identity recorded on the ledger entries'
        )

    def handle(self, *args, **options):
        hub = find_hub()
        if hub is None:
            raise CommandError('No warehouses found, there is no hub to consolidate into')

        self.stdout.write(f'Hub: {hub.name} ({hub.code})')

        try:
            result = stock.consolidate(dry_run=options['dry_run'], caller_id=options['caller'])
        except StockError as exc:
            raise CommandError(str(exc)) from exc

        if options['dry_run']:
            for balance in result:
                self.stdout.write(
                    f'{balance.quantity} x {balance.product.sku} from {balance.warehouse.code}'
                )
            self.stdout.write(f'{len(result)} balance(s) would be moved')
            return

        for entry in result:
            self.stdout.write(
                f'{entry.quantity} x {entry.product.sku} from {entry.source_warehouse.code}'
            )
        self.stdout.write(
            self.style.SUCCESS(f'{len(result)} balance(s) moved to {hub.code}')
        )
