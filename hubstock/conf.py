"""
Hubstock configuration.

Usage in settings.py:
    HUBSTOCK = {
        "HUB_CODES": ("WH-GUDANG-UTAMA", "WH-MAIN"),
        "HUB_NAME_HINTS": ("Utama", "Main", "Pusat"),
        "LOW_STOCK_THRESHOLD": 10,
        "RECENT_TRANSACTIONS_LIMIT": 50,
    }
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings


@dataclass
class HubstockSettings:
    """Hubstock configuration settings."""

    # Reserved warehouse codes that designate the hub, in priority order
    HUB_CODES: tuple[str, ...] = ("WH-GUDANG-UTAMA", "WH-MAIN")

    # Case-insensitive warehouse name fragments that mark a hub
    HUB_NAME_HINTS: tuple[str, ...] = ("Utama", "Main", "Pusat")

    # Total stock below this value flags a product as low stock
    LOW_STOCK_THRESHOLD: int = 10

    # Default page size for the recent_transactions command (0 = unbounded)
    RECENT_TRANSACTIONS_LIMIT: int = 50


def get_hubstock_settings() -> HubstockSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "HUBSTOCK", {})
    return HubstockSettings(**{
        k: v for k, v in user_settings.items()
        if k in HubstockSettings.__dataclass_fields__
    })


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_hubstock_settings(), name)


hubstock_settings = _LazySettings()
