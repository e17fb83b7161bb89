"""
Hub resolution — which warehouse supplies all the others.

The hub is never stored. It is derived from the current warehouse set,
first match wins:

    1. code equals a reserved hub code, in configured order
       (WH-GUDANG-UTAMA before WH-MAIN)
    2. name contains a hub hint, case-insensitive (Utama, Main, Pusat)
    3. the oldest warehouse (smallest pk)
    4. no warehouses, no hub

Examples:
    >>> resolve_hub([])
    None
    >>> resolve_hub(Warehouse.objects.all()).code
    'WH-GUDANG-UTAMA'
"""

from typing import Iterable

from hubstock.conf import hubstock_settings


def resolve_hub(warehouses: Iterable, hub_codes: Iterable[str] | None = None,
                name_hints: Iterable[str] | None = None):
    """
    Pick the hub from a collection of warehouses.

    Pure: only looks at pk, code and name of the given objects.

    Args:
        warehouses: Warehouse instances (or anything with pk/code/name)
        hub_codes: Reserved codes in priority order (default: settings)
        name_hints: Name fragments (default: settings)

    Returns:
        The hub warehouse, or None when the collection is empty
    """
    candidates = sorted(warehouses, key=lambda w: w.pk)
    if not candidates:
        return None

    if hub_codes is None:
        hub_codes = hubstock_settings.HUB_CODES
    if name_hints is None:
        name_hints = hubstock_settings.HUB_NAME_HINTS

    for code in hub_codes:
        for warehouse in candidates:
            if warehouse.code == code:
                return warehouse

    hints = [hint.casefold() for hint in name_hints if hint]
    for warehouse in candidates:
        name = (warehouse.name or '').casefold()
        if any(hint in name for hint in hints):
            return warehouse

    # Convention: the first warehouse created is the hub
    return candidates[0]


def find_hub():
    """Resolve the hub against the warehouse table. Never cached."""
    from hubstock.models.warehouse import Warehouse

    return resolve_hub(Warehouse.objects.only('pk', 'code', 'name'))


def is_hub(warehouse, hub) -> bool:
    """True when warehouse is the resolved hub."""
    return hub is not None and warehouse is not None and warehouse.pk == hub.pk
