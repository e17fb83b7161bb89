"""
Exceptions for Hubstock.

All errors are StockError with a structured code for programmatic handling.
"""

from typing import Any


class StockError(Exception):
    """
    Structured exception for stock operations.

    Usage:
        try:
            stock.outbound(branch, product, 10)
        except StockError as e:
            if e.code == 'INSUFFICIENT_STOCK':
                print(f"Only {e.available} left at {e.data['warehouse']}")

    Attributes:
        code: Error code for programmatic handling
        message: Human-readable message
        data: Additional context data
    """

    _default_messages = {
        'INSUFFICIENT_STOCK': 'Insufficient stock for this movement',
        'INVALID_QUANTITY': 'Invalid quantity (must be positive)',
        'NOT_FOUND': 'Referenced record not found',
        'STORE_UNAVAILABLE': 'Stock store unavailable, nothing was committed',
        'WAREHOUSE_NOT_EMPTY': 'Warehouse still holds stock and cannot be deleted',
        'PRODUCT_NOT_EMPTY': 'Product still has stock and cannot be deleted',
    }

    def __init__(self, code: str, message: str | None = None, **data):
        self.code = code
        self.message = message or self._default_messages.get(code, code)
        self.data = data
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    @property
    def available(self) -> int:
        """Shortcut for data['available']."""
        return self.data.get('available', 0)

    @property
    def requested(self) -> int:
        """Shortcut for data['requested']."""
        return self.data.get('requested', 0)

    @property
    def retryable(self) -> bool:
        """Whether the whole operation can safely be retried."""
        return self.code == 'STORE_UNAVAILABLE'

    def as_dict(self) -> dict[str, Any]:
        """Serialize to dict (useful for APIs)."""
        return {
            'code': self.code,
            'message': self.message,
            'data': dict(self.data),
        }
