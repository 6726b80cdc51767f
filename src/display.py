"""
Checkout display.

The display is an append-only buffer of rendered lines.  Each ``show_*``
call adds exactly one line; :meth:`Display.get_text` joins them with
newlines in the order they were shown.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from money import Price, format_money


class ScanError(Enum):
    """Recognised scan failures and the text shown for each."""
    EMPTY_BARCODE = "Error: empty barcode"
    PRODUCT_NOT_FOUND = "Error: barcode not found"


class Display:
    NEW_LINE = "\n"
    TOTAL_PREFIX = "Total: "

    def __init__(self) -> None:
        self._lines: List[str] = []

    def show_price(self, price: Price) -> None:
        self._lines.append(format_money(price))

    def show_product_not_found(self) -> None:
        self._lines.append(ScanError.PRODUCT_NOT_FOUND.value)

    def show_empty_barcode(self) -> None:
        self._lines.append(ScanError.EMPTY_BARCODE.value)

    def show_total(self, price: Price) -> None:
        self._lines.append(f"{self.TOTAL_PREFIX}{format_money(price)}")

    def get_text(self) -> str:
        """Return all lines joined by newlines, without a trailing one."""
        return self.NEW_LINE.join(self._lines)

    @property
    def lines(self) -> Tuple[str, ...]:
        return tuple(self._lines)

    @property
    def last_line(self) -> Optional[str]:
        return self._lines[-1] if self._lines else None
