from __future__ import annotations

import decimal
from decimal import Decimal
from typing import List, Tuple

from money import Price, exact_context, to_decimal


class ShoppingCart:
    """Prices scanned during one checkout session."""

    def __init__(self) -> None:
        self._prices: List[Decimal] = []

    def add(self, price: Price) -> None:
        # No validation: zero and negative prices are kept as-is
        self._prices.append(to_decimal(price))

    def total(self) -> Decimal:
        with decimal.localcontext(exact_context(self._prices)):
            return sum(self._prices, Decimal("0"))

    @property
    def prices(self) -> Tuple[Decimal, ...]:
        return tuple(self._prices)

    def __len__(self) -> int:
        return len(self._prices)
