"""
Product price catalog.

The catalog is a fixed barcode -> price table handed in at construction.
Lookups are verbatim: no trimming or case folding happens here, callers
validate the barcode first.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping, Optional

from money import Price, to_decimal


@dataclass(frozen=True)
class PriceLookup:
    """Outcome of a catalog lookup: either a price or "not found"."""
    price: Optional[Decimal] = None

    @classmethod
    def found(cls, price: Decimal) -> "PriceLookup":
        return cls(price=price)

    @classmethod
    def not_found(cls) -> "PriceLookup":
        return cls(price=None)

    @property
    def is_found(self) -> bool:
        return self.price is not None


class Catalog:
    """Read-only mapping of barcodes to prices."""

    def __init__(self, price_by_barcode: Mapping[str, Price]) -> None:
        # Copy so later changes to the caller's dict never leak in
        self._price_by_barcode: Mapping[str, Decimal] = MappingProxyType(
            {barcode: to_decimal(price) for barcode, price in price_by_barcode.items()}
        )

    def find_price(self, barcode: str) -> PriceLookup:
        """Return the price for ``barcode`` or a not-found result."""
        price = self._price_by_barcode.get(barcode)
        if price is None:
            return PriceLookup.not_found()
        return PriceLookup.found(price)

    def __contains__(self, barcode: object) -> bool:
        return barcode in self._price_by_barcode

    def __len__(self) -> int:
        return len(self._price_by_barcode)
