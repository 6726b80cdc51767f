# src/point_of_sale.py
from __future__ import annotations

import logging
import uuid
from typing import Optional

from catalog import Catalog
from display import Display, ScanError
from shopping_cart import ShoppingCart
from metrics import LAST_TOTAL, SCANS_TOTAL, TOTALS_TOTAL

logger = logging.getLogger(__name__)


def is_empty_barcode(barcode: Optional[str]) -> bool:
    """True for ``None``, ``""`` and whitespace-only barcodes."""
    return barcode is None or not barcode.strip()


class PointOfSale:
    """
    Checkout controller.  Receives barcode and total events, looks prices
    up in the catalog, records them in the cart and shows the outcome on
    the display.  Scan failures are reported only through the display;
    nothing is raised to the caller.
    """

    def __init__(self, display: Display, catalog: Catalog, cart: ShoppingCart) -> None:
        self.display = display
        self.catalog = catalog
        self.cart = cart
        # Only used to correlate log records of one checkout
        self.session_id = uuid.uuid4().hex

    @classmethod
    def new_session(cls, catalog: Catalog) -> "PointOfSale":
        """Start a checkout with its own cart and display over a shared catalog."""
        session = cls(Display(), catalog, ShoppingCart())
        logger.info(
            "Checkout session started",
            extra={"session_id": session.session_id, "extra": {"catalog_size": len(catalog)}},
        )
        return session

    # ---- Events ----

    def on_barcode(self, barcode: Optional[str]) -> None:
        if is_empty_barcode(barcode):
            self._reject(ScanError.EMPTY_BARCODE, barcode)
            self.display.show_empty_barcode()
            return

        lookup = self.catalog.find_price(barcode)
        if not lookup.is_found:
            self._reject(ScanError.PRODUCT_NOT_FOUND, barcode)
            self.display.show_product_not_found()
            return

        # Every price in the cart has been shown
        self.display.show_price(lookup.price)
        self.cart.add(lookup.price)
        SCANS_TOTAL.inc(outcome="priced")
        logger.info(
            "Barcode priced",
            extra={
                "session_id": self.session_id,
                "extra": {"barcode": barcode, "price": str(lookup.price), "items": len(self.cart)},
            },
        )

    def total(self) -> None:
        total = self.cart.total()
        self.display.show_total(total)
        TOTALS_TOTAL.inc()
        LAST_TOTAL.set(float(total))
        logger.info(
            "Total displayed",
            extra={"session_id": self.session_id, "extra": {"total": str(total), "items": len(self.cart)}},
        )

    def get_text(self) -> str:
        return self.display.get_text()

    def _reject(self, error: ScanError, barcode: Optional[str]) -> None:
        SCANS_TOTAL.inc(outcome=error.name.lower())
        logger.warning(
            error.value,
            extra={"session_id": self.session_id, "extra": {"barcode": barcode, "error": error.name}},
        )
