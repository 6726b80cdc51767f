# --- path/bootstrap (keep this at the very top) ---
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
# --- end path/bootstrap ---

import unittest
from decimal import Decimal

from catalog import Catalog
from display import Display
from metrics import LAST_TOTAL, SCANS_TOTAL, TOTALS_TOTAL
from point_of_sale import PointOfSale, is_empty_barcode
from shopping_cart import ShoppingCart


PRICES = {"12345": Decimal("7.25"), "23456": Decimal("12.50")}


class TestPointOfSale(unittest.TestCase):
    """
    Controller behaviour seen through the display: priced scans, unknown
    and empty barcodes, and totals.
    """

    def setUp(self):
        self.catalog = Catalog(PRICES)
        self.cart = ShoppingCart()
        self.display = Display()
        self.pos = PointOfSale(self.display, self.catalog, self.cart)

    def test_display_product_price_when_product_found(self):
        for barcode, expected in (("12345", "$7.25"), ("23456", "$12.50")):
            with self.subTest(barcode=barcode):
                pos = PointOfSale(Display(), self.catalog, ShoppingCart())
                pos.on_barcode(barcode)
                self.assertEqual(pos.get_text(), expected)

    def test_display_error_when_product_not_found(self):
        self.pos.on_barcode("99999")
        self.assertEqual(self.display.get_text(), "Error: barcode not found")
        self.assertEqual(len(self.cart), 0)

    def test_display_error_when_empty_barcode(self):
        for barcode in (None, "", " ", "\t\n"):
            with self.subTest(barcode=barcode):
                display = Display()
                cart = ShoppingCart()
                PointOfSale(display, self.catalog, cart).on_barcode(barcode)
                self.assertEqual(display.get_text(), "Error: empty barcode")
                self.assertEqual(len(cart), 0)

    def test_barcode_is_looked_up_verbatim(self):
        # Surrounding whitespace is not trimmed from otherwise valid barcodes
        self.pos.on_barcode(" 12345")
        self.assertEqual(self.display.get_text(), "Error: barcode not found")

    def test_display_total_price_when_no_product_scanned(self):
        self.pos.total()
        self.assertEqual(self.display.get_text(), "Total: $0.00")

    def test_display_total_price_when_one_product_scanned(self):
        self.pos.on_barcode("12345")
        self.pos.total()
        self.assertEqual(self.display.get_text(), "$7.25\nTotal: $7.25")

    def test_display_total_price_when_many_products_scanned(self):
        self.pos.on_barcode("12345")
        self.pos.on_barcode("23456")
        self.pos.total()
        self.assertEqual(self.display.get_text(), "$7.25\n$12.50\nTotal: $19.75")

    def test_only_found_products_count_towards_total(self):
        self.pos.on_barcode("12345")
        self.pos.on_barcode("99999")
        self.pos.on_barcode("")
        self.pos.total()
        self.assertEqual(
            self.display.get_text(),
            "$7.25\nError: barcode not found\nError: empty barcode\nTotal: $7.25",
        )
        self.assertEqual(self.cart.prices, (Decimal("7.25"),))

    def test_price_beyond_default_precision_is_shown_and_totalled(self):
        display = Display()
        cart = ShoppingCart()
        pos = PointOfSale(display, Catalog({"1": Decimal("1E+27")}), cart)

        pos.on_barcode("1")
        pos.total()

        amount = "$1" + ",000" * 9 + ".00"
        self.assertEqual(display.lines, (amount, "Total: " + amount))
        self.assertEqual(cart.prices, (Decimal("1E+27"),))

    def test_repeated_scans_are_each_counted(self):
        for _ in range(3):
            self.pos.on_barcode("23456")
        self.pos.total()
        self.assertTrue(self.display.get_text().endswith("Total: $37.50"))

    def test_total_can_be_shown_more_than_once(self):
        self.pos.total()
        self.pos.on_barcode("12345")
        self.pos.total()
        self.assertEqual(self.display.get_text(), "Total: $0.00\n$7.25\nTotal: $7.25")

    def test_is_empty_barcode(self):
        self.assertTrue(is_empty_barcode(None))
        self.assertTrue(is_empty_barcode("   "))
        self.assertFalse(is_empty_barcode("0"))
        self.assertFalse(is_empty_barcode(" 1 "))


class TestSessions(unittest.TestCase):
    """Sessions share the catalog but never their cart or display."""

    def test_new_session_owns_cart_and_display(self):
        catalog = Catalog(PRICES)
        first = PointOfSale.new_session(catalog)
        second = PointOfSale.new_session(catalog)

        first.on_barcode("12345")
        second.on_barcode("23456")
        first.total()
        second.total()

        self.assertIs(first.catalog, second.catalog)
        self.assertIsNot(first.cart, second.cart)
        self.assertNotEqual(first.session_id, second.session_id)
        self.assertEqual(first.get_text(), "$7.25\nTotal: $7.25")
        self.assertEqual(second.get_text(), "$12.50\nTotal: $12.50")


class TestScanMetrics(unittest.TestCase):
    """Metrics are process-global, so assert on deltas only."""

    def test_outcomes_and_totals_are_counted(self):
        pos = PointOfSale.new_session(Catalog(PRICES))
        priced = SCANS_TOTAL.value(outcome="priced")
        missing = SCANS_TOTAL.value(outcome="product_not_found")
        empty = SCANS_TOTAL.value(outcome="empty_barcode")
        totals = TOTALS_TOTAL.value()

        pos.on_barcode("12345")
        pos.on_barcode("23456")
        pos.on_barcode("99999")
        pos.on_barcode(" ")
        pos.total()

        self.assertEqual(SCANS_TOTAL.value(outcome="priced"), priced + 2)
        self.assertEqual(SCANS_TOTAL.value(outcome="product_not_found"), missing + 1)
        self.assertEqual(SCANS_TOTAL.value(outcome="empty_barcode"), empty + 1)
        self.assertEqual(TOTALS_TOTAL.value(), totals + 1)
        self.assertEqual(LAST_TOTAL.value(), 19.75)

    def test_scan_failures_are_logged_as_warnings(self):
        pos = PointOfSale.new_session(Catalog(PRICES))
        with self.assertLogs("point_of_sale", level="WARNING") as captured:
            pos.on_barcode("99999")
        self.assertEqual(captured.records[0].session_id, pos.session_id)
        self.assertEqual(captured.records[0].extra["error"], "PRODUCT_NOT_FOUND")


if __name__ == "__main__":
    unittest.main(verbosity=2)
