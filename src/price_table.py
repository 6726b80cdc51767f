"""
Price table loading.

A price table is the barcode -> price mapping a :class:`catalog.Catalog`
is built from.  Tables may be supplied in different formats; each adapter
parses the raw text into a dict and :func:`load_price_table` picks the
adapter from the file extension.

Usage example:

    from catalog import Catalog
    from price_table import load_price_table
    catalog = Catalog(load_price_table("prices.csv"))

CSV files need ``barcode`` and ``price`` columns.  JSON files hold either an
object ``{"12345": "7.25"}`` or a list of ``{"barcode": ..., "price": ...}``
objects.  Rows with a blank barcode, a barcode already seen or a price that
is not a number are skipped and logged; the rest of the table still loads.
"""

from __future__ import annotations

import csv
import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Iterable, Tuple

from money import to_decimal

logger = logging.getLogger(__name__)


class PriceTableAdapter:
    """Base class for price table adapters."""

    def parse(self, data: str) -> Dict[str, Decimal]:  # pragma: no cover
        raise NotImplementedError

    @staticmethod
    def _collect(rows: Iterable[Tuple[Any, Any]]) -> Dict[str, Decimal]:
        prices: Dict[str, Decimal] = {}
        for barcode, price in rows:
            barcode = "" if barcode is None else str(barcode).strip()
            if not barcode:
                logger.warning("Skipping price row without barcode", extra={"extra": {"price": price}})
                continue
            if barcode in prices:
                # Barcodes are unique; the first row wins
                logger.warning(
                    "Skipping duplicate price row",
                    extra={"extra": {"barcode": barcode, "price": price, "kept": prices[barcode]}},
                )
                continue
            try:
                prices[barcode] = to_decimal(price)
            except ValueError:
                logger.warning(
                    "Skipping price row with invalid price",
                    extra={"extra": {"barcode": barcode, "price": price}},
                )
                continue
        return prices


class CSVPriceTableAdapter(PriceTableAdapter):
    """Parse a CSV table with ``barcode`` and ``price`` columns."""

    def parse(self, data: str) -> Dict[str, Decimal]:
        reader = csv.DictReader(data.splitlines())
        fieldnames = [name.strip().lower() for name in (reader.fieldnames or [])]
        if "barcode" not in fieldnames or "price" not in fieldnames:
            raise ValueError("CSV price table needs 'barcode' and 'price' columns")
        reader.fieldnames = fieldnames
        return self._collect((row.get("barcode"), row.get("price")) for row in reader)


class JSONPriceTableAdapter(PriceTableAdapter):
    """Parse a JSON object keyed by barcode or a list of row objects."""

    def parse(self, data: str) -> Dict[str, Decimal]:
        try:
            items = json.loads(data, parse_float=Decimal)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON price table: {exc}") from exc
        if isinstance(items, dict):
            return self._collect(items.items())
        if isinstance(items, list):
            return self._collect(
                (row.get("barcode"), row.get("price")) if isinstance(row, dict) else (None, row)
                for row in items
            )
        raise ValueError("JSON price table must be an object or a list")


def select_adapter(file_path: str) -> PriceTableAdapter:
    """Select an adapter based on the file extension."""
    ext = Path(file_path).suffix.lower()
    if ext == ".csv":
        return CSVPriceTableAdapter()
    if ext in {".json", ".jsn"}:
        return JSONPriceTableAdapter()
    raise ValueError(f"Unsupported price table format: {ext}")


def load_price_table(file_path: str) -> Dict[str, Decimal]:
    """Read ``file_path`` and return its barcode -> price mapping."""
    adapter = select_adapter(file_path)
    data = Path(file_path).read_text(encoding="utf-8-sig")
    prices = adapter.parse(data)
    logger.info("Price table loaded", extra={"extra": {"path": str(file_path), "products": len(prices)}})
    return prices
