"""
Command-line checkout for the point-of-sale controller.

This script wires a :class:`point_of_sale.PointOfSale` session into an
interactive loop.  Every input line is one event: ``total`` shows the
cart total, ``metrics`` prints the in-process metrics, ``quit`` or
``exit`` ends the session.  These words must match exactly; anything else
(an empty line or ``" Total"`` included) is scanned verbatim as a barcode.
The newest display line is printed after each event and the whole
display is printed as a receipt at the end.

Keeping the loop here leaves the controller free of I/O code.
"""

import logging
import sys

import logging_config
from catalog import Catalog
from config import DEMO_PRICES, Settings, load_settings
from metrics import generate_metrics_text
from point_of_sale import PointOfSale
from price_table import load_price_table

logger = logging.getLogger(__name__)

TOTAL_COMMAND = "total"
METRICS_COMMAND = "metrics"
EXIT_COMMANDS = {"quit", "exit"}


def build_catalog(settings: Settings) -> Catalog:
    """Catalog from the configured price table, or the demo table."""
    if settings.catalog_path:
        return Catalog(load_price_table(settings.catalog_path))
    return Catalog(DEMO_PRICES)


def interactive_cli(catalog: Catalog) -> PointOfSale:
    """Run one checkout session against ``catalog`` until quit or EOF."""
    pos = PointOfSale.new_session(catalog)
    print(f"-- Point of Sale ({len(catalog)} products) --")
    print(f"Scan a barcode, '{TOTAL_COMMAND}' for the total, '{METRICS_COMMAND}' or 'quit'.")

    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        # Only the exact command words are reserved
        if line in EXIT_COMMANDS:
            break
        if line == METRICS_COMMAND:
            print(generate_metrics_text().decode("utf-8"))
            continue
        if line == TOTAL_COMMAND:
            pos.total()
        else:
            # Barcodes are passed through verbatim
            pos.on_barcode(line)
        print(pos.display.last_line)

    print("\n===== RECEIPT =====")
    print(pos.get_text() or "(nothing scanned)")
    print("===================")
    logger.info(
        "Checkout session closed",
        extra={"session_id": pos.session_id, "extra": {"lines": len(pos.display.lines)}},
    )
    return pos


def main() -> int:
    """Entry point for the ``pos-checkout`` console script."""
    try:
        settings = load_settings()
        logging_config.configure_logging(settings.log_dir, settings.log_level)
        catalog = build_catalog(settings)
    except (OSError, ValueError) as exc:
        print(f"Cannot start checkout: {exc}", file=sys.stderr)
        return 1
    interactive_cli(catalog)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted by user. Exiting.")
        sys.exit(0)
