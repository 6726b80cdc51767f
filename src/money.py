"""
Money helpers shared by the catalog, cart and display.

Prices are held as :class:`decimal.Decimal` so that cart totals are exact
to the cent.  Formatting always renders two fractional digits with a
fixed ``$`` prefix, e.g. ``$7.25`` or ``$1,234.50``.
"""

from __future__ import annotations

import decimal
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Iterable, Union

Price = Union[Decimal, int, float, str]

CENT = Decimal("0.01")
CURRENCY_SYMBOL = "$"


def to_decimal(value: Price) -> Decimal:
    """Coerce a price into a ``Decimal``.

    Floats go through ``str()`` first so ``7.25`` becomes ``Decimal("7.25")``
    rather than its binary expansion.

    :raises ValueError: if the value is not a finite number.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a price: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, float):
        amount = Decimal(str(value))
    elif isinstance(value, (int, str)):
        try:
            amount = Decimal(value.strip() if isinstance(value, str) else value)
        except InvalidOperation:
            raise ValueError(f"Not a price: {value!r}") from None
    else:
        raise ValueError(f"Not a price: {value!r}")
    if not amount.is_finite():
        raise ValueError(f"Not a price: {value!r}")
    return amount


def format_money(value: Price) -> str:
    """Render an amount as ``$N.NN`` with thousands separators."""
    amount = to_decimal(value)
    # ROUND_HALF_UP on Decimal rounds midpoints away from zero
    with decimal.localcontext(exact_context([amount])):
        amount = amount.quantize(CENT, rounding=ROUND_HALF_UP)
    if amount.is_zero():
        amount = amount.copy_abs()
    return f"{CURRENCY_SYMBOL}{amount:,.2f}"


def exact_context(amounts: Iterable[Decimal]) -> decimal.Context:
    """Context wide enough to add or cent-round ``amounts`` without loss.

    The default 28 digits would round large sums and make ``quantize``
    fail for amounts of 1E+26 and above.
    """
    amounts = list(amounts)
    context = decimal.getcontext().copy()
    context.Emax = decimal.MAX_EMAX
    context.Emin = decimal.MIN_EMIN
    # Span from the highest whole digit down to the lowest fractional one,
    # never stopping above the cent
    top = max((amount.adjusted() for amount in amounts), default=0)
    bottom = min([CENT.as_tuple().exponent] + [amount.as_tuple().exponent for amount in amounts])
    digits = max(context.prec, top - bottom + 1)
    # Room for carries when summing
    context.prec = digits + len(str(len(amounts))) + 1
    return context
