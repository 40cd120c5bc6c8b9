"""
Display formatting for amounts.

Rounding happens here, once, at display time. Values handed to these
functions are never modified.
"""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from modules.tax.tax_models import to_decimal

CURRENCY_SYMBOLS = {
    "NGN": "₦",
    "USD": "$",
    "GBP": "£",
    "EUR": "€",
    "CAD": "CA$",
}

# Keeps digits, sign, decimal point and the exponent marker ("1e5")
_NON_NUMERIC = re.compile(r"[^0-9.eE\-]")


def format_currency(amount, currency: str = "NGN", decimals: int = 2) -> str:
    """
    Grouped currency string, e.g. format_currency(1234.5, "USD") -> "$1,234.50".

    Unknown currency codes are used as the prefix ("JPY 1,000.00").
    """
    value = to_decimal(amount)
    if not value.is_finite():
        return str(value)

    quantum = Decimal(1).scaleb(-decimals)
    rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)

    symbol = CURRENCY_SYMBOLS.get(currency.upper(), f"{currency.upper()} ")
    sign = "-" if rounded < 0 else ""

    return f"{sign}{symbol}{abs(rounded):,.{decimals}f}"


def format_naira(amount) -> str:
    """Whole-naira display, e.g. 5130000 -> "₦5,130,000"."""
    return format_currency(amount, "NGN", decimals=0)


def format_percent(rate) -> str:
    """15 -> "15%", 17.5 -> "17.5%"."""
    value = to_decimal(rate).normalize()
    return f"{value:f}%"


def parse_amount(text) -> Decimal:
    """
    Parse a form field into an amount.

    Grouping commas, spaces and currency symbols are ignored and scientific
    notation is accepted. Blank or unparseable text (including arithmetic
    such as "5-3") reads as zero, like an empty form field.
    """
    if text is None:
        return Decimal(0)
    if isinstance(text, (int, float, Decimal)):
        return to_decimal(text)

    cleaned = _NON_NUMERIC.sub("", str(text))
    if not cleaned:
        return Decimal(0)

    try:
        return Decimal(cleaned)
    except InvalidOperation:
        return Decimal(0)
