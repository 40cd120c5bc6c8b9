"""
FX Rate Service

Converts estimate amounts between Naira and a small set of foreign
currencies using rates from a public exchange-rate API.

The API returns every rate against a single base currency (USD by
default), so any pair converts through that base:
    amount / rate[from] * rate[to]

Rates are fetched on demand with a single request. There is no retry,
no cache and no staleness policy; a failed fetch is logged and reported
as None.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import os
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Dict, Iterable, List, Optional, Tuple

import requests

from modules.tax.tax_models import to_decimal
from utils.logging_config import setup_logger, get_perf_logger

logger = setup_logger(__name__)


DEFAULT_API_URL = "https://api.exchangerate-api.com/v4/latest/{base}"

# code -> (flag, display name)
SUPPORTED_CURRENCIES: Dict[str, Tuple[str, str]] = {
    "USD": ("🇺🇸", "US Dollar"),
    "GBP": ("🇬🇧", "British Pound"),
    "EUR": ("🇪🇺", "Euro"),
    "CAD": ("🇨🇦", "Canadian Dollar"),
    "NGN": ("🇳🇬", "Nigerian Naira"),
}

QUOTE_CURRENCY = "NGN"


@dataclass(frozen=True)
class RateTable:
    """Rates for one base currency: 1 unit of base = rates[code] units of code."""

    base: str
    rates: Dict[str, Decimal]
    fetched_at: datetime = field(default_factory=datetime.now)

    def rate(self, currency: str) -> Optional[Decimal]:
        return self.rates.get(currency.upper())


class ExchangeRateClient:
    """Thin client for the exchange-rate API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 10,
        session: Optional[requests.Session] = None
    ):
        self.base_url = base_url or os.getenv("FX_API_URL", DEFAULT_API_URL)
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": "NaijaTaxEstimator/1.0",
            "Accept": "application/json"
        })

    def fetch_rates(self, base: str = "USD") -> Optional[RateTable]:
        """
        Fetch the latest rates against a base currency.

        Returns:
            RateTable, or None if the request or the payload failed
        """
        base = base.upper()
        url = self.base_url.format(base=base)

        try:
            with get_perf_logger(logger, f"fetch_rates {base}", threshold_ms=2000):
                response = self.session.get(url, timeout=self.timeout)
                response.raise_for_status()
                payload = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"FX rate fetch failed for base {base}: {e}")
            return None

        raw_rates = payload.get("rates") if isinstance(payload, dict) else None
        if not raw_rates:
            logger.warning(f"FX rate response for base {base} has no rates")
            return None

        rates = {}
        for code, value in raw_rates.items():
            try:
                rate = to_decimal(value)
            except InvalidOperation:
                logger.debug(f"Skipping unparseable rate {code}={value!r}")
                continue
            if not rate.is_finite():
                logger.debug(f"Skipping non-finite rate {code}={value!r}")
                continue
            rates[code.upper()] = rate

        logger.info(f"Fetched {len(rates)} FX rates against {base}")
        return RateTable(base=payload.get("base", base).upper(), rates=rates)


def convert(
    amount,
    from_currency: str,
    to_currency: str,
    table: RateTable
) -> Optional[Decimal]:
    """
    Convert an amount through the table's base currency.

    Returns:
        Converted amount, or None if either currency has no usable rate
    """
    from_rate = table.rate(from_currency)
    to_rate = table.rate(to_currency)

    if from_rate is None or to_rate is None:
        return None
    if from_rate == 0 or not (from_rate.is_finite() and to_rate.is_finite()):
        return None

    return to_decimal(amount) / from_rate * to_rate


def rates_against(
    table: RateTable,
    quote: str = QUOTE_CURRENCY,
    currencies: Optional[Iterable[str]] = None
) -> List[Tuple[str, Decimal]]:
    """
    Value of one unit of each currency expressed in the quote currency.

    Currencies without a rate are skipped.

    Returns:
        [(code, price in quote currency), ...] in the requested order
    """
    if currencies is None:
        currencies = [code for code in SUPPORTED_CURRENCIES if code != quote]

    rows = []
    for code in currencies:
        value = convert(1, code, quote, table)
        if value is not None:
            rows.append((code, value))

    return rows
