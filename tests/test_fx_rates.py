"""
Unit Tests for the FX Rate Service

The HTTP session is stubbed; no network access.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import pytest
from decimal import Decimal
from unittest.mock import Mock

import requests

from lib.fx_rates import (
    DEFAULT_API_URL,
    ExchangeRateClient,
    RateTable,
    convert,
    rates_against,
)


def _session_returning(payload=None, error=None):
    """Stub session whose get() returns a response with the given JSON payload."""
    session = Mock()
    session.headers = {}

    if error is not None:
        session.get.side_effect = error
        return session

    response = Mock()
    response.raise_for_status.return_value = None
    response.json.return_value = payload
    session.get.return_value = response
    return session


@pytest.fixture
def table():
    """Rates against USD."""
    return RateTable(
        base="USD",
        rates={
            "USD": Decimal("1"),
            "NGN": Decimal("1500"),
            "GBP": Decimal("0.8"),
            "EUR": Decimal("0.9"),
            "ZWL": Decimal("0"),
        },
    )


class TestExchangeRateClient:

    def test_fetch_rates(self):
        session = _session_returning({"base": "USD", "rates": {"USD": 1, "NGN": 1532.25, "gbp": "0.79"}})
        client = ExchangeRateClient(session=session)

        result = client.fetch_rates("usd")

        assert result.base == "USD"
        assert result.rate("NGN") == Decimal("1532.25")
        assert result.rate("GBP") == Decimal("0.79")
        session.get.assert_called_once_with(DEFAULT_API_URL.format(base="USD"), timeout=10)

    def test_sets_headers(self):
        session = _session_returning({})

        ExchangeRateClient(session=session)

        assert session.headers["Accept"] == "application/json"

    def test_custom_url_from_environment(self, monkeypatch):
        monkeypatch.setenv("FX_API_URL", "https://fx.example.test/{base}.json")
        session = _session_returning({"rates": {"NGN": 1500}})

        ExchangeRateClient(session=session).fetch_rates("EUR")

        session.get.assert_called_once_with("https://fx.example.test/EUR.json", timeout=10)

    def test_network_failure_returns_none(self):
        session = _session_returning(error=requests.ConnectionError("unreachable"))

        assert ExchangeRateClient(session=session).fetch_rates() is None

    def test_http_error_returns_none(self):
        session = _session_returning({"rates": {"NGN": 1500}})
        session.get.return_value.raise_for_status.side_effect = requests.HTTPError("503")

        assert ExchangeRateClient(session=session).fetch_rates() is None

    def test_invalid_json_returns_none(self):
        session = _session_returning()
        session.get.return_value.json.side_effect = ValueError("no JSON")

        assert ExchangeRateClient(session=session).fetch_rates() is None

    def test_empty_rates_returns_none(self):
        session = _session_returning({"base": "USD", "rates": {}})

        assert ExchangeRateClient(session=session).fetch_rates() is None

    def test_unparseable_rate_skipped(self):
        session = _session_returning({"rates": {"NGN": "1500", "XXX": "n/a"}})

        result = ExchangeRateClient(session=session).fetch_rates()

        assert result.rate("NGN") == Decimal("1500")
        assert result.rate("XXX") is None


    def test_non_finite_rate_skipped(self):
        session = _session_returning({"rates": {"NGN": "1500", "GBP": "NaN", "EUR": "Infinity"}})

        result = ExchangeRateClient(session=session).fetch_rates()

        assert result.rate("NGN") == Decimal("1500")
        assert result.rate("GBP") is None
        assert result.rate("EUR") is None
        assert convert(100, "GBP", "NGN", result) is None


class TestConvert:

    def test_base_to_quote(self, table):
        assert convert(100, "USD", "NGN", table) == Decimal("150000")

    def test_cross_rate(self, table):
        assert convert(80, "GBP", "NGN", table) == Decimal("150000")

    def test_quote_to_foreign(self, table):
        assert convert(1500, "NGN", "USD", table) == Decimal("1")

    def test_same_currency(self, table):
        assert convert("250.50", "USD", "USD", table) == Decimal("250.50")

    def test_missing_rate(self, table):
        assert convert(100, "JPY", "NGN", table) is None
        assert convert(100, "NGN", "JPY", table) is None

    def test_zero_from_rate(self, table):
        assert convert(100, "ZWL", "NGN", table) is None

    def test_non_finite_rate_in_table(self):
        table = RateTable(base="USD", rates={"USD": Decimal("1"), "NGN": Decimal("NaN"), "GBP": Decimal("NaN")})

        assert convert(100, "GBP", "USD", table) is None
        assert convert(100, "USD", "NGN", table) is None

    def test_lowercase_codes(self, table):
        assert convert(1, "usd", "ngn", table) == Decimal("1500")


class TestRatesAgainst:

    def test_default_currencies(self, table):
        rows = dict(rates_against(table))

        assert rows["USD"] == Decimal("1500")
        assert rows["GBP"] == Decimal("1875")
        assert "NGN" not in rows
        # No CAD rate in the table
        assert "CAD" not in rows

    def test_requested_order(self, table):
        assert [code for code, _ in rates_against(table, currencies=["EUR", "USD"])] == ["EUR", "USD"]
