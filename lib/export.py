"""
Export of a tax estimate.

Replaces the browser print of the web calculator with downloadable
CSV (band breakdown plus summary lines) and JSON (full result) files.
"""

import json
from datetime import date
from typing import Optional

import pandas as pd

from modules.tax.tax_models import TaxResult

BREAKDOWN_COLUMNS = ["Band", "Rate (%)", "Taxable Amount", "Tax Due"]

SUMMARY_LINES = [
    ("Total Gross Income", "total_gross_income"),
    ("Benefits-in-Kind", "bik_adjustments"),
    ("Exemptions & Deductions", "total_exemptions_and_deductions"),
    ("Net Chargeable Income", "net_chargeable_income"),
    ("Total Tax Due", "total_tax_due"),
    ("Annual Take-Home Pay", "annual_take_home_pay"),
    ("Monthly Take-Home Pay", "monthly_take_home_pay"),
]


def breakdown_to_dataframe(result: TaxResult) -> pd.DataFrame:
    """One row per band touched, in band order. Empty frame for an exempt result."""
    rows = [
        {
            "Band": entry.bracket,
            "Rate (%)": float(entry.rate),
            "Taxable Amount": float(entry.taxable_amount),
            "Tax Due": float(entry.tax_due),
        }
        for entry in result.breakdown
    ]
    return pd.DataFrame(rows, columns=BREAKDOWN_COLUMNS)


def summary_to_dataframe(result: TaxResult) -> pd.DataFrame:
    """Headline figures as (Item, Amount) rows."""
    rows = [
        {"Item": label, "Amount": float(getattr(result, attr))}
        for label, attr in SUMMARY_LINES
    ]
    return pd.DataFrame(rows, columns=["Item", "Amount"])


def result_to_csv(result: TaxResult) -> str:
    """Breakdown table followed by the summary table, as CSV text."""
    breakdown_csv = breakdown_to_dataframe(result).to_csv(index=False)
    summary_csv = summary_to_dataframe(result).to_csv(index=False)
    return f"{breakdown_csv}\n{summary_csv}"


def result_to_json(result: TaxResult, generated_on: Optional[date] = None) -> str:
    """Full result as JSON, stamped with the generation date."""
    payload = result.to_dict()
    payload["generated_on"] = (generated_on or date.today()).isoformat()
    return json.dumps(payload, indent=2, ensure_ascii=False)
