"""
Nigeria Personal Income Tax - Usage Example

Estimates tax for a salaried employee with housing, rent relief and some
crypto trading, then changes one field and recomputes.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from modules.tax.regimes import get_regime
from modules.tax.tax_models import TaxInputs
from modules.tax.validation import estimate
from lib.formatting import format_naira, format_percent


def print_result(result):
    print(f"Gross Income:          {format_naira(result.total_gross_income):>16}")
    print(f"BIK Adjustments:       {format_naira(result.bik_adjustments):>16}")
    print(f"Deductions:            {format_naira(result.total_exemptions_and_deductions):>16}")
    print(f"  of which Rent Relief {format_naira(result.rent_relief):>16}")
    print(f"Chargeable Gains:      {format_naira(result.total_chargeable_gains):>16}")
    print(f"Net Chargeable Income: {format_naira(result.net_chargeable_income):>16}")
    print()

    for entry in result.breakdown:
        print(f"  {entry.bracket:<34} {format_naira(entry.taxable_amount):>14} -> {format_naira(entry.tax_due):>12}")

    print()
    print(f"Total Tax Due:         {format_naira(result.total_tax_due):>16}")
    print(f"Effective Rate:        {format_percent(round(result.effective_rate(), 2)):>16}")
    print(f"Annual Take-Home:      {format_naira(result.annual_take_home_pay):>16}")
    print(f"Monthly Take-Home:     {format_naira(result.monthly_take_home_pay):>16}")


def main():
    """Demonstrate the estimator with a worked example."""

    print("=" * 70)
    print("Nigeria Personal Income Tax (NTA 2025) - Demo")
    print("=" * 70)
    print()

    inputs = TaxInputs.from_dict({
        "residency": "resident",
        "annual_gross_salary": 12_000_000,
        "investing_income": {"dividends": 300_000, "interest": 150_000},
        "chargeable_gains": {
            "digital_asset_gains": 900_000,
            "digital_asset_losses": 1_200_000,  # wiped out, cannot touch other income
            "other_asset_gains": 400_000,
        },
        "employer_benefits": {"housing_provided": True, "housing_rental_value": 3_000_000},
        "reliefs": {
            "annual_pension": 960_000,
            "annual_nhf": 300_000,
            "annual_rent_paid": 1_800_000,
        },
    })

    regime = get_regime("NG-NTA-2025")
    print(f"Using regime: {regime.name} ({regime.code})")
    print()

    print_result(estimate(inputs, regime))

    print()
    print("=" * 70)
    print("After a pay rise to ₦15,000,000")
    print("=" * 70)
    print()

    print_result(estimate(inputs.with_value("annual_gross_salary", 15_000_000), regime))
    print()


if __name__ == "__main__":
    main()
