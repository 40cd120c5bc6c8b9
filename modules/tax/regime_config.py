"""
Tax Regime Configuration

Plain-data definitions of the supported personal income tax regimes.
Each entry is turned into a TaxRegime by modules.tax.regimes at import.

Format:
{
    "CODE": {
        "name": "...",
        "tax_year": 2025,
        "currency": "NGN",
        "minimum_wage_exemption": "800000",
        "rent_relief_cap": "500000",
        "rent_relief_rate": "0.20",
        "housing_bik_cap_rate": "0.20",
        "vehicle_bik_rate": "0.05",
        "bands": [
            {"width": "800000", "rate": "0", "label": "..."},
            ...
            {"width": None, "rate": "0.25", "label": "..."}   # last band unbounded
        ]
    }
}

Amounts and rates are strings so they load into Decimal exactly.
Additional regimes can be supplied at runtime as a JSON file in the same
format (TAX_REGIME_FILE environment variable, or regimes.load_regime()).

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

DEFAULT_REGIME_CODE = "NG-NTA-2025"

TAX_REGIMES = {
    # Nigeria Tax Act 2025, personal income tax
    "NG-NTA-2025": {
        "name": "Nigeria Tax Act 2025",
        "tax_year": 2025,
        "currency": "NGN",
        "minimum_wage_exemption": "800000",
        "rent_relief_cap": "500000",
        "rent_relief_rate": "0.20",
        "housing_bik_cap_rate": "0.20",
        "vehicle_bik_rate": "0.05",
        "bands": [
            {"width": "800000", "rate": "0", "label": "First ₦800,000 (Exempt)"},
            {"width": "2200000", "rate": "0.15", "label": "Next ₦2,200,000 (15%)"},
            {"width": "9000000", "rate": "0.18", "label": "Next ₦9,000,000 (18%)"},
            {"width": "13000000", "rate": "0.21", "label": "Next ₦13,000,000 (21%)"},
            {"width": "25000000", "rate": "0.23", "label": "Next ₦25,000,000 (23%)"},
            {"width": None, "rate": "0.25", "label": "Above ₦50,000,000 (25%)"},
        ],
    },
}
