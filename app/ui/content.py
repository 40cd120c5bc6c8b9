# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the NaijaTax Estimator project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
Static page content: disclaimer, field help and the guidelines glossary.
"""

DISCLAIMER = (
    "**Note:** This app gives a preliminary tax estimate under the Nigeria Tax Act 2025 "
    "for informational purposes only. It is meant to help you understand how reliefs and "
    "benefits change your tax liability.\n\n"
    "Results are not official advice. For an accurate assessment, consult a certified tax "
    "professional or the relevant tax authority."
)

FOOTER = (
    "© 2026 NaijaTax Estimator. Logic based on the Nigeria Tax Act (NTA) 2025. "
    "This tool is for estimation purposes only. Consult a tax professional for official filing."
)

FIELD_HELP = {
    "residency": "Resident: taxed on worldwide income. Non-resident: taxed only on Nigerian source income. "
                 "Enter only the income that is taxable for your status.",
    "annual_gross_salary": "Include all basic pay, allowances, bonuses and commissions.",
    "digital_asset_gains": "Profits from transactions in digital/virtual assets (e.g. crypto, NFTs).",
    "digital_asset_losses": "Digital asset losses can ONLY be offset against digital asset gains.",
    "other_asset_gains": "Gains on disposal of other assets such as land, buildings or shares.",
    "housing_rental_value": "The benefit is the annual rental value, capped at 20% of your annual gross salary.",
    "car_acquisition_cost": "The annual benefit is 5% of the cost the employer paid to acquire the car.",
    "annual_rent_paid": "Relief is 20% of annual rent paid, up to a maximum of ₦500,000.",
    "statutory": "Annual contributions under the Pension Reform Act, National Housing Fund and "
                 "National Health Insurance.",
    "life_assurance_premiums": "Annual premiums on insurance on your life or your spouse's life.",
    "mortgage_interest": "Interest on a loan for an owner-occupied residential house.",
}

BANDS_NOTE = (
    "These rates apply to your **Net Chargeable Income**, after benefits-in-kind are added "
    "and reliefs (pension, NHF, NHIS, rent relief, etc.) are deducted."
)

# (section title, [(term, explanation), ...])
GUIDELINES = [
    ("1. Key Definitions", [
        ("Benefits-in-Kind (BIK)",
         "Non-cash perks from your employer, such as official housing or a company car, are "
         "taxable income. Housing counts at its annual rental value, capped at 20% of your gross "
         "salary. Other assets such as vehicles count at 5% of the employer's acquisition cost."),
        ("Digital Assets",
         "Electronic representations of value that can be traded digitally: cryptocurrencies, "
         "utility and security tokens, NFTs. Profits from selling or exchanging them are taxable."),
        ("Chargeable Gains",
         "The gain on disposing of a personal asset such as land, buildings or shares. Gains are "
         "taxed at your personal income tax rate (up to 25%) rather than the old flat 10%."),
        ("Tax Exemptions",
         "Earning the national minimum wage or less makes you fully exempt from income tax. "
         "Compensation for loss of employment is exempt up to ₦50,000,000."),
    ]),
    ("2. Understanding Residency", [
        ("Resident Individual",
         "Domiciled in Nigeria, with a habitual abode here, or present for at least 183 days in a "
         "12-month period. Residents are taxed on worldwide income."),
        ("Non-Resident Individual",
         "Only income derived from sources within Nigeria is taxed."),
    ]),
    ("3. Reliefs and Deductions", [
        ("Rent Relief",
         "Replaces the old Consolidated Relief Allowance: 20% of actual annual rent paid, "
         "up to ₦500,000."),
        ("Statutory Deductions",
         "Contributions to the National Housing Fund, National Health Insurance Scheme and "
         "pension funds are deductible."),
        ("Life Assurance & Mortgage",
         "Life assurance premiums (you or your spouse) and interest on a mortgage for an "
         "owner-occupied home are deductible."),
    ]),
    ("4. Loss Offsetting Rules", [
        ("General Rule",
         "Trading or business losses can be carried forward until fully recovered."),
        ("Digital Asset Restriction",
         "A loss on digital assets can only be set against gains on other digital assets, "
         "never against salary or other income."),
    ]),
]
