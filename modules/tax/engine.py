"""
Tax Engine - Personal Income Tax Computation

Transforms one TaxInputs into an itemized TaxResult. The computation is a
single synchronous pass, in this order:
1. Aggregate gross income (salary + dividends + interest + royalties)
2. Minimum-wage exemption: at or below the threshold nothing else applies
3. Benefits-in-kind (housing capped at a share of gross salary, vehicle at
   a flat share of acquisition cost)
4. Reliefs and deductions (rent relief capped, the rest at face value)
5. Chargeable gains (digital losses only offset digital gains)
6. Net chargeable income, floored at zero
7. Progressive band walk
8. Take-home pay (gross income less tax and statutory contributions)

All thresholds, caps and bands come from the TaxRegime passed in.

The engine is pure: no I/O, no mutation of its inputs and no validation.
Negative or non-finite inputs are the caller's responsibility
(see modules.tax.validation).

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from decimal import Decimal
from typing import List, Optional, Sequence, Tuple

from modules.tax.tax_models import (
    TaxInputs,
    TaxResult,
    TaxBreakdown,
    EmployerBenefits,
    ChargeableGains,
    Reliefs,
)
from modules.tax.regimes import TaxBand, TaxRegime, get_default_regime
from utils.logging_config import setup_logger

logger = setup_logger(__name__)

ZERO = Decimal(0)
MONTHS_PER_YEAR = 12


def calculate_gross_income(inputs: TaxInputs) -> Decimal:
    """
    Salary plus investment income.

    Chargeable gains and benefits-in-kind are layered in later and are not
    part of this figure.
    """
    income = inputs.investing_income
    return inputs.annual_gross_salary + income.dividends + income.interest + income.royalties


def calculate_bik_adjustments(
    annual_gross_salary: Decimal,
    benefits: EmployerBenefits,
    regime: TaxRegime
) -> Decimal:
    """
    Value employer-provided benefits.

    Housing: rental value, capped at housing_bik_cap_rate of gross salary only.
    Vehicle: vehicle_bik_rate of the acquisition cost, uncapped.
    """
    bik = ZERO

    if benefits.housing_provided:
        bik += min(benefits.housing_rental_value, regime.housing_bik_cap_rate * annual_gross_salary)

    if benefits.car_provided:
        bik += benefits.car_acquisition_cost * regime.vehicle_bik_rate

    return bik


def calculate_rent_relief(annual_rent_paid: Decimal, regime: TaxRegime) -> Decimal:
    """rent_relief_rate of rent paid, hard-capped at rent_relief_cap."""
    return min(annual_rent_paid * regime.rent_relief_rate, regime.rent_relief_cap)


def calculate_total_deductions(reliefs: Reliefs, rent_relief: Decimal) -> Decimal:
    return (
        reliefs.annual_pension
        + reliefs.annual_nhf
        + reliefs.annual_nhis
        + reliefs.life_assurance_premiums
        + reliefs.mortgage_interest
        + rent_relief
    )


def calculate_chargeable_gains(gains: ChargeableGains) -> Tuple[Decimal, Decimal]:
    """
    Net the chargeable gains.

    Digital asset losses only offset digital asset gains. A net digital loss
    is discarded (not carried forward, not set against other income).

    Returns:
        (digital_gains, total_chargeable_gains)
    """
    digital_gains = max(ZERO, gains.digital_asset_gains - gains.digital_asset_losses)
    return digital_gains, digital_gains + gains.other_asset_gains


def apply_tax_bands(
    net_chargeable_income: Decimal,
    bands: Sequence[TaxBand]
) -> Tuple[List[TaxBreakdown], Decimal]:
    """
    Walk the bands in order, taxing each slice of income at its band rate.

    Stops as soon as the income is used up, so bands beyond that point never
    appear in the breakdown. The first band is always present when income
    is positive.

    Returns:
        (breakdown, total_tax_due)
    """
    remaining_income = net_chargeable_income
    total_tax_due = ZERO
    breakdown: List[TaxBreakdown] = []

    for band in bands:
        if remaining_income <= 0:
            break

        if band.is_unbounded():
            taxable_in_band = remaining_income
        else:
            taxable_in_band = min(remaining_income, band.width)

        tax_in_band = taxable_in_band * band.rate

        breakdown.append(TaxBreakdown(
            bracket=band.label,
            rate=band.rate * 100,
            taxable_amount=taxable_in_band,
            tax_due=tax_in_band,
        ))

        total_tax_due += tax_in_band
        remaining_income -= taxable_in_band

    return breakdown, total_tax_due


def calculate_take_home_pay(
    total_gross_income: Decimal,
    total_tax_due: Decimal,
    reliefs: Reliefs
) -> Decimal:
    """
    Cash left after tax and statutory contributions (pension, NHF, NHIS).

    Benefits-in-kind are notional and rent/life assurance/mortgage reliefs are
    not cash deductions, so none of them appear here. Not clamped: can be
    negative for pathological inputs.
    """
    return total_gross_income - total_tax_due - reliefs.statutory_contributions()


def compute(inputs: TaxInputs, regime: Optional[TaxRegime] = None) -> TaxResult:
    """
    Compute the tax estimate for one set of inputs.

    Args:
        inputs: Income, benefit and relief figures (treated as read-only)
        regime: Tax configuration; defaults to get_default_regime()

    Returns:
        Fully derived TaxResult
    """
    if regime is None:
        regime = get_default_regime()

    total_gross_income = calculate_gross_income(inputs)

    if total_gross_income <= regime.minimum_wage_exemption:
        logger.debug(f"Gross income {total_gross_income} within exemption threshold ({regime.code})")
        return _create_exempt_result(total_gross_income, regime)

    bik_adjustments = calculate_bik_adjustments(
        inputs.annual_gross_salary,
        inputs.employer_benefits,
        regime
    )
    income_with_bik = total_gross_income + bik_adjustments

    rent_relief = calculate_rent_relief(inputs.reliefs.annual_rent_paid, regime)
    total_deductions = calculate_total_deductions(inputs.reliefs, rent_relief)

    _, total_chargeable_gains = calculate_chargeable_gains(inputs.chargeable_gains)

    # Reliefs come off before gains are added back; gains are not relieved
    net_chargeable_income = max(ZERO, (income_with_bik - total_deductions) + total_chargeable_gains)

    breakdown, total_tax_due = apply_tax_bands(net_chargeable_income, regime.bands)

    annual_take_home_pay = calculate_take_home_pay(total_gross_income, total_tax_due, inputs.reliefs)

    logger.debug(
        f"Computed {regime.code}: net chargeable {net_chargeable_income}, "
        f"tax due {total_tax_due} across {len(breakdown)} bands"
    )

    return TaxResult(
        total_gross_income=total_gross_income,
        bik_adjustments=bik_adjustments,
        total_exemptions_and_deductions=total_deductions,
        net_chargeable_income=net_chargeable_income,
        total_tax_due=total_tax_due,
        breakdown=breakdown,
        annual_take_home_pay=annual_take_home_pay,
        monthly_take_home_pay=annual_take_home_pay / MONTHS_PER_YEAR,
        is_exempt=False,
        rent_relief=rent_relief,
        total_chargeable_gains=total_chargeable_gains,
        regime_code=regime.code,
    )


def _create_exempt_result(total_gross_income: Decimal, regime: TaxRegime) -> TaxResult:
    """Exempt result: no tax, no deductions, take-home equals gross income."""
    return TaxResult(
        total_gross_income=total_gross_income,
        bik_adjustments=ZERO,
        total_exemptions_and_deductions=ZERO,
        net_chargeable_income=ZERO,
        total_tax_due=ZERO,
        breakdown=[],
        annual_take_home_pay=total_gross_income,
        monthly_take_home_pay=total_gross_income / MONTHS_PER_YEAR,
        is_exempt=True,
        regime_code=regime.code,
    )
