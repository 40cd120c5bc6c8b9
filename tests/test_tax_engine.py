"""
Unit Tests for the Tax Engine

Tests the NTA 2025 computation pipeline: exemption, benefits-in-kind,
reliefs, chargeable gains, the band walk and take-home pay.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import pytest
from dataclasses import replace
from decimal import Decimal

from modules.tax.engine import (
    apply_tax_bands,
    calculate_bik_adjustments,
    calculate_chargeable_gains,
    calculate_gross_income,
    calculate_rent_relief,
    compute,
)
from modules.tax.regimes import TaxBand, get_regime
from modules.tax.tax_models import (
    ChargeableGains,
    EmployerBenefits,
    InvestingIncome,
    Reliefs,
    TaxInputs,
)


@pytest.fixture
def regime():
    """Provide the built-in NTA 2025 regime."""
    return get_regime("NG-NTA-2025")


class TestExemption:
    """Minimum-wage exemption boundary."""

    def test_at_threshold_is_exempt(self, regime):
        result = compute(TaxInputs(annual_gross_salary=800000), regime)

        assert result.is_exempt is True
        assert result.total_tax_due == 0
        assert result.breakdown == []
        assert result.annual_take_home_pay == Decimal("800000")
        assert result.monthly_take_home_pay == Decimal("800000") / 12

    def test_one_naira_above_threshold_is_taxed(self, regime):
        result = compute(TaxInputs(annual_gross_salary=800001), regime)

        assert result.is_exempt is False
        assert len(result.breakdown) == 2
        assert result.breakdown[0].tax_due == 0
        assert result.breakdown[1].taxable_amount == Decimal("1")
        assert result.total_tax_due == Decimal("0.15")

    def test_exempt_ignores_benefits_and_reliefs(self, regime):
        inputs = TaxInputs(
            annual_gross_salary=600000,
            employer_benefits=EmployerBenefits(car_provided=True, car_acquisition_cost=10000000),
            reliefs=Reliefs(annual_pension=50000, annual_rent_paid=300000),
        )

        result = compute(inputs, regime)

        assert result.is_exempt is True
        assert result.bik_adjustments == 0
        assert result.total_exemptions_and_deductions == 0
        assert result.net_chargeable_income == 0
        # Take-home equals gross for an exempt result, contributions are not deducted
        assert result.annual_take_home_pay == Decimal("600000")

    def test_investment_income_counts_toward_threshold(self, regime):
        inputs = TaxInputs(
            annual_gross_salary=700000,
            investing_income=InvestingIncome(dividends=150000),
        )

        result = compute(inputs, regime)

        assert result.is_exempt is False
        assert result.total_gross_income == Decimal("850000")

    def test_zero_income(self, regime):
        result = compute(TaxInputs(), regime)

        assert result.is_exempt is True
        assert result.total_gross_income == 0
        assert result.annual_take_home_pay == 0
        assert result.effective_rate() == 0


class TestEndToEnd:
    """Full computation for a plain salaried earner."""

    @pytest.fixture
    def result(self, regime):
        return compute(TaxInputs(annual_gross_salary=6000000), regime)

    def test_totals(self, result):
        assert result.total_gross_income == Decimal("6000000")
        assert result.net_chargeable_income == Decimal("6000000")
        assert result.total_tax_due == Decimal("870000")
        assert result.annual_take_home_pay == Decimal("5130000")
        assert result.monthly_take_home_pay == Decimal("427500")

    def test_breakdown(self, result):
        assert [entry.taxable_amount for entry in result.breakdown] == [
            Decimal("800000"), Decimal("2200000"), Decimal("3000000")
        ]
        assert [entry.rate for entry in result.breakdown] == [Decimal("0"), Decimal("15"), Decimal("18")]
        assert [entry.tax_due for entry in result.breakdown] == [
            Decimal("0"), Decimal("330000"), Decimal("540000")
        ]
        assert result.breakdown[0].bracket == "First ₦800,000 (Exempt)"

    def test_breakdown_sums_to_totals(self, result):
        assert sum(e.tax_due for e in result.breakdown) == result.total_tax_due
        assert sum(e.taxable_amount for e in result.breakdown) == result.net_chargeable_income

    def test_effective_rate(self, result):
        assert result.effective_rate() == Decimal("14.5")

    def test_regime_code_recorded(self, result):
        assert result.regime_code == "NG-NTA-2025"

    def test_top_band_takes_remainder(self, regime):
        result = compute(TaxInputs(annual_gross_salary=60000000), regime)

        assert len(result.breakdown) == 6
        assert result.breakdown[-1].taxable_amount == Decimal("10000000")
        assert result.breakdown[-1].rate == Decimal("25")
        # 0 + 330k + 1.62m + 2.73m + 5.75m + 2.5m
        assert result.total_tax_due == Decimal("12930000")


class TestBenefitsInKind:
    """Housing and vehicle benefit valuation."""

    def test_housing_capped_at_share_of_salary(self, regime):
        benefits = EmployerBenefits(housing_provided=True, housing_rental_value=500000)

        bik = calculate_bik_adjustments(Decimal("1000000"), benefits, regime)

        assert bik == Decimal("200000")

    def test_housing_below_cap_taken_at_face_value(self, regime):
        benefits = EmployerBenefits(housing_provided=True, housing_rental_value=150000)

        assert calculate_bik_adjustments(Decimal("1000000"), benefits, regime) == Decimal("150000")

    def test_values_ignored_without_flags(self, regime):
        benefits = EmployerBenefits(housing_rental_value=500000, car_acquisition_cost=20000000)

        assert calculate_bik_adjustments(Decimal("5000000"), benefits, regime) == 0

    def test_vehicle_flat_rate(self, regime):
        benefits = EmployerBenefits(car_provided=True, car_acquisition_cost=20000000)

        assert calculate_bik_adjustments(Decimal("5000000"), benefits, regime) == Decimal("1000000")

    def test_housing_cap_uses_salary_not_investment_income(self, regime):
        inputs = TaxInputs(
            annual_gross_salary=1000000,
            investing_income=InvestingIncome(interest=4000000),
            employer_benefits=EmployerBenefits(housing_provided=True, housing_rental_value=900000),
        )

        result = compute(inputs, regime)

        assert result.bik_adjustments == Decimal("200000")
        assert result.net_chargeable_income == Decimal("5200000")

    def test_bik_does_not_reduce_take_home(self, regime):
        base = TaxInputs(annual_gross_salary=6000000)
        with_car = replace(base, employer_benefits=EmployerBenefits(car_provided=True, car_acquisition_cost=10000000))

        plain = compute(base, regime)
        benefited = compute(with_car, regime)

        assert benefited.total_tax_due > plain.total_tax_due
        assert benefited.annual_take_home_pay == benefited.total_gross_income - benefited.total_tax_due


class TestReliefs:
    """Rent relief and face-value deductions."""

    def test_rent_relief_rate(self, regime):
        assert calculate_rent_relief(Decimal("1000000"), regime) == Decimal("200000")

    def test_rent_relief_capped(self, regime):
        assert calculate_rent_relief(Decimal("5000000"), regime) == Decimal("500000")

    def test_deductions_total(self, regime):
        reliefs = Reliefs(
            annual_pension=480000,
            annual_nhf=150000,
            annual_nhis=60000,
            annual_rent_paid=5000000,
            life_assurance_premiums=100000,
            mortgage_interest=200000,
        )

        result = compute(TaxInputs(annual_gross_salary=6000000, reliefs=reliefs), regime)

        assert result.rent_relief == Decimal("500000")
        assert result.total_exemptions_and_deductions == Decimal("1490000")
        assert result.net_chargeable_income == Decimal("4510000")

    def test_take_home_deducts_only_statutory_contributions(self, regime):
        reliefs = Reliefs(
            annual_pension=480000,
            annual_nhf=150000,
            annual_nhis=60000,
            annual_rent_paid=2000000,
            life_assurance_premiums=100000,
        )

        result = compute(TaxInputs(annual_gross_salary=6000000, reliefs=reliefs), regime)

        expected = Decimal("6000000") - result.total_tax_due - Decimal("690000")
        assert result.annual_take_home_pay == expected
        assert result.monthly_take_home_pay == expected / 12

    def test_net_chargeable_floored_at_zero(self, regime):
        reliefs = Reliefs(annual_pension=2000000)

        result = compute(TaxInputs(annual_gross_salary=1000000, reliefs=reliefs), regime)

        assert result.is_exempt is False
        assert result.net_chargeable_income == 0
        assert result.total_tax_due == 0
        assert result.breakdown == []
        # Take-home is not clamped
        assert result.annual_take_home_pay == Decimal("-1000000")


class TestChargeableGains:
    """Digital asset loss containment."""

    def test_digital_loss_only_offsets_digital_gain(self):
        gains = ChargeableGains(digital_asset_gains=100, digital_asset_losses=500, other_asset_gains=1000)

        digital, total = calculate_chargeable_gains(gains)

        assert digital == 0
        assert total == Decimal("1000")

    def test_digital_net_gain(self):
        gains = ChargeableGains(digital_asset_gains=800, digital_asset_losses=300, other_asset_gains=200)

        assert calculate_chargeable_gains(gains) == (Decimal("500"), Decimal("700"))

    def test_gains_added_after_reliefs(self, regime):
        inputs = TaxInputs(
            annual_gross_salary=2000000,
            chargeable_gains=ChargeableGains(other_asset_gains=1000000),
            reliefs=Reliefs(annual_pension=3000000),
        )

        result = compute(inputs, regime)

        # (2m - 3m) + 1m
        assert result.total_chargeable_gains == Decimal("1000000")
        assert result.net_chargeable_income == 0

    def test_gains_not_part_of_gross_income(self, regime):
        inputs = TaxInputs(
            annual_gross_salary=500000,
            chargeable_gains=ChargeableGains(digital_asset_gains=5000000),
        )

        assert calculate_gross_income(inputs) == Decimal("500000")
        assert compute(inputs, regime).is_exempt is True


class TestBandWalk:
    """Band ordering and early stop."""

    def test_stops_when_income_used_up(self, regime):
        breakdown, total = apply_tax_bands(Decimal("3000000"), regime.bands)

        assert len(breakdown) == 2
        assert total == Decimal("330000")

    def test_zero_income_produces_no_entries(self, regime):
        assert apply_tax_bands(Decimal("0"), regime.bands) == ([], Decimal("0"))

    def test_first_band_always_present(self, regime):
        breakdown, _ = apply_tax_bands(Decimal("1"), regime.bands)

        assert len(breakdown) == 1
        assert breakdown[0].bracket == regime.bands[0].label

    def test_entries_follow_band_order(self, regime):
        breakdown, _ = apply_tax_bands(Decimal("100000000"), regime.bands)

        assert [entry.bracket for entry in breakdown] == [band.label for band in regime.bands]


class TestAlternateRegime:
    """The engine takes all figures from the regime it is given."""

    def test_custom_bands_and_threshold(self, regime):
        flat = replace(
            regime,
            code="TEST-FLAT",
            minimum_wage_exemption=Decimal("0"),
            bands=(TaxBand(width=None, rate=Decimal("0.10"), label="Flat 10%"),),
        )

        result = compute(TaxInputs(annual_gross_salary=1000000), flat)

        assert result.total_tax_due == Decimal("100000")
        assert [entry.bracket for entry in result.breakdown] == ["Flat 10%"]
        assert result.regime_code == "TEST-FLAT"

    def test_default_regime_used_when_none(self):
        assert compute(TaxInputs(annual_gross_salary=6000000)).total_tax_due == Decimal("870000")


class TestPurity:
    """compute() must not mutate its inputs."""

    def test_inputs_unchanged(self, regime):
        inputs = TaxInputs(
            annual_gross_salary=6000000,
            reliefs=Reliefs(annual_rent_paid=1000000),
        )
        before = inputs.to_dict()

        compute(inputs, regime)
        compute(inputs, regime)

        assert inputs.to_dict() == before

    def test_repeatable(self, regime):
        inputs = TaxInputs(annual_gross_salary=7500000)

        assert compute(inputs, regime) == compute(inputs, regime)
