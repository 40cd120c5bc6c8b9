"""
Tax Input and Result Data Models

Defines the data structures flowing through the Tax Engine:
- TaxInputs: income, benefit and relief figures for one estimate
- TaxBreakdown: tax charged inside a single band
- TaxResult: the fully derived, itemized estimate

All models are immutable. A changed form field produces a new TaxInputs
(see TaxInputs.with_value) which is then recomputed in full.

Monetary values are Decimal. Numbers passed in as int/float/str are
converted through str() so 0.1 stays 0.1.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from dataclasses import dataclass, field, fields, replace, is_dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional


def to_decimal(value: Any) -> Decimal:
    """Coerce a number (or numeric string) to Decimal without float noise."""
    if isinstance(value, Decimal):
        return value
    if value is None or value == "":
        return Decimal(0)
    return Decimal(str(value))


def _amount_field():
    return field(default_factory=lambda: Decimal(0))


class Residency(str, Enum):
    """Residency status. Recorded only; the engine does not branch on it."""
    RESIDENT = "resident"
    NON_RESIDENT = "non-resident"

    @classmethod
    def normalize(cls, value: Any) -> 'Residency':
        """
        Normalize residency from enum, value or label.

        Raises:
            ValueError: If the value is not one of the two statuses.
        """
        if isinstance(value, cls):
            return value

        clean_value = str(value).strip().lower().replace("_", "-").replace(" ", "-")
        if clean_value == "nonresident":
            clean_value = cls.NON_RESIDENT.value

        return cls(clean_value)


@dataclass(frozen=True)
class _AmountGroup:
    """Base for groups of monetary fields; converts every amount field to Decimal."""

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if f.type is bool:
                object.__setattr__(self, f.name, bool(value))
            else:
                object.__setattr__(self, f.name, to_decimal(value))


@dataclass(frozen=True)
class InvestingIncome(_AmountGroup):
    dividends: Decimal = _amount_field()
    interest: Decimal = _amount_field()
    royalties: Decimal = _amount_field()


@dataclass(frozen=True)
class ChargeableGains(_AmountGroup):
    """Gross gains/losses before offsetting."""
    digital_asset_gains: Decimal = _amount_field()
    digital_asset_losses: Decimal = _amount_field()
    other_asset_gains: Decimal = _amount_field()


@dataclass(frozen=True)
class EmployerBenefits(_AmountGroup):
    """
    Benefits-in-kind provided by the employer.

    Rental value and acquisition cost only count when the paired flag is set.
    """
    housing_provided: bool = False
    housing_rental_value: Decimal = _amount_field()
    car_provided: bool = False
    car_acquisition_cost: Decimal = _amount_field()


@dataclass(frozen=True)
class Reliefs(_AmountGroup):
    """Annual reliefs. Everything except rent is deducted at face value."""
    annual_pension: Decimal = _amount_field()
    annual_nhf: Decimal = _amount_field()
    annual_nhis: Decimal = _amount_field()
    annual_rent_paid: Decimal = _amount_field()
    life_assurance_premiums: Decimal = _amount_field()
    mortgage_interest: Decimal = _amount_field()

    def statutory_contributions(self) -> Decimal:
        """Pension + NHF + NHIS, the cash contributions that reduce take-home pay."""
        return self.annual_pension + self.annual_nhf + self.annual_nhis


_GROUP_TYPES = {
    "investing_income": InvestingIncome,
    "chargeable_gains": ChargeableGains,
    "employer_benefits": EmployerBenefits,
    "reliefs": Reliefs,
}


@dataclass(frozen=True)
class TaxInputs:
    """
    Everything the Tax Engine needs for one estimate.

    Built fresh from form state on every recompute and never mutated.
    """

    residency: Residency = Residency.RESIDENT
    annual_gross_salary: Decimal = _amount_field()
    investing_income: InvestingIncome = field(default_factory=InvestingIncome)
    chargeable_gains: ChargeableGains = field(default_factory=ChargeableGains)
    employer_benefits: EmployerBenefits = field(default_factory=EmployerBenefits)
    reliefs: Reliefs = field(default_factory=Reliefs)

    def __post_init__(self):
        object.__setattr__(self, "annual_gross_salary", to_decimal(self.annual_gross_salary))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'TaxInputs':
        """
        Build inputs from a nested mapping (form state).

        Missing keys fall back to zero / False / resident.

        Raises:
            ValueError: On an unknown residency value
        """
        groups = {}
        for name, group_type in _GROUP_TYPES.items():
            group_data = data.get(name) or {}
            known = {f.name for f in fields(group_type)}
            groups[name] = group_type(**{k: v for k, v in group_data.items() if k in known})

        return cls(
            residency=Residency.normalize(data.get("residency", Residency.RESIDENT)),
            annual_gross_salary=data.get("annual_gross_salary", 0),
            **groups
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a nested mapping with float amounts."""
        return _serialize(self)

    def with_value(self, path: str, value: Any) -> 'TaxInputs':
        """
        Return a copy with one field replaced.

        Args:
            path: Dotted field path, e.g. "reliefs.annual_rent_paid"
            value: New value for that field

        Raises:
            KeyError: If the path does not name a field
        """
        keys = path.split(".")

        if len(keys) == 1:
            if keys[0] not in _field_names(self) or keys[0] in _GROUP_TYPES:
                raise KeyError(f"Unknown input field: '{path}'")
            if keys[0] == "residency":
                value = Residency.normalize(value)
            return replace(self, **{keys[0]: value})

        if len(keys) == 2 and keys[0] in _GROUP_TYPES:
            group = getattr(self, keys[0])
            if keys[1] not in _field_names(group):
                raise KeyError(f"Unknown input field: '{path}'")
            return replace(self, **{keys[0]: replace(group, **{keys[1]: value})})

        raise KeyError(f"Unknown input field: '{path}'")


@dataclass(frozen=True)
class TaxBreakdown:
    """Tax charged within one band."""

    bracket: str
    rate: Decimal  # percentage, e.g. 15 for 15%
    taxable_amount: Decimal
    tax_due: Decimal


@dataclass(frozen=True)
class TaxResult:
    """
    Fully derived tax estimate.

    rent_relief and total_chargeable_gains are intermediate figures kept for
    display; both are zero for an exempt result.
    """

    total_gross_income: Decimal
    bik_adjustments: Decimal
    total_exemptions_and_deductions: Decimal
    net_chargeable_income: Decimal
    total_tax_due: Decimal
    breakdown: List[TaxBreakdown]
    annual_take_home_pay: Decimal
    monthly_take_home_pay: Decimal
    is_exempt: bool
    rent_relief: Decimal = _amount_field()
    total_chargeable_gains: Decimal = _amount_field()
    regime_code: Optional[str] = None

    def effective_rate(self) -> Decimal:
        """Total tax as a percentage of gross income (0 when there is no income)."""
        if self.total_gross_income <= 0:
            return Decimal(0)
        return self.total_tax_due / self.total_gross_income * 100

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-safe dict (Decimals become floats)."""
        return _serialize(self)


def _field_names(obj) -> set:
    return {f.name for f in fields(obj)}


def _serialize(obj: Any) -> Any:
    if is_dataclass(obj):
        return {f.name: _serialize(getattr(obj, f.name)) for f in fields(obj)}
    if isinstance(obj, list):
        return [_serialize(item) for item in obj]
    if isinstance(obj, Decimal):
        return float(obj)
    if isinstance(obj, Enum):
        return obj.value
    return obj
