"""
Tax Input Validation

The engine trusts its inputs. This module is the pass that runs ahead of
it and either rejects or clamps bad form data:
- negative monetary amounts
- non-finite numbers (NaN, infinity) and unparseable amounts
- an unrecognized residency value

Strict mode raises a ValidationError naming every offending field.
Clamp mode replaces negative/non-finite amounts with zero and reports each
replacement as a warning; anything that cannot be clamped still raises.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from dataclasses import asdict, fields
from decimal import Decimal
from typing import Annotated, Any, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from modules.tax.engine import compute
from modules.tax.regimes import TaxRegime
from modules.tax.tax_models import Residency, TaxInputs, TaxResult, to_decimal
from utils.logging_config import setup_logger

logger = setup_logger(__name__)


Amount = Annotated[Decimal, Field(ge=0, allow_inf_nan=False)]

# pydantic error types that clamp mode can repair by substituting zero
CLAMPABLE_ERRORS = {"greater_than_equal", "finite_number"}


class InvestingIncomeSchema(BaseModel):
    dividends: Amount = Decimal(0)
    interest: Amount = Decimal(0)
    royalties: Amount = Decimal(0)


class ChargeableGainsSchema(BaseModel):
    digital_asset_gains: Amount = Decimal(0)
    digital_asset_losses: Amount = Decimal(0)
    other_asset_gains: Amount = Decimal(0)


class EmployerBenefitsSchema(BaseModel):
    housing_provided: bool = False
    housing_rental_value: Amount = Decimal(0)
    car_provided: bool = False
    car_acquisition_cost: Amount = Decimal(0)


class ReliefsSchema(BaseModel):
    annual_pension: Amount = Decimal(0)
    annual_nhf: Amount = Decimal(0)
    annual_nhis: Amount = Decimal(0)
    annual_rent_paid: Amount = Decimal(0)
    life_assurance_premiums: Amount = Decimal(0)
    mortgage_interest: Amount = Decimal(0)


class TaxInputsSchema(BaseModel):
    """Form-state schema mirroring TaxInputs."""

    residency: Residency = Residency.RESIDENT
    annual_gross_salary: Amount = Decimal(0)
    investing_income: InvestingIncomeSchema = Field(default_factory=InvestingIncomeSchema)
    chargeable_gains: ChargeableGainsSchema = Field(default_factory=ChargeableGainsSchema)
    employer_benefits: EmployerBenefitsSchema = Field(default_factory=EmployerBenefitsSchema)
    reliefs: ReliefsSchema = Field(default_factory=ReliefsSchema)


class ValidationIssue:
    """A single problem found in the inputs."""

    SEVERITY_ERROR = "ERROR"
    SEVERITY_WARNING = "WARNING"

    def __init__(self, severity: str, field: str, message: str, code: str = ""):
        self.severity = severity
        self.field = field
        self.message = message
        self.code = code

    def is_clampable(self) -> bool:
        return self.code in CLAMPABLE_ERRORS

    def __repr__(self) -> str:
        return f"ValidationIssue({self.severity}, {self.field!r}, {self.message!r})"

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ValidationError(ValueError):
    """Raised when tax inputs are rejected. Lists every offending field."""

    def __init__(self, issues: List[ValidationIssue]):
        self.issues = issues
        details = "; ".join(str(issue) for issue in issues)
        super().__init__(f"{len(issues)} invalid input field(s): {details}")

    @property
    def fields(self) -> List[str]:
        return [issue.field for issue in self.issues]

    def is_clampable(self) -> bool:
        return all(issue.is_clampable() for issue in self.issues)


def validate_inputs(data: Union[TaxInputs, Mapping[str, Any]]) -> TaxInputs:
    """
    Validate form data (or an existing TaxInputs) and return clean inputs.

    Raises:
        ValidationError: Listing every invalid field
    """
    raw = asdict(data) if isinstance(data, TaxInputs) else data

    try:
        model = TaxInputsSchema.model_validate(raw)
    except PydanticValidationError as e:
        issues = [
            ValidationIssue(
                ValidationIssue.SEVERITY_ERROR,
                ".".join(str(part) for part in error["loc"]),
                error["msg"],
                error["type"],
            )
            for error in e.errors()
        ]
        raise ValidationError(issues) from e

    return TaxInputs.from_dict(model.model_dump())


def sanitize_inputs(inputs: TaxInputs) -> Tuple[TaxInputs, List[ValidationIssue]]:
    """
    Clamp negative or non-finite amounts to zero.

    Returns:
        (clamped inputs, one warning per clamped field)
    """
    issues: List[ValidationIssue] = []
    clean = inputs

    for path, value in _iter_amounts(inputs):
        if not value.is_finite():
            reason = f"non-finite amount {value} replaced with 0"
        elif value < 0:
            reason = f"negative amount {value} replaced with 0"
        else:
            continue

        clean = clean.with_value(path, Decimal(0))
        issues.append(ValidationIssue(ValidationIssue.SEVERITY_WARNING, path, reason, "clamped"))

    return clean, issues


def estimate(
    data: Union[TaxInputs, Mapping[str, Any]],
    regime: Optional[TaxRegime] = None,
    strict: bool = True
) -> TaxResult:
    """
    Validate, then compute.

    Args:
        data: Form data or TaxInputs
        regime: Tax regime (engine default if None)
        strict: Reject bad amounts if True, clamp them to zero if False

    Raises:
        ValidationError: Invalid inputs (strict), or inputs that cannot be clamped
    """
    try:
        inputs = validate_inputs(data)
    except ValidationError as e:
        if strict or not e.is_clampable():
            raise

        raw_inputs = data if isinstance(data, TaxInputs) else TaxInputs.from_dict(data)
        inputs, issues = sanitize_inputs(raw_inputs)

        for issue in issues:
            logger.warning(f"Clamped input {issue.field}: {issue.message}")

    return compute(inputs, regime)


def _iter_amounts(inputs: TaxInputs):
    """Yield (dotted path, Decimal) for every monetary field."""
    yield "annual_gross_salary", to_decimal(inputs.annual_gross_salary)

    for group_name in ("investing_income", "chargeable_gains", "employer_benefits", "reliefs"):
        group = getattr(inputs, group_name)
        for f in fields(group):
            value = getattr(group, f.name)
            if isinstance(value, Decimal):
                yield f"{group_name}.{f.name}", value
