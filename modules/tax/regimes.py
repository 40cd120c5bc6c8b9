"""
Tax Regime Registry

A TaxRegime bundles everything that varies between tax years/regimes:
the ordered band table and the named thresholds, caps and rates.
The engine takes a regime as an argument, so an alternate year can be
tested or served without touching engine code.

Regimes are registered by code (e.g. "NG-NTA-2025") from
modules.tax.regime_config, and optionally from a JSON file named by the
TAX_REGIME_FILE environment variable.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import json
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from modules.tax.regime_config import TAX_REGIMES, DEFAULT_REGIME_CODE
from modules.tax.tax_models import to_decimal
from utils.logging_config import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class TaxBand:
    """
    One progressive band.

    width is the amount of income taxed in this band; None means unbounded.
    """
    width: Optional[Decimal]
    rate: Decimal
    label: str

    def is_unbounded(self) -> bool:
        return self.width is None


@dataclass(frozen=True)
class TaxRegime:
    """Versioned tax configuration consumed by the engine."""

    code: str
    name: str
    tax_year: int
    bands: Tuple[TaxBand, ...]
    minimum_wage_exemption: Decimal
    rent_relief_cap: Decimal
    rent_relief_rate: Decimal
    housing_bik_cap_rate: Decimal
    vehicle_bik_rate: Decimal
    currency: str = "NGN"

    def band_table(self) -> List[Dict[str, Any]]:
        """
        Describe the bands as absolute income ranges.

        Returns:
            One row per band: label, lower (income covered by earlier bands),
            upper (None for the last band) and rate in percent.
        """
        rows = []
        lower = Decimal(0)

        for band in self.bands:
            upper = None if band.is_unbounded() else lower + band.width
            rows.append({
                "label": band.label,
                "lower": lower,
                "upper": upper,
                "rate": band.rate * 100,
            })
            if upper is not None:
                lower = upper

        return rows


def regime_from_dict(code: str, data: Mapping[str, Any]) -> TaxRegime:
    """
    Build a TaxRegime from its plain-data definition.

    Raises:
        ValueError: If the definition is incomplete or the band table is invalid
    """
    try:
        raw_bands = data["bands"]
        bands = tuple(
            TaxBand(
                width=None if band.get("width") is None else to_decimal(band["width"]),
                rate=to_decimal(band["rate"]),
                label=band.get("label") or f"Band {i + 1}",
            )
            for i, band in enumerate(raw_bands)
        )

        regime = TaxRegime(
            code=code.upper(),
            name=data.get("name", code),
            tax_year=int(data["tax_year"]),
            bands=bands,
            minimum_wage_exemption=to_decimal(data["minimum_wage_exemption"]),
            rent_relief_cap=to_decimal(data["rent_relief_cap"]),
            rent_relief_rate=to_decimal(data["rent_relief_rate"]),
            housing_bik_cap_rate=to_decimal(data["housing_bik_cap_rate"]),
            vehicle_bik_rate=to_decimal(data["vehicle_bik_rate"]),
            currency=data.get("currency", "NGN"),
        )
    except KeyError as e:
        raise ValueError(f"Tax regime '{code}' is missing required setting {e}") from e
    except (InvalidOperation, TypeError, AttributeError) as e:
        raise ValueError(f"Tax regime '{code}' has a malformed setting: {e!r}") from e

    _check_bands(regime)
    return regime


def _check_bands(regime: TaxRegime):
    if not regime.bands:
        raise ValueError(f"Tax regime '{regime.code}' has no bands")

    if not regime.bands[-1].is_unbounded():
        raise ValueError(f"Tax regime '{regime.code}': the last band must be unbounded")

    for i, band in enumerate(regime.bands):
        if not band.rate.is_finite() or (band.width is not None and not band.width.is_finite()):
            raise ValueError(f"Tax regime '{regime.code}': band {i + 1} has a non-finite value")
        if not Decimal(0) <= band.rate <= Decimal(1):
            raise ValueError(f"Tax regime '{regime.code}': band {i + 1} rate {band.rate} outside [0, 1]")
        if band.is_unbounded() and i != len(regime.bands) - 1:
            raise ValueError(f"Tax regime '{regime.code}': only the last band may be unbounded")
        if not band.is_unbounded() and band.width <= 0:
            raise ValueError(f"Tax regime '{regime.code}': band {i + 1} width must be positive")


# Registry of available regimes
_REGIME_REGISTRY: Dict[str, TaxRegime] = {}


def register_regime(regime: TaxRegime, replace_existing: bool = False) -> TaxRegime:
    """
    Add a regime to the registry.

    Raises:
        ValueError: If the code is already registered and replace_existing is False
    """
    code = regime.code.upper()

    if code in _REGIME_REGISTRY and not replace_existing:
        raise ValueError(f"Tax regime '{code}' is already registered")

    _REGIME_REGISTRY[code] = regime
    logger.debug(f"Registered tax regime {code} ({regime.name}, {len(regime.bands)} bands)")
    return regime


def get_regime(code: str) -> TaxRegime:
    """
    Look up a registered regime (case-insensitive).

    Raises:
        ValueError: If the regime is not registered
    """
    key = code.upper()

    if key not in _REGIME_REGISTRY:
        available = ", ".join(list_available_regimes())
        raise ValueError(
            f"Tax regime '{code}' not found. "
            f"Available: {available}"
        )

    return _REGIME_REGISTRY[key]


def list_available_regimes() -> List[str]:
    """Return the sorted codes of all registered regimes."""
    return sorted(_REGIME_REGISTRY.keys())


def get_default_regime() -> TaxRegime:
    """Regime named by TAX_REGIME, falling back to the built-in default."""
    return get_regime(os.getenv("TAX_REGIME", DEFAULT_REGIME_CODE))


def load_regime(path: Union[str, Path], register: bool = True) -> TaxRegime:
    """
    Load a regime from a JSON file.

    The file holds a single definition in the regime_config format plus a
    "code" key.

    Raises:
        ValueError: If the file is not a valid regime definition
    """
    path = Path(path)

    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Tax regime file {path} is not valid JSON: {e}") from e

    if "code" not in data:
        raise ValueError(f"Tax regime file {path} has no 'code'")

    regime = regime_from_dict(data["code"], data)

    if register:
        register_regime(regime, replace_existing=True)

    logger.info(f"Loaded tax regime {regime.code} from {path}")
    return regime


for _code, _definition in TAX_REGIMES.items():
    register_regime(regime_from_dict(_code, _definition))

if os.getenv("TAX_REGIME_FILE"):
    load_regime(os.environ["TAX_REGIME_FILE"])
