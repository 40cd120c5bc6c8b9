# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the NaijaTax Estimator project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
NaijaTax Estimator - Streamlit Application

Personal income tax estimator with:
- Income / Benefits / Reliefs form, recomputed on every change
- Itemized result with per-band breakdown and charts
- Share links and CSV/JSON export
- Tax band table, guidelines glossary and an FX converter
"""

import os
import sys
from pathlib import Path

# Fix module imports - add project root to path
_root = Path(__file__).parent.parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

import pandas as pd
import streamlit as st

from app.charts.visualizations import create_income_split_donut, create_band_bar_chart
from app.ui.components import render_kpi_dashboard, summary_metrics
from app.ui.content import BANDS_NOTE, DISCLAIMER, FIELD_HELP, FOOTER, GUIDELINES
from app.ui.styles import APP_STYLE
from lib.export import breakdown_to_dataframe, result_to_csv, result_to_json
from lib.formatting import format_currency, format_naira, format_percent, parse_amount
from lib.fx_rates import ExchangeRateClient, SUPPORTED_CURRENCIES, QUOTE_CURRENCY, convert, rates_against
from lib.share import build_share_message, whatsapp_share_url, email_share_url
from modules.tax.regimes import get_default_regime, get_regime, list_available_regimes
from modules.tax.tax_models import Residency
from modules.tax.validation import ValidationError, estimate
from utils.logging_config import setup_logger

logger = setup_logger(__name__)

APP_PUBLIC_URL = os.getenv("APP_PUBLIC_URL", "http://localhost:8501")

PAGES = ["Calculator", "Tax Bands", "Guidelines", "FX Rates"]

st.set_page_config(
    page_title="NaijaTax Estimator",
    page_icon="🧾",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown(APP_STYLE, unsafe_allow_html=True)


def amount_input(label: str, key: str, help_key: str = None):
    """Text field accepting grouped amounts ("5,000,000"); blank reads as zero."""
    text = st.text_input(
        label,
        value="0",
        key=key,
        help=FIELD_HELP.get(help_key or key.split(".")[-1]),
        placeholder="e.g. 5,000,000"
    )
    return parse_amount(text)


def render_disclaimer():
    """Blocking disclaimer until acknowledged for this session."""
    st.warning(DISCLAIMER, icon="⚠️")
    if st.button("I Understand", type="primary"):
        st.session_state.disclaimer_accepted = True
        st.rerun()


def collect_form_state() -> dict:
    """Read the three tabs into a nested form-state mapping."""
    income_tab, benefits_tab, reliefs_tab = st.tabs(["💼 Income", "🏠 Benefits", "🛡️ Reliefs"])

    with income_tab:
        residency = st.selectbox(
            "Residency Status",
            [r.value for r in Residency],
            format_func=lambda v: "Resident Individual" if v == Residency.RESIDENT.value else "Non-Resident Individual",
            help=FIELD_HELP["residency"]
        )
        salary = amount_input("Annual Gross Salary/Wages (₦)", "annual_gross_salary")

        st.markdown("##### Investment Income")
        col1, col2, col3 = st.columns(3)
        with col1:
            dividends = amount_input("Dividends (₦)", "investing_income.dividends")
        with col2:
            interest = amount_input("Interest (₦)", "investing_income.interest")
        with col3:
            royalties = amount_input("Royalties (₦)", "investing_income.royalties")

        st.markdown("##### Chargeable Gains (NTA 2025)")
        col1, col2, col3 = st.columns(3)
        with col1:
            digital_gains = amount_input("Digital Asset Gains (₦)", "chargeable_gains.digital_asset_gains")
        with col2:
            digital_losses = amount_input("Digital Asset Losses (₦)", "chargeable_gains.digital_asset_losses")
        with col3:
            other_gains = amount_input("Other Asset Gains (₦)", "chargeable_gains.other_asset_gains")

    with benefits_tab:
        housing_provided = st.toggle("Housing Provided?", help="Does your employer provide accommodation?")
        housing_value = 0
        if housing_provided:
            housing_value = amount_input("Annual Rental Value (₦)", "employer_benefits.housing_rental_value")

        car_provided = st.toggle("Car Provided?", help="Does your employer provide an official car?")
        car_cost = 0
        if car_provided:
            car_cost = amount_input("Car Acquisition Cost (₦)", "employer_benefits.car_acquisition_cost")

    with reliefs_tab:
        rent_paid = amount_input("Annual Rent Paid (₦)", "reliefs.annual_rent_paid")

        col1, col2, col3 = st.columns(3)
        with col1:
            pension = amount_input("Pension (₦)", "reliefs.annual_pension", "statutory")
        with col2:
            nhf = amount_input("NHF (₦)", "reliefs.annual_nhf", "statutory")
        with col3:
            nhis = amount_input("NHIS (₦)", "reliefs.annual_nhis", "statutory")

        col1, col2 = st.columns(2)
        with col1:
            life_assurance = amount_input("Life Assurance (₦)", "reliefs.life_assurance_premiums")
        with col2:
            mortgage = amount_input("Mortgage Interest (₦)", "reliefs.mortgage_interest")

    return {
        "residency": residency,
        "annual_gross_salary": salary,
        "investing_income": {"dividends": dividends, "interest": interest, "royalties": royalties},
        "chargeable_gains": {
            "digital_asset_gains": digital_gains,
            "digital_asset_losses": digital_losses,
            "other_asset_gains": other_gains,
        },
        "employer_benefits": {
            "housing_provided": housing_provided,
            "housing_rental_value": housing_value,
            "car_provided": car_provided,
            "car_acquisition_cost": car_cost,
        },
        "reliefs": {
            "annual_pension": pension,
            "annual_nhf": nhf,
            "annual_nhis": nhis,
            "annual_rent_paid": rent_paid,
            "life_assurance_premiums": life_assurance,
            "mortgage_interest": mortgage,
        },
    }


def render_results(result):
    st.markdown(render_kpi_dashboard(summary_metrics(result)), unsafe_allow_html=True)

    if result.is_exempt:
        st.success("Your income is within the minimum-wage exemption. No income tax is due.")
    else:
        st.markdown("##### Tax Breakdown by Band")
        breakdown_df = breakdown_to_dataframe(result)
        st.dataframe(
            breakdown_df.style.format({
                "Rate (%)": "{:.0f}%",
                "Taxable Amount": "₦{:,.0f}",
                "Tax Due": "₦{:,.0f}",
            }),
            hide_index=True,
            use_container_width=True
        )

        col1, col2 = st.columns(2)
        with col1:
            st.plotly_chart(create_income_split_donut(result), use_container_width=True)
        with col2:
            st.plotly_chart(create_band_bar_chart(result), use_container_width=True)

    st.markdown("##### Share & Export")
    message = build_share_message(result, APP_PUBLIC_URL)
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.link_button("💬 WhatsApp", whatsapp_share_url(message), use_container_width=True)
    with col2:
        st.link_button("✉️ Email", email_share_url(message), use_container_width=True)
    with col3:
        st.download_button(
            "⬇️ CSV",
            data=result_to_csv(result),
            file_name="tax_estimate.csv",
            mime="text/csv",
            use_container_width=True
        )
    with col4:
        st.download_button(
            "⬇️ JSON",
            data=result_to_json(result),
            file_name="tax_estimate.json",
            mime="application/json",
            use_container_width=True
        )


def render_calculator(regime):
    st.title("Personal Tax Estimator")
    st.caption(f"Compliant with {regime.name} · tax year {regime.tax_year}")

    form_col, result_col = st.columns([5, 6], gap="large")

    with form_col:
        form_state = collect_form_state()

    with result_col:
        try:
            result = estimate(form_state, regime, strict=False)
        except ValidationError as e:
            logger.warning(f"Rejected form input: {e}")
            st.error("Please correct the following fields:\n\n" + "\n".join(f"- {issue}" for issue in e.issues))
            return

        render_results(result)


def render_bands(regime):
    st.title(f"Graduated Tax Rates ({regime.name})")
    st.caption("Personal income is taxed according to the following progressive bands:")

    rows = []
    for row in regime.band_table():
        if row["upper"] is None:
            income_range = f"Above {format_naira(row['lower'])}"
        elif row["lower"] == 0:
            income_range = f"Up to {format_naira(row['upper'])}"
        else:
            income_range = f"{format_naira(row['lower'] + 1)} to {format_naira(row['upper'])}"
        rows.append({"Band": row["label"], "Income Range": income_range, "Rate": format_percent(row["rate"])})

    st.dataframe(pd.DataFrame(rows), hide_index=True, use_container_width=True)
    st.info(BANDS_NOTE, icon="ℹ️")

    st.markdown(
        f"- Minimum-wage exemption: income up to {format_naira(regime.minimum_wage_exemption)} is not taxed\n"
        f"- Rent relief: {format_percent(regime.rent_relief_rate * 100)} of rent paid, "
        f"capped at {format_naira(regime.rent_relief_cap)}\n"
        f"- Housing BIK: capped at {format_percent(regime.housing_bik_cap_rate * 100)} of gross salary\n"
        f"- Vehicle BIK: {format_percent(regime.vehicle_bik_rate * 100)} of acquisition cost"
    )


def render_guidelines():
    st.title("Tax Definitions & Guidelines")
    st.caption("Key terms and rules of the Nigeria Tax Act (NTA) 2025.")

    for section, items in GUIDELINES:
        st.subheader(section)
        for term, explanation in items:
            with st.expander(term):
                st.write(explanation)


def load_rates(force: bool = False):
    """Fetch rates into session state on first view or on refresh."""
    if force or "fx_table" not in st.session_state:
        with st.spinner("Fetching rates..."):
            st.session_state.fx_table = ExchangeRateClient().fetch_rates("USD")
    return st.session_state.fx_table


def swap_currencies():
    st.session_state.fx_from, st.session_state.fx_to = st.session_state.fx_to, st.session_state.fx_from


def render_fx_rates():
    st.title("FX Currency Converter")
    st.caption("Exchange rates for major currencies against the Naira.")

    st.session_state.setdefault("fx_from", "USD")
    st.session_state.setdefault("fx_to", QUOTE_CURRENCY)

    refresh = st.button("🔄 Refresh rates")
    table = load_rates(force=refresh)

    if table is None:
        st.error("Exchange rates are unavailable right now. Try refreshing.")
        return

    codes = list(SUPPORTED_CURRENCIES)

    def label(code):
        return f"{SUPPORTED_CURRENCIES[code][0]} {code}"

    converter_col, rates_col = st.columns(2, gap="large")

    with converter_col:
        st.subheader("Quick Convert")
        amount = parse_amount(st.text_input("Amount", value="1"))
        col1, col2, col3 = st.columns([4, 1, 4])
        with col1:
            from_code = st.selectbox("From", codes, key="fx_from", format_func=label)
        with col2:
            st.button("⇄", on_click=swap_currencies, help="Swap currencies")
        with col3:
            to_code = st.selectbox("To", codes, key="fx_to", format_func=label)

        converted = convert(amount, from_code, to_code, table)
        if converted is None:
            st.warning(f"No rate available for {from_code}/{to_code}.")
        else:
            st.metric(f"{amount:,} {from_code} =", format_currency(converted, to_code))

    with rates_col:
        st.subheader(f"Rates (vs {QUOTE_CURRENCY})")
        for code, price in rates_against(table):
            flag, name = SUPPORTED_CURRENCIES[code]
            st.metric(f"{flag} 1 {code} · {name}", format_currency(price, QUOTE_CURRENCY))
        st.caption(f"Fetched {table.fetched_at:%Y-%m-%d %H:%M}. Rates are based on official interbank data; "
                   "P2P/parallel market rates may be significantly higher.")


def main():
    st.session_state.setdefault("disclaimer_accepted", False)

    with st.sidebar:
        st.markdown("### 🧾 NaijaTax Estimator")
        page = st.radio("Navigate", PAGES, label_visibility="collapsed")

        regimes = list_available_regimes()
        default_code = get_default_regime().code
        regime_code = st.selectbox("Tax regime", regimes, index=regimes.index(default_code))
        regime = get_regime(regime_code)

    if not st.session_state.disclaimer_accepted:
        render_disclaimer()
        return

    if page == "Calculator":
        render_calculator(regime)
    elif page == "Tax Bands":
        render_bands(regime)
    elif page == "Guidelines":
        render_guidelines()
    else:
        render_fx_rates()

    st.markdown(f'<div class="page-footer">{FOOTER}</div>', unsafe_allow_html=True)


main()
