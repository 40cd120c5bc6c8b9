# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the NaijaTax Estimator project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
Reusable UI Components
"""

from html import escape

from lib.formatting import format_naira, format_percent
from modules.tax.tax_models import TaxResult


def summary_metrics(result: TaxResult):
    """KPI items for the estimate summary board."""
    metrics = [
        {"label": "Take-Home Pay (Monthly)", "value": format_naira(result.monthly_take_home_pay)},
        {"label": "Total Tax Due (Annual)", "value": format_naira(result.total_tax_due)},
        {"label": "Total Gross Income", "value": format_naira(result.total_gross_income)},
        {"label": "BIK Adjustments", "value": f"+ {format_naira(result.bik_adjustments)}"},
        {"label": "Exemptions & Deductions", "value": f"- {format_naira(result.total_exemptions_and_deductions)}",
         "delta_color": "pos"},
        {"label": "Net Chargeable Income", "value": format_naira(result.net_chargeable_income)},
    ]

    if result.is_exempt:
        metrics[1]["delta"] = "Exempt (minimum wage)"
        metrics[1]["delta_color"] = "pos"
    else:
        metrics[1]["delta"] = f"Effective rate {format_percent(round(result.effective_rate(), 2))}"
        metrics[1]["delta_color"] = "neu"

    return metrics


def render_kpi_dashboard(metrics, title="Tax Estimation Summary"):
    """
    Render the KPI board as a single HTML block using CSS Grid.
    metrics: List of dicts with 'label', 'value', 'delta' (opt), 'delta_color' (opt)
    """
    items_html = ""
    for m in metrics:
        delta_html = ""
        if m.get('delta'):
            color_class = f"delta-{m.get('delta_color', 'neu')}"
            delta_html = f'<div class="metric-delta {color_class}">{escape(m["delta"])}</div>'

        items_html += '<div class="kpi-item">'
        items_html += f'<div class="kpi-label">{escape(m["label"])}</div>'
        items_html += f'<div class="kpi-value">{escape(m["value"])}</div>{delta_html}'
        items_html += '</div>'

    # Single line so Streamlit markdown does not treat indentation as a code block
    html = '<div class="kpi-board">'
    if title:
        html += f'<div class="kpi-header">{escape(title)}</div>'
    html += f'<div class="kpi-grid">{items_html}</div></div>'

    return html
