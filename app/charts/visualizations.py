"""Visualization components using Plotly for interactive charts."""

from typing import List

import plotly.graph_objects as go

from lib.formatting import format_naira
from modules.tax.tax_models import TaxResult
from utils.logging_config import setup_logger

logger = setup_logger(__name__)

# ========================================
# CHART STYLING CONSTANTS
# ========================================

DESKTOP_HEIGHT = 420
MOBILE_HEIGHT = 300

CHART_TITLE_FONT = dict(size=18, family="JetBrains Mono", color="#e6e6e6")
CHART_LEGEND_FONT = dict(color='#E5E7EB', family="Inter")

CHART_HOVER_LABEL = dict(
    bgcolor='rgba(17, 24, 39, 0.95)',
    bordercolor='#4B7DA3',
    font_size=13,
    font_family='JetBrains Mono'
)

# Take-home, tax, statutory contributions
SPLIT_COLORS = [
    'rgba(16, 185, 129, 0.65)',  # Emerald
    'rgba(236, 72, 153, 0.65)',  # Pink
    'rgba(30, 58, 138, 0.65)',   # Deep Blue
]

BAND_COLORS = [
    'rgba(52, 211, 153, 0.65)',
    'rgba(14, 165, 233, 0.65)',
    'rgba(124, 58, 237, 0.65)',
    'rgba(245, 158, 11, 0.60)',
    'rgba(251, 146, 60, 0.60)',
    'rgba(248, 113, 113, 0.60)',
]


def income_split(result: TaxResult) -> List[tuple]:
    """
    (label, amount) slices of gross income: take-home, tax, statutory contributions.

    Negative slices (pathological inputs) are dropped.
    """
    contributions = result.total_gross_income - result.total_tax_due - result.annual_take_home_pay
    slices = [
        ("Take-Home Pay", result.annual_take_home_pay),
        ("Income Tax", result.total_tax_due),
        ("Pension / NHF / NHIS", contributions),
    ]
    return [(label, float(amount)) for label, amount in slices if amount > 0]


def create_income_split_donut(
    result: TaxResult,
    title: str = "Where Your Income Goes",
    compact_mode: bool = False
) -> go.Figure:
    """
    Donut chart splitting gross income into take-home pay, tax and contributions.

    Args:
        compact_mode: Smaller height and visible legend for narrow screens
    """
    slices = income_split(result)
    if not slices:
        return go.Figure()

    labels, values = zip(*slices)

    fig = go.Figure(data=[go.Pie(
        labels=list(labels),
        values=list(values),
        hole=0.60,
        hovertemplate='<b>%{label}</b><br>₦%{value:,.0f}<br>%{percent}<extra></extra>',
        hoverlabel=CHART_HOVER_LABEL,
        textinfo='none',
        marker=dict(
            colors=SPLIT_COLORS[:len(slices)],
            line=dict(color='#0e1117', width=2)
        )
    )])

    title_dict = dict(text="") if not title else dict(text=title, x=0, xref="container", font=CHART_TITLE_FONT)

    fig.update_layout(
        title=title_dict,
        showlegend=True,
        legend=dict(
            orientation="h",
            yanchor="bottom",
            y=-0.1,
            xanchor="center",
            x=0.5,
            font=dict(**CHART_LEGEND_FONT, size=9 if compact_mode else 11),
            bgcolor='rgba(0,0,0,0)',
        ),
        height=MOBILE_HEIGHT if compact_mode else DESKTOP_HEIGHT,
        margin=dict(t=40 if title else 0, b=20, l=20, r=20),
        paper_bgcolor='rgba(0,0,0,0)',
        plot_bgcolor='rgba(0,0,0,0)',
        font=dict(family="Inter", color="#9CA3AF"),
        annotations=[dict(
            text=format_naira(result.total_gross_income),
            x=0.5, y=0.5, font_size=18, showarrow=False,
            font=dict(family="JetBrains Mono", color="white")
        )]
    )

    return fig


def create_band_bar_chart(result: TaxResult, title: str = "Tax by Band") -> go.Figure:
    """Horizontal bar of tax due per band, in band order."""
    if not result.breakdown:
        return go.Figure()

    labels = [entry.bracket for entry in result.breakdown]
    values = [float(entry.tax_due) for entry in result.breakdown]

    fig = go.Figure(data=[go.Bar(
        x=values,
        y=labels,
        orientation='h',
        marker=dict(color=[BAND_COLORS[i % len(BAND_COLORS)] for i in range(len(values))]),
        hovertemplate='<b>%{y}</b><br>₦%{x:,.0f}<extra></extra>',
        hoverlabel=CHART_HOVER_LABEL,
    )])

    fig.update_layout(
        title=dict(text=title, x=0, xref="container", font=CHART_TITLE_FONT),
        height=80 + 48 * len(values),
        margin=dict(t=50, b=20, l=20, r=20),
        yaxis=dict(autorange="reversed"),
        xaxis=dict(tickprefix="₦", tickformat=",.0f", gridcolor='rgba(255,255,255,0.06)'),
        paper_bgcolor='rgba(0,0,0,0)',
        plot_bgcolor='rgba(0,0,0,0)',
        font=dict(family="Inter", color="#9CA3AF"),
    )

    return fig
