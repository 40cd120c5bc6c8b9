# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the NaijaTax Estimator project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
Application Styles and Design Tokens
"""

APP_STYLE = """
<style>
    @import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&family=JetBrains+Mono:wght@400;500;700&display=swap');

    .block-container {
        padding-top: 2.5rem !important;
        padding-bottom: 3rem !important;
    }

    :root {
        --card-bg: rgba(28, 34, 45, 0.45);
        --card-border: rgba(75, 125, 163, 0.35);
        --text-primary: #ecf3fa;
        --text-secondary: #a8b5c8;
        --accent-primary: #4B7DA3;
        --positive: #34d399;
        --negative: #f87171;
        --font-primary: 'Inter', sans-serif;
        --font-mono: 'JetBrains Mono', monospace;
    }

    .kpi-board {
        background: var(--card-bg);
        border: 1px solid var(--card-border);
        border-radius: 12px;
        padding: 1.2rem 1.4rem;
        margin-bottom: 1.2rem;
    }

    .kpi-header {
        font-family: var(--font-mono);
        font-size: 1.1rem;
        color: var(--text-primary);
        margin-bottom: 0.8rem;
    }

    .kpi-grid {
        display: grid;
        grid-template-columns: repeat(auto-fit, minmax(180px, 1fr));
        gap: 0.9rem;
    }

    .kpi-item {
        border-left: 3px solid var(--accent-primary);
        padding-left: 0.7rem;
    }

    .kpi-label {
        font-family: var(--font-primary);
        font-size: 0.75rem;
        text-transform: uppercase;
        letter-spacing: 0.04em;
        color: var(--text-secondary);
    }

    .kpi-value {
        font-family: var(--font-mono);
        font-size: 1.25rem;
        font-weight: 700;
        color: var(--text-primary);
    }

    .metric-delta {
        font-size: 0.75rem;
        margin-top: 0.15rem;
    }

    .delta-pos { color: var(--positive); }
    .delta-neg { color: var(--negative); }
    .delta-neu { color: var(--text-secondary); }

    .page-footer {
        font-size: 0.75rem;
        color: var(--text-secondary);
        text-align: center;
        margin-top: 3rem;
    }
</style>
"""
