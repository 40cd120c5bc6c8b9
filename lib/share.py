"""
Share links for a tax estimate.

Builds the plain-text summary and the pre-filled WhatsApp / email links.
Opening the link is left to the browser.
"""

from urllib.parse import quote

from lib.formatting import format_naira
from modules.tax.tax_models import TaxResult

WHATSAPP_URL = "https://wa.me/?text={text}"
DEFAULT_EMAIL_SUBJECT = "My 2025 Nigeria Tax Estimation"


def build_share_message(result: TaxResult, page_url: str, title: str = "NaijaReceipt Personal Tax Estimation 2025") -> str:
    """Summary of the estimate with a link back to the calculator."""
    lines = [
        f"{title}:",
        "",
        f"💰 Gross Annual Income: {format_naira(result.total_gross_income)}",
        f"💸 Total Tax Due: {format_naira(result.total_tax_due)}",
        f"🏦 Monthly Take-Home: {format_naira(result.monthly_take_home_pay)}",
        "",
        f"Calculate your accurate 2025 tax at: {page_url}",
    ]
    return "\n".join(lines)


def whatsapp_share_url(message: str) -> str:
    return WHATSAPP_URL.format(text=quote(message, safe=""))


def email_share_url(message: str, subject: str = DEFAULT_EMAIL_SUBJECT) -> str:
    return f"mailto:?subject={quote(subject, safe='')}&body={quote(message, safe='')}"
