"""견적 요약문 — AI 어시스턴트가 그대로 읽어 줄 한 줄 문장."""

from __future__ import annotations

from datetime import datetime

from app.liability.rates import EXTENSION_DRONES
from app.models import Quote


def _amount(value: float | int) -> str:
    """15.5 → '15.5', 12.0 → '12' (불필요한 소수점 제거)."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _short_date(iso_timestamp: str) -> str:
    """ISO-8601 → M/D/YYYY (en-US 단축 날짜, UTC 기준)."""
    moment = datetime.fromisoformat(iso_timestamp.replace("Z", "+00:00"))
    return f"{moment.month}/{moment.day}/{moment.year}"


def format_quote_summary(quote: Quote) -> str:
    parts = [
        f"Liability Insurance Quote: €{_amount(quote.monthly_premium)}/month "
        f"(€{_amount(quote.annual_premium)}/year)",
        f"Coverage: €{quote.coverage_sum:,} {quote.tariff_line}",
    ]

    if quote.deductible > 0:
        parts.append(f"Deductible: €{quote.deductible}")
    else:
        parts.append("No deductible")

    if quote.family_coverage:
        parts.append("Includes family coverage")

    if EXTENSION_DRONES in quote.extensions:
        parts.append("Includes drone liability")

    parts.append(f"Territory: {quote.territory}")
    parts.append(f"Valid until: {_short_date(quote.valid_until)}")

    return ". ".join(parts) + "."
