"""배상책임보험(독일) 견적 엔진 — 검증 · 보험료 산출 · 요약문."""

from app.liability.errors import QuoteCalculationError, QuoteError, QuoteValidationError
from app.liability.pricing import (
    QuoteAccepted,
    QuoteOutcome,
    QuoteRejected,
    calculate_quote,
    price_quote,
)
from app.liability.summary import format_quote_summary
from app.liability.validation import validate

__all__ = [
    "QuoteAccepted",
    "QuoteCalculationError",
    "QuoteError",
    "QuoteOutcome",
    "QuoteRejected",
    "QuoteValidationError",
    "calculate_quote",
    "format_quote_summary",
    "price_quote",
    "validate",
]
