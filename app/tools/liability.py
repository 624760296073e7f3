"""배상책임보험 견적 도구."""

from __future__ import annotations

import logging
from typing import Literal

from langchain_core.tools import tool
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.liability import QuoteAccepted, format_quote_summary, price_quote
from app.models import QuoteRequest, QuoteResponse
from app.tools.data import _json

logger = logging.getLogger("liability.tools.quote")

UNEXPECTED_ERROR_SUMMARY = "Failed to calculate quote due to an unexpected error"


# ── Input Schemas ─────────────────────────────────────────────────────────────


class LiabilityQuoteInput(BaseModel):
    # 인자명은 견적 요청과 같은 camelCase(zipCode, tariffLine …)로 노출한다
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    zip_code: str = Field(
        ..., min_length=5, max_length=5, pattern=r"^[0-9]{5}$",
        description="5-digit German postal code (e.g. 10115)",
    )
    tariff_line: Literal["basic", "comfort", "premium"] = Field(
        ..., description="Coverage level: basic (€5M), comfort (€10M), or premium (€20M)",
    )
    effective_date: str = Field(
        ..., pattern=r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$",
        description="Policy start date in YYYY-MM-DD format",
    )
    family_coverage: bool = Field(default=False, description="Include family members in coverage")
    drones_coverage: bool = Field(default=False, description="Include drone liability coverage")
    deductible_amount: Literal[0, 150, 300, 500] = Field(
        default=0, description="Deductible amount in EUR (higher deductible = lower premium)",
    )
    previous_insurance: bool = Field(default=False, description="Had previous liability insurance")
    number_of_claims: int = Field(default=0, ge=0, le=10, description="Number of claims in last 5 years")
    cancelled_by_insurer: bool = Field(default=False, description="Previously cancelled by insurer")
    coverage_amount: int | None = Field(
        default=None, ge=5_000_000, le=20_000_000, description="Custom coverage amount in EUR",
    )


# ── Response envelope ─────────────────────────────────────────────────────────


def build_quote_response(request: QuoteRequest) -> QuoteResponse:
    """견적 산출 결과를 {success, quote?, error?, summary} envelope로 변환한다."""
    try:
        outcome = price_quote(request)
        if isinstance(outcome, QuoteAccepted):
            return QuoteResponse(
                success=True,
                quote=outcome.quote,
                summary=format_quote_summary(outcome.quote),
            )
        return QuoteResponse(
            success=False,
            error=f"Validation error: {outcome.message}",
            summary=f"Failed to calculate quote: {', '.join(outcome.errors) or outcome.message}",
        )
    except Exception as e:
        logger.exception("Liability quote calculation failed")
        return QuoteResponse(
            success=False,
            error=str(e) or "Unknown error",
            summary=UNEXPECTED_ERROR_SUMMARY,
        )


# ── Tools ─────────────────────────────────────────────────────────────────────


@tool(args_schema=LiabilityQuoteInput)
def get_liability_quote(
    zip_code: str,
    tariff_line: str,
    effective_date: str,
    family_coverage: bool = False,
    drones_coverage: bool = False,
    deductible_amount: int = 0,
    previous_insurance: bool = False,
    number_of_claims: int = 0,
    cancelled_by_insurer: bool = False,
    coverage_amount: int | None = None,
) -> str:
    """Calculate anonymous liability insurance quote for Germany. Supports basic, comfort, and premium coverage levels with optional family and drone coverage. Returns monthly and annual premiums."""
    request = QuoteRequest(
        zip_code=zip_code,
        tariff_line=tariff_line,
        effective_date=effective_date,
        family_coverage=family_coverage,
        drones_coverage=drones_coverage,
        deductible_amount=deductible_amount,
        previous_insurance=previous_insurance,
        number_of_claims=number_of_claims,
        cancelled_by_insurer=cancelled_by_insurer,
        coverage_amount=coverage_amount,
    )
    response = build_quote_response(request)
    logger.info("get_liability_quote → success=%s", response.success)
    return _json(response.to_payload())


TOOLS = [get_liability_quote]
