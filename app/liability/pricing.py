"""보험료 산출 엔진.

월 보험료는 아래 순서로 누적 계산한다 (순서가 바뀌면 결과가 달라진다):
  기본료 → 가족 ×1.5 → 드론 +2.50 → 자기부담금 할인 → 사고 건수 할증 → 해지 이력 ×1.3
월 보험료를 센트 단위로 반올림한 뒤 ×12 하여 연 보험료를 만든다.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal

from app.liability.errors import QuoteCalculationError, QuoteValidationError
from app.liability.rates import (
    BASE_MONTHLY_PREMIUMS,
    CANCELLATION_FACTOR,
    CLAIM_LOADING_PER_CLAIM,
    CURRENCY,
    DEDUCTIBLE_FACTORS,
    DEFAULT_COVERAGE_SUMS,
    DRONES_SURCHARGE,
    EXTENSION_DRONES,
    EXTENSION_FAMILY,
    FAMILY_FACTOR,
    INCLUDED_RISKS,
    QUOTE_VALIDITY_DAYS,
    TERRITORY,
)
from app.liability.validation import validate
from app.models import Quote, QuoteRequest

logger = logging.getLogger("liability.pricing")

_CENT = Decimal("0.01")


def round_currency(value: float | Decimal) -> float:
    """센트 단위 반올림 (ROUND_HALF_UP)."""
    return float(Decimal(str(value)).quantize(_CENT, rounding=ROUND_HALF_UP))


def resolve_coverage_sum(request: QuoteRequest) -> int:
    if request.coverage_amount is not None:
        return request.coverage_amount
    return DEFAULT_COVERAGE_SUMS[request.tariff_line]


def compute_monthly_premium(request: QuoteRequest) -> float:
    """반올림 전 월 보험료."""
    base = BASE_MONTHLY_PREMIUMS.get(request.tariff_line)
    deductible_factor = DEDUCTIBLE_FACTORS.get(request.deductible_amount)
    if base is None or deductible_factor is None:
        raise QuoteCalculationError(
            f"No rate for tariff={request.tariff_line!r}, deductible={request.deductible_amount!r}"
        )

    premium = base
    if request.family_coverage:
        premium *= FAMILY_FACTOR
    if request.drones_coverage:
        premium += DRONES_SURCHARGE
    premium *= deductible_factor
    if request.number_of_claims > 0:
        premium *= 1 + request.number_of_claims * CLAIM_LOADING_PER_CLAIM
    if request.cancelled_by_insurer:
        premium *= CANCELLATION_FACTOR
    return premium


def build_extensions(request: QuoteRequest) -> tuple[str, ...]:
    extensions: list[str] = []
    if request.drones_coverage:
        extensions.append(EXTENSION_DRONES)
    if request.family_coverage:
        extensions.append(EXTENSION_FAMILY)
    return tuple(extensions)


def new_quote_id(now: datetime) -> str:
    """quote_<epoch ms>_<난수>. 유일성은 best-effort."""
    return f"quote_{int(now.timestamp() * 1000)}_{uuid.uuid4().hex[:7]}"


def _iso_utc(moment: datetime) -> str:
    return (
        moment.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def calculate_quote(request: QuoteRequest, *, now: datetime | None = None) -> Quote:
    """검증 후 견적을 산출한다.

    Raises:
        QuoteValidationError: 검증 실패. 보험료 계산 전에 발생한다.
    """
    result = validate(request)
    if not result.valid:
        raise QuoteValidationError("Invalid parameters", result.errors)

    now = now or datetime.now(timezone.utc)
    monthly = round_currency(compute_monthly_premium(request))
    annual = round_currency(Decimal(str(monthly)) * 12)

    return Quote(
        quote_id=new_quote_id(now),
        monthly_premium=monthly,
        annual_premium=annual,
        currency=CURRENCY,
        coverage_sum=resolve_coverage_sum(request),
        deductible=request.deductible_amount,
        territory=TERRITORY,
        included_risks=INCLUDED_RISKS,
        extensions=build_extensions(request),
        valid_until=_iso_utc(now + timedelta(days=QUOTE_VALIDITY_DAYS)),
        tariff_line=request.tariff_line,
        family_coverage=request.family_coverage,
    )


# ── Typed outcome ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class QuoteAccepted:
    quote: Quote


@dataclass(frozen=True)
class QuoteRejected:
    message: str
    errors: tuple[str, ...]


QuoteOutcome = QuoteAccepted | QuoteRejected


def price_quote(request: QuoteRequest, *, now: datetime | None = None) -> QuoteOutcome:
    """calculate_quote의 예외 없는 버전. 검증 실패를 QuoteRejected로 돌려준다."""
    try:
        quote = calculate_quote(request, now=now)
    except QuoteValidationError as e:
        logger.info("Quote rejected: %s", "; ".join(e.details))
        return QuoteRejected(message=e.message, errors=e.details)
    logger.debug(
        "Quote %s priced: %.2f EUR/month (%s)",
        quote.quote_id, quote.monthly_premium, quote.tariff_line,
    )
    return QuoteAccepted(quote=quote)
