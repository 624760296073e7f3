"""입력 검증 — 구조·업무 규칙을 고정 순서로 전부 검사한다.

첫 위반에서 멈추지 않는다. 위반마다 메시지 하나가 검사 순서대로 쌓인다.
"""

from __future__ import annotations

import re
from datetime import datetime

from app.liability.rates import (
    COVERAGE_MAX,
    COVERAGE_MIN,
    DEDUCTIBLE_FACTORS,
    MAX_CLAIMS,
    TARIFF_LINES,
)
from app.models import QuoteRequest, ValidationResult

_ZIP_RE = re.compile(r"^[0-9]{5}$")
# YYYY-MM-DD, 선택적으로 T 뒤에 시각. 주 단위(2025-W01-1)·구분자 없는(20250101) 형식은 받지 않는다
_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}(T.+)?\Z")

MSG_ZIP = "Invalid German postal code (must be 5 digits)"
MSG_TARIFF = "Invalid tariff line (must be basic, comfort, or premium)"
MSG_DEDUCTIBLE = "Invalid deductible amount (must be 0, 150, 300, or 500)"
MSG_CLAIMS_NEGATIVE = "Number of claims cannot be negative"
MSG_CLAIMS_EXCEEDED = f"Number of claims exceeds maximum allowed ({MAX_CLAIMS})"
MSG_EFFECTIVE_DATE = "Invalid effective date format"
MSG_COVERAGE = (
    f"Coverage amount must be between €{COVERAGE_MIN:,} and €{COVERAGE_MAX:,}"
)


def is_valid_date(value: str) -> bool:
    """YYYY-MM-DD 날짜(또는 일시)로 해석 가능한지. 미래 날짜 여부는 보지 않는다."""
    if not isinstance(value, str) or not _DATE_RE.match(value):
        return False
    try:
        datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return False
    return True


def validate(request: QuoteRequest) -> ValidationResult:
    errors: list[str] = []

    zip_code = request.zip_code or ""
    if len(zip_code) != 5 or not _ZIP_RE.match(zip_code):
        errors.append(MSG_ZIP)

    if request.tariff_line not in TARIFF_LINES:
        errors.append(MSG_TARIFF)

    if request.deductible_amount not in DEDUCTIBLE_FACTORS:
        errors.append(MSG_DEDUCTIBLE)

    if request.number_of_claims < 0:
        errors.append(MSG_CLAIMS_NEGATIVE)

    if request.number_of_claims > MAX_CLAIMS:
        errors.append(MSG_CLAIMS_EXCEEDED)

    if not is_valid_date(request.effective_date):
        errors.append(MSG_EFFECTIVE_DATE)

    if request.coverage_amount is not None and not (
        COVERAGE_MIN <= request.coverage_amount <= COVERAGE_MAX
    ):
        errors.append(MSG_COVERAGE)

    return ValidationResult(valid=not errors, errors=tuple(errors))
