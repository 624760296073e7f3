"""도구·리소스 공용 데이터 — 요율표를 사람이 읽는 카탈로그 형태로 가공."""

from __future__ import annotations

import json
from typing import Any

from app.liability.rates import (
    BASE_MONTHLY_PREMIUMS,
    CANCELLATION_FACTOR,
    CLAIM_LOADING_PER_CLAIM,
    COVERAGE_MAX,
    COVERAGE_MIN,
    CURRENCY,
    DEDUCTIBLE_FACTORS,
    DEFAULT_COVERAGE_SUMS,
    DRONES_SURCHARGE,
    FAMILY_FACTOR,
    INCLUDED_RISKS,
    MAX_CLAIMS,
    QUOTE_VALIDITY_DAYS,
    TARIFF_LINES,
    TERRITORY,
)


def _json(obj: Any) -> str:
    return json.dumps(obj, ensure_ascii=False)


TARIFF_CATALOG: list[dict[str, Any]] = [
    {
        "tariff_line": line,
        "base_monthly_premium": BASE_MONTHLY_PREMIUMS[line],
        "default_coverage_sum": DEFAULT_COVERAGE_SUMS[line],
        "currency": CURRENCY,
    }
    for line in TARIFF_LINES
]

PRICING_FACTORS: dict[str, Any] = {
    "order": [
        "base_premium",
        "family_coverage",
        "drones_coverage",
        "deductible",
        "claims_history",
        "cancelled_by_insurer",
    ],
    "family_coverage": {"type": "multiplier", "value": FAMILY_FACTOR},
    "drones_coverage": {"type": "flat_surcharge", "value": DRONES_SURCHARGE, "currency": CURRENCY},
    "deductible": {
        "type": "multiplier",
        "values": {str(amount): factor for amount, factor in DEDUCTIBLE_FACTORS.items()},
    },
    "claims_history": {
        "type": "multiplier",
        "formula": f"1 + number_of_claims * {CLAIM_LOADING_PER_CLAIM}",
        "max_claims": MAX_CLAIMS,
    },
    "cancelled_by_insurer": {"type": "multiplier", "value": CANCELLATION_FACTOR},
    "annual_premium": "round(monthly_premium, 2) * 12",
    "coverage_override": {"min": COVERAGE_MIN, "max": COVERAGE_MAX},
}

POLICY_REFERENCE: dict[str, Any] = {
    "territory": TERRITORY,
    "currency": CURRENCY,
    "included_risks": list(INCLUDED_RISKS),
    "quote_validity_days": QUOTE_VALIDITY_DAYS,
}
