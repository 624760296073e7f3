"""요율표 — 배상책임보험(독일) 보험료 산출 상수."""

from __future__ import annotations

CURRENCY = "EUR"
TERRITORY = "Worldwide"
QUOTE_VALIDITY_DAYS = 30

TARIFF_LINES = ("basic", "comfort", "premium")

# 월 기본 보험료 (EUR)
BASE_MONTHLY_PREMIUMS: dict[str, float] = {
    "basic": 5.99,
    "comfort": 9.99,
    "premium": 14.99,
}

# 기본 보상한도 (EUR)
DEFAULT_COVERAGE_SUMS: dict[str, int] = {
    "basic": 5_000_000,
    "comfort": 10_000_000,
    "premium": 20_000_000,
}

COVERAGE_MIN = 5_000_000
COVERAGE_MAX = 20_000_000

# 자기부담금 → 할인 계수
DEDUCTIBLE_FACTORS: dict[int, float] = {
    0: 1.0,
    150: 0.9,
    300: 0.85,
    500: 0.8,
}

FAMILY_FACTOR = 1.5
DRONES_SURCHARGE = 2.50  # 정액 가산 (계수 아님)
CLAIM_LOADING_PER_CLAIM = 0.15  # 건수 비례, 복리 아님
MAX_CLAIMS = 10
CANCELLATION_FACTOR = 1.3

EXTENSION_DRONES = "drones_coverage"
EXTENSION_FAMILY = "family_coverage"

INCLUDED_RISKS = ("personal_injury", "property_damage", "financial_loss")
