"""견적 요청/응답 모델 — Pydantic v2.

외부 직렬화 키는 camelCase(zipCode, monthlyPremium …), 파이썬 속성은 snake_case.
QuoteRequest는 느슨한 타입(str/int)만 갖는다. 범위·열거값 검사는
app.liability.validation 이 담당하고, 엄격한 스키마는 도구 입력(app.tools.liability)에 있다.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_CAMEL = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
)


class QuoteRequest(BaseModel):
    """배상책임보험 견적 입력. 호출자가 기본값을 채워 전달한다."""

    model_config = _CAMEL

    zip_code: str = Field(..., description="독일 우편번호 (5자리)")
    tariff_line: str = Field(..., description="basic | comfort | premium")
    family_coverage: bool = False
    drones_coverage: bool = False
    deductible_amount: int = Field(default=0, description="자기부담금 (EUR)")
    previous_insurance: bool = Field(
        default=False,
        description="이전 배상책임보험 가입 여부. 보험료 산출에는 사용하지 않음",
    )
    number_of_claims: int = Field(default=0, description="최근 5년 사고 건수")
    cancelled_by_insurer: bool = False
    effective_date: str = Field(..., description="보험 개시일")
    coverage_amount: int | None = Field(default=None, description="보상한도 직접 지정 (EUR)")


class Quote(BaseModel):
    """산출된 견적. 생성 이후 변경되지 않는다."""

    model_config = _CAMEL

    quote_id: str
    monthly_premium: float = Field(..., ge=0)
    annual_premium: float = Field(..., ge=0)
    currency: str = "EUR"
    coverage_sum: int
    deductible: int
    territory: str = "Worldwide"
    included_risks: tuple[str, ...]
    extensions: tuple[str, ...] = ()
    valid_until: str
    tariff_line: str
    family_coverage: bool


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    valid: bool
    errors: tuple[str, ...] = ()


class QuoteResponse(BaseModel):
    """도구 응답 envelope — AI 어시스턴트가 그대로 읽는 형태."""

    model_config = _CAMEL

    success: bool
    quote: Quote | None = None
    error: str | None = None
    summary: str

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
