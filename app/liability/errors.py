"""견적 엔진 예외."""

from __future__ import annotations


class QuoteError(Exception):
    """견적 엔진 예외의 공통 부모."""


class QuoteValidationError(QuoteError):
    """입력 검증 실패. details에 위반 규칙 메시지가 검사 순서대로 담긴다."""

    def __init__(self, message: str, details: list[str] | tuple[str, ...] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: tuple[str, ...] = tuple(details or ())


class QuoteCalculationError(QuoteError):
    """검증을 통과했으나 요율표로 산출할 수 없는 경우."""
