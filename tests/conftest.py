"""Pytest fixtures for the liability quote engine and tool layer."""

from datetime import datetime, timezone

import pytest

from app.models import QuoteRequest


@pytest.fixture
def make_request():
    """Factory for a valid comfort-tariff request; keyword overrides replace fields."""

    def _make(**overrides) -> QuoteRequest:
        data = {
            "zip_code": "10115",
            "tariff_line": "comfort",
            "effective_date": "2025-01-01",
        }
        data.update(overrides)
        return QuoteRequest(**data)

    return _make


@pytest.fixture
def fixed_now():
    return datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
