"""Tests for the one-line quote summary."""

from app.liability import calculate_quote, format_quote_summary
from app.models import Quote


def _quote(**overrides) -> Quote:
    data = {
        "quote_id": "quote_1_abc",
        "monthly_premium": 15.51,
        "annual_premium": 186.12,
        "coverage_sum": 10_000_000,
        "deductible": 150,
        "included_risks": ("personal_injury", "property_damage", "financial_loss"),
        "extensions": ("family_coverage",),
        "valid_until": "2026-11-18T12:00:00.000Z",
        "tariff_line": "comfort",
        "family_coverage": True,
    }
    data.update(overrides)
    return Quote(**data)


def test_full_summary():
    assert format_quote_summary(_quote()) == (
        "Liability Insurance Quote: €15.51/month (€186.12/year). "
        "Coverage: €10,000,000 comfort. "
        "Deductible: €150. "
        "Includes family coverage. "
        "Territory: Worldwide. "
        "Valid until: 11/18/2026."
    )


def test_no_deductible_and_no_extensions():
    summary = format_quote_summary(
        _quote(deductible=0, extensions=(), family_coverage=False,
               monthly_premium=5.99, annual_premium=71.88, coverage_sum=5_000_000, tariff_line="basic")
    )
    assert summary == (
        "Liability Insurance Quote: €5.99/month (€71.88/year). "
        "Coverage: €5,000,000 basic. "
        "No deductible. "
        "Territory: Worldwide. "
        "Valid until: 11/18/2026."
    )


def test_drone_liability_follows_family_coverage():
    summary = format_quote_summary(
        _quote(extensions=("drones_coverage", "family_coverage"))
    )
    assert "Includes family coverage. Includes drone liability. Territory" in summary


def test_drone_liability_without_family():
    summary = format_quote_summary(_quote(extensions=("drones_coverage",), family_coverage=False))
    assert "Includes drone liability" in summary
    assert "Includes family coverage" not in summary


def test_whole_euro_amounts_have_no_decimal_suffix():
    summary = format_quote_summary(_quote(monthly_premium=12.0, annual_premium=144.0))
    assert summary.startswith("Liability Insurance Quote: €12/month (€144/year).")


def test_single_trailing_period(make_request):
    summary = format_quote_summary(calculate_quote(make_request()))
    assert summary.endswith(".")
    assert not summary.endswith("..")
    assert summary.count(". ") == 4
