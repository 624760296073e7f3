"""Tests for premium calculation and quote assembly."""

from decimal import Decimal

import pytest

from app.liability import (
    QuoteAccepted,
    QuoteCalculationError,
    QuoteRejected,
    QuoteValidationError,
    calculate_quote,
    price_quote,
)
from app.liability.pricing import compute_monthly_premium, round_currency
from app.liability.validation import MSG_CLAIMS_EXCEEDED, MSG_ZIP
from app.models import QuoteRequest


# --- Worked scenarios ---


def test_basic_without_options(make_request):
    quote = calculate_quote(make_request(tariff_line="basic"))
    assert quote.monthly_premium == 5.99
    assert quote.annual_premium == 71.88
    assert quote.coverage_sum == 5_000_000


def test_comfort_without_options(make_request):
    quote = calculate_quote(make_request())
    assert quote.monthly_premium == 9.99
    assert quote.annual_premium == 119.88
    assert quote.coverage_sum == 10_000_000


def test_premium_without_options(make_request):
    quote = calculate_quote(make_request(tariff_line="premium"))
    assert quote.monthly_premium == 14.99
    assert quote.annual_premium == 179.88
    assert quote.coverage_sum == 20_000_000


def test_family_deductible_and_one_claim(make_request):
    # 9.99 × 1.5 × 0.9 × 1.15 = 15.509…
    quote = calculate_quote(
        make_request(family_coverage=True, deductible_amount=150, number_of_claims=1)
    )
    assert quote.monthly_premium == 15.51
    assert quote.annual_premium == 186.12
    assert quote.extensions == ("family_coverage",)


def test_drones_is_a_flat_surcharge(make_request):
    quote = calculate_quote(make_request(drones_coverage=True))
    assert quote.monthly_premium == 12.49
    assert quote.annual_premium == 149.88
    assert quote.extensions == ("drones_coverage",)


def test_highest_deductible_discount(make_request):
    quote = calculate_quote(make_request(deductible_amount=500))
    assert quote.monthly_premium == 7.99
    assert quote.deductible == 500


def test_medium_deductible_discount(make_request):
    quote = calculate_quote(make_request(deductible_amount=300))
    assert quote.monthly_premium == 8.49
    assert quote.annual_premium == 101.88


def test_claims_loading_is_proportional_not_compounded(make_request):
    # 9.99 × (1 + 2 × 0.15) = 12.987
    quote = calculate_quote(make_request(number_of_claims=2))
    assert quote.monthly_premium == 12.99
    assert quote.annual_premium == 155.88


def test_cancellation_surcharge(make_request):
    # 14.99 × 1.3 = 19.487
    quote = calculate_quote(make_request(tariff_line="premium", cancelled_by_insurer=True))
    assert quote.monthly_premium == 19.49
    assert quote.annual_premium == 233.88


def test_family_is_applied_before_drones(make_request):
    raw = compute_monthly_premium(make_request(family_coverage=True, drones_coverage=True))
    assert raw == pytest.approx(9.99 * 1.5 + 2.50)


def test_drones_surcharge_is_discounted_by_deductible(make_request):
    raw = compute_monthly_premium(make_request(drones_coverage=True, deductible_amount=500))
    assert raw == pytest.approx((9.99 + 2.50) * 0.8)


def test_all_adjustments_in_order(make_request):
    raw = compute_monthly_premium(
        make_request(
            tariff_line="basic",
            family_coverage=True,
            drones_coverage=True,
            deductible_amount=300,
            number_of_claims=3,
            cancelled_by_insurer=True,
        )
    )
    assert raw == pytest.approx((5.99 * 1.5 + 2.50) * 0.85 * 1.45 * 1.3)


def test_previous_insurance_does_not_change_premium(make_request):
    with_history = calculate_quote(make_request(previous_insurance=True))
    without = calculate_quote(make_request(previous_insurance=False))
    assert with_history.monthly_premium == without.monthly_premium


# --- Rounding ---


@pytest.mark.parametrize(
    "value, expected",
    [(7.992, 7.99), (15.509475, 15.51), (12.345, 12.35), (8.4915, 8.49), (Decimal("186.12"), 186.12)],
)
def test_round_currency_half_up(value, expected):
    assert round_currency(value) == expected


def test_annual_is_twelve_times_rounded_monthly(make_request):
    quote = calculate_quote(
        make_request(family_coverage=True, deductible_amount=150, number_of_claims=1)
    )
    assert quote.annual_premium == round_currency(Decimal(str(quote.monthly_premium)) * 12)


# --- Quote assembly ---


def test_quote_fields(make_request, fixed_now):
    quote = calculate_quote(
        make_request(family_coverage=True, drones_coverage=True, deductible_amount=150),
        now=fixed_now,
    )
    assert quote.currency == "EUR"
    assert quote.territory == "Worldwide"
    assert quote.included_risks == ("personal_injury", "property_damage", "financial_loss")
    assert quote.extensions == ("drones_coverage", "family_coverage")
    assert quote.deductible == 150
    assert quote.tariff_line == "comfort"
    assert quote.family_coverage is True
    assert quote.valid_until == "2026-11-18T12:00:00.000Z"
    assert quote.quote_id.startswith(f"quote_{int(fixed_now.timestamp() * 1000)}_")


def test_no_extensions_without_options(make_request):
    assert calculate_quote(make_request()).extensions == ()


def test_coverage_override_supersedes_tariff_default(make_request):
    quote = calculate_quote(make_request(tariff_line="basic", coverage_amount=15_000_000))
    assert quote.coverage_sum == 15_000_000
    assert quote.monthly_premium == 5.99


def test_quote_ids_differ_between_calls(make_request, fixed_now):
    first = calculate_quote(make_request(), now=fixed_now)
    second = calculate_quote(make_request(), now=fixed_now)
    assert first.quote_id != second.quote_id


def test_identical_input_gives_identical_pricing(make_request):
    request = make_request(drones_coverage=True, number_of_claims=4, deductible_amount=300)
    first = calculate_quote(request)
    second = calculate_quote(request)
    keys = (
        "monthly_premium", "annual_premium", "coverage_sum", "deductible",
        "extensions", "tariff_line", "family_coverage",
    )
    for key in keys:
        assert getattr(first, key) == getattr(second, key)


def test_quote_is_immutable(make_request):
    quote = calculate_quote(make_request())
    with pytest.raises(Exception):
        quote.monthly_premium = 0.0


def test_quote_serializes_with_camel_case_keys(make_request):
    payload = calculate_quote(make_request()).model_dump(by_alias=True)
    assert {"quoteId", "monthlyPremium", "annualPremium", "coverageSum", "validUntil",
            "includedRisks", "tariffLine", "familyCoverage"} <= payload.keys()


@pytest.mark.parametrize("tariff_line", ["basic", "comfort", "premium"])
@pytest.mark.parametrize("deductible", [0, 150, 300, 500])
@pytest.mark.parametrize("claims", [0, 5, 10])
def test_premiums_are_never_negative(make_request, tariff_line, deductible, claims):
    quote = calculate_quote(
        make_request(tariff_line=tariff_line, deductible_amount=deductible, number_of_claims=claims,
                     family_coverage=True, drones_coverage=True, cancelled_by_insurer=True)
    )
    assert quote.monthly_premium >= 0
    assert quote.annual_premium >= 0


# --- Failure paths ---


def test_invalid_request_raises_before_pricing(make_request, monkeypatch):
    def _fail(_request):
        raise AssertionError("pricing must not run")

    monkeypatch.setattr("app.liability.pricing.compute_monthly_premium", _fail)
    with pytest.raises(QuoteValidationError) as exc_info:
        calculate_quote(make_request(zip_code="1234", number_of_claims=11))
    assert str(exc_info.value) == "Invalid parameters"
    assert exc_info.value.details == (MSG_ZIP, MSG_CLAIMS_EXCEEDED)


def test_price_quote_accepts_valid_request(make_request):
    outcome = price_quote(make_request())
    assert isinstance(outcome, QuoteAccepted)
    assert outcome.quote.monthly_premium == 9.99


def test_price_quote_rejects_without_raising(make_request):
    outcome = price_quote(make_request(zip_code="1234"))
    assert isinstance(outcome, QuoteRejected)
    assert outcome.message == "Invalid parameters"
    assert outcome.errors == (MSG_ZIP,)


def test_missing_rate_raises_calculation_error():
    request = QuoteRequest.model_construct(
        zip_code="10115", tariff_line="gold", effective_date="2025-01-01",
        family_coverage=False, drones_coverage=False, deductible_amount=0,
        previous_insurance=False, number_of_claims=0, cancelled_by_insurer=False,
        coverage_amount=None,
    )
    with pytest.raises(QuoteCalculationError):
        compute_monthly_premium(request)
