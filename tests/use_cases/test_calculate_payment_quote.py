"""Test suite for CalculatePaymentQuote use case."""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from auto_budget.domain.errors import ValidationError
from auto_budget.domain.inputs import (
    FinancialProfile,
    PaymentInputs,
    PlanType,
    Rebates,
    VehicleSelection,
)
from auto_budget.domain.money import to_cents
from auto_budget.domain.profiles import COMPARISON, STANDARD
from auto_budget.use_cases.calculate_payment_quote import CalculatePaymentQuote, QuoteRequest


@pytest.fixture()
def request_() -> QuoteRequest:
    return QuoteRequest(
        vehicle=VehicleSelection(model="Camry", msrp=Decimal("35000"), trim="XSE"),
        financial=FinancialProfile(credit_score=720, annual_income=Decimal("85000")),
        inputs=PaymentInputs(down_payment=Decimal("5000"), term_months=60),
    )


def test_defaults_to_standard_profile() -> None:
    assert CalculatePaymentQuote().profile is STANDARD


def test_execute_prices_selected_loan(request_: QuoteRequest) -> None:
    quote = CalculatePaymentQuote().execute(request_)

    assert quote.plan_type is PlanType.LOAN
    assert quote.apr == Decimal("0.0872")
    assert quote.financed_amount == Decimal("32800")
    assert quote.rounded().monthly_payment == Decimal("676.43")


def test_execute_with_comparison_profile(request_: QuoteRequest) -> None:
    quote = CalculatePaymentQuote(profile=COMPARISON).execute(request_)

    assert quote.profile == "comparison"
    assert quote.taxes_and_fees == Decimal("3475")


def test_execute_normalizes_form_values() -> None:
    request = QuoteRequest(
        vehicle=VehicleSelection(model="Camry", msrp=Decimal("35000")),
        inputs=PaymentInputs(
            down_payment=Decimal("-100"),
            plan_type=PlanType.LEASE,
            term_months=84,
            annual_mileage=50_000,
        ),
    )

    quote = CalculatePaymentQuote().execute(request)

    assert quote.term_months == 60
    assert quote.annual_mileage == 20_000
    assert quote.total_cost == quote.monthly_payment * 60


def test_execute_is_idempotent(request_: QuoteRequest) -> None:
    use_case = CalculatePaymentQuote()

    assert use_case.execute(request_) == use_case.execute(request_)


def test_each_input_change_is_reflected(request_: QuoteRequest) -> None:
    use_case = CalculatePaymentQuote()
    base = use_case.execute(request_)

    with_rebates = use_case.execute(
        QuoteRequest(
            vehicle=request_.vehicle,
            financial=request_.financial,
            inputs=PaymentInputs(
                down_payment=Decimal("5000"),
                rebates=Rebates(military=True),
            ),
        )
    )

    assert with_rebates.monthly_payment < base.monthly_payment
    assert with_rebates.effective_price == Decimal("34500")


def test_execute_logs_quote(request_: QuoteRequest, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="auto_budget.use_cases.calculate_payment_quote"):
        CalculatePaymentQuote().execute(request_)

    record = next(r for r in caplog.records if r.message == "Quote computed")
    assert record.profile == "standard"
    assert record.term_months == 60


# ==============================================================================
# Payment Schedule
# ==============================================================================


def test_schedule_breaks_down_the_priced_loan(request_: QuoteRequest) -> None:
    schedule = CalculatePaymentQuote().schedule(request_)

    assert schedule.quote == CalculatePaymentQuote().execute(request_)
    assert len(schedule.rows) == 60
    assert schedule.rows[0].month == 1
    assert schedule.rows[0].payment == schedule.quote.monthly_payment
    assert schedule.rows[-1].balance == Decimal("0")
    assert to_cents(sum(row.principal for row in schedule.rows)) == Decimal("32800.00")


def test_schedule_uses_normalized_term() -> None:
    request = QuoteRequest(
        vehicle=VehicleSelection(model="Camry", msrp=Decimal("35000")),
        inputs=PaymentInputs(term_months=50),
    )

    assert len(CalculatePaymentQuote().schedule(request).rows) == 60


def test_schedule_rejects_lease(request_: QuoteRequest) -> None:
    lease = QuoteRequest(
        vehicle=request_.vehicle,
        inputs=PaymentInputs(plan_type=PlanType.LEASE, term_months=36),
    )

    with pytest.raises(ValidationError) as exc_info:
        CalculatePaymentQuote().schedule(lease)

    assert exc_info.value.errors[0]["field"] == "plan_type"
