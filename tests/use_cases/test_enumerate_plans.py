"""Test suite for EnumeratePlans use case."""

from __future__ import annotations

from decimal import Decimal

import pytest

from auto_budget.domain.inputs import FinancialProfile, PaymentInputs, PlanType, VehicleSelection
from auto_budget.domain.profiles import COMPARISON, STANDARD
from auto_budget.domain.quote import price_plan
from auto_budget.use_cases.calculate_payment_quote import QuoteRequest
from auto_budget.use_cases.enumerate_plans import (
    FINANCING_TERMS,
    LEASING_MILEAGE_TIERS,
    LEASING_TERMS,
    EnumeratePlans,
)


@pytest.fixture()
def request_() -> QuoteRequest:
    return QuoteRequest(
        vehicle=VehicleSelection(model="Camry", msrp=Decimal("35000")),
        financial=FinancialProfile(credit_score=720),
        inputs=PaymentInputs(
            down_payment=Decimal("5000"),
            plan_type=PlanType.LEASE,
            term_months=36,
            annual_mileage=20_000,
        ),
    )


# ==============================================================================
# Financing
# ==============================================================================


def test_financing_grid_has_one_loan_per_term(request_: QuoteRequest) -> None:
    plans = EnumeratePlans().financing(request_)

    assert [plan.term_months for plan in plans] == [24, 36, 48, 60, 72]
    assert all(plan.plan_type is PlanType.LOAN for plan in plans)
    assert all(plan.profile == "comparison" for plan in plans)


def test_financing_cell_matches_single_quote(request_: QuoteRequest) -> None:
    plans = EnumeratePlans().financing(request_)

    expected = price_plan(
        msrp=Decimal("35000"),
        financial=request_.financial,
        inputs=PaymentInputs(down_payment=Decimal("5000"), term_months=48),
        pricing=COMPARISON,
    )
    assert plans[2] == expected


def test_financing_payments_fall_as_term_grows(request_: QuoteRequest) -> None:
    payments = [plan.monthly_payment for plan in EnumeratePlans().financing(request_)]

    assert payments == sorted(payments, reverse=True)


def test_standard_profile_reprices_72_month_cell(request_: QuoteRequest) -> None:
    plans = EnumeratePlans(profile=STANDARD).financing(request_)

    assert plans[3].apr == Decimal("0.0872")
    assert plans[4].apr == Decimal("0.0972")


# ==============================================================================
# Leasing
# ==============================================================================


def test_leasing_grid_is_term_then_mileage(request_: QuoteRequest) -> None:
    plans = EnumeratePlans().leasing(request_)

    assert len(plans) == len(LEASING_TERMS) * len(LEASING_MILEAGE_TIERS) == 12
    assert [(plan.term_months, plan.annual_mileage) for plan in plans[:4]] == [
        (24, 10_000),
        (24, 12_000),
        (24, 15_000),
        (36, 10_000),
    ]
    assert all(plan.plan_type is PlanType.LEASE for plan in plans)


def test_leasing_mileage_above_allowance_costs_more(request_: QuoteRequest) -> None:
    plans = EnumeratePlans().leasing(request_)
    at_36 = [plan for plan in plans if plan.term_months == 36]

    assert at_36[0].monthly_payment == at_36[1].monthly_payment
    assert at_36[2].monthly_payment - at_36[1].monthly_payment == Decimal("62.5")


def test_leasing_uses_comparison_residual(request_: QuoteRequest) -> None:
    plans = EnumeratePlans().leasing(request_)

    assert all(plan.residual_value == Decimal("19250") for plan in plans)


def test_grid_constants() -> None:
    assert FINANCING_TERMS == (24, 36, 48, 60, 72)
    assert LEASING_MILEAGE_TIERS == (10_000, 12_000, 15_000)
