from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from auto_budget.domain.inputs import FinancialProfile, PaymentInputs, PlanType
from auto_budget.domain.money import ZERO
from auto_budget.domain.quote import PlanQuote

FAIR_CREDIT_THRESHOLD = 670
MAX_PAYMENT_TO_INCOME = Decimal("0.20")
RECOMMENDED_DOWN_PAYMENT_PCT = Decimal("0.20")
MAX_RECOMMENDED_LOAN_TERM = 60

TIP_IMPROVE_CREDIT = "Consider improving your credit score for better rates"
TIP_PAYMENT_TO_INCOME = "Payment may be high relative to income (>20%)"
TIP_LARGER_DOWN_PAYMENT = "Consider a larger down payment to reduce monthly costs"
TIP_SHORTER_TERM = "Shorter loan terms save money on interest"
TIP_LOOKS_GOOD = "Your financing looks good!"


@dataclass(frozen=True, slots=True)
class BudgetAssessment:
    monthly_income: Decimal | None
    monthly_expenses: Decimal
    monthly_payment: Decimal
    remaining: Decimal | None
    has_deficit: bool
    payment_to_income_ratio: Decimal | None
    tips: tuple[str, ...]


def payment_to_income_ratio(monthly_payment: Decimal, annual_income: Decimal | None) -> Decimal | None:
    if annual_income is None or annual_income <= 0:
        return None
    return monthly_payment * 12 / annual_income


def financing_tips(
    financial: FinancialProfile,
    inputs: PaymentInputs,
    quote: PlanQuote,
    msrp: Decimal,
) -> tuple[str, ...]:
    """Advisory messages in a fixed order. Falls back to a single affirmation."""
    tips: list[str] = []

    if financial.credit_score < FAIR_CREDIT_THRESHOLD:
        tips.append(TIP_IMPROVE_CREDIT)

    ratio = payment_to_income_ratio(quote.monthly_payment, financial.annual_income)
    if ratio is not None and ratio > MAX_PAYMENT_TO_INCOME:
        tips.append(TIP_PAYMENT_TO_INCOME)

    if inputs.down_payment < msrp * RECOMMENDED_DOWN_PAYMENT_PCT:
        tips.append(TIP_LARGER_DOWN_PAYMENT)

    if inputs.plan_type is PlanType.LOAN and inputs.term_months > MAX_RECOMMENDED_LOAN_TERM:
        tips.append(TIP_SHORTER_TERM)

    return tuple(tips) or (TIP_LOOKS_GOOD,)


def assess_budget(
    financial: FinancialProfile,
    inputs: PaymentInputs,
    quote: PlanQuote,
    msrp: Decimal,
) -> BudgetAssessment:
    """
    Check the payment against monthly income and current spending.

    Without a known income there is nothing to run short of, so no deficit is
    reported and `remaining` stays None.
    """
    expenses = financial.monthly_budget.total
    income = financial.annual_income

    if income is None or income <= 0:
        monthly_income = None
        remaining = None
    else:
        monthly_income = income / 12
        remaining = monthly_income - expenses - quote.monthly_payment

    return BudgetAssessment(
        monthly_income=monthly_income,
        monthly_expenses=expenses,
        monthly_payment=quote.monthly_payment,
        remaining=remaining,
        has_deficit=remaining is not None and remaining < ZERO,
        payment_to_income_ratio=payment_to_income_ratio(quote.monthly_payment, income),
        tips=financing_tips(financial, inputs, quote, msrp),
    )
