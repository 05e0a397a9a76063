from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from decimal import Decimal

from auto_budget.domain.errors import ValidationError
from auto_budget.domain.money import ZERO

MONTHS_PER_YEAR = Decimal("12")


class InvalidFinancingInput(ValidationError):
    pass


@dataclass(frozen=True, slots=True)
class AmortizationResult:
    monthly_payment: Decimal
    total_cost: Decimal
    total_interest: Decimal


@dataclass(frozen=True, slots=True)
class ScheduleRow:
    month: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal


def _check_terms(apr: Decimal, term_months: int) -> None:
    if term_months <= 0:
        raise InvalidFinancingInput("term_months must be > 0", term_months=term_months)
    if apr < 0:
        raise InvalidFinancingInput("apr must be >= 0", apr=str(apr))


def financed_amount(
    price: Decimal,
    taxes_and_fees: Decimal,
    down_payment: Decimal = ZERO,
    trade_in_value: Decimal = ZERO,
) -> Decimal:
    """Principal to amortize. Clamped at zero: down payment and trade-in never create a credit."""
    return max(price + taxes_and_fees - down_payment - trade_in_value, ZERO)


def level_payment(principal: Decimal, apr: Decimal, term_months: int) -> Decimal:
    """
    Fixed monthly payment that retires `principal` in `term_months`.

    monthly_payment = P * r(1+r)^n / ((1+r)^n - 1), with r = apr / 12.
    A zero rate pays the principal down linearly (P / n).
    """
    _check_terms(apr, term_months)
    if principal <= 0:
        return ZERO

    monthly_rate = apr / MONTHS_PER_YEAR
    if monthly_rate == 0:
        return principal / Decimal(term_months)

    factor = (1 + monthly_rate) ** term_months
    return principal * (monthly_rate * factor) / (factor - 1)


def amortize(
    financed: Decimal,
    apr: Decimal,
    term_months: int,
    down_payment: Decimal = ZERO,
) -> AmortizationResult:
    """
    Price a fixed-rate loan at full precision.

    Rounding policy:
    - Nothing is rounded here; totals derive from the unrounded payment
    - Presentation layers round to cents (see `money.to_cents`)

    Raises:
        InvalidFinancingInput: If term_months <= 0 or apr < 0
    """
    principal = max(financed, ZERO)
    monthly_payment = level_payment(principal, apr, term_months)
    total_paid = monthly_payment * term_months

    return AmortizationResult(
        monthly_payment=monthly_payment,
        total_cost=total_paid + down_payment,
        total_interest=total_paid - principal,
    )


def amortization_schedule(financed: Decimal, apr: Decimal, term_months: int) -> Iterator[ScheduleRow]:
    """
    Month-by-month split of each payment into interest and principal.

    The last row absorbs precision drift so the balance closes at exactly zero.
    """
    principal = max(financed, ZERO)
    payment = level_payment(principal, apr, term_months)
    monthly_rate = apr / MONTHS_PER_YEAR
    balance = principal

    for month in range(1, term_months + 1):
        interest = balance * monthly_rate
        if month == term_months:
            principal_part = balance
            row_payment = balance + interest
        else:
            principal_part = payment - interest
            row_payment = payment
        balance -= principal_part

        yield ScheduleRow(
            month=month,
            payment=row_payment,
            principal=principal_part,
            interest=interest,
            balance=balance,
        )
