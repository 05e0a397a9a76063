from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from auto_budget.domain.amortization import MONTHS_PER_YEAR, InvalidFinancingInput
from auto_budget.domain.money import ZERO

INCLUDED_ANNUAL_MILES = 12_000
OVERAGE_PER_MILE = Decimal("0.25")


@dataclass(frozen=True, slots=True)
class LeaseResult:
    monthly_payment: Decimal
    total_cost: Decimal
    residual_value: Decimal
    monthly_depreciation: Decimal
    monthly_finance_charge: Decimal
    mileage_adjustment: Decimal


def mileage_adjustment(annual_mileage: int) -> Decimal:
    """Monthly surcharge for miles driven past the 12,000/yr allowance, at $0.25 a mile."""
    excess = annual_mileage - INCLUDED_ANNUAL_MILES
    if excess <= 0:
        return ZERO
    return excess * OVERAGE_PER_MILE / MONTHS_PER_YEAR


def lease(
    price: Decimal,
    apr: Decimal,
    term_months: int,
    residual_pct: Decimal,
    annual_mileage: int,
    down_payment: Decimal = ZERO,
    charge_mileage: bool = False,
) -> LeaseResult:
    """
    Depreciation-based lease payment.

    The finance charge applies apr / 12 to (price + residual) directly instead
    of converting the APR to a money factor. Mileage is only charged when
    `charge_mileage` is set.

    Raises:
        InvalidFinancingInput: If term_months <= 0 or apr < 0
    """
    if term_months <= 0:
        raise InvalidFinancingInput("term_months must be > 0", term_months=term_months)
    if apr < 0:
        raise InvalidFinancingInput("apr must be >= 0", apr=str(apr))

    residual_value = price * residual_pct
    monthly_depreciation = (price - residual_value) / Decimal(term_months)
    monthly_finance_charge = (price + residual_value) * (apr / MONTHS_PER_YEAR)
    adjustment = mileage_adjustment(annual_mileage) if charge_mileage else ZERO

    monthly_payment = monthly_depreciation + monthly_finance_charge + adjustment

    return LeaseResult(
        monthly_payment=monthly_payment,
        total_cost=monthly_payment * term_months + down_payment,
        residual_value=residual_value,
        monthly_depreciation=monthly_depreciation,
        monthly_finance_charge=monthly_finance_charge,
        mileage_adjustment=adjustment,
    )
