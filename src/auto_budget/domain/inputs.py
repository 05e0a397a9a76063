from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum

from auto_budget.domain.money import ZERO, parse_decimal, to_cents


class PlanType(str, Enum):
    LOAN = "loan"
    LEASE = "lease"


LOAN_TERMS = (24, 36, 48, 60, 72, 84)
LEASE_TERMS = (24, 36, 48, 60, 72)

DEFAULT_CREDIT_SCORE = 700
MIN_CREDIT_SCORE = 300
MAX_CREDIT_SCORE = 850

DEFAULT_TERM_MONTHS = 60

DEFAULT_ANNUAL_MILEAGE = 12_000
MIN_ANNUAL_MILEAGE = 10_000
MAX_ANNUAL_MILEAGE = 20_000

DEFAULT_YEAR = "2026"


@dataclass(frozen=True, slots=True)
class VehicleSelection:
    model: str
    msrp: Decimal
    trim: str = ""
    year: str = DEFAULT_YEAR
    color: str = ""

    def with_trim(self, trim: str, price: Decimal) -> VehicleSelection:
        """Copy with a trim picked; the trim price becomes the MSRP."""
        return replace(self, trim=trim, msrp=price)


@dataclass(frozen=True, slots=True)
class MonthlyBudget:
    """Current monthly spending, by category. Every field is optional."""

    housing: Decimal = ZERO
    food: Decimal = ZERO
    utilities: Decimal = ZERO
    other: Decimal = ZERO

    @property
    def total(self) -> Decimal:
        return sum(
            (max(amount, ZERO) for amount in (self.housing, self.food, self.utilities, self.other)),
            ZERO,
        )


@dataclass(frozen=True, slots=True)
class FinancialProfile:
    credit_score: int = DEFAULT_CREDIT_SCORE
    annual_income: Decimal | None = None
    monthly_budget: MonthlyBudget = field(default_factory=MonthlyBudget)

    def normalized(self) -> FinancialProfile:
        income = self.annual_income
        if income is not None and income < 0:
            income = ZERO
        return replace(self, annual_income=income)


@dataclass(frozen=True, slots=True)
class Rebates:
    military: bool = False
    college: bool = False


@dataclass(frozen=True, slots=True)
class PaymentInputs:
    down_payment: Decimal = ZERO
    trade_in_value: Decimal = ZERO
    rebates: Rebates = field(default_factory=Rebates)
    plan_type: PlanType = PlanType.LOAN
    term_months: int = DEFAULT_TERM_MONTHS
    annual_mileage: int = DEFAULT_ANNUAL_MILEAGE

    def normalized(self) -> PaymentInputs:
        """
        Substitute safe values for anything out of range.

        The engine never rejects a form: negative money becomes 0, a term the
        plan type cannot use falls back to 60 months and mileage is clamped to
        the offered band.
        """
        allowed_terms = LOAN_TERMS if self.plan_type is PlanType.LOAN else LEASE_TERMS
        term = self.term_months if self.term_months in allowed_terms else DEFAULT_TERM_MONTHS
        mileage = min(max(self.annual_mileage, MIN_ANNUAL_MILEAGE), MAX_ANNUAL_MILEAGE)

        return replace(
            self,
            down_payment=max(self.down_payment, ZERO),
            trade_in_value=max(self.trade_in_value, ZERO),
            term_months=term,
            annual_mileage=mileage,
        )


# ==============================================================================
# Form value coercion
# ==============================================================================


def parse_credit_score(raw: object) -> int:
    """Missing or non-numeric scores default to 700. Range is left to the rate table."""
    value = parse_decimal(raw)
    if value is None:
        return DEFAULT_CREDIT_SCORE
    return int(value)


def parse_term_months(raw: object, plan_type: PlanType = PlanType.LOAN) -> int:
    value = parse_decimal(raw)
    if value is None:
        return DEFAULT_TERM_MONTHS
    allowed_terms = LOAN_TERMS if plan_type is PlanType.LOAN else LEASE_TERMS
    if value not in allowed_terms:
        return DEFAULT_TERM_MONTHS
    return int(value)


def parse_annual_mileage(raw: object) -> int:
    value = parse_decimal(raw)
    if value is None:
        return DEFAULT_ANNUAL_MILEAGE
    return int(min(max(value, Decimal(MIN_ANNUAL_MILEAGE)), Decimal(MAX_ANNUAL_MILEAGE)))


def parse_money(raw: object, default: Decimal = ZERO) -> Decimal:
    """Monetary form value in cents, floored at zero; unparseable input gives `default`."""
    value = parse_decimal(raw)
    if value is None:
        return default
    return to_cents(max(value, ZERO))


def parse_optional_money(raw: object) -> Decimal | None:
    value = parse_decimal(raw)
    if value is None:
        return None
    return to_cents(max(value, ZERO))


def parse_plan_type(raw: object) -> PlanType:
    if isinstance(raw, PlanType):
        return raw
    if isinstance(raw, str) and raw.strip().lower() == PlanType.LEASE.value:
        return PlanType.LEASE
    return PlanType.LOAN
