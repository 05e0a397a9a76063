from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal

from auto_budget.domain.amortization import amortize, financed_amount
from auto_budget.domain.inputs import FinancialProfile, PaymentInputs, PlanType
from auto_budget.domain.lease import lease
from auto_budget.domain.money import ZERO, to_cents
from auto_budget.domain.pricing import effective_price
from auto_budget.domain.profiles import PricingProfile
from auto_budget.domain.rates import RateBand


@dataclass(frozen=True, slots=True)
class PlanQuote:
    """
    Priced plan. Derived on demand, never stored.

    Loans fill `total_interest`; leases fill `residual_value` and
    `annual_mileage`. Amounts carry full precision until `rounded()`.
    """

    plan_type: PlanType
    term_months: int
    apr: Decimal
    rate_band: RateBand
    monthly_payment: Decimal
    total_cost: Decimal
    financed_amount: Decimal
    taxes_and_fees: Decimal
    effective_price: Decimal
    profile: str
    total_interest: Decimal | None = None
    residual_value: Decimal | None = None
    annual_mileage: int | None = None

    def rounded(self) -> PlanQuote:
        """Copy with every monetary amount rounded to cents."""
        return replace(
            self,
            monthly_payment=to_cents(self.monthly_payment),
            total_cost=to_cents(self.total_cost),
            financed_amount=to_cents(self.financed_amount),
            taxes_and_fees=to_cents(self.taxes_and_fees),
            effective_price=to_cents(self.effective_price),
            total_interest=to_cents(self.total_interest) if self.total_interest is not None else None,
            residual_value=to_cents(self.residual_value) if self.residual_value is not None else None,
        )


def price_plan(
    msrp: Decimal,
    financial: FinancialProfile,
    inputs: PaymentInputs,
    pricing: PricingProfile,
) -> PlanQuote:
    """
    Price one plan: rebates, then APR, then fees and principal, then the loan or lease.

    Inputs are expected to be normalized already (see `PaymentInputs.normalized`).
    Leases depreciate the rebated price itself, so no fees are folded in and
    `financed_amount` is that price.
    """
    price = effective_price(msrp, inputs.rebates)
    band = pricing.rate_table.band_for(financial.credit_score)
    apr = pricing.rate_table.resolve_apr(financial.credit_score, inputs.term_months, inputs.plan_type)

    if inputs.plan_type is PlanType.LEASE:
        result = lease(
            price=price,
            apr=apr,
            term_months=inputs.term_months,
            residual_pct=pricing.residual_pct,
            annual_mileage=inputs.annual_mileage,
            down_payment=inputs.down_payment,
            charge_mileage=pricing.charge_mileage,
        )
        return PlanQuote(
            plan_type=PlanType.LEASE,
            term_months=inputs.term_months,
            apr=apr,
            rate_band=band.band,
            monthly_payment=result.monthly_payment,
            total_cost=result.total_cost,
            financed_amount=price,
            taxes_and_fees=ZERO,
            effective_price=price,
            profile=pricing.name,
            residual_value=result.residual_value,
            annual_mileage=inputs.annual_mileage,
        )

    fees = pricing.fee_scheme.compute(price)
    principal = financed_amount(price, fees, inputs.down_payment, inputs.trade_in_value)
    result = amortize(principal, apr, inputs.term_months, inputs.down_payment)

    return PlanQuote(
        plan_type=PlanType.LOAN,
        term_months=inputs.term_months,
        apr=apr,
        rate_band=band.band,
        monthly_payment=result.monthly_payment,
        total_cost=result.total_cost,
        financed_amount=principal,
        taxes_and_fees=fees,
        effective_price=price,
        profile=pricing.name,
        total_interest=result.total_interest,
    )
