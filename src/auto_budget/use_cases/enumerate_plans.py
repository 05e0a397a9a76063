from __future__ import annotations

from dataclasses import dataclass, replace

from auto_budget.domain.inputs import PlanType
from auto_budget.domain.profiles import COMPARISON, PricingProfile
from auto_budget.domain.quote import PlanQuote, price_plan
from auto_budget.use_cases.calculate_payment_quote import QuoteRequest

FINANCING_TERMS = (24, 36, 48, 60, 72)
LEASING_TERMS = (24, 36, 48, 60)
LEASING_MILEAGE_TIERS = (10_000, 12_000, 15_000)


@dataclass(frozen=True, slots=True)
class EnumeratePlans:
    """
    Price the comparison grid of alternatives.

    Every cell is priced independently with the same primitives as the single
    quote, so each term gets its own APR. Order is ascending term, then
    ascending mileage, and is used as-is for display. The requested plan type,
    term and mileage are overridden per cell; everything else is kept.
    """

    profile: PricingProfile = COMPARISON

    def financing(self, request: QuoteRequest) -> list[PlanQuote]:
        request = request.normalized()
        return [
            price_plan(
                msrp=request.vehicle.msrp,
                financial=request.financial,
                inputs=replace(request.inputs, plan_type=PlanType.LOAN, term_months=term),
                pricing=self.profile,
            )
            for term in FINANCING_TERMS
        ]

    def leasing(self, request: QuoteRequest) -> list[PlanQuote]:
        request = request.normalized()
        return [
            price_plan(
                msrp=request.vehicle.msrp,
                financial=request.financial,
                inputs=replace(
                    request.inputs,
                    plan_type=PlanType.LEASE,
                    term_months=term,
                    annual_mileage=mileage,
                ),
                pricing=self.profile,
            )
            for term in LEASING_TERMS
            for mileage in LEASING_MILEAGE_TIERS
        ]
