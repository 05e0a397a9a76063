from __future__ import annotations

import logging
from dataclasses import dataclass, field

from auto_budget.domain.amortization import ScheduleRow, amortization_schedule
from auto_budget.domain.errors import ValidationError
from auto_budget.domain.inputs import FinancialProfile, PaymentInputs, PlanType, VehicleSelection
from auto_budget.domain.profiles import STANDARD, PricingProfile
from auto_budget.domain.quote import PlanQuote, price_plan

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class QuoteRequest:
    vehicle: VehicleSelection
    financial: FinancialProfile = field(default_factory=FinancialProfile)
    inputs: PaymentInputs = field(default_factory=PaymentInputs)

    def normalized(self) -> QuoteRequest:
        return QuoteRequest(
            vehicle=self.vehicle,
            financial=self.financial.normalized(),
            inputs=self.inputs.normalized(),
        )


@dataclass(frozen=True, slots=True)
class LoanSchedule:
    quote: PlanQuote
    rows: tuple[ScheduleRow, ...]


@dataclass(frozen=True, slots=True)
class CalculatePaymentQuote:
    """
    Recompute the selected plan from scratch.

    Called by the form layer on every input change. Holds no state beyond the
    pricing profile chosen at construction, so repeated calls with the same
    request always return equal quotes.

    Rounding policy:
    - The returned quote carries full precision
    - Callers round for display with `PlanQuote.rounded()`
    """

    profile: PricingProfile = STANDARD

    def execute(self, request: QuoteRequest) -> PlanQuote:
        request = request.normalized()

        quote = price_plan(
            msrp=request.vehicle.msrp,
            financial=request.financial,
            inputs=request.inputs,
            pricing=self.profile,
        )

        logger.debug(
            "Quote computed",
            extra={
                "profile": self.profile.name,
                "plan_type": quote.plan_type.value,
                "term_months": quote.term_months,
                "apr": str(quote.apr),
                "monthly_payment": str(quote.monthly_payment),
            },
        )
        return quote

    def schedule(self, request: QuoteRequest) -> LoanSchedule:
        """
        Price a loan and break it down month by month.

        Raises:
            ValidationError: If the request is for a lease, which has no
                principal to amortize
        """
        if request.inputs.plan_type is not PlanType.LOAN:
            raise ValidationError(
                errors=[
                    {
                        "field": "plan_type",
                        "message": "Payment schedules are only available for loans",
                        "code": "INVALID_VALUE",
                    }
                ]
            )

        quote = self.execute(request)
        rows = amortization_schedule(quote.financed_amount, quote.apr, quote.term_months)
        return LoanSchedule(quote=quote, rows=tuple(rows))
