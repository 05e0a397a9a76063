from __future__ import annotations

from dataclasses import dataclass

from auto_budget.domain.budget import BudgetAssessment, assess_budget
from auto_budget.domain.quote import PlanQuote
from auto_budget.use_cases.calculate_payment_quote import CalculatePaymentQuote, QuoteRequest


@dataclass(frozen=True, slots=True)
class BudgetReport:
    quote: PlanQuote
    assessment: BudgetAssessment


@dataclass(frozen=True, slots=True)
class AssessBudget:
    """Quote the selected plan and check it against the buyer's income and spending."""

    calculate_quote: CalculatePaymentQuote

    def execute(self, request: QuoteRequest) -> BudgetReport:
        request = request.normalized()
        quote = self.calculate_quote.execute(request)
        assessment = assess_budget(
            financial=request.financial,
            inputs=request.inputs,
            quote=quote,
            msrp=request.vehicle.msrp,
        )
        return BudgetReport(quote=quote, assessment=assessment)
