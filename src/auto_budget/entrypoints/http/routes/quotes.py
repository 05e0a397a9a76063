from fastapi import APIRouter, Depends

from auto_budget.entrypoints.http.dependencies import (
    get_assess_budget_use_case,
    get_calculate_payment_quote_use_case,
)
from auto_budget.entrypoints.http.dtos.quotes import (
    LoanScheduleResponseDTO,
    QuoteRequestDTO,
    QuoteResponseDTO,
)
from auto_budget.entrypoints.http.error_responses import ErrorResponse
from auto_budget.entrypoints.http.mappers.quote_mapper import QuoteMapper
from auto_budget.use_cases.assess_budget import AssessBudget
from auto_budget.use_cases.calculate_payment_quote import CalculatePaymentQuote


router = APIRouter(tags=["Quotes"])


@router.post(
    "/quotes",
    response_model=QuoteResponseDTO,
    summary="Price the selected plan",
    description="""
    Recompute the monthly payment for the plan the buyer has configured.
    Call it again on every input change; nothing is stored between calls.

    ## Defaults
    - credit_score: missing or non-numeric → 700
    - term_months: missing or not offered for the plan type → 60
    - annual_mileage: missing → 12000, otherwise clamped to 10000-20000
    - money fields: missing, negative or 1e12 and above → 0 (commas and "$" are accepted)

    ## Calculation
    - Effective price = msrp - $500 per active rebate
    - Loan: financed = effective price + taxes/fees - down payment - trade-in,
      amortized at the APR of the credit band
    - Lease: depreciation + finance charge on the effective price

    ## Budget
    The response also carries advisory tips and, when income is known, whether
    the payment leaves the monthly budget in deficit.
    """,
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)
def create_quote(
    payload: QuoteRequestDTO,
    use_case: AssessBudget = Depends(get_assess_budget_use_case),
) -> QuoteResponseDTO:
    """
    Quote endpoint.

    1. Map: DTO → domain request (defaults substituted)
    2. Execute: price the plan and assess the budget
    3. Map: domain → response DTO (rounded to cents)
    """
    request = QuoteMapper.to_domain_request(payload)
    report = use_case.execute(request)
    return QuoteMapper.to_quote_response(request.vehicle, report)


@router.post(
    "/quotes/schedule",
    response_model=LoanScheduleResponseDTO,
    summary="Break a loan down month by month",
    description="""
    Price the loan exactly like POST /quotes, then split every payment into
    interest and principal with the balance left after it.

    The last row absorbs rounding drift so the balance closes at 0.00.
    Leases have no amortization and are rejected with 422.
    """,
    responses={422: {"model": ErrorResponse, "description": "Validation error or lease request"}},
)
def create_schedule(
    payload: QuoteRequestDTO,
    use_case: CalculatePaymentQuote = Depends(get_calculate_payment_quote_use_case),
) -> LoanScheduleResponseDTO:
    request = QuoteMapper.to_domain_request(payload)
    schedule = use_case.schedule(request)
    return QuoteMapper.to_schedule_response(schedule)
