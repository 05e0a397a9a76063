from fastapi import APIRouter, Depends

from auto_budget.domain.profiles import PROFILES
from auto_budget.entrypoints.http.dependencies import get_enumerate_plans_use_case
from auto_budget.entrypoints.http.dtos.quotes import (
    PlanListResponseDTO,
    PricingProfileDTO,
    QuoteRequestDTO,
)
from auto_budget.entrypoints.http.error_responses import ErrorResponse
from auto_budget.entrypoints.http.mappers.quote_mapper import QuoteMapper
from auto_budget.use_cases.enumerate_plans import EnumeratePlans


router = APIRouter(tags=["Plans"])


@router.post(
    "/plans/financing",
    response_model=PlanListResponseDTO,
    summary="Compare loan terms",
    description="""
    Price a loan for each of 24, 36, 48, 60 and 72 months, in that order.
    plan_type, term_months and annual_mileage in the payload are ignored.
    """,
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)
def financing_plans(
    payload: QuoteRequestDTO,
    use_case: EnumeratePlans = Depends(get_enumerate_plans_use_case),
) -> PlanListResponseDTO:
    request = QuoteMapper.to_domain_request(payload)
    plans = use_case.financing(request)
    return QuoteMapper.to_plan_list_response(use_case.profile.name, plans)


@router.post(
    "/plans/leasing",
    response_model=PlanListResponseDTO,
    summary="Compare lease terms and mileage tiers",
    description="""
    Price a lease for each term in 24, 36, 48, 60 months crossed with
    10000, 12000 and 15000 miles a year: 12 plans ordered by term, then mileage.
    """,
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)
def leasing_plans(
    payload: QuoteRequestDTO,
    use_case: EnumeratePlans = Depends(get_enumerate_plans_use_case),
) -> PlanListResponseDTO:
    request = QuoteMapper.to_domain_request(payload)
    plans = use_case.leasing(request)
    return QuoteMapper.to_plan_list_response(use_case.profile.name, plans)


@router.get(
    "/pricing-profiles",
    response_model=list[PricingProfileDTO],
    summary="List pricing profiles",
)
def pricing_profiles() -> list[PricingProfileDTO]:
    return [QuoteMapper.to_profile_response(profile) for profile in PROFILES.values()]
