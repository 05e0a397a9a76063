from __future__ import annotations

from decimal import Decimal, InvalidOperation

from auto_budget.domain.budget import BudgetAssessment
from auto_budget.domain.errors import ValidationError
from auto_budget.domain.inputs import (
    FinancialProfile,
    MonthlyBudget,
    PaymentInputs,
    PlanType,
    Rebates,
    VehicleSelection,
    parse_annual_mileage,
    parse_credit_score,
    parse_money,
    parse_optional_money,
    parse_term_months,
)
from auto_budget.domain.money import to_cents
from auto_budget.domain.profiles import PricingProfile
from auto_budget.domain.quote import PlanQuote
from auto_budget.entrypoints.http.dtos.quotes import (
    BudgetAssessmentDTO,
    LoanScheduleResponseDTO,
    PlanListResponseDTO,
    PlanQuoteDTO,
    PricingProfileDTO,
    QuoteRequestDTO,
    QuoteResponseDTO,
    ScheduleRowDTO,
)
from auto_budget.entrypoints.http.dtos.vehicles import VehicleSelectionDTO
from auto_budget.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from auto_budget.use_cases.assess_budget import BudgetReport
from auto_budget.use_cases.calculate_payment_quote import LoanSchedule, QuoteRequest

RATIO_PLACES = Decimal("0.0001")


def _optional_cents(amount: Decimal | None) -> str | None:
    return str(to_cents(amount)) if amount is not None else None


class QuoteMapper:
    """Maps between REST DTOs and domain models for quotes and plan grids."""

    @staticmethod
    def to_domain_vehicle(dto: VehicleSelectionDTO) -> VehicleSelection:
        """
        Converts the vehicle DTO, handling string → Decimal conversion of the MSRP.

        Raises:
            ValidationError: If msrp cannot be converted to a valid Decimal
        """
        try:
            msrp = Decimal(dto.msrp)
        except (InvalidOperation, ValueError):
            raise ValidationError(
                errors=[
                    {
                        "field": "vehicle.msrp",
                        "message": f"Must be a valid decimal: {dto.msrp}",
                        "code": "INVALID_DECIMAL",
                    }
                ]
            ) from None

        return VehicleSelection(
            model=dto.model,
            trim=dto.trim,
            msrp=msrp,
            year=dto.year,
            color=dto.color,
        )

    @staticmethod
    def to_domain_request(dto: QuoteRequestDTO) -> QuoteRequest:
        """
        Converts the wizard payload to a domain QuoteRequest.

        Optional numeric fields never fail here: blanks and junk become the
        documented defaults (credit score 700, term 60, mileage 12000, money 0).
        """
        plan_type = PlanType(dto.plan_type)
        budget = dto.monthly_budget

        financial = FinancialProfile(
            credit_score=parse_credit_score(dto.credit_score),
            annual_income=parse_optional_money(dto.annual_income),
            monthly_budget=MonthlyBudget(
                housing=parse_money(budget.housing),
                food=parse_money(budget.food),
                utilities=parse_money(budget.utilities),
                other=parse_money(budget.other),
            ),
        )
        inputs = PaymentInputs(
            down_payment=parse_money(dto.down_payment),
            trade_in_value=parse_money(dto.trade_in_value),
            rebates=Rebates(military=dto.rebates.military, college=dto.rebates.college),
            plan_type=plan_type,
            term_months=parse_term_months(dto.term_months, plan_type),
            annual_mileage=parse_annual_mileage(dto.annual_mileage),
        )

        return QuoteRequest(
            vehicle=QuoteMapper.to_domain_vehicle(dto.vehicle),
            financial=financial,
            inputs=inputs,
        )

    @staticmethod
    def to_plan_response(quote: PlanQuote) -> PlanQuoteDTO:
        """
        Converts a domain PlanQuote to its DTO.

        This is where presentation rounding happens: every amount is rounded to
        cents, the APR is passed through unchanged.
        """
        rounded = quote.rounded()
        return PlanQuoteDTO(
            plan_type=rounded.plan_type.value,
            term_months=rounded.term_months,
            annual_mileage=rounded.annual_mileage,
            apr=str(rounded.apr),
            rate_band=rounded.rate_band.value,
            monthly_payment=str(rounded.monthly_payment),
            total_cost=str(rounded.total_cost),
            total_interest=_optional_cents(rounded.total_interest),
            residual_value=_optional_cents(rounded.residual_value),
            financed_amount=str(rounded.financed_amount),
            taxes_and_fees=str(rounded.taxes_and_fees),
            effective_price=str(rounded.effective_price),
            profile=rounded.profile,
        )

    @staticmethod
    def to_budget_response(assessment: BudgetAssessment) -> BudgetAssessmentDTO:
        ratio = assessment.payment_to_income_ratio
        return BudgetAssessmentDTO(
            monthly_income=_optional_cents(assessment.monthly_income),
            monthly_expenses=str(to_cents(assessment.monthly_expenses)),
            monthly_payment=str(to_cents(assessment.monthly_payment)),
            remaining=_optional_cents(assessment.remaining),
            has_deficit=assessment.has_deficit,
            payment_to_income_ratio=str(ratio.quantize(RATIO_PLACES)) if ratio is not None else None,
            tips=list(assessment.tips),
        )

    @staticmethod
    def to_quote_response(vehicle: VehicleSelection, report: BudgetReport) -> QuoteResponseDTO:
        return QuoteResponseDTO(
            vehicle=VehicleMapper.to_selection_response(vehicle),
            quote=QuoteMapper.to_plan_response(report.quote),
            budget=QuoteMapper.to_budget_response(report.assessment),
        )

    @staticmethod
    def to_schedule_response(schedule: LoanSchedule) -> LoanScheduleResponseDTO:
        """Rounds every row to cents; the closing balance is shown as 0.00."""
        return LoanScheduleResponseDTO(
            quote=QuoteMapper.to_plan_response(schedule.quote),
            rows=[
                ScheduleRowDTO(
                    month=row.month,
                    payment=str(to_cents(row.payment)),
                    principal=str(to_cents(row.principal)),
                    interest=str(to_cents(row.interest)),
                    balance=str(to_cents(row.balance)),
                )
                for row in schedule.rows
            ],
        )

    @staticmethod
    def to_plan_list_response(profile: str, plans: list[PlanQuote]) -> PlanListResponseDTO:
        return PlanListResponseDTO(
            profile=profile,
            plans=[QuoteMapper.to_plan_response(plan) for plan in plans],
        )

    @staticmethod
    def to_profile_response(profile: PricingProfile) -> PricingProfileDTO:
        return PricingProfileDTO(
            name=profile.name,
            rate_table=profile.rate_table.name,
            fee_scheme=profile.fee_scheme.name,
            tax_rate=str(profile.fee_scheme.tax_rate),
            flat_fee=str(profile.fee_scheme.flat_fee),
            residual_pct=str(profile.residual_pct),
            charge_mileage=profile.charge_mileage,
            min_apr=str(profile.rate_table.lowest_rate),
            max_apr=str(profile.rate_table.highest_rate),
        )
