from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from auto_budget.entrypoints.http.dtos.vehicles import VehicleSelectionDTO

# Optional form fields stay loosely typed: JSON numbers (fractional ones
# included) and strings are accepted, and any value parse_decimal rejects
# falls back to its documented default instead of failing the request.
FormNumber = int | float | str | None


class MonthlyBudgetDTO(BaseModel):
    housing: FormNumber = Field(default=None, examples=["1,500"])
    food: FormNumber = Field(default=None, examples=["600"])
    utilities: FormNumber = Field(default=None, examples=["250"])
    other: FormNumber = Field(default=None, examples=["300"])


class RebatesDTO(BaseModel):
    military: bool = False
    college: bool = False


class QuoteRequestDTO(BaseModel):
    """Everything the wizard has collected so far."""

    vehicle: VehicleSelectionDTO
    credit_score: FormNumber = Field(
        default=None,
        description="Credit score (300-850). Missing or invalid means 700",
        examples=[720],
    )
    annual_income: FormNumber = Field(default=None, examples=["75,000"])
    monthly_budget: MonthlyBudgetDTO = Field(default_factory=MonthlyBudgetDTO)
    down_payment: FormNumber = Field(default=None, examples=["5000"])
    trade_in_value: FormNumber = Field(default=None, examples=["0"])
    rebates: RebatesDTO = Field(default_factory=RebatesDTO)
    plan_type: Literal["loan", "lease"] = "loan"
    term_months: FormNumber = Field(
        default=None,
        description="24, 36, 48, 60, 72 or 84 (loans only). Anything else means 60",
        examples=[60],
    )
    annual_mileage: FormNumber = Field(
        default=None,
        description="Lease mileage per year, clamped to 10000-20000. Missing means 12000",
        examples=[12000],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "vehicle": {"model": "Camry", "trim": "XSE", "msrp": "35000.00"},
                "credit_score": 720,
                "annual_income": "90000",
                "down_payment": "5000",
                "plan_type": "loan",
                "term_months": 60,
            }
        }
    )


class PlanQuoteDTO(BaseModel):
    """Priced plan; monetary values are decimal strings rounded to cents."""

    plan_type: str = Field(examples=["loan"])
    term_months: int = Field(examples=[60])
    annual_mileage: int | None = Field(default=None, examples=[None])
    apr: str = Field(description="APR as decimal string (0.0872 = 8.72%)", examples=["0.0872"])
    rate_band: str = Field(examples=["excellent"])
    monthly_payment: str = Field(examples=["676.43"])
    total_cost: str = Field(examples=["45585.53"])
    total_interest: str | None = Field(default=None, examples=["7785.53"])
    residual_value: str | None = Field(default=None, examples=[None])
    financed_amount: str = Field(examples=["32800.00"])
    taxes_and_fees: str = Field(examples=["2800.00"])
    effective_price: str = Field(examples=["35000.00"])
    profile: str = Field(examples=["standard"])


class BudgetAssessmentDTO(BaseModel):
    monthly_income: str | None
    monthly_expenses: str
    monthly_payment: str
    remaining: str | None
    has_deficit: bool
    payment_to_income_ratio: str | None
    tips: list[str]


class QuoteResponseDTO(BaseModel):
    vehicle: VehicleSelectionDTO
    quote: PlanQuoteDTO
    budget: BudgetAssessmentDTO


class ScheduleRowDTO(BaseModel):
    month: int = Field(examples=[1])
    payment: str = Field(examples=["676.43"])
    principal: str = Field(examples=["438.08"])
    interest: str = Field(examples=["238.35"])
    balance: str = Field(examples=["32361.92"])


class LoanScheduleResponseDTO(BaseModel):
    """Loan quote with its month-by-month breakdown, rounded to cents."""

    quote: PlanQuoteDTO
    rows: list[ScheduleRowDTO]


class PlanListResponseDTO(BaseModel):
    profile: str
    plans: list[PlanQuoteDTO]


class PricingProfileDTO(BaseModel):
    name: str
    rate_table: str
    fee_scheme: str
    tax_rate: str
    flat_fee: str
    residual_pct: str
    charge_mileage: bool
    min_apr: str = Field(description="Best rate the table offers", examples=["0.0872"])
    max_apr: str = Field(
        description="Worst rate the table charges, long-term surcharge included",
        examples=["0.1800"],
    )
