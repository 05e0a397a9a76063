from pydantic import BaseModel, ConfigDict, Field

MONEY_PATTERN = r"^\d{1,9}(\.\d{1,2})?$"


class TrimDTO(BaseModel):
    name: str
    price: str


class VehicleModelDTO(BaseModel):
    name: str
    base_price: str
    category: str
    trims: list[TrimDTO]


class VehicleSearchQueryDTO(BaseModel):
    """Query parameters for browsing the vehicle line-up."""

    category: str | None = Field(
        default=None,
        description="Filter by category (case-insensitive exact match)",
        examples=["suv"],
    )
    price_min: str | None = Field(
        default=None,
        description="Minimum trim price (inclusive, decimal as string)",
        examples=["25000.00"],
        pattern=MONEY_PATTERN,
    )
    price_max: str | None = Field(
        default=None,
        description="Maximum trim price (inclusive, decimal as string)",
        examples=["40000.00"],
        pattern=MONEY_PATTERN,
    )


class VehicleListResponseDTO(BaseModel):
    models: list[VehicleModelDTO]
    total: int


class SelectVehicleRequestDTO(BaseModel):
    """Model and optional trim picked on the vehicle screen."""

    model: str = Field(description="Model name as listed in the catalog", examples=["RAV4"])
    trim: str = Field(default="", description="Trim name; empty for the base price", examples=["XLE"])
    year: str = Field(default="2026", examples=["2026"])
    color: str = Field(default="", examples=["Blueprint"])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"model": "RAV4", "trim": "XLE", "year": "2026", "color": "Blueprint"}
        }
    )


class VehicleSelectionDTO(BaseModel):
    model: str = Field(examples=["RAV4"])
    trim: str = Field(default="", examples=["XLE"])
    msrp: str = Field(
        description="Vehicle price as decimal string",
        examples=["30560.00"],
        pattern=MONEY_PATTERN,
    )
    year: str = Field(default="2026", examples=["2026"])
    color: str = Field(default="", examples=["Blueprint"])
