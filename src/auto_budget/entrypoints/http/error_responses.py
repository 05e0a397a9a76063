"""REST API error response models.

Documents the error body every handler in `exception_handlers` produces.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error detail: which field failed and why."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "vehicle.msrp",
                "message": "String should match pattern '^\\d+(\\.\\d{1,2})?$'",
                "code": "string_pattern_mismatch",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "VehicleModel with identifier 'Supra' not found",
                "code": "NOT_FOUND"
            }

        Validation error with fields:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "price_min",
                        "message": "Must be less than or equal to price_max",
                        "code": "INVALID_RANGE"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "VehicleModel with identifier 'Supra' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "price_min",
                            "message": "Must be less than or equal to price_max",
                            "code": "INVALID_RANGE",
                        },
                    ],
                },
            ]
        }
    )
