"""Tests for domain error classes."""

from auto_budget.domain.amortization import InvalidFinancingInput
from auto_budget.domain.errors import (
    DomainError,
    InternalError,
    NotFoundError,
    ValidationError,
)


class TestDomainError:
    def test_stores_message_and_context(self) -> None:
        error = DomainError("Pricing failed", profile="standard", term_months=60)

        assert error.message == "Pricing failed"
        assert error.error_code == "DOMAIN_ERROR"
        assert error.context == {"profile": "standard", "term_months": 60}
        assert str(error) == "Pricing failed"

    def test_to_dict_flattens_context(self) -> None:
        error = DomainError("Pricing failed", profile="standard")

        assert error.to_dict() == {
            "message": "Pricing failed",
            "code": "DOMAIN_ERROR",
            "profile": "standard",
        }


class TestValidationError:
    def test_default_message(self) -> None:
        error = ValidationError()

        assert error.message == "Validation error"
        assert error.errors is None
        assert error.error_code == "VALIDATION_ERROR"

    def test_field_errors_use_failed_message(self) -> None:
        errors = [
            {"field": "price_min", "message": "Must be <= price_max", "code": "INVALID_RANGE"},
        ]

        error = ValidationError(errors=errors)

        assert error.message == "Validation failed"
        assert error.to_dict() == {
            "message": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }

    def test_to_dict_without_field_errors(self) -> None:
        assert ValidationError("Bad term").to_dict() == {
            "message": "Bad term",
            "code": "VALIDATION_ERROR",
        }

    def test_invalid_financing_input_is_a_validation_error(self) -> None:
        error = InvalidFinancingInput("term_months must be > 0", term_months=0)

        assert isinstance(error, ValidationError)
        assert error.to_dict() == {
            "message": "term_months must be > 0",
            "code": "VALIDATION_ERROR",
            "term_months": 0,
        }


class TestNotFoundError:
    def test_message_with_identifier(self) -> None:
        error = NotFoundError("VehicleModel", "Supra")

        assert error.message == "VehicleModel with identifier 'Supra' not found"
        assert error.to_dict() == {
            "message": "VehicleModel with identifier 'Supra' not found",
            "code": "NOT_FOUND",
            "resource": "VehicleModel",
            "identifier": "Supra",
        }

    def test_message_without_identifier(self) -> None:
        error = NotFoundError("Trim")

        assert error.message == "Trim not found"
        assert error.context["identifier"] is None


class TestInternalError:
    def test_error_code(self) -> None:
        error = InternalError("Unexpected condition")

        assert error.error_code == "INTERNAL_ERROR"
