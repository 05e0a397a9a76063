"""Tests for VehicleMapper."""

from __future__ import annotations

from decimal import Decimal

from auto_budget.domain.inputs import VehicleSelection
from auto_budget.domain.vehicle import Trim, VehicleModel
from auto_budget.entrypoints.http.dtos.vehicles import (
    SelectVehicleRequestDTO,
    VehicleSearchQueryDTO,
)
from auto_budget.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from auto_budget.use_cases.search_vehicles import SearchVehiclesResponse
from auto_budget.use_cases.select_vehicle import SelectVehicleRequest


# ==============================================================================
# DTO → Domain
# ==============================================================================


def test_filters_convert_prices_to_decimal() -> None:
    dto = VehicleSearchQueryDTO(category="suv", price_min="25000.00", price_max="40000.5")

    filters = VehicleMapper.to_domain_filters(dto)

    assert filters.category == "suv"
    assert filters.price_min == Decimal("25000.00")
    assert isinstance(filters.price_max, Decimal)
    assert filters.price_max == Decimal("40000.5")


def test_empty_query_gives_empty_filters() -> None:
    request = VehicleMapper.to_domain_request(VehicleSearchQueryDTO())

    assert request.filters.category is None
    assert request.filters.price_min is None
    assert request.filters.price_max is None


def test_select_request() -> None:
    dto = SelectVehicleRequestDTO(model="RAV4", trim="XLE", color="Blueprint")

    assert VehicleMapper.to_select_request(dto) == SelectVehicleRequest(
        model="RAV4", trim="XLE", year="2026", color="Blueprint"
    )


# ==============================================================================
# Domain → DTO
# ==============================================================================


def test_model_response_stringifies_prices() -> None:
    model = VehicleModel(
        name="Camry",
        base_price=Decimal("28400"),
        category="sedan",
        trims=(Trim("LE", Decimal("28400")), Trim("XSE", Decimal("35000.00"))),
    )

    dto = VehicleMapper.to_model_response(model)

    assert dto.base_price == "28400"
    assert [(trim.name, trim.price) for trim in dto.trims] == [("LE", "28400"), ("XSE", "35000.00")]


def test_list_response_counts_models() -> None:
    models = [
        VehicleModel(name="Tacoma", base_price=Decimal("31590"), category="truck"),
        VehicleModel(name="Tundra", base_price=Decimal("40090"), category="truck"),
    ]

    dto = VehicleMapper.to_list_response(SearchVehiclesResponse(models=models))

    assert dto.total == 2
    assert [model.name for model in dto.models] == ["Tacoma", "Tundra"]


def test_selection_response() -> None:
    selection = VehicleSelection(model="RAV4", msrp=Decimal("30560"), trim="XLE")

    dto = VehicleMapper.to_selection_response(selection)

    assert dto.model_dump() == {
        "model": "RAV4",
        "trim": "XLE",
        "msrp": "30560",
        "year": "2026",
        "color": "",
    }
