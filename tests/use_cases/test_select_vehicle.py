"""Test suite for SelectVehicle use case."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

import pytest

from auto_budget.domain.errors import NotFoundError
from auto_budget.domain.inputs import VehicleSelection
from auto_budget.domain.vehicle import Trim, VehicleModel
from auto_budget.ports.vehicle_catalog import VehicleCatalog
from auto_budget.use_cases.select_vehicle import SelectVehicle, SelectVehicleRequest


@pytest.fixture()
def mock_catalog() -> Mock:
    """Mock VehicleCatalog."""
    return Mock(spec=VehicleCatalog)


@pytest.fixture()
def rav4() -> VehicleModel:
    return VehicleModel(
        name="RAV4",
        base_price=Decimal("28850"),
        category="suv",
        trims=(Trim("LE", Decimal("28850")), Trim("XLE", Decimal("30560"))),
    )


# ==============================================================================
# Happy Path Tests
# ==============================================================================


def test_model_only_seeds_base_price(mock_catalog: Mock, rav4: VehicleModel) -> None:
    mock_catalog.get_model.return_value = rav4
    use_case = SelectVehicle(vehicle_catalog=mock_catalog)

    result = use_case.execute(SelectVehicleRequest(model="RAV4", color="Blueprint"))

    assert result == VehicleSelection(model="RAV4", msrp=Decimal("28850"), color="Blueprint")
    mock_catalog.get_model.assert_called_once_with("RAV4")
    mock_catalog.get_trim.assert_not_called()


def test_trim_overrides_base_price(mock_catalog: Mock, rav4: VehicleModel) -> None:
    mock_catalog.get_model.return_value = rav4
    mock_catalog.get_trim.return_value = rav4.trims[1]
    use_case = SelectVehicle(vehicle_catalog=mock_catalog)

    result = use_case.execute(SelectVehicleRequest(model="RAV4", trim="XLE", year="2025"))

    assert result.trim == "XLE"
    assert result.msrp == Decimal("30560")
    assert result.year == "2025"
    mock_catalog.get_trim.assert_called_once_with("RAV4", "XLE")


# ==============================================================================
# Not Found Error Tests
# ==============================================================================


def test_unknown_model_raises_not_found(mock_catalog: Mock) -> None:
    mock_catalog.get_model.return_value = None
    use_case = SelectVehicle(vehicle_catalog=mock_catalog)

    with pytest.raises(NotFoundError) as exc_info:
        use_case.execute(SelectVehicleRequest(model="Supra"))

    assert exc_info.value.context["resource"] == "VehicleModel"
    assert exc_info.value.context["identifier"] == "Supra"


def test_unknown_trim_raises_not_found(mock_catalog: Mock, rav4: VehicleModel) -> None:
    mock_catalog.get_model.return_value = rav4
    mock_catalog.get_trim.return_value = None
    use_case = SelectVehicle(vehicle_catalog=mock_catalog)

    with pytest.raises(NotFoundError) as exc_info:
        use_case.execute(SelectVehicleRequest(model="RAV4", trim="TRD Pro"))

    assert exc_info.value.context == {
        "resource": "Trim",
        "identifier": "TRD Pro",
        "model": "RAV4",
    }
