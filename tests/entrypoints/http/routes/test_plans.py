"""Test suite for the plan-comparison routes and the pricing profile listing."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from auto_budget.domain.profiles import COMPARISON, STANDARD
from auto_budget.entrypoints.http.dependencies import get_enumerate_plans_use_case
from auto_budget.entrypoints.http.exception_handlers import register_exception_handlers
from auto_budget.entrypoints.http.routes.plans import router
from auto_budget.use_cases.enumerate_plans import EnumeratePlans


@pytest.fixture
def app() -> FastAPI:
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    test_app.dependency_overrides[get_enumerate_plans_use_case] = lambda: EnumeratePlans(COMPARISON)
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


PAYLOAD = {
    "vehicle": {"model": "Camry", "msrp": "35000"},
    "credit_score": 720,
    "down_payment": "5000",
}


# ==============================================================================
# Financing
# ==============================================================================


def test_financing_plans(client: TestClient) -> None:
    response = client.post("/v1/plans/financing", json=PAYLOAD)

    assert response.status_code == 200
    data = response.json()
    assert data["profile"] == "comparison"
    assert [plan["term_months"] for plan in data["plans"]] == [24, 36, 48, 60, 72]
    assert all(plan["plan_type"] == "loan" for plan in data["plans"])
    assert all(plan["taxes_and_fees"] == "3475.00" for plan in data["plans"])


def test_financing_ignores_requested_plan_type(client: TestClient) -> None:
    response = client.post(
        "/v1/plans/financing",
        json={**PAYLOAD, "plan_type": "lease", "term_months": 36},
    )

    assert len(response.json()["plans"]) == 5


def test_profile_name_comes_from_use_case(app: FastAPI, client: TestClient) -> None:
    mock_use_case = Mock()
    mock_use_case.profile = STANDARD
    mock_use_case.financing.return_value = []
    app.dependency_overrides[get_enumerate_plans_use_case] = lambda: mock_use_case

    response = client.post("/v1/plans/financing", json=PAYLOAD)

    assert response.json() == {"profile": "standard", "plans": []}
    mock_use_case.financing.assert_called_once()


# ==============================================================================
# Leasing
# ==============================================================================


def test_leasing_plans(client: TestClient) -> None:
    response = client.post("/v1/plans/leasing", json=PAYLOAD)

    assert response.status_code == 200
    plans = response.json()["plans"]
    assert len(plans) == 12
    assert [(plan["term_months"], plan["annual_mileage"]) for plan in plans[:3]] == [
        (24, 10000),
        (24, 12000),
        (24, 15000),
    ]
    assert all(plan["residual_value"] == "19250.00" for plan in plans)
    assert all(plan["taxes_and_fees"] == "0.00" for plan in plans)


def test_leasing_validation_error(client: TestClient) -> None:
    response = client.post("/v1/plans/leasing", json={"vehicle": {"model": "Camry"}})

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "vehicle.msrp"


# ==============================================================================
# Pricing Profiles
# ==============================================================================


def test_pricing_profiles(client: TestClient) -> None:
    response = client.get("/v1/pricing-profiles")

    assert response.status_code == 200
    profiles = {profile["name"]: profile for profile in response.json()}
    assert set(profiles) == {"standard", "comparison", "simple"}
    assert profiles["standard"]["rate_table"] == "tiered_8_band"
    assert profiles["standard"]["tax_rate"] == "0.08"
    assert profiles["comparison"]["charge_mileage"] is True
    assert profiles["standard"]["max_apr"] == "0.1800"
    assert profiles["comparison"]["max_apr"] == "0.1649"
    assert profiles["simple"]["min_apr"] == "0.0299"
