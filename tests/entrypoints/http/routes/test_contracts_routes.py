"""
Test suite for the /v1/contracts routes.

Most tests wire the real use cases around the in-memory repositories through
dependency_overrides, so a request flows route → mapper → use case → store.
Failure paths that need a broken store use mocks.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from car_rental_admin.adapters.in_memory_car_repository import InMemoryCarRepository
from car_rental_admin.adapters.in_memory_contract_repository import InMemoryContractRepository
from car_rental_admin.adapters.in_memory_customer_repository import InMemoryCustomerRepository
from car_rental_admin.domain.car import Car
from car_rental_admin.domain.customer import Customer
from car_rental_admin.domain.errors import PersistenceError
from car_rental_admin.entrypoints.http.dependencies import (
    get_check_car_availability_use_case,
    get_contract_by_id_use_case,
    get_delete_contract_use_case,
    get_list_contracts_use_case,
    get_submit_contract_use_case,
)
from car_rental_admin.entrypoints.http.exception_handlers import register_exception_handlers
from car_rental_admin.entrypoints.http.routes.contracts import router
from car_rental_admin.use_cases.check_car_availability import CheckCarAvailability
from car_rental_admin.use_cases.delete_contract import DeleteContract
from car_rental_admin.use_cases.get_contract_by_id import GetContractById
from car_rental_admin.use_cases.list_contracts import ListContracts
from car_rental_admin.use_cases.submit_contract import SubmitContract

MISSING_ID = "00000000-0000-4000-8000-000000000000"


@pytest.fixture
def cars() -> InMemoryCarRepository:
    return InMemoryCarRepository(
        [
            Car(
                id="car-1",
                name="Toyota Corolla 2024",
                brand="Toyota",
                model="Corolla",
                year=2024,
                plate_number="A 12345",
                price_per_day=Decimal("1000.00"),
            )
        ]
    )


@pytest.fixture
def customers() -> InMemoryCustomerRepository:
    return InMemoryCustomerRepository(
        [
            Customer(
                id="cust-1",
                first_name="Amina",
                last_name="Benali",
                email="amina@example.com",
                phone="+212600000000",
                nic_or_passport="AB123456",
            )
        ]
    )


@pytest.fixture
def contracts() -> InMemoryContractRepository:
    return InMemoryContractRepository()


@pytest.fixture
def app(
    cars: InMemoryCarRepository,
    customers: InMemoryCustomerRepository,
    contracts: InMemoryContractRepository,
) -> FastAPI:
    """Contracts router backed by in-memory repositories."""
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")

    overrides = test_app.dependency_overrides
    overrides[get_submit_contract_use_case] = lambda: SubmitContract(contracts, cars, customers)
    overrides[get_contract_by_id_use_case] = lambda: GetContractById(contracts)
    overrides[get_list_contracts_use_case] = lambda: ListContracts(contracts)
    overrides[get_delete_contract_use_case] = lambda: DeleteContract(contracts)
    overrides[get_check_car_availability_use_case] = lambda: CheckCarAvailability(contracts)
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


def contract_payload(**overrides: object) -> dict:
    payload = {
        "customer_id": "cust-1",
        "car_id": "car-1",
        "start_date": "2025-01-10",
        "end_date": "2025-01-12",
        "daily_rate": "1000.00",
        "discount": "500.00",
        "tax_rate": "15",
        "card_payment_percent": "2",
        "surcharges": {"sim": "200.00", "delivery": "300.00"},
        "status": "active",
        "payment_mode": "card",
    }
    payload.update(overrides)
    return payload


# ==============================================================================
# POST /v1/contracts/quote
# ==============================================================================


def test_quote_from_dates(client: TestClient) -> None:
    response = client.post(
        "/v1/contracts/quote",
        json={
            "daily_rate": "250.00",
            "start_date": "2025-01-01",
            "end_date": "2025-01-10",
            "discount": "200.00",
            "tax_rate": "15",
            "card_payment_percent": "2",
        },
    )

    assert response.status_code == 200
    assert response.json() == {
        "days": 10,
        "subtotal": "2300.00",
        "card_payment_amount": "52.90",
        "total": "2697.90",
    }


def test_quote_without_days_is_all_zero(client: TestClient) -> None:
    response = client.post("/v1/contracts/quote", json={"daily_rate": "250.00"})

    assert response.status_code == 200
    assert response.json()["total"] == "0"


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"daily_rate": "-5"},
        {"daily_rate": "12.345"},
        {"daily_rate": "100", "surcharges": {"sim": "abc"}},
        {"daily_rate": "100", "days": -1},
        {"daily_rate": "100", "tax_rate": "1000"},
        {"daily_rate": "100", "card_payment_percent": "100.123"},
        {"daily_rate": "12345678901"},
    ],
)
def test_quote_rejects_invalid_payload(client: TestClient, body: dict) -> None:
    response = client.post("/v1/contracts/quote", json=body)

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


# ==============================================================================
# POST /v1/contracts
# ==============================================================================


def test_create_contract(client: TestClient) -> None:
    response = client.post("/v1/contracts", json=contract_payload())

    assert response.status_code == 201
    data = response.json()
    assert data["warnings"] == []
    contract = data["contract"]
    assert contract["contract_number"].startswith("CTR-")
    assert contract["days"] == 3
    assert contract["subtotal"] == "2500.00"
    assert contract["card_payment_amount"] == "57.50"
    assert contract["total"] == "3432.50"
    assert contract["created_at"] is not None


def test_create_contract_ignores_client_totals(client: TestClient) -> None:
    response = client.post("/v1/contracts", json=contract_payload(total="1.00", days=99))

    assert response.status_code == 201
    assert response.json()["contract"]["total"] == "3432.50"


def test_create_overlapping_contract_returns_409(client: TestClient) -> None:
    client.post("/v1/contracts", json=contract_payload(start_date="2025-01-10", end_date="2025-01-15"))

    response = client.post(
        "/v1/contracts", json=contract_payload(start_date="2025-01-15", end_date="2025-01-20")
    )

    assert response.status_code == 409
    data = response.json()
    assert data["code"] == "CONFLICT"
    assert data["conflicts"] == [{"start": "2025-01-10", "end": "2025-01-15"}]


def test_create_back_to_back_contract_is_accepted(client: TestClient) -> None:
    client.post("/v1/contracts", json=contract_payload(start_date="2025-01-10", end_date="2025-01-15"))

    response = client.post(
        "/v1/contracts", json=contract_payload(start_date="2025-01-16", end_date="2025-01-20")
    )

    assert response.status_code == 201


def test_create_incomplete_contract_lists_missing_fields(client: TestClient) -> None:
    response = client.post(
        "/v1/contracts", json={"daily_rate": "100", "start_date": "2025-01-10"}
    )

    assert response.status_code == 422
    fields = {e["field"] for e in response.json()["errors"]}
    assert fields == {"customer_id", "car_id", "end_date", "payment_mode"}


def test_create_with_reversed_dates(client: TestClient) -> None:
    response = client.post(
        "/v1/contracts", json=contract_payload(start_date="2025-01-12", end_date="2025-01-10")
    )

    assert response.status_code == 422
    assert response.json()["errors"][0]["code"] == "INVALID_RANGE"


def test_create_with_unknown_car(client: TestClient) -> None:
    response = client.post("/v1/contracts", json=contract_payload(car_id="car-404"))

    assert response.status_code == 422
    assert response.json()["errors"][0]["code"] == "UNKNOWN_CAR"


def test_create_with_unknown_customer(client: TestClient) -> None:
    response = client.post("/v1/contracts", json=contract_payload(customer_id="cust-404"))

    assert response.status_code == 422
    assert response.json()["errors"][0]["code"] == "UNKNOWN_CUSTOMER"


def test_create_with_tax_rate_beyond_column_precision(client: TestClient) -> None:
    response = client.post("/v1/contracts", json=contract_payload(tax_rate="1000"))

    assert response.status_code == 422
    data = response.json()
    assert data["code"] == "VALIDATION_ERROR"
    assert data["errors"][0]["field"] == "tax_rate"


def test_create_with_total_beyond_storage(client: TestClient) -> None:
    """Each input fits its column, but rate x days does not fit a stored amount."""
    response = client.post(
        "/v1/contracts", json=contract_payload(daily_rate="9999999999.00", discount="0")
    )

    assert response.status_code == 422
    assert ("total", "OUT_OF_RANGE") in {
        (e["field"], e["code"]) for e in response.json()["errors"]
    }


def test_create_keeps_pickup_and_delivery(client: TestClient) -> None:
    response = client.post(
        "/v1/contracts",
        json=contract_payload(
            pickup_date="2025-01-10",
            pickup_time="09:30:00",
            delivery_date="2025-01-12",
            delivery_time="18:00:00",
        ),
    )

    assert response.status_code == 201
    contract = response.json()["contract"]
    assert contract["pickup_date"] == "2025-01-10"
    assert contract["pickup_time"] == "09:30:00"
    assert contract["delivery_time"] == "18:00:00"


def test_create_when_store_fails(app: FastAPI, client: TestClient) -> None:
    use_case = Mock()
    use_case.execute.side_effect = PersistenceError("connection refused", operation="create")
    app.dependency_overrides[get_submit_contract_use_case] = lambda: use_case

    response = client.post("/v1/contracts", json=contract_payload())

    assert response.status_code == 503
    assert response.json() == {"detail": "connection refused", "code": "PERSISTENCE_ERROR"}


# ==============================================================================
# PUT /v1/contracts/{contract_id}
# ==============================================================================


def test_update_contract_keeps_identity_and_recomputes(client: TestClient) -> None:
    created = client.post("/v1/contracts", json=contract_payload()).json()["contract"]

    response = client.put(
        f"/v1/contracts/{created['id']}",
        json=contract_payload(end_date="2025-01-11", discount="0", status="completed"),
    )

    assert response.status_code == 200
    updated = response.json()["contract"]
    assert updated["id"] == created["id"]
    assert updated["contract_number"] == created["contract_number"]
    assert updated["status"] == "completed"
    assert updated["days"] == 2
    assert updated["subtotal"] == "2000.00"


def test_update_does_not_recheck_availability(client: TestClient) -> None:
    first = client.post(
        "/v1/contracts", json=contract_payload(start_date="2025-01-10", end_date="2025-01-12")
    ).json()["contract"]
    client.post("/v1/contracts", json=contract_payload(start_date="2025-01-20", end_date="2025-01-22"))

    response = client.put(
        f"/v1/contracts/{first['id']}",
        json=contract_payload(start_date="2025-01-10", end_date="2025-01-21"),
    )

    assert response.status_code == 200


def test_update_without_car_is_rejected(client: TestClient) -> None:
    """PUT replaces every field: leaving out car_id does not keep the old car."""
    created = client.post("/v1/contracts", json=contract_payload()).json()["contract"]
    payload = contract_payload()
    del payload["car_id"]

    response = client.put(f"/v1/contracts/{created['id']}", json=payload)

    assert response.status_code == 422
    assert response.json()["errors"] == [
        {"field": "car_id", "message": "Select a car", "code": "REQUIRED"}
    ]
    assert client.get(f"/v1/contracts/{created['id']}").json()["car_id"] == "car-1"


def test_update_missing_contract(client: TestClient) -> None:
    response = client.put(f"/v1/contracts/{MISSING_ID}", json=contract_payload())

    assert response.status_code == 404


# ==============================================================================
# GET / DELETE
# ==============================================================================


def test_get_contract(client: TestClient) -> None:
    created = client.post("/v1/contracts", json=contract_payload()).json()["contract"]

    response = client.get(f"/v1/contracts/{created['id']}")

    assert response.status_code == 200
    assert response.json()["contract_number"] == created["contract_number"]


def test_get_contract_invalid_id(client: TestClient) -> None:
    response = client.get("/v1/contracts/not-a-uuid")

    assert response.status_code == 422
    assert response.json()["errors"][0]["code"] == "INVALID_UUID"


def test_get_contract_not_found(client: TestClient) -> None:
    response = client.get(f"/v1/contracts/{MISSING_ID}")

    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


def test_list_contracts_newest_first(client: TestClient) -> None:
    client.post("/v1/contracts", json=contract_payload(start_date="2025-01-01", end_date="2025-01-02"))
    client.post("/v1/contracts", json=contract_payload(start_date="2025-02-01", end_date="2025-02-02"))

    response = client.get("/v1/contracts?limit=1")

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 2
    assert data["limit"] == 1
    assert [c["start_date"] for c in data["contracts"]] == ["2025-02-01"]


def test_delete_contract(client: TestClient) -> None:
    created = client.post("/v1/contracts", json=contract_payload()).json()["contract"]

    response = client.delete(f"/v1/contracts/{created['id']}")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get(f"/v1/contracts/{created['id']}").status_code == 404


def test_delete_missing_contract(client: TestClient) -> None:
    assert client.delete(f"/v1/contracts/{MISSING_ID}").status_code == 404


# ==============================================================================
# POST /v1/contracts/availability
# ==============================================================================


def test_availability_reports_conflicts(client: TestClient) -> None:
    client.post("/v1/contracts", json=contract_payload(start_date="2025-01-10", end_date="2025-01-15"))

    response = client.post(
        "/v1/contracts/availability",
        json={"car_id": "car-1", "start_date": "2025-01-15", "end_date": "2025-01-18"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "available": False,
        "conflicts": [{"start": "2025-01-10", "end": "2025-01-15"}],
    }


def test_availability_excludes_the_edited_contract(client: TestClient) -> None:
    created = client.post(
        "/v1/contracts", json=contract_payload(start_date="2025-01-10", end_date="2025-01-15")
    ).json()["contract"]

    response = client.post(
        "/v1/contracts/availability",
        json={
            "car_id": "car-1",
            "start_date": "2025-01-12",
            "end_date": "2025-01-18",
            "exclude_contract_id": created["id"],
        },
    )

    assert response.json() == {"available": True, "conflicts": []}


def test_availability_rejects_reversed_period(client: TestClient) -> None:
    response = client.post(
        "/v1/contracts/availability",
        json={"car_id": "car-1", "start_date": "2025-01-18", "end_date": "2025-01-15"},
    )

    assert response.status_code == 422
    assert response.json()["errors"][0]["code"] == "INVALID_RANGE"


def test_availability_store_failure_is_not_hidden(app: FastAPI, client: TestClient) -> None:
    use_case = Mock()
    use_case.execute.side_effect = PersistenceError("timeout", operation="booked_periods")
    app.dependency_overrides[get_check_car_availability_use_case] = lambda: use_case

    response = client.post(
        "/v1/contracts/availability",
        json={"car_id": "car-1", "start_date": "2025-01-15", "end_date": "2025-01-18"},
    )

    assert response.status_code == 503
