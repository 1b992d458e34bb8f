"""
Unit tests for FastAPI application setup and configuration.

Verifies:
- build_app() creates a properly configured FastAPI instance
- Application metadata (title, version, docs URLs)
- Router registration (health at the root, everything else under /v1)
- OpenAPI schema generation
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from car_rental_admin.entrypoints.http.app import build_app


@pytest.fixture(scope="module")
def openapi_schema() -> dict:
    """Schema built without triggering any route dependency."""
    return build_app().openapi()


# ==============================================================================
# Application Creation
# ==============================================================================


def test_build_app_returns_fastapi_instance() -> None:
    assert isinstance(build_app(), FastAPI)


def test_build_app_creates_new_instance_each_call() -> None:
    """build_app() creates a new app instance for each call (not cached)."""
    assert build_app() is not build_app()


# ==============================================================================
# Application Metadata
# ==============================================================================


def test_app_metadata() -> None:
    app = build_app()

    assert app.title == "Car Rental Admin API"
    assert app.version == "0.1.0"
    assert "car rental agency" in app.description
    assert app.license_info == {"name": "Proprietary"}


def test_app_documentation_urls() -> None:
    app = build_app()

    assert app.docs_url == "/docs"
    assert app.redoc_url == "/redoc"
    assert app.openapi_url == "/openapi.json"


def test_app_documentation_endpoints_are_accessible() -> None:
    client = TestClient(build_app())

    assert client.get("/docs").status_code == 200
    assert client.get("/redoc").status_code == 200

    response = client.get("/openapi.json")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"


# ==============================================================================
# Router Registration
# ==============================================================================


def test_app_includes_health_router() -> None:
    client = TestClient(build_app())

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.parametrize(
    ("path", "method"),
    [
        ("/v1/cars", "get"),
        ("/v1/cars/{car_id}/bookings", "get"),
        ("/v1/contracts/quote", "post"),
        ("/v1/contracts/availability", "post"),
        ("/v1/contracts", "post"),
        ("/v1/contracts", "get"),
        ("/v1/contracts/{contract_id}", "get"),
        ("/v1/contracts/{contract_id}", "put"),
        ("/v1/contracts/{contract_id}", "delete"),
        ("/v1/reports/revenue", "get"),
        ("/v1/reports/cars", "get"),
        ("/v1/reports/customers", "get"),
        ("/v1/cars", "post"),
        ("/v1/cars/{car_id}", "get"),
        ("/v1/cars/{car_id}", "put"),
        ("/v1/cars/{car_id}", "delete"),
        ("/v1/customers", "get"),
        ("/v1/customers", "post"),
        ("/v1/customers/{customer_id}", "get"),
        ("/v1/customers/{customer_id}", "put"),
        ("/v1/customers/{customer_id}", "delete"),
    ],
)
def test_app_registers_versioned_routes(openapi_schema: dict, path: str, method: str) -> None:
    assert method in openapi_schema["paths"][path]


def test_business_routes_are_not_unversioned(openapi_schema: dict) -> None:
    assert "/cars" not in openapi_schema["paths"]
    assert "/contracts" not in openapi_schema["paths"]
    assert "/customers" not in openapi_schema["paths"]


def test_openapi_documents_cars_search(openapi_schema: dict) -> None:
    operation = openapi_schema["paths"]["/v1/cars"]["get"]

    assert "Cars" in operation["tags"]
    assert operation["summary"] == "Search the fleet"
    param_names = {p["name"] for p in operation["parameters"]}
    assert {"q", "status", "offset", "limit"} <= param_names


def test_openapi_documents_contract_creation_status(openapi_schema: dict) -> None:
    responses = openapi_schema["paths"]["/v1/contracts"]["post"]["responses"]

    assert "201" in responses
    assert "409" in responses
