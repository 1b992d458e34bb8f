import logging
import os

from fastapi import FastAPI

from car_rental_admin.entrypoints.http.exception_handlers import register_exception_handlers
from car_rental_admin.entrypoints.http.routes.cars import router as cars_router
from car_rental_admin.entrypoints.http.routes.contracts import router as contracts_router
from car_rental_admin.entrypoints.http.routes.customers import router as customers_router
from car_rental_admin.entrypoints.http.routes.health import router as health_router
from car_rental_admin.entrypoints.http.routes.reports import router as reports_router


def configure_logging() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_app() -> FastAPI:
    app = FastAPI(
        title="Car Rental Admin API",
        description="""
        Back-office API for a car rental agency.

        ## Features
        - Manage the fleet and customers
        - Search the fleet and inspect a car's booked periods
        - Price contracts (rate, discount, tax, surcharges, card fee)
        - Check availability and create, edit, list and delete contracts
        - Revenue, car performance and customer spending reports

        ## Authentication
        Currently no authentication required (development phase).

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        license_info={
            "name": "Proprietary",
        },
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(cars_router, prefix="/v1")
    app.include_router(contracts_router, prefix="/v1")
    app.include_router(customers_router, prefix="/v1")
    app.include_router(reports_router, prefix="/v1")

    return app


configure_logging()
app = build_app()
