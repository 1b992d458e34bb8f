"""
Dependency injection for FastAPI routes.

Key principle: Database sessions should be per-request, not cached.
Only stateless singletons should use lru_cache.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from car_rental_admin.adapters.postgres_car_repository import PostgresCarRepository
from car_rental_admin.adapters.postgres_contract_repository import PostgresContractRepository
from car_rental_admin.adapters.postgres_customer_repository import PostgresCustomerRepository
from car_rental_admin.infra.db.session import get_session
from car_rental_admin.use_cases.calculate_contract_totals import CalculateContractTotals
from car_rental_admin.use_cases.check_car_availability import CheckCarAvailability
from car_rental_admin.use_cases.delete_contract import DeleteContract
from car_rental_admin.use_cases.generate_car_performance_report import (
    GenerateCarPerformanceReport,
)
from car_rental_admin.use_cases.generate_customer_report import GenerateCustomerReport
from car_rental_admin.use_cases.generate_revenue_report import GenerateRevenueReport
from car_rental_admin.use_cases.get_car_booked_periods import GetCarBookedPeriods
from car_rental_admin.use_cases.get_contract_by_id import GetContractById
from car_rental_admin.use_cases.list_contracts import ListContracts
from car_rental_admin.use_cases.manage_cars import CreateCar, DeleteCar, GetCarById, UpdateCar
from car_rental_admin.use_cases.manage_customers import (
    CreateCustomer,
    DeleteCustomer,
    GetCustomerById,
    SearchCustomers,
    UpdateCustomer,
)
from car_rental_admin.use_cases.search_car_catalog import SearchCarCatalog
from car_rental_admin.use_cases.submit_contract import SubmitContract


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    FastAPI will:
    1. Call this function when a request starts
    2. Inject the session into the route
    3. Commit/rollback and close the session when the request ends

    The underlying get_session() is a context manager that handles:
    - Session creation
    - Auto-commit on success
    - Auto-rollback on exception
    - Session cleanup

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_search_catalog_use_case(db: Session = Depends(get_db)) -> SearchCarCatalog:
    """
    Factory function that returns a configured SearchCarCatalog use case.

    This function is called per-request, ensuring each request gets:
    - Fresh repository instance
    - Fresh use case instance
    - Isolated database session
    """
    return SearchCarCatalog(car_repository=PostgresCarRepository(session=db))


@lru_cache
def get_calculate_contract_totals_use_case() -> CalculateContractTotals:
    """The calculator holds no state, so one instance serves every request."""
    return CalculateContractTotals()


def get_check_car_availability_use_case(
    db: Session = Depends(get_db),
) -> CheckCarAvailability:
    return CheckCarAvailability(contract_repository=PostgresContractRepository(session=db))


def get_car_booked_periods_use_case(db: Session = Depends(get_db)) -> GetCarBookedPeriods:
    return GetCarBookedPeriods(
        car_repository=PostgresCarRepository(session=db),
        contract_repository=PostgresContractRepository(session=db),
    )


def get_submit_contract_use_case(db: Session = Depends(get_db)) -> SubmitContract:
    """All repositories share the request session so a submit is one transaction."""
    return SubmitContract(
        contract_repository=PostgresContractRepository(session=db),
        car_repository=PostgresCarRepository(session=db),
        customer_repository=PostgresCustomerRepository(session=db),
    )


def get_contract_by_id_use_case(db: Session = Depends(get_db)) -> GetContractById:
    return GetContractById(contract_repository=PostgresContractRepository(session=db))


def get_list_contracts_use_case(db: Session = Depends(get_db)) -> ListContracts:
    return ListContracts(contract_repository=PostgresContractRepository(session=db))


def get_delete_contract_use_case(db: Session = Depends(get_db)) -> DeleteContract:
    return DeleteContract(contract_repository=PostgresContractRepository(session=db))


def get_revenue_report_use_case(db: Session = Depends(get_db)) -> GenerateRevenueReport:
    return GenerateRevenueReport(contract_repository=PostgresContractRepository(session=db))


def get_car_performance_report_use_case(
    db: Session = Depends(get_db),
) -> GenerateCarPerformanceReport:
    return GenerateCarPerformanceReport(
        car_repository=PostgresCarRepository(session=db),
        contract_repository=PostgresContractRepository(session=db),
    )


def get_customer_report_use_case(db: Session = Depends(get_db)) -> GenerateCustomerReport:
    return GenerateCustomerReport(
        customer_repository=PostgresCustomerRepository(session=db),
        contract_repository=PostgresContractRepository(session=db),
    )


# ==============================================================================
# Fleet and customer maintenance
# ==============================================================================


def get_car_by_id_use_case(db: Session = Depends(get_db)) -> GetCarById:
    return GetCarById(car_repository=PostgresCarRepository(session=db))


def get_create_car_use_case(db: Session = Depends(get_db)) -> CreateCar:
    return CreateCar(car_repository=PostgresCarRepository(session=db))


def get_update_car_use_case(db: Session = Depends(get_db)) -> UpdateCar:
    return UpdateCar(car_repository=PostgresCarRepository(session=db))


def get_delete_car_use_case(db: Session = Depends(get_db)) -> DeleteCar:
    return DeleteCar(
        car_repository=PostgresCarRepository(session=db),
        contract_repository=PostgresContractRepository(session=db),
    )


def get_search_customers_use_case(db: Session = Depends(get_db)) -> SearchCustomers:
    return SearchCustomers(customer_repository=PostgresCustomerRepository(session=db))


def get_customer_by_id_use_case(db: Session = Depends(get_db)) -> GetCustomerById:
    return GetCustomerById(customer_repository=PostgresCustomerRepository(session=db))


def get_create_customer_use_case(db: Session = Depends(get_db)) -> CreateCustomer:
    return CreateCustomer(customer_repository=PostgresCustomerRepository(session=db))


def get_update_customer_use_case(db: Session = Depends(get_db)) -> UpdateCustomer:
    return UpdateCustomer(customer_repository=PostgresCustomerRepository(session=db))


def get_delete_customer_use_case(db: Session = Depends(get_db)) -> DeleteCustomer:
    return DeleteCustomer(
        customer_repository=PostgresCustomerRepository(session=db),
        contract_repository=PostgresContractRepository(session=db),
    )
