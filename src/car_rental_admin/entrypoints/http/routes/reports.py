from fastapi import APIRouter, Depends, Query

from car_rental_admin.entrypoints.http.dependencies import (
    get_car_performance_report_use_case,
    get_customer_report_use_case,
    get_revenue_report_use_case,
)
from car_rental_admin.entrypoints.http.dtos.reports import (
    CarPerformanceReportResponseDTO,
    CustomerReportResponseDTO,
    RevenueReportResponseDTO,
)
from car_rental_admin.entrypoints.http.error_responses import ErrorResponse
from car_rental_admin.entrypoints.http.mappers.report_mapper import ReportMapper
from car_rental_admin.use_cases.generate_car_performance_report import (
    GenerateCarPerformanceReport,
)
from car_rental_admin.use_cases.generate_customer_report import GenerateCustomerReport
from car_rental_admin.use_cases.generate_revenue_report import GenerateRevenueReport


router = APIRouter(tags=["Reports"])


@router.get(
    "/reports/revenue",
    response_model=RevenueReportResponseDTO,
    summary="Revenue over the last N days",
    description="""
    Sum of contract totals for active and completed contracts created in the
    last `days` days, with a per-car breakdown ordered by revenue.
    """,
    responses={422: {"model": ErrorResponse, "description": "Invalid window"}},
)
def get_revenue_report(
    days: int = Query(default=30, description="Length of the reporting window in days"),
    use_case: GenerateRevenueReport = Depends(get_revenue_report_use_case),
) -> RevenueReportResponseDTO:
    return ReportMapper.to_revenue_response(use_case.execute(days))


@router.get(
    "/reports/cars",
    response_model=CarPerformanceReportResponseDTO,
    summary="Revenue and utilization per car",
    description="""
    Every car with its contract count, and the rental days and revenue of its
    active and completed contracts. Utilization is rental days over 365, as a
    percentage with one decimal. Highest revenue first.
    """,
)
def get_car_performance_report(
    use_case: GenerateCarPerformanceReport = Depends(get_car_performance_report_use_case),
) -> CarPerformanceReportResponseDTO:
    return ReportMapper.to_car_performance_response(use_case.execute())


@router.get(
    "/reports/customers",
    response_model=CustomerReportResponseDTO,
    summary="Spending per customer",
    description="""
    Every customer with their contract count, and the total and average
    spent over active and completed contracts. Biggest spender first.
    """,
)
def get_customer_report(
    use_case: GenerateCustomerReport = Depends(get_customer_report_use_case),
) -> CustomerReportResponseDTO:
    return ReportMapper.to_customer_response(use_case.execute())
