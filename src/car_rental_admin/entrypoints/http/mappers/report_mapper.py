from __future__ import annotations

from car_rental_admin.entrypoints.http.dtos.reports import (
    CarPerformanceDTO,
    CarPerformanceReportResponseDTO,
    CarRevenueDTO,
    CustomerReportResponseDTO,
    CustomerSpendingDTO,
    RevenueReportResponseDTO,
)
from car_rental_admin.use_cases.generate_car_performance_report import CarPerformance
from car_rental_admin.use_cases.generate_customer_report import CustomerSpending
from car_rental_admin.use_cases.generate_revenue_report import RevenueReport


class ReportMapper:
    @staticmethod
    def to_revenue_response(report: RevenueReport) -> RevenueReportResponseDTO:
        return RevenueReportResponseDTO(
            since=report.since,
            contract_count=report.contract_count,
            rental_days=report.rental_days,
            total_revenue=str(report.total_revenue),
            by_car=[
                CarRevenueDTO(
                    car_id=row.car_id,
                    contract_count=row.contract_count,
                    rental_days=row.rental_days,
                    revenue=str(row.revenue),
                )
                for row in report.by_car
            ],
        )

    @staticmethod
    def to_car_performance_response(
        rows: list[CarPerformance],
    ) -> CarPerformanceReportResponseDTO:
        return CarPerformanceReportResponseDTO(
            cars=[
                CarPerformanceDTO(
                    car_id=row.car_id,
                    name=row.name,
                    plate_number=row.plate_number,
                    status=row.status,
                    contract_count=row.contract_count,
                    rental_days=row.rental_days,
                    revenue=str(row.revenue),
                    utilization_percent=str(row.utilization_percent),
                )
                for row in rows
            ]
        )

    @staticmethod
    def to_customer_response(rows: list[CustomerSpending]) -> CustomerReportResponseDTO:
        return CustomerReportResponseDTO(
            customers=[
                CustomerSpendingDTO(
                    customer_id=row.customer_id,
                    first_name=row.first_name,
                    last_name=row.last_name,
                    email=row.email,
                    contract_count=row.contract_count,
                    total_spent=str(row.total_spent),
                    average_spent=str(row.average_spent),
                )
                for row in rows
            ]
        )
