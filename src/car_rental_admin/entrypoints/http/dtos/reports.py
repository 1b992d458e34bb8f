from datetime import datetime

from pydantic import BaseModel

from car_rental_admin.domain.car import CarStatus


class CarRevenueDTO(BaseModel):
    car_id: str
    contract_count: int
    rental_days: int
    revenue: str


class RevenueReportResponseDTO(BaseModel):
    since: datetime
    contract_count: int
    rental_days: int
    total_revenue: str
    by_car: list[CarRevenueDTO]


class CarPerformanceDTO(BaseModel):
    car_id: str
    name: str
    plate_number: str
    status: CarStatus
    contract_count: int
    rental_days: int
    revenue: str
    utilization_percent: str


class CarPerformanceReportResponseDTO(BaseModel):
    cars: list[CarPerformanceDTO]


class CustomerSpendingDTO(BaseModel):
    customer_id: str
    first_name: str
    last_name: str
    email: str
    contract_count: int
    total_spent: str
    average_spent: str


class CustomerReportResponseDTO(BaseModel):
    customers: list[CustomerSpendingDTO]
