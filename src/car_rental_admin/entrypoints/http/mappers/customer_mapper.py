from __future__ import annotations

from car_rental_admin.domain.car import Paging
from car_rental_admin.domain.customer import Customer, CustomerFilters
from car_rental_admin.entrypoints.http.dtos.customers import (
    CustomerResponseDTO,
    CustomerSearchResponseDTO,
    CustomersSearchQueryDTO,
    CustomerWriteDTO,
)
from car_rental_admin.use_cases.manage_customers import (
    SearchCustomersRequest,
    SearchCustomersResponse,
)


class CustomerMapper:
    @staticmethod
    def to_search_request(dto: CustomersSearchQueryDTO) -> SearchCustomersRequest:
        return SearchCustomersRequest(
            filters=CustomerFilters(query=dto.q or None),
            paging=Paging(offset=dto.offset, limit=dto.limit),
        )

    @staticmethod
    def to_domain(dto: CustomerWriteDTO, customer_id: str | None = None) -> Customer:
        return Customer(
            id=customer_id,
            first_name=dto.first_name.strip(),
            last_name=dto.last_name.strip(),
            email=dto.email.strip(),
            phone=dto.phone.strip(),
            nic_or_passport=dto.nic_or_passport.strip(),
            address=dto.address,
        )

    @staticmethod
    def to_customer_response(customer: Customer) -> CustomerResponseDTO:
        return CustomerResponseDTO(
            id=customer.id or "",
            first_name=customer.first_name,
            last_name=customer.last_name,
            email=customer.email,
            phone=customer.phone,
            nic_or_passport=customer.nic_or_passport,
            address=customer.address,
            created_at=customer.created_at,
            updated_at=customer.updated_at,
        )

    @staticmethod
    def to_search_response(
        result: SearchCustomersResponse, offset: int, limit: int
    ) -> CustomerSearchResponseDTO:
        return CustomerSearchResponseDTO(
            customers=[CustomerMapper.to_customer_response(c) for c in result.customers],
            total=result.total_count or 0,
            offset=offset,
            limit=limit,
        )
