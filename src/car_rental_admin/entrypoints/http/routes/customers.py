from fastapi import APIRouter, Depends, Response, status

from car_rental_admin.entrypoints.http.dependencies import (
    get_create_customer_use_case,
    get_customer_by_id_use_case,
    get_delete_customer_use_case,
    get_search_customers_use_case,
    get_update_customer_use_case,
)
from car_rental_admin.entrypoints.http.dtos.customers import (
    CustomerResponseDTO,
    CustomerSearchResponseDTO,
    CustomersSearchQueryDTO,
    CustomerWriteDTO,
)
from car_rental_admin.entrypoints.http.error_responses import ErrorResponse
from car_rental_admin.entrypoints.http.mappers.customer_mapper import CustomerMapper
from car_rental_admin.use_cases.manage_customers import (
    CreateCustomer,
    DeleteCustomer,
    GetCustomerById,
    SearchCustomers,
    UpdateCustomer,
)


router = APIRouter(tags=["Customers"])


@router.get(
    "/customers",
    response_model=CustomerSearchResponseDTO,
    summary="Search customers",
    description="""
    Customers ordered by last name. `q` matches names, email, phone or the
    identity document number, case-insensitively.
    """,
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)
def search_customers(
    query: CustomersSearchQueryDTO = Depends(),
    use_case: SearchCustomers = Depends(get_search_customers_use_case),
) -> CustomerSearchResponseDTO:
    result = use_case.execute(CustomerMapper.to_search_request(query))
    return CustomerMapper.to_search_response(result, offset=query.offset, limit=query.limit)


@router.get(
    "/customers/{customer_id}",
    response_model=CustomerResponseDTO,
    summary="Get a customer",
    responses={404: {"model": ErrorResponse, "description": "Customer not found"}},
)
def get_customer(
    customer_id: str,
    use_case: GetCustomerById = Depends(get_customer_by_id_use_case),
) -> CustomerResponseDTO:
    return CustomerMapper.to_customer_response(use_case.execute(customer_id))


@router.post(
    "/customers",
    response_model=CustomerResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a customer",
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)
def create_customer(
    payload: CustomerWriteDTO,
    use_case: CreateCustomer = Depends(get_create_customer_use_case),
) -> CustomerResponseDTO:
    return CustomerMapper.to_customer_response(use_case.execute(CustomerMapper.to_domain(payload)))


@router.put(
    "/customers/{customer_id}",
    response_model=CustomerResponseDTO,
    summary="Update a customer",
    responses={
        404: {"model": ErrorResponse, "description": "Customer not found"},
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
def update_customer(
    customer_id: str,
    payload: CustomerWriteDTO,
    use_case: UpdateCustomer = Depends(get_update_customer_use_case),
) -> CustomerResponseDTO:
    customer = CustomerMapper.to_domain(payload, customer_id)
    return CustomerMapper.to_customer_response(use_case.execute(customer))


@router.delete(
    "/customers/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a customer",
    description="Customers with contracts cannot be deleted.",
    responses={
        404: {"model": ErrorResponse, "description": "Customer not found"},
        409: {"model": ErrorResponse, "description": "Customer has contracts"},
    },
)
def delete_customer(
    customer_id: str,
    use_case: DeleteCustomer = Depends(get_delete_customer_use_case),
) -> Response:
    use_case.execute(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
