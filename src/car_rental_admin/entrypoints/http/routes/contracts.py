from fastapi import APIRouter, Depends, Response, status

from car_rental_admin.domain.car import Paging
from car_rental_admin.entrypoints.http.dependencies import (
    get_calculate_contract_totals_use_case,
    get_check_car_availability_use_case,
    get_contract_by_id_use_case,
    get_delete_contract_use_case,
    get_list_contracts_use_case,
    get_submit_contract_use_case,
)
from car_rental_admin.entrypoints.http.dtos.contracts import (
    AvailabilityRequestDTO,
    AvailabilityResponseDTO,
    ContractListQueryDTO,
    ContractListResponseDTO,
    ContractQuoteRequestDTO,
    ContractQuoteResponseDTO,
    ContractResponseDTO,
    ContractSubmitResponseDTO,
    ContractWriteDTO,
)
from car_rental_admin.entrypoints.http.error_responses import ErrorResponse
from car_rental_admin.entrypoints.http.mappers.contract_mapper import ContractMapper
from car_rental_admin.use_cases.calculate_contract_totals import CalculateContractTotals
from car_rental_admin.use_cases.check_car_availability import CheckCarAvailability
from car_rental_admin.use_cases.delete_contract import DeleteContract
from car_rental_admin.use_cases.get_contract_by_id import GetContractById, GetContractByIdRequest
from car_rental_admin.use_cases.list_contracts import ListContracts
from car_rental_admin.use_cases.submit_contract import SubmitContract, SubmitContractRequest


router = APIRouter(tags=["Contracts"])


@router.post(
    "/contracts/quote",
    response_model=ContractQuoteResponseDTO,
    summary="Price a contract",
    description="""
    Calculate contract totals without saving anything.

    ## Monetary Values
    - All monetary values are strings (e.g., "250.00")
    - Must be valid decimal format with up to 2 decimal places
    - Negative amounts are rejected; a missing amount counts as zero

    ## Calculation
    - Days = inclusive count between start_date and end_date (or `days` when no dates are given)
    - Subtotal = max(0, daily_rate × days − discount)
    - Base total = subtotal + subtotal × tax_rate / 100
    - Card payment amount = base total × card_payment_percent / 100, rounded to cents
    - Total = base total + surcharges + card payment amount, rounded to cents
    - Every amount is zero while daily_rate or days is not positive

    ## Example
    ```
    POST /v1/contracts/quote
    {
        "daily_rate": "250.00",
        "start_date": "2025-01-01",
        "end_date": "2025-01-10",
        "discount": "200.00",
        "tax_rate": "15",
        "card_payment_percent": "2"
    }
    ```
    """,
    responses={
        200: {
            "description": "Successful calculation",
            "content": {
                "application/json": {
                    "example": {
                        "days": 10,
                        "subtotal": "2300.00",
                        "card_payment_amount": "52.90",
                        "total": "2697.90",
                    }
                }
            },
        },
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
def quote_contract(
    payload: ContractQuoteRequestDTO,
    use_case: CalculateContractTotals = Depends(get_calculate_contract_totals_use_case),
) -> ContractQuoteResponseDTO:
    rate, surcharges, card_payment_percent = ContractMapper.to_quote_inputs(payload)
    totals = use_case.execute(rate, surcharges, card_payment_percent)
    return ContractMapper.to_quote_response(rate.days, totals)


@router.post(
    "/contracts/availability",
    response_model=AvailabilityResponseDTO,
    summary="Check whether a car is free for a period",
    description="""
    Report the existing bookings of a car that overlap the requested period.

    Periods include both endpoints: a booking ending on the 10th blocks a new
    contract starting on the 10th. Pass `exclude_contract_id` when checking the
    period of a contract that is being edited.
    """,
    responses={
        422: {"model": ErrorResponse, "description": "Invalid period"},
        503: {"model": ErrorResponse, "description": "Bookings could not be read"},
    },
)
def check_availability(
    payload: AvailabilityRequestDTO,
    use_case: CheckCarAvailability = Depends(get_check_car_availability_use_case),
) -> AvailabilityResponseDTO:
    result = use_case.execute(ContractMapper.to_availability_request(payload))
    return ContractMapper.to_availability_response(result)


@router.post(
    "/contracts",
    response_model=ContractSubmitResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a contract",
    description="""
    Validate and save a new rental contract.

    Totals are always recomputed from the submitted rate inputs. The car's
    existing bookings are reloaded before saving; any overlap rejects the
    contract with 409 and the list of blocking periods. When the bookings
    cannot be loaded the contract is saved anyway and `warnings` says so.
    """,
    responses={
        409: {"model": ErrorResponse, "description": "Car already booked"},
        422: {"model": ErrorResponse, "description": "Validation error"},
        503: {"model": ErrorResponse, "description": "Contract could not be saved"},
    },
)
def create_contract(
    payload: ContractWriteDTO,
    use_case: SubmitContract = Depends(get_submit_contract_use_case),
) -> ContractSubmitResponseDTO:
    draft = ContractMapper.to_create_draft(payload)
    result = use_case.execute(SubmitContractRequest(draft=draft))
    return ContractMapper.to_submit_response(result)


@router.put(
    "/contracts/{contract_id}",
    response_model=ContractSubmitResponseDTO,
    summary="Update a contract",
    description="""
    Replace the editable fields of an existing contract with the payload.
    Omitted fields are cleared, so the payload must still name the customer,
    car, dates and payment mode. The contract keeps its id and number; totals
    are recomputed. Edits do not re-check availability.
    """,
    responses={
        404: {"model": ErrorResponse, "description": "Contract not found"},
        422: {"model": ErrorResponse, "description": "Validation error"},
        503: {"model": ErrorResponse, "description": "Contract could not be saved"},
    },
)
def update_contract(
    contract_id: str,
    payload: ContractWriteDTO,
    get_use_case: GetContractById = Depends(get_contract_by_id_use_case),
    submit_use_case: SubmitContract = Depends(get_submit_contract_use_case),
) -> ContractSubmitResponseDTO:
    existing = get_use_case.execute(GetContractByIdRequest(contract_id=contract_id)).contract
    draft = ContractMapper.to_edit_draft(existing, payload)
    result = submit_use_case.execute(SubmitContractRequest(draft=draft))
    return ContractMapper.to_submit_response(result)


@router.get(
    "/contracts/{contract_id}",
    response_model=ContractResponseDTO,
    summary="Get a contract",
    responses={
        404: {"model": ErrorResponse, "description": "Contract not found"},
        422: {"model": ErrorResponse, "description": "Invalid contract id"},
    },
)
def get_contract(
    contract_id: str,
    use_case: GetContractById = Depends(get_contract_by_id_use_case),
) -> ContractResponseDTO:
    result = use_case.execute(GetContractByIdRequest(contract_id=contract_id))
    return ContractMapper.to_contract_response(result.contract)


@router.get(
    "/contracts",
    response_model=ContractListResponseDTO,
    summary="List contracts",
    description="Contracts ordered newest first.",
)
def list_contracts(
    query: ContractListQueryDTO = Depends(),
    use_case: ListContracts = Depends(get_list_contracts_use_case),
) -> ContractListResponseDTO:
    result = use_case.execute(Paging(offset=query.offset, limit=query.limit))
    return ContractMapper.to_list_response(result, offset=query.offset, limit=query.limit)


@router.delete(
    "/contracts/{contract_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a contract",
    responses={404: {"model": ErrorResponse, "description": "Contract not found"}},
)
def delete_contract(
    contract_id: str,
    use_case: DeleteContract = Depends(get_delete_contract_use_case),
) -> Response:
    use_case.execute(contract_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
