from fastapi import APIRouter, Depends, Response, status

from car_rental_admin.entrypoints.http.dependencies import (
    get_car_booked_periods_use_case,
    get_car_by_id_use_case,
    get_create_car_use_case,
    get_delete_car_use_case,
    get_search_catalog_use_case,
    get_update_car_use_case,
)
from car_rental_admin.entrypoints.http.dtos.cars import (
    CarResponseDTO,
    CarSearchResponseDTO,
    CarsSearchQueryDTO,
    CarWriteDTO,
)
from car_rental_admin.entrypoints.http.dtos.contracts import CarBookingsResponseDTO
from car_rental_admin.entrypoints.http.error_responses import ErrorResponse
from car_rental_admin.entrypoints.http.mappers.car_mapper import CarMapper
from car_rental_admin.entrypoints.http.mappers.contract_mapper import ContractMapper
from car_rental_admin.use_cases.get_car_booked_periods import GetCarBookedPeriods
from car_rental_admin.use_cases.manage_cars import CreateCar, DeleteCar, GetCarById, UpdateCar
from car_rental_admin.use_cases.search_car_catalog import SearchCarCatalog


router = APIRouter(tags=["Cars"])


@router.get(
    "/cars",
    response_model=CarSearchResponseDTO,
    summary="Search the fleet",
    description="""
    Search the rental fleet with an optional free-text query and status filter.

    ## Filters
    - `q`: case-insensitive substring match on name, brand, model or plate number
    - `status`: available, maintenance or unavailable
    - Both filters use AND semantics

    ## Pagination
    - Default limit: 20
    - Max limit: 200
    - Use offset for pagination

    ## Example
    ```
    GET /v1/cars?q=corolla&status=available&limit=10
    ```
    """,
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)
def get_cars(
    query: CarsSearchQueryDTO = Depends(),
    use_case: SearchCarCatalog = Depends(get_search_catalog_use_case),
) -> CarSearchResponseDTO:
    """Search cars endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = CarMapper.to_domain_request(query)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return CarMapper.to_response(
        result=result,
        offset=query.offset,
        limit=query.limit,
    )


@router.get(
    "/cars/{car_id}/bookings",
    response_model=CarBookingsResponseDTO,
    summary="List a car's booked periods",
    description="""
    Every period the car is booked for, across all its contracts, sorted by start date.
    Both ends of a period are booked days.
    """,
    responses={
        404: {"model": ErrorResponse, "description": "Car not found"},
        503: {"model": ErrorResponse, "description": "Bookings could not be read"},
    },
)
def get_car_bookings(
    car_id: str,
    use_case: GetCarBookedPeriods = Depends(get_car_booked_periods_use_case),
) -> CarBookingsResponseDTO:
    periods = use_case.execute(car_id)
    return ContractMapper.to_bookings_response(car_id, periods)


@router.get(
    "/cars/{car_id}",
    response_model=CarResponseDTO,
    summary="Get a car",
    responses={404: {"model": ErrorResponse, "description": "Car not found"}},
)
def get_car(
    car_id: str,
    use_case: GetCarById = Depends(get_car_by_id_use_case),
) -> CarResponseDTO:
    return CarMapper.to_car_response(use_case.execute(car_id))


@router.post(
    "/cars",
    response_model=CarResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Register a car",
    description="""
    Add a car to the fleet. `price_per_day` is a decimal string with up to
    8 integer digits and 2 decimals. Plate numbers are unique.
    """,
    responses={
        409: {"model": ErrorResponse, "description": "Plate number already registered"},
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
def create_car(
    payload: CarWriteDTO,
    use_case: CreateCar = Depends(get_create_car_use_case),
) -> CarResponseDTO:
    return CarMapper.to_car_response(use_case.execute(CarMapper.to_domain(payload)))


@router.put(
    "/cars/{car_id}",
    response_model=CarResponseDTO,
    summary="Update a car",
    description="Replace every field of an existing car with the payload.",
    responses={
        404: {"model": ErrorResponse, "description": "Car not found"},
        409: {"model": ErrorResponse, "description": "Plate number already registered"},
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
def update_car(
    car_id: str,
    payload: CarWriteDTO,
    use_case: UpdateCar = Depends(get_update_car_use_case),
) -> CarResponseDTO:
    return CarMapper.to_car_response(use_case.execute(CarMapper.to_domain(payload, car_id)))


@router.delete(
    "/cars/{car_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a car",
    description="Cars referenced by a contract cannot be deleted.",
    responses={
        404: {"model": ErrorResponse, "description": "Car not found"},
        409: {"model": ErrorResponse, "description": "Car is used by contracts"},
    },
)
def delete_car(
    car_id: str,
    use_case: DeleteCar = Depends(get_delete_car_use_case),
) -> Response:
    use_case.execute(car_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
