from pydantic import BaseModel, ConfigDict, Field

from car_rental_admin.domain.car import CarStatus


class CarResponseDTO(BaseModel):
    id: str
    name: str
    brand: str
    model: str
    year: int
    plate_number: str
    price_per_day: str
    status: CarStatus
    notes: str | None = None


# NUMERIC(10, 2) column: 8 integer digits
CAR_RATE_PATTERN = r"^\d{1,8}(\.\d{1,2})?$"


class CarWriteDTO(BaseModel):
    """Payload for registering a car or replacing all of its fields."""

    name: str = Field(min_length=1, max_length=100, examples=["Clio 2022 white"])
    brand: str = Field(min_length=1, max_length=50, examples=["Renault"])
    model: str = Field(min_length=1, max_length=50, examples=["Clio"])
    year: int = Field(ge=1900, examples=[2022])
    plate_number: str = Field(min_length=1, max_length=20, examples=["12345-A-6"])
    price_per_day: str = Field(
        description="Daily rate as decimal string",
        examples=["300.00"],
        pattern=CAR_RATE_PATTERN,
    )
    status: CarStatus = CarStatus.AVAILABLE
    notes: str | None = None


class CarsSearchQueryDTO(BaseModel):
    """Query parameters for searching the fleet."""

    q: str | None = Field(
        default=None,
        description="Case-insensitive text matched against name, brand, model and plate number",
        examples=["clio"],
        max_length=100,
    )
    status: CarStatus | None = Field(
        default=None,
        description="Only cars in this status",
        examples=["available"],
    )
    offset: int = Field(
        default=0,
        description="Number of results to skip",
        examples=[0],
        ge=0,
    )
    limit: int = Field(
        default=20,
        description="Maximum number of results to return",
        examples=[20],
        ge=1,
        le=200,
    )


class CarSearchResponseDTO(BaseModel):
    cars: list[CarResponseDTO]
    total: int
    offset: int
    limit: int

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "cars": [
                    {
                        "id": "550e8400-e29b-41d4-a716-446655440000",
                        "name": "Clio 2022 white",
                        "brand": "Renault",
                        "model": "Clio",
                        "year": 2022,
                        "plate_number": "12345-A-6",
                        "price_per_day": "300.00",
                        "status": "available",
                    }
                ],
                "total": 1,
                "offset": 0,
                "limit": 20,
            }
        }
    )
