from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class CustomerWriteDTO(BaseModel):
    """Payload for creating a customer or replacing all of their fields."""

    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=255, pattern=EMAIL_PATTERN)
    phone: str = Field(min_length=1, max_length=30)
    nic_or_passport: str = Field(
        min_length=1, max_length=50, description="National identity card or passport number"
    )
    address: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "first_name": "Amina",
                "last_name": "Benali",
                "email": "amina.benali@example.com",
                "phone": "+212 600 000 000",
                "nic_or_passport": "AB123456",
                "address": "12 Rue Atlas, Casablanca",
            }
        }
    )


class CustomerResponseDTO(BaseModel):
    id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    nic_or_passport: str
    address: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CustomersSearchQueryDTO(BaseModel):
    q: str | None = Field(
        default=None,
        description="Case-insensitive text matched against names, email, phone and id document",
        max_length=100,
    )
    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=20, ge=1, le=200)


class CustomerSearchResponseDTO(BaseModel):
    customers: list[CustomerResponseDTO]
    total: int
    offset: int
    limit: int
