"""Get contract by ID use case."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from car_rental_admin.domain.contract import Contract
from car_rental_admin.domain.errors import NotFoundError, ValidationError
from car_rental_admin.ports.contract_repository import ContractRepository


def validate_contract_id(contract_id: str) -> None:
    """
    Raises:
        ValidationError: If contract_id is not a valid UUID
    """
    try:
        UUID(contract_id)
    except ValueError:
        raise ValidationError(
            errors=[
                {
                    "field": "contract_id",
                    "message": "Must be a valid UUID format",
                    "code": "INVALID_UUID",
                }
            ]
        )


@dataclass(frozen=True, slots=True)
class GetContractByIdRequest:
    contract_id: str


@dataclass(frozen=True, slots=True)
class GetContractByIdResponse:
    contract: Contract


class GetContractById:
    """
    Use case for retrieving a single contract by ID.

    Responsibilities:
    - Validate contract_id format (must be valid UUID)
    - Delegate to repository for data access
    - Raise NotFoundError if the contract doesn't exist
    """

    def __init__(self, contract_repository: ContractRepository) -> None:
        self._repository = contract_repository

    def execute(self, request: GetContractByIdRequest) -> GetContractByIdResponse:
        """
        Raises:
            ValidationError: If contract_id is not a valid UUID format
            NotFoundError: If no contract has the given ID
        """
        validate_contract_id(request.contract_id)

        contract = self._repository.get_by_id(request.contract_id)

        if contract is None:
            raise NotFoundError(resource="Contract", identifier=request.contract_id)

        return GetContractByIdResponse(contract=contract)
