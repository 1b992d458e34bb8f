from __future__ import annotations

import logging

from car_rental_admin.domain.errors import NotFoundError
from car_rental_admin.ports.contract_repository import ContractRepository
from car_rental_admin.use_cases.get_contract_by_id import validate_contract_id

logger = logging.getLogger(__name__)


class DeleteContract:
    def __init__(self, contract_repository: ContractRepository) -> None:
        self._repository = contract_repository

    def execute(self, contract_id: str) -> None:
        """
        Raises:
            ValidationError: If contract_id is not a valid UUID format
            NotFoundError: If no contract has the given ID
        """
        validate_contract_id(contract_id)

        if not self._repository.delete(contract_id):
            raise NotFoundError(resource="Contract", identifier=contract_id)

        logger.info("Contract deleted", extra={"contract_id": contract_id})
