"""Test suite for GetContractById, ListContracts and DeleteContract."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from unittest.mock import Mock

import pytest

from car_rental_admin.domain.car import Paging, PagingValidationError
from car_rental_admin.domain.contract import Contract
from car_rental_admin.domain.errors import NotFoundError, ValidationError
from car_rental_admin.domain.pricing import ContractTotals, RateInputs
from car_rental_admin.ports.contract_repository import ContractListResult, ContractRepository
from car_rental_admin.use_cases.delete_contract import DeleteContract
from car_rental_admin.use_cases.get_contract_by_id import (
    GetContractById,
    GetContractByIdRequest,
    GetContractByIdResponse,
)
from car_rental_admin.use_cases.list_contracts import ListContracts

CONTRACT_ID = "7f1d3c2e-0000-4000-8000-000000000001"


@pytest.fixture()
def mock_repository() -> Mock:
    """Mock ContractRepository."""
    return Mock(spec=ContractRepository)


@pytest.fixture()
def sample_contract() -> Contract:
    return Contract(
        id=CONTRACT_ID,
        contract_number="CTR-20250101-AB12",
        customer_id="cust-1",
        car_id="car-1",
        start_date=date(2025, 1, 10),
        end_date=date(2025, 1, 12),
        rate=RateInputs(daily_rate=Decimal("1000"), days=3),
        totals=ContractTotals(total=Decimal("3000.00")),
    )


# ==============================================================================
# GetContractById
# ==============================================================================


def test_get_returns_contract(mock_repository: Mock, sample_contract: Contract) -> None:
    mock_repository.get_by_id.return_value = sample_contract
    use_case = GetContractById(contract_repository=mock_repository)

    result = use_case.execute(GetContractByIdRequest(contract_id=CONTRACT_ID))

    assert isinstance(result, GetContractByIdResponse)
    assert result.contract == sample_contract
    mock_repository.get_by_id.assert_called_once_with(CONTRACT_ID)


def test_get_raises_not_found(mock_repository: Mock) -> None:
    mock_repository.get_by_id.return_value = None
    use_case = GetContractById(contract_repository=mock_repository)

    with pytest.raises(NotFoundError) as exc_info:
        use_case.execute(GetContractByIdRequest(contract_id=CONTRACT_ID))

    assert exc_info.value.context["resource"] == "Contract"


@pytest.mark.parametrize("bad_id", ["", "not-a-uuid", "123"])
def test_get_rejects_invalid_uuid(mock_repository: Mock, bad_id: str) -> None:
    """Malformed ids never reach the repository."""
    use_case = GetContractById(contract_repository=mock_repository)

    with pytest.raises(ValidationError) as exc_info:
        use_case.execute(GetContractByIdRequest(contract_id=bad_id))

    assert exc_info.value.errors[0]["code"] == "INVALID_UUID"  # type: ignore[index]
    mock_repository.get_by_id.assert_not_called()


# ==============================================================================
# ListContracts
# ==============================================================================


def test_list_returns_page(mock_repository: Mock, sample_contract: Contract) -> None:
    mock_repository.list.return_value = ContractListResult(
        contracts=[sample_contract], total_count=5
    )
    use_case = ListContracts(contract_repository=mock_repository)

    result = use_case.execute(Paging(offset=0, limit=1))

    assert result.contracts == [sample_contract]
    assert result.total_count == 5


def test_list_rejects_invalid_paging(mock_repository: Mock) -> None:
    use_case = ListContracts(contract_repository=mock_repository)

    with pytest.raises(PagingValidationError):
        use_case.execute(Paging(offset=-1))


# ==============================================================================
# DeleteContract
# ==============================================================================


def test_delete_removes_contract(mock_repository: Mock) -> None:
    mock_repository.delete.return_value = True
    use_case = DeleteContract(contract_repository=mock_repository)

    use_case.execute(CONTRACT_ID)

    mock_repository.delete.assert_called_once_with(CONTRACT_ID)


def test_delete_missing_contract_raises_not_found(mock_repository: Mock) -> None:
    mock_repository.delete.return_value = False
    use_case = DeleteContract(contract_repository=mock_repository)

    with pytest.raises(NotFoundError):
        use_case.execute(CONTRACT_ID)


def test_delete_rejects_invalid_uuid(mock_repository: Mock) -> None:
    use_case = DeleteContract(contract_repository=mock_repository)

    with pytest.raises(ValidationError):
        use_case.execute("nope")

    mock_repository.delete.assert_not_called()
