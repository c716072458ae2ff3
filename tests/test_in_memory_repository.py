"""Tests for the in-memory contract repository."""

from concurrent.futures import ThreadPoolExecutor
from datetime import UTC, datetime
from uuid import UUID, uuid4

from studio_contracts.adapters.in_memory_contract_repository import (
    InMemoryContractRepository,
)
from studio_contracts.domain.contracts import Contract
from tests.conftest import contract_payload


def _contract(contract_id: UUID | None = None, **overrides: object) -> Contract:
    now = datetime(2024, 5, 1, tzinfo=UTC)
    return Contract(
        **contract_payload(**overrides),
        id=contract_id or uuid4(),
        created_at=now,
        updated_at=now,
    )


def test_list_returns_a_copy() -> None:
    repository = InMemoryContractRepository()
    repository.add_contract(_contract())

    listed = repository.list_contracts()
    listed.clear()

    assert len(repository.list_contracts()) == 1


def test_update_unknown_contract_returns_none() -> None:
    repository = InMemoryContractRepository()
    stored = _contract()
    repository.add_contract(stored)

    assert repository.update_contract(uuid4(), lambda current: current) is None
    assert repository.list_contracts() == [stored]


def test_remove_unknown_contract_returns_false() -> None:
    repository = InMemoryContractRepository()

    assert repository.remove_contract(uuid4()) is False


def test_concurrent_adds_are_all_kept() -> None:
    repository = InMemoryContractRepository()

    contracts = [_contract(UUID(int=index + 1)) for index in range(200)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(repository.add_contract, contracts))

    assert len(repository.list_contracts()) == 200
