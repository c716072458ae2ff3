"""In-process contract store."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID, uuid4

from studio_contracts.domain.contracts import STORE_MANAGED_FIELDS, Contract

logger = logging.getLogger(__name__)


class ContractRepository(Protocol):
    """Storage interface for contract records."""

    def list_contracts(self) -> list[Contract]:
        """Return all contracts in insertion order."""

    def get_contract(self, contract_id: UUID) -> Contract | None:
        """Return a contract by id, if present."""

    def add_contract(self, contract: Contract) -> None:
        """Append a contract to the collection."""

    def update_contract(
        self, contract_id: UUID, merge: Callable[[Contract], Contract]
    ) -> Contract | None:
        """Replace a contract in place with merge(current), atomically."""

    def remove_contract(self, contract_id: UUID) -> bool:
        """Remove a contract and report whether it existed."""

    def clear(self) -> None:
        """Drop every contract."""


class IdGenerator(Protocol):
    """Source of fresh contract identifiers."""

    def __call__(self) -> UUID:
        """Return a new identifier."""


class Clock(Protocol):
    """Source of the current time."""

    def __call__(self) -> datetime:
        """Return the current timezone-aware time."""


def utc_now() -> datetime:
    """Return the current UTC time."""
    return datetime.now(tz=UTC)


@dataclass
class ContractService:
    """Application service for the contract lifecycle."""

    repository: ContractRepository
    id_generator: IdGenerator = field(default=uuid4)
    clock: Clock = field(default=utc_now)

    def list_contracts(self) -> list[Contract]:
        """Return every contract in insertion order."""
        return self.repository.list_contracts()

    def get_contract(self, contract_id: UUID) -> Contract | None:
        """Return a contract by id, or None when it does not exist."""
        return self.repository.get_contract(contract_id)

    def create_contract(self, payload: dict[str, object]) -> Contract:
        """Store a new contract with a fresh id and timestamps."""
        now = self.clock()
        contract = Contract(
            **_without_managed_fields(payload),
            id=self.id_generator(),
            created_at=now,
            updated_at=now,
        )
        self.repository.add_contract(contract)
        logger.info("Created contract %s (%s)", contract.id, contract.contract_code)
        return contract

    def update_contract(
        self, contract_id: UUID, payload: dict[str, object]
    ) -> Contract | None:
        """Merge the supplied fields over an existing contract."""
        changes = _without_managed_fields(payload)

        def merge(current: Contract) -> Contract:
            return replace(
                current,
                **changes,
                updated_at=max(self.clock(), current.updated_at),
            )

        updated = self.repository.update_contract(contract_id, merge)
        if updated is None:
            return None
        logger.info("Updated contract %s", contract_id)
        return updated

    def delete_contract(self, contract_id: UUID) -> bool:
        """Delete a contract, returning whether anything was removed."""
        removed = self.repository.remove_contract(contract_id)
        if removed:
            logger.info("Deleted contract %s", contract_id)
        return removed

    def search_contracts(self, query: str) -> list[Contract]:
        """Match the query against contract code and client name."""
        needle = query.lower()
        return [
            contract
            for contract in self.repository.list_contracts()
            if needle in contract.contract_code.lower()
            or needle in contract.client_name.lower()
        ]

    def filter_by_status(self, status: str) -> list[Contract]:
        """Return contracts with exactly the given status."""
        return [
            contract
            for contract in self.repository.list_contracts()
            if contract.status == status
        ]

    def filter_by_payment_status(self, payment_status: str) -> list[Contract]:
        """Return contracts with exactly the given payment status."""
        return [
            contract
            for contract in self.repository.list_contracts()
            if contract.payment_status == payment_status
        ]

    def clear(self) -> None:
        """Drop all contracts held by the store."""
        self.repository.clear()


def _without_managed_fields(payload: dict[str, object]) -> dict[str, object]:
    return {
        key: value for key, value in payload.items() if key not in STORE_MANAGED_FIELDS
    }
