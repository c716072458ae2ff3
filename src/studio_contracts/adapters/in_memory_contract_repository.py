"""Process-local contract repository."""

import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from uuid import UUID

from studio_contracts.domain.contracts import Contract
from studio_contracts.services.contracts import ContractRepository


@dataclass
class InMemoryContractRepository(ContractRepository):
    """List-backed repository guarded by a single lock."""

    contracts: list[Contract] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def list_contracts(self) -> list[Contract]:
        """Return a copy of all contracts in insertion order."""
        with self._lock:
            return list(self.contracts)

    def get_contract(self, contract_id: UUID) -> Contract | None:
        """Return a contract by id, if present."""
        with self._lock:
            return next(
                (contract for contract in self.contracts if contract.id == contract_id),
                None,
            )

    def add_contract(self, contract: Contract) -> None:
        """Append a contract."""
        with self._lock:
            self.contracts.append(contract)

    def update_contract(
        self, contract_id: UUID, merge: Callable[[Contract], Contract]
    ) -> Contract | None:
        """Swap a contract for merge(current), keeping its position."""
        with self._lock:
            for index, existing in enumerate(self.contracts):
                if existing.id == contract_id:
                    updated = merge(existing)
                    self.contracts[index] = updated
                    return updated
            return None

    def remove_contract(self, contract_id: UUID) -> bool:
        """Remove a contract by id."""
        with self._lock:
            remaining = [
                contract for contract in self.contracts if contract.id != contract_id
            ]
            removed = len(remaining) != len(self.contracts)
            self.contracts[:] = remaining
            return removed

    def clear(self) -> None:
        """Drop every contract."""
        with self._lock:
            self.contracts.clear()
