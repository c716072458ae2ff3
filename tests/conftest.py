"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID

import pytest

from studio_contracts.adapters.in_memory_contract_repository import (
    InMemoryContractRepository,
)
from studio_contracts.config import Settings
from studio_contracts.containers import AppContainer
from studio_contracts.services.contracts import Clock, ContractService, IdGenerator
from studio_contracts.services.dashboard import DashboardService


@dataclass
class SequentialIdGenerator(IdGenerator):
    """Deterministic id generator for tests."""

    issued: list[UUID] = field(default_factory=list)

    def __call__(self) -> UUID:
        contract_id = UUID(int=len(self.issued) + 1)
        self.issued.append(contract_id)
        return contract_id


@dataclass
class SteppingClock(Clock):
    """Clock that advances by a fixed step on every call."""

    current: datetime = field(default_factory=lambda: datetime(2024, 5, 1, tzinfo=UTC))
    step: timedelta = timedelta(minutes=1)

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + self.step
        return now


def contract_payload(**overrides: object) -> dict[str, object]:
    """Return a complete contract payload with optional overrides."""
    payload: dict[str, object] = {
        "contract_code": "CT-001",
        "client_name": "Maria Souza",
        "session_date": "2024-06-15",
        "contracted_photos": 10,
        "additional_photos": 0,
        "status": "agendado",
        "location": "estudio",
        "has_album": False,
        "has_signature_book": False,
        "has_retrospective": False,
        "contract_value": 1500.0,
        "payment_status": "pendente",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", log_level="INFO", dashboard_page_size=5)


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    return SequentialIdGenerator()


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture
def repository() -> InMemoryContractRepository:
    return InMemoryContractRepository()


@pytest.fixture
def contract_service(
    repository: InMemoryContractRepository,
    id_generator: SequentialIdGenerator,
    clock: SteppingClock,
) -> ContractService:
    return ContractService(repository, id_generator=id_generator, clock=clock)


@pytest.fixture
def container(settings: Settings, contract_service: ContractService) -> AppContainer:
    dashboard_service = DashboardService(
        contract_service=contract_service,
        default_page_size=settings.dashboard_page_size,
    )

    async def close_resources() -> None:
        contract_service.clear()

    return AppContainer(
        settings=settings,
        contract_service=contract_service,
        dashboard_service=dashboard_service,
        close_resources=close_resources,
    )
