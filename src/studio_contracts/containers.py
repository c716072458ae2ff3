"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from studio_contracts.adapters.in_memory_contract_repository import (
    InMemoryContractRepository,
)
from studio_contracts.config import Settings
from studio_contracts.services.contracts import ContractService
from studio_contracts.services.dashboard import DashboardService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    contract_service: ContractService
    dashboard_service: DashboardService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    contract_service = ContractService(InMemoryContractRepository())
    dashboard_service = DashboardService(
        contract_service=contract_service,
        default_page_size=resolved_settings.dashboard_page_size,
    )

    async def close_resources() -> None:
        contract_service.clear()

    return AppContainer(
        settings=resolved_settings,
        contract_service=contract_service,
        dashboard_service=dashboard_service,
        close_resources=close_resources,
    )
