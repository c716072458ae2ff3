"""Dashboard rows for the contracts table."""

from dataclasses import dataclass
from uuid import UUID

from studio_contracts.domain.contracts import (
    PAYMENT_STATUS_LABELS,
    STATUS_LABELS,
    Contract,
)
from studio_contracts.services.contracts import ContractService

PAGE_SIZE_OPTIONS = (5, 10)


@dataclass(frozen=True)
class DashboardRow:
    """A contract prepared for display."""

    id: UUID
    contract_code: str
    client_name: str
    session_date: str
    status: str
    location: str
    total_photos: int
    contract_value: str
    payment_status: str


@dataclass(frozen=True)
class DashboardPage:
    """A single page of dashboard rows."""

    rows: list[DashboardRow]
    page: int
    page_size: int
    total: int


@dataclass
class DashboardService:
    """Builds the paginated contracts table."""

    contract_service: ContractService
    default_page_size: int = PAGE_SIZE_OPTIONS[0]

    def get_page(self, page: int = 0, page_size: int | None = None) -> DashboardPage:
        """Return display rows for the requested page."""
        size = self.default_page_size if page_size is None else page_size
        if size not in PAGE_SIZE_OPTIONS:
            raise ValueError(f"Unsupported page size: {size}")
        if page < 0:
            raise ValueError("Page must not be negative")
        contracts = self.contract_service.list_contracts()
        start = page * size
        return DashboardPage(
            rows=[build_row(contract) for contract in contracts[start : start + size]],
            page=page,
            page_size=size,
            total=len(contracts),
        )


def build_row(contract: Contract) -> DashboardRow:
    """Translate a contract into its table representation."""
    return DashboardRow(
        id=contract.id,
        contract_code=contract.contract_code,
        client_name=contract.client_name,
        session_date=contract.session_date,
        status=STATUS_LABELS.get(contract.status, contract.status),
        location="Estúdio" if contract.location == "estudio" else "Externo",
        total_photos=total_photos(contract),
        contract_value=format_currency(contract.contract_value),
        payment_status=PAYMENT_STATUS_LABELS.get(
            contract.payment_status, contract.payment_status
        ),
    )


def total_photos(contract: Contract) -> int:
    """Return contracted plus additional photos."""
    return contract.contracted_photos + contract.additional_photos


def format_currency(value: float) -> str:
    """Format a value as Brazilian reais, e.g. R$ 1.234,56."""
    sign = "-" if value < 0 else ""
    formatted = f"{abs(value):,.2f}"
    # Swap the en-US separators for pt-BR ones.
    formatted = formatted.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {formatted}"
