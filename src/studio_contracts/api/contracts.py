"""Contract endpoints backed by the in-process store."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Query, Request, Response, status

from studio_contracts.api.schemas import (
    ContractCreate,
    ContractOut,
    ContractUpdate,
    DashboardPageOut,
    FormOptionsOut,
    OptionOut,
)
from studio_contracts.domain.contracts import (
    LOCATION_LABELS,
    PAYMENT_STATUS_LABELS,
    STATUS_LABELS,
)
from studio_contracts.services.dashboard import PAGE_SIZE_OPTIONS

if TYPE_CHECKING:
    from studio_contracts.containers import AppContainer

router = APIRouter(tags=["contracts"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/contracts", response_model=list[ContractOut])
async def list_contracts(
    request: Request,
    q: str | None = None,
    status_filter: str | None = Query(default=None, alias="status"),
    payment_status: str | None = Query(default=None, alias="paymentStatus"),
) -> list[ContractOut]:
    """Return contracts, optionally narrowed by search and filters."""
    service = _container(request).contract_service
    contracts = service.search_contracts(q) if q else service.list_contracts()
    if status_filter is not None:
        matching = {contract.id for contract in service.filter_by_status(status_filter)}
        contracts = [contract for contract in contracts if contract.id in matching]
    if payment_status is not None:
        matching = {
            contract.id
            for contract in service.filter_by_payment_status(payment_status)
        }
        contracts = [contract for contract in contracts if contract.id in matching]
    return [ContractOut.model_validate(contract) for contract in contracts]


@router.get("/contracts/{contract_id}", response_model=ContractOut)
async def get_contract(contract_id: UUID, request: Request) -> ContractOut:
    """Return a single contract."""
    contract = _container(request).contract_service.get_contract(contract_id)
    if contract is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return ContractOut.model_validate(contract)


@router.post(
    "/contracts", response_model=ContractOut, status_code=status.HTTP_201_CREATED
)
async def create_contract(body: ContractCreate, request: Request) -> ContractOut:
    """Register a new contract."""
    contract = _container(request).contract_service.create_contract(body.model_dump())
    return ContractOut.model_validate(contract)


@router.patch("/contracts/{contract_id}", response_model=ContractOut)
async def update_contract(
    contract_id: UUID, body: ContractUpdate, request: Request
) -> ContractOut:
    """Merge the supplied fields into an existing contract."""
    contract = _container(request).contract_service.update_contract(
        contract_id, body.model_dump(exclude_unset=True)
    )
    if contract is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return ContractOut.model_validate(contract)


@router.delete("/contracts/{contract_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contract(contract_id: UUID, request: Request) -> Response:
    """Delete a contract."""
    if not _container(request).contract_service.delete_contract(contract_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/dashboard", response_model=DashboardPageOut)
async def dashboard(
    request: Request,
    page: int = Query(default=0, ge=0),
    page_size: int | None = Query(default=None, alias="pageSize"),
) -> DashboardPageOut:
    """Return a page of display rows for the contracts table."""
    try:
        result = _container(request).dashboard_service.get_page(page, page_size)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return DashboardPageOut.model_validate(result)


@router.get("/options", response_model=FormOptionsOut)
async def form_options() -> FormOptionsOut:
    """Return the select choices used by the contract form."""
    return FormOptionsOut(
        status=_options(STATUS_LABELS),
        location=_options(LOCATION_LABELS),
        payment_status=_options(PAYMENT_STATUS_LABELS),
        page_sizes=list(PAGE_SIZE_OPTIONS),
    )


def _options(labels: dict[str, str]) -> list[OptionOut]:
    return [OptionOut(value=value, label=label) for value, label in labels.items()]
