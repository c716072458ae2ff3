"""Pydantic models for the contracts HTTP API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model speaking camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ContractCreate(ApiModel):
    """Payload for registering a new contract."""

    contract_code: str = Field(min_length=1)
    client_name: str = Field(min_length=1)
    session_date: str = Field(min_length=1)
    contracted_photos: int = Field(ge=1)
    additional_photos: int = Field(default=0, ge=0)
    status: str = Field(min_length=1)
    location: str = Field(min_length=1)
    has_album: bool = False
    has_signature_book: bool = False
    has_retrospective: bool = False
    contract_value: float = Field(ge=0)
    payment_status: str = Field(min_length=1)
    finished_at: datetime | None = None


class ContractUpdate(ApiModel):
    """Partial payload; only the fields sent are merged."""

    contract_code: str | None = Field(default=None, min_length=1)
    client_name: str | None = Field(default=None, min_length=1)
    session_date: str | None = Field(default=None, min_length=1)
    contracted_photos: int | None = Field(default=None, ge=1)
    additional_photos: int | None = Field(default=None, ge=0)
    status: str | None = Field(default=None, min_length=1)
    location: str | None = Field(default=None, min_length=1)
    has_album: bool | None = None
    has_signature_book: bool | None = None
    has_retrospective: bool | None = None
    contract_value: float | None = Field(default=None, ge=0)
    payment_status: str | None = Field(default=None, min_length=1)
    finished_at: datetime | None = None

    @model_validator(mode="after")
    def _reject_nulls(self) -> "ContractUpdate":
        for name in self.model_fields_set:
            if name != "finished_at" and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self


class ContractOut(ApiModel):
    """Contract as returned by the API."""

    id: UUID
    contract_code: str
    client_name: str
    session_date: str
    contracted_photos: int
    additional_photos: int
    status: str
    location: str
    has_album: bool
    has_signature_book: bool
    has_retrospective: bool
    contract_value: float
    payment_status: str
    finished_at: datetime | None
    created_at: datetime
    updated_at: datetime


class DashboardRowOut(ApiModel):
    """Display row for the contracts table."""

    id: UUID
    contract_code: str
    client_name: str
    session_date: str
    status: str
    location: str
    total_photos: int
    contract_value: str
    payment_status: str


class DashboardPageOut(ApiModel):
    """Paginated dashboard rows."""

    rows: list[DashboardRowOut]
    page: int
    page_size: int
    total: int


class OptionOut(ApiModel):
    """A select choice for the contract form."""

    value: str
    label: str


class FormOptionsOut(ApiModel):
    """All select choices for the contract form."""

    status: list[OptionOut]
    location: list[OptionOut]
    payment_status: list[OptionOut]
    page_sizes: list[int]
