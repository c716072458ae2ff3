"""Domain models for studio contracts."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

STATUS_LABELS: dict[str, str] = {
    "agendado": "Agendado",
    "realizado": "Ensaio Realizado",
    "tratamento": "Em Tratamento",
    "aprovacao": "Em Aprovação",
    "aprovado": "Aprovado",
    "finalizado": "Finalizado",
}

LOCATION_LABELS: dict[str, str] = {
    "estudio": "Estúdio",
    "externo": "Externo",
}

PAYMENT_STATUS_LABELS: dict[str, str] = {
    "pendente": "Pendente",
    "parcial": "Parcialmente Pago",
    "pago": "Pago",
}

# Assigned by the store, never taken from callers.
STORE_MANAGED_FIELDS = frozenset({"id", "created_at", "updated_at"})


@dataclass(frozen=True)
class Contract:
    """Represents a photography engagement tracked by the studio."""

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
    created_at: datetime
    updated_at: datetime
    finished_at: datetime | None = None
