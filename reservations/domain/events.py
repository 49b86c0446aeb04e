"""Eventos de dominio emitidos por el agregado Reservation."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class DomainEvent:
    """Algo que ocurrió en el dominio y que otros pueden observar."""

    reservation_id: str
    occurred_at: datetime
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def event_type(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class ReservationCreated(DomainEvent):
    customer_id: str = ""
    start_date: datetime | None = None
    end_date: datetime | None = None


@dataclass(frozen=True)
class ReservationConfirmed(DomainEvent):
    pass


@dataclass(frozen=True)
class ReservationCancelled(DomainEvent):
    reason: str | None = None
