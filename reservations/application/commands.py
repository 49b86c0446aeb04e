"""Contratos de comandos y consultas.

Describen la intención del llamador sin ejecutar trabajo. Las reglas de
negocio se aplican en los validadores del pipeline y en el agregado; aquí
sólo se fija la forma de cada petición.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Request(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class CreateReservationCommand(Request):
    customer_id: str
    start_date: datetime
    end_date: datetime


class ConfirmReservationCommand(Request):
    reservation_id: str


class CancelReservationCommand(Request):
    reservation_id: str
    reason: str | None = None


class GetReservationsQuery(Request):
    customer_id: str
