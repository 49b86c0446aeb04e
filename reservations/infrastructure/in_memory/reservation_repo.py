"""Implementación in-memory del repositorio de reservaciones."""

from typing import Sequence

from reservations.application.interfaces.reservation_repo import ReservationRepository
from reservations.domain.entities.reservation import Reservation
from reservations.infrastructure.in_memory.reservation_mapper import from_row
from reservations.infrastructure.in_memory.unit_of_work import InMemoryUnitOfWork


class InMemoryReservationRepository(ReservationRepository):
    """
    Lee filas del almacén compartido y registra escrituras en la unidad de
    trabajo de la petición; nada se guarda hasta ``save_changes``.
    """

    def __init__(self, unit_of_work: InMemoryUnitOfWork) -> None:
        self._unit_of_work = unit_of_work

    @property
    def _rows(self):
        return self._unit_of_work.database.rows

    async def add(self, reservation: Reservation) -> None:
        self._unit_of_work.register_new(reservation)

    async def get_by_id(self, reservation_id: str) -> Reservation | None:
        row = self._rows.get(reservation_id)
        return from_row(row) if row else None

    async def update(self, reservation: Reservation) -> None:
        self._unit_of_work.register_dirty(reservation)

    async def get_by_customer_id(self, customer_id: str) -> Sequence[Reservation]:
        reservations = [
            from_row(row) for row in self._rows.values() if row["customer_id"] == customer_id
        ]
        reservations.sort(key=lambda r: r.created_at, reverse=True)
        return reservations
