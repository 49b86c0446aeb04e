import logging
from typing import Any

from reservations.application.interfaces.unit_of_work import UnitOfWork
from reservations.domain.entities.reservation import Reservation
from reservations.domain.errors import ConflictError, NotFoundError
from reservations.infrastructure.in_memory.database import InMemoryDatabase
from reservations.infrastructure.in_memory.reservation_mapper import to_row

logger = logging.getLogger(__name__)


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unidad de trabajo en memoria, una por petición.

    Los repositorios registran agregados nuevos o modificados y
    ``save_changes`` los convierte en filas pendientes, privadas de esta
    unidad. Dentro de una transacción las filas llegan al almacén sólo en
    ``commit``, que vuelve a verificar ``lock_version`` contra la fila
    guardada (concurrencia optimista); ``rollback`` descarta lo pendiente sin
    tocar lo que otras unidades ya confirmaron. Fuera de una transacción
    ``save_changes`` aplica de inmediato.
    """

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database
        self._new: dict[str, Reservation] = {}
        self._dirty: dict[str, Reservation] = {}
        # id -> (agregado, fila, versión esperada; None si es nueva)
        self._staged: dict[str, tuple[Reservation, dict[str, Any], int | None]] = {}
        self._in_transaction = False
        self.commits = 0
        self.rollbacks = 0

    def register_new(self, reservation: Reservation) -> None:
        self._new[reservation.id] = reservation

    def register_dirty(self, reservation: Reservation) -> None:
        self._dirty[reservation.id] = reservation

    @property
    def pending(self) -> int:
        """Filas escritas con ``save_changes`` que aún no llegan al almacén."""
        return len(self._staged)

    async def save_changes(self) -> int:
        for reservation in self._new.values():
            self._verify(reservation.id, None)
        for reservation in self._dirty.values():
            # Lo ya pendiente en esta unidad se verifica al aplicar.
            if reservation.id not in self._staged:
                self._verify(reservation.id, reservation.lock_version)

        for reservation in self._new.values():
            self._stage(reservation, None)
        for reservation in self._dirty.values():
            self._stage(reservation, reservation.lock_version)

        count = len(self._new) + len(self._dirty)
        self._new.clear()
        self._dirty.clear()
        if not self._in_transaction:
            self._apply()
        return count

    async def begin_transaction(self) -> None:
        self._in_transaction = True

    async def commit(self) -> None:
        self._apply()
        self._in_transaction = False
        self.commits += 1

    async def rollback(self) -> None:
        self._staged.clear()
        self._new.clear()
        self._dirty.clear()
        self._in_transaction = False
        self.rollbacks += 1
        logger.debug("In-memory transaction rolled back")

    def _stage(self, reservation: Reservation, expected_version: int | None) -> None:
        previous = self._staged.get(reservation.id)
        if previous is not None:
            expected_version = previous[2]
        row = to_row(reservation)
        if expected_version is not None:
            row["lock_version"] = expected_version + 1
        self._staged[reservation.id] = (reservation, row, expected_version)

    def _verify(self, reservation_id: str, expected_version: int | None) -> None:
        stored = self.database.rows.get(reservation_id)
        if expected_version is None:
            if stored is not None:
                raise ConflictError(
                    "Reservation", reservation_id, "a reservation with this ID already exists."
                )
            return
        if stored is None:
            raise NotFoundError("Reservation", reservation_id)
        if stored["lock_version"] != expected_version:
            raise ConflictError(
                "Reservation",
                reservation_id,
                "the reservation was modified by another request.",
            )

    def _apply(self) -> None:
        # Sin await entre verificar y escribir: el lote entra completo o nada.
        for reservation_id, (_, _, expected_version) in self._staged.items():
            self._verify(reservation_id, expected_version)
        for reservation_id, (reservation, row, _) in self._staged.items():
            self.database.rows[reservation_id] = row
            reservation.lock_version = row["lock_version"]
        self._staged.clear()
