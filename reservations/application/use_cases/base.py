"""Piezas comunes de los handlers de reservaciones."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from types import MappingProxyType
from typing import Any

from reservations.application.dtos.reservation_dto import OperationResult
from reservations.application.interfaces.clock import Clock
from reservations.application.interfaces.event_publisher import EventPublisher
from reservations.application.interfaces.reservation_repo import ReservationRepository
from reservations.application.interfaces.unit_of_work import UnitOfWork
from reservations.domain.entities.reservation import Reservation
from reservations.domain.errors import DomainError, ErrorKind, InfrastructureFault

# Must cover every ErrorKind.
LOG_LEVEL_BY_KIND: MappingProxyType[ErrorKind, int] = MappingProxyType(
    {
        ErrorKind.VALIDATION: logging.WARNING,
        ErrorKind.INVALID_STATE: logging.WARNING,
        ErrorKind.BUSINESS_RULE: logging.WARNING,
        ErrorKind.NOT_FOUND: logging.WARNING,
        ErrorKind.CONFLICT: logging.ERROR,
    }
)


@asynccontextmanager
async def collaborator(name: str) -> AsyncIterator[None]:
    """Convierte cualquier fallo ajeno a la taxonomía en ``InfrastructureFault``."""
    try:
        yield
    except (DomainError, InfrastructureFault):
        raise
    except Exception as exc:
        raise InfrastructureFault(name, str(exc)) from exc


def failure_message(error: DomainError) -> str:
    """Mensaje legible para el llamador según el tipo de error."""
    if error.kind is ErrorKind.CONFLICT:
        return f"{error.message} Reload the reservation and try again."
    return error.message


class ReservationCommandHandler:
    """
    Base de los handlers de comandos.

    Orquesta: cargar -> una operación del agregado -> persistir -> mapear.
    Es el único punto donde los errores de dominio se traducen a
    ``OperationResult``; los fallos de infraestructura se propagan.
    """

    operation = "command"

    def __init__(
        self,
        repository: ReservationRepository,
        unit_of_work: UnitOfWork,
        clock: Clock,
        event_publisher: EventPublisher,
        log: logging.Logger | None = None,
    ) -> None:
        self._repository = repository
        self._unit_of_work = unit_of_work
        self._clock = clock
        self._event_publisher = event_publisher
        self._logger = log or logging.getLogger(type(self).__module__)

    async def _load(self, reservation_id: str) -> Reservation | None:
        async with collaborator("ReservationRepository"):
            return await self._repository.get_by_id(reservation_id)

    async def _save(self, reservation: Reservation, is_new: bool = False) -> None:
        events = reservation.pull_events()
        async with collaborator("UnitOfWork"), self._unit_of_work.transaction():
            async with collaborator("ReservationRepository"):
                if is_new:
                    await self._repository.add(reservation)
                else:
                    await self._repository.update(reservation)
            async with collaborator("UnitOfWork"):
                await self._unit_of_work.save_changes()
            async with collaborator("EventPublisher"):
                await self._event_publisher.publish(events)

    def _fail(self, error: DomainError, **context: Any) -> OperationResult:
        self._logger.log(
            LOG_LEVEL_BY_KIND[error.kind],
            "Cannot %s reservation: %s",
            self.operation,
            error.message,
            extra={
                "operation": self.operation,
                "error_kind": error.kind.value,
                "error_code": error.code,
                **context,
            },
        )
        return OperationResult.failure(failure_message(error))
