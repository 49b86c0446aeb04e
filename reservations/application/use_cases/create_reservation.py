import logging

from reservations.application.commands import CreateReservationCommand
from reservations.application.dtos.reservation_dto import OperationResult
from reservations.application.interfaces.clock import Clock
from reservations.application.interfaces.event_publisher import EventPublisher
from reservations.application.interfaces.reservation_repo import ReservationRepository
from reservations.application.interfaces.unit_of_work import UnitOfWork
from reservations.application.use_cases.base import ReservationCommandHandler
from reservations.domain.entities.reservation import Reservation
from reservations.domain.errors import DomainError
from reservations.domain.value_objects.reservation_policy import (
    DEFAULT_POLICY,
    ReservationPolicy,
)


class CreateReservationHandler(ReservationCommandHandler):
    operation = "create"

    def __init__(
        self,
        repository: ReservationRepository,
        unit_of_work: UnitOfWork,
        clock: Clock,
        event_publisher: EventPublisher,
        policy: ReservationPolicy = DEFAULT_POLICY,
        log: logging.Logger | None = None,
    ) -> None:
        super().__init__(repository, unit_of_work, clock, event_publisher, log)
        self._policy = policy

    async def handle(self, command: CreateReservationCommand) -> OperationResult:
        try:
            reservation = Reservation.create(
                customer_id=command.customer_id,
                start_date=command.start_date,
                end_date=command.end_date,
                now=self._clock.now(),
                policy=self._policy,
            )
            await self._save(reservation, is_new=True)
        except DomainError as exc:
            return self._fail(exc, customer_id=command.customer_id)

        self._logger.info(
            "Reservation created",
            extra={"reservation_id": reservation.id, "customer_id": reservation.customer_id},
        )
        return OperationResult.ok(reservation)
