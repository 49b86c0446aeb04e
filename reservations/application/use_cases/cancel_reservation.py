from reservations.application.commands import CancelReservationCommand
from reservations.application.dtos.reservation_dto import OperationResult
from reservations.application.use_cases.base import ReservationCommandHandler
from reservations.domain.errors import DomainError, NotFoundError


class CancelReservationHandler(ReservationCommandHandler):
    """
    Cancela una reservación.

    El agregado decide si la cancelación es legal: ``Cancelled`` es terminal y
    una reservación confirmada no se cancela después de su inicio.
    """

    operation = "cancel"

    async def handle(self, command: CancelReservationCommand) -> OperationResult:
        try:
            reservation = await self._load(command.reservation_id)
            if reservation is None:
                return self._fail(
                    NotFoundError("Reservation", command.reservation_id),
                    reservation_id=command.reservation_id,
                )

            reservation.cancel(now=self._clock.now(), reason=command.reason)
            await self._save(reservation)
        except DomainError as exc:
            return self._fail(exc, reservation_id=command.reservation_id)

        self._logger.info(
            "Reservation cancelled",
            extra={"reservation_id": reservation.id, "reason": command.reason},
        )
        return OperationResult.ok(reservation)
