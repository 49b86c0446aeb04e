from reservations.application.commands import ConfirmReservationCommand
from reservations.application.dtos.reservation_dto import OperationResult
from reservations.application.use_cases.base import ReservationCommandHandler
from reservations.domain.errors import DomainError, NotFoundError


class ConfirmReservationHandler(ReservationCommandHandler):
    """Transición ``Created`` -> ``Confirmed``."""

    operation = "confirm"

    async def handle(self, command: ConfirmReservationCommand) -> OperationResult:
        self._logger.info(
            "Confirming reservation", extra={"reservation_id": command.reservation_id}
        )
        try:
            reservation = await self._load(command.reservation_id)
            if reservation is None:
                return self._fail(
                    NotFoundError("Reservation", command.reservation_id),
                    reservation_id=command.reservation_id,
                )

            self._logger.debug(
                "Loaded reservation",
                extra={"reservation_id": reservation.id, "status": reservation.status.value},
            )
            reservation.confirm(now=self._clock.now())
            await self._save(reservation)
        except DomainError as exc:
            return self._fail(exc, reservation_id=command.reservation_id)

        self._logger.info(
            "Reservation confirmed", extra={"reservation_id": reservation.id}
        )
        return OperationResult.ok(reservation)
