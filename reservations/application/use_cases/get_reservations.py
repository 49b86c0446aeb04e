import logging

from reservations.application.commands import GetReservationsQuery
from reservations.application.dtos.reservation_dto import ReservationListResult
from reservations.application.interfaces.reservation_repo import ReservationRepository
from reservations.application.use_cases.base import collaborator, failure_message
from reservations.domain.errors import DomainError

logger = logging.getLogger(__name__)


class GetReservationsHandler:
    """Consulta de sólo lectura: reservaciones de un cliente, más recientes primero."""

    def __init__(self, repository: ReservationRepository) -> None:
        self._repository = repository

    async def handle(self, query: GetReservationsQuery) -> ReservationListResult:
        try:
            async with collaborator("ReservationRepository"):
                reservations = await self._repository.get_by_customer_id(query.customer_id)
        except DomainError as exc:
            logger.warning(
                "Cannot list reservations: %s",
                exc.message,
                extra={"customer_id": query.customer_id, "error_kind": exc.kind.value},
            )
            return ReservationListResult.failure(failure_message(exc))

        return ReservationListResult.ok(list(reservations))
