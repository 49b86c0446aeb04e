"""
Composición explícita del núcleo de reservaciones.

Cada colaborador se pasa por parámetro; no hay service locator. La unidad
de trabajo y el repositorio se crean por petición, sobre un almacén
compartido.
"""

import logging

from reservations.application.commands import (
    CancelReservationCommand,
    ConfirmReservationCommand,
    CreateReservationCommand,
    GetReservationsQuery,
)
from reservations.application.dtos.reservation_dto import OperationResult, ReservationListResult
from reservations.application.interfaces.clock import Clock
from reservations.application.interfaces.event_publisher import EventPublisher
from reservations.application.pipeline import LoggingBehavior, Mediator, ValidationBehavior
from reservations.application.use_cases import (
    CancelReservationHandler,
    ConfirmReservationHandler,
    CreateReservationHandler,
    GetReservationsHandler,
)
from reservations.application.validators import build_validators
from reservations.config import Settings, get_settings
from reservations.infrastructure.in_memory import (
    InMemoryDatabase,
    InMemoryEventPublisher,
    InMemoryReservationRepository,
    InMemoryUnitOfWork,
)
from reservations.infrastructure.services import SystemClock
from reservations.logging_config import configure_logging

logger = logging.getLogger(__name__)


def build_mediator(
    database: InMemoryDatabase | None = None,
    clock: Clock | None = None,
    event_publisher: EventPublisher | None = None,
    settings: Settings | None = None,
) -> Mediator:
    settings = settings or get_settings()
    database = database or InMemoryDatabase()
    clock = clock or SystemClock()
    event_publisher = event_publisher or InMemoryEventPublisher()
    policy = settings.reservation_policy()

    mediator = Mediator(
        behaviors=[
            ValidationBehavior(build_validators(clock, policy)),
            LoggingBehavior(),
        ]
    )

    async def create(command: CreateReservationCommand) -> OperationResult:
        unit_of_work = InMemoryUnitOfWork(database)
        handler = CreateReservationHandler(
            InMemoryReservationRepository(unit_of_work),
            unit_of_work,
            clock,
            event_publisher,
            policy=policy,
        )
        return await handler.handle(command)

    async def confirm(command: ConfirmReservationCommand) -> OperationResult:
        unit_of_work = InMemoryUnitOfWork(database)
        handler = ConfirmReservationHandler(
            InMemoryReservationRepository(unit_of_work), unit_of_work, clock, event_publisher
        )
        return await handler.handle(command)

    async def cancel(command: CancelReservationCommand) -> OperationResult:
        unit_of_work = InMemoryUnitOfWork(database)
        handler = CancelReservationHandler(
            InMemoryReservationRepository(unit_of_work), unit_of_work, clock, event_publisher
        )
        return await handler.handle(command)

    async def list_for_customer(query: GetReservationsQuery) -> ReservationListResult:
        repository = InMemoryReservationRepository(InMemoryUnitOfWork(database))
        return await GetReservationsHandler(repository).handle(query)

    mediator.register(CreateReservationCommand, create, OperationResult.failure)
    mediator.register(ConfirmReservationCommand, confirm, OperationResult.failure)
    mediator.register(CancelReservationCommand, cancel, OperationResult.failure)
    mediator.register(GetReservationsQuery, list_for_customer, ReservationListResult.failure)

    logger.info(
        "Reservation mediator ready",
        extra={
            "min_start_offset": str(policy.min_start_offset),
            "max_duration": str(policy.max_duration),
        },
    )
    return mediator.freeze()


def bootstrap(settings: Settings | None = None) -> Mediator:
    """Arranque del proceso: logging primero, luego el mediator."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    return build_mediator(settings=settings)
