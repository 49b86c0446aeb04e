"""
Configuración de pytest y fixtures compartidas.

Este módulo provee fixtures reutilizables para:
- Reloj fijo (FakeClock) y política de reservación parametrizable
- Colaboradores in-memory (almacén, unidad de trabajo, repositorio, eventos)
- Mediator armado igual que en producción
"""

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio

from reservations.application.interfaces.clock import FakeClock
from reservations.config import Settings
from reservations.container import build_mediator
from reservations.domain.entities.reservation import Reservation
from reservations.domain.value_objects.reservation_policy import ReservationPolicy
from reservations.infrastructure.in_memory import (
    InMemoryDatabase,
    InMemoryEventPublisher,
    InMemoryReservationRepository,
    InMemoryUnitOfWork,
)

# ============================================================================
# TIEMPO Y POLÍTICA
# ============================================================================

NOW = datetime(2030, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(NOW)


@pytest.fixture(params=[1, 24], ids=["offset-1h", "offset-1d"])
def min_start_offset_hours(request) -> int:
    """Anticipación mínima; las pruebas corren con 1 hora y con 1 día."""
    return request.param


@pytest.fixture
def policy(min_start_offset_hours: int) -> ReservationPolicy:
    return ReservationPolicy.from_hours(min_start_offset_hours)


@pytest.fixture
def settings(min_start_offset_hours: int) -> Settings:
    return Settings(min_start_offset_hours=min_start_offset_hours, max_duration_days=365)


# ============================================================================
# COLABORADORES IN-MEMORY
# ============================================================================


@pytest.fixture
def database() -> InMemoryDatabase:
    return InMemoryDatabase()


@pytest.fixture
def unit_of_work(database: InMemoryDatabase) -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork(database)


@pytest.fixture
def repository(unit_of_work: InMemoryUnitOfWork) -> InMemoryReservationRepository:
    return InMemoryReservationRepository(unit_of_work)


@pytest.fixture
def event_publisher() -> InMemoryEventPublisher:
    return InMemoryEventPublisher()


@pytest.fixture
def mediator(database, clock, event_publisher, settings):
    return build_mediator(
        database=database,
        clock=clock,
        event_publisher=event_publisher,
        settings=settings,
    )


# ============================================================================
# DATOS DE PRUEBA
# ============================================================================


@pytest.fixture
def make_reservation(clock: FakeClock, policy: ReservationPolicy):
    """Factory de reservaciones válidas relativas al reloj fijo."""

    def _make(customer_id: str = "c1", start_in_days: int = 2, days: int = 3) -> Reservation:
        start = clock.now() + timedelta(days=start_in_days)
        return Reservation.create(
            customer_id=customer_id,
            start_date=start,
            end_date=start + timedelta(days=days),
            now=clock.now(),
            policy=policy,
        )

    return _make


@pytest_asyncio.fixture
async def stored_reservation(make_reservation, database: InMemoryDatabase) -> Reservation:
    """Reservación ``Created`` ya persistida en el almacén."""
    reservation = make_reservation()
    reservation.pull_events()
    unit_of_work = InMemoryUnitOfWork(database)
    await InMemoryReservationRepository(unit_of_work).add(reservation)
    await unit_of_work.save_changes()
    return reservation
