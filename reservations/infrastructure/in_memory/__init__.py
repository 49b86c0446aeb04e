"""Implementaciones in-memory de los puertos de persistencia y eventos."""

from reservations.infrastructure.in_memory.database import InMemoryDatabase
from reservations.infrastructure.in_memory.event_publisher import InMemoryEventPublisher
from reservations.infrastructure.in_memory.reservation_repo import InMemoryReservationRepository
from reservations.infrastructure.in_memory.unit_of_work import InMemoryUnitOfWork

__all__ = [
    "InMemoryDatabase",
    "InMemoryEventPublisher",
    "InMemoryReservationRepository",
    "InMemoryUnitOfWork",
]
