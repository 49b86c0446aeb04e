"""Interfaces (Puertos) de la capa de aplicación."""

from reservations.application.interfaces.clock import Clock, FakeClock
from reservations.application.interfaces.event_publisher import EventPublisher
from reservations.application.interfaces.reservation_repo import ReservationRepository
from reservations.application.interfaces.unit_of_work import UnitOfWork
from reservations.application.interfaces.validator import Validator

__all__ = [
    # Repositories
    "ReservationRepository",
    # Infrastructure
    "UnitOfWork",
    "EventPublisher",
    # Validation
    "Validator",
    # Utilities
    "Clock",
    "FakeClock",
]
