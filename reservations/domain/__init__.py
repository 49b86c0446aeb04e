"""
Capa de Dominio - Sistema de Reservaciones.

Esta capa contiene la lógica de negocio pura, sin dependencias de frameworks.
Incluye el agregado Reservation, value objects, eventos y excepciones de dominio.

Estructura:
- entities/: Agregado raíz Reservation
- value_objects/: ReservationStatus, DateRange, ReservationPolicy
- events.py: Eventos de dominio
- errors.py: Taxonomía de errores de dominio
"""

from reservations.domain.entities import NO_CANCEL_AFTER_START, Reservation
from reservations.domain.errors import (
    BusinessRuleViolationError,
    ConflictError,
    DomainError,
    ErrorKind,
    InfrastructureFault,
    InvalidStateError,
    NotFoundError,
    RequestValidationError,
    ValidationError,
    ValidationFailure,
)
from reservations.domain.events import (
    DomainEvent,
    ReservationCancelled,
    ReservationConfirmed,
    ReservationCreated,
)
from reservations.domain.value_objects import (
    ALLOWED_TRANSITIONS,
    DEFAULT_POLICY,
    DateRange,
    ReservationPolicy,
    ReservationStatus,
)

__all__ = [
    # Entities
    "NO_CANCEL_AFTER_START",
    "Reservation",
    # Value Objects
    "ALLOWED_TRANSITIONS",
    "DEFAULT_POLICY",
    "DateRange",
    "ReservationPolicy",
    "ReservationStatus",
    # Events
    "DomainEvent",
    "ReservationCancelled",
    "ReservationConfirmed",
    "ReservationCreated",
    # Errors
    "BusinessRuleViolationError",
    "ConflictError",
    "DomainError",
    "ErrorKind",
    "InfrastructureFault",
    "InvalidStateError",
    "NotFoundError",
    "RequestValidationError",
    "ValidationError",
    "ValidationFailure",
]
