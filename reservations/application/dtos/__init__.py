"""DTOs (Data Transfer Objects) de la capa de aplicación."""

from reservations.application.dtos.reservation_dto import (
    OperationResult,
    ReservationDTO,
    ReservationListResult,
)

__all__ = [
    "OperationResult",
    "ReservationDTO",
    "ReservationListResult",
]
