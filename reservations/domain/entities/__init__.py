"""Entidades del dominio de reservaciones."""

from reservations.domain.entities.reservation import NO_CANCEL_AFTER_START, Reservation

__all__ = [
    "NO_CANCEL_AFTER_START",
    "Reservation",
]
