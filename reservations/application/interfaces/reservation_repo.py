"""Interface ReservationRepository - Puerto para el repositorio de reservaciones."""

from abc import ABC, abstractmethod
from typing import Sequence

from reservations.domain.entities.reservation import Reservation


class ReservationRepository(ABC):
    """
    Puerto para el repositorio de reservaciones.

    Todas las operaciones son asíncronas; la cancelación de la tarea se
    observa en estos puntos de suspensión. Los conflictos de concurrencia se
    señalan con ``ConflictError``.
    """

    @abstractmethod
    async def add(self, reservation: Reservation) -> None:
        """
        Registra una reservación nueva.

        Args:
            reservation: Agregado recién creado.
        """
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, reservation_id: str) -> Reservation | None:
        """
        Obtiene una reservación por su ID.

        Returns:
            Reservation o None si no existe.
        """
        raise NotImplementedError

    @abstractmethod
    async def update(self, reservation: Reservation) -> None:
        """Registra los cambios de una reservación existente."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_customer_id(self, customer_id: str) -> Sequence[Reservation]:
        """
        Lista las reservaciones de un cliente, más recientes primero.

        Args:
            customer_id: Referencia opaca al cliente.
        """
        raise NotImplementedError
