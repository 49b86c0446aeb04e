"""DTOs para reservaciones."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from reservations.domain.entities.reservation import Reservation


class ReservationDTO(BaseModel):
    """Vista de una reservación hacia el llamador; nunca el agregado en sí."""

    model_config = ConfigDict(frozen=True)

    id: str
    customer_id: str
    start_date: datetime
    end_date: datetime
    status: str
    created_at: datetime
    modified_at: datetime | None = None

    @classmethod
    def from_entity(cls, reservation: Reservation) -> "ReservationDTO":
        return cls(
            id=reservation.id,
            customer_id=reservation.customer_id,
            start_date=reservation.start_date,
            end_date=reservation.end_date,
            status=reservation.status.value,
            created_at=reservation.created_at,
            modified_at=reservation.modified_at,
        )


class OperationResult(BaseModel):
    """
    Resultado de un comando sobre una reservación.

    Lleva un indicador de éxito y, según el caso, la reservación resultante
    o un mensaje legible. Nunca transporta el objeto de error original.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    reservation: ReservationDTO | None = None
    error_message: str | None = None

    @property
    def status(self) -> str | None:
        return self.reservation.status if self.reservation else None

    @classmethod
    def ok(cls, reservation: Reservation) -> "OperationResult":
        return cls(success=True, reservation=ReservationDTO.from_entity(reservation))

    @classmethod
    def failure(cls, message: str) -> "OperationResult":
        return cls(success=False, error_message=message)


class ReservationListResult(BaseModel):
    """Resultado de la consulta de reservaciones de un cliente."""

    model_config = ConfigDict(frozen=True)

    success: bool
    reservations: list[ReservationDTO] = Field(default_factory=list)
    error_message: str | None = None

    @classmethod
    def ok(cls, reservations: list[Reservation]) -> "ReservationListResult":
        return cls(
            success=True,
            reservations=[ReservationDTO.from_entity(r) for r in reservations],
        )

    @classmethod
    def failure(cls, message: str) -> "ReservationListResult":
        return cls(success=False, error_message=message)
