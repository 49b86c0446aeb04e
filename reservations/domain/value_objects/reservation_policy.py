"""Value Object ReservationPolicy - límites configurables de una reservación."""

from dataclasses import dataclass
from datetime import timedelta

MIN_START_OFFSET_FLOOR = timedelta(hours=1)
MIN_START_OFFSET_CEILING = timedelta(days=1)
DEFAULT_MAX_DURATION = timedelta(days=365)


@dataclass(frozen=True)
class ReservationPolicy:
    """
    Política que el llamador aplica al crear reservaciones.

    Attributes:
        min_start_offset: Anticipación mínima del inicio respecto a "ahora"
            (entre 1 hora y 1 día).
        max_duration: Duración máxima permitida del rango.
    """

    min_start_offset: timedelta = MIN_START_OFFSET_CEILING
    max_duration: timedelta = DEFAULT_MAX_DURATION

    def __post_init__(self) -> None:
        if not MIN_START_OFFSET_FLOOR <= self.min_start_offset <= MIN_START_OFFSET_CEILING:
            raise ValueError(
                "min_start_offset must be between 1 hour and 1 day, "
                f"got {self.min_start_offset}"
            )
        if self.max_duration <= timedelta(0):
            raise ValueError(f"max_duration must be positive, got {self.max_duration}")

    @classmethod
    def from_hours(cls, min_start_offset_hours: float, max_duration_days: int = 365) -> "ReservationPolicy":
        """Factory desde valores numéricos de configuración."""
        return cls(
            min_start_offset=timedelta(hours=min_start_offset_hours),
            max_duration=timedelta(days=max_duration_days),
        )


DEFAULT_POLICY = ReservationPolicy()
