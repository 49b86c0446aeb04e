"""Value Object DateRange - periodo de una reservación."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from reservations.domain.errors import ValidationError


def as_utc(value: datetime) -> datetime:
    """Normaliza a UTC; un datetime sin zona horaria se interpreta como UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class DateRange:
    """
    Value Object inmutable que representa un rango de fechas/horas.

    Attributes:
        start: Fecha/hora de inicio.
        end: Fecha/hora de fin. Siempre posterior a ``start``.
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValidationError(
                field="end_date",
                reasons=(
                    f"end date ({self.end.isoformat()}) must be after "
                    f"start date ({self.start.isoformat()})"
                ),
            )

    @property
    def duration(self) -> timedelta:
        """Retorna la duración del rango."""
        return self.end - self.start

    @property
    def days(self) -> int:
        """Días completos del rango."""
        return self.duration.days

    def overlaps_with(self, other: "DateRange") -> bool:
        """Verifica si este rango se superpone con otro."""
        return self.start < other.end and other.start < self.end

    def contains(self, dt: datetime) -> bool:
        """Verifica si una fecha está dentro del rango."""
        return self.start <= dt <= self.end

    def __str__(self) -> str:
        return f"{self.start.isoformat()} -> {self.end.isoformat()}"
