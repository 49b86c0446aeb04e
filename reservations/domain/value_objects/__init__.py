"""Value Objects del dominio de reservaciones."""

from reservations.domain.value_objects.date_range import DateRange
from reservations.domain.value_objects.reservation_policy import (
    DEFAULT_POLICY,
    ReservationPolicy,
)
from reservations.domain.value_objects.reservation_status import (
    ALLOWED_TRANSITIONS,
    ReservationStatus,
)

__all__ = [
    "ALLOWED_TRANSITIONS",
    "DEFAULT_POLICY",
    "DateRange",
    "ReservationPolicy",
    "ReservationStatus",
]
