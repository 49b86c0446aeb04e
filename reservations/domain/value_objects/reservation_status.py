"""Value Object ReservationStatus - ciclo de vida de una reservación."""

from enum import Enum
from types import MappingProxyType

from reservations.domain.errors import NotFoundError


class ReservationStatus(str, Enum):
    """
    Estados posibles de una reservación.

    El valor es el nombre canónico; la igualdad es por nombre. Las
    transiciones legales se deciden sólo con la tabla estática
    ``ALLOWED_TRANSITIONS``.
    """

    CREATED = "Created"
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"

    def can_transition_to(self, other: "ReservationStatus") -> bool:
        """Indica si la tabla permite pasar de este estado a ``other``."""
        return other in ALLOWED_TRANSITIONS[self]

    @property
    def is_terminal(self) -> bool:
        """Un estado sin transiciones salientes."""
        return not ALLOWED_TRANSITIONS[self]

    @classmethod
    def lookup(cls, name: str) -> "ReservationStatus":
        """
        Busca un estado por su nombre canónico.

        Raises:
            NotFoundError: si el nombre no corresponde a ningún estado.
        """
        for status in cls:
            if status.value == name:
                return status
        raise NotFoundError(aggregate_type=cls.__name__, aggregate_id=name)

    def __str__(self) -> str:
        return self.value


# Read-only after import.
ALLOWED_TRANSITIONS: MappingProxyType[ReservationStatus, frozenset[ReservationStatus]] = (
    MappingProxyType(
        {
            ReservationStatus.CREATED: frozenset(
                {ReservationStatus.CONFIRMED, ReservationStatus.CANCELLED}
            ),
            ReservationStatus.CONFIRMED: frozenset({ReservationStatus.CANCELLED}),
            ReservationStatus.CANCELLED: frozenset(),
        }
    )
)
