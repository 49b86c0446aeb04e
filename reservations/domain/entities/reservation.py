"""Entidad Reservation - Agregado raíz del dominio."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from reservations.domain.errors import (
    BusinessRuleViolationError,
    InvalidStateError,
    ValidationError,
)
from reservations.domain.events import (
    DomainEvent,
    ReservationCancelled,
    ReservationConfirmed,
    ReservationCreated,
)
from reservations.domain.value_objects.date_range import DateRange, as_utc
from reservations.domain.value_objects.reservation_policy import (
    DEFAULT_POLICY,
    ReservationPolicy,
)
from reservations.domain.value_objects.reservation_status import ReservationStatus

NO_CANCEL_AFTER_START = "NoCancelAfterStart"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _require_customer(customer_id: str) -> None:
    if not customer_id or not customer_id.strip():
        raise ValidationError("customer_id", "customer id is required and cannot be empty")


@dataclass(eq=False)
class Reservation:
    """
    Agregado raíz de una reservación.

    Se construye sólo con ``create`` (o ``reconstitute`` desde persistencia) y
    se modifica sólo con ``confirm`` y ``cancel``. Ninguna operación hace I/O.

    Reglas de negocio:
    1. ``start_date < end_date`` y la duración no excede la política.
    2. Al crear, el inicio está al menos ``min_start_offset`` en el futuro.
    3. Sólo una reservación ``Created`` puede confirmarse.
    4. Una reservación confirmada no puede cancelarse después de su inicio.
    5. ``Cancelled`` es terminal.
    """

    id: str
    customer_id: str
    start_date: datetime
    end_date: datetime
    status: ReservationStatus
    created_at: datetime
    modified_at: datetime | None = None

    # Auditoría
    confirmed_at: datetime | None = None
    cancelled_at: datetime | None = None
    cancellation_reason: str | None = None

    # Control de concurrencia, administrado por el repositorio
    lock_version: int = 0

    _events: list[DomainEvent] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        # Toda instancia, venga de donde venga, cumple las invariantes estructurales.
        _require_customer(self.customer_id)
        DateRange(start=as_utc(self.start_date), end=as_utc(self.end_date))

    # === Factories ===

    @classmethod
    def create(
        cls,
        customer_id: str,
        start_date: datetime,
        end_date: datetime,
        now: datetime,
        policy: ReservationPolicy = DEFAULT_POLICY,
        reservation_id: str | None = None,
    ) -> "Reservation":
        """
        Crea una nueva reservación validando todas las invariantes.

        Raises:
            ValidationError: con el campo ofensivo; no se produce ningún
                agregado parcial.
        """
        _require_customer(customer_id)

        now = as_utc(now)
        period = DateRange(start=as_utc(start_date), end=as_utc(end_date))

        earliest_start = now + policy.min_start_offset
        if period.start < earliest_start:
            raise ValidationError(
                "start_date",
                f"start date must be at least {policy.min_start_offset} in the future "
                f"(earliest allowed: {earliest_start.isoformat()})",
            )
        if period.duration > policy.max_duration:
            raise ValidationError(
                "end_date",
                f"reservation duration cannot exceed {policy.max_duration.days} days",
            )

        reservation = cls(
            id=reservation_id or str(uuid.uuid4()),
            customer_id=customer_id,
            start_date=period.start,
            end_date=period.end,
            status=ReservationStatus.CREATED,
            created_at=now,
        )
        reservation._record(
            ReservationCreated(
                reservation_id=reservation.id,
                occurred_at=now,
                customer_id=customer_id,
                start_date=period.start,
                end_date=period.end,
            )
        )
        return reservation

    @classmethod
    def reconstitute(
        cls,
        reservation_id: str,
        customer_id: str,
        start_date: datetime,
        end_date: datetime,
        status: ReservationStatus,
        created_at: datetime,
        modified_at: datetime | None = None,
        cancellation_reason: str | None = None,
        lock_version: int = 0,
        confirmed_at: datetime | None = None,
        cancelled_at: datetime | None = None,
    ) -> "Reservation":
        """
        Rehidrata una reservación ya persistida.

        Uso exclusivo del colaborador de persistencia. La regla de inicio
        futuro es relativa al momento de creación y no se vuelve a evaluar.
        """
        period = DateRange(start=as_utc(start_date), end=as_utc(end_date))
        return cls(
            id=reservation_id,
            customer_id=customer_id,
            start_date=period.start,
            end_date=period.end,
            status=status,
            created_at=as_utc(created_at),
            modified_at=as_utc(modified_at) if modified_at else None,
            confirmed_at=as_utc(confirmed_at) if confirmed_at else None,
            cancelled_at=as_utc(cancelled_at) if cancelled_at else None,
            cancellation_reason=cancellation_reason,
            lock_version=lock_version,
        )

    # === Métodos de negocio ===

    def confirm(self, now: datetime | None = None) -> None:
        """Confirma la reservación (``Created`` -> ``Confirmed``)."""
        if not self.status.can_transition_to(ReservationStatus.CONFIRMED):
            raise InvalidStateError(
                current_state=self.status.value,
                requested_operation="confirm",
                detail="Only 'Created' reservations can be confirmed.",
            )

        now = as_utc(now) if now else _utcnow()
        self.status = ReservationStatus.CONFIRMED
        self.modified_at = now
        self.confirmed_at = now
        self._record(ReservationConfirmed(reservation_id=self.id, occurred_at=now))

    def cancel(self, now: datetime | None = None, reason: str | None = None) -> None:
        """
        Cancela la reservación.

        Args:
            now: Momento de la cancelación.
            reason: Motivo opcional, guardado para auditoría.
        """
        if not self.status.can_transition_to(ReservationStatus.CANCELLED):
            raise InvalidStateError(
                current_state=self.status.value,
                requested_operation="cancel",
                detail="The reservation is already cancelled.",
            )

        now = as_utc(now) if now else _utcnow()
        if self.status == ReservationStatus.CONFIRMED and now >= self.start_date:
            raise BusinessRuleViolationError(
                rule_name=NO_CANCEL_AFTER_START,
                detail=(
                    "cannot cancel a confirmed reservation after its start date "
                    f"({self.start_date.isoformat()})"
                ),
            )

        self.status = ReservationStatus.CANCELLED
        self.modified_at = now
        self.cancelled_at = now
        self.cancellation_reason = reason
        self._record(
            ReservationCancelled(reservation_id=self.id, occurred_at=now, reason=reason)
        )

    # === Consultas ===

    @property
    def period(self) -> DateRange:
        return DateRange(start=self.start_date, end=self.end_date)

    @property
    def duration_days(self) -> int:
        return self.period.days

    def has_started(self, now: datetime) -> bool:
        return as_utc(now) >= self.start_date

    def has_ended(self, now: datetime) -> bool:
        return as_utc(now) >= self.end_date

    def is_active(self, now: datetime) -> bool:
        """No cancelada y aún no terminada."""
        return self.status != ReservationStatus.CANCELLED and not self.has_ended(now)

    # === Eventos ===

    def pull_events(self) -> list[DomainEvent]:
        """Retorna y limpia los eventos registrados."""
        events, self._events = self._events, []
        return events

    def _record(self, event: DomainEvent) -> None:
        self._events.append(event)

    # Identidad

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Reservation):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
