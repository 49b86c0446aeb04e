"""Validadores de peticiones.

Cada validador reúne todos los fallos de su petición en lugar de detenerse
en el primero. Se registran una sola vez al arrancar (``build_validators``)
y la tabla resultante es de sólo lectura.
"""

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from reservations.application.commands import (
    CancelReservationCommand,
    ConfirmReservationCommand,
    CreateReservationCommand,
    GetReservationsQuery,
)
from reservations.application.interfaces.clock import Clock
from reservations.application.interfaces.validator import Validator
from reservations.domain.errors import ValidationFailure
from reservations.domain.value_objects.date_range import as_utc
from reservations.domain.value_objects.reservation_policy import ReservationPolicy


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class CreateReservationValidator:
    def __init__(self, clock: Clock, policy: ReservationPolicy) -> None:
        self._clock = clock
        self._policy = policy

    def validate(self, request: CreateReservationCommand) -> list[ValidationFailure]:
        failures: list[ValidationFailure] = []

        if _is_blank(request.customer_id):
            failures.append(
                ValidationFailure("customer_id", "customer id is required and cannot be empty")
            )

        start = as_utc(request.start_date)
        end = as_utc(request.end_date)
        earliest_start = as_utc(self._clock.now()) + self._policy.min_start_offset
        if start < earliest_start:
            failures.append(
                ValidationFailure(
                    "start_date",
                    f"start date must be at least {self._policy.min_start_offset} in the future",
                )
            )

        if end <= start:
            failures.append(ValidationFailure("end_date", "end date must be after start date"))
        elif end - start > self._policy.max_duration:
            failures.append(
                ValidationFailure(
                    "end_date",
                    f"reservation duration cannot exceed {self._policy.max_duration.days} days",
                )
            )

        return failures


class ConfirmReservationValidator:
    def validate(self, request: ConfirmReservationCommand) -> list[ValidationFailure]:
        if _is_blank(request.reservation_id):
            return [ValidationFailure("reservation_id", "reservation id is required")]
        return []


class CancelReservationValidator:
    def validate(self, request: CancelReservationCommand) -> list[ValidationFailure]:
        failures: list[ValidationFailure] = []
        if _is_blank(request.reservation_id):
            failures.append(ValidationFailure("reservation_id", "reservation id is required"))
        # Optional, but a supplied reason must carry text.
        if request.reason is not None and _is_blank(request.reason):
            failures.append(
                ValidationFailure(
                    "reason",
                    "if provided, reason cannot be empty or contain only whitespace",
                )
            )
        return failures


class GetReservationsValidator:
    def validate(self, request: GetReservationsQuery) -> list[ValidationFailure]:
        if _is_blank(request.customer_id):
            return [
                ValidationFailure("customer_id", "customer id is required and cannot be empty")
            ]
        return []


def build_validators(
    clock: Clock, policy: ReservationPolicy
) -> Mapping[type, Sequence[Validator]]:
    """Tabla de validadores por tipo de petición."""
    return MappingProxyType(
        {
            CreateReservationCommand: (CreateReservationValidator(clock, policy),),
            ConfirmReservationCommand: (ConfirmReservationValidator(),),
            CancelReservationCommand: (CancelReservationValidator(),),
            GetReservationsQuery: (GetReservationsValidator(),),
        }
    )
