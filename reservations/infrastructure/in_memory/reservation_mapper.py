"""Conversión entre el agregado Reservation y su fila persistida."""

from datetime import datetime
from types import MappingProxyType
from typing import Any

from reservations.domain.entities.reservation import Reservation
from reservations.domain.value_objects.reservation_status import ReservationStatus

STATUS_TO_NAME: MappingProxyType[ReservationStatus, str] = MappingProxyType(
    {
        ReservationStatus.CREATED: "Created",
        ReservationStatus.CONFIRMED: "Confirmed",
        ReservationStatus.CANCELLED: "Cancelled",
    }
)
NAME_TO_STATUS: MappingProxyType[str, ReservationStatus] = MappingProxyType(
    {name: status for status, name in STATUS_TO_NAME.items()}
)


def status_to_name(status: ReservationStatus) -> str:
    return STATUS_TO_NAME[status]


def status_from_name(name: str) -> ReservationStatus:
    try:
        return NAME_TO_STATUS[name]
    except KeyError:
        raise ValueError(f"Unknown stored reservation status: {name!r}") from None


def _to_iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def _from_iso(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


def to_row(reservation: Reservation) -> dict[str, Any]:
    return {
        "id": reservation.id,
        "customer_id": reservation.customer_id,
        "start_date": _to_iso(reservation.start_date),
        "end_date": _to_iso(reservation.end_date),
        "status": status_to_name(reservation.status),
        "created_at": _to_iso(reservation.created_at),
        "modified_at": _to_iso(reservation.modified_at),
        "confirmed_at": _to_iso(reservation.confirmed_at),
        "cancelled_at": _to_iso(reservation.cancelled_at),
        "cancellation_reason": reservation.cancellation_reason,
        "lock_version": reservation.lock_version,
    }


def from_row(row: dict[str, Any]) -> Reservation:
    return Reservation.reconstitute(
        reservation_id=row["id"],
        customer_id=row["customer_id"],
        start_date=_from_iso(row["start_date"]),
        end_date=_from_iso(row["end_date"]),
        status=status_from_name(row["status"]),
        created_at=_from_iso(row["created_at"]),
        modified_at=_from_iso(row["modified_at"]),
        confirmed_at=_from_iso(row["confirmed_at"]),
        cancelled_at=_from_iso(row["cancelled_at"]),
        cancellation_reason=row["cancellation_reason"],
        lock_version=row["lock_version"],
    )
