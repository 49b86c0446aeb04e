from datetime import timedelta

import pytest

from reservations.domain.value_objects.reservation_status import ReservationStatus
from reservations.infrastructure.in_memory.reservation_mapper import (
    from_row,
    status_from_name,
    status_to_name,
    to_row,
)


@pytest.mark.parametrize("status", list(ReservationStatus))
def test_status_mapping_is_total_and_bidirectional(status):
    assert status_from_name(status_to_name(status)) is status


def test_unknown_stored_name_is_rejected():
    with pytest.raises(ValueError, match="Unknown stored reservation status"):
        status_from_name("PENDING")


def test_row_keeps_every_field(make_reservation, now):
    reservation = make_reservation()
    reservation.confirm(now=now)
    reservation.lock_version = 3

    restored = from_row(to_row(reservation))

    assert restored == reservation
    assert restored.status is ReservationStatus.CONFIRMED
    assert restored.start_date == reservation.start_date
    assert restored.modified_at == now
    assert restored.lock_version == 3
    assert restored.pull_events() == []
    assert restored.confirmed_at == now
    assert restored.cancelled_at is None


def test_row_keeps_cancellation_audit(make_reservation, now):
    reservation = make_reservation()
    reservation.confirm(now=now)
    later = now + timedelta(hours=1)
    reservation.cancel(now=later, reason="duplicate")

    row = to_row(reservation)
    restored = from_row(row)

    assert row["cancelled_at"] == later.isoformat()
    assert restored.confirmed_at == now
    assert restored.cancelled_at == later
    assert restored.cancellation_reason == "duplicate"
