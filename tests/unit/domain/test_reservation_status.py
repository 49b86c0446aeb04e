"""Tests de la tabla de transiciones de ReservationStatus."""

import pytest

from reservations.domain.errors import ErrorKind, NotFoundError
from reservations.domain.value_objects.reservation_status import (
    ALLOWED_TRANSITIONS,
    ReservationStatus,
)

CREATED = ReservationStatus.CREATED
CONFIRMED = ReservationStatus.CONFIRMED
CANCELLED = ReservationStatus.CANCELLED


class TestTransitions:
    @pytest.mark.parametrize(
        "current, target, allowed",
        [
            (CREATED, CONFIRMED, True),
            (CREATED, CANCELLED, True),
            (CREATED, CREATED, False),
            (CONFIRMED, CANCELLED, True),
            (CONFIRMED, CREATED, False),
            (CONFIRMED, CONFIRMED, False),
            (CANCELLED, CREATED, False),
            (CANCELLED, CONFIRMED, False),
            (CANCELLED, CANCELLED, False),
        ],
    )
    def test_can_transition_to(self, current, target, allowed):
        assert current.can_transition_to(target) is allowed

    def test_only_cancelled_is_terminal(self):
        assert [status for status in ReservationStatus if status.is_terminal] == [CANCELLED]

    def test_table_covers_every_status(self):
        assert set(ALLOWED_TRANSITIONS) == set(ReservationStatus)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            ALLOWED_TRANSITIONS[CANCELLED] = frozenset({CREATED})


class TestLookup:
    @pytest.mark.parametrize("name", ["Created", "Confirmed", "Cancelled"])
    def test_lookup_by_canonical_name(self, name):
        status = ReservationStatus.lookup(name)
        assert status.value == name
        assert str(status) == name

    def test_unknown_name_is_not_found(self):
        with pytest.raises(NotFoundError) as exc_info:
            ReservationStatus.lookup("Pending")

        assert exc_info.value.kind is ErrorKind.NOT_FOUND
        assert exc_info.value.aggregate_type == "ReservationStatus"
        assert exc_info.value.aggregate_id == "Pending"

    def test_equality_by_name(self):
        assert ReservationStatus.lookup("Confirmed") == CONFIRMED
        assert CONFIRMED == "Confirmed"
