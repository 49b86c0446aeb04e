from datetime import timedelta

import pytest

from reservations.application.commands import (
    CancelReservationCommand,
    ConfirmReservationCommand,
    CreateReservationCommand,
    GetReservationsQuery,
)
from reservations.application.validators import (
    CancelReservationValidator,
    ConfirmReservationValidator,
    CreateReservationValidator,
    GetReservationsValidator,
    build_validators,
)


@pytest.fixture
def create_validator(clock, policy):
    return CreateReservationValidator(clock, policy)


def fields(failures):
    return [failure.field for failure in failures]


class TestCreateReservationValidator:
    def test_valid_command_has_no_failures(self, create_validator, now, policy):
        start = now + policy.min_start_offset
        command = CreateReservationCommand(
            customer_id="c1", start_date=start, end_date=start + timedelta(days=3)
        )

        assert create_validator.validate(command) == []

    def test_collects_every_failure(self, create_validator, now):
        command = CreateReservationCommand(customer_id=" ", start_date=now, end_date=now)

        failures = create_validator.validate(command)

        assert fields(failures) == ["customer_id", "start_date", "end_date"]

    def test_start_inside_offset_window(self, create_validator, now, policy):
        start = now + policy.min_start_offset - timedelta(minutes=1)
        command = CreateReservationCommand(
            customer_id="c1", start_date=start, end_date=start + timedelta(days=1)
        )

        assert fields(create_validator.validate(command)) == ["start_date"]

    def test_duration_over_limit(self, create_validator, now):
        start = now + timedelta(days=2)
        command = CreateReservationCommand(
            customer_id="c1", start_date=start, end_date=start + timedelta(days=366)
        )

        failures = create_validator.validate(command)

        assert fields(failures) == ["end_date"]
        assert "365 days" in failures[0].message


class TestOtherValidators:
    @pytest.mark.parametrize("reservation_id", ["", "  "])
    def test_confirm_requires_id(self, reservation_id):
        failures = ConfirmReservationValidator().validate(
            ConfirmReservationCommand(reservation_id=reservation_id)
        )
        assert fields(failures) == ["reservation_id"]

    def test_cancel_reason_optional(self):
        command = CancelReservationCommand(reservation_id="r-1")
        assert CancelReservationValidator().validate(command) == []

    def test_cancel_rejects_blank_reason(self):
        command = CancelReservationCommand(reservation_id="", reason="   ")
        failures = CancelReservationValidator().validate(command)
        assert fields(failures) == ["reservation_id", "reason"]

    def test_query_requires_customer(self):
        failures = GetReservationsValidator().validate(GetReservationsQuery(customer_id=""))
        assert fields(failures) == ["customer_id"]


def test_registry_covers_every_request_and_is_read_only(clock, policy):
    registry = build_validators(clock, policy)

    assert set(registry) == {
        CreateReservationCommand,
        ConfirmReservationCommand,
        CancelReservationCommand,
        GetReservationsQuery,
    }
    with pytest.raises(TypeError):
        registry[CreateReservationCommand] = ()
