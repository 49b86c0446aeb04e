"""Handlers de comandos y consultas."""

from reservations.application.use_cases.cancel_reservation import CancelReservationHandler
from reservations.application.use_cases.confirm_reservation import ConfirmReservationHandler
from reservations.application.use_cases.create_reservation import CreateReservationHandler
from reservations.application.use_cases.get_reservations import GetReservationsHandler

__all__ = [
    "CancelReservationHandler",
    "ConfirmReservationHandler",
    "CreateReservationHandler",
    "GetReservationsHandler",
]
