import asyncio
import unittest
from unittest.mock import AsyncMock

from reservations.application.commands import (
    CancelReservationCommand,
    ConfirmReservationCommand,
    GetReservationsQuery,
)
from reservations.application.dtos.reservation_dto import OperationResult
from reservations.application.pipeline import (
    GENERIC_FAILURE_MESSAGE,
    LoggingBehavior,
    Mediator,
    ValidationBehavior,
)
from reservations.domain.errors import InfrastructureFault, InvalidStateError, ValidationFailure


class RejectAll:
    def validate(self, request):
        return [ValidationFailure("reservation_id", "reservation id is required")]


class TestMediator(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.mediator = Mediator(
            behaviors=[
                ValidationBehavior({CancelReservationCommand: (RejectAll(),)}),
                LoggingBehavior(),
            ]
        )

    def register(self, handler, request_type=ConfirmReservationCommand):
        self.mediator.register(request_type, handler, OperationResult.failure)

    async def test_returns_handler_result(self):
        expected = OperationResult(success=True)
        self.register(AsyncMock(return_value=expected))

        result = await self.mediator.freeze().send(ConfirmReservationCommand(reservation_id="r-1"))

        self.assertIs(result, expected)

    async def test_validation_rejection_becomes_failure(self):
        handler = AsyncMock()
        self.register(handler, CancelReservationCommand)

        result = await self.mediator.send(CancelReservationCommand(reservation_id="r-1"))

        self.assertFalse(result.success)
        self.assertIn("reservation_id: reservation id is required", result.error_message)
        handler.assert_not_called()

    async def test_escaped_domain_error_becomes_failure(self):
        self.register(AsyncMock(side_effect=InvalidStateError("Cancelled", "confirm")))

        result = await self.mediator.send(ConfirmReservationCommand(reservation_id="r-1"))

        self.assertFalse(result.success)
        self.assertIn("Cannot perform 'confirm'", result.error_message)

    async def test_infrastructure_fault_is_logged_and_hidden(self):
        fault = InfrastructureFault("UnitOfWork", "connection reset by peer")
        self.register(AsyncMock(side_effect=fault))

        with self.assertLogs("reservations.application.pipeline.mediator", level="ERROR") as logs:
            result = await self.mediator.send(
                ConfirmReservationCommand(reservation_id="r-1"), correlation_id="corr-42"
            )

        self.assertFalse(result.success)
        self.assertEqual(result.error_message, GENERIC_FAILURE_MESSAGE)
        self.assertNotIn("connection reset", result.error_message)
        record = logs.records[0]
        self.assertEqual(record.collaborator, "UnitOfWork")
        self.assertEqual(record.correlation_id, "corr-42")
        self.assertEqual(record.request_type, "ConfirmReservationCommand")
        self.assertTrue(record.error_id)

    async def test_unexpected_exception_reports_unknown_collaborator(self):
        self.register(AsyncMock(side_effect=RuntimeError("boom")))

        with self.assertLogs("reservations.application.pipeline.mediator", level="ERROR") as logs:
            result = await self.mediator.send(ConfirmReservationCommand(reservation_id="r-1"))

        self.assertEqual(result.error_message, GENERIC_FAILURE_MESSAGE)
        self.assertEqual(logs.records[0].collaborator, "unknown")

    async def test_cancellation_is_not_converted(self):
        self.register(AsyncMock(side_effect=asyncio.CancelledError()))

        with self.assertRaises(asyncio.CancelledError):
            await self.mediator.send(ConfirmReservationCommand(reservation_id="r-1"))

    async def test_unregistered_request_type(self):
        with self.assertRaises(LookupError):
            await self.mediator.send(GetReservationsQuery(customer_id="c1"))

    def test_registration_rules(self):
        self.register(AsyncMock())

        with self.assertRaises(ValueError):
            self.register(AsyncMock())

        self.mediator.freeze()
        self.assertEqual(self.mediator.registered_types, (ConfirmReservationCommand,))
        with self.assertRaises(RuntimeError):
            self.register(AsyncMock(), GetReservationsQuery)
