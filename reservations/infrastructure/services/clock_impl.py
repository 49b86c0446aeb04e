"""Implementación real del servicio de reloj."""

from datetime import datetime, timezone

from reservations.application.interfaces.clock import Clock


class SystemClock(Clock):
    """
    Reloj del sistema, siempre en UTC.

    Para testing, usar FakeClock de application.interfaces.clock.
    """

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
