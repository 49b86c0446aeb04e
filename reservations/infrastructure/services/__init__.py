from reservations.infrastructure.services.clock_impl import SystemClock

__all__ = ["SystemClock"]
