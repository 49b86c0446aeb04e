import logging
import time
from typing import Any

from reservations.application.pipeline.behavior import Next
from reservations.domain.errors import DomainError

logger = logging.getLogger(__name__)


class LoggingBehavior:
    """
    Registra tipo de petición, resultado y duración alrededor de la
    continuación. Los errores se registran con su tipo y se relanzan sin
    cambios; nunca altera el resultado.
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log or logger

    async def __call__(self, request: Any, call_next: Next) -> Any:
        request_type = type(request).__name__
        self._logger.debug("Processing request %s", request_type)
        started = time.perf_counter()

        try:
            response = await call_next()
        except Exception as exc:
            elapsed_ms = (time.perf_counter() - started) * 1000
            error_kind = exc.kind.value if isinstance(exc, DomainError) else "INFRASTRUCTURE"
            self._logger.error(
                "Request %s failed after %.2fms",
                request_type,
                elapsed_ms,
                extra={
                    "request_type": request_type,
                    "outcome": "error",
                    "error_kind": error_kind,
                    "elapsed_ms": elapsed_ms,
                },
            )
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        outcome = "success" if getattr(response, "success", True) else "failure"
        self._logger.info(
            "Request %s completed with %s in %.2fms",
            request_type,
            outcome,
            elapsed_ms,
            extra={
                "request_type": request_type,
                "outcome": outcome,
                "elapsed_ms": elapsed_ms,
            },
        )
        return response
