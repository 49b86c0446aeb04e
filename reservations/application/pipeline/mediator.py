"""Mediator: tabla de registro de peticiones y límite superior de errores."""

import logging
import uuid
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from reservations.application.pipeline.behavior import Behavior, RequestHandler, compose
from reservations.domain.errors import DomainError, InfrastructureFault

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = (
    "The reservation service is temporarily unavailable. Please retry later."
)


@dataclass(frozen=True)
class _Registration:
    pipeline: RequestHandler
    on_failure: Callable[[str], Any]


class Mediator:
    """
    Despacha cada petición a través del pipeline compuesto para su tipo.

    Los comportamientos se fijan al construir el mediator y se componen una
    sola vez por registro. ``send`` es el límite superior de errores: ningún
    error de dominio ni fallo de infraestructura llega al llamador como
    excepción.
    """

    def __init__(self, behaviors: Sequence[Behavior]) -> None:
        self._behaviors = tuple(behaviors)
        self._registrations: dict[type, _Registration] = {}
        self._frozen = False

    def register(
        self,
        request_type: type,
        handler: RequestHandler,
        on_failure: Callable[[str], Any],
    ) -> None:
        """
        Registra el handler de un tipo de petición.

        Args:
            request_type: Clase de la petición.
            handler: Corrutina que termina la cadena.
            on_failure: Construye el resultado de fallo a partir de un mensaje.
        """
        if self._frozen:
            raise RuntimeError("Mediator registrations are closed")
        if request_type in self._registrations:
            raise ValueError(f"A handler is already registered for {request_type.__name__}")
        self._registrations[request_type] = _Registration(
            pipeline=compose(self._behaviors, handler),
            on_failure=on_failure,
        )

    def freeze(self) -> "Mediator":
        """Cierra el registro; a partir de aquí la tabla es de sólo lectura."""
        self._registrations = MappingProxyType(dict(self._registrations))
        self._frozen = True
        return self

    @property
    def registered_types(self) -> tuple[type, ...]:
        return tuple(self._registrations)

    async def send(self, request: Any, correlation_id: str | None = None) -> Any:
        registration = self._registrations.get(type(request))
        if registration is None:
            raise LookupError(f"No handler registered for {type(request).__name__}")

        request_type = type(request).__name__
        correlation_id = correlation_id or uuid.uuid4().hex

        try:
            return await registration.pipeline(request)
        except DomainError as exc:
            logger.info(
                "Request %s rejected",
                request_type,
                extra={
                    "request_type": request_type,
                    "correlation_id": correlation_id,
                    "error_kind": exc.kind.value,
                    "error_code": exc.code,
                },
            )
            return registration.on_failure(exc.message)
        except Exception as exc:
            error_id = str(uuid.uuid4())
            collaborator = (
                exc.collaborator if isinstance(exc, InfrastructureFault) else "unknown"
            )
            # Full context stays in the log; the caller only gets the generic message.
            logger.error(
                "Unhandled fault while processing %s",
                request_type,
                exc_info=exc,
                extra={
                    "error_id": error_id,
                    "request_type": request_type,
                    "correlation_id": correlation_id,
                    "collaborator": collaborator,
                },
            )
            return registration.on_failure(GENERIC_FAILURE_MESSAGE)
