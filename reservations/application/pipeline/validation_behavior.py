import logging
from collections.abc import Mapping, Sequence
from typing import Any

from reservations.application.interfaces.validator import Validator
from reservations.application.pipeline.behavior import Next
from reservations.domain.errors import RequestValidationError, ValidationFailure

logger = logging.getLogger(__name__)


class ValidationBehavior:
    """
    Ejecuta todos los validadores registrados para el tipo de la petición.

    Si hay fallos lanza ``RequestValidationError`` con la lista completa y no
    invoca la continuación. Sin validadores registrados, deja pasar.
    """

    def __init__(self, validators: Mapping[type, Sequence[Validator]]) -> None:
        self._validators = validators

    async def __call__(self, request: Any, call_next: Next) -> Any:
        request_type = type(request).__name__
        validators = self._validators.get(type(request), ())

        if not validators:
            logger.debug("No validators registered for %s", request_type)
            return await call_next()

        failures: list[ValidationFailure] = []
        for validator in validators:
            failures.extend(validator.validate(request))

        if failures:
            logger.warning(
                "Validation failed for %s",
                request_type,
                extra={
                    "request_type": request_type,
                    "validation_errors": [str(failure) for failure in failures],
                },
            )
            raise RequestValidationError(request_type, failures)

        logger.debug("Validation passed for %s", request_type)
        return await call_next()
