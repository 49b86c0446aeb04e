"""Interface Validator - Puerto para validadores de peticiones."""

from typing import Protocol, TypeVar

from reservations.domain.errors import ValidationFailure

RequestT = TypeVar("RequestT", contravariant=True)


class Validator(Protocol[RequestT]):
    """
    Valida una petición y retorna todos sus fallos.

    La validación es síncrona y sin efectos secundarios; una lista vacía
    significa que la petición es válida.
    """

    def validate(self, request: RequestT) -> list[ValidationFailure]:
        ...
