"""Excepciones de dominio para el sistema de reservaciones.

Cada error lleva un discriminante explícito (``kind``) y un payload
estructurado. El código que traduce errores a resultados hace ``match``
sobre ``kind`` en lugar de depender del tipo concreto de la excepción.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class ErrorKind(str, Enum):
    """Tipos cerrados de error de dominio."""

    VALIDATION = "VALIDATION"
    INVALID_STATE = "INVALID_STATE"
    BUSINESS_RULE = "BUSINESS_RULE"
    CONFLICT = "CONFLICT"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class ValidationFailure:
    """Un fallo de validación atribuido a un campo."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class DomainError(Exception):
    """Clase base para todos los errores de dominio."""

    kind: ErrorKind

    # Todos los errores del dominio son semánticos: nunca se reintentan y
    # siempre se pueden mostrar al cliente.
    retryable = False
    client_visible = True

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


# === Errores de Validación ===


class ValidationError(DomainError):
    """Entrada mal formada para una factory u operación."""

    kind = ErrorKind.VALIDATION

    def __init__(self, field: str, reasons: str | Sequence[str]):
        reasons = [reasons] if isinstance(reasons, str) else list(reasons)
        super().__init__(
            message=f"Validation failed for '{field}': {'; '.join(reasons)}",
            code="VALIDATION_FAILED",
        )
        self.field = field
        self.reasons = reasons


class RequestValidationError(ValidationError):
    """Una petición fue rechazada por sus validadores registrados."""

    def __init__(self, request_type: str, failures: Sequence[ValidationFailure]):
        self.failures = list(failures)
        fields = sorted({failure.field for failure in self.failures})
        super().__init__(
            field=", ".join(fields),
            reasons=[str(failure) for failure in self.failures],
        )
        self.message = f"Validation failed for {request_type}: " + "; ".join(
            str(failure) for failure in self.failures
        )
        self.args = (self.message,)
        self.request_type = request_type


# === Errores de Estado ===


class InvalidStateError(DomainError):
    """La tabla de transiciones no permite la operación pedida."""

    kind = ErrorKind.INVALID_STATE

    def __init__(self, current_state: str, requested_operation: str, detail: str = ""):
        message = (
            f"Cannot perform '{requested_operation}' when reservation is in "
            f"'{current_state}' state."
        )
        if detail:
            message = f"{message} {detail}"
        super().__init__(message=message, code="INVALID_STATE")
        self.current_state = current_state
        self.requested_operation = requested_operation


class BusinessRuleViolationError(DomainError):
    """Transición permitida por la tabla pero prohibida por una regla de negocio."""

    kind = ErrorKind.BUSINESS_RULE

    def __init__(self, rule_name: str, detail: str):
        super().__init__(
            message=f"Business rule violation [{rule_name}]: {detail}",
            code="BR_VIOLATION",
        )
        self.rule_name = rule_name


# === Errores de Persistencia ===


class ConflictError(DomainError):
    """Violación de unicidad o de concurrencia detectada por un colaborador."""

    kind = ErrorKind.CONFLICT

    def __init__(self, aggregate_type: str, conflicting_identifier: str, detail: str):
        super().__init__(
            message=f"Conflict with {aggregate_type} '{conflicting_identifier}': {detail}",
            code="AGGREGATE_CONFLICT",
        )
        self.aggregate_type = aggregate_type
        self.conflicting_identifier = conflicting_identifier


class NotFoundError(DomainError):
    """La búsqueda no encontró el agregado."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, aggregate_type: str, aggregate_id: object):
        super().__init__(
            message=f"{aggregate_type} with ID '{aggregate_id}' not found.",
            code="NOT_FOUND",
        )
        self.aggregate_type = aggregate_type
        self.aggregate_id = aggregate_id


# === Fallos de Infraestructura ===


class InfrastructureFault(Exception):
    """Fallo de un colaborador que no pertenece a la taxonomía de dominio.

    Indica que el resultado de la operación no es confiable, por lo que se
    deja propagar hasta el límite superior de errores.
    """

    def __init__(self, collaborator: str, message: str = "collaborator failure"):
        super().__init__(f"{collaborator}: {message}")
        self.collaborator = collaborator
