"""Pipeline de peticiones: validación, logging y despacho."""

from reservations.application.pipeline.behavior import Behavior, Next, compose
from reservations.application.pipeline.logging_behavior import LoggingBehavior
from reservations.application.pipeline.mediator import GENERIC_FAILURE_MESSAGE, Mediator
from reservations.application.pipeline.validation_behavior import ValidationBehavior

__all__ = [
    "Behavior",
    "GENERIC_FAILURE_MESSAGE",
    "LoggingBehavior",
    "Mediator",
    "Next",
    "ValidationBehavior",
    "compose",
]
