"""Comportamientos del pipeline y su composición.

Un comportamiento envuelve la ejecución de cualquier petición:
``(request, call_next) -> response``. La composición se hace una sola vez
por tipo de petición y produce una única función.
"""

from collections.abc import Awaitable, Callable, Sequence
from typing import Any, Protocol

Next = Callable[[], Awaitable[Any]]
RequestHandler = Callable[[Any], Awaitable[Any]]


class Behavior(Protocol):
    async def __call__(self, request: Any, call_next: Next) -> Any:
        ...


def compose(behaviors: Sequence[Behavior], handler: RequestHandler) -> RequestHandler:
    """
    Encadena ``behaviors`` alrededor de ``handler``.

    El primer comportamiento de la lista es el más externo; el handler
    termina la cadena.
    """
    chain = handler
    for behavior in reversed(behaviors):
        chain = _wrap(behavior, chain)
    return chain


def _wrap(behavior: Behavior, inner: RequestHandler) -> RequestHandler:
    async def step(request: Any) -> Any:
        return await behavior(request, lambda: inner(request))

    return step
