"""Interface EventPublisher - Puerto para publicar eventos de dominio."""

from abc import ABC, abstractmethod
from typing import Sequence

from reservations.domain.events import DomainEvent


class EventPublisher(ABC):
    """Publica los eventos de un agregado dentro de la transacción que los persiste."""

    @abstractmethod
    async def publish(self, events: Sequence[DomainEvent]) -> None:
        raise NotImplementedError
