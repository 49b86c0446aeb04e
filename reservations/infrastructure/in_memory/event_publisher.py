import logging
from typing import Sequence

from reservations.application.interfaces.event_publisher import EventPublisher
from reservations.domain.events import DomainEvent

logger = logging.getLogger(__name__)


class InMemoryEventPublisher(EventPublisher):
    """Guarda los eventos publicados en orden; útil para pruebas y demos."""

    def __init__(self) -> None:
        self.published: list[DomainEvent] = []

    async def publish(self, events: Sequence[DomainEvent]) -> None:
        for event in events:
            self.published.append(event)
            logger.info(
                "Domain event published: %s",
                event.event_type,
                extra={"event_id": event.event_id, "reservation_id": event.reservation_id},
            )
