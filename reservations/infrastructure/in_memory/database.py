"""Almacén en memoria compartido por las unidades de trabajo."""

from typing import Any


class InMemoryDatabase:
    """Filas de reservaciones indexadas por ID, tal como las escribe el mapper."""

    def __init__(self) -> None:
        self.rows: dict[str, dict[str, Any]] = {}
