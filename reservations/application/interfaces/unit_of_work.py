"""Interface UnitOfWork - Puerto para el límite transaccional."""

import logging
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

logger = logging.getLogger(__name__)


class UnitOfWork(ABC):
    """
    Coordina la persistencia atómica de los cambios registrados en los
    repositorios.
    """

    @abstractmethod
    async def save_changes(self) -> int:
        """
        Persiste los cambios pendientes.

        Returns:
            Número de agregados escritos.
        """
        raise NotImplementedError

    @abstractmethod
    async def begin_transaction(self) -> None:
        raise NotImplementedError

    @abstractmethod
    async def commit(self) -> None:
        raise NotImplementedError

    @abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """
        Abre una transacción y la confirma al salir.

        Cualquier fallo, incluida la cancelación de la tarea, provoca un
        rollback antes de propagarse.
        """
        await self.begin_transaction()
        try:
            yield
            await self.commit()
        except BaseException:
            logger.warning("Rolling back transaction", extra={"unit_of_work": type(self).__name__})
            await self.rollback()
            raise
