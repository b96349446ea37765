from abc import ABC, abstractmethod
from typing import Any

from pytoniq_core import Cell

from clients.ton.dto import ContractState


class ContractProvider(ABC):
    """Access to a single contract on a remote ledger.

    Implementations are bound to one address. Errors raised by the
    underlying transport are not caught.
    """

    @abstractmethod
    async def get_state(self) -> ContractState:
        pass

    @abstractmethod
    async def get(self, method: str, stack: list[Any]) -> list[Any]:
        pass

    @abstractmethod
    async def external(self, message: Cell) -> None:
        pass
