import logging
from typing import Any

from pytoniq import LiteBalancer, LiteClient
from pytoniq_core import Address, Cell, ExternalMsgInfo, MessageAny, StateInit

from clients.ton.base import ContractProvider
from clients.ton.dto import ContractState
from enums.account import AccountStatus

module_logger = logging.getLogger(__name__)


class LiteClientProvider(ContractProvider):
    def __init__(
        self,
        client: LiteBalancer | LiteClient,
        address: Address,
        init: StateInit | None = None,
    ):
        self.client = client
        self.address = address
        self.init = init

    async def get_state(self) -> ContractState:
        account = await self.client.get_account_state(self.address)
        status = AccountStatus(account.state.type_)

        module_logger.debug(
            f"State of {self.address.to_str()}: {status.value}, balance {account.balance}"
        )

        return ContractState(
            balance=account.balance,
            status=status,
        )

    async def get(self, method: str, stack: list[Any]) -> list[Any]:
        return await self.client.run_get_method(self.address, method, stack)

    async def external(self, message: Cell) -> None:
        init = None
        if self.init is not None:
            state = await self.get_state()
            if not state.is_active:
                init = self.init

        external_message = MessageAny(
            info=ExternalMsgInfo(src=None, dest=self.address, import_fee=0),
            init=init,
            body=message,
        )

        try:
            await self.client.raw_send_message(external_message.serialize().to_boc())
        except Exception as e:
            module_logger.error(
                f"Failed to send external message to {self.address.to_str()}: {e}"
            )
            raise
