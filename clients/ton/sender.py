import logging
from typing import TYPE_CHECKING

from pytoniq_core import Address

from clients.ton.base import ContractProvider
from clients.ton.dto import SenderArguments
from clients.ton.messages import internal_from_args
from enums.send_mode import SendMode

if TYPE_CHECKING:
    from clients.ton.wallet import WalletContractV4

module_logger = logging.getLogger(__name__)


class WalletSender:
    def __init__(
        self,
        wallet: "WalletContractV4",
        provider: ContractProvider,
        secret_key: bytes,
    ):
        self.wallet = wallet
        self.provider = provider
        self._secret_key = secret_key

    @property
    def address(self) -> Address:
        return self.wallet.address

    async def send(self, args: SenderArguments) -> None:
        await self._send_messages([args], args.send_mode)

    async def sends(
        self,
        messages: list[SenderArguments],
        send_mode: SendMode | None = None,
    ) -> None:
        await self._send_messages(messages, send_mode)

    async def _send_messages(
        self,
        messages: list[SenderArguments],
        send_mode: SendMode | None,
    ) -> None:
        seqno = await self.wallet.get_seqno(self.provider)

        transfer = self.wallet.create_transfer(
            seqno,
            [internal_from_args(args) for args in messages],
            self._secret_key,
            send_mode=send_mode,
        )

        module_logger.info(
            f"Sender {self.address.to_str()} submitting {len(messages)} "
            f"message(s) at seqno {seqno}"
        )
        await self.wallet.send(self.provider, transfer)
