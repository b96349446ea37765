import logging

from pytoniq import LiteBalancer
from pytoniq_core import Address, StateInit

from chains.dto import ChainConfig
from clients.ton.provider import LiteClientProvider
from clients.ton.wallet import WalletContractV4
from config import settings

module_logger = logging.getLogger(__name__)


class TonClientFactory:
    def __init__(self, chain_config: ChainConfig, client: LiteBalancer | None = None):
        self.chain_config = chain_config
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self):
        if self._client is None:
            if self.chain_config.is_testnet:
                client = LiteBalancer.from_testnet_config(
                    trust_level=settings.LITESERVER_TRUST_LEVEL
                )
            else:
                client = LiteBalancer.from_mainnet_config(
                    trust_level=settings.LITESERVER_TRUST_LEVEL
                )

            module_logger.info(f"Connecting to {self.chain_config.display_name} liteservers")
            try:
                await client.start_up()
            except Exception as e:
                module_logger.error(
                    f"Failed to start {self.chain_config.display_name} liteserver client: {e}"
                )
                await client.close_all()
                raise

            self._client = client
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._client is not None and self._owns_client:
            await self._client.close_all()

            self._client = None

    @property
    def client(self) -> LiteBalancer:
        if self._client is None:
            raise RuntimeError("Client is not started, use 'async with'")
        return self._client

    def create_wallet(
        self, public_key: bytes, wallet_id: int | None = None
    ) -> WalletContractV4:
        return WalletContractV4.create(
            self.chain_config.default_workchain, public_key, wallet_id
        )

    def provider(
        self, address: Address | str, init: StateInit | None = None
    ) -> LiteClientProvider:
        if isinstance(address, str):
            address = Address(address)
        return LiteClientProvider(self.client, address, init)

    def open(self, wallet: WalletContractV4) -> LiteClientProvider:
        return self.provider(wallet.address, wallet.init)
