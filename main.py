import asyncio
import logging

from chains import registery
from chains.dto import ChainConfig
from clients.ton.factory import TonClientFactory
from config import settings
from services.wallet import WalletService
from utils.utils import format_amount, from_nano

module_logger = logging.getLogger(__name__)


def format_status(chain_config: ChainConfig, address: str, balance: int, seqno: int) -> str:
    return (
        f"{address} | "
        f"{format_amount(from_nano(balance))} {chain_config.symbol} | seqno {seqno} | "
        f"{chain_config.explorer}{address}"
    )


async def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if not settings.WALLET_MNEMONIC:
        raise ValueError("WALLET_MNEMONIC not set")

    chain_config = registery.get(settings.TON_NETWORK)
    public_key, _ = WalletService.derive_keys(settings.WALLET_MNEMONIC)

    async with TonClientFactory(chain_config) as factory:
        wallet = factory.create_wallet(public_key)
        provider = factory.open(wallet)

        balance = await wallet.get_balance(provider)
        seqno = await wallet.get_seqno(provider)

    address = wallet.address.to_str(is_bounceable=False)
    module_logger.info(format_status(chain_config, address, balance, seqno))


if __name__ == "__main__":
    asyncio.run(main())
