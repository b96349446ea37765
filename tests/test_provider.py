from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from pytoniq_core import Cell, MessageAny, begin_cell

from clients.ton.dto import SenderArguments
from clients.ton.provider import LiteClientProvider
from clients.ton.wallet import WalletContractV4
from enums.account import AccountStatus


def _account(type_: str, balance: int = 0, state_init=None):
    return SimpleNamespace(
        balance=balance,
        state=SimpleNamespace(type_=type_, state_init=state_init),
    )


@pytest.fixture
def wallet(public_key) -> WalletContractV4:
    return WalletContractV4.create(0, public_key)


@pytest.fixture
def client():
    return AsyncMock()


@pytest.mark.asyncio
async def test_get_state_of_active_account(client, wallet):
    client.get_account_state.return_value = _account("active", 42, wallet.init)
    provider = LiteClientProvider(client, wallet.address, wallet.init)

    state = await provider.get_state()

    client.get_account_state.assert_awaited_once_with(wallet.address)
    assert state.balance == 42
    assert state.status is AccountStatus.ACTIVE


@pytest.mark.asyncio
async def test_get_state_of_uninitialized_account(client, wallet):
    client.get_account_state.return_value = _account("uninitialized")
    provider = LiteClientProvider(client, wallet.address)

    state = await provider.get_state()

    assert state.status is AccountStatus.UNINITIALIZED
    assert not state.is_active


@pytest.mark.asyncio
async def test_get_runs_get_method(client, wallet):
    client.run_get_method.return_value = [12]
    provider = LiteClientProvider(client, wallet.address)

    assert await provider.get("seqno", []) == [12]
    client.run_get_method.assert_awaited_once_with(wallet.address, "seqno", [])


@pytest.mark.asyncio
async def test_wallet_reads_seqno_through_lite_client(client, wallet):
    client.get_account_state.return_value = _account("active", 1, wallet.init)
    client.run_get_method.return_value = [4]
    provider = LiteClientProvider(client, wallet.address, wallet.init)

    assert await wallet.get_seqno(provider) == 4


@pytest.mark.asyncio
async def test_external_attaches_init_for_undeployed_wallet(client, wallet):
    client.get_account_state.return_value = _account("uninitialized")
    provider = LiteClientProvider(client, wallet.address, wallet.init)
    body = begin_cell().store_uint(1, 8).end_cell()

    await provider.external(body)

    boc = client.raw_send_message.await_args.args[0]
    message = MessageAny.deserialize(Cell.one_from_boc(boc).begin_parse())
    assert message.info.dest == wallet.address
    assert message.init is not None
    assert message.init.serialize().hash == wallet.init.serialize().hash
    assert message.body.hash == body.hash


@pytest.mark.asyncio
async def test_external_skips_init_for_active_wallet(client, wallet):
    client.get_account_state.return_value = _account("active", 1, wallet.init)
    provider = LiteClientProvider(client, wallet.address, wallet.init)

    await provider.external(Cell.empty())

    boc = client.raw_send_message.await_args.args[0]
    message = MessageAny.deserialize(Cell.one_from_boc(boc).begin_parse())
    assert message.init is None


@pytest.mark.asyncio
async def test_external_errors_propagate(client, wallet):
    client.raw_send_message.side_effect = ConnectionError("no liteservers")
    provider = LiteClientProvider(client, wallet.address)

    with pytest.raises(ConnectionError):
        await provider.external(Cell.empty())

    client.get_account_state.assert_not_awaited()


@pytest.mark.asyncio
async def test_sender_call_count_through_lite_client(client, wallet, secret_key, destination):
    client.get_account_state.return_value = _account("active", 10, wallet.init)
    client.run_get_method.return_value = [2]
    sender = wallet.sender(LiteClientProvider(client, wallet.address, wallet.init), secret_key)

    await sender.send(SenderArguments(to=destination, value=1))

    assert client.get_account_state.await_count == 2
    assert client.run_get_method.await_count == 1
    assert client.raw_send_message.await_count == 1


@pytest.mark.asyncio
async def test_external_without_init_skips_state_read(client, wallet):
    provider = LiteClientProvider(client, wallet.address)

    await provider.external(Cell.empty())

    client.get_account_state.assert_not_awaited()
    client.raw_send_message.assert_awaited_once()
