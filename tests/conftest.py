from typing import Any

import pytest
from nacl.signing import SigningKey
from pytoniq_core import Address, Cell

from clients.ton.base import ContractProvider
from clients.ton.dto import ContractState
from enums.account import AccountStatus


class FakeProvider(ContractProvider):
    """In-memory contract provider that records every call."""

    def __init__(
        self,
        balance: int = 0,
        status: AccountStatus = AccountStatus.UNINITIALIZED,
        seqno: int = 0,
    ):
        self.balance = balance
        self.status = status
        self.seqno = seqno
        self.calls: list[str] = []
        self.get_calls: list[tuple[str, list[Any]]] = []
        self.sent: list[Cell] = []

    async def get_state(self) -> ContractState:
        self.calls.append("get_state")
        return ContractState(balance=self.balance, status=self.status)

    async def get(self, method: str, stack: list[Any]) -> list[Any]:
        self.calls.append("get")
        self.get_calls.append((method, stack))
        if method == "seqno":
            return [self.seqno]
        raise ValueError(f"Unknown get-method {method}")

    async def external(self, message: Cell) -> None:
        self.calls.append("external")
        self.sent.append(message)


@pytest.fixture
def signing_key() -> SigningKey:
    return SigningKey(bytes(range(32)))


@pytest.fixture
def public_key(signing_key) -> bytes:
    return bytes(signing_key.verify_key)


@pytest.fixture
def secret_key(signing_key) -> bytes:
    return bytes(signing_key)


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def active_provider() -> FakeProvider:
    return FakeProvider(balance=5_000_000_000, status=AccountStatus.ACTIVE, seqno=7)


@pytest.fixture
def destination() -> Address:
    return Address((0, b"\x11" * 32))


@pytest.fixture
def frozen_provider() -> FakeProvider:
    return FakeProvider(balance=0, status=AccountStatus.FROZEN, seqno=9)
