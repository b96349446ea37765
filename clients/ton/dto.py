from dataclasses import dataclass
from decimal import Decimal

from pytoniq_core import Address, Cell, StateInit

from enums.account import AccountStatus
from enums.send_mode import SendMode


@dataclass
class ContractState:
    balance: int
    status: AccountStatus

    @property
    def is_active(self) -> bool:
        return self.status is AccountStatus.ACTIVE


@dataclass
class SenderArguments:
    to: Address | str
    value: int | str | Decimal
    bounce: bool | None = None
    init: StateInit | None = None
    body: Cell | str | None = None
    send_mode: SendMode | None = None
