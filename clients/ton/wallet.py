import base64
import logging
from collections.abc import Sequence

from pytoniq_core import Address, Cell, MessageAny, StateInit, begin_cell

from clients.ton.base import ContractProvider
from clients.ton.sender import WalletSender
from clients.ton.signing import (
    Signer,
    create_signable_wallet_transfer_v4,
    create_wallet_transfer_v4,
)
from enums.send_mode import SendMode

module_logger = logging.getLogger(__name__)

WALLET_V4_CODE = (
    "te6ccgECFAEAAtQAART/APSkE/S88sgLAQIBIAIDAgFIBAUE+PKDCNcYINMf0x/THwL4I7vyZO1E0NMf0x/T//QE0VFDuvKhUVG68qIF+QFUEGT5EPKj"
    "+AAkpMjLH1JAyx9SMMv/UhD0AMntVPgPAdMHIcAAn2xRkyDXSpbTB9QC+wDoMOAhwAHjACHAAuMAAcADkTDjDQOkyMsfEssfy/8QERITAubQAdDTAyFx"
    "sJJfBOAi10nBIJJfBOAC0x8hghBwbHVnvSKCEGRzdHK9sJJfBeAD+kAwIPpEAcjKB8v/ydDtRNCBAUDXIfQEMFyBAQj0Cm+hMbOSXwfgBdM/yCWCEHBs"
    "dWe6kjgw4w0DghBkc3RyupJfBuMNBgcCASAICQB4AfoA9AQw+CdvIjBQCqEhvvLgUIIQcGx1Z4MesXCAGFAEywUmzxZY+gIZ9ADLaRfLH1Jgyz8gyYBA"
    "+wAGAIpQBIEBCPRZMO1E0IEBQNcgyAHPFvQAye1UAXKwjiOCEGRzdHKDHrFwgBhQBcsFUAPPFiP6AhPLassfyz/JgED7AJJfA+ICASAKCwBZvSQrb2om"
    "hAgKBrkPoCGEcNQICEekk30pkQzmkD6f+YN4EoAbeBAUiYcVnzGEAgFYDA0AEbjJftRNDXCx+AA9sp37UTQgQFA1yH0BDACyMoHy//J0AGBAQj0Cm+h"
    "MYAIBIA4PABmtznaiaEAga5Drhf/AABmvHfaiaEAQa5DrhY/AAG7SB/oA1NQi+QAFyMoHFcv/ydB3dIAYyMsFywIizxZQBfoCFMtrEszMyXP7AMhAFIEB"
    "CPRR8qcCAHCBAQjXGPoA0z/IVCBHgQEI9FHyp4IQbm90ZXB0gBjIywXLAlAGzxZQBPoCFMtqEssfyz/Jc/sAAgBsgQEI1xj6ANM/MFIkgQEI9Fnyp4IQ"
    "ZHN0cnB0gBjIywXLAlAFzxZQA/oCE8tqyx8Syz/Jc/sAAAr0AMntVA=="
)

DEFAULT_WALLET_ID = 698983191
PUBLIC_KEY_LENGTH = 32


class WalletContractV4:
    """Wallet v4r2 bound to a public key.

    The state init and address are derived once at construction. All
    chain access goes through the provider passed to each call.
    """

    def __init__(
        self,
        workchain: int,
        public_key: bytes,
        wallet_id: int | None = None,
    ):
        if len(public_key) != PUBLIC_KEY_LENGTH:
            raise ValueError(
                f"Public key must be {PUBLIC_KEY_LENGTH} bytes, got {len(public_key)}"
            )

        self.workchain = workchain
        self.public_key = public_key
        self.wallet_id = (
            wallet_id if wallet_id is not None else DEFAULT_WALLET_ID + workchain
        )

        code = Cell.one_from_boc(base64.b64decode(WALLET_V4_CODE))
        data = (
            begin_cell()
            .store_uint(0, 32)  # seqno
            .store_uint(self.wallet_id, 32)
            .store_bytes(self.public_key)
            .store_uint(0, 1)  # empty plugins dict
            .end_cell()
        )

        self.init = StateInit(code=code, data=data)
        self.address = Address((workchain, self.init.serialize().hash))

    @classmethod
    def create(
        cls,
        workchain: int,
        public_key: bytes,
        wallet_id: int | None = None,
    ) -> "WalletContractV4":
        return cls(workchain, public_key, wallet_id)

    def __repr__(self) -> str:
        return (
            f"WalletContractV4(address={self.address.to_str()}, "
            f"wallet_id={self.wallet_id})"
        )

    async def get_balance(self, provider: ContractProvider) -> int:
        state = await provider.get_state()
        return state.balance

    async def get_seqno(self, provider: ContractProvider) -> int:
        state = await provider.get_state()

        if not state.is_active:
            module_logger.debug(
                f"Wallet {self.address.to_str()} is {state.status.value}, seqno is 0"
            )
            return 0

        stack = await provider.get("seqno", [])
        return int(stack[0])

    async def send(self, provider: ContractProvider, message: Cell) -> None:
        await provider.external(message)

    async def send_transfer(
        self,
        provider: ContractProvider,
        seqno: int,
        secret_key: bytes,
        messages: Sequence[MessageAny],
        send_mode: SendMode | None = None,
        timeout: int | None = None,
    ) -> None:
        transfer = self.create_transfer(
            seqno, messages, secret_key, send_mode=send_mode, timeout=timeout
        )

        module_logger.info(
            f"Sending transfer from {self.address.to_str()}: "
            f"seqno={seqno}, messages={len(messages)}"
        )
        await self.send(provider, transfer)

    def create_transfer(
        self,
        seqno: int,
        messages: Sequence[MessageAny],
        secret_key: bytes,
        send_mode: SendMode | None = None,
        timeout: int | None = None,
    ) -> Cell:
        return create_wallet_transfer_v4(
            wallet_id=self.wallet_id,
            seqno=seqno,
            messages=messages,
            secret_key=secret_key,
            send_mode=send_mode if send_mode is not None else SendMode.PAY_GAS_SEPARATELY,
            timeout=timeout,
        )

    async def create_transfer_with_signer(
        self,
        seqno: int,
        messages: Sequence[MessageAny],
        signer: Signer,
        send_mode: SendMode | None = None,
        timeout: int | None = None,
    ) -> Cell:
        """Create a transfer signed by an external signer.

        ``signer`` receives the unsigned signing-message cell and returns the
        ed25519 signature of its hash, directly or as an awaitable.
        """
        return await create_signable_wallet_transfer_v4(
            wallet_id=self.wallet_id,
            seqno=seqno,
            messages=messages,
            signer=signer,
            send_mode=send_mode if send_mode is not None else SendMode.PAY_GAS_SEPARATELY,
            timeout=timeout,
        )

    def sender(self, provider: ContractProvider, secret_key: bytes) -> WalletSender:
        return WalletSender(self, provider, secret_key)
