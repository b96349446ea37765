import inspect
import time
from collections.abc import Awaitable, Callable, Sequence

from nacl.signing import SigningKey
from pytoniq_core import Cell, MessageAny, begin_cell

from config import settings
from enums.send_mode import SendMode

MAX_MESSAGES = 4
NO_EXPIRATION = 0xFFFFFFFF
SIMPLE_SEND_OP = 0

Signer = Callable[[Cell], bytes | Awaitable[bytes]]


def build_signing_message_v4(
    wallet_id: int,
    seqno: int,
    messages: Sequence[MessageAny],
    send_mode: SendMode = SendMode.PAY_GAS_SEPARATELY,
    timeout: int | None = None,
) -> Cell:
    if len(messages) > MAX_MESSAGES:
        raise ValueError(
            f"Maximum number of messages in a single transfer is {MAX_MESSAGES}"
        )

    # seqno 0 deploys the wallet; that transfer carries no expiry
    if seqno == 0:
        valid_until = NO_EXPIRATION
    elif timeout is not None:
        valid_until = timeout
    else:
        valid_until = int(time.time()) + settings.TRANSFER_TTL

    builder = (
        begin_cell()
        .store_uint(wallet_id, 32)
        .store_uint(valid_until, 32)
        .store_uint(seqno, 32)
        .store_uint(SIMPLE_SEND_OP, 8)
    )

    for message in messages:
        builder.store_uint(int(send_mode), 8)
        builder.store_ref(message.serialize())

    return builder.end_cell()


def sign(data: bytes, secret_key: bytes) -> bytes:
    return SigningKey(secret_key[:32]).sign(data).signature


def pack_signature_to_front(signature: bytes, signing_message: Cell) -> Cell:
    return begin_cell().store_bytes(signature).store_cell(signing_message).end_cell()


def create_wallet_transfer_v4(
    wallet_id: int,
    seqno: int,
    messages: Sequence[MessageAny],
    secret_key: bytes,
    send_mode: SendMode = SendMode.PAY_GAS_SEPARATELY,
    timeout: int | None = None,
) -> Cell:
    signing_message = build_signing_message_v4(
        wallet_id, seqno, messages, send_mode, timeout
    )
    signature = sign(signing_message.hash, secret_key)

    return pack_signature_to_front(signature, signing_message)


async def create_signable_wallet_transfer_v4(
    wallet_id: int,
    seqno: int,
    messages: Sequence[MessageAny],
    signer: Signer,
    send_mode: SendMode = SendMode.PAY_GAS_SEPARATELY,
    timeout: int | None = None,
) -> Cell:
    signing_message = build_signing_message_v4(
        wallet_id, seqno, messages, send_mode, timeout
    )

    signature = signer(signing_message)
    if inspect.isawaitable(signature):
        signature = await signature

    return pack_signature_to_front(signature, signing_message)
