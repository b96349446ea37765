from decimal import Decimal

from pytoniq_core import (
    Address,
    Cell,
    CurrencyCollection,
    InternalMsgInfo,
    MessageAny,
    StateInit,
    begin_cell,
)

from clients.ton.dto import SenderArguments
from utils.utils import to_nano


def comment(text: str) -> Cell:
    return begin_cell().store_uint(0, 32).store_snake_string(text).end_cell()


def internal(
    to: Address | str,
    value: int | str | Decimal,
    bounce: bool | None = None,
    init: StateInit | None = None,
    body: Cell | str | None = None,
) -> MessageAny:
    """Build a relaxed internal message.

    ``value`` is taken as nanotons when it is an int and as TON otherwise.
    A string ``body`` is sent as a text comment.
    """
    dest = to if isinstance(to, Address) else Address(to)
    amount = value if isinstance(value, int) else to_nano(value)

    if isinstance(body, str):
        body = comment(body)
    elif body is None:
        body = Cell.empty()

    info = InternalMsgInfo(
        ihr_disabled=True,
        bounce=True if bounce is None else bounce,
        bounced=False,
        src=None,
        dest=dest,
        value=CurrencyCollection(grams=amount),
        ihr_fee=0,
        fwd_fee=0,
        created_lt=0,
        created_at=0,
    )

    return MessageAny(info=info, init=init, body=body)


def internal_from_args(args: SenderArguments) -> MessageAny:
    return internal(
        to=args.to,
        value=args.value,
        bounce=args.bounce,
        init=args.init,
        body=args.body,
    )
