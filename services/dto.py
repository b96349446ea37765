from dataclasses import dataclass


@dataclass
class WalletData:
    secret_key: bytes
    public_key: bytes
    address: str
    wallet_id: int
    mnemonic: list[str] | None = None
