from cryptography.fernet import Fernet
from pytoniq_core.crypto.keys import (
    mnemonic_is_valid,
    mnemonic_new,
    mnemonic_to_private_key,
)

from clients.ton.wallet import WalletContractV4
from config import settings
from services.dto import WalletData

MNEMONIC_LENGTH = 24


class WalletService:
    _cipher: Fernet | None = None
    
    @classmethod
    def get_cipher(cls) -> Fernet:
        if cls._cipher is None:
            encryption_key = settings.WALLET_ENCRYPTION_KEY
            if not encryption_key:
                raise ValueError("WALLET_ENCRYPTION_KEY not set")
            cls._cipher = Fernet(encryption_key.encode())
        return cls._cipher
    
    @staticmethod
    def encrypt_secret_key(secret_key: bytes) -> bytes:
        cipher = WalletService.get_cipher()
        return cipher.encrypt(secret_key)

    @staticmethod
    def decrypt_secret_key(encrypted_key: bytes) -> bytes:
        cipher = WalletService.get_cipher()
        return cipher.decrypt(encrypted_key)
    
    @staticmethod
    def generate_mnemonic() -> list[str]:
        return mnemonic_new(MNEMONIC_LENGTH)

    @staticmethod
    def derive_keys(mnemonic: list[str] | str) -> tuple[bytes, bytes]:
        if isinstance(mnemonic, str):
            mnemonic = mnemonic.split()

        if len(mnemonic) != MNEMONIC_LENGTH or not mnemonic_is_valid(mnemonic):
            raise ValueError("Invalid mnemonic")

        public_key, secret_key = mnemonic_to_private_key(mnemonic)

        return public_key, secret_key

    @staticmethod
    def get_address(
        public_key: bytes, workchain: int = 0, wallet_id: int | None = None
    ) -> str:
        wallet = WalletContractV4.create(workchain, public_key, wallet_id)
        return wallet.address.to_str(is_user_friendly=True, is_bounceable=False)

    @staticmethod
    def _build_wallet_data(
        mnemonic: list[str], workchain: int, wallet_id: int | None
    ) -> WalletData:
        public_key, secret_key = WalletService.derive_keys(mnemonic)
        wallet = WalletContractV4.create(workchain, public_key, wallet_id)

        return WalletData(
            secret_key=WalletService.encrypt_secret_key(secret_key),
            public_key=public_key,
            address=wallet.address.to_str(is_user_friendly=True, is_bounceable=False),
            wallet_id=wallet.wallet_id,
            mnemonic=mnemonic,
        )

    @staticmethod
    def create_wallet(workchain: int = 0, wallet_id: int | None = None) -> WalletData:
        mnemonic = WalletService.generate_mnemonic()

        return WalletService._build_wallet_data(mnemonic, workchain, wallet_id)
    
    @staticmethod
    def import_wallet(
        mnemonic: list[str] | str, workchain: int = 0, wallet_id: int | None = None
    ) -> WalletData:
        if isinstance(mnemonic, str):
            mnemonic = mnemonic.split()

        wallet_data = WalletService._build_wallet_data(mnemonic, workchain, wallet_id)
        wallet_data.mnemonic = None

        return wallet_data
