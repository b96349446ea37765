from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    TON_NETWORK: Literal["mainnet", "testnet"] = "mainnet"
    LITESERVER_TRUST_LEVEL: int = 2
    TRANSFER_TTL: int = 60
    WALLET_ENCRYPTION_KEY: str | None = None
    WALLET_MNEMONIC: str | None = None
    LOG_LEVEL: str = "INFO"


settings = Settings()
