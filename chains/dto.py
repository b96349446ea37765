from dataclasses import dataclass


@dataclass
class ChainConfig:
    name: str
    display_name: str
    symbol: str
    explorer: str
    is_testnet: bool
    default_workchain: int = 0
