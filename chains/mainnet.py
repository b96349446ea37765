from chains.dto import ChainConfig


mainnet = ChainConfig(
    name="mainnet",
    display_name="TON",
    symbol="TON",
    explorer="https://tonviewer.com/",
    is_testnet=False,
)
