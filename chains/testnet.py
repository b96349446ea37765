from chains.dto import ChainConfig


testnet = ChainConfig(
    name="testnet",
    display_name="TON Testnet",
    symbol="TON",
    explorer="https://testnet.tonviewer.com/",
    is_testnet=True,
)
