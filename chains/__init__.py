from chains.registery import ChainRegistry
from chains.mainnet import mainnet
from chains.testnet import testnet


registery = ChainRegistry([mainnet, testnet])
